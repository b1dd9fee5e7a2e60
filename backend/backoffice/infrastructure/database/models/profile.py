"""SQLAlchemy ORM models for user profiles and role grants."""

from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from backoffice.infrastructure.database.base import Base, TimestampMixin, UUIDPrimaryKeyMixin


class ProfileModel(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    """ORM model — maps to the 'profiles' table."""

    __tablename__ = "profiles"

    first_name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    last_name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True, unique=True)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="active")
    department: Mapped[str | None] = mapped_column(String(100), nullable=True)
    company_unit: Mapped[str | None] = mapped_column(String(100), nullable=True)
    phone: Mapped[str | None] = mapped_column(String(50), nullable=True)
    language: Mapped[str | None] = mapped_column(String(10), nullable=True)
    timezone: Mapped[str | None] = mapped_column(String(50), nullable=True)
    avatar_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    last_login_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )

    def __repr__(self) -> str:
        return f"<ProfileModel(id={self.id}, email='{self.email}')>"


class UserRoleModel(UUIDPrimaryKeyMixin, Base):
    """ORM model — maps to the 'user_roles' table."""

    __tablename__ = "user_roles"

    user_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("profiles.id"), nullable=False
    )
    role: Mapped[str] = mapped_column(String(20), nullable=False)
    scope_type: Mapped[str | None] = mapped_column(String(50), nullable=True)
    scope_id: Mapped[str | None] = mapped_column(String(36), nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    granted_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )
    granted_by: Mapped[str | None] = mapped_column(String(36), nullable=True)
    expires_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )

    __table_args__ = (
        Index("ix_user_roles_user_active", "user_id", "is_active"),
    )

    def __repr__(self) -> str:
        return f"<UserRoleModel(id={self.id}, user_id={self.user_id}, role='{self.role}')>"
