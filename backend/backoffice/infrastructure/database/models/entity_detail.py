"""SQLAlchemy ORM models for entity addresses and contacts."""

from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from backoffice.infrastructure.database.base import Base, UUIDPrimaryKeyMixin


class EntityAddressModel(UUIDPrimaryKeyMixin, Base):
    """ORM model — maps to the 'entity_addresses' table."""

    __tablename__ = "entity_addresses"

    entity_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("entities.id"), nullable=False
    )
    address_type: Mapped[str] = mapped_column(String(20), nullable=False)
    street: Mapped[str] = mapped_column(String(255), nullable=False)
    city: Mapped[str] = mapped_column(String(100), nullable=False)
    state: Mapped[str] = mapped_column(String(50), nullable=False)
    postal_code: Mapped[str | None] = mapped_column(String(20), nullable=True)
    country: Mapped[str] = mapped_column(String(100), nullable=False, default="Brasil")
    is_primary: Mapped[bool | None] = mapped_column(Boolean, nullable=True, default=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    __table_args__ = (
        Index("ix_entity_addresses_entity", "entity_id"),
    )

    def __repr__(self) -> str:
        return f"<EntityAddressModel(id={self.id}, entity_id={self.entity_id}, city='{self.city}')>"


class EntityContactModel(UUIDPrimaryKeyMixin, Base):
    """ORM model — maps to the 'entity_contacts' table."""

    __tablename__ = "entity_contacts"

    entity_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("entities.id"), nullable=False
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[str | None] = mapped_column(String(100), nullable=True)
    phone: Mapped[str | None] = mapped_column(String(50), nullable=True)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    is_primary: Mapped[bool | None] = mapped_column(Boolean, nullable=True, default=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    __table_args__ = (
        Index("ix_entity_contacts_entity", "entity_id"),
    )

    def __repr__(self) -> str:
        return f"<EntityContactModel(id={self.id}, entity_id={self.entity_id}, name='{self.name}')>"
