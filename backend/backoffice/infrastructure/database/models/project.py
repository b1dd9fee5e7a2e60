"""SQLAlchemy ORM model for projects."""

from datetime import date

from sqlalchemy import Date, ForeignKey, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from backoffice.infrastructure.database.base import Base, TimestampMixin, UUIDPrimaryKeyMixin


class ProjectModel(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    """ORM model — maps to the 'projects' table."""

    __tablename__ = "projects"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    client_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("entities.id"), nullable=False
    )
    scope: Mapped[str | None] = mapped_column(Text, nullable=True)
    currency: Mapped[str | None] = mapped_column(String(3), nullable=True, default="BRL")
    start_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    end_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="planning")
    cost_center_id: Mapped[str | None] = mapped_column(
        String(36), ForeignKey("cost_centers.id"), nullable=True
    )
    manager_id: Mapped[str | None] = mapped_column(
        String(36), ForeignKey("profiles.id"), nullable=True
    )

    __table_args__ = (
        Index("ix_projects_client", "client_id"),
        Index("ix_projects_status", "status"),
    )

    def __repr__(self) -> str:
        return f"<ProjectModel(id={self.id}, name='{self.name}')>"
