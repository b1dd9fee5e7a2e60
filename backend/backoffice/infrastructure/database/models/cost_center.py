"""SQLAlchemy ORM model for cost centers."""

from sqlalchemy import ForeignKey, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from backoffice.infrastructure.database.base import Base, TimestampMixin, UUIDPrimaryKeyMixin


class CostCenterModel(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    """ORM model — maps to the 'cost_centers' table."""

    __tablename__ = "cost_centers"

    code: Mapped[str] = mapped_column(String(50), nullable=False, unique=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    parent_id: Mapped[str | None] = mapped_column(
        String(36), ForeignKey("cost_centers.id"), nullable=True
    )
    geographic_area: Mapped[str | None] = mapped_column(String(100), nullable=True)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="active")

    __table_args__ = (
        Index("ix_cost_centers_parent", "parent_id"),
    )

    def __repr__(self) -> str:
        return f"<CostCenterModel(id={self.id}, code='{self.code}')>"
