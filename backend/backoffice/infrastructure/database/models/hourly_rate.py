"""SQLAlchemy ORM model for hourly rates."""

from datetime import date

from sqlalchemy import Date, ForeignKey, Index, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from backoffice.infrastructure.database.base import Base, TimestampMixin, UUIDPrimaryKeyMixin


class HourlyRateModel(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    """ORM model — maps to the 'hourly_rates' table."""

    __tablename__ = "hourly_rates"

    position: Mapped[str] = mapped_column(String(255), nullable=False)
    team: Mapped[str | None] = mapped_column(String(255), nullable=True)
    project_id: Mapped[str | None] = mapped_column(
        String(36), ForeignKey("projects.id"), nullable=True
    )
    rate_value: Mapped[float] = mapped_column(
        Numeric(12, 2, asdecimal=False), nullable=False
    )
    currency: Mapped[str | None] = mapped_column(String(3), nullable=True, default="BRL")
    valid_from: Mapped[date] = mapped_column(Date, nullable=False)
    valid_to: Mapped[date | None] = mapped_column(Date, nullable=True)
    reimbursement_policy: Mapped[str | None] = mapped_column(Text, nullable=True)
    billing_policy: Mapped[str | None] = mapped_column(Text, nullable=True)

    __table_args__ = (
        Index("ix_hourly_rates_project", "project_id"),
    )

    def __repr__(self) -> str:
        return f"<HourlyRateModel(id={self.id}, position='{self.position}')>"
