"""SQLAlchemy ORM model for client/supplier entities."""

from sqlalchemy import Index, String
from sqlalchemy.orm import Mapped, mapped_column

from backoffice.infrastructure.database.base import Base, TimestampMixin, UUIDPrimaryKeyMixin


class BusinessEntityModel(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    """ORM model — maps to the 'entities' table."""

    __tablename__ = "entities"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    type: Mapped[str] = mapped_column(String(20), nullable=False)
    document: Mapped[str | None] = mapped_column(String(50), nullable=True)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    phone: Mapped[str | None] = mapped_column(String(50), nullable=True)
    tax_number: Mapped[str | None] = mapped_column(String(50), nullable=True)
    bank_name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    bank_account: Mapped[str | None] = mapped_column(String(100), nullable=True)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="active")
    created_by: Mapped[str | None] = mapped_column(String(36), nullable=True)

    __table_args__ = (
        Index("ix_entities_type_status", "type", "status"),
    )

    def __repr__(self) -> str:
        return f"<BusinessEntityModel(id={self.id}, name='{self.name}', type='{self.type}')>"
