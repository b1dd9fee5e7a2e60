"""Domain entity for business entities — the clients and suppliers of the company."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any

from .row_values import parse_datetime


class EntityType(str, Enum):
    CLIENT = "client"
    SUPPLIER = "supplier"


@dataclass
class BusinessEntity:
    """A client or supplier registered in the back office."""

    name: str
    type: str = EntityType.CLIENT.value
    id: str | None = None
    document: str | None = None
    email: str | None = None
    phone: str | None = None
    tax_number: str | None = None
    bank_name: str | None = None
    bank_account: str | None = None
    status: str = "active"
    created_by: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "BusinessEntity":
        return cls(
            id=row["id"],
            name=row["name"],
            type=row["type"],
            document=row.get("document"),
            email=row.get("email"),
            phone=row.get("phone"),
            tax_number=row.get("tax_number"),
            bank_name=row.get("bank_name"),
            bank_account=row.get("bank_account"),
            status=row.get("status") or "active",
            created_by=row.get("created_by"),
            created_at=parse_datetime(row.get("created_at")),
            updated_at=parse_datetime(row.get("updated_at")),
        )
