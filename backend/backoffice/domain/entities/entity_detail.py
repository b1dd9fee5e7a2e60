"""Domain entities for the addresses and contacts of a business entity."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any

from .row_values import parse_datetime


class AddressType(str, Enum):
    COMMERCIAL = "commercial"
    RESIDENTIAL = "residential"
    BILLING = "billing"
    SHIPPING = "shipping"


ADDRESS_TYPE_LABELS: dict[str, str] = {
    AddressType.COMMERCIAL.value: "Comercial",
    AddressType.RESIDENTIAL.value: "Residencial",
    AddressType.BILLING.value: "Cobrança",
    AddressType.SHIPPING.value: "Entrega",
}

DEFAULT_COUNTRY = "Brasil"


@dataclass
class EntityAddress:
    """A postal address of a client or supplier."""

    entity_id: str
    street: str
    city: str
    state: str
    address_type: str = AddressType.COMMERCIAL.value
    country: str = DEFAULT_COUNTRY
    id: str | None = None
    postal_code: str | None = None
    is_primary: bool = False
    created_at: datetime | None = None

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "EntityAddress":
        return cls(
            id=row["id"],
            entity_id=row["entity_id"],
            street=row["street"],
            city=row["city"],
            state=row["state"],
            address_type=row.get("address_type") or AddressType.COMMERCIAL.value,
            country=row.get("country") or DEFAULT_COUNTRY,
            postal_code=row.get("postal_code"),
            is_primary=bool(row.get("is_primary")),
            created_at=parse_datetime(row.get("created_at")),
        )

    @property
    def type_label(self) -> str:
        return ADDRESS_TYPE_LABELS.get(self.address_type, self.address_type)

    @property
    def one_line(self) -> str:
        """'street, city - state[, postal code]' as shown in the address list."""
        text = f"{self.street}, {self.city} - {self.state}"
        return f"{text}, {self.postal_code}" if self.postal_code else text


@dataclass
class EntityContact:
    """A person to reach at a client or supplier."""

    entity_id: str
    name: str
    id: str | None = None
    role: str | None = None
    phone: str | None = None
    email: str | None = None
    is_primary: bool = False
    created_at: datetime | None = None

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "EntityContact":
        return cls(
            id=row["id"],
            entity_id=row["entity_id"],
            name=row["name"],
            role=row.get("role"),
            phone=row.get("phone"),
            email=row.get("email"),
            is_primary=bool(row.get("is_primary")),
            created_at=parse_datetime(row.get("created_at")),
        )
