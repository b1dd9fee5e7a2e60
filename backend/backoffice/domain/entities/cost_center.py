"""Domain entity for cost centers — accounting/departmental hierarchy nodes."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any

from .row_values import joined, parse_datetime

GEOGRAPHIC_AREAS = (
    "Norte",
    "Nordeste",
    "Centro-Oeste",
    "Sudeste",
    "Sul",
    "Internacional",
)


class CostCenterStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"


@dataclass
class CostCenter:
    """A cost center, optionally nested under a parent cost center.

    ``parent_code`` and ``parent_name`` are display-only values joined from
    the parent row; they are never written back.
    """

    code: str
    name: str
    id: str | None = None
    description: str | None = None
    parent_id: str | None = None
    geographic_area: str | None = None
    status: str = CostCenterStatus.ACTIVE.value
    parent_code: str | None = None
    parent_name: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "CostCenter":
        parent = joined(row, "parent")
        return cls(
            id=row["id"],
            code=row["code"],
            name=row["name"],
            description=row.get("description"),
            parent_id=row.get("parent_id"),
            geographic_area=row.get("geographic_area"),
            status=row.get("status") or CostCenterStatus.ACTIVE.value,
            parent_code=parent.get("code"),
            parent_name=parent.get("name"),
            created_at=parse_datetime(row.get("created_at")),
            updated_at=parse_datetime(row.get("updated_at")),
        )

    @property
    def parent_label(self) -> str | None:
        """'CODE - Name' of the parent, or None for a root cost center."""
        if self.parent_code is None:
            return None
        return f"{self.parent_code} - {self.parent_name}"
