"""Domain entity for projects delivered to client entities."""

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any

from .row_values import joined, parse_date, parse_datetime


class ProjectStatus(str, Enum):
    """Lifecycle states of a project."""

    PLANNING = "planning"
    ACTIVE = "active"
    ON_HOLD = "on_hold"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


@dataclass
class Project:
    """A project billed to a client entity.

    ``client_name`` is joined from the client entity for display.
    """

    name: str
    client_id: str
    id: str | None = None
    description: str | None = None
    scope: str | None = None
    currency: str | None = "BRL"
    start_date: date | None = None
    end_date: date | None = None
    status: str = ProjectStatus.PLANNING.value
    cost_center_id: str | None = None
    manager_id: str | None = None
    client_name: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "Project":
        return cls(
            id=row["id"],
            name=row["name"],
            client_id=row["client_id"],
            description=row.get("description"),
            scope=row.get("scope"),
            currency=row.get("currency"),
            start_date=parse_date(row.get("start_date")),
            end_date=parse_date(row.get("end_date")),
            status=row.get("status") or ProjectStatus.PLANNING.value,
            cost_center_id=row.get("cost_center_id"),
            manager_id=row.get("manager_id"),
            client_name=joined(row, "client").get("name"),
            created_at=parse_datetime(row.get("created_at")),
            updated_at=parse_datetime(row.get("updated_at")),
        )
