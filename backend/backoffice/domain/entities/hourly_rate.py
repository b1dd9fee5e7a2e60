"""Domain entity for hourly billing rates."""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any

from .row_values import joined, parse_date, parse_datetime

CURRENCIES = ("BRL", "USD", "EUR")


@dataclass
class HourlyRate:
    """Hourly rate of a position, optionally scoped to a single project.

    ``project_name`` is joined from the project row for display.
    """

    position: str
    rate_value: float
    valid_from: date
    id: str | None = None
    team: str | None = None
    project_id: str | None = None
    currency: str | None = "BRL"
    valid_to: date | None = None
    reimbursement_policy: str | None = None
    billing_policy: str | None = None
    project_name: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "HourlyRate":
        return cls(
            id=row["id"],
            position=row["position"],
            rate_value=float(row["rate_value"]),
            valid_from=parse_date(row["valid_from"]),
            team=row.get("team"),
            project_id=row.get("project_id"),
            currency=row.get("currency"),
            valid_to=parse_date(row.get("valid_to")),
            reimbursement_policy=row.get("reimbursement_policy"),
            billing_policy=row.get("billing_policy"),
            project_name=joined(row, "project").get("name"),
            created_at=parse_datetime(row.get("created_at")),
            updated_at=parse_datetime(row.get("updated_at")),
        )

    def is_active_on(self, day: date | None = None) -> bool:
        """True when ``day`` (default today) falls inside the validity window."""
        day = day or date.today()
        if self.valid_from > day:
            return False
        return self.valid_to is None or self.valid_to >= day
