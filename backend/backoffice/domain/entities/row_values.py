"""Conversions from JSON-compatible gateway row values to Python values."""

from datetime import date, datetime
from typing import Any


def parse_date(value: Any) -> date | None:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value)[:10])


def parse_datetime(value: Any) -> datetime | None:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    return datetime.fromisoformat(str(value))


def joined(row: dict[str, Any], alias: str) -> dict[str, Any]:
    """Return the embedded row of a join, or an empty dict when absent."""
    return row.get(alias) or {}
