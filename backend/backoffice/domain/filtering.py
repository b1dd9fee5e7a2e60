"""Client-side list filtering over an immutable snapshot of records.

A record passes when the free text is a case-insensitive substring of at
least one of the designated display fields, and its status-like field equals
the selected status. ``ALL`` disables the status predicate; empty text
disables the text predicate. Fetch order is preserved.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, TypeVar

ALL = "all"

T = TypeVar("T")


@dataclass(frozen=True)
class RecordFilter:
    """Text and status predicates for one manager's listing."""

    text_fields: tuple[str, ...]
    status_field: str = "status"
    text: str = ""
    status: str = ALL

    def with_text(self, text: str) -> "RecordFilter":
        return RecordFilter(self.text_fields, self.status_field, text, self.status)

    def with_status(self, status: str) -> "RecordFilter":
        return RecordFilter(self.text_fields, self.status_field, self.text, status)

    def matches_text(self, record: Any) -> bool:
        if not self.text:
            return True
        needle = self.text.lower()
        for name in self.text_fields:
            value = getattr(record, name, None)
            if isinstance(value, str) and needle in value.lower():
                return True
        return False

    def matches_status(self, record: Any) -> bool:
        if self.status == ALL:
            return True
        return getattr(record, self.status_field, None) == self.status

    def matches(self, record: Any) -> bool:
        return self.matches_text(record) and self.matches_status(record)


def filter_records(records: Iterable[T], record_filter: RecordFilter) -> tuple[T, ...]:
    """Return the records accepted by ``record_filter``, in their original order."""
    return tuple(r for r in records if record_filter.matches(r))
