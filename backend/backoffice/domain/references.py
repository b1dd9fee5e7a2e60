"""Valid-reference queries for self-referencing hierarchies."""

from collections import defaultdict
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TypeVar

T = TypeVar("T")


def descendant_ids(
    records: Iterable[object],
    root_id: str,
    *,
    parent_field: str = "parent_id",
    id_field: str = "id",
) -> set[str]:
    """Ids of every record below ``root_id`` in the hierarchy (transitively)."""
    children: dict[str, list[str]] = defaultdict(list)
    for record in records:
        parent = getattr(record, parent_field, None)
        if parent is not None:
            children[parent].append(getattr(record, id_field))

    found: set[str] = set()
    stack = [root_id]
    while stack:
        current = stack.pop()
        for child in children.get(current, ()):
            if child not in found and child != root_id:
                found.add(child)
                stack.append(child)
    return found


def valid_references(
    records: Iterable[T],
    excluded_id: str | None,
    *,
    parent_field: str = "parent_id",
    id_field: str = "id",
) -> tuple[T, ...]:
    """Records that ``excluded_id`` may reference as its parent.

    Excludes the record itself and all of its descendants, so choosing any
    returned record as parent can never close a cycle. With no excluded id
    (a record being created) every record is valid.
    """
    snapshot = tuple(records)
    if excluded_id is None:
        return snapshot
    blocked = descendant_ids(
        snapshot, excluded_id, parent_field=parent_field, id_field=id_field
    )
    blocked.add(excluded_id)
    return tuple(r for r in snapshot if getattr(r, id_field) not in blocked)


@dataclass(frozen=True)
class ReferenceOption:
    """One selectable entry of a foreign-key picker."""

    id: str
    label: str
