"""Abstract data gateway interface (port) for relation-level queries and mutations."""

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

Row = dict[str, Any]

_JOIN_PATTERN = re.compile(r"^(\w+):(\w+)\.(\w+)\((\w+(?:,\w+)*)\)$")


@dataclass(frozen=True)
class Join:
    """Embed columns of a referenced row under ``alias`` in each selected row.

    ``foreign_key`` is the column of the selected relation that points at the
    ``id`` of ``relation``. Rows whose key is null get ``row[alias] = None``.
    """

    alias: str
    relation: str
    foreign_key: str
    columns: tuple[str, ...]

    def encode(self) -> str:
        """Query-string form: ``alias:relation.foreign_key(col,col)``."""
        return f"{self.alias}:{self.relation}.{self.foreign_key}({','.join(self.columns)})"

    @classmethod
    def parse(cls, text: str) -> "Join":
        match = _JOIN_PATTERN.match(text.strip())
        if match is None:
            raise ValueError(f"Malformed join '{text}'")
        alias, relation, foreign_key, columns = match.groups()
        return cls(alias, relation, foreign_key, tuple(columns.split(",")))


def encode_filter(column: str, value: Any) -> str:
    """Query-string form of an equality filter: ``column:value``."""
    if isinstance(value, bool):
        value = "true" if value else "false"
    return f"{column}:{value}"


def parse_filter(text: str) -> tuple[str, str]:
    column, sep, value = text.partition(":")
    if not sep or not column:
        raise ValueError(f"Malformed filter '{text}'")
    return column, value


class DataGateway(ABC):
    """Port for the shared relational data client used by every manager.

    Rows are JSON-compatible dicts. Every failure raises ``GatewayError``
    (``EntityNotFoundError`` for unknown relations or records).
    """

    @abstractmethod
    async def select(
        self,
        relation: str,
        *,
        columns: tuple[str, ...] | None = None,
        joins: tuple[Join, ...] = (),
        filters: dict[str, Any] | None = None,
        order_by: str | None = None,
        descending: bool = False,
    ) -> list[Row]:
        """Rows of ``relation`` matching every equality filter, in the given order."""
        ...

    @abstractmethod
    async def insert(self, relation: str, rows: list[Row]) -> list[Row]:
        """Insert rows and return them as stored (ids and defaults filled in)."""
        ...

    @abstractmethod
    async def update(self, relation: str, patch: Row, record_id: str) -> list[Row]:
        """Apply ``patch`` to the row with ``record_id`` and return the updated row."""
        ...

    @abstractmethod
    async def delete(self, relation: str, record_id: str) -> None:
        """Delete the row with ``record_id``."""
        ...
