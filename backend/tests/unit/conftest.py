"""In-memory fake gateway for manager unit tests."""

import asyncio
from collections import defaultdict
from datetime import datetime, timedelta
from typing import Any
from uuid import uuid4

import pytest

from backoffice.application.interfaces import DataGateway, Join, Row
from backoffice.domain.exceptions import EntityNotFoundError, GatewayError


class FakeDataGateway(DataGateway):
    """Stores rows per relation in lists and records every call.

    ``fail[(operation, relation)]`` makes that call raise a GatewayError;
    ``gate`` (an asyncio.Event) holds mutations until it is set.
    """

    def __init__(self):
        self.tables: dict[str, list[Row]] = defaultdict(list)
        self.calls: list[tuple[str, str, Any]] = []
        self.fail: dict[tuple[str, str], str] = {}
        self.gate: asyncio.Event | None = None
        self._clock = datetime(2026, 1, 1, 9, 0, 0)

    def _stamp(self) -> str:
        self._clock += timedelta(seconds=1)
        return self._clock.isoformat()

    def seed(self, relation: str, *rows: Row) -> list[Row]:
        stored = []
        for row in rows:
            row = {"id": str(uuid4()), "created_at": self._stamp(), **row}
            self.tables[relation].append(row)
            stored.append(dict(row))
        return stored

    def mutations(self) -> list[tuple[str, str, Any]]:
        return [call for call in self.calls if call[0] != "select"]

    async def _enter(self, operation: str, relation: str, payload: Any = None) -> None:
        self.calls.append((operation, relation, payload))
        if operation != "select" and self.gate is not None:
            await self.gate.wait()
        message = self.fail.get((operation, relation))
        if message is not None:
            raise GatewayError(message)

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
        await self._enter("select", relation, filters)
        rows = [
            dict(row)
            for row in self.tables[relation]
            if all(row.get(k) == v for k, v in (filters or {}).items())
        ]
        if order_by:
            rows.sort(
                key=lambda r: (r.get(order_by) is None, r.get(order_by) if r.get(order_by) is not None else ""),
                reverse=descending,
            )
        for join in joins:
            targets = {r["id"]: r for r in self.tables[join.relation]}
            for row in rows:
                target = targets.get(row.get(join.foreign_key))
                row[join.alias] = {c: target.get(c) for c in join.columns} if target else None
        return rows

    async def insert(self, relation: str, rows: list[Row]) -> list[Row]:
        await self._enter("insert", relation, rows)
        return self.seed(relation, *rows)

    async def update(self, relation: str, patch: Row, record_id: str) -> list[Row]:
        await self._enter("update", relation, (record_id, patch))
        for row in self.tables[relation]:
            if row["id"] == record_id:
                row.update(patch)
                return [dict(row)]
        raise EntityNotFoundError(relation, record_id)

    async def delete(self, relation: str, record_id: str) -> None:
        await self._enter("delete", relation, record_id)
        rows = self.tables[relation]
        for index, row in enumerate(rows):
            if row["id"] == record_id:
                del rows[index]
                return
        raise EntityNotFoundError(relation, record_id)


@pytest.fixture
def fake_gateway() -> FakeDataGateway:
    return FakeDataGateway()
