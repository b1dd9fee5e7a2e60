"""Concrete DataGateway backed by SQLAlchemy async sessions.

Each call runs in its own session and transaction, so a failed mutation is
rolled back without touching work committed by earlier calls.
"""

import logging
from collections.abc import Sequence
from datetime import date, datetime
from decimal import Decimal
from typing import Any

from sqlalchemy import Boolean, Column, Date, DateTime, Float, Integer, Numeric, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from backoffice.application.interfaces import DataGateway, Join, Row
from backoffice.domain.exceptions import EntityNotFoundError, GatewayError
from backoffice.infrastructure.database.base import Base
from backoffice.infrastructure.database.models import RELATION_MODELS

logger = logging.getLogger(__name__)

_TRUE = frozenset({"true", "t", "1", "yes"})
_FALSE = frozenset({"false", "f", "0", "no"})


class SQLAlchemyDataGateway(DataGateway):
    """Implements the DataGateway port over the ORM models registered per relation."""

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        relations: dict[str, type[Base]] | None = None,
    ):
        self._session_factory = session_factory
        self._relations = relations if relations is not None else RELATION_MODELS

    # ── Mapping helpers ──────────────────────────────────────────────

    def _model(self, relation: str) -> type[Base]:
        model = self._relations.get(relation)
        if model is None:
            raise EntityNotFoundError("Relation", relation)
        return model

    @staticmethod
    def _column(model: type[Base], name: str) -> Column:
        column = model.__table__.columns.get(name)
        if column is None:
            raise GatewayError(
                f"Column '{name}' does not exist on '{model.__tablename__}'"
            )
        return column

    @staticmethod
    def _coerce(column: Column, value: Any) -> Any:
        """Convert JSON/query-string values to the column's Python type."""
        if not isinstance(value, str):
            return value
        column_type = column.type
        try:
            if isinstance(column_type, Boolean):
                lowered = value.lower()
                if lowered in _TRUE:
                    return True
                if lowered in _FALSE:
                    return False
                raise ValueError(value)
            if isinstance(column_type, DateTime):
                return datetime.fromisoformat(value)
            if isinstance(column_type, Date):
                return date.fromisoformat(value)
            if isinstance(column_type, Integer):
                return int(value)
            if isinstance(column_type, (Numeric, Float)):
                return float(value)
        except ValueError:
            raise GatewayError(f"Invalid value for '{column.name}': {value!r}") from None
        return value

    def _values(self, model: type[Base], row: Row) -> dict[str, Any]:
        return {
            name: self._coerce(self._column(model, name), value)
            for name, value in row.items()
        }

    @staticmethod
    def _to_row(instance: Base) -> Row:
        """Map ORM instance → JSON-compatible row dict."""
        row: Row = {}
        for column in instance.__table__.columns:
            value = getattr(instance, column.key)
            if isinstance(value, (datetime, date)):
                value = value.isoformat()
            elif isinstance(value, Decimal):
                value = float(value)
            row[column.name] = value
        return row

    @staticmethod
    def _describe(exc: SQLAlchemyError) -> str:
        original = getattr(exc, "orig", None)
        return str(original) if original is not None else str(exc)

    async def _commit(self, session: AsyncSession, instances: Sequence[Base]) -> list[Row]:
        """Flush, read back defaults, commit; roll back into a GatewayError on failure."""
        try:
            await session.flush()
            for instance in instances:
                await session.refresh(instance)
            rows = [self._to_row(instance) for instance in instances]
            await session.commit()
        except IntegrityError as exc:
            await session.rollback()
            raise GatewayError(self._describe(exc), status_code=409) from exc
        except SQLAlchemyError as exc:
            await session.rollback()
            raise GatewayError(self._describe(exc)) from exc
        return rows

    # ── Queries ──────────────────────────────────────────────────────

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
        model = self._model(relation)
        stmt = select(model)
        for name, value in (filters or {}).items():
            column = self._column(model, name)
            stmt = stmt.where(column == self._coerce(column, value))
        if order_by:
            column = self._column(model, order_by)
            stmt = stmt.order_by(column.desc() if descending else column.asc())
        for name in columns or ():
            self._column(model, name)

        async with self._session_factory() as session:
            try:
                result = await session.execute(stmt)
                rows = [self._to_row(instance) for instance in result.scalars().all()]
                for join in joins:
                    await self._attach(session, model, rows, join)
            except SQLAlchemyError as exc:
                raise GatewayError(self._describe(exc)) from exc

        if columns:
            keep = (*columns, *(join.alias for join in joins))
            rows = [{key: row[key] for key in keep} for row in rows]
        logger.debug("Selected %d row(s) from %s", len(rows), relation)
        return rows

    async def _attach(
        self, session: AsyncSession, model: type[Base], rows: list[Row], join: Join
    ) -> None:
        """Embed the joined columns of each referenced row under ``join.alias``."""
        target = self._model(join.relation)
        self._column(model, join.foreign_key)
        for name in join.columns:
            self._column(target, name)

        keys = {row[join.foreign_key] for row in rows if row[join.foreign_key] is not None}
        embedded: dict[str, Row] = {}
        if keys:
            result = await session.execute(
                select(target).where(target.__table__.c.id.in_(keys))
            )
            for instance in result.scalars().all():
                referenced = self._to_row(instance)
                embedded[referenced["id"]] = {name: referenced[name] for name in join.columns}

        for row in rows:
            key = row[join.foreign_key]
            row[join.alias] = embedded.get(key) if key is not None else None

    # ── Mutations ────────────────────────────────────────────────────

    async def insert(self, relation: str, rows: list[Row]) -> list[Row]:
        model = self._model(relation)
        instances = [model(**self._values(model, row)) for row in rows]
        async with self._session_factory() as session:
            session.add_all(instances)
            inserted = await self._commit(session, instances)
        logger.info("Inserted %d row(s) into %s", len(inserted), relation)
        return inserted

    async def update(self, relation: str, patch: Row, record_id: str) -> list[Row]:
        model = self._model(relation)
        values = self._values(model, patch)
        if values.get("id", record_id) != record_id:
            raise GatewayError("The id of a row cannot be changed")
        async with self._session_factory() as session:
            instance = await session.get(model, record_id)
            if instance is None:
                raise EntityNotFoundError(relation, record_id)
            for name, value in values.items():
                setattr(instance, model.__table__.columns[name].key, value)
            updated = await self._commit(session, [instance])
        logger.info("Updated %s row %s", relation, record_id)
        return updated

    async def delete(self, relation: str, record_id: str) -> None:
        model = self._model(relation)
        async with self._session_factory() as session:
            instance = await session.get(model, record_id)
            if instance is None:
                raise EntityNotFoundError(relation, record_id)
            await session.delete(instance)
            await self._commit(session, [])
        logger.info("Deleted %s row %s", relation, record_id)
