"""Generic list/filter/edit/delete manager bound to one relation.

Every back-office screen follows the same pattern: fetch the collection,
filter it client-side, open a form seeded from defaults or from a selected
record, submit exactly one insert or update, refetch. A manager holds that
state for one relation and moves through a small state machine:

    LOADING ──▶ IDLE ──▶ FORM_CREATE / FORM_EDIT ──▶ SUBMITTING ──▶ IDLE
                  │                 ▲                     │
                  │                 └──── on failure ─────┘
                  └──▶ DELETING ──▶ IDLE

Gateway failures never escape an operation; they come back as an
``OperationResult``. At most one mutation is in flight per manager.
"""

import inspect
import logging
from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable
from enum import Enum
from typing import Any, ClassVar, Generic, TypeVar

from backoffice.application.interfaces import DataGateway, Join, Row
from backoffice.application.schemas import FormDraft
from backoffice.application.services.operation_result import ErrorKind, OperationResult
from backoffice.domain.exceptions import (
    DraftValidationError,
    GatewayError,
    InvalidReferenceError,
    InvalidStateError,
)
from backoffice.domain.filtering import ALL, RecordFilter, filter_records
from backoffice.domain.references import ReferenceOption

logger = logging.getLogger(__name__)

R = TypeVar("R")
D = TypeVar("D", bound=FormDraft)

Confirm = Callable[[str], bool | Awaitable[bool]]


class ManagerState(str, Enum):
    LOADING = "loading"
    IDLE = "idle"
    FORM_CREATE = "form_create"
    FORM_EDIT = "form_edit"
    SUBMITTING = "submitting"
    DELETING = "deleting"


_FORM_STATES = (ManagerState.FORM_CREATE, ManagerState.FORM_EDIT)


class RecordManager(ABC, Generic[R, D]):
    """State holder for one list + form + delete screen."""

    relation: ClassVar[str]
    record_label: ClassVar[str]
    draft_type: ClassVar[type[FormDraft]]
    text_fields: ClassVar[tuple[str, ...]]
    status_field: ClassVar[str] = "status"
    order_by: ClassVar[str | None] = "created_at"
    descending: ClassVar[bool] = True
    joins: ClassVar[tuple[Join, ...]] = ()

    def __init__(self, gateway: DataGateway):
        self._gateway = gateway
        self._state = ManagerState.LOADING
        self._records: tuple[R, ...] = ()
        self._filter = RecordFilter(self.text_fields, self.status_field)
        self._editing: R | None = None
        self._draft: D | None = None
        self._in_flight = False

    # ── Read-only state ──────────────────────────────────────────────

    @property
    def state(self) -> ManagerState:
        return self._state

    @property
    def records(self) -> tuple[R, ...]:
        """Snapshot of the last fetch, in store order."""
        return self._records

    @property
    def visible_records(self) -> tuple[R, ...]:
        return filter_records(self._records, self._filter)

    @property
    def editing(self) -> R | None:
        return self._editing

    @property
    def draft(self) -> D | None:
        return self._draft

    @property
    def search_text(self) -> str:
        return self._filter.text

    @property
    def status_filter(self) -> str:
        return self._filter.status

    @property
    def is_busy(self) -> bool:
        """True while a submit or delete is waiting for its result."""
        return self._in_flight

    @property
    def delete_prompt(self) -> str:
        return f"Are you sure you want to delete this {self.record_label}?"

    # ── Row mapping & hooks ──────────────────────────────────────────

    @abstractmethod
    def to_record(self, row: Row) -> R:
        """Map a gateway row to the manager's record type."""
        ...

    def new_draft(self) -> D:
        """Blank draft for the create form."""
        return self.draft_type()

    @property
    def scope(self) -> dict[str, Any]:
        """Column values that bind every listed and saved row to a parent record."""
        return {}

    def validate_payload(self, payload: dict[str, Any]) -> None:
        """Raise InvalidReferenceError for foreign keys outside the allowed set."""

    async def load_references(self) -> None:
        """Fetch the secondary collections used by reference pickers."""

    async def fetch_records(self) -> tuple[R, ...]:
        rows = await self._gateway.select(
            self.relation,
            joins=self.joins,
            filters=self.scope or None,
            order_by=self.order_by,
            descending=self.descending,
        )
        return tuple(self.to_record(row) for row in rows)

    # ── Listing ──────────────────────────────────────────────────────

    async def load(self) -> OperationResult:
        """Fetch the collection and reference data, then settle in IDLE."""
        self._require({ManagerState.LOADING, ManagerState.IDLE}, "load")
        self._state = ManagerState.LOADING
        result = await self._refetch()
        await self.load_references()
        self._state = ManagerState.IDLE
        return result

    def set_search(self, text: str) -> tuple[R, ...]:
        self._filter = self._filter.with_text(text)
        return self.visible_records

    def set_status_filter(self, status: str = ALL) -> tuple[R, ...]:
        self._filter = self._filter.with_status(status)
        return self.visible_records

    async def _refetch(self) -> OperationResult:
        try:
            records = await self.fetch_records()
        except GatewayError as exc:
            logger.error("Failed to load %s: %s", self.relation, exc.message)
            self._records = ()
            return OperationResult.failure(
                ErrorKind.FETCH, f"Failed to load {self.record_label} list: {exc.message}"
            )
        self._records = records
        logger.debug("Loaded %d %s", len(records), self.relation)
        return OperationResult.success(records)

    async def _fetch_options(
        self,
        relation: str,
        label: Callable[[Row], str],
        *,
        filters: dict[str, Any] | None = None,
        order_by: str | None = "name",
    ) -> tuple[ReferenceOption, ...]:
        """Fetch a picker collection; failures are logged and yield no options."""
        try:
            rows = await self._gateway.select(relation, filters=filters, order_by=order_by)
        except GatewayError as exc:
            logger.warning("Error fetching %s options: %s", relation, exc.message)
            return ()
        return tuple(ReferenceOption(row["id"], label(row)) for row in rows)

    # ── Edit form ────────────────────────────────────────────────────

    def open_create(self) -> D:
        self._require({ManagerState.IDLE}, "open the create form")
        self._editing = None
        self._draft = self.new_draft()
        self._state = ManagerState.FORM_CREATE
        return self._draft

    def open_edit(self, record: R) -> D:
        self._require({ManagerState.IDLE}, "open the edit form")
        self._editing = record
        self._draft = self.draft_type.from_record(record)
        self._state = ManagerState.FORM_EDIT
        return self._draft

    def update_draft(self, **values: str) -> D:
        self._require(set(_FORM_STATES), "edit the draft")
        merged = {**self._draft.model_dump(), **values}
        self._draft = type(self._draft).model_validate(merged)
        return self._draft

    def cancel_form(self) -> None:
        self._require(set(_FORM_STATES), "cancel the form")
        self._reset_form()

    async def submit(self) -> OperationResult:
        """Insert or update from the draft, then refetch and close the form.

        On failure the form stays open with the draft untouched.
        """
        if self._in_flight:
            return self._busy()
        form_state = self._state
        self._require(set(_FORM_STATES), "submit")

        try:
            payload = self._draft.to_payload()
            self.validate_payload(payload)
        except (DraftValidationError, InvalidReferenceError) as exc:
            return OperationResult.failure(ErrorKind.VALIDATION, str(exc))
        payload.update(self.scope)

        self._in_flight = True
        self._state = ManagerState.SUBMITTING
        try:
            if self._editing is not None:
                rows = await self._gateway.update(
                    self.relation, payload, self._editing.id
                )
            else:
                rows = await self._gateway.insert(self.relation, [payload])
        except GatewayError as exc:
            logger.warning("Failed to save %s: %s", self.record_label, exc.message)
            self._state = form_state
            self._in_flight = False
            return OperationResult.failure(
                ErrorKind.MUTATION, f"Failed to save {self.record_label}: {exc.message}"
            )

        self._draft = None
        self._editing = None
        try:
            await self._refetch()
        finally:
            self._state = ManagerState.IDLE
            self._in_flight = False
        saved = self.to_record(rows[0]) if rows else None
        return OperationResult.success(saved)

    def _reset_form(self) -> None:
        self._draft = None
        self._editing = None
        self._state = ManagerState.IDLE

    # ── Delete action ────────────────────────────────────────────────

    async def delete(self, record_id: str, confirm: Confirm) -> OperationResult:
        """Ask ``confirm`` first; only a positive answer issues the delete.

        The manager stays reserved while the confirmation is pending, and the
        delete is abandoned as BUSY if a form was opened in the meantime.
        """
        if self._in_flight:
            return self._busy()
        self._require({ManagerState.IDLE}, "delete")

        self._in_flight = True
        try:
            decision = confirm(self.delete_prompt)
            if inspect.isawaitable(decision):
                decision = await decision
            if not decision:
                return OperationResult.failure(ErrorKind.CANCELLED, "Deletion cancelled")
            if self._state is not ManagerState.IDLE:
                return self._busy()

            self._state = ManagerState.DELETING
            try:
                await self._gateway.delete(self.relation, record_id)
            except GatewayError as exc:
                logger.warning(
                    "Failed to delete %s %s: %s", self.record_label, record_id, exc.message
                )
                return OperationResult.failure(
                    ErrorKind.MUTATION, f"Failed to delete {self.record_label}: {exc.message}"
                )
            await self._refetch()
            return OperationResult.success(record_id)
        finally:
            if self._state is ManagerState.DELETING:
                self._state = ManagerState.IDLE
            self._in_flight = False

    # ── Helpers ──────────────────────────────────────────────────────

    async def _guarded_update(
        self, record_id: str, patch: dict[str, Any], action: str
    ) -> OperationResult:
        """Single-row update outside the form, under the in-flight guard."""
        if self._in_flight:
            return self._busy()
        self._require({ManagerState.IDLE}, action)

        self._in_flight = True
        try:
            rows = await self._gateway.update(self.relation, patch, record_id)
        except GatewayError as exc:
            logger.warning("Failed to %s: %s", action, exc.message)
            return OperationResult.failure(
                ErrorKind.MUTATION, f"Failed to {action}: {exc.message}"
            )
        else:
            await self._refetch()
            return OperationResult.success(self.to_record(rows[0]) if rows else None)
        finally:
            self._in_flight = False

    def _busy(self) -> OperationResult:
        return OperationResult.failure(
            ErrorKind.BUSY, f"Another {self.record_label} operation is still in progress"
        )

    def _require(self, allowed: set[ManagerState], action: str) -> None:
        if self._state not in allowed:
            raise InvalidStateError(action, self._state.value)
