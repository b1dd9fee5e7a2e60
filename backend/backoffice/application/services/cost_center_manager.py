"""Manager for the cost center hierarchy."""

from typing import Any

from backoffice.application.interfaces import Join, Row
from backoffice.application.schemas import CostCenterDraft
from backoffice.application.services.record_manager import RecordManager
from backoffice.domain.entities import CostCenter
from backoffice.domain.exceptions import InvalidReferenceError
from backoffice.domain.references import ReferenceOption, valid_references


class CostCenterManager(RecordManager[CostCenter, CostCenterDraft]):
    """Cost centers listed by code, searchable by name or code.

    The parent picker only offers cost centers that cannot close a cycle
    with the one being edited.
    """

    relation = "cost_centers"
    record_label = "cost center"
    draft_type = CostCenterDraft
    text_fields = ("name", "code")
    order_by = "code"
    descending = False
    joins = (Join("parent", "cost_centers", "parent_id", ("code", "name")),)

    def to_record(self, row: Row) -> CostCenter:
        return CostCenter.from_row(row)

    def parent_options(self) -> tuple[ReferenceOption, ...]:
        excluded = self.editing.id if self.editing is not None else None
        return tuple(
            ReferenceOption(cc.id, f"{cc.code} - {cc.name}")
            for cc in valid_references(self.records, excluded)
        )

    def validate_payload(self, payload: dict[str, Any]) -> None:
        parent_id = payload.get("parent_id")
        if parent_id is None:
            return
        if parent_id not in {option.id for option in self.parent_options()}:
            raise InvalidReferenceError("parent_id", parent_id)
