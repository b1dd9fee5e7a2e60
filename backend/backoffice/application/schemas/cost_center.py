"""Edit-form draft for cost centers."""

from typing import ClassVar

from backoffice.application.schemas.form_draft import FormDraft


class CostCenterDraft(FormDraft):
    required_fields: ClassVar[tuple[str, ...]] = ("code", "name", "status")

    code: str = ""
    name: str = ""
    description: str = ""
    parent_id: str = ""
    geographic_area: str = ""
    status: str = "active"
