"""Edit-form draft for projects."""

from typing import ClassVar

from backoffice.application.schemas.form_draft import FormDraft


class ProjectDraft(FormDraft):
    """Project form values; ``client_id`` is chosen from the active-clients picker."""

    required_fields: ClassVar[tuple[str, ...]] = ("name", "client_id", "status")

    name: str = ""
    description: str = ""
    client_id: str = ""
    scope: str = ""
    currency: str = "BRL"
    start_date: str = ""
    end_date: str = ""
    status: str = "planning"
    cost_center_id: str = ""
    manager_id: str = ""
