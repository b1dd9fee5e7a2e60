"""Edit-form draft for user profiles."""

from typing import ClassVar

from backoffice.application.schemas.form_draft import FormDraft


class UserDraft(FormDraft):
    required_fields: ClassVar[tuple[str, ...]] = ("first_name", "last_name", "email", "status")

    first_name: str = ""
    last_name: str = ""
    email: str = ""
    department: str = ""
    company_unit: str = ""
    status: str = "active"
