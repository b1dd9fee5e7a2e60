"""Edit-form draft for client/supplier entities."""

from typing import ClassVar

from backoffice.application.schemas.form_draft import FormDraft


class BusinessEntityDraft(FormDraft):
    required_fields: ClassVar[tuple[str, ...]] = ("type", "name")

    type: str = "client"
    name: str = ""
    document: str = ""
    email: str = ""
    phone: str = ""
    tax_number: str = ""
    bank_account: str = ""
    bank_name: str = ""
