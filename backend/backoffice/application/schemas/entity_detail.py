"""Edit-form drafts for entity addresses and contacts.

``entity_id`` is not a form field; the scoped manager adds it to the payload.
"""

from typing import Any, ClassVar

from backoffice.application.schemas.form_draft import FormDraft, parse_flag


class EntityAddressDraft(FormDraft):
    required_fields: ClassVar[tuple[str, ...]] = (
        "address_type", "street", "city", "state", "country",
    )

    address_type: str = "commercial"
    street: str = ""
    city: str = ""
    state: str = ""
    postal_code: str = ""
    country: str = "Brasil"
    is_primary: str = "false"

    def convert_payload(self, payload: dict[str, Any]) -> dict[str, Any]:
        payload["is_primary"] = parse_flag(payload["is_primary"])
        return payload


class EntityContactDraft(FormDraft):
    required_fields: ClassVar[tuple[str, ...]] = ("name",)

    name: str = ""
    role: str = ""
    phone: str = ""
    email: str = ""
    is_primary: str = "false"

    def convert_payload(self, payload: dict[str, Any]) -> dict[str, Any]:
        payload["is_primary"] = parse_flag(payload["is_primary"])
        return payload
