"""Base Pydantic model for edit-form drafts.

A draft mirrors a record's editable fields as raw form values (strings).
Absent values are shown as ``""`` while editing and become ``None`` again in
the payload sent to the data gateway.
"""

from datetime import date, datetime
from enum import Enum
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict

from backoffice.domain.exceptions import DraftValidationError


def as_form_value(value: Any) -> str:
    """Render a record value the way an input field displays it."""
    if value is None:
        return ""
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    return str(value)


_TRUE_FLAGS = frozenset({"true", "1", "yes", "on"})


def parse_flag(value: Any) -> bool:
    """Read a checkbox form value; anything but a truthy token is False."""
    if isinstance(value, bool):
        return value
    return str(value or "").strip().lower() in _TRUE_FLAGS


class FormDraft(BaseModel):
    """In-progress, unsaved copy of a record's editable fields."""

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    required_fields: ClassVar[tuple[str, ...]] = ()

    @classmethod
    def from_record(cls, record: Any) -> "FormDraft":
        """Seed a draft with the current values of an existing record."""
        return cls(**{
            name: as_form_value(getattr(record, name, None))
            for name in cls.model_fields
        })

    def missing_required(self) -> list[str]:
        return [name for name in self.required_fields if not getattr(self, name).strip()]

    def to_payload(self) -> dict[str, Any]:
        """Build the insert/update payload for the gateway.

        Raises DraftValidationError when a required field is blank or a
        value cannot be converted.
        """
        missing = self.missing_required()
        if missing:
            raise DraftValidationError({name: "required" for name in missing})

        payload: dict[str, Any] = {}
        for name in type(self).model_fields:
            value = getattr(self, name)
            if value == "" and name not in self.required_fields:
                value = None
            payload[name] = value
        return self.convert_payload(payload)

    def convert_payload(self, payload: dict[str, Any]) -> dict[str, Any]:
        """Hook for typed conversions (numbers, flags) of the normalized payload."""
        return payload
