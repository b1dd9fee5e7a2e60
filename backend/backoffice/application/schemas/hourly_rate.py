"""Edit-form draft for hourly rates."""

import math
from typing import Any, ClassVar

from backoffice.application.schemas.form_draft import FormDraft
from backoffice.domain.exceptions import DraftValidationError


class HourlyRateDraft(FormDraft):
    required_fields: ClassVar[tuple[str, ...]] = ("position", "rate_value", "valid_from")

    position: str = ""
    team: str = ""
    project_id: str = ""
    rate_value: str = ""
    currency: str = "BRL"
    valid_from: str = ""
    valid_to: str = ""
    reimbursement_policy: str = ""
    billing_policy: str = ""

    def convert_payload(self, payload: dict[str, Any]) -> dict[str, Any]:
        try:
            rate_value = float(payload["rate_value"])
        except ValueError:
            rate_value = math.nan
        if not math.isfinite(rate_value):
            raise DraftValidationError({"rate_value": "must be a number"})
        payload["rate_value"] = rate_value
        return payload
