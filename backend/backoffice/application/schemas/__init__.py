from .form_draft import FormDraft, as_form_value, parse_flag
from .business_entity import BusinessEntityDraft
from .entity_detail import EntityAddressDraft, EntityContactDraft
from .cost_center import CostCenterDraft
from .hourly_rate import HourlyRateDraft
from .project import ProjectDraft
from .user import UserDraft

__all__ = [
    "FormDraft",
    "as_form_value",
    "parse_flag",
    "EntityAddressDraft",
    "EntityContactDraft",
    "BusinessEntityDraft",
    "CostCenterDraft",
    "HourlyRateDraft",
    "ProjectDraft",
    "UserDraft",
]
