from .business_entity import BusinessEntity, EntityType
from .cost_center import GEOGRAPHIC_AREAS, CostCenter, CostCenterStatus
from .entity_detail import (
    ADDRESS_TYPE_LABELS,
    DEFAULT_COUNTRY,
    AddressType,
    EntityAddress,
    EntityContact,
)
from .hourly_rate import CURRENCIES, HourlyRate
from .project import Project, ProjectStatus
from .user_profile import (
    GLOBAL_SCOPE,
    ROLE_LABELS,
    AppRole,
    UserProfile,
    UserRole,
    UserStatus,
)

__all__ = [
    "BusinessEntity",
    "EntityType",
    "GEOGRAPHIC_AREAS",
    "CostCenter",
    "CostCenterStatus",
    "ADDRESS_TYPE_LABELS",
    "DEFAULT_COUNTRY",
    "AddressType",
    "EntityAddress",
    "EntityContact",
    "CURRENCIES",
    "HourlyRate",
    "Project",
    "ProjectStatus",
    "GLOBAL_SCOPE",
    "ROLE_LABELS",
    "AppRole",
    "UserProfile",
    "UserRole",
    "UserStatus",
]
