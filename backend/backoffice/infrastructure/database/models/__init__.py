from .business_entity import BusinessEntityModel
from .cost_center import CostCenterModel
from .entity_detail import EntityAddressModel, EntityContactModel
from .hourly_rate import HourlyRateModel
from .profile import ProfileModel, UserRoleModel
from .project import ProjectModel

RELATION_MODELS = {
    model.__tablename__: model
    for model in (
        BusinessEntityModel,
        CostCenterModel,
        EntityAddressModel,
        EntityContactModel,
        HourlyRateModel,
        ProfileModel,
        ProjectModel,
        UserRoleModel,
    )
}

__all__ = [
    "BusinessEntityModel",
    "CostCenterModel",
    "EntityAddressModel",
    "EntityContactModel",
    "HourlyRateModel",
    "ProfileModel",
    "ProjectModel",
    "UserRoleModel",
    "RELATION_MODELS",
]
