from .operation_result import ErrorKind, OperationResult
from .record_manager import ManagerState, RecordManager
from .business_entity_manager import BusinessEntityManager
from .entity_detail_manager import (
    EntityAddressManager,
    EntityContactManager,
    EntityDetailManager,
)
from .cost_center_manager import CostCenterManager
from .hourly_rate_manager import HourlyRateManager
from .project_manager import ProjectManager
from .user_manager import RoleAssignment, UserManager

__all__ = [
    "ErrorKind",
    "OperationResult",
    "ManagerState",
    "RecordManager",
    "BusinessEntityManager",
    "EntityAddressManager",
    "EntityContactManager",
    "EntityDetailManager",
    "CostCenterManager",
    "HourlyRateManager",
    "ProjectManager",
    "RoleAssignment",
    "UserManager",
]
