"""Domain entities for console users and their role grants."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any

from .row_values import parse_datetime


class UserStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    SUSPENDED = "suspended"


class AppRole(str, Enum):
    """Roles that can be granted to a user."""

    ADMIN = "admin"
    FINANCE = "finance"
    PROJECTS = "projects"
    MANAGER = "manager"
    AUDITOR = "auditor"
    COLLABORATOR = "collaborator"


ROLE_LABELS: dict[str, str] = {
    AppRole.ADMIN.value: "Administrador",
    AppRole.FINANCE.value: "Financeiro",
    AppRole.PROJECTS.value: "Projetos",
    AppRole.MANAGER.value: "Gestor",
    AppRole.AUDITOR.value: "Auditor",
    AppRole.COLLABORATOR.value: "Colaborador",
}

GLOBAL_SCOPE = "global"


@dataclass
class UserRole:
    """A role granted to a user, optionally scoped to one record."""

    user_id: str
    role: str
    id: str | None = None
    scope_type: str | None = GLOBAL_SCOPE
    scope_id: str | None = None
    is_active: bool = True
    granted_at: datetime | None = None
    granted_by: str | None = None
    expires_at: datetime | None = None

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "UserRole":
        return cls(
            id=row.get("id"),
            user_id=row["user_id"],
            role=row["role"],
            scope_type=row.get("scope_type"),
            scope_id=row.get("scope_id"),
            is_active=bool(row.get("is_active", True)),
            granted_at=parse_datetime(row.get("granted_at")),
            granted_by=row.get("granted_by"),
            expires_at=parse_datetime(row.get("expires_at")),
        )

    @property
    def label(self) -> str:
        return ROLE_LABELS.get(self.role, self.role)


@dataclass
class UserProfile:
    """A console user profile with its active roles attached."""

    id: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    status: str = UserStatus.ACTIVE.value
    department: str | None = None
    company_unit: str | None = None
    phone: str | None = None
    last_login_at: datetime | None = None
    roles: list[UserRole] = field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_row(
        cls, row: dict[str, Any], roles: list[UserRole] | None = None
    ) -> "UserProfile":
        return cls(
            id=row["id"],
            first_name=row.get("first_name"),
            last_name=row.get("last_name"),
            email=row.get("email"),
            status=row.get("status") or UserStatus.ACTIVE.value,
            department=row.get("department"),
            company_unit=row.get("company_unit"),
            phone=row.get("phone"),
            last_login_at=parse_datetime(row.get("last_login_at")),
            roles=list(roles or []),
            created_at=parse_datetime(row.get("created_at")),
            updated_at=parse_datetime(row.get("updated_at")),
        )

    @property
    def full_name(self) -> str:
        return " ".join(p for p in (self.first_name, self.last_name) if p)
