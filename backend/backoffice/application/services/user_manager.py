"""User governance — profiles with their active roles, and role assignment."""

import logging
from collections import Counter, defaultdict

from backoffice.application.interfaces import DataGateway, Row
from backoffice.application.schemas import UserDraft
from backoffice.application.services.operation_result import ErrorKind, OperationResult
from backoffice.application.services.record_manager import RecordManager
from backoffice.domain.entities import (
    GLOBAL_SCOPE,
    AppRole,
    UserProfile,
    UserRole,
    UserStatus,
)
from backoffice.domain.exceptions import GatewayError

logger = logging.getLogger(__name__)


class UserManager(RecordManager[UserProfile, UserDraft]):
    """Console users, newest first, each carrying its active roles."""

    relation = "profiles"
    record_label = "user"
    draft_type = UserDraft
    text_fields = ("first_name", "last_name", "email")

    def to_record(self, row: Row) -> UserProfile:
        return UserProfile.from_row(row)

    async def fetch_records(self) -> tuple[UserProfile, ...]:
        rows = await self._gateway.select(
            self.relation, order_by=self.order_by, descending=self.descending
        )
        roles = await self._fetch_active_roles()
        return tuple(UserProfile.from_row(row, roles.get(row["id"])) for row in rows)

    async def _fetch_active_roles(self) -> dict[str, list[UserRole]]:
        """Active role grants grouped by user; a failure leaves everyone without roles."""
        try:
            rows = await self._gateway.select("user_roles", filters={"is_active": True})
        except GatewayError as exc:
            logger.warning("Error fetching user roles: %s", exc.message)
            return {}
        grouped: dict[str, list[UserRole]] = defaultdict(list)
        for row in rows:
            role = UserRole.from_row(row)
            grouped[role.user_id].append(role)
        return grouped

    async def change_status(self, user_id: str, status: str) -> OperationResult:
        try:
            UserStatus(status)
        except ValueError:
            return OperationResult.failure(ErrorKind.VALIDATION, f"Unknown user status '{status}'")
        return await self._guarded_update(user_id, {"status": status}, "update user status")

    def status_summary(self) -> dict[str, int]:
        counts = Counter(user.status for user in self.records)
        summary = {"total": len(self.records)}
        for status in UserStatus:
            summary[status.value] = counts.get(status.value, 0)
        return summary


class RoleAssignment:
    """Staged role changes for one user, persisted together by ``save()``.

    Additions become new ``user_roles`` rows; removals deactivate the
    existing grant instead of deleting it.
    """

    def __init__(self, gateway: DataGateway, user_id: str):
        self._gateway = gateway
        self.user_id = user_id
        self._current: list[UserRole] = []
        self._staged: list[UserRole] = []
        self._in_flight = False

    @property
    def roles(self) -> tuple[UserRole, ...]:
        return tuple(self._staged)

    @property
    def has_changes(self) -> bool:
        return [r.id for r in self._staged] != [r.id for r in self._current]

    async def load(self) -> OperationResult:
        try:
            rows = await self._gateway.select(
                "user_roles",
                filters={"user_id": self.user_id, "is_active": True},
                order_by="granted_at",
            )
        except GatewayError as exc:
            logger.warning("Error fetching roles of user %s: %s", self.user_id, exc.message)
            return OperationResult.failure(
                ErrorKind.FETCH, f"Failed to load roles: {exc.message}"
            )
        self._current = [UserRole.from_row(row) for row in rows]
        self._staged = list(self._current)
        return OperationResult.success(self.roles)

    def add_role(self, role: str, scope_type: str = GLOBAL_SCOPE) -> bool:
        """Stage a grant; returns False for an unknown role or one already held."""
        try:
            role = AppRole(role).value
        except ValueError:
            logger.warning("Ignoring unknown role '%s' for user %s", role, self.user_id)
            return False
        if any(r.role == role and r.scope_type == scope_type for r in self._staged):
            return False
        self._staged.append(UserRole(user_id=self.user_id, role=role, scope_type=scope_type))
        return True

    def remove_role(self, index: int) -> UserRole:
        return self._staged.pop(index)

    async def save(self) -> OperationResult:
        """Persist staged changes, then reload.

        Each write is recorded as it succeeds, so a retry after a partial
        failure only sends what is still pending.
        """
        if self._in_flight:
            return OperationResult.failure(ErrorKind.BUSY, "Role assignment is already being saved")

        staged_ids = {r.id for r in self._staged if r.id is not None}
        added = [r for r in self._staged if r.id is None]
        removed = [r for r in self._current if r.id not in staged_ids]

        self._in_flight = True
        try:
            if added:
                rows = await self._gateway.insert(
                    "user_roles",
                    [
                        {
                            "user_id": r.user_id,
                            "role": r.role,
                            "scope_type": r.scope_type,
                            "scope_id": r.scope_id,
                            "is_active": True,
                        }
                        for r in added
                    ],
                )
                for grant, row in zip(added, rows):
                    grant.id = row["id"]
                    self._current.append(grant)
            for grant in removed:
                await self._gateway.update("user_roles", {"is_active": False}, grant.id)
                self._current.remove(grant)
        except GatewayError as exc:
            logger.warning("Failed to save roles of user %s: %s", self.user_id, exc.message)
            return OperationResult.failure(
                ErrorKind.MUTATION, f"Failed to save roles: {exc.message}"
            )
        finally:
            self._in_flight = False

        logger.info(
            "Roles of user %s saved: %d granted, %d revoked",
            self.user_id, len(added), len(removed),
        )
        return await self.load()
