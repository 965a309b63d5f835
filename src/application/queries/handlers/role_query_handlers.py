"""Role query handlers (settings/roles and select options).

The superuser sentinel is never listed and reads of it return 404, so it
stays invisible to the administration UI.
"""

from src.application.errors import ApplicationError, not_found_error
from src.application.queries.settings_queries import (
    GetRole,
    ListRoleOptions,
    ListRoles,
)
from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.entities.role import Role
from src.domain.protocols import RoleRepository
from src.domain.value_objects import Page


class ListRolesHandler:
    """Paged role listing."""

    def __init__(self, role_repo: RoleRepository) -> None:
        self._role_repo = role_repo

    async def handle(self, query: ListRoles) -> Result[Page[Role], ApplicationError]:
        return Success(value=await self._role_repo.list(query.page))


class GetRoleHandler:
    """Single role with its permissions."""

    def __init__(self, role_repo: RoleRepository) -> None:
        self._role_repo = role_repo

    async def handle(self, query: GetRole) -> Result[Role, ApplicationError]:
        role = await self._role_repo.find_by_id(query.role_id)
        if role is None or role.is_superuser:
            return Failure(
                error=not_found_error(
                    ErrorCode.ROLE_NOT_FOUND, "Role", str(query.role_id)
                )
            )
        return Success(value=role)


class ListRoleOptionsHandler:
    """Assignable roles for select inputs."""

    def __init__(self, role_repo: RoleRepository) -> None:
        self._role_repo = role_repo

    async def handle(
        self, query: ListRoleOptions
    ) -> Result[list[Role], ApplicationError]:
        return Success(value=await self._role_repo.list_excluding_superuser())
