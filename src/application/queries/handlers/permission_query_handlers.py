"""Permission query handlers (settings/permissions and select options)."""

from itertools import groupby

from src.application.dtos import PermissionGroupOptions
from src.application.errors import ApplicationError, not_found_error
from src.application.queries.settings_queries import (
    GetPermission,
    ListPermissionOptions,
    ListPermissions,
)
from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.entities.role import Permission
from src.domain.protocols import PermissionRepository
from src.domain.value_objects import Page


class ListPermissionsHandler:
    """Paged permission listing."""

    def __init__(self, permission_repo: PermissionRepository) -> None:
        self._permission_repo = permission_repo

    async def handle(
        self, query: ListPermissions
    ) -> Result[Page[Permission], ApplicationError]:
        return Success(value=await self._permission_repo.list(query.page))


class GetPermissionHandler:
    """Single permission, 404 when missing."""

    def __init__(self, permission_repo: PermissionRepository) -> None:
        self._permission_repo = permission_repo

    async def handle(
        self, query: GetPermission
    ) -> Result[Permission, ApplicationError]:
        permission = await self._permission_repo.find_by_id(query.permission_id)
        if permission is None:
            return Failure(
                error=not_found_error(
                    ErrorCode.PERMISSION_NOT_FOUND,
                    "Permission",
                    str(query.permission_id),
                )
            )
        return Success(value=permission)


class ListPermissionOptionsHandler:
    """All permissions grouped by group label.

    Relies on ``list_all`` ordering by group then name.
    """

    def __init__(self, permission_repo: PermissionRepository) -> None:
        self._permission_repo = permission_repo

    async def handle(
        self, query: ListPermissionOptions
    ) -> Result[list[PermissionGroupOptions], ApplicationError]:
        permissions = await self._permission_repo.list_all()
        return Success(
            value=[
                PermissionGroupOptions(group=group, permissions=list(items))
                for group, items in groupby(permissions, key=lambda p: p.group)
            ]
        )
