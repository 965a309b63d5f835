"""Permission id lookup shared by the role handlers."""

from uuid import UUID

from src.application.errors import ApplicationError, not_found_error
from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.protocols import PermissionRepository


async def ensure_permissions_exist(
    permission_repo: PermissionRepository, permission_ids: list[UUID]
) -> Result[list[UUID], ApplicationError]:
    """Return the de-duplicated ids, or a 404 naming the first unknown id."""
    requested = list(dict.fromkeys(permission_ids))
    found = {p.id for p in await permission_repo.find_by_ids(requested)}
    for permission_id in requested:
        if permission_id not in found:
            return Failure(
                error=not_found_error(
                    ErrorCode.PERMISSION_NOT_FOUND, "Permission", str(permission_id)
                )
            )
    return Success(value=requested)
