"""Validation of role ids submitted by user administration.

Every id must exist (404 otherwise) and the superuser sentinel can never
be granted through the settings API (422).
"""

from uuid import UUID

from src.application.errors import ApplicationError, not_found_error, validation_error
from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.entities.role import Role
from src.domain.protocols import RoleRepository


async def validate_assignable_roles(
    role_repo: RoleRepository, role_ids: list[UUID]
) -> Result[list[Role], ApplicationError]:
    """Load the roles for ``role_ids`` and reject unknown or reserved ones."""
    requested = list(dict.fromkeys(role_ids))
    roles = await role_repo.find_by_ids(requested)

    found = {role.id for role in roles}
    missing = [role_id for role_id in requested if role_id not in found]
    if missing:
        return Failure(
            error=not_found_error(ErrorCode.ROLE_NOT_FOUND, "Role", str(missing[0]))
        )

    if any(role.is_superuser for role in roles):
        return Failure(
            error=validation_error(
                ErrorCode.RESERVED_ROLE_NAME,
                "The superuser role cannot be assigned",
                field="role_ids",
            )
        )

    return Success(value=roles)
