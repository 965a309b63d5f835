"""Create permissions handler (settings/permissions).

Flow:
1. Normalize names (strip, drop blanks and duplicates); at least one required
2. Reject names that already exist
3. Insert all rows in one transaction
"""

from src.application.commands.permission_commands import CreatePermissions
from src.application.errors import ApplicationError, validation_error
from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.entities.role import Permission
from src.domain.protocols import LoggerProtocol, PermissionRepository


class CreatePermissionsHandler:
    """Handler for create permissions command."""

    def __init__(
        self, permission_repo: PermissionRepository, logger: LoggerProtocol
    ) -> None:
        self._permission_repo = permission_repo
        self._logger = logger

    async def handle(
        self, cmd: CreatePermissions
    ) -> Result[list[Permission], ApplicationError]:
        # Step 1: Normalize
        names = list(dict.fromkeys(n.strip() for n in cmd.names if n.strip()))
        if not names:
            return Failure(
                error=validation_error(
                    ErrorCode.EMPTY_PERMISSION_LIST,
                    "At least one permission name is required",
                    field="names",
                )
            )

        # Step 2: Uniqueness
        existing = await self._permission_repo.find_by_names(names)
        if existing:
            taken = ", ".join(sorted(p.name for p in existing))
            return Failure(
                error=validation_error(
                    ErrorCode.PERMISSION_ALREADY_EXISTS,
                    f"Permission already exists: {taken}",
                    field="names",
                )
            )

        # Step 3: Save
        permissions = await self._permission_repo.create_many(cmd.group, names)

        self._logger.info(
            "permissions_created", group=cmd.group, count=len(permissions)
        )
        return Success(value=permissions)
