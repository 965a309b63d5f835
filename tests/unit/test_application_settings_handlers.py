"""Unit tests for settings (users, roles, permissions) handlers.

Focus is on the rules that keep the superuser sentinel out of reach of
administration and on which identities get invalidated after a write.
"""

from unittest.mock import AsyncMock, Mock

import pytest
from uuid_extensions import uuid7

from src.application.commands.handlers.create_permissions_handler import (
    CreatePermissionsHandler,
)
from src.application.commands.handlers.create_role_handler import CreateRoleHandler
from src.application.commands.handlers.create_user_handler import CreateUserHandler
from src.application.commands.handlers.delete_permission_handler import (
    DeletePermissionHandler,
)
from src.application.commands.handlers.delete_role_handler import DeleteRoleHandler
from src.application.commands.handlers.delete_user_handler import DeleteUserHandler
from src.application.commands.handlers.update_role_handler import UpdateRoleHandler
from src.application.commands.handlers.update_user_handler import UpdateUserHandler
from src.application.commands.permission_commands import (
    CreatePermissions,
    DeletePermission,
)
from src.application.commands.role_commands import CreateRole, DeleteRole, UpdateRole
from src.application.commands.user_commands import CreateUser, DeleteUser, UpdateUser
from src.application.errors import ApplicationErrorCode
from src.application.queries.handlers.permission_query_handlers import (
    ListPermissionOptionsHandler,
)
from src.application.queries.handlers.role_query_handlers import GetRoleHandler
from src.application.queries.settings_queries import GetRole, ListPermissionOptions
from src.application.services import VerificationEmailSender
from src.core.enums import ErrorCode
from src.core.result import Failure, Success
from src.domain.entities.role import Permission, Role
from src.domain.enums import SUPERUSER_ROLE, UserStatus
from tests.conftest import FakePasswordService, RecordingLogger, make_user


def _role(name: str, permissions: list[Permission] | None = None) -> Role:
    return Role(id=uuid7(), name=name, permissions=permissions or [])


def _permission(name: str, group: str) -> Permission:
    return Permission(id=uuid7(), name=name, group=group)


@pytest.fixture
def superuser_role() -> Role:
    return _role(SUPERUSER_ROLE)


# =============================================================================
# Users
# =============================================================================


@pytest.mark.unit
class TestCreateUserHandler:
    def _handler(self, roles):
        user_repo = AsyncMock()
        user_repo.exists_by_email.return_value = False

        async def create(user, role_ids):
            user.role_ids = list(role_ids)
            return user

        user_repo.create.side_effect = create
        role_repo = AsyncMock()
        role_repo.find_by_ids.return_value = roles
        sender = AsyncMock(spec=VerificationEmailSender)
        handler = CreateUserHandler(
            user_repo, role_repo, FakePasswordService(), sender, RecordingLogger()
        )
        return handler, user_repo, sender

    async def test_unverified_user_gets_verification_email(self):
        editor = _role("editor")
        handler, user_repo, sender = self._handler([editor])

        result = await handler.handle(
            CreateUser(
                name="New", email="new@example.com", password="SecurePass123!",
                role_ids=[editor.id],
            )
        )

        assert isinstance(result, Success)
        assert result.value.role_ids == [editor.id]
        sender.send.assert_awaited_once_with(result.value)

    async def test_verified_user_gets_no_email(self):
        handler, _, sender = self._handler([])

        result = await handler.handle(
            CreateUser(
                name="New", email="new@example.com", password="SecurePass123!",
                verified=True,
            )
        )

        assert result.value.is_verified
        sender.send.assert_not_called()

    async def test_superuser_role_cannot_be_assigned(self, superuser_role):
        handler, user_repo, _ = self._handler([superuser_role])

        result = await handler.handle(
            CreateUser(
                name="New", email="new@example.com", password="SecurePass123!",
                role_ids=[superuser_role.id],
            )
        )

        assert result.error.code == ApplicationErrorCode.COMMAND_VALIDATION_FAILED
        assert result.error.domain_error.field == "role_ids"
        user_repo.create.assert_not_called()

    async def test_unknown_role_is_not_found(self):
        handler, user_repo, _ = self._handler([])

        result = await handler.handle(
            CreateUser(
                name="New", email="new@example.com", password="SecurePass123!",
                role_ids=[uuid7()],
            )
        )

        assert result.error.code == ApplicationErrorCode.NOT_FOUND
        user_repo.create.assert_not_called()


@pytest.mark.unit
class TestUpdateUserHandler:
    def _handler(self, user, roles, superuser=None):
        user_repo = AsyncMock()
        user_repo.find_by_id.return_value = user
        user_repo.exists_by_email.return_value = False
        user_repo.update.side_effect = lambda u: u
        role_repo = AsyncMock()
        role_repo.find_by_ids.return_value = roles
        role_repo.find_by_name.return_value = superuser
        identity_cache = AsyncMock()
        handler = UpdateUserHandler(user_repo, role_repo, identity_cache, RecordingLogger())
        return handler, user_repo, identity_cache

    async def test_superuser_membership_is_preserved(self, superuser_role):
        editor = _role("editor")
        user = make_user(role_ids=[superuser_role.id])
        handler, user_repo, identity_cache = self._handler(
            user, [editor], superuser_role
        )

        result = await handler.handle(
            UpdateUser(
                user_id=user.id, name="Root", email=user.email,
                status=UserStatus.ACTIVE, role_ids=[editor.id],
            )
        )

        assert isinstance(result, Success)
        user_repo.assign_roles.assert_awaited_once_with(
            user.id, [editor.id, superuser_role.id]
        )
        identity_cache.invalidate.assert_awaited_once_with(user.id)

    async def test_roles_staged_before_the_committing_update(self):
        editor = _role("editor")
        user = make_user()
        handler, user_repo, identity_cache = self._handler(user, [editor])
        manager = Mock()
        manager.attach_mock(user_repo.assign_roles, "assign_roles")
        manager.attach_mock(user_repo.update, "update")
        manager.attach_mock(identity_cache.invalidate, "invalidate")

        await handler.handle(
            UpdateUser(
                user_id=user.id, name="Editor", email=user.email,
                status=UserStatus.ACTIVE, role_ids=[editor.id],
            )
        )

        assert [c[0] for c in manager.mock_calls] == [
            "assign_roles",
            "update",
            "invalidate",
        ]

    async def test_omitted_role_ids_leave_roles_alone(self):
        user = make_user()
        handler, user_repo, _ = self._handler(user, [])

        await handler.handle(
            UpdateUser(
                user_id=user.id, name="Same", email=user.email,
                status=UserStatus.SUSPENDED,
            )
        )

        user_repo.assign_roles.assert_not_called()
        assert user_repo.update.await_args.args[0].status == UserStatus.SUSPENDED

    async def test_missing_user(self):
        handler, _, identity_cache = self._handler(None, [])

        result = await handler.handle(
            UpdateUser(
                user_id=uuid7(), name="X", email="x@example.com",
                status=UserStatus.ACTIVE,
            )
        )

        assert result.error.code == ApplicationErrorCode.NOT_FOUND
        identity_cache.invalidate.assert_not_called()


@pytest.mark.unit
class TestDeleteUserHandler:
    async def test_delete_invalidates(self):
        user_repo = AsyncMock()
        user_repo.soft_delete.return_value = True
        identity_cache = AsyncMock()
        user_id = uuid7()
        handler = DeleteUserHandler(user_repo, identity_cache, RecordingLogger())

        result = await handler.handle(DeleteUser(user_id=user_id))

        assert result == Success(value=None)
        identity_cache.invalidate.assert_awaited_once_with(user_id)

    async def test_delete_unknown(self):
        user_repo = AsyncMock()
        user_repo.soft_delete.return_value = False
        identity_cache = AsyncMock()
        handler = DeleteUserHandler(user_repo, identity_cache, RecordingLogger())

        result = await handler.handle(DeleteUser(user_id=uuid7()))

        assert result.error.domain_error.code == ErrorCode.USER_NOT_FOUND
        identity_cache.invalidate.assert_not_called()


# =============================================================================
# Roles
# =============================================================================


@pytest.mark.unit
class TestCreateRoleHandler:
    @pytest.mark.parametrize("name", ["superuser", "SuperUser"])
    async def test_reserved_name(self, name):
        role_repo = AsyncMock()
        handler = CreateRoleHandler(role_repo, AsyncMock(), RecordingLogger())

        result = await handler.handle(CreateRole(name=name))

        assert result.error.domain_error.code == ErrorCode.RESERVED_ROLE_NAME
        assert result.error.domain_error.field == "name"
        role_repo.create.assert_not_called()

    async def test_duplicate_name(self):
        role_repo = AsyncMock()
        role_repo.find_by_name.return_value = _role("editor")
        handler = CreateRoleHandler(role_repo, AsyncMock(), RecordingLogger())

        result = await handler.handle(CreateRole(name="editor"))

        assert result.error.domain_error.code == ErrorCode.ROLE_ALREADY_EXISTS

    async def test_unknown_permission(self):
        role_repo = AsyncMock()
        role_repo.find_by_name.return_value = None
        permission_repo = AsyncMock()
        permission_repo.find_by_ids.return_value = []
        handler = CreateRoleHandler(role_repo, permission_repo, RecordingLogger())

        result = await handler.handle(CreateRole(name="editor", permission_ids=[uuid7()]))

        assert result.error.code == ApplicationErrorCode.NOT_FOUND
        role_repo.create.assert_not_called()

    async def test_creates_with_deduplicated_permissions(self):
        permission = _permission("user list", "user")
        role_repo = AsyncMock()
        role_repo.find_by_name.return_value = None
        role_repo.create.return_value = _role("editor", [permission])
        permission_repo = AsyncMock()
        permission_repo.find_by_ids.return_value = [permission]
        handler = CreateRoleHandler(role_repo, permission_repo, RecordingLogger())

        result = await handler.handle(
            CreateRole(name="editor", permission_ids=[permission.id, permission.id])
        )

        assert isinstance(result, Success)
        role_repo.create.assert_awaited_once_with("editor", [permission.id])


@pytest.mark.unit
class TestUpdateRoleHandler:
    async def test_invalidates_every_holder(self):
        role = _role("editor")
        holders = [uuid7(), uuid7()]
        role_repo = AsyncMock()
        role_repo.find_by_id.return_value = role
        role_repo.find_by_name.return_value = role
        role_repo.update.return_value = role
        role_repo.holder_ids.return_value = holders
        permission_repo = AsyncMock()
        permission_repo.find_by_ids.return_value = []
        identity_cache = AsyncMock()
        handler = UpdateRoleHandler(
            role_repo, permission_repo, identity_cache, RecordingLogger()
        )

        result = await handler.handle(UpdateRole(role_id=role.id, name="editor"))

        assert isinstance(result, Success)
        role_repo.update.assert_awaited_once_with(role.id, "editor", [])
        identity_cache.invalidate_many.assert_awaited_once_with(holders)

    async def test_superuser_role_is_not_editable(self, superuser_role):
        role_repo = AsyncMock()
        role_repo.find_by_id.return_value = superuser_role
        handler = UpdateRoleHandler(
            role_repo, AsyncMock(), AsyncMock(), RecordingLogger()
        )

        result = await handler.handle(
            UpdateRole(role_id=superuser_role.id, name="root")
        )

        assert result.error.domain_error.code == ErrorCode.RESERVED_ROLE_NAME
        role_repo.update.assert_not_called()

    async def test_rename_collision(self):
        role = _role("editor")
        role_repo = AsyncMock()
        role_repo.find_by_id.return_value = role
        role_repo.find_by_name.return_value = _role("viewer")
        handler = UpdateRoleHandler(
            role_repo, AsyncMock(), AsyncMock(), RecordingLogger()
        )

        result = await handler.handle(UpdateRole(role_id=role.id, name="viewer"))

        assert result.error.domain_error.field == "name"


@pytest.mark.unit
class TestDeleteRoleHandler:
    async def test_holders_collected_before_delete(self):
        role = _role("editor")
        holders = [uuid7()]
        role_repo = AsyncMock()
        role_repo.find_by_id.return_value = role
        role_repo.holder_ids.return_value = holders
        identity_cache = AsyncMock()
        manager = Mock()
        manager.attach_mock(role_repo.holder_ids, "holder_ids")
        manager.attach_mock(role_repo.delete, "delete")
        manager.attach_mock(identity_cache.invalidate_many, "invalidate_many")
        handler = DeleteRoleHandler(role_repo, identity_cache, RecordingLogger())

        result = await handler.handle(DeleteRole(role_id=role.id))

        assert isinstance(result, Success)
        assert [c[0] for c in manager.mock_calls] == [
            "holder_ids",
            "delete",
            "invalidate_many",
        ]

    async def test_superuser_role_cannot_be_deleted(self, superuser_role):
        role_repo = AsyncMock()
        role_repo.find_by_id.return_value = superuser_role
        handler = DeleteRoleHandler(role_repo, AsyncMock(), RecordingLogger())

        result = await handler.handle(DeleteRole(role_id=superuser_role.id))

        assert result.error.code == ApplicationErrorCode.COMMAND_VALIDATION_FAILED
        role_repo.delete.assert_not_called()


@pytest.mark.unit
class TestGetRoleHandler:
    async def test_superuser_is_invisible(self, superuser_role):
        role_repo = AsyncMock()
        role_repo.find_by_id.return_value = superuser_role

        result = await GetRoleHandler(role_repo).handle(
            GetRole(role_id=superuser_role.id)
        )

        assert result.error.code == ApplicationErrorCode.NOT_FOUND


# =============================================================================
# Permissions
# =============================================================================


@pytest.mark.unit
class TestCreatePermissionsHandler:
    async def test_blank_names_rejected(self):
        permission_repo = AsyncMock()
        handler = CreatePermissionsHandler(permission_repo, RecordingLogger())

        result = await handler.handle(CreatePermissions(group="report", names=[" ", ""]))

        assert result.error.domain_error.code == ErrorCode.EMPTY_PERMISSION_LIST
        permission_repo.create_many.assert_not_called()

    async def test_existing_names_rejected(self):
        permission_repo = AsyncMock()
        permission_repo.find_by_names.return_value = [
            _permission("report view", "report")
        ]
        handler = CreatePermissionsHandler(permission_repo, RecordingLogger())

        result = await handler.handle(
            CreatePermissions(group="report", names=["report view", "report export"])
        )

        assert "report view" in result.error.message
        permission_repo.create_many.assert_not_called()

    async def test_names_normalized(self):
        permission_repo = AsyncMock()
        permission_repo.find_by_names.return_value = []
        permission_repo.create_many.return_value = []
        handler = CreatePermissionsHandler(permission_repo, RecordingLogger())

        await handler.handle(
            CreatePermissions(
                group="report", names=[" report view ", "report view", "report export"]
            )
        )

        permission_repo.create_many.assert_awaited_once_with(
            "report", ["report view", "report export"]
        )


@pytest.mark.unit
class TestDeletePermissionHandler:
    async def test_invalidates_holders(self):
        holders = [uuid7(), uuid7()]
        permission_repo = AsyncMock()
        permission_repo.holder_ids.return_value = holders
        permission_repo.delete.return_value = True
        identity_cache = AsyncMock()
        handler = DeletePermissionHandler(
            permission_repo, identity_cache, RecordingLogger()
        )

        result = await handler.handle(DeletePermission(permission_id=uuid7()))

        assert isinstance(result, Success)
        identity_cache.invalidate_many.assert_awaited_once_with(holders)

    async def test_unknown_permission(self):
        permission_repo = AsyncMock()
        permission_repo.holder_ids.return_value = []
        permission_repo.delete.return_value = False
        identity_cache = AsyncMock()
        handler = DeletePermissionHandler(
            permission_repo, identity_cache, RecordingLogger()
        )

        result = await handler.handle(DeletePermission(permission_id=uuid7()))

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.NOT_FOUND
        identity_cache.invalidate_many.assert_not_called()


@pytest.mark.unit
class TestListPermissionOptionsHandler:
    async def test_grouped_in_repository_order(self):
        permission_repo = AsyncMock()
        permission_repo.list_all.return_value = [
            _permission("role list", "role"),
            _permission("role edit", "role"),
            _permission("user list", "user"),
        ]

        result = await ListPermissionOptionsHandler(permission_repo).handle(
            ListPermissionOptions()
        )

        groups = result.value
        assert [g.group for g in groups] == ["role", "user"]
        assert [p.name for p in groups[0].permissions] == ["role list", "role edit"]
