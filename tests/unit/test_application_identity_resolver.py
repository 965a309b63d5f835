"""Unit tests for IdentityResolver.

Tests cover:
- Union of role names and permissions across roles
- Missing, unverified, inactive and deleted users are rejected uniformly
- Repository exceptions propagate
"""

from unittest.mock import AsyncMock

import pytest
from uuid_extensions import uuid7

from src.application.services import IdentityResolver
from src.core.errors import AuthenticationError
from src.core.result import Failure, Success
from src.domain.entities.role import Permission, Role
from src.domain.enums import UserStatus
from tests.conftest import RecordingLogger, make_user


def _permission(name: str) -> Permission:
    return Permission(id=uuid7(), name=name, group=name.split()[0])


@pytest.fixture
def repos():
    return AsyncMock(), AsyncMock()


@pytest.mark.unit
class TestIdentityResolverSuccess:
    async def test_flattens_roles_and_permissions(self, repos):
        user_repo, role_repo = repos
        user = make_user(name="Jane", email="jane@example.com")
        admin = Role(id=uuid7(), name="admin")
        editor = Role(id=uuid7(), name="editor")
        user_repo.find_by_id.return_value = user
        role_repo.roles_for_user.return_value = [editor, admin]
        role_repo.permissions_for_role.side_effect = lambda role_id: {
            admin.id: [_permission("user list"), _permission("user edit")],
            editor.id: [_permission("user list"), _permission("role list")],
        }[role_id]

        resolver = IdentityResolver(user_repo, role_repo, RecordingLogger())
        result = await resolver.resolve(user.id)

        assert isinstance(result, Success)
        identity = result.value
        assert identity.id == user.id
        assert identity.name == "Jane"
        assert identity.email == "jane@example.com"
        assert identity.roles == ("admin", "editor")
        assert identity.permissions == ("role list", "user edit", "user list")

    async def test_user_without_roles(self, repos):
        user_repo, role_repo = repos
        user = make_user()
        user_repo.find_by_id.return_value = user
        role_repo.roles_for_user.return_value = []

        result = await IdentityResolver(user_repo, role_repo, RecordingLogger()).resolve(
            user.id
        )

        assert isinstance(result, Success)
        assert result.value.roles == ()
        assert result.value.permissions == ()
        role_repo.permissions_for_role.assert_not_called()

    async def test_resolution_is_deterministic(self, repos):
        user_repo, role_repo = repos
        user = make_user()
        role = Role(id=uuid7(), name="admin")
        user_repo.find_by_id.return_value = user
        role_repo.roles_for_user.return_value = [role]
        role_repo.permissions_for_role.return_value = [_permission("user list")]
        resolver = IdentityResolver(user_repo, role_repo, RecordingLogger())

        first = await resolver.resolve(user.id)
        second = await resolver.resolve(user.id)

        assert first.value == second.value


@pytest.mark.unit
class TestIdentityResolverRejection:
    @pytest.mark.parametrize(
        "user_kwargs",
        [
            {"verified": False},
            {"status": UserStatus.SUSPENDED},
            {"status": UserStatus.BLOCKED},
            {"deleted": True},
        ],
    )
    async def test_non_authenticatable_user(self, repos, user_kwargs):
        user_repo, role_repo = repos
        user = make_user(**user_kwargs)
        user_repo.find_by_id.return_value = user
        logger = RecordingLogger()

        result = await IdentityResolver(user_repo, role_repo, logger).resolve(user.id)

        assert isinstance(result, Failure)
        assert isinstance(result.error, AuthenticationError)
        role_repo.roles_for_user.assert_not_called()
        assert "identity_resolution_rejected" in logger.events("info")

    async def test_missing_user(self, repos):
        user_repo, role_repo = repos
        user_repo.find_by_id.return_value = None

        result = await IdentityResolver(user_repo, role_repo, RecordingLogger()).resolve(
            uuid7()
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, AuthenticationError)

    async def test_missing_and_inactive_share_message(self, repos):
        user_repo, role_repo = repos
        resolver = IdentityResolver(user_repo, role_repo, RecordingLogger())

        user_repo.find_by_id.return_value = None
        missing = await resolver.resolve(uuid7())
        user_repo.find_by_id.return_value = make_user(status=UserStatus.INACTIVE)
        inactive = await resolver.resolve(uuid7())

        assert missing.error.message == inactive.error.message

    async def test_repository_error_propagates(self, repos):
        user_repo, role_repo = repos
        user_repo.find_by_id.side_effect = RuntimeError("database down")

        with pytest.raises(RuntimeError):
            await IdentityResolver(user_repo, role_repo, RecordingLogger()).resolve(
                uuid7()
            )
