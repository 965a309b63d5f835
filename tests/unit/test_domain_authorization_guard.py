"""Unit tests for AuthorizationGuard.

Tests cover:
- Missing identity is always an authentication failure (never 403)
- Roles: ANY-of semantics
- Permissions: ALL-of semantics, first missing permission reported
- Superuser bypasses every check
- Empty requirement lists
"""

import pytest

from src.core.enums import ErrorCode
from src.core.errors import AuthenticationError, AuthorizationError
from src.core.result import Failure, Success
from src.domain.services.authorization_guard import AuthorizationGuard
from tests.conftest import make_identity


@pytest.fixture
def guard() -> AuthorizationGuard:
    return AuthorizationGuard()


@pytest.mark.unit
class TestMissingIdentity:
    """Unauthenticated callers are rejected before any policy check."""

    def test_require_identity_none(self, guard):
        result = guard.require_identity(None)

        assert isinstance(result, Failure)
        assert isinstance(result.error, AuthenticationError)
        assert result.error.code == ErrorCode.AUTHENTICATION_FAILED

    def test_roles_without_identity_is_authentication_error(self, guard):
        result = guard.require_roles(None, ["admin"])

        assert isinstance(result, Failure)
        assert isinstance(result.error, AuthenticationError)

    def test_permissions_without_identity_is_authentication_error(self, guard):
        result = guard.require_permissions(None, ["user list"])

        assert isinstance(result, Failure)
        assert isinstance(result.error, AuthenticationError)

    def test_empty_requirements_still_need_identity(self, guard):
        assert isinstance(guard.require_permissions(None, []), Failure)
        assert isinstance(guard.require_roles(None, []), Failure)


@pytest.mark.unit
class TestRequireRoles:
    """Role checks pass when ANY listed role is held."""

    def test_single_matching_role(self, guard):
        identity = make_identity(roles=["admin"])

        assert isinstance(guard.require_roles(identity, ["admin"]), Success)

    def test_any_of_semantics(self, guard):
        identity = make_identity(roles=["editor"])

        result = guard.require_roles(identity, ["admin", "editor"])

        assert isinstance(result, Success)

    def test_no_matching_role_is_forbidden(self, guard):
        identity = make_identity(roles=["viewer"])

        result = guard.require_roles(identity, ["admin", "editor"])

        assert isinstance(result, Failure)
        assert isinstance(result.error, AuthorizationError)
        assert result.error.code == ErrorCode.ROLE_REQUIRED
        assert result.error.required_role == "admin, editor"

    def test_empty_role_list_allows_any_identity(self, guard):
        assert isinstance(guard.require_roles(make_identity(), []), Success)

    def test_superuser_bypasses_role_check(self, guard):
        identity = make_identity(roles=["superuser"])

        assert isinstance(guard.require_roles(identity, ["admin"]), Success)


@pytest.mark.unit
class TestRequirePermissions:
    """Permission checks pass only when ALL listed permissions are held."""

    def test_all_permissions_held(self, guard):
        identity = make_identity(permissions=["user list", "user edit"])

        result = guard.require_permissions(identity, ["user list", "user edit"])

        assert isinstance(result, Success)

    def test_partial_permissions_is_forbidden(self, guard):
        identity = make_identity(permissions=["user list"])

        result = guard.require_permissions(identity, ["user list", "user edit"])

        assert isinstance(result, Failure)
        assert isinstance(result.error, AuthorizationError)
        assert result.error.code == ErrorCode.PERMISSION_DENIED
        assert result.error.required_permission == "user edit"
        assert "user edit" in result.error.message

    def test_denial_does_not_leak_granted_permissions(self, guard):
        identity = make_identity(permissions=["role list", "secret thing"])

        result = guard.require_permissions(identity, ["user delete"])

        assert isinstance(result, Failure)
        assert "secret thing" not in result.error.message

    def test_empty_permission_list_allows_any_identity(self, guard):
        assert isinstance(guard.require_permissions(make_identity(), []), Success)

    def test_superuser_bypasses_permission_check(self, guard):
        identity = make_identity(roles=["superuser"], permissions=[])

        result = guard.require_permissions(identity, ["user delete", "role delete"])

        assert isinstance(result, Success)

    def test_role_name_is_not_a_permission(self, guard):
        identity = make_identity(roles=["user edit"])

        result = guard.require_permissions(identity, ["user edit"])

        assert isinstance(result, Failure)

    def test_accepts_generator_of_names(self, guard):
        identity = make_identity(permissions=["user list"])

        result = guard.require_permissions(identity, (n for n in ["user list"]))

        assert isinstance(result, Success)
