"""Common error classes used across all layers.

Error Types:
- ValidationError: Input validation failures (HTTP 422)
- NotFoundError: Referenced user/role/permission does not exist (HTTP 404)
- ConflictError: Duplicate names or emails
- AuthenticationError: Missing identity, bad credentials (HTTP 401)
- AuthorizationError: Authenticated but lacking a role or permission (HTTP 403)

Usage:
    from src.core.errors import ValidationError
    from src.core.enums import ErrorCode
    from src.core.result import Failure

    return Failure(error=ValidationError(
        code=ErrorCode.EMAIL_ALREADY_EXISTS,
        message="Email already exists",
        field="email",
    ))
"""

from dataclasses import dataclass

from src.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        field: Field name that failed validation.
    """

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Resource not found.

    Attributes:
        resource_type: Type of resource (User, Role, Permission).
        resource_id: ID of the resource that was not found.
    """

    resource_type: str
    resource_id: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ConflictError(DomainError):
    """Resource conflict (duplicate name or email).

    Attributes:
        resource_type: Type of resource in conflict.
        conflicting_field: Field that has conflict.
    """

    resource_type: str
    conflicting_field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthenticationError(DomainError):
    """Authentication failure (no identity, bad credentials, inactive user)."""

    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthorizationError(DomainError):
    """Authorization failure.

    Attributes:
        required_permission: Capability class that was missing, if any.
        required_role: Role class that was missing, if any.
    """

    required_permission: str | None = None
    required_role: str | None = None
