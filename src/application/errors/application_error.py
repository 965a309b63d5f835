"""Application layer error types.

Handlers return ``Failure(ApplicationError)``; the presentation layer maps
the code to an HTTP status and renders RFC 9457 Problem Details.

Exports:
    ApplicationErrorCode: Application-level error code enum
    ApplicationError: Application layer error dataclass
    from_domain_error: Wrap a DomainError with the matching code
    validation_error, not_found_error: Shorthands used by handlers
"""

from dataclasses import dataclass
from enum import Enum

from src.core.enums import ErrorCode
from src.core.errors import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from src.core.errors.domain_error import DomainError


class ApplicationErrorCode(Enum):
    """Application-level error codes.

    Examples:
        >>> error = ApplicationError(
        ...     code=ApplicationErrorCode.NOT_FOUND,
        ...     message="Role not found",
        ... )
    """

    COMMAND_VALIDATION_FAILED = "command_validation_failed"
    COMMAND_EXECUTION_FAILED = "command_execution_failed"
    QUERY_FAILED = "query_failed"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"


@dataclass(frozen=True, slots=True, kw_only=True)
class ApplicationError:
    """Application layer error.

    Attributes:
        code: Application error code (from ApplicationErrorCode enum)
        message: Human-readable error message
        domain_error: Original domain error (carries the field for
            validation failures)
        details: Additional context as key-value pairs

    Examples:
        >>> error = ApplicationError(
        ...     code=ApplicationErrorCode.COMMAND_VALIDATION_FAILED,
        ...     message="Email already exists",
        ...     domain_error=ValidationError(
        ...         code=ErrorCode.EMAIL_ALREADY_EXISTS,
        ...         message="Email already exists",
        ...         field="email",
        ...     ),
        ... )
    """

    code: ApplicationErrorCode
    message: str
    domain_error: DomainError | None = None
    details: dict[str, str] | None = None


_DOMAIN_ERROR_CODES: tuple[tuple[type[DomainError], ApplicationErrorCode], ...] = (
    (ValidationError, ApplicationErrorCode.COMMAND_VALIDATION_FAILED),
    (NotFoundError, ApplicationErrorCode.NOT_FOUND),
    (ConflictError, ApplicationErrorCode.CONFLICT),
    (AuthenticationError, ApplicationErrorCode.UNAUTHORIZED),
    (AuthorizationError, ApplicationErrorCode.FORBIDDEN),
)


def from_domain_error(error: DomainError) -> ApplicationError:
    """Wrap a domain error in the ApplicationError the presentation expects.

    Unknown DomainError subclasses map to COMMAND_EXECUTION_FAILED (500).
    """
    for error_type, code in _DOMAIN_ERROR_CODES:
        if isinstance(error, error_type):
            return ApplicationError(code=code, message=error.message, domain_error=error)
    return ApplicationError(
        code=ApplicationErrorCode.COMMAND_EXECUTION_FAILED,
        message=error.message,
        domain_error=error,
    )


def validation_error(code: ErrorCode, message: str, field: str) -> ApplicationError:
    """422 error pointing at one request field."""
    return from_domain_error(ValidationError(code=code, message=message, field=field))


def not_found_error(code: ErrorCode, resource_type: str, resource_id: str) -> ApplicationError:
    """404 error for a missing user, role or permission."""
    return from_domain_error(
        NotFoundError(
            code=code,
            message=f"{resource_type} not found",
            resource_type=resource_type,
            resource_id=resource_id,
        )
    )
