"""Application layer errors.

Exports:
    ApplicationError: Application layer error dataclass
    ApplicationErrorCode: Application-level error code enum
    from_domain_error: DomainError -> ApplicationError
    validation_error / not_found_error: Handler shorthands
"""

from src.application.errors.application_error import (
    ApplicationError,
    ApplicationErrorCode,
    from_domain_error,
    not_found_error,
    validation_error,
)

__all__ = [
    "ApplicationError",
    "ApplicationErrorCode",
    "from_domain_error",
    "not_found_error",
    "validation_error",
]
