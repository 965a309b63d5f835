"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.
Used with Result types for railway-oriented programming.

Categories:
- Validation errors (INVALID_*, VALIDATION_*)
- Resource errors (*_NOT_FOUND)
- Conflict errors (*_ALREADY_EXISTS)
- Authentication errors (INVALID_CREDENTIALS, TOKEN_*, ACCOUNT_*)
- Authorization errors (ROLE_REQUIRED, PERMISSION_DENIED)
- Infrastructure errors (CACHE_UNAVAILABLE)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable).

    Error codes follow ENTITY_ACTION_REASON naming convention.
    """

    # Validation errors
    INVALID_EMAIL = "invalid_email"
    INVALID_PASSWORD = "invalid_password"
    PASSWORD_TOO_WEAK = "password_too_weak"
    PASSWORD_MISMATCH = "password_mismatch"
    VALIDATION_FAILED = "validation_failed"
    RESERVED_ROLE_NAME = "reserved_role_name"
    EMPTY_PERMISSION_LIST = "empty_permission_list"

    # Resource errors
    USER_NOT_FOUND = "user_not_found"
    ROLE_NOT_FOUND = "role_not_found"
    PERMISSION_NOT_FOUND = "permission_not_found"
    RESOURCE_NOT_FOUND = "resource_not_found"

    # Conflict errors
    EMAIL_ALREADY_EXISTS = "email_already_exists"
    EMAIL_ALREADY_VERIFIED = "email_already_verified"
    ROLE_ALREADY_EXISTS = "role_already_exists"
    PERMISSION_ALREADY_EXISTS = "permission_already_exists"

    # Authentication errors
    INVALID_CREDENTIALS = "invalid_credentials"
    TOKEN_EXPIRED = "token_expired"
    TOKEN_INVALID = "token_invalid"
    EMAIL_NOT_VERIFIED = "email_not_verified"
    ACCOUNT_INACTIVE = "account_inactive"
    AUTHENTICATION_FAILED = "authentication_failed"

    # Authorization errors
    PERMISSION_DENIED = "permission_denied"
    ROLE_REQUIRED = "role_required"
    AUTHORIZATION_FAILED = "authorization_failed"

    # Infrastructure errors
    CACHE_UNAVAILABLE = "cache_unavailable"
