"""Bearer token error constants.

Used as Failure values by the token service. The authentication
dependency never shows these to clients: every token failure becomes the
same uniform 401.

Usage:
    from src.domain.errors import TokenError

    match token_service.validate_access_token(token):
        case Failure(error=TokenError.EXPIRED_TOKEN):
            ...
"""


class TokenError:
    """Token validation error constants (not exceptions)."""

    INVALID_TOKEN = "Invalid token"
    EXPIRED_TOKEN = "Token expired"
    MALFORMED_TOKEN = "Malformed token"
    MISSING_SUBJECT = "Token subject missing or malformed"
