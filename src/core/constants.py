"""Centralized constants for internal implementation details.

These are NOT environment-specific configuration; for those use
`src/core/config.py`.

Example:
    >>> from src.core.constants import TOKEN_BYTES, BEARER_PREFIX
    >>> token = secrets.token_hex(TOKEN_BYTES)
"""

# =============================================================================
# Token Lengths
# =============================================================================

TOKEN_BYTES: int = 32
"""Number of bytes for verification/reset tokens (32 bytes = 256 bits)."""

TOKEN_HEX_LENGTH: int = 64
"""Length of hex-encoded token string (TOKEN_BYTES * 2)."""

JWT_ALGORITHM: str = "HS256"
"""Default bearer token signing algorithm."""

MIN_SECRET_KEY_BYTES: int = 32
"""Minimum HMAC signing key length."""


# =============================================================================
# Protocol Prefixes
# =============================================================================

BEARER_PREFIX: str = "Bearer "
"""Authorization header scheme prefix."""
