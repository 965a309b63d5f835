"""Infrastructure-specific error codes.

Internal codes for tracking which cache operation failed. They travel
alongside the domain ErrorCode on CacheError.
"""

from enum import Enum


class InfrastructureErrorCode(Enum):
    """Infrastructure-specific error codes."""

    CACHE_CONNECTION_ERROR = "cache_connection_error"
    CACHE_GET_ERROR = "cache_get_error"
    CACHE_SET_ERROR = "cache_set_error"
    CACHE_DELETE_ERROR = "cache_delete_error"
