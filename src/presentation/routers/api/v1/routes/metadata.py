"""Route metadata types for the API Route Registry.

The registry is the single source of truth for every API route: method,
path, handler, response model and the authorization policy that becomes
the route's FastAPI dependencies.

Core types:
    RouteMetadata: Complete route specification
    HTTPMethod: HTTP method enum (GET, POST, PATCH, DELETE)
    AuthPolicy: Who may call the route (public, authenticated, permission, role)
    ErrorSpec: Error response specification for OpenAPI

Usage:
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/settings/users",
        handler=list_users,
        resource="users",
        tags=["Settings: Users"],
        summary="List users",
        response_model=UserListResponse,
        auth_policy=AuthPolicy.permissions("user list"),
    )
"""

from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import BaseModel


class HTTPMethod(str, Enum):
    """HTTP methods for API routes."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"


class AuthLevel(str, Enum):
    """Authentication levels for routes.

    Attributes:
        PUBLIC: No authentication required (registration, login)
        AUTHENTICATED: Any resolved identity
        PERMISSION: Identity must hold ALL listed permissions
        ROLE: Identity must hold ANY listed role
    """

    PUBLIC = "public"
    AUTHENTICATED = "authenticated"
    PERMISSION = "permission"
    ROLE = "role"


@dataclass(frozen=True, kw_only=True)
class AuthPolicy:
    """Authorization policy for a route.

    Superusers satisfy every PERMISSION and ROLE policy.

    Examples:
        >>> AuthPolicy(level=AuthLevel.PUBLIC)
        >>> AuthPolicy.permissions("user edit")
        >>> AuthPolicy.roles("admin")
    """

    level: AuthLevel
    permission_names: tuple[str, ...] = ()
    role_names: tuple[str, ...] = ()

    @classmethod
    def permissions(cls, *names: str) -> "AuthPolicy":
        return cls(level=AuthLevel.PERMISSION, permission_names=names)

    @classmethod
    def roles(cls, *names: str) -> "AuthPolicy":
        return cls(level=AuthLevel.ROLE, role_names=names)


@dataclass(frozen=True, kw_only=True)
class ErrorSpec:
    """Error response specification for OpenAPI documentation.

    Examples:
        >>> ErrorSpec(status=404, description="User not found")
    """

    status: int
    description: str
    model: type[BaseModel] | None = None


@dataclass(frozen=True, kw_only=True)
class RouteMetadata:
    """Complete specification for an API route.

    Identity fields:
        method, path, handler
    Grouping fields:
        resource, tags
    OpenAPI documentation:
        summary, description, operation_id
    Request/Response:
        response_model, status_code, errors
    Behavior:
        auth_policy
    """

    # Identity
    method: HTTPMethod
    path: str
    handler: Callable[..., Awaitable[Any]]

    # Grouping
    resource: str
    tags: Sequence[str]

    # OpenAPI documentation
    summary: str
    description: str | None = None
    operation_id: str | None = None

    # Request/Response
    response_model: Any = None
    status_code: int = 200
    errors: list[ErrorSpec] | None = None

    # Behavior
    auth_policy: AuthPolicy
