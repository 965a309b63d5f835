"""Route generator for the API Route Registry.

Converts RouteMetadata entries into FastAPI routes at application
startup.

Functions:
    register_routes_from_registry: Generate all routes from registry
    _build_dependencies: Build FastAPI dependencies from auth policy
    _build_responses: Build OpenAPI responses dict from error specs
"""

from typing import Any

from fastapi import APIRouter, Depends

from src.presentation.routers.api.middleware.auth_dependencies import (
    get_current_identity,
    require_permissions,
    require_roles,
)
from src.presentation.routers.api.v1.errors import ProblemDetails
from src.presentation.routers.api.v1.routes.metadata import (
    AuthLevel,
    AuthPolicy,
    ErrorSpec,
    RouteMetadata,
)


def register_routes_from_registry(
    router: APIRouter,
    registry: list[RouteMetadata],
) -> None:
    """Generate FastAPI routes from registry metadata.

    Args:
        router: APIRouter to register routes on
        registry: RouteMetadata entries to convert into routes

    Example:
        >>> v1_router = APIRouter(prefix=settings.api_v1_prefix)
        >>> register_routes_from_registry(v1_router, ROUTE_REGISTRY)
    """
    for metadata in registry:
        router.add_api_route(
            path=metadata.path,
            endpoint=metadata.handler,
            methods=[metadata.method.value],
            response_model=metadata.response_model,
            status_code=metadata.status_code,
            tags=list(metadata.tags),
            summary=metadata.summary,
            description=metadata.description,
            operation_id=metadata.operation_id,
            responses=_build_responses(metadata),
            dependencies=_build_dependencies(metadata.auth_policy),
        )


def _build_dependencies(auth_policy: AuthPolicy) -> list[Any]:
    """Build FastAPI dependencies from an auth policy.

    Auth policy mapping:
        PUBLIC: no dependencies
        AUTHENTICATED: Depends(get_current_identity)
        PERMISSION: Depends(require_permissions(*names))
        ROLE: Depends(require_roles(*names))

    Route dependencies run before the endpoint's own parameters, so a
    missing identity yields 401 even when the body is invalid.
    """
    match auth_policy.level:
        case AuthLevel.PUBLIC:
            return []
        case AuthLevel.AUTHENTICATED:
            return [Depends(get_current_identity)]
        case AuthLevel.PERMISSION:
            return [Depends(require_permissions(*auth_policy.permission_names))]
        case AuthLevel.ROLE:
            return [Depends(require_roles(*auth_policy.role_names))]
        case _:
            # Unknown level: fail closed
            msg = f"Unknown auth level: {auth_policy.level}"
            raise ValueError(msg)


def _build_responses(metadata: RouteMetadata) -> dict[int | str, dict[str, Any]]:
    """Build the OpenAPI responses dict, adding 401/403 from the auth policy."""
    errors: list[ErrorSpec] = list(metadata.errors or [])
    if metadata.auth_policy.level != AuthLevel.PUBLIC:
        errors.append(ErrorSpec(status=401, description="Authentication required"))
    if metadata.auth_policy.level in (AuthLevel.PERMISSION, AuthLevel.ROLE):
        errors.append(ErrorSpec(status=403, description="Access denied"))

    return {
        error.status: {
            "description": error.description,
            "model": error.model or ProblemDetails,
        }
        for error in errors
    }
