"""API Route Registry package.

Modules:
    metadata: Core types (RouteMetadata, AuthPolicy, AuthLevel, ErrorSpec)
    registry: ROUTE_REGISTRY - List of all route specifications
    generator: register_routes_from_registry() - Generate FastAPI routes

Usage:
    from src.presentation.routers.api.v1.routes.registry import ROUTE_REGISTRY
    from src.presentation.routers.api.v1.routes.generator import register_routes_from_registry

    router = APIRouter(prefix=settings.api_v1_prefix)
    register_routes_from_registry(router, ROUTE_REGISTRY)
"""

from src.presentation.routers.api.v1.routes.metadata import (
    AuthLevel,
    AuthPolicy,
    ErrorSpec,
    HTTPMethod,
    RouteMetadata,
)

__all__ = [
    "AuthLevel",
    "AuthPolicy",
    "ErrorSpec",
    "HTTPMethod",
    "RouteMetadata",
]
