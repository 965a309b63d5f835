"""API v1 routers.

All routes are generated from the Route Metadata Registry at import
time; see routes/registry.py for the complete catalog.

Resources:
    /auth                  - Registration, login, verification, password reset
    /profile               - The caller's own account
    /settings/users        - User administration
    /settings/roles        - Role administration
    /settings/permissions  - Permission administration
    /settings/select       - Select options for settings forms
"""

from fastapi import APIRouter

from src.core.config import settings
from src.presentation.routers.api.v1.routes.generator import (
    register_routes_from_registry,
)
from src.presentation.routers.api.v1.routes.registry import ROUTE_REGISTRY

v1_router = APIRouter(prefix=settings.api_v1_prefix)
register_routes_from_registry(v1_router, ROUTE_REGISTRY)

__all__ = [
    "v1_router",
]
