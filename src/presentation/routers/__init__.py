"""Routers mounted on the application.

    system: Non-versioned root and health endpoints
    api.v1: Versioned API (generated from the route registry)
"""

from src.presentation.routers.system import system_router

__all__ = ["system_router"]
