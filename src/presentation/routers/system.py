"""System router for non-versioned application endpoints.

Root banner and liveness probe. Both are unauthenticated and side-effect
free so load balancers can poll them.
"""

from fastapi import APIRouter

from src.core.config import settings


system_router = APIRouter(tags=["System"])


@system_router.get("/")
async def root() -> dict[str, str]:
    """Root endpoint - application name, status and version."""
    return {
        "message": settings.app_name,
        "status": "operational",
        "version": settings.app_version,
    }


@system_router.get("/health")
async def health() -> dict[str, str]:
    """Health check endpoint for monitoring and load balancers.

    Returns:
        dict[str, str]: Health status indicator.
    """
    return {"status": "healthy"}
