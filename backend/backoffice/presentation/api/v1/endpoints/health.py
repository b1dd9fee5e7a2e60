"""Health check endpoint: reports version and the relations the service exposes."""

from fastapi import APIRouter

from backoffice.config import get_settings
from backoffice.infrastructure.database import RELATION_MODELS

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check() -> dict:
    """Service status; ``relations`` lists every name accepted by ``/relations``."""
    settings = get_settings()
    return {
        "status": "healthy",
        "version": settings.app_version,
        "environment": settings.app_env,
        "relations": sorted(RELATION_MODELS),
    }
