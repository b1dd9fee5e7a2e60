"""V1 API router — aggregates all v1 endpoint routers."""

from fastapi import APIRouter

from backoffice.presentation.api.v1.endpoints.health import router as health_router
from backoffice.presentation.api.v1.endpoints.relations import router as relations_router

router = APIRouter(prefix="/v1")
router.include_router(health_router)
router.include_router(relations_router)
