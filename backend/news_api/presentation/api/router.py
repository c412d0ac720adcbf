"""Top-level API router — mounts every endpoint router under /api."""

from fastapi import APIRouter

from news_api.presentation.api.endpoints.health import router as health_router
from news_api.presentation.api.endpoints.news import router as news_router

router = APIRouter(prefix="/api")
router.include_router(health_router)
router.include_router(news_router)
