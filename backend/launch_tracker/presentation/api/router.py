"""Top-level API router — aggregates all endpoint routers."""

from fastapi import APIRouter

from launch_tracker.presentation.api.endpoints.health import router as health_router
from launch_tracker.presentation.api.endpoints.launches import router as launches_router
from launch_tracker.presentation.api.endpoints.products import router as products_router

router = APIRouter(prefix="/api")
router.include_router(health_router)
router.include_router(launches_router)
router.include_router(products_router)
