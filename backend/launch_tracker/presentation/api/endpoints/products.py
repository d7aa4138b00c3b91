"""Product endpoints — base product list and cross-region timeline."""

from fastapi import APIRouter, Depends, Query

from launch_tracker.application.schemas.launch import (
    ProductListResponse,
    ProductSchema,
    ProductTimelineResponse,
    TimelinePointSchema,
)
from launch_tracker.application.services import LaunchService
from launch_tracker.infrastructure.dependencies import get_launch_service

router = APIRouter(prefix="/products", tags=["Products"])


@router.get("", response_model=ProductListResponse)
async def list_products(
    service: LaunchService = Depends(get_launch_service),
) -> ProductListResponse:
    products = await service.list_products()
    return ProductListResponse(
        products=[ProductSchema.model_validate(p) for p in products]
    )


@router.get("/{base_product_name}/timeline", response_model=ProductTimelineResponse)
async def product_timeline(
    base_product_name: str,
    region: str | None = Query(None, description="Restrict to one region"),
    service: LaunchService = Depends(get_launch_service),
) -> ProductTimelineResponse:
    """Kickoff, launch and readout milestones of one product, bucketed by date.

    Unknown products yield an empty point list.
    """
    points = await service.get_product_timeline(base_product_name, region)
    return ProductTimelineResponse(
        base_product_name=base_product_name,
        points=[TimelinePointSchema.model_validate(p) for p in points],
    )
