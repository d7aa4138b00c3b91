"""Launch record endpoints — list by region, submit, year groups."""

from fastapi import APIRouter, Depends, Query, status

from launch_tracker.application.schemas.launch import (
    LaunchCreate,
    LaunchCreatedResponse,
    LaunchListResponse,
    LaunchResponse,
    YearGroupSchema,
    YearGroupsResponse,
)
from launch_tracker.application.services import LaunchService
from launch_tracker.domain.entities import Region
from launch_tracker.infrastructure.dependencies import get_launch_service

router = APIRouter(prefix="/launches", tags=["Launches"])


@router.get("", response_model=LaunchListResponse)
async def list_launches(
    region: str | None = Query(None, description="Region code: US, EU, CN or JP"),
    service: LaunchService = Depends(get_launch_service),
) -> LaunchListResponse:
    """Retrieve every launch recorded for one region."""
    launches = await service.list_launches(region)
    return LaunchListResponse(
        launches=[LaunchResponse.model_validate(r) for r in launches]
    )


@router.post(
    "", response_model=LaunchCreatedResponse, status_code=status.HTTP_201_CREATED
)
async def create_launch(
    data: LaunchCreate,
    service: LaunchService = Depends(get_launch_service),
) -> LaunchCreatedResponse:
    """Submit a new launch record. An id is generated when none is given."""
    record = await service.submit_launch(data)
    return LaunchCreatedResponse(message="Product added successfully", id=record.id)


@router.get("/by-year", response_model=YearGroupsResponse)
async def launches_by_year(
    region: str | None = Query(None, description="Region code: US, EU, CN or JP"),
    service: LaunchService = Depends(get_launch_service),
) -> YearGroupsResponse:
    """Launches of one region grouped under year headings, capped years last."""
    groups = await service.group_launches_by_year(region)
    resolved = Region.parse(region)
    return YearGroupsResponse(
        region=resolved,
        region_label=resolved.label,
        groups=[YearGroupSchema.model_validate(g) for g in groups],
    )
