from .launch import (
    LaunchCreate,
    LaunchCreatedResponse,
    LaunchListResponse,
    LaunchResponse,
    ProductListResponse,
    ProductSchema,
    ProductTimelineResponse,
    TimelineEventSchema,
    TimelinePointSchema,
    YearGroupSchema,
    YearGroupsResponse,
)

__all__ = [
    "LaunchCreate",
    "LaunchCreatedResponse",
    "LaunchListResponse",
    "LaunchResponse",
    "ProductListResponse",
    "ProductSchema",
    "ProductTimelineResponse",
    "TimelineEventSchema",
    "TimelinePointSchema",
    "YearGroupSchema",
    "YearGroupsResponse",
]
