"""Pydantic DTOs (Data Transfer Objects) for the launch API.

Field names are snake_case in Python and camelCase on the wire.
"""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from launch_tracker.domain.entities import EventKind, Region


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# ── Request Schemas ──────────────────────────────────────────────────


class LaunchCreate(CamelModel):
    """Schema for submitting a launch record.

    Every field is optional here; presence and region checks happen in
    LaunchService so that failures map to the API's short error messages.
    """

    id: str | None = None
    product_name: str | None = Field(None, examples=["Analytics Pro US"])
    base_product_name: str | None = Field(None, examples=["Analytics Pro"])
    year: int | None = Field(None, strict=True, examples=[2025])
    month: int | None = Field(None, strict=True, examples=[3])
    day: int | None = Field(None, strict=True, examples=[10])
    region: str | None = Field(None, examples=["US"])
    category: str | None = Field(None, examples=["Analytics"])
    description: str | None = None
    strategy_kickoff_date: str | None = Field(None, examples=["2025-01-01"])
    market_readout_date: str | None = Field(None, examples=["2025-06-01"])


# ── Response Schemas ─────────────────────────────────────────────────


class LaunchResponse(CamelModel):
    """A launch record as returned to the client."""

    id: str
    product_name: str
    base_product_name: str
    year: int
    month: int
    day: int
    region: Region
    category: str
    description: str = ""
    strategy_kickoff_date: date
    market_readout_date: date


class LaunchListResponse(CamelModel):
    launches: list[LaunchResponse]


class LaunchCreatedResponse(CamelModel):
    message: str
    id: str


class YearGroupSchema(CamelModel):
    """Launch cards listed under one year heading."""

    label: str
    year: int
    launches: list[LaunchResponse]


class YearGroupsResponse(CamelModel):
    region: Region
    region_label: str
    groups: list[YearGroupSchema]


class TimelineEventSchema(CamelModel):
    region: Region
    event_kind: EventKind
    full_date: str


class TimelinePointSchema(CamelModel):
    """One chart point; ``timestamp`` is the stable bucket key."""

    date: str
    timestamp: int
    display_date: str
    y: int
    events: list[TimelineEventSchema]


class ProductTimelineResponse(CamelModel):
    base_product_name: str
    points: list[TimelinePointSchema]


class ProductSchema(CamelModel):
    base_product_name: str
    regions: list[Region]


class ProductListResponse(CamelModel):
    products: list[ProductSchema]
