from .launch import (
    EventKind,
    LaunchRecord,
    ProductSummary,
    Region,
    REGION_LABELS,
    TimelineEvent,
    TimelinePoint,
    YearGroup,
)

__all__ = [
    "EventKind",
    "LaunchRecord",
    "ProductSummary",
    "Region",
    "REGION_LABELS",
    "TimelineEvent",
    "TimelinePoint",
    "YearGroup",
]
