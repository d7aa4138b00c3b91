from .launch_service import LaunchService, build_launch_record
from .timeline_builder import TimelineBuilder

__all__ = [
    "LaunchService",
    "TimelineBuilder",
    "build_launch_record",
]
