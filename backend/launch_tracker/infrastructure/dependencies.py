"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator
from functools import lru_cache

from fastapi import Depends

from launch_tracker.config import get_settings
from launch_tracker.application.interfaces import LaunchRepository
from launch_tracker.application.services import LaunchService, TimelineBuilder
from launch_tracker.infrastructure.memory import (
    InMemoryLaunchRepository,
    load_seed_records,
)


@lru_cache
def get_launch_repository() -> LaunchRepository:
    """Process-wide launch store, seeded on first use."""
    settings = get_settings()
    return InMemoryLaunchRepository(seed=load_seed_records(settings.seed_data_file))


def get_timeline_builder() -> TimelineBuilder:
    return TimelineBuilder(cutoff_year=get_settings().timeline_cutoff_year)


async def get_launch_service(
    repository: LaunchRepository = Depends(get_launch_repository),
    timeline_builder: TimelineBuilder = Depends(get_timeline_builder),
) -> AsyncGenerator[LaunchService, None]:
    """Provides a LaunchService bound to the shared launch store."""
    yield LaunchService(repository, timeline_builder=timeline_builder)
