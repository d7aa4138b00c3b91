"""Concrete repository implementation for LaunchRecord held in process memory."""

import logging
import threading
from collections.abc import Iterable

from launch_tracker.application.interfaces import LaunchRepository
from launch_tracker.domain.entities import LaunchRecord, Region

logger = logging.getLogger(__name__)


class InMemoryLaunchRepository(LaunchRepository):
    """Implements the LaunchRepository port with an append-only list.

    Seed records come first and are never replaced. Appends and reads go
    through one lock so concurrent submissions are applied one at a time.
    Contents last for the lifetime of the process.
    """

    def __init__(self, seed: Iterable[LaunchRecord] = ()):
        self._lock = threading.Lock()
        self._records: list[LaunchRecord] = list(seed)
        self._seed_count = len(self._records)

    def _snapshot(self) -> list[LaunchRecord]:
        with self._lock:
            return list(self._records)

    @property
    def seed_count(self) -> int:
        return self._seed_count

    async def list_all(self) -> list[LaunchRecord]:
        return self._snapshot()

    async def list_by_region(self, region: Region) -> list[LaunchRecord]:
        return [r for r in self._snapshot() if r.region == region]

    async def list_by_base_product(
        self, base_product_name: str, region: Region | None = None
    ) -> list[LaunchRecord]:
        return [
            r
            for r in self._snapshot()
            if r.base_product_name == base_product_name
            and (region is None or r.region == region)
        ]

    async def append(self, record: LaunchRecord) -> LaunchRecord:
        with self._lock:
            self._records.append(record)
            total = len(self._records)
        logger.debug("Appended launch '%s' (%d records in store)", record.id, total)
        return record

    async def count(self) -> int:
        with self._lock:
            return len(self._records)
