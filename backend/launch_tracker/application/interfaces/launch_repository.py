"""Abstract repository interface (port) for LaunchRecord storage."""

from abc import ABC, abstractmethod

from launch_tracker.domain.entities import LaunchRecord, Region


class LaunchRepository(ABC):
    """Port for launch record storage — append-only, implemented in the infrastructure layer."""

    @abstractmethod
    async def list_all(self) -> list[LaunchRecord]:
        """Return every record, seed records first, then in append order."""
        ...

    @abstractmethod
    async def list_by_region(self, region: Region) -> list[LaunchRecord]:
        """Return the records launched in *region*."""
        ...

    @abstractmethod
    async def list_by_base_product(
        self, base_product_name: str, region: Region | None = None
    ) -> list[LaunchRecord]:
        """Return the regional variants of one base product."""
        ...

    @abstractmethod
    async def append(self, record: LaunchRecord) -> LaunchRecord:
        """Store a new record and return it."""
        ...

    @abstractmethod
    async def count(self) -> int:
        """Number of stored records."""
        ...
