"""Shared fixtures for unit and integration tests."""

from datetime import date

import pytest

from launch_tracker.domain.entities import LaunchRecord, Region


@pytest.fixture
def make_launch():
    """Factory for LaunchRecord entities with sensible defaults."""

    def _make(
        base_product_name: str = "Widget",
        region: Region = Region.US,
        year: int = 2025,
        month: int = 3,
        day: int = 10,
        kickoff: date = date(2025, 1, 1),
        readout: date = date(2025, 6, 1),
        record_id: str | None = None,
    ) -> LaunchRecord:
        return LaunchRecord(
            id=record_id or f"{base_product_name.lower()}-{region.value.lower()}-{year}",
            product_name=f"{base_product_name} {region.value}",
            base_product_name=base_product_name,
            year=year,
            month=month,
            day=day,
            region=region,
            category="Analytics",
            description="",
            strategy_kickoff_date=kickoff,
            market_readout_date=readout,
        )

    return _make
