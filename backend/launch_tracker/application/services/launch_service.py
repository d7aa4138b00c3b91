"""Application service (use case) for launch queries and submissions."""

import logging
import time
from collections.abc import Callable

from launch_tracker.application.interfaces import LaunchRepository
from launch_tracker.application.schemas.launch import LaunchCreate
from launch_tracker.application.services.timeline_builder import TimelineBuilder
from launch_tracker.domain.dates import make_date, parse_iso_date
from launch_tracker.domain.entities import (
    LaunchRecord,
    ProductSummary,
    Region,
    TimelinePoint,
    YearGroup,
)
from launch_tracker.domain.exceptions import (
    InvalidDateError,
    LaunchValidationError,
    MissingFieldsError,
)

logger = logging.getLogger(__name__)

_REQUIRED_TEXT_FIELDS = (
    "product_name",
    "base_product_name",
    "category",
    "region",
    "strategy_kickoff_date",
    "market_readout_date",
)
_REQUIRED_NUMERIC_FIELDS = ("year", "month", "day")


def _epoch_millis_now() -> int:
    return int(time.time() * 1000)


def build_launch_record(
    data: LaunchCreate, clock: Callable[[], int] = _epoch_millis_now
) -> LaunchRecord:
    """Validate submitted data and turn it into a LaunchRecord.

    Checks run in order: required fields, region, dates. Empty strings
    count as missing; the numeric date parts only need to be present.
    """
    missing = [name for name in _REQUIRED_TEXT_FIELDS if not getattr(data, name)]
    missing += [name for name in _REQUIRED_NUMERIC_FIELDS if getattr(data, name) is None]
    if missing:
        raise MissingFieldsError(missing)

    region = Region.parse(data.region)

    if not 1 <= data.month <= 12 or not 1 <= data.day <= 31:
        raise InvalidDateError(
            "launchDate", f"{data.year}-{data.month:02d}-{data.day:02d}"
        )
    try:
        make_date(data.year, data.month, data.day)
    except (ValueError, OverflowError):
        raise InvalidDateError(
            "launchDate", f"{data.year}-{data.month:02d}-{data.day:02d}"
        ) from None

    kickoff = parse_iso_date(data.strategy_kickoff_date, "strategyKickoffDate")
    readout = parse_iso_date(data.market_readout_date, "marketReadoutDate")

    record_id = data.id or (
        f"{data.base_product_name.lower()}-{region.value.lower()}-{clock()}"
    )

    return LaunchRecord(
        id=record_id,
        product_name=data.product_name,
        base_product_name=data.base_product_name,
        year=data.year,
        month=data.month,
        day=data.day,
        region=region,
        category=data.category,
        description=data.description or "",
        strategy_kickoff_date=kickoff,
        market_readout_date=readout,
    )


class LaunchService:
    """Orchestrates launch queries, submissions and timeline views. Depends on the repository port (DI)."""

    def __init__(
        self,
        repository: LaunchRepository,
        timeline_builder: TimelineBuilder | None = None,
        clock: Callable[[], int] = _epoch_millis_now,
    ):
        self._repository = repository
        self._timeline = timeline_builder or TimelineBuilder()
        self._clock = clock

    async def list_launches(self, region: str | None) -> list[LaunchRecord]:
        """Return the launches of one region (code matched case-insensitively)."""
        resolved = Region.parse(region)
        return await self._repository.list_by_region(resolved)

    async def submit_launch(self, data: LaunchCreate) -> LaunchRecord:
        """Validate and append a new launch record.

        No deduplication: submitting the same data twice stores two records.
        """
        try:
            record = build_launch_record(data, self._clock)
        except LaunchValidationError as exc:
            logger.warning("Rejected launch submission: %s", exc)
            raise
        stored = await self._repository.append(record)
        logger.info(
            "Stored launch '%s' for region %s", stored.id, stored.region.value
        )
        return stored

    async def group_launches_by_year(self, region: str | None) -> list[YearGroup]:
        launches = await self.list_launches(region)
        return self._timeline.group_by_year(launches)

    async def get_product_timeline(
        self, base_product_name: str, region: str | None = None
    ) -> list[TimelinePoint]:
        """Build the cross-region timeline for one base product.

        Passing *region* restricts the timeline to that region's records.
        """
        resolved = Region.parse(region) if region is not None else None
        records = await self._repository.list_by_base_product(
            base_product_name, resolved
        )
        return self._timeline.build(records)

    async def list_products(self) -> list[ProductSummary]:
        """Distinct base products in first-seen order with their regions."""
        products: dict[str, ProductSummary] = {}
        for record in await self._repository.list_all():
            summary = products.setdefault(
                record.base_product_name,
                ProductSummary(base_product_name=record.base_product_name),
            )
            if record.region not in summary.regions:
                summary.regions.append(record.region)
        return list(products.values())
