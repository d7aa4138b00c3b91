"""Timeline builder — buckets launch milestones into chart points.

For one base product every regional record contributes three milestones
(strategy kickoff, launch, market readout). Milestones sharing a calendar
day share a point; everything in or after the cutoff year collapses into
a single ``"{cutoff}+"`` point.
"""

import logging
from collections.abc import Iterable
from datetime import date

from launch_tracker.domain.dates import (
    epoch_millis,
    long_label,
    make_date,
    short_label,
)
from launch_tracker.domain.entities import (
    EventKind,
    LaunchRecord,
    TimelineEvent,
    TimelinePoint,
    YearGroup,
)

logger = logging.getLogger(__name__)

DEFAULT_CUTOFF_YEAR = 2030

# All points sit on the same chart baseline
BASELINE_Y = 1


class TimelineBuilder:
    """Builds the ordered timeline points for a set of launch records."""

    def __init__(self, cutoff_year: int = DEFAULT_CUTOFF_YEAR):
        self._cutoff_year = cutoff_year
        self._cutoff_date = make_date(cutoff_year, 1, 1)

    @property
    def cutoff_label(self) -> str:
        return f"{self._cutoff_year}+"

    def normalize(self, value: date) -> date:
        """Map any date at or after the cutoff year onto Jan 1 of that year."""
        if value.year >= self._cutoff_year:
            return self._cutoff_date
        return value

    def label_for(self, value: date) -> str:
        if value.year >= self._cutoff_year:
            return self.cutoff_label
        return short_label(value)

    def build(self, records: Iterable[LaunchRecord]) -> list[TimelinePoint]:
        """Return timeline points in ascending timestamp order.

        Records are visited in (year, month) order; within a record the
        milestones are added kickoff, launch, readout. Events keep that
        insertion order inside their point.
        """
        ordered = sorted(records, key=lambda r: (r.year, r.month))
        points: dict[date, TimelinePoint] = {}

        for record in ordered:
            milestones = (
                (EventKind.KICKOFF, record.strategy_kickoff_date),
                (EventKind.LAUNCH, record.launch_date),
                (EventKind.READOUT, record.market_readout_date),
            )
            for kind, actual in milestones:
                key = self.normalize(actual)
                point = points.get(key)
                if point is None:
                    point = TimelinePoint(
                        date=actual.isoformat(),
                        timestamp=epoch_millis(key),
                        display_date=self.label_for(actual),
                        y=BASELINE_Y,
                    )
                    points[key] = point
                point.events.append(
                    TimelineEvent(
                        region=record.region,
                        event_kind=kind,
                        full_date=long_label(actual),
                    )
                )

        result = [points[key] for key in sorted(points)]
        logger.debug(
            "Built %d timeline points from %d records", len(result), len(ordered)
        )
        return result

    def group_by_year(self, records: Iterable[LaunchRecord]) -> list[YearGroup]:
        """Group records under year headings, capped years last as one group.

        Records keep their input order inside each group.
        """
        groups: dict[int, YearGroup] = {}
        for record in records:
            capped = record.year >= self._cutoff_year
            year = self._cutoff_year if capped else record.year
            group = groups.get(year)
            if group is None:
                label = self.cutoff_label if capped else str(record.year)
                group = YearGroup(label=label, year=year)
                groups[year] = group
            group.launches.append(record)

        return [groups[year] for year in sorted(groups)]
