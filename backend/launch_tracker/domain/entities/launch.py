"""Domain entities — launch records and the timeline views derived from them."""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum

from launch_tracker.domain.dates import make_date
from launch_tracker.domain.exceptions import InvalidRegionError


class Region(str, Enum):
    """Sales regions a product can launch in."""

    US = "US"
    EU = "EU"
    CN = "CN"
    JP = "JP"

    @property
    def label(self) -> str:
        return REGION_LABELS[self]

    @classmethod
    def codes(cls) -> tuple[str, ...]:
        return tuple(member.value for member in cls)

    @classmethod
    def parse(cls, value: object) -> "Region":
        """Resolve a region code case-insensitively.

        Raises InvalidRegionError for missing, non-string or unknown codes.
        """
        if not isinstance(value, str) or not value.strip():
            raise InvalidRegionError(None, cls.codes())
        try:
            return cls(value.strip().upper())
        except ValueError:
            raise InvalidRegionError(value, cls.codes()) from None


REGION_LABELS: dict[Region, str] = {
    Region.US: "United States",
    Region.EU: "Europe",
    Region.CN: "China",
    Region.JP: "Japan",
}


class EventKind(str, Enum):
    """The three milestones tracked for every regional launch."""

    KICKOFF = "Strategy Kickoff"
    LAUNCH = "Launch"
    READOUT = "Market Readout"


@dataclass
class LaunchRecord:
    """One product launch in one region.

    Regional variants of the same product share ``base_product_name``.
    ``year``/``month``/``day`` hold the regional launch date with a
    1-indexed month.
    """

    id: str
    product_name: str
    base_product_name: str
    year: int
    month: int
    day: int
    region: Region
    category: str
    strategy_kickoff_date: date
    market_readout_date: date
    description: str = ""

    @property
    def launch_date(self) -> date:
        return make_date(self.year, self.month, self.day)


@dataclass
class TimelineEvent:
    """A single milestone placed on the product timeline."""

    region: Region
    event_kind: EventKind
    full_date: str


@dataclass
class TimelinePoint:
    """All milestones sharing one (possibly capped) timestamp.

    ``date`` is the ISO date of the event that created the bucket; for the
    cutoff bucket it is advisory only.
    """

    date: str
    timestamp: int
    display_date: str
    y: int = 1
    events: list[TimelineEvent] = field(default_factory=list)


@dataclass
class YearGroup:
    """Launches of one region grouped under a year heading."""

    label: str
    year: int
    launches: list[LaunchRecord] = field(default_factory=list)


@dataclass
class ProductSummary:
    """A base product and the regions it has launched in."""

    base_product_name: str
    regions: list[Region] = field(default_factory=list)
