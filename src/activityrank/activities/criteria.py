"""Activity kinds and their static weather criteria.

The criteria table is built once at import time and exposed through a
read-only mapping. Each activity kind has exactly one record.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Union


class ActivityKind(Enum):
    """Activities that can be ranked against a forecast."""

    SKIING = "SKIING"
    SURFING = "SURFING"
    OUTDOOR_SIGHTSEEING = "OUTDOOR_SIGHTSEEING"
    INDOOR_SIGHTSEEING = "INDOOR_SIGHTSEEING"

    @property
    def label(self) -> str:
        """Human-readable name, e.g. 'Outdoor Sightseeing'."""
        return self.value.replace("_", " ").title()


@dataclass(frozen=True)
class ActivityCriteria:
    """Weather tolerances for one activity kind.

    Attributes:
        ideal_temp_range: Temperatures (C) scoring 100 on the temperature factor
        acceptable_temp_range: Wider band (C) with a linear falloff
        max_precipitation: Precipitation tolerance in mm/day
        max_wind_speed: Sustained wind tolerance in km/h
        max_wind_gust: Gust tolerance in km/h
        ideal_cloud_cover: Preferred cloud cover band in percent
        min_sunshine_hours: Sunshine hours below which the score drops
        requires_snow: Snowfall drives the special-requirement score
        requires_waves: Wave quality drives the special-requirement score
        prefers_dry_conditions: Activity is sensitive to rain
        indoor_fallback: Poor outdoor weather favours this activity
    """

    ideal_temp_range: tuple[float, float]
    acceptable_temp_range: tuple[float, float]
    max_precipitation: float
    max_wind_speed: float
    max_wind_gust: float
    ideal_cloud_cover: tuple[float, float]
    min_sunshine_hours: float
    requires_snow: bool = False
    requires_waves: bool = False
    prefers_dry_conditions: bool = False
    indoor_fallback: bool = False

    def __post_init__(self):
        for name in ("ideal_temp_range", "acceptable_temp_range", "ideal_cloud_cover"):
            low, high = getattr(self, name)
            if low > high:
                raise ValueError(f"Invalid {name}: min {low} is greater than max {high}")

        ideal_min, ideal_max = self.ideal_temp_range
        acceptable_min, acceptable_max = self.acceptable_temp_range
        if ideal_min < acceptable_min or ideal_max > acceptable_max:
            raise ValueError(
                f"ideal_temp_range {self.ideal_temp_range} must lie within "
                f"acceptable_temp_range {self.acceptable_temp_range}"
            )

    @property
    def ideal_temp_midpoint(self) -> float:
        return (self.ideal_temp_range[0] + self.ideal_temp_range[1]) / 2

    def to_dict(self) -> dict:
        """Return as a JSON-friendly dictionary."""
        return {
            "ideal_temp_range": list(self.ideal_temp_range),
            "acceptable_temp_range": list(self.acceptable_temp_range),
            "max_precipitation": self.max_precipitation,
            "max_wind_speed": self.max_wind_speed,
            "max_wind_gust": self.max_wind_gust,
            "ideal_cloud_cover": list(self.ideal_cloud_cover),
            "min_sunshine_hours": self.min_sunshine_hours,
            "requires_snow": self.requires_snow,
            "requires_waves": self.requires_waves,
            "prefers_dry_conditions": self.prefers_dry_conditions,
            "indoor_fallback": self.indoor_fallback,
        }


ACTIVITY_CRITERIA: Mapping[ActivityKind, ActivityCriteria] = MappingProxyType({
    ActivityKind.SKIING: ActivityCriteria(
        ideal_temp_range=(-10, 2),
        acceptable_temp_range=(-20, 8),
        max_precipitation=15,  # light snow is fine, heavy rain is not
        max_wind_speed=25,
        max_wind_gust=40,
        ideal_cloud_cover=(30, 80),
        min_sunshine_hours=2,
        requires_snow=True,
    ),
    ActivityKind.SURFING: ActivityCriteria(
        ideal_temp_range=(15, 28),
        acceptable_temp_range=(10, 35),
        max_precipitation=5,
        max_wind_speed=30,
        max_wind_gust=45,
        ideal_cloud_cover=(0, 50),
        min_sunshine_hours=4,
        requires_waves=True,
        prefers_dry_conditions=True,
    ),
    ActivityKind.OUTDOOR_SIGHTSEEING: ActivityCriteria(
        ideal_temp_range=(15, 25),
        acceptable_temp_range=(5, 30),
        max_precipitation=2,  # very sensitive to rain
        max_wind_speed=20,
        max_wind_gust=35,
        ideal_cloud_cover=(0, 40),
        min_sunshine_hours=6,
        prefers_dry_conditions=True,
    ),
    ActivityKind.INDOOR_SIGHTSEEING: ActivityCriteria(
        ideal_temp_range=(10, 30),
        acceptable_temp_range=(-5, 40),
        max_precipitation=50,
        max_wind_speed=50,
        max_wind_gust=80,
        ideal_cloud_cover=(0, 100),
        min_sunshine_hours=0,
        indoor_fallback=True,
    ),
})

DEFAULT_ACTIVITIES: tuple[ActivityKind, ...] = tuple(ActivityKind)


def get_criteria(activity: ActivityKind) -> ActivityCriteria:
    """Look up the criteria record for an activity kind."""
    return ACTIVITY_CRITERIA[activity]


def parse_activity(value: Union[ActivityKind, str]) -> ActivityKind:
    """Convert an activity name to an ActivityKind.

    Accepts enum members, exact names ("SURFING") and case-insensitive
    variants with spaces or dashes ("outdoor sightseeing").

    Raises:
        ValueError: If the name does not match any activity kind
    """
    if isinstance(value, ActivityKind):
        return value

    normalized = str(value).strip().upper().replace("-", "_").replace(" ", "_")
    try:
        return ActivityKind(normalized)
    except ValueError:
        valid = ", ".join(kind.value for kind in ActivityKind)
        raise ValueError(f"Unknown activity: {value!r}. Must be one of {valid}") from None


def resolve_activities(
    activities: Optional[Iterable[Union[ActivityKind, str]]] = None,
) -> list[ActivityKind]:
    """Resolve a requested activity list, defaulting to all kinds in canonical order."""
    if activities is None:
        return list(DEFAULT_ACTIVITIES)
    return [parse_activity(activity) for activity in activities]
