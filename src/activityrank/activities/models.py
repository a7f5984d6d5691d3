"""Data models for weather input and ranking output."""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Optional

from .criteria import ActivityKind

# Number of reasons shown per day by compact displays
DEFAULT_TOP_REASONS = 3

STANDARD_PRESSURE_HPA = 1013.25


class ScoreRating(Enum):
    """Display band for a 0-100 score."""

    GOOD = "good"      # >= 80
    FAIR = "fair"      # >= 60
    POOR = "poor"      # < 60


def score_rating(score: float) -> ScoreRating:
    """Classify a score into a display band.

    Examples:
        >>> score_rating(92.5)
        <ScoreRating.GOOD: 'good'>
        >>> score_rating(60)
        <ScoreRating.FAIR: 'fair'>
        >>> score_rating(12)
        <ScoreRating.POOR: 'poor'>
    """
    if score >= 80:
        return ScoreRating.GOOD
    elif score >= 60:
        return ScoreRating.FAIR
    return ScoreRating.POOR


@dataclass(frozen=True)
class MarineData:
    """Daily marine forecast for a coastal location.

    Heights are in meters, periods in seconds, directions in degrees.
    """

    wave_height_max: float
    wave_period: float
    wave_direction: float
    swell_wave_height: float
    swell_wave_period: float
    swell_wave_direction: float
    wind_wave_height: float
    wind_wave_period: float
    wind_wave_direction: float


@dataclass(frozen=True)
class DailyWeather:
    """One day of normalized forecast data."""

    date: date
    min_temp_c: float
    max_temp_c: float
    mean_temp_c: float
    snowfall_cm: float
    precipitation_mm: float
    wind_speed_kph: float
    wind_gust_kph: float
    cloud_cover_pct: float
    sunshine_hours: float
    humidity_pct: float
    pressure_msl: float
    wave_height_m: Optional[float] = None
    freeze_level_m: Optional[float] = None
    marine: Optional[MarineData] = None

    @property
    def has_marine_data(self) -> bool:
        return self.marine is not None


@dataclass(frozen=True)
class Location:
    """Coordinates echoed back in a ranking result."""

    latitude: float
    longitude: float


@dataclass(frozen=True)
class Period:
    """First and last forecast day covered by a ranking."""

    start: date
    end: date


@dataclass(frozen=True)
class DailyActivityScore:
    """Suitability of one activity on one day.

    Attributes:
        date: Forecast day
        score: 0-100, rounded to two decimals
        reasons: Explanations in evaluation order (temperature, precipitation,
                 wind, sunshine/cloud, special requirements)
    """

    date: date
    score: float
    reasons: tuple[str, ...] = ()

    @property
    def rating(self) -> ScoreRating:
        return score_rating(self.score)

    def top_reasons(self, n: int = DEFAULT_TOP_REASONS) -> tuple[str, ...]:
        """Return the first ``n`` reasons."""
        return self.reasons[:max(n, 0)]


@dataclass(frozen=True)
class ActivityRanking:
    """Scores for one activity across the whole forecast."""

    activity: ActivityKind
    overall_score: float
    daily: tuple[DailyActivityScore, ...] = ()

    @property
    def rating(self) -> ScoreRating:
        return score_rating(self.overall_score)

    @property
    def best_day(self) -> Optional[DailyActivityScore]:
        """Highest scoring day, earliest first on ties."""
        if not self.daily:
            return None
        return max(self.daily, key=lambda day: day.score)


@dataclass(frozen=True)
class RankedActivitiesResult:
    """Activities ranked best-first for a forecast period."""

    period: Period
    location: Location
    activities: tuple[ActivityRanking, ...] = field(default_factory=tuple)

    @property
    def best(self) -> Optional[ActivityRanking]:
        return self.activities[0] if self.activities else None

    def get(self, activity: ActivityKind) -> Optional[ActivityRanking]:
        """Find the ranking for a specific activity."""
        for ranking in self.activities:
            if ranking.activity is activity:
                return ranking
        return None
