"""Activity catalogue and ranking data models.

This module provides:
- ActivityKind: The four rankable activities
- ActivityCriteria / ACTIVITY_CRITERIA: Static per-activity weather tolerances
- DailyWeather / MarineData: Normalized forecast input
- DailyActivityScore / ActivityRanking / RankedActivitiesResult: Ranking output
- score_rating: Good/fair/poor display band for a score
"""

from .criteria import (
    ACTIVITY_CRITERIA,
    DEFAULT_ACTIVITIES,
    ActivityCriteria,
    ActivityKind,
    get_criteria,
    parse_activity,
    resolve_activities,
)
from .models import (
    DEFAULT_TOP_REASONS,
    STANDARD_PRESSURE_HPA,
    ActivityRanking,
    DailyActivityScore,
    DailyWeather,
    Location,
    MarineData,
    Period,
    RankedActivitiesResult,
    ScoreRating,
    score_rating,
)

__all__ = [
    "ACTIVITY_CRITERIA",
    "DEFAULT_ACTIVITIES",
    "DEFAULT_TOP_REASONS",
    "STANDARD_PRESSURE_HPA",
    "ActivityCriteria",
    "ActivityKind",
    "ActivityRanking",
    "DailyActivityScore",
    "DailyWeather",
    "Location",
    "MarineData",
    "Period",
    "RankedActivitiesResult",
    "ScoreRating",
    "get_criteria",
    "parse_activity",
    "resolve_activities",
    "score_rating",
]
