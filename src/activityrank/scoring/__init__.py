"""Rule-based activity suitability scoring.

This module provides:
- Factor scorers: score_temperature, score_precipitation, score_wind,
  score_marine_wind, score_sunshine
- Special requirements: score_special_requirements, score_surf_conditions
- Aggregation: score_day, overall_score, rank_activity, rank_activities
"""

from .factors import (
    FactorScore,
    format_number,
    score_marine_wind,
    score_precipitation,
    score_sunshine,
    score_temperature,
    score_wind,
)
from .ranking import (
    overall_score,
    rank_activities,
    rank_activity,
    round_score,
    score_day,
    score_factors,
)
from .special import (
    MARINE_DATA_BONUS,
    score_indoor_conditions,
    score_snow_conditions,
    score_special_requirements,
    score_surf_conditions,
    score_swell_ratio,
    score_wave_height,
    score_wave_period,
    score_wind_wave_relation,
)

__all__ = [
    "FactorScore",
    "MARINE_DATA_BONUS",
    "format_number",
    "overall_score",
    "rank_activities",
    "rank_activity",
    "round_score",
    "score_day",
    "score_factors",
    "score_indoor_conditions",
    "score_marine_wind",
    "score_precipitation",
    "score_snow_conditions",
    "score_special_requirements",
    "score_sunshine",
    "score_surf_conditions",
    "score_swell_ratio",
    "score_temperature",
    "score_wave_height",
    "score_wave_period",
    "score_wind",
    "score_wind_wave_relation",
]
