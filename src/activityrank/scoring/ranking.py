"""Day and period aggregation, and activity ranking.

A day's score is the minimum of its five factor scores: the worst factor
decides. The overall score of an activity is the mean of its day scores.
"""

import logging
import math
from datetime import date
from typing import Iterable, Optional, Sequence, Union

from activityrank.activities.criteria import ActivityKind, get_criteria, resolve_activities
from activityrank.activities.models import (
    ActivityRanking,
    DailyActivityScore,
    DailyWeather,
    Location,
    Period,
    RankedActivitiesResult,
)

from .factors import (
    FactorScore,
    score_precipitation,
    score_sunshine,
    score_temperature,
    score_wind,
)
from .special import score_special_requirements

logger = logging.getLogger(__name__)


def round_score(score: float) -> float:
    """Round to two decimals with halves rounded up (99.625 -> 99.63)."""
    return math.floor(score * 100 + 0.5) / 100


def score_factors(activity: ActivityKind, weather: DailyWeather) -> list[FactorScore]:
    """Run the five factor scorers in evaluation order.

    Order: temperature, precipitation, wind, sunshine/cloud, special.
    Marine wind scoring applies only to wave-dependent activities.
    """
    criteria = get_criteria(activity)
    marine = weather.marine if criteria.requires_waves else None

    return [
        score_temperature(weather.mean_temp_c, criteria),
        score_precipitation(weather.precipitation_mm, criteria),
        score_wind(weather.wind_speed_kph, weather.wind_gust_kph, criteria, marine),
        score_sunshine(weather.cloud_cover_pct, weather.sunshine_hours, criteria),
        score_special_requirements(activity, weather),
    ]


def score_day(activity: ActivityKind, weather: DailyWeather) -> DailyActivityScore:
    """Score one activity for one day.

    Args:
        activity: Activity to score
        weather: Forecast for the day

    Returns:
        DailyActivityScore with the bottleneck score (0-100, two decimals)
        and all factor reasons in evaluation order
    """
    factors = score_factors(activity, weather)

    score = min(factor.score for factor in factors)
    score = max(0.0, min(100.0, score))
    reasons = tuple(reason for factor in factors for reason in factor.reasons if reason)

    return DailyActivityScore(
        date=weather.date,
        score=round_score(score),
        reasons=reasons,
    )


def overall_score(daily: Sequence[DailyActivityScore]) -> float:
    """Mean of day scores rounded to two decimals; 0 when there are no days."""
    if not daily:
        return 0.0
    return round_score(sum(day.score for day in daily) / len(daily))


def rank_activity(activity: ActivityKind, weather: Sequence[DailyWeather]) -> ActivityRanking:
    """Score every forecast day for a single activity."""
    daily = tuple(score_day(activity, day) for day in weather)
    ranking = ActivityRanking(
        activity=activity,
        overall_score=overall_score(daily),
        daily=daily,
    )
    logger.debug(f"{activity.value}: overall {ranking.overall_score} over {len(daily)} days")
    return ranking


def rank_activities(
    weather: Sequence[DailyWeather],
    activities: Optional[Iterable[Union[ActivityKind, str]]] = None,
    location: Optional[Location] = None,
    today: Optional[date] = None,
) -> RankedActivitiesResult:
    """Rank activities by suitability over a forecast period.

    Args:
        weather: Daily forecast, chronologically ascending
        activities: Activities to rank (kinds or names); all kinds in
                    canonical order when omitted
        location: Coordinates echoed in the result; (0, 0) when omitted
        today: Period fallback for an empty forecast (defaults to today)

    Returns:
        RankedActivitiesResult with activities sorted best-first. Ties keep
        the order of ``activities``.

    Raises:
        ValueError: If an activity name is unknown
    """
    kinds = resolve_activities(activities)
    weather = list(weather)

    rankings = [rank_activity(kind, weather) for kind in kinds]
    # sorted() is stable, including with reverse=True
    rankings = sorted(rankings, key=lambda ranking: ranking.overall_score, reverse=True)

    if weather:
        period = Period(start=weather[0].date, end=weather[-1].date)
    else:
        fallback = today or date.today()
        period = Period(start=fallback, end=fallback)
        logger.warning("No forecast days supplied; all overall scores are 0")

    if rankings:
        best = rankings[0]
        logger.info(
            f"Ranked {len(rankings)} activities over {len(weather)} days, "
            f"best: {best.activity.value} ({best.overall_score})"
        )

    return RankedActivitiesResult(
        period=period,
        location=location or Location(latitude=0.0, longitude=0.0),
        activities=tuple(rankings),
    )
