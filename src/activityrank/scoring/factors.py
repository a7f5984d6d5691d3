"""Per-factor weather scorers.

Each scorer rates one aspect of a day's weather against an activity's
criteria and returns a 0-100 score with the reasons that explain it:

- Temperature fit against the ideal and acceptable bands
- Precipitation impact
- Wind, on land or (for surfing with marine data) over water
- Sunshine hours and cloud cover

The scorers are total over finite inputs: out-of-range values are clamped,
never rejected.
"""

from dataclasses import dataclass

from activityrank.activities.criteria import ActivityCriteria
from activityrank.activities.models import MarineData
from activityrank.utils.geo import compass_direction


@dataclass(frozen=True)
class FactorScore:
    """Score for one weather factor.

    Attributes:
        score: 0-100 suitability for this factor
        reasons: Explanations in the order they were produced
    """

    score: float
    reasons: tuple[str, ...] = ()


def format_number(value: float) -> str:
    """Format a measurement for a reason string (no trailing '.0').

    Examples:
        >>> format_number(20.0)
        '20'
        >>> format_number(2.5)
        '2.5'
    """
    return f"{value:g}"


def score_temperature(temp_c: float, criteria: ActivityCriteria) -> FactorScore:
    """Score temperature fit.

    - Ideal band (inclusive): 100
    - Acceptable band: linear falloff from 100 to 70 at the widest acceptable margin
    - Outside: 40 minus 2 points per degree from the ideal midpoint, floored at 0

    Args:
        temp_c: Daily mean temperature in Celsius
        criteria: Activity criteria

    Returns:
        FactorScore for the temperature factor
    """
    ideal_min, ideal_max = criteria.ideal_temp_range
    acceptable_min, acceptable_max = criteria.acceptable_temp_range
    temp = format_number(temp_c)

    if ideal_min <= temp_c <= ideal_max:
        return FactorScore(100.0, (f"Ideal temperature: {temp}°C",))

    if acceptable_min <= temp_c <= acceptable_max:
        max_distance = max(ideal_min - acceptable_min, acceptable_max - ideal_max)
        # Ideal band equal to acceptable band leaves nothing to interpolate over
        if max_distance > 0:
            distance = min(abs(temp_c - ideal_min), abs(temp_c - ideal_max))
            score = 100 - (distance / max_distance) * 30
            return FactorScore(score, (f"Acceptable temperature: {temp}°C",))

    score = max(0.0, 40 - abs(temp_c - criteria.ideal_temp_midpoint) * 2)
    return FactorScore(score, (f"Poor temperature: {temp}°C (outside acceptable range)",))


def score_precipitation(precipitation_mm: float, criteria: ActivityCriteria) -> FactorScore:
    """Score precipitation impact.

    Up to a quarter of the tolerance costs nothing; the rest of the tolerance
    band falls linearly to 50; beyond it the score starts at 30 and loses
    2 points per extra millimeter.
    """
    limit = criteria.max_precipitation
    amount = format_number(precipitation_mm)

    if precipitation_mm <= limit / 4:
        if precipitation_mm > 0:
            return FactorScore(100.0, (f"Light precipitation: {amount}mm",))
        return FactorScore(100.0)

    if precipitation_mm <= limit:
        score = 100 - ((precipitation_mm - limit / 4) / (limit * 0.75)) * 50
        return FactorScore(score, (f"Moderate precipitation: {amount}mm",))

    score = max(0.0, 30 - (precipitation_mm - limit) * 2)
    return FactorScore(score, (f"Heavy precipitation: {amount}mm",))


def score_marine_wind(marine: MarineData) -> FactorScore:
    """Score wind over water using wind-wave height as the strength proxy.

    Args:
        marine: Marine forecast for the day

    Returns:
        FactorScore with a strength reason and, for valid bearings,
        a wind direction reason
    """
    height = marine.wind_wave_height
    height_text = f"{height:.1f}m wind waves"
    score = 100.0

    if height > 2.0:
        reason = f"Strong marine winds: {height_text}"
        score -= (height - 2.0) * 15
    elif height > 1.0:
        reason = f"Moderate marine winds: {height_text}"
        score -= (height - 1.0) * 10
    elif height > 0.5:
        reason = f"Light marine winds: {height_text}"
        score -= (height - 0.5) * 5
    else:
        reason = f"Calm marine conditions: {height_text}"
    reasons = [reason]

    direction = marine.wind_wave_direction
    if 0 <= direction <= 360:
        reasons.append(f"Wind direction: {compass_direction(direction)} ({direction:.0f}°)")

    return FactorScore(max(0.0, score), tuple(reasons))


def score_wind(
    wind_speed_kph: float,
    wind_gust_kph: float,
    criteria: ActivityCriteria,
    marine: MarineData | None = None,
) -> FactorScore:
    """Score wind conditions.

    When marine data is given the score comes from the marine scorer;
    callers pass it only for water-based activities.

    Args:
        wind_speed_kph: Maximum sustained wind in km/h
        wind_gust_kph: Maximum gust in km/h
        criteria: Activity criteria
        marine: Optional marine forecast

    Returns:
        FactorScore for the wind factor
    """
    if marine is not None:
        return score_marine_wind(marine)

    max_speed = criteria.max_wind_speed

    if wind_speed_kph > max_speed:
        score = max(0.0, 100 - (wind_speed_kph - max_speed) * 3)
        return FactorScore(score, (f"High wind speed: {format_number(wind_speed_kph)} km/h",))

    if wind_gust_kph > criteria.max_wind_gust:
        score = max(0.0, 100 - (wind_gust_kph - criteria.max_wind_gust) * 2)
        return FactorScore(score, (f"Strong wind gusts: {format_number(wind_gust_kph)} km/h",))

    if wind_speed_kph <= max_speed / 2:
        return FactorScore(100.0, (f"Calm wind conditions: {format_number(wind_speed_kph)} km/h",))

    score = 100 - ((wind_speed_kph - max_speed / 2) / (max_speed / 2)) * 20
    return FactorScore(max(0.0, score))


def score_sunshine(
    cloud_cover_pct: float,
    sunshine_hours: float,
    criteria: ActivityCriteria,
) -> FactorScore:
    """Score sunshine hours and cloud cover.

    Each missing sunshine hour costs 15 points; each percentage point of
    cloud cover outside the ideal band costs half a point.
    """
    score = 100.0
    reasons = []

    if sunshine_hours < criteria.min_sunshine_hours:
        deficit = criteria.min_sunshine_hours - sunshine_hours
        score -= deficit * 15
        reasons.append(
            f"Limited sunshine: {format_number(sunshine_hours)}h "
            f"(need {format_number(criteria.min_sunshine_hours)}h)"
        )
    else:
        reasons.append(f"Good sunshine: {format_number(sunshine_hours)}h")

    cloud_min, cloud_max = criteria.ideal_cloud_cover
    if cloud_cover_pct < cloud_min or cloud_cover_pct > cloud_max:
        distance = min(abs(cloud_cover_pct - cloud_min), abs(cloud_cover_pct - cloud_max))
        score -= distance * 0.5

        if cloud_cover_pct > 80:
            reasons.append(f"Very cloudy: {format_number(cloud_cover_pct)}%")
        elif cloud_cover_pct < 20:
            reasons.append(f"Very clear: {format_number(cloud_cover_pct)}%")

    return FactorScore(max(0.0, score), tuple(reasons))
