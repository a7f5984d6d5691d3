"""Activity-specific requirement scorers.

Skiing needs snow, surfing needs rideable waves and indoor sightseeing is
favoured by bad outdoor weather. Outdoor sightseeing has no special
requirement; the general factors decide its score on their own.
"""

from activityrank.activities.criteria import ActivityKind, get_criteria
from activityrank.activities.models import DailyWeather, MarineData

from .factors import FactorScore, format_number

# Flat bonus for days with a full marine forecast
MARINE_DATA_BONUS = 5


def score_snow_conditions(weather: DailyWeather) -> FactorScore:
    """Score skiing snow conditions from snowfall and temperature.

    Fresh snowfall over 5cm scores 100, any lighter snowfall 80. Without
    snowfall, freezing days with precipitation score 60, cold days 40 and
    warm days 20.
    """
    snowfall = weather.snowfall_cm

    if snowfall > 5:
        return FactorScore(100.0, (f"Fresh snow: {format_number(snowfall)}cm",))
    elif snowfall > 0:
        return FactorScore(80.0, (f"Light snow: {format_number(snowfall)}cm",))
    elif weather.mean_temp_c < 0 and weather.precipitation_mm > 0:
        return FactorScore(60.0, ("Cold with precipitation - potential for snow",))
    elif weather.mean_temp_c < 5:
        return FactorScore(40.0, ("Cold weather - may have existing snow",))
    return FactorScore(20.0, ("No snow and warm weather",))


def score_indoor_conditions(weather: DailyWeather) -> FactorScore:
    """Score indoor sightseeing, which benefits from poor outdoor weather."""
    if weather.precipitation_mm > 10 or weather.wind_speed_kph > 30:
        return FactorScore(100.0, ("Poor outdoor conditions - perfect for indoor activities",))
    if weather.precipitation_mm > 5 or weather.cloud_cover_pct > 80:
        return FactorScore(85.0, ("Overcast conditions - good for indoor activities",))
    return FactorScore(100.0)


def score_wave_height(wave_height_m: float) -> FactorScore:
    """Score maximum wave height for surfing.

    Bands, checked in order:
        2.5-4.0m excellent (100), 1.5-6.0m good (85), 0.8-8.0m surfable (70),
        over 8.0m dangerous (20), at least 0.5m small (40), else flat (10).
    """
    height = f"{wave_height_m:.1f}m"

    if 2.5 <= wave_height_m <= 4.0:
        return FactorScore(100.0, (f"Excellent waves: {height}",))
    elif 1.5 <= wave_height_m <= 6.0:
        return FactorScore(85.0, (f"Good waves: {height}",))
    elif 0.8 <= wave_height_m <= 8.0:
        return FactorScore(70.0, (f"Surfable waves: {height}",))
    elif wave_height_m > 8.0:
        return FactorScore(20.0, (f"Dangerous large waves: {height}",))
    elif wave_height_m >= 0.5:
        return FactorScore(40.0, (f"Small waves: {height}",))
    return FactorScore(10.0, (f"Flat conditions: {height}",))


def score_wave_period(period_s: float) -> FactorScore:
    """Score wave period; longer periods mean cleaner, more powerful waves."""
    period = f"{period_s:.0f}s"

    if period_s >= 12:
        return FactorScore(100.0, (f"Long period swell: {period} - excellent quality",))
    elif period_s >= 8:
        return FactorScore(85.0, (f"Good wave period: {period}",))
    elif period_s >= 6:
        return FactorScore(70.0, (f"Moderate wave period: {period}",))
    elif period_s >= 4:
        return FactorScore(50.0, (f"Short wave period: {period} - choppy conditions",))
    return FactorScore(30.0, (f"Very short period: {period} - poor quality",))


def score_swell_ratio(marine: MarineData) -> FactorScore:
    """Score the share of total wave height that comes from swell.

    Returns a neutral 80 without a reason when the ratio is undefined
    (no swell or no waves).
    """
    swell = marine.swell_wave_height
    total = marine.wave_height_max

    if swell <= 0 or total <= 0:
        return FactorScore(80.0)

    ratio = swell / total
    percent = f"{ratio * 100:.0f}% swell"

    if ratio > 0.7:
        return FactorScore(100.0, (f"Clean swell conditions: {percent}",))
    elif ratio > 0.4:
        return FactorScore(75.0, (f"Mixed swell and wind waves: {percent}",))
    return FactorScore(60.0, (f"Mostly wind waves: {percent} - choppier conditions",))


def score_wind_wave_relation(marine: MarineData) -> FactorScore:
    """Score surface texture from locally generated wind waves."""
    height = marine.wind_wave_height
    text = f"{height:.1f}m wind waves"

    if height <= 0.5:
        return FactorScore(100.0, (f"Light marine winds: {text} - clean conditions",))
    elif height <= 1.0:
        return FactorScore(85.0, (f"Moderate marine winds: {text} - slightly textured",))
    elif height <= 1.5:
        return FactorScore(60.0, (f"Strong marine winds: {text} - choppy surface",))
    return FactorScore(30.0, (f"Very strong marine winds: {text} - blown out conditions",))


def score_surf_conditions(weather: DailyWeather) -> FactorScore:
    """Score surfing wave quality.

    Uses the best available source, in priority order:

    1. Full marine forecast: minimum of wave height, wave period, swell
       ratio and wind-wave scores, plus a small bonus capped at 100
    2. Single wave height measurement
    3. Wind speed as a rough proxy for wave generation

    Args:
        weather: Day to score

    Returns:
        FactorScore for surf quality
    """
    if weather.marine is not None:
        parts = (
            score_wave_height(weather.marine.wave_height_max),
            score_wave_period(weather.marine.wave_period),
            score_swell_ratio(weather.marine),
            score_wind_wave_relation(weather.marine),
        )
        reasons = [reason for part in parts for reason in part.reasons]
        reasons.append("Detailed marine forecast available")
        score = min(100.0, min(part.score for part in parts) + MARINE_DATA_BONUS)
        return FactorScore(max(0.0, score), tuple(reasons))

    if weather.wave_height_m is not None:
        height = weather.wave_height_m
        text = f"{format_number(height)}m"
        if height > 1.5:
            return FactorScore(90.0, (f"Good waves: {text}",))
        elif height > 0.8:
            return FactorScore(70.0, (f"Moderate waves: {text}",))
        elif height > 0.3:
            return FactorScore(40.0, (f"Small waves: {text}",))
        return FactorScore(20.0, (f"Very small waves: {text}",))

    wind = format_number(weather.wind_speed_kph)
    if weather.wind_speed_kph > 20:
        return FactorScore(60.0, (f"Strong wind may generate waves: {wind} km/h",))
    elif weather.wind_speed_kph > 10:
        return FactorScore(40.0, (f"Moderate wind may generate small waves: {wind} km/h",))
    return FactorScore(20.0, (f"Low wind - likely flat conditions: {wind} km/h",))


def score_special_requirements(activity: ActivityKind, weather: DailyWeather) -> FactorScore:
    """Score the activity-specific requirement for one day.

    Args:
        activity: Activity being scored
        weather: Day to score

    Returns:
        FactorScore; 100 with no reasons when the activity has no special
        requirement
    """
    criteria = get_criteria(activity)

    if criteria.requires_snow:
        return score_snow_conditions(weather)
    if criteria.requires_waves:
        return score_surf_conditions(weather)
    if criteria.indoor_fallback:
        return score_indoor_conditions(weather)
    return FactorScore(100.0)
