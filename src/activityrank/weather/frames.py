"""Normalize daily forecast tables into DailyWeather records.

Column names follow the Open-Meteo daily API. Units expected:
temperatures in C, snowfall in cm, precipitation in mm, wind in km/h,
sunshine duration in seconds, cloud cover and humidity in percent,
pressure in hPa, wave heights in m, periods in s, directions in degrees.

Gap handling:
- Missing mean temperature is reconstructed as the mean of min and max
- Missing pressure falls back to standard sea-level pressure
- Missing snowfall, precipitation and sunshine count as zero
- Marine rows with any missing value are dropped (no marine block that day)
"""

import logging
from typing import Iterable, Optional

import pandas as pd

from activityrank.activities.models import STANDARD_PRESSURE_HPA, DailyWeather, MarineData

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = (
    "time",
    "temperature_2m_min",
    "temperature_2m_max",
    "wind_speed_10m_max",
)

# Optional columns and the value used when they are absent or NaN
OPTIONAL_DEFAULTS: dict[str, float] = {
    "snowfall_sum": 0.0,
    "precipitation_sum": 0.0,
    "wind_gusts_10m_max": 0.0,
    "cloud_cover_mean": 0.0,
    "sunshine_duration": 0.0,
    "relative_humidity_2m_mean": 0.0,
    "pressure_msl_mean": STANDARD_PRESSURE_HPA,
}

# MarineData field -> Open-Meteo marine daily column
MARINE_COLUMNS: dict[str, str] = {
    "wave_height_max": "wave_height_max",
    "wave_period": "wave_period_max",
    "wave_direction": "wave_direction_dominant",
    "swell_wave_height": "swell_wave_height_max",
    "swell_wave_period": "swell_wave_period_max",
    "swell_wave_direction": "swell_wave_direction_dominant",
    "wind_wave_height": "wind_wave_height_max",
    "wind_wave_period": "wind_wave_period_max",
    "wind_wave_direction": "wind_wave_direction_dominant",
}


def _prepare(df: pd.DataFrame, required: Iterable[str]) -> pd.DataFrame:
    """Validate columns, normalize dates, sort and drop duplicate days."""
    missing = [col for col in required if col not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {missing}")

    out = df.copy()
    out["time"] = pd.to_datetime(out["time"]).dt.date
    before = len(out)
    out = out.drop_duplicates(subset="time", keep="first").sort_values("time")
    if len(out) < before:
        logger.warning(f"Dropped {before - len(out)} duplicate forecast days")
    return out.reset_index(drop=True)


def _optional_value(row: pd.Series, column: str) -> Optional[float]:
    if column not in row.index or pd.isna(row[column]):
        return None
    return float(row[column])


def marine_from_frame(marine_df: pd.DataFrame) -> dict:
    """Build MarineData records keyed by date from a marine daily frame.

    Args:
        marine_df: DataFrame with ``time`` and the marine daily columns

    Returns:
        Dict mapping date -> MarineData for days with complete values
    """
    df = _prepare(marine_df, ("time", *MARINE_COLUMNS.values()))
    complete = df.dropna(subset=list(MARINE_COLUMNS.values()))
    if len(complete) < len(df):
        logger.info(f"Skipping {len(df) - len(complete)} days with incomplete marine data")

    return {
        row["time"]: MarineData(**{
            field: float(row[column]) for field, column in MARINE_COLUMNS.items()
        })
        for _, row in complete.iterrows()
    }


def daily_weather_from_frame(
    df: pd.DataFrame,
    marine_df: Optional[pd.DataFrame] = None,
) -> list[DailyWeather]:
    """Convert a daily forecast DataFrame into DailyWeather records.

    Args:
        df: Daily forecast with Open-Meteo column names
        marine_df: Optional marine daily forecast, joined by date

    Returns:
        DailyWeather records, chronologically ascending, one per date

    Raises:
        ValueError: If a required column is missing
    """
    df = _prepare(df, REQUIRED_COLUMNS)
    for column, default in OPTIONAL_DEFAULTS.items():
        if column not in df.columns:
            df[column] = default
        else:
            df[column] = df[column].fillna(default)

    midpoint = (df["temperature_2m_min"] + df["temperature_2m_max"]) / 2
    if "temperature_2m_mean" in df.columns:
        df["temperature_2m_mean"] = df["temperature_2m_mean"].fillna(midpoint)
    else:
        df["temperature_2m_mean"] = midpoint

    marine = marine_from_frame(marine_df) if marine_df is not None else {}

    records = []
    for _, row in df.iterrows():
        records.append(DailyWeather(
            date=row["time"],
            min_temp_c=float(row["temperature_2m_min"]),
            max_temp_c=float(row["temperature_2m_max"]),
            mean_temp_c=float(row["temperature_2m_mean"]),
            snowfall_cm=float(row["snowfall_sum"]),
            precipitation_mm=float(row["precipitation_sum"]),
            wind_speed_kph=float(row["wind_speed_10m_max"]),
            wind_gust_kph=float(row["wind_gusts_10m_max"]),
            cloud_cover_pct=float(row["cloud_cover_mean"]),
            sunshine_hours=float(row["sunshine_duration"]) / 3600,
            humidity_pct=float(row["relative_humidity_2m_mean"]),
            pressure_msl=float(row["pressure_msl_mean"]),
            wave_height_m=_optional_value(row, "wave_height_max"),
            freeze_level_m=_optional_value(row, "freezing_level_height_max"),
            marine=marine.get(row["time"]),
        ))

    logger.debug(f"Normalized {len(records)} forecast days ({len(marine)} with marine data)")
    return records


def daily_weather_from_records(
    records: list[dict],
    marine_records: Optional[list[dict]] = None,
) -> list[DailyWeather]:
    """Same as daily_weather_from_frame, from lists of row dictionaries."""
    if not records:
        return []
    marine_df = pd.DataFrame(marine_records) if marine_records else None
    return daily_weather_from_frame(pd.DataFrame(records), marine_df)
