"""Forecast normalization and coastal classification.

This module provides:
- daily_weather_from_frame / daily_weather_from_records: Build DailyWeather
  records from Open-Meteo style daily tables
- is_coastal / find_coastal_region: Decide whether marine data applies
"""

from .frames import (
    MARINE_COLUMNS,
    OPTIONAL_DEFAULTS,
    REQUIRED_COLUMNS,
    STANDARD_PRESSURE_HPA,
    daily_weather_from_frame,
    daily_weather_from_records,
    marine_from_frame,
)
from .marine import COASTAL_REGIONS, find_coastal_region, is_coastal

__all__ = [
    "COASTAL_REGIONS",
    "MARINE_COLUMNS",
    "OPTIONAL_DEFAULTS",
    "REQUIRED_COLUMNS",
    "STANDARD_PRESSURE_HPA",
    "daily_weather_from_frame",
    "daily_weather_from_records",
    "find_coastal_region",
    "is_coastal",
    "marine_from_frame",
]
