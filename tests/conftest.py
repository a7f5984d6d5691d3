"""Shared pytest fixtures for activityrank tests."""

from datetime import date, timedelta

import pytest

from activityrank.activities import DailyWeather, MarineData


def build_day(day: date = date(2026, 1, 15), **overrides) -> DailyWeather:
    """Build a mild, dry, calm day; override any field by keyword."""
    values = {
        "date": day,
        "min_temp_c": 15.0,
        "max_temp_c": 25.0,
        "mean_temp_c": 20.0,
        "snowfall_cm": 0.0,
        "precipitation_mm": 0.0,
        "wind_speed_kph": 5.0,
        "wind_gust_kph": 10.0,
        "cloud_cover_pct": 10.0,
        "sunshine_hours": 8.0,
        "humidity_pct": 50.0,
        "pressure_msl": 1013.25,
    }
    values.update(overrides)
    return DailyWeather(**values)


def build_marine(**overrides) -> MarineData:
    """Build a clean, long-period swell day; override any field by keyword."""
    values = {
        "wave_height_max": 3.0,
        "wave_period": 14.0,
        "wave_direction": 270.0,
        "swell_wave_height": 2.8,
        "swell_wave_period": 14.0,
        "swell_wave_direction": 270.0,
        "wind_wave_height": 0.3,
        "wind_wave_period": 4.0,
        "wind_wave_direction": 45.0,
    }
    values.update(overrides)
    return MarineData(**values)


@pytest.fixture
def make_day():
    """Factory fixture for DailyWeather records."""
    return build_day


@pytest.fixture
def make_marine():
    """Factory fixture for MarineData records."""
    return build_marine


@pytest.fixture
def sample_forecast() -> list[DailyWeather]:
    """A week of varied weather: powder days, a storm, sunny days, a surf day."""
    start = date(2026, 1, 12)
    return [
        build_day(start, mean_temp_c=-5.0, min_temp_c=-9.0, max_temp_c=-1.0,
                  snowfall_cm=10.0, precipitation_mm=8.0, cloud_cover_pct=60.0,
                  sunshine_hours=3.0),
        build_day(start + timedelta(days=1), mean_temp_c=-3.0, snowfall_cm=2.0,
                  precipitation_mm=2.0, cloud_cover_pct=70.0, sunshine_hours=2.5),
        build_day(start + timedelta(days=2), mean_temp_c=8.0, precipitation_mm=22.0,
                  wind_speed_kph=35.0, wind_gust_kph=60.0, cloud_cover_pct=95.0,
                  sunshine_hours=0.0),
        build_day(start + timedelta(days=3)),
        build_day(start + timedelta(days=4), mean_temp_c=22.0, cloud_cover_pct=25.0,
                  sunshine_hours=9.0),
        build_day(start + timedelta(days=5), mean_temp_c=18.0, wind_speed_kph=18.0,
                  wind_gust_kph=30.0, marine=build_marine()),
        build_day(start + timedelta(days=6), mean_temp_c=12.0, precipitation_mm=6.0,
                  cloud_cover_pct=85.0, sunshine_hours=1.0, wave_height_m=1.2),
    ]
