"""Ranking API for activityrank.

This module provides:

- create_app: Factory function to create FastAPI application
- RankingRequest: Request schema carrying forecast days and activities
- RankingResponse: Response schema with ranked activities

Note: FastAPI-dependent exports (create_app) are lazy-loaded to allow
importing schemas without FastAPI installed.
"""

# Schemas can be imported directly (only depend on pydantic)
from activityrank.api.schemas import (
    ActivityCriteriaInfo,
    ActivityRankingInfo,
    DailyScoreInfo,
    DailyWeatherInput,
    ErrorResponse,
    HealthResponse,
    LocationInfo,
    MarineDataInput,
    PeriodInfo,
    RankingRequest,
    RankingResponse,
)


def __getattr__(name):
    """Lazy load FastAPI-dependent components."""
    if name == "create_app":
        from activityrank.api.app import create_app
        return create_app
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "create_app",
    "ActivityCriteriaInfo",
    "ActivityRankingInfo",
    "DailyScoreInfo",
    "DailyWeatherInput",
    "ErrorResponse",
    "HealthResponse",
    "LocationInfo",
    "MarineDataInput",
    "PeriodInfo",
    "RankingRequest",
    "RankingResponse",
]
