"""FastAPI application for activity rankings.

Provides REST API endpoints for:
- Ranking activities against a supplied daily forecast
- The activity criteria catalogue
- Health checks

The API never fetches weather itself; callers post the forecast days.

Example:
    >>> from activityrank.api import create_app
    >>> app = create_app()
    >>> # Run with: uvicorn activityrank.api.app:app --reload
"""

import logging
import os
from typing import Optional

from fastapi import FastAPI, HTTPException, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from activityrank import __version__
from activityrank.activities.criteria import ACTIVITY_CRITERIA
from activityrank.activities.models import Location
from activityrank.api.schemas import (
    ActivityCriteriaInfo,
    ActivityRankingInfo,
    ErrorResponse,
    HealthResponse,
    LocationInfo,
    PeriodInfo,
    RankingRequest,
    RankingResponse,
)
from activityrank.scoring.ranking import rank_activities
from activityrank.weather.marine import find_coastal_region

logger = logging.getLogger(__name__)

# API version
API_VERSION = __version__


def get_cors_origins() -> list[str]:
    """Read allowed CORS origins from ACTIVITYRANK_CORS_ORIGINS (comma-separated)."""
    raw = os.environ.get("ACTIVITYRANK_CORS_ORIGINS", "*")
    origins = [origin.strip() for origin in raw.split(",") if origin.strip()]
    return origins or ["*"]


def create_app(cors_origins: Optional[list[str]] = None) -> FastAPI:
    """Create FastAPI application.

    Args:
        cors_origins: Allowed origins (read from the environment if not provided)

    Returns:
        Configured FastAPI application
    """
    app = FastAPI(
        title="Activity Ranking API",
        description="Ranks skiing, surfing and sightseeing against a daily weather forecast",
        version=API_VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins or get_cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        """Handle HTTP exceptions with custom response."""
        return JSONResponse(
            status_code=exc.status_code,
            content=ErrorResponse(
                error=f"HTTP_{exc.status_code}",
                message=str(exc.detail),
            ).model_dump(),
        )

    @app.get("/", tags=["info"])
    async def root():
        """Root endpoint with API info."""
        return {
            "name": "Activity Ranking API",
            "version": API_VERSION,
            "docs": "/docs",
        }

    @app.get("/health", response_model=HealthResponse, tags=["info"])
    async def health_check():
        """Health check endpoint."""
        return HealthResponse(status="healthy", version=API_VERSION)

    @app.get("/activities", response_model=list[ActivityCriteriaInfo], tags=["info"])
    async def list_activities():
        """List rankable activities and their weather criteria."""
        return [
            ActivityCriteriaInfo(
                activity=kind.value,
                label=kind.label,
                criteria=criteria.to_dict(),
            )
            for kind, criteria in ACTIVITY_CRITERIA.items()
        ]

    @app.post(
        "/rank",
        response_model=RankingResponse,
        responses={
            400: {"model": ErrorResponse, "description": "Invalid request"},
            500: {"model": ErrorResponse, "description": "Server error"},
        },
        tags=["rankings"],
    )
    def rank(
        request: RankingRequest,
        top_reasons: Optional[int] = Query(
            default=None,
            ge=0,
            description="Limit the reasons returned per day",
        ),
    ):
        """Rank activities for the posted forecast days.

        Returns activities best-first with a per-day score, rating and reasons.
        """
        logger.info(
            f"Rank request: {len(request.days)} days, "
            f"activities={request.activities or 'all'}"
        )
        weather = [day.to_daily_weather() for day in request.days]
        location = None
        if request.location is not None:
            location = Location(
                latitude=request.location.latitude,
                longitude=request.location.longitude,
            )

        try:
            result = rank_activities(weather, request.activities, location)
        except ValueError as e:
            logger.warning(f"Rejected ranking request: {e}")
            raise HTTPException(status_code=400, detail=str(e))
        except Exception as e:
            logger.error(f"Ranking error: {e}")
            raise HTTPException(
                status_code=500,
                detail=f"Ranking failed: {str(e)}",
            )

        return RankingResponse(
            period=PeriodInfo(start=result.period.start, end=result.period.end),
            location=LocationInfo(
                latitude=result.location.latitude,
                longitude=result.location.longitude,
                coastal_region=find_coastal_region(
                    result.location.latitude, result.location.longitude
                ) if location is not None else None,
            ),
            activities=[
                ActivityRankingInfo.from_ranking(ranking, top_reasons)
                for ranking in result.activities
            ],
        )

    return app


# Default app instance for uvicorn
app = create_app()
