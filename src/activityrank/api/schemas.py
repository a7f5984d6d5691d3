"""Pydantic schemas for API request/response validation.

Defines all data models used by the ranking API.
"""

from datetime import date as date_type
from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field, model_validator

from activityrank.activities.models import (
    STANDARD_PRESSURE_HPA,
    ActivityRanking,
    DailyActivityScore,
    DailyWeather,
    MarineData,
)


class MarineDataInput(BaseModel):
    """Daily marine forecast values.

    Attributes:
        wave_height_max: Maximum wave height in meters
        wave_period: Dominant wave period in seconds
        wave_direction: Dominant wave direction in degrees
        swell_wave_height: Swell height in meters
        swell_wave_period: Swell period in seconds
        swell_wave_direction: Swell direction in degrees
        wind_wave_height: Wind-wave height in meters
        wind_wave_period: Wind-wave period in seconds
        wind_wave_direction: Wind-wave direction in degrees
    """

    wave_height_max: float = Field(..., ge=0)
    wave_period: float = Field(..., ge=0)
    wave_direction: float
    swell_wave_height: float = Field(..., ge=0)
    swell_wave_period: float = Field(..., ge=0)
    swell_wave_direction: float
    wind_wave_height: float = Field(..., ge=0)
    wind_wave_period: float = Field(..., ge=0)
    wind_wave_direction: float

    def to_marine_data(self) -> MarineData:
        return MarineData(**self.model_dump())


class DailyWeatherInput(BaseModel):
    """One forecast day supplied by the caller.

    ``mean_temp_c`` defaults to the midpoint of min and max, and
    ``pressure_msl`` to standard sea-level pressure.
    """

    target_date: date_type = Field(..., alias="date", description="Forecast day")
    min_temp_c: float
    max_temp_c: float
    mean_temp_c: Optional[float] = Field(
        default=None,
        description="Daily mean temperature; midpoint of min/max when omitted",
    )
    snowfall_cm: float = Field(default=0.0, ge=0)
    precipitation_mm: float = Field(default=0.0, ge=0)
    wind_speed_kph: float = Field(default=0.0, ge=0)
    wind_gust_kph: float = Field(default=0.0, ge=0)
    cloud_cover_pct: float = Field(default=0.0, ge=0, le=100)
    sunshine_hours: float = Field(default=0.0, ge=0, le=24)
    humidity_pct: float = Field(default=0.0, ge=0, le=100)
    pressure_msl: Optional[float] = Field(default=None, description="Mean sea-level pressure (hPa)")
    wave_height_m: Optional[float] = Field(default=None, ge=0)
    freeze_level_m: Optional[float] = None
    marine: Optional[MarineDataInput] = None

    model_config = {"populate_by_name": True}

    def to_daily_weather(self) -> DailyWeather:
        mean_temp = self.mean_temp_c
        if mean_temp is None:
            mean_temp = (self.min_temp_c + self.max_temp_c) / 2

        return DailyWeather(
            date=self.target_date,
            min_temp_c=self.min_temp_c,
            max_temp_c=self.max_temp_c,
            mean_temp_c=mean_temp,
            snowfall_cm=self.snowfall_cm,
            precipitation_mm=self.precipitation_mm,
            wind_speed_kph=self.wind_speed_kph,
            wind_gust_kph=self.wind_gust_kph,
            cloud_cover_pct=self.cloud_cover_pct,
            sunshine_hours=self.sunshine_hours,
            humidity_pct=self.humidity_pct,
            pressure_msl=self.pressure_msl if self.pressure_msl is not None else STANDARD_PRESSURE_HPA,
            wave_height_m=self.wave_height_m,
            freeze_level_m=self.freeze_level_m,
            marine=self.marine.to_marine_data() if self.marine else None,
        )


class LocationInfo(BaseModel):
    """Location echoed in the ranking.

    Attributes:
        latitude: Latitude in decimal degrees
        longitude: Longitude in decimal degrees
        coastal_region: Matching coastal region, if any (response only)
    """

    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    coastal_region: Optional[str] = None


class RankingRequest(BaseModel):
    """Request schema for activity ranking.

    Attributes:
        days: Daily forecast, chronologically ascending, no repeated dates
        activities: Activity names to rank (all four when omitted)
        location: Optional coordinates echoed in the response
    """

    days: list[DailyWeatherInput] = Field(default_factory=list)
    activities: Optional[list[str]] = Field(
        default=None,
        description="Subset of SKIING, SURFING, OUTDOOR_SIGHTSEEING, INDOOR_SIGHTSEEING",
    )
    location: Optional[LocationInfo] = None

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "days": [
                        {
                            "date": "2026-01-15",
                            "min_temp_c": -9.0,
                            "max_temp_c": -1.0,
                            "snowfall_cm": 12.0,
                            "precipitation_mm": 8.0,
                            "wind_speed_kph": 10.0,
                            "wind_gust_kph": 22.0,
                            "cloud_cover_pct": 60.0,
                            "sunshine_hours": 3.0,
                            "humidity_pct": 85.0,
                        }
                    ],
                    "activities": ["SKIING", "INDOOR_SIGHTSEEING"],
                    "location": {"latitude": 39.6, "longitude": -106.4},
                }
            ]
        }
    }

    @model_validator(mode="after")
    def check_days_ascending(self):
        dates = [day.target_date for day in self.days]
        for previous, current in zip(dates, dates[1:]):
            if current <= previous:
                raise ValueError(
                    f"days must be in ascending date order without repeats ({previous} then {current})"
                )
        return self


class PeriodInfo(BaseModel):
    start: date_type
    end: date_type


class DailyScoreInfo(BaseModel):
    """Score for one activity on one day."""

    target_date: date_type = Field(..., alias="date")
    score: float = Field(..., ge=0, le=100)
    rating: str
    reasons: list[str] = Field(default_factory=list)

    model_config = {"populate_by_name": True}

    @classmethod
    def from_score(cls, day: DailyActivityScore, top_reasons: Optional[int] = None) -> "DailyScoreInfo":
        reasons = day.reasons if top_reasons is None else day.top_reasons(top_reasons)
        return cls(
            date=day.date,
            score=day.score,
            rating=day.rating.value,
            reasons=list(reasons),
        )


class ActivityRankingInfo(BaseModel):
    """Ranking entry for one activity."""

    activity: str
    label: str
    overall_score: float = Field(..., ge=0, le=100)
    rating: str
    daily: list[DailyScoreInfo] = Field(default_factory=list)

    @classmethod
    def from_ranking(
        cls, ranking: ActivityRanking, top_reasons: Optional[int] = None
    ) -> "ActivityRankingInfo":
        return cls(
            activity=ranking.activity.value,
            label=ranking.activity.label,
            overall_score=ranking.overall_score,
            rating=ranking.rating.value,
            daily=[DailyScoreInfo.from_score(day, top_reasons) for day in ranking.daily],
        )


class RankingResponse(BaseModel):
    """Full ranking response.

    Attributes:
        period: First and last forecast day
        location: Echoed location with coastal classification
        activities: Activities sorted best-first
        generated_at: Timestamp when the ranking was produced
    """

    period: PeriodInfo
    location: LocationInfo
    activities: list[ActivityRankingInfo]
    generated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Timestamp of ranking generation",
    )


class ActivityCriteriaInfo(BaseModel):
    """Catalogue entry describing one activity's criteria."""

    activity: str
    label: str
    criteria: dict


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(default="healthy", description="Service status")
    version: str = Field(default="1.0.0", description="API version")


class ErrorResponse(BaseModel):
    """Error response schema.

    Attributes:
        error: Error type/code
        message: Human-readable error message
        detail: Additional error details
    """

    error: str = Field(..., description="Error type")
    message: str = Field(..., description="Error message")
    detail: Optional[str] = Field(default=None, description="Additional details")
