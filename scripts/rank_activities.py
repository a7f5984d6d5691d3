#!/usr/bin/env python3
"""Rank activities for a daily forecast stored as CSV.

The CSV uses Open-Meteo daily column names (see activityrank.weather.frames).
An optional marine CSV is joined by date.

Usage:
    python scripts/rank_activities.py forecast.csv
    python scripts/rank_activities.py forecast.csv --marine marine.csv --format json
    python scripts/rank_activities.py forecast.csv --activities SKIING SURFING
"""

import argparse
import json
import logging
import os
import sys
from pathlib import Path

# Add src to path for development
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import pandas as pd

from activityrank.activities import DEFAULT_TOP_REASONS, Location
from activityrank.api.schemas import ActivityRankingInfo
from activityrank.scoring import rank_activities
from activityrank.weather import daily_weather_from_frame, find_coastal_region

logger = logging.getLogger(__name__)


def format_table(result, top_reasons: int) -> str:
    """Render a ranking as plain text, best activity first."""
    lines = [f"Period: {result.period.start} to {result.period.end}"]
    for position, ranking in enumerate(result.activities, start=1):
        lines.append(
            f"{position}. {ranking.activity.label:<20} "
            f"{ranking.overall_score:6.2f}  ({ranking.rating.value})"
        )
        for day in ranking.daily:
            reasons = "; ".join(day.top_reasons(top_reasons))
            lines.append(f"     {day.date}  {day.score:6.2f}  {reasons}")
    return "\n".join(lines)


def format_json(result, top_reasons: int) -> str:
    """Render a ranking as JSON using the API schemas."""
    payload = {
        "period": {
            "start": result.period.start.isoformat(),
            "end": result.period.end.isoformat(),
        },
        "location": {
            "latitude": result.location.latitude,
            "longitude": result.location.longitude,
        },
        "activities": [
            ActivityRankingInfo.from_ranking(ranking, top_reasons).model_dump(mode="json", by_alias=True)
            for ranking in result.activities
        ],
    }
    return json.dumps(payload, indent=2)


def main(argv=None):
    """Main ranking function."""
    parser = argparse.ArgumentParser(description="Rank activities for a daily forecast CSV")
    parser.add_argument(
        "forecast",
        type=Path,
        help="Daily forecast CSV",
    )
    parser.add_argument(
        "--marine",
        type=Path,
        default=None,
        help="Optional marine daily forecast CSV",
    )
    parser.add_argument(
        "--activities",
        nargs="+",
        default=None,
        help="Activities to rank (default: all)",
    )
    parser.add_argument("--lat", type=float, default=None, help="Latitude to echo in the output")
    parser.add_argument("--lon", type=float, default=None, help="Longitude to echo in the output")
    parser.add_argument(
        "--format",
        choices=["table", "json"],
        default="table",
        help="Output format",
    )
    parser.add_argument(
        "--top-reasons",
        type=int,
        default=DEFAULT_TOP_REASONS,
        help="Reasons shown per day",
    )
    parser.add_argument(
        "--log-level",
        default=os.environ.get("ACTIVITYRANK_LOG_LEVEL", "INFO"),
        help="Logging level (default from ACTIVITYRANK_LOG_LEVEL)",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    logger.info(f"Loading forecast from {args.forecast}")
    forecast_df = pd.read_csv(args.forecast)
    marine_df = pd.read_csv(args.marine) if args.marine else None
    weather = daily_weather_from_frame(forecast_df, marine_df)

    location = None
    if args.lat is not None and args.lon is not None:
        location = Location(latitude=args.lat, longitude=args.lon)
        region = find_coastal_region(args.lat, args.lon)
        if region is None and marine_df is not None:
            logger.warning("Marine data supplied for a location outside known coastal regions")

    try:
        result = rank_activities(weather, args.activities, location)
    except ValueError as e:
        logger.error(str(e))
        return 1

    if args.format == "json":
        print(format_json(result, args.top_reasons))
    else:
        print(format_table(result, args.top_reasons))
    return 0


if __name__ == "__main__":
    sys.exit(main())
