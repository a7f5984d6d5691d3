"""Coastal classification for deciding when to attach marine forecasts.

A location counts as coastal when it falls inside one of a fixed set of
bounding boxes around well-known surf coasts. Marine forecasts are only
requested for coastal locations; inland days simply carry no marine block.
"""

from typing import Optional

from activityrank.utils.geo import BoundingBox

COASTAL_REGIONS: dict[str, BoundingBox] = {
    # North America
    "California Coast": BoundingBox(west=-124.5, south=32.5, east=-117.0, north=42.0),
    "Pacific Northwest Coast": BoundingBox(west=-124.8, south=42.0, east=-123.5, north=48.5),
    "Hawaii": BoundingBox(west=-160.5, south=18.8, east=-154.7, north=22.3),
    "US East Coast": BoundingBox(west=-81.5, south=25.0, east=-69.9, north=42.0),
    "Gulf Coast": BoundingBox(west=-97.5, south=25.8, east=-82.5, north=30.5),
    "Baja California": BoundingBox(west=-117.2, south=22.8, east=-109.4, north=32.5),
    "Mexico Pacific Coast": BoundingBox(west=-106.0, south=15.5, east=-94.0, north=23.0),
    "Costa Rica": BoundingBox(west=-86.0, south=8.0, east=-82.5, north=11.2),
    # South America
    "Peru Coast": BoundingBox(west=-81.5, south=-18.5, east=-76.0, north=-3.5),
    "Chile Coast": BoundingBox(west=-74.0, south=-42.0, east=-70.5, north=-18.0),
    "Brazil Coast": BoundingBox(west=-49.0, south=-29.5, east=-34.8, north=-2.5),
    # Europe
    "Portugal Coast": BoundingBox(west=-9.6, south=36.9, east=-8.0, north=42.2),
    "Biscay Coast": BoundingBox(west=-4.5, south=43.2, east=-1.0, north=46.5),
    "Cornwall": BoundingBox(west=-6.5, south=49.9, east=-4.0, north=51.3),
    "Ireland West Coast": BoundingBox(west=-10.7, south=51.4, east=-8.3, north=55.4),
    "Canary Islands": BoundingBox(west=-18.2, south=27.6, east=-13.3, north=29.5),
    "Mediterranean Coast": BoundingBox(west=-5.5, south=35.8, east=16.0, north=44.5),
    # Africa
    "Morocco Coast": BoundingBox(west=-10.0, south=28.0, east=-6.5, north=34.0),
    "South Africa Coast": BoundingBox(west=17.8, south=-35.0, east=32.9, north=-28.5),
    # Asia / Pacific
    "Bali": BoundingBox(west=114.4, south=-8.9, east=115.8, north=-8.0),
    "Japan Pacific Coast": BoundingBox(west=130.0, south=31.0, east=141.5, north=36.5),
    "Philippines East Coast": BoundingBox(west=124.0, south=9.0, east=126.7, north=14.0),
    "Sri Lanka Coast": BoundingBox(west=79.6, south=5.9, east=81.9, north=9.9),
    # Oceania
    "Australia East Coast": BoundingBox(west=150.0, south=-38.5, east=153.7, north=-24.0),
    "Australia South-West Coast": BoundingBox(west=114.5, south=-35.2, east=116.5, north=-31.0),
    "New Zealand": BoundingBox(west=166.0, south=-47.5, east=178.7, north=-34.3),
    "Fiji": BoundingBox(west=176.8, south=-19.3, east=180.0, north=-16.0),
}


def find_coastal_region(lat: float, lon: float) -> Optional[str]:
    """Name the first coastal region containing a point, or None if inland."""
    for name, bbox in COASTAL_REGIONS.items():
        if bbox.contains(lat=lat, lon=lon):
            return name
    return None


def is_coastal(lat: float, lon: float) -> bool:
    """Check whether marine forecasts should be attached for a location."""
    return find_coastal_region(lat, lon) is not None
