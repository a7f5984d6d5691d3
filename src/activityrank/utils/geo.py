"""Geographic utilities."""

import math
from dataclasses import dataclass

COMPASS_POINTS = (
    "N", "NNE", "NE", "ENE", "E", "ESE", "SE", "SSE",
    "S", "SSW", "SW", "WSW", "W", "WNW", "NW", "NNW",
)


@dataclass(frozen=True)
class BoundingBox:
    """Geographic bounding box."""

    west: float
    south: float
    east: float
    north: float

    def contains(self, lat: float, lon: float) -> bool:
        """Check if a point is within this bounding box (edges inclusive)."""
        return (
            self.south <= lat <= self.north
            and self.west <= lon <= self.east
        )

    def to_dict(self) -> dict:
        """Return as dictionary."""
        return {
            "west": self.west,
            "south": self.south,
            "east": self.east,
            "north": self.north,
        }


def compass_direction(degrees: float) -> str:
    """Name the 16-point compass sector for a bearing.

    Sector boundaries sit halfway between points and round towards the
    next point clockwise.

    Args:
        degrees: Bearing in degrees, 0-360

    Returns:
        Compass abbreviation such as "N", "ENE" or "SW"

    Examples:
        >>> compass_direction(0)
        'N'
        >>> compass_direction(225)
        'SW'
        >>> compass_direction(355)
        'N'
    """
    index = int(math.floor(degrees / 22.5 + 0.5)) % 16
    return COMPASS_POINTS[index]
