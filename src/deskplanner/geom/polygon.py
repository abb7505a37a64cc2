"""Polygon measurements for rooms and walls.

Lengths and areas are converted from canvas pixels to metres using
``config.PIXELS_PER_METRE``.
"""

from __future__ import annotations

import math
from typing import Sequence

from shapely.geometry import Polygon

from .. import config
from ..core.model import Point


def centre_point(p1: Point, p2: Point) -> Point:
    """Midpoint between two points."""
    return Point((p1.x + p2.x) / 2, (p1.y + p2.y) / 2)


def wall_length(start: Point, end: Point) -> float:
    """Length of a wall in metres, rounded to 2 decimals."""
    pixels = math.hypot(end.x - start.x, end.y - start.y)
    return round(round(pixels) / config.PIXELS_PER_METRE, 2)


def polygon_area(points: Sequence[Point]) -> float:
    """Calculate the area enclosed by a room boundary in square metres.

    Args:
        points: Ordered boundary points, in either winding order.

    Returns:
        Area in m², or 0.0 for boundaries with fewer than 3 points or
        without a valid interior.
    """
    if len(points) < 3:
        return 0.0

    polygon = Polygon([(p.x, p.y) for p in points])
    if not polygon.is_valid:
        # Self-touching boundaries (figure eights) are repaired with buffer(0)
        polygon = polygon.buffer(0)

    area_square_pixels = polygon.area
    return round(area_square_pixels / (config.PIXELS_PER_METRE**2), config.AREA_PRECISION)
