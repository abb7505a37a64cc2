"""Geometry kernel for the floor-plan editor.

This module provides the segment and polygon predicates used by the cycle
extractor and the blueprint, and measurements of walls and rooms.
"""

from .intersections import (
    Crossing,
    IntersectionHit,
    collinear_walls,
    find_crossings,
    is_degenerate,
    nearest_intersection,
    point_in_polygon,
    point_on_segment,
    polygon_in_polygon,
    polygons_intersect,
    same_segment,
    segment_intersect,
    segment_rect_collision,
)
from .polygon import centre_point, polygon_area, wall_length

__all__ = [
    "Crossing",
    "IntersectionHit",
    "centre_point",
    "collinear_walls",
    "find_crossings",
    "is_degenerate",
    "nearest_intersection",
    "point_in_polygon",
    "point_on_segment",
    "polygon_area",
    "polygon_in_polygon",
    "polygons_intersect",
    "same_segment",
    "segment_intersect",
    "segment_rect_collision",
    "wall_length",
]
