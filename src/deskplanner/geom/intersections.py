"""Segment and polygon predicates for wall editing.

Pure functions over points and segments. None of them raise: degenerate
input yields "no intersection" instead.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from ..core.model import Point, Segment, same_position

# Largest distance from a line at which a point still counts as on it
COLLINEAR_TOLERANCE = 1e-6


@dataclass(frozen=True)
class Crossing:
    """An existing wall crossed by another one, and where."""

    wall: Segment
    point: Point


@dataclass(frozen=True)
class IntersectionHit:
    """Relevant crossings of a newly drawn wall.

    Attributes:
        start: Crossing located exactly at the start of the new wall, if any.
        end: Nearest crossing away from the start, if any.
    """

    start: Optional[Crossing] = None
    end: Optional[Crossing] = None


def is_degenerate(segment: Segment) -> bool:
    """Check if a segment starts where it ends."""
    return segment.start == segment.end


def same_segment(s1: Segment, s2: Segment) -> bool:
    """Check if two segments join the same node positions, in any orientation."""
    return (
        same_position(s1.start, s2.start) and same_position(s1.end, s2.end)
    ) or (same_position(s1.start, s2.end) and same_position(s1.end, s2.start))


def segment_intersect(seg_a: Segment, seg_b: Segment) -> Optional[Point]:
    """Intersection point of two segments, or None.

    Args:
        seg_a: First segment.
        seg_b: Second segment.

    Returns:
        The point where both segments meet, or None when either segment has
        zero length, they are parallel, or they would only meet on their
        extensions.
    """
    if is_degenerate(seg_a) or is_degenerate(seg_b):
        return None

    a1, a2 = seg_a.start, seg_a.end
    b1, b2 = seg_b.start, seg_b.end

    denominator = (b2.y - b1.y) * (a2.x - a1.x) - (b2.x - b1.x) * (a2.y - a1.y)
    # Lines are parallel
    if denominator == 0:
        return None

    ua = ((b2.x - b1.x) * (a1.y - b1.y) - (b2.y - b1.y) * (a1.x - b1.x)) / denominator
    ub = ((a2.x - a1.x) * (a1.y - b1.y) - (a2.y - a1.y) * (a1.x - b1.x)) / denominator

    if math.isnan(ua) or math.isnan(ub):
        return None
    if ua < 0 or ua > 1 or ub < 0 or ub > 1:
        return None

    return Point(a1.x + ua * (a2.x - a1.x), a1.y + ua * (a2.y - a1.y))


def point_in_polygon(point: Point, polygon: Sequence[Point]) -> bool:
    """Check if a point lies inside a polygon using ray casting.

    A point equal to one of the polygon vertices counts as inside.
    """
    inside = False
    j = len(polygon) - 1
    for i in range(len(polygon)):
        xi, yi = polygon[i].x, polygon[i].y
        xj, yj = polygon[j].x, polygon[j].y

        if (xi == point.x and yi == point.y) or (xj == point.x and yj == point.y):
            return True

        # Does the horizontal ray from the point cross edge (j, i)?
        if (yi >= point.y) != (yj >= point.y) and point.x < (xj - xi) * (
            point.y - yi
        ) / (yj - yi) + xi:
            inside = not inside
        j = i

    return inside


def polygon_in_polygon(inner: Sequence[Point], outer: Sequence[Point]) -> bool:
    """Check if every vertex of ``inner`` lies inside ``outer``."""
    return all(point_in_polygon(p, outer) for p in inner)


def _closed_edges(polygon: Sequence[Point]) -> Iterable[Segment]:
    n = len(polygon)
    for i in range(n):
        yield Segment(polygon[i], polygon[(i + 1) % n])


def polygons_intersect(polygon_a: Sequence[Point], polygon_b: Sequence[Point]) -> bool:
    """Check if any boundary edge of one polygon meets one of the other."""
    edges_b = list(_closed_edges(polygon_b))
    for edge_a in _closed_edges(polygon_a):
        for edge_b in edges_b:
            if segment_intersect(edge_a, edge_b) is not None:
                return True
    return False


def segment_rect_collision(rect_points: Sequence[Point], start: Point, end: Point) -> bool:
    """Check if the segment start→end crosses a side of a rectangle.

    ``rect_points`` are the four corners in boundary order, so rotated
    rectangles work as well.
    """
    line = Segment(start, end)
    return any(segment_intersect(line, side) is not None for side in _closed_edges(rect_points))


def point_distance(p1: Point, p2: Point) -> float:
    """Calculate Euclidean distance between two points."""
    return math.hypot(p1.x - p2.x, p1.y - p2.y)


def find_crossings(segment: Segment, walls: Iterable[Segment]) -> list[Crossing]:
    """All walls the segment meets, with the meeting points."""
    crossings = []
    for wall in walls:
        if wall is segment:
            continue
        point = segment_intersect(wall, segment)
        if point is not None:
            crossings.append(Crossing(wall, point))
    return crossings


def _line_distance(point: Point, segment: Segment) -> float:
    dx, dy = segment.end.x - segment.start.x, segment.end.y - segment.start.y
    cross = dx * (point.y - segment.start.y) - dy * (point.x - segment.start.x)
    return abs(cross) / math.hypot(dx, dy)


def point_on_segment(point: Point, segment: Segment) -> bool:
    """Check if a point lies on a segment, endpoints included."""
    if is_degenerate(segment):
        return same_position(point, segment.start)
    if _line_distance(point, segment) > COLLINEAR_TOLERANCE:
        return False
    return (
        min(segment.start.x, segment.end.x) - COLLINEAR_TOLERANCE
        <= point.x
        <= max(segment.start.x, segment.end.x) + COLLINEAR_TOLERANCE
        and min(segment.start.y, segment.end.y) - COLLINEAR_TOLERANCE
        <= point.y
        <= max(segment.start.y, segment.end.y) + COLLINEAR_TOLERANCE
    )


def collinear_walls(segment: Segment, walls: Iterable[Segment]) -> list[Segment]:
    """Walls lying on the same line as the segment.

    ``segment_intersect`` reports nothing for these, so overlaps have to be
    looked up separately.
    """
    if is_degenerate(segment):
        return []
    return [
        wall
        for wall in walls
        if not is_degenerate(wall)
        and _line_distance(segment.start, wall) <= COLLINEAR_TOLERANCE
        and _line_distance(segment.end, wall) <= COLLINEAR_TOLERANCE
    ]


def nearest_intersection(segment: Segment, walls: Iterable[Segment]) -> IntersectionHit:
    """Relevant crossings of a new wall with the existing ones.

    A crossing exactly at the start of the new wall is reported as ``start``;
    of the others, the one closest to the start is reported as ``end``.
    """
    start: Optional[Crossing] = None
    end: Optional[Crossing] = None
    distance = math.inf

    for crossing in find_crossings(segment, walls):
        d = point_distance(segment.start, crossing.point)
        if d == 0:
            start = crossing
        elif d < distance:
            distance = d
            end = crossing

    return IntersectionHit(start=start, end=end)
