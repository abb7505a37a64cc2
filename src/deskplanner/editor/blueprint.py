"""Blueprint editing: walls drawn by the user and the rooms they enclose.

A ``Blueprint`` keeps the list of walls of one floor in step with the
floor's ``CycleExtractor``. Drawing a wall across existing ones splits both
at the crossings, so rooms are always bounded by walls that meet at nodes.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence, Set

from .. import config
from ..core.model import Point, Room, Segment, same_position
from ..geom.intersections import (
    IntersectionHit,
    collinear_walls,
    find_crossings,
    nearest_intersection,
    point_distance,
    point_in_polygon,
    point_on_segment,
    polygon_in_polygon,
    polygons_intersect,
    same_segment,
    segment_rect_collision,
)
from ..geom.polygon import polygon_area
from ..graph.cycles import CycleExtractor

LOGGER = logging.getLogger(__name__)


class Blueprint:
    """Walls and rooms of a single floor."""

    def __init__(self, floor: int = 1, extractor: Optional[CycleExtractor] = None):
        self.floor = floor
        self.extractor = extractor if extractor is not None else CycleExtractor()
        self._walls: List[Segment] = []

    @classmethod
    def from_structure(
        cls, floor: int, points: Sequence[Point], edges: Sequence[Sequence[int]]
    ) -> "Blueprint":
        """Rebuild a blueprint from stored nodes and edges.

        Raises:
            ValueError: If an edge references a missing node.
        """
        extractor = CycleExtractor.from_structure(points, edges)
        blueprint = cls(floor, extractor)
        nodes = extractor.nodes
        blueprint._walls = [Segment(nodes[a].point, nodes[b].point) for a, b in extractor.edges]
        return blueprint

    @property
    def walls(self) -> List[Segment]:
        return list(self._walls)

    def _wall_index(self, segment: Segment) -> Optional[int]:
        for index, wall in enumerate(self._walls):
            if same_segment(wall, segment):
                return index
        return None

    def has_wall(self, segment: Segment) -> bool:
        return self._wall_index(segment) is not None

    def preview_wall(self, start: Point, end: Point) -> IntersectionHit:
        """Crossings a wall from ``start`` to ``end`` would make, without drawing it."""
        return nearest_intersection(Segment(start, end), self._walls)

    def draw_wall(self, start: Point, end: Point) -> List[Segment]:
        """Draw a wall, splitting it and every wall it crosses at the crossings.

        Args:
            start: Point where the wall starts.
            end: Point where the wall ends.

        Returns:
            The wall pieces actually added, in order from ``start``. Pieces
            running along existing walls are not added again, so the result
            is empty for zero-length walls and walls that already exist.
        """
        segment = Segment(start, end)
        if same_position(start, end):
            LOGGER.debug("Ignoring zero-length wall at %s", start)
            return []
        if self.has_wall(segment):
            LOGGER.debug("Wall %s already exists", segment)
            return []

        overlaps = collinear_walls(segment, self._walls)

        cuts: List[Point] = []
        for crossing in find_crossings(segment, self._walls):
            wall, point = crossing.wall, crossing.point
            if not (same_position(point, wall.start) or same_position(point, wall.end)):
                self._split_wall(wall, point)
            if not (same_position(point, start) or same_position(point, end)):
                cuts.append(point)

        # Walls along the same line share the overlapping pieces
        for wall in overlaps:
            inside = [p for p in (start, end) if _strictly_inside(p, wall)]
            inside.sort(key=lambda p: point_distance(wall.start, p))
            piece = wall
            for point in inside:
                self._split_wall(piece, point)
                piece = Segment(point, wall.end)
            cuts.extend(p for p in (wall.start, wall.end) if _strictly_inside(p, segment))

        cuts.sort(key=lambda p: point_distance(start, p))
        stops = [start]
        for point in cuts + [end]:
            if not same_position(point, stops[-1]):
                stops.append(point)

        added = []
        for a, b in zip(stops, stops[1:]):
            piece = Segment(a, b)
            if self.has_wall(piece):
                continue
            self._walls.append(piece)
            self.extractor.insert_edge(piece)
            added.append(piece)

        LOGGER.debug("Drew %s as %d piece(s)", segment, len(added))
        return added

    def _split_wall(self, wall: Segment, point: Point) -> None:
        index = self._walls.index(wall)
        self._walls[index : index + 1] = [Segment(wall.start, point), Segment(point, wall.end)]
        outcome = self.extractor.split_edge(wall, point)
        if not outcome.applied:
            LOGGER.warning("Wall %s could not be split at %s in the graph", wall, point)

    def erase_wall(self, segment: Segment) -> bool:
        """Erase a wall in either orientation.

        Returns:
            True if the wall existed and was removed from the graph.
        """
        index = self._wall_index(segment)
        if index is None:
            LOGGER.debug("No wall %s to erase", segment)
            return False

        wall = self._walls.pop(index)
        outcome = self.extractor.remove_edge(wall)
        if not outcome.applied:
            LOGGER.warning("Wall %s was not in the graph", wall)
        return outcome.applied

    def rooms(self) -> List[Room]:
        """Extract the rooms currently enclosed by the walls.

        Rooms are numbered in extraction order. A room whose boundary lies
        strictly inside another room is nested in the smallest such room.
        """
        cycles = self.extractor.run()
        areas = [polygon_area(cycle) for cycle in cycles]

        parents: Dict[int, int] = {}
        for i, inner in enumerate(cycles):
            containers = [
                j
                for j, outer in enumerate(cycles)
                if j != i
                and polygon_in_polygon(inner, outer)
                and not polygons_intersect(inner, outer)
            ]
            if containers:
                parents[i] = min(containers, key=lambda j: areas[j])

        children: Dict[int, Set[int]] = {}
        for child, parent in parents.items():
            children.setdefault(parent, set()).add(child)

        rooms = []
        for i, cycle in enumerate(cycles):
            number = i + 1
            rooms.append(
                Room(
                    room_id=number,
                    number=number,
                    name=config.ROOM_NAME_PATTERN.format(number=number),
                    points=tuple(cycle),
                    area=areas[i],
                    is_direct_child=i not in parents,
                    rooms_inside=tuple(sorted(c + 1 for c in children.get(i, ()))),
                )
            )
        return rooms

    def room_at(self, point: Point) -> Optional[Room]:
        """Smallest room containing ``point``, if any."""
        containing = [room for room in self.rooms() if point_in_polygon(point, room.points)]
        if not containing:
            return None
        return min(containing, key=lambda room: room.area)

    def blocked_by_wall(self, rect_points: Sequence[Point]) -> bool:
        """Check if any wall crosses a rectangle, e.g. a table being placed."""
        return any(segment_rect_collision(rect_points, wall.start, wall.end) for wall in self._walls)


def _strictly_inside(point: Point, segment: Segment) -> bool:
    return (
        point_on_segment(point, segment)
        and not same_position(point, segment.start)
        and not same_position(point, segment.end)
    )
