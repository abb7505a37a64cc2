"""Core data models for the floor-plan editor.

This module defines the fundamental data structures shared by the geometry
kernel, the cycle extractor and the blueprint: points, wall segments, graph
nodes and rooms.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple

from .. import config

Edge = Tuple[int, int]


@dataclass(frozen=True)
class Point:
    """Represents a 2D point on the floor canvas.

    Coordinates are rounded to ``config.POINT_PRECISION`` decimals on
    construction so that values produced by floating-point arithmetic
    compare equal to the values the user drew.

    Attributes:
        x: The x-coordinate of the point.
        y: The y-coordinate of the point.
    """

    x: float = 0.0
    y: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", round(float(self.x), config.POINT_PRECISION))
        object.__setattr__(self, "y", round(float(self.y), config.POINT_PRECISION))

    def key(self) -> Tuple[int, int]:
        """Truncated coordinates used to match nodes."""
        return math.trunc(self.x), math.trunc(self.y)


def same_position(p1: Point, p2: Point) -> bool:
    """Check if two points fall on the same node position.

    Two points are identical for the graph when their truncated integer
    coordinates match, which is looser than ``p1 == p2``.
    """
    return p1.key() == p2.key()


@dataclass(frozen=True)
class Segment:
    """Represents a wall drawn between two points.

    Attributes:
        start: Point where the wall was started.
        end: Point where the wall was finished.
    """

    start: Point
    end: Point

    @classmethod
    def from_coords(cls, x1: float, y1: float, x2: float, y2: float) -> "Segment":
        return cls(Point(x1, y1), Point(x2, y2))

    def reversed(self) -> "Segment":
        return Segment(self.end, self.start)


@dataclass(eq=False)
class Node:
    """A vertex of the wall graph.

    Nodes compare by identity. ``adj`` holds the neighbouring nodes and is
    only populated on the working copies built during cycle extraction.
    """

    point: Point
    adj: List["Node"] = field(default_factory=list)

    def detached(self) -> "Node":
        """Copy of this node with an empty adjacency list."""
        return Node(self.point)


class EditOutcome(Enum):
    """Result of an incremental graph edit."""

    APPLIED = "applied"
    UNCHANGED = "unchanged"
    IGNORED = "ignored"

    @property
    def applied(self) -> bool:
        return self is EditOutcome.APPLIED


@dataclass(frozen=True)
class Room:
    """Represents a room enclosed by walls.

    Attributes:
        room_id: Unique identifier of the room on its floor.
        number: Position of the room in extraction order, starting at 1.
        name: Human-readable name of the room.
        points: Ordered boundary points of the room.
        area: Area of the room in square metres.
        is_direct_child: True when the room is not nested inside another room.
        rooms_inside: IDs of the rooms nested directly inside this one.
    """

    room_id: int
    number: int
    name: str
    points: Tuple[Point, ...]
    area: float
    is_direct_child: bool = True
    rooms_inside: Tuple[int, ...] = ()

    @property
    def walls(self) -> List[Segment]:
        """Boundary of the room as closed wall segments."""
        n = len(self.points)
        return [Segment(self.points[i], self.points[(i + 1) % n]) for i in range(n)]
