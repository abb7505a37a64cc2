"""Reader and writer for floor structure documents.

A floor structure document is the JSON shape the reservation backend stores
for each floor:

    {"floor": 1,
     "structure": {"nodes": [{"point": {"x": 0, "y": 0}}, ...],
                   "edges": [[0, 1], ...],
                   "rooms": [{"roomId": 1, "points": [...], ...}, ...]}}

Wall lists fed to the editor are JSON arrays of
``{"start": {"x": .., "y": ..}, "end": {"x": .., "y": ..}}``.
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..core.model import Point, Room, Segment
from ..editor.blueprint import Blueprint


def _parse_point(data: Any) -> Point:
    """Parse an ``{"x": .., "y": ..}`` mapping.

    The editor nests points as ``{"point": {"x": .., "y": ..}}``; both forms
    are accepted.

    Raises:
        ValueError: If coordinates are missing or not numeric.
    """
    if isinstance(data, dict) and "point" in data:
        data = data["point"]
    try:
        return Point(float(data["x"]), float(data["y"]))
    except (KeyError, TypeError, ValueError) as e:
        raise ValueError(f"Invalid point {data!r}: {e}") from e


def _point_to_dict(point: Point) -> Dict[str, float]:
    return {"x": point.x, "y": point.y}


def room_to_dict(room: Room) -> Dict[str, Any]:
    """Convert a room to the stored room format."""
    return {
        "roomId": room.room_id,
        "roomNumber": room.number,
        "roomName": room.name,
        "area": room.area,
        "isDirectChild": room.is_direct_child,
        "points": [_point_to_dict(p) for p in room.points],
        "roomsInside": list(room.rooms_inside),
    }


def floor_to_dict(blueprint: Blueprint, rooms: Optional[List[Room]] = None) -> Dict[str, Any]:
    """Convert a blueprint to a floor structure document.

    Args:
        blueprint: The blueprint to serialise.
        rooms: Rooms to store; extracted from the blueprint when omitted.

    Returns:
        Dictionary ready for ``json.dump``.
    """
    if rooms is None:
        rooms = blueprint.rooms()
    extractor = blueprint.extractor
    return {
        "floor": blueprint.floor,
        "structure": {
            "nodes": [{"point": _point_to_dict(node.point)} for node in extractor.nodes],
            "edges": [[a, b] for a, b in extractor.edges],
            "rooms": [room_to_dict(room) for room in rooms],
        },
    }


def floor_from_dict(data: Dict[str, Any]) -> Blueprint:
    """Rebuild a blueprint from a floor structure document.

    Stored rooms are not read back; they are derived again from the walls.

    Raises:
        ValueError: If the document is malformed.
    """
    if not isinstance(data, dict):
        raise ValueError("Floor document must be a JSON object")

    structure = data.get("structure", {})
    if not isinstance(structure, dict):
        raise ValueError(f"Invalid structure: expected an object, got {type(structure).__name__}")
    try:
        floor = int(data.get("floor", 1))
    except (TypeError, ValueError) as e:
        raise ValueError(f"Invalid floor number {data.get('floor')!r}") from e

    nodes = structure.get("nodes", [])
    edge_list = structure.get("edges", [])
    for key, value in (("nodes", nodes), ("edges", edge_list)):
        if not isinstance(value, list):
            raise ValueError(f"Invalid {key}: expected a list, got {type(value).__name__}")

    points = []
    for i, node in enumerate(nodes):
        try:
            points.append(_parse_point(node))
        except ValueError as e:
            raise ValueError(f"Invalid node {i}: {e}") from e

    edges = []
    for i, edge in enumerate(edge_list):
        if (
            not isinstance(edge, (list, tuple))
            or len(edge) != 2
            # bool is an int subclass
            or not all(isinstance(index, int) and not isinstance(index, bool) for index in edge)
        ):
            raise ValueError(f"Invalid edge {i}: expected a pair of node indices, got {edge!r}")
        edges.append(edge)

    return Blueprint.from_structure(floor, points, edges)


def load_floor(path: str) -> Blueprint:
    """Load a floor from a structure document file.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ValueError: If the JSON data is invalid or malformed.
    """
    file_path = Path(path)
    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    with open(file_path, encoding="utf-8") as f:
        data = json.load(f)

    return floor_from_dict(data)


def save_floor(blueprint: Blueprint, output_path: str, rooms: Optional[List[Room]] = None) -> None:
    """Save a blueprint as a floor structure document."""
    floor_data = floor_to_dict(blueprint, rooms)

    Path(output_path).parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(floor_data, f, indent=2)


def load_walls(path: str) -> List[Segment]:
    """Load a list of walls to draw.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ValueError: If the JSON data is invalid or malformed.
    """
    file_path = Path(path)
    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    with open(file_path, encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, list):
        raise ValueError("Wall file must contain a JSON array")

    walls = []
    for i, wall in enumerate(data):
        try:
            walls.append(Segment(_parse_point(wall["start"]), _parse_point(wall["end"])))
        except (KeyError, TypeError, ValueError) as e:
            raise ValueError(f"Invalid wall {i}: {e}") from e
    return walls
