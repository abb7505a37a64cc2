"""Tests for deskplanner/io/structure.py."""
import json

import pytest
from deskplanner.core.model import Point
from deskplanner.io.structure import (
    floor_from_dict,
    floor_to_dict,
    load_floor,
    load_walls,
    save_floor,
)


def test_floor_to_dict_shape(office):
    data = floor_to_dict(office)
    assert data["floor"] == 1
    structure = data["structure"]
    assert structure["nodes"][0] == {"point": {"x": 0.0, "y": 0.0}}
    assert structure["edges"] == [[0, 1], [1, 2], [2, 3], [0, 3]]
    room = structure["rooms"][0]
    assert room["roomId"] == 1
    assert room["roomName"] == "Room 1"
    assert room["isDirectChild"] is True
    assert room["roomsInside"] == []
    assert len(room["points"]) == 4
    assert room["area"] == pytest.approx(4.0)


def test_save_and_load_floor(tmp_path, office):
    office.draw_wall(Point(50, 0), Point(50, 100))
    path = tmp_path / "floors" / "floor1.json"
    save_floor(office, str(path))

    stored = json.loads(path.read_text(encoding="utf-8"))
    assert len(stored["structure"]["rooms"]) == 2

    restored = load_floor(str(path))
    assert restored.floor == 1
    assert restored.extractor.edges == office.extractor.edges
    assert len(restored.rooms()) == 2


def test_floor_from_dict_accepts_flat_points():
    data = {
        "floor": "3",
        "structure": {
            "nodes": [{"x": 0, "y": 0}, {"x": 10, "y": 0}, {"x": 5, "y": 8}],
            "edges": [[0, 1], [1, 2], [0, 2]],
        },
    }
    bp = floor_from_dict(data)
    assert bp.floor == 3
    assert len(bp.rooms()) == 1


@pytest.mark.parametrize(
    "structure, match",
    [
        ({"nodes": [{"point": {"x": 0}}], "edges": []}, "Invalid node 0"),
        ({"nodes": [{"x": 0, "y": 0}], "edges": [[0]]}, "Invalid edge 0"),
        ({"nodes": [{"x": 0, "y": 0}], "edges": [["a", 0]]}, "Invalid edge 0"),
        ({"nodes": [{"x": 0, "y": 0}], "edges": [[0, 5]]}, "missing node"),
        ({"nodes": [{"x": 0, "y": 0}, {"x": 1, "y": 0}], "edges": [[True, 0]]}, "Invalid edge 0"),
        ([], "Invalid structure"),
        ({"nodes": 5}, "Invalid nodes"),
        ({"edges": 3}, "Invalid edges"),
    ],
)
def test_floor_from_dict_malformed(structure, match):
    with pytest.raises(ValueError, match=match):
        floor_from_dict({"floor": 1, "structure": structure})


def test_load_floor_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_floor(str(tmp_path / "nope.json"))


def test_load_walls(tmp_path):
    path = tmp_path / "walls.json"
    path.write_text(
        json.dumps([
            {"start": {"x": 0, "y": 0}, "end": {"x": 10, "y": 0}},
            {"start": {"point": {"x": 10, "y": 0}}, "end": {"point": {"x": 10, "y": 10}}},
        ]),
        encoding="utf-8",
    )
    walls = load_walls(str(path))
    assert len(walls) == 2
    assert walls[1].end == Point(10, 10)


def test_load_walls_malformed(tmp_path):
    path = tmp_path / "walls.json"
    path.write_text(json.dumps([{"start": {"x": 0, "y": 0}}]), encoding="utf-8")
    with pytest.raises(ValueError, match="Invalid wall 0"):
        load_walls(str(path))

    path.write_text(json.dumps({"walls": []}), encoding="utf-8")
    with pytest.raises(ValueError, match="JSON array"):
        load_walls(str(path))
