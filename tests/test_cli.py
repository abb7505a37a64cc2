"""Tests for the deskplanner command line."""
import json

import pytest

from typer.testing import CliRunner
from deskplanner.cli import app

runner = CliRunner()

WALLS = [
    {"start": {"x": 0, "y": 0}, "end": {"x": 100, "y": 0}},
    {"start": {"x": 100, "y": 0}, "end": {"x": 100, "y": 100}},
    {"start": {"x": 100, "y": 100}, "end": {"x": 0, "y": 100}},
    {"start": {"x": 0, "y": 100}, "end": {"x": 0, "y": 0}},
    {"start": {"x": 50, "y": 0}, "end": {"x": 50, "y": 100}},
]


def test_build_then_rooms(tmp_path):
    walls = tmp_path / "walls.json"
    walls.write_text(json.dumps(WALLS), encoding="utf-8")
    out = tmp_path / "floor.json"

    result = runner.invoke(app, ["build", "--walls", str(walls), "--out", str(out), "--floor", "2"])
    assert result.exit_code == 0, result.output
    assert "Loaded 5 walls" in result.output

    stored = json.loads(out.read_text(encoding="utf-8"))
    assert stored["floor"] == 2
    assert len(stored["structure"]["rooms"]) == 2

    result = runner.invoke(app, ["rooms", "--floor-file", str(out)])
    assert result.exit_code == 0, result.output
    assert "Room 2" in result.output


def test_rooms_without_closed_rooms(tmp_path):
    floor = tmp_path / "floor.json"
    floor.write_text(
        json.dumps({"floor": 1, "structure": {
            "nodes": [{"point": {"x": 0, "y": 0}}, {"point": {"x": 10, "y": 0}}],
            "edges": [[0, 1]],
        }}),
        encoding="utf-8",
    )
    result = runner.invoke(app, ["rooms", "--floor-file", str(floor)])
    assert result.exit_code == 0
    assert "No closed rooms" in result.output


def test_missing_file_exits_with_error(tmp_path):
    result = runner.invoke(app, ["rooms", "--floor-file", str(tmp_path / "missing.json")])
    assert result.exit_code == 1
    assert "File not found" in result.output


@pytest.mark.parametrize(
    "structure",
    [[], {"nodes": 5}, {"edges": 3}],
)
def test_malformed_structure_exits_with_error(tmp_path, structure):
    floor = tmp_path / "floor.json"
    floor.write_text(json.dumps({"floor": 1, "structure": structure}), encoding="utf-8")
    result = runner.invoke(app, ["rooms", "--floor-file", str(floor)])
    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert "Error: Invalid" in result.output


def test_invalid_json_exits_with_error(tmp_path):
    walls = tmp_path / "walls.json"
    walls.write_text("{not json", encoding="utf-8")
    result = runner.invoke(app, ["build", "--walls", str(walls), "--out", str(tmp_path / "o.json")])
    assert result.exit_code == 1
    assert "Invalid JSON" in result.output
