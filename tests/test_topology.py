"""Tests for deskplanner/graph/topology.py."""
from deskplanner.core.model import Point
from deskplanner.editor.blueprint import Blueprint
from deskplanner.graph.cycles import CycleExtractor
from deskplanner.graph.topology import (
    build_room_graph,
    build_wall_graph,
    dangling_nodes,
    expected_room_count,
)

from .helpers import RIGHT_SQUARE, SQUARE, build, seg


def test_wall_graph_mirrors_extractor(two_squares):
    G = build_wall_graph(two_squares)
    assert G.number_of_nodes() == len(two_squares.nodes)
    assert G.number_of_edges() == len(two_squares.edges)
    assert G.nodes[0]["pos"] == (0.0, 0.0)


def test_expected_room_count_empty():
    assert expected_room_count(build_wall_graph(CycleExtractor())) == 0


def test_run_matches_euler_count():
    layouts = [
        SQUARE,
        SQUARE + RIGHT_SQUARE,
        SQUARE + [seg(-5, -5, 0, 0)],
        [seg(0, 0, 10, 0)],
        [seg(0, 0, 10, 10), seg(10, 10, 0, 20), seg(0, 20, 0, 0),
         seg(10, 10, 20, 0), seg(20, 0, 20, 20), seg(20, 20, 10, 10)],
    ]
    for walls in layouts:
        extractor = build(walls)
        assert len(extractor.run()) == expected_room_count(build_wall_graph(extractor))


def test_dangling_nodes():
    extractor = build(SQUARE + [seg(10, 10, 15, 15)])
    G = build_wall_graph(extractor)
    assert dangling_nodes(G) == [extractor.find_node(Point(15, 15))]


def test_room_graph_adjacency():
    bp = Blueprint()
    corners = [Point(0, 0), Point(150, 0), Point(150, 50), Point(0, 50)]
    for a, b in zip(corners, corners[1:] + corners[:1]):
        bp.draw_wall(a, b)
    bp.draw_wall(Point(50, 0), Point(50, 50))
    bp.draw_wall(Point(100, 0), Point(100, 50))

    rooms = bp.rooms()
    assert len(rooms) == 3
    G = build_room_graph(rooms)
    degrees = sorted(d for _, d in G.degree())
    # Rooms in a row: the middle one touches both others
    assert degrees == [1, 1, 2]
    assert G.number_of_edges() == 2
