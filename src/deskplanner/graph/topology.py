"""Topology analysis for wall graphs and rooms.

This module provides NetworkX views of the wall graph held by a
``CycleExtractor`` and of the adjacency between extracted rooms.
"""

from __future__ import annotations

from typing import Dict, List, Sequence, Set, Tuple

import networkx as nx

from ..core.model import Room
from .cycles import CycleExtractor


def build_wall_graph(extractor: CycleExtractor) -> nx.Graph:
    """Build an undirected graph of the walls.

    Args:
        extractor: Extractor holding the persistent nodes and edges.

    Returns:
        NetworkX Graph whose nodes are node indices with a ``pos`` attribute
        and whose edges are walls.
    """
    G = nx.Graph()
    for index, node in enumerate(extractor.nodes):
        G.add_node(index, pos=(node.point.x, node.point.y))
    G.add_edges_from(extractor.edges)
    return G


def expected_room_count(G: nx.Graph) -> int:
    """Number of bounded faces of a planar wall graph.

    By Euler's formula a planar graph with V nodes, E edges and C connected
    components has E - V + C bounded faces.
    """
    if G.number_of_nodes() == 0:
        return 0
    return G.number_of_edges() - G.number_of_nodes() + nx.number_connected_components(G)


def dangling_nodes(G: nx.Graph) -> List[int]:
    """Nodes that end a single wall and cannot bound a room."""
    return sorted(node for node, degree in G.degree() if degree == 1)


def _room_wall_keys(room: Room) -> Set[Tuple[Tuple[int, int], Tuple[int, int]]]:
    keys = set()
    for wall in room.walls:
        a, b = wall.start.key(), wall.end.key()
        keys.add((a, b) if a <= b else (b, a))
    return keys


def build_room_graph(rooms: Sequence[Room]) -> nx.Graph:
    """Build a graph representing which rooms share a wall.

    Rooms are nodes (keyed by ``room_id``); an edge joins two rooms that
    have at least one boundary wall in common.
    """
    G = nx.Graph()
    walls: Dict[int, Set] = {}
    for room in rooms:
        G.add_node(room.room_id, name=room.name, area=room.area)
        walls[room.room_id] = _room_wall_keys(room)

    for i, first in enumerate(rooms):
        for second in rooms[i + 1 :]:
            shared = walls[first.room_id] & walls[second.room_id]
            if shared:
                G.add_edge(first.room_id, second.room_id, shared_walls=len(shared))
    return G
