"""Minimal cycle extraction for wall graphs.

The editor keeps one ``CycleExtractor`` per floor. Walls are fed to it
incrementally as the user draws, splits and erases them; ``run`` then
recovers every room as the minimal cycle (face) bounded by the walls.

Nodes are identified by their position in the node list, which is also the
index stored in the edges. Removing a node therefore shifts every higher
index down by one.
"""

from __future__ import annotations

import logging
from functools import reduce
from typing import Iterable, List, Optional, Sequence, Tuple

from .. import config
from ..core.model import Edge, EditOutcome, Node, Point, Segment, same_position

LOGGER = logging.getLogger(__name__)

Vector = Tuple[float, float]


class CycleExtractor:
    """Incremental wall graph with on-demand room extraction."""

    def __init__(self) -> None:
        self._nodes: List[Node] = []
        self._edges: List[Edge] = []

    @classmethod
    def from_structure(
        cls, points: Sequence[Point], edges: Iterable[Sequence[int]]
    ) -> "CycleExtractor":
        """Restore an extractor from stored nodes and edges.

        Args:
            points: Node positions in index order.
            edges: Pairs of node indices.

        Returns:
            A new extractor holding the given graph.

        Raises:
            ValueError: If an edge references a missing node or loops on
                a single node.
        """
        extractor = cls()
        extractor._nodes = [Node(point) for point in points]
        for edge in edges:
            a, b = (int(i) for i in edge)
            if not (0 <= a < len(points) and 0 <= b < len(points)):
                raise ValueError(f"Edge {list(edge)} references a missing node")
            if a == b:
                raise ValueError(f"Edge {list(edge)} joins a node to itself")
            extractor._add_edge(a, b)
        return extractor

    @property
    def nodes(self) -> List[Node]:
        return list(self._nodes)

    @property
    def edges(self) -> List[Edge]:
        return list(self._edges)

    @property
    def next_node_index(self) -> int:
        return len(self._nodes)

    def reset(self) -> None:
        """Forget every node and edge."""
        self._nodes = []
        self._edges = []

    def find_node(self, point: Point) -> Optional[int]:
        """Index of the node at the position of ``point``, if any."""
        for index, node in enumerate(self._nodes):
            if same_position(node.point, point):
                return index
        return None

    def _find_or_create(self, point: Point) -> int:
        index = self.find_node(point)
        if index is None:
            self._nodes.append(Node(Point(point.x, point.y)))
            index = len(self._nodes) - 1
        return index

    def _add_edge(self, u: int, v: int) -> bool:
        if u > v:
            u, v = v, u
        if (u, v) in self._edges:
            return False
        self._edges.append((u, v))
        return True

    def insert_edge(self, segment: Segment) -> EditOutcome:
        """Add a wall to the graph.

        Endpoints snap to existing nodes at the same position; new nodes are
        appended otherwise. Inserting the same wall twice changes nothing.
        """
        if same_position(segment.start, segment.end):
            LOGGER.debug("Ignoring zero-length wall %s", segment)
            return EditOutcome.IGNORED

        u = self._find_or_create(segment.start)
        v = self._find_or_create(segment.end)
        if self._add_edge(u, v):
            return EditOutcome.APPLIED
        return EditOutcome.UNCHANGED

    def split_edge(self, old_segment: Segment, midpoint: Point) -> EditOutcome:
        """Split an existing wall in two at ``midpoint``.

        Used when a new wall crosses an old one. The old edge is replaced by
        first↔mid and mid↔second; the midpoint node is created if the new
        wall has not already created it.
        """
        first = self.find_node(old_segment.start)
        second = self.find_node(old_segment.end)
        if first is None or second is None:
            LOGGER.debug("Cannot split %s: endpoint not in graph", old_segment)
            return EditOutcome.IGNORED

        old_edge = (min(first, second), max(first, second))
        if old_edge not in self._edges:
            LOGGER.debug("Cannot split %s: no such edge", old_segment)
            return EditOutcome.IGNORED

        if same_position(midpoint, old_segment.start) or same_position(midpoint, old_segment.end):
            LOGGER.debug("Cannot split %s at its own endpoint %s", old_segment, midpoint)
            return EditOutcome.IGNORED

        middle = self._find_or_create(midpoint)
        self._edges.remove(old_edge)
        self._add_edge(first, middle)
        self._add_edge(middle, second)
        return EditOutcome.APPLIED

    def remove_edge(self, segment: Segment) -> EditOutcome:
        """Erase a wall from the graph.

        Endpoints left without any edge are removed and the indices above
        them shifted down. The higher index is handled first so the lower
        one is still valid when its turn comes.
        """
        first = self.find_node(segment.start)
        second = self.find_node(segment.end)
        if first is None or second is None or first == second:
            LOGGER.debug("Cannot remove %s: endpoint not in graph", segment)
            return EditOutcome.IGNORED

        if first > second:
            first, second = second, first

        if (first, second) not in self._edges:
            LOGGER.debug("Cannot remove %s: no such edge", segment)
            return EditOutcome.IGNORED

        self._edges.remove((first, second))
        self._drop_if_isolated(second)
        self._drop_if_isolated(first)
        return EditOutcome.APPLIED

    def _drop_if_isolated(self, index: int) -> bool:
        if any(index in edge for edge in self._edges):
            return False

        del self._nodes[index]
        self._edges = [
            (a - 1 if a >= index else a, b - 1 if b >= index else b) for a, b in self._edges
        ]
        return True

    def _working_graph(self) -> List[Node]:
        nodes = [node.detached() for node in self._nodes]
        for a, b in self._edges:
            nodes[a].adj.append(nodes[b])
            nodes[b].adj.append(nodes[a])
        return nodes

    def run(self) -> List[List[Point]]:
        """Extract every minimal cycle of the current graph.

        Works on a throwaway copy of the graph, so the persistent nodes and
        edges are left untouched.

        Returns:
            One list of boundary points per room.
        """
        # Nodes without edges bound nothing
        nodes = [node for node in self._working_graph() if node.adj]
        walk_limit = config.WALK_GUARD_FACTOR * len(self._edges) + 1

        cycles: List[List[Node]] = []
        while nodes:
            pivot = _left_bottom_node(nodes)
            path = _reduce_path(_closed_path_from(pivot, walk_limit))
            if len(path) > 2:
                cycles.append(path)

            _remove_link(path[0], path[1])
            nodes = _prune_from(path[0], nodes)
            nodes = _prune_from(path[1], nodes)

        LOGGER.debug(
            "Extracted %d cycles from %d nodes and %d edges",
            len(cycles),
            len(self._nodes),
            len(self._edges),
        )
        return [[node.point for node in cycle] for cycle in cycles]


def _left_bottom_node(nodes: List[Node]) -> Node:
    """Node with the smallest x, ties broken by the smallest y."""
    return min(nodes, key=lambda node: (node.point.x, node.point.y))


def _closed_path_from(start: Node, limit: int) -> List[Node]:
    """Walk from ``start`` following the turn rule until it is reached again."""
    path: List[Node] = []
    current = start
    previous: Optional[Node] = None
    while True:
        path.append(current)
        current, previous = _next_node(current, previous), current
        if current is start:
            return path
        if len(path) > limit:
            LOGGER.warning(
                "Face walk from (%s, %s) did not close after %d steps; skipping it",
                start.point.x,
                start.point.y,
                limit,
            )
            return path[:2]


def _reduce_path(path: List[Node]) -> List[Node]:
    """Cut out inner loops so no node appears twice."""
    i = 1
    while i < len(path):
        last = max(k for k, node in enumerate(path) if node is path[i])
        if last > i:
            del path[i + 1 : last + 1]
        i += 1
    return path


def _remove_link(v1: Node, v2: Node) -> None:
    v1.adj = [node for node in v1.adj if node is not v2]
    v2.adj = [node for node in v2.adj if node is not v1]


def _prune_from(start: Node, nodes: List[Node]) -> List[Node]:
    """Drop ``start`` if it can no longer bound a face, then follow the chain."""
    current: Optional[Node] = start
    while current is not None and len(current.adj) < 2:
        nodes = [node for node in nodes if node is not current]
        following = current.adj[0] if current.adj else None
        if following is not None:
            _remove_link(current, following)
        current = following
    return nodes


def _next_node(current: Node, previous: Optional[Node]) -> Node:
    if len(current.adj) == 1:
        return current.adj[0]
    return _best_by_kind(previous, current, previous is not None)


def _best_by_kind(previous: Optional[Node], current: Node, kind: bool) -> Node:
    """Most counter-clockwise neighbour when ``kind`` is set, most clockwise otherwise."""
    if previous is not None:
        d_current = _vsub(current.point, previous.point)
        candidates = [node for node in current.adj if node is not previous]
    else:
        d_current = config.FIRST_STEP_DIRECTION
        candidates = current.adj

    return reduce(
        lambda so_far, node: _better_by_kind(node, so_far, current, d_current, kind),
        candidates,
    )


def _better_by_kind(
    candidate: Node, so_far: Node, current: Node, d_current: Vector, kind: bool
) -> Node:
    d = _vsub(candidate.point, current.point)
    d_so_far = _vsub(so_far.point, current.point)
    is_convex = _dot_perp(d_so_far, d_current) > 0
    curr2v = _dot_perp(d_current, d)
    vsf2v = _dot_perp(d_so_far, d)

    if kind:
        is_better = (is_convex and (curr2v >= 0 or vsf2v >= 0)) or (
            not is_convex and curr2v >= 0 and vsf2v >= 0
        )
    else:
        is_better = (not is_convex and (curr2v < 0 or vsf2v < 0)) or (
            is_convex and curr2v < 0 and vsf2v < 0
        )
    return candidate if is_better else so_far


def _vsub(a: Point, b: Point) -> Vector:
    return a.x - b.x, a.y - b.y


def _dot_perp(a: Vector, b: Vector) -> float:
    return a[0] * b[1] - b[0] * a[1]
