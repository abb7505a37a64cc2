"""Wall graph and room extraction.

This module provides the incremental cycle extractor and NetworkX views of
the wall and room topology.
"""

from .cycles import CycleExtractor
from .topology import build_room_graph, build_wall_graph, dangling_nodes, expected_room_count

__all__ = [
    "CycleExtractor",
    "build_room_graph",
    "build_wall_graph",
    "dangling_nodes",
    "expected_room_count",
]
