"""Desk Planner - floor-plan core for an office desk reservation system."""

__version__ = "0.1.0"

from .core.model import EditOutcome, Point, Room, Segment
from .editor.blueprint import Blueprint
from .graph.cycles import CycleExtractor

__all__ = ["Blueprint", "CycleExtractor", "EditOutcome", "Point", "Room", "Segment"]
