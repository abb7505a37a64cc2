"""Core data models for the floor-plan editor."""

from .model import Edge, EditOutcome, Node, Point, Room, Segment, same_position

__all__ = ["Edge", "EditOutcome", "Node", "Point", "Room", "Segment", "same_position"]
