"""Shared test fixtures for wall graph and blueprint tests."""
import pytest
from deskplanner.core.model import Point
from deskplanner.editor.blueprint import Blueprint

from .helpers import RIGHT_SQUARE, SQUARE, build


@pytest.fixture
def square():
    """Extractor holding a 10x10 square."""
    return build(SQUARE)


@pytest.fixture
def two_squares():
    """Extractor holding two squares sharing one wall."""
    return build(SQUARE + RIGHT_SQUARE)


@pytest.fixture
def office():
    """100x100 px blueprint (2x2 m) without inner walls."""
    bp = Blueprint(floor=1)
    corners = [Point(0, 0), Point(100, 0), Point(100, 100), Point(0, 100)]
    for a, b in zip(corners, corners[1:] + corners[:1]):
        bp.draw_wall(a, b)
    return bp
