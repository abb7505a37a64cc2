"""Wall layouts and builders shared by the test modules."""
from deskplanner.core.model import Segment
from deskplanner.graph.cycles import CycleExtractor


def seg(x1, y1, x2, y2):
    return Segment.from_coords(x1, y1, x2, y2)


SQUARE = [
    seg(0, 0, 10, 0),
    seg(10, 0, 10, 10),
    seg(10, 10, 0, 10),
    seg(0, 10, 0, 0),
]

# Second square to the right of SQUARE, sharing the wall x=10
RIGHT_SQUARE = [
    seg(10, 0, 20, 0),
    seg(20, 0, 20, 10),
    seg(20, 10, 10, 10),
]


def build(segments):
    extractor = CycleExtractor()
    for s in segments:
        extractor.insert_edge(s)
    return extractor
