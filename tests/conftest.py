import pytest

from pageforge.core.document import Document
from pageforge.core.node import Node
from pageforge.core.types import Boundary


class RecordingContext:
    """Graphics context stand-in that records every call it receives."""

    def __init__(self):
        self.calls = []

    def _record(self, name, *args):
        self.calls.append((name, args))

    def set_line_dashing_pattern(self, pattern, phase=0.0):
        self._record("set_line_dashing_pattern", pattern)

    def set_line_width(self, width):
        self._record("set_line_width", width)

    def set_line_color(self, color):
        self._record("set_line_color", color)

    def set_fill_color(self, color):
        self._record("set_fill_color", color)

    def draw_line(self, x1, y1, x2, y2):
        self._record("draw_line", x1, y1, x2, y2)

    def draw_polygon(self, xs, ys, draw_type):
        self._record("draw_polygon", list(xs), list(ys), draw_type)

    def draw_rounded_rectangle(self, x1, y1, x2, y2, radius, draw_type):
        self._record("draw_rounded_rectangle", x1, y1, x2, y2, radius, draw_type)

    def names(self):
        return [name for name, _ in self.calls]

    def calls_to(self, name):
        return [args for call_name, args in self.calls if call_name == name]


@pytest.fixture
def recorder():
    return RecordingContext()


@pytest.fixture
def document():
    return Document()


@pytest.fixture
def square_boundary():
    # corners (0,10) (10,10) (10,0) (0,0), closed back to (0,10)
    return Boundary.from_rect(0, 10, 10, 10)


@pytest.fixture
def square_node(square_boundary):
    return Node(square_boundary, name="square")
