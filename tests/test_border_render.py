"""Tests for Border.apply: mode selection and the calls issued to the surface."""

import pytest

from pageforge.core import types as pf
from pageforge.core.document import Document
from pageforge.enhancement.border import Border

DRAW_CALLS = {"draw_line", "draw_polygon", "draw_rounded_rectangle"}


def _draw_calls(recorder):
    return [name for name in recorder.names() if name in DRAW_CALLS]


class TestSurfaceSetup:
    def test_dash_pattern_then_width(self, recorder, square_node, document):
        Border(type="top", size=2, style="dotted").apply(recorder, square_node, document)
        assert recorder.calls[:2] == [
            ("set_line_dashing_pattern", (pf.DASHING_PATTERN_DOTTED,)),
            ("set_line_width", (2.0,)),
        ]

    def test_custom_pattern_passed_through(self, recorder, square_node, document):
        Border(style="3 1").apply(recorder, square_node, document)
        assert recorder.calls_to("set_line_dashing_pattern") == [([3.0, 1.0],)]

    def test_colors_set_when_configured(self, recorder, square_node, document):
        Border(color="blue").apply(recorder, square_node, document)
        assert recorder.names()[:2] == ["set_line_color", "set_fill_color"]
        assert recorder.calls_to("set_line_color") == [((0.0, 0.0, 1.0),)]

    def test_no_colors_without_configuration(self, recorder, square_node, document):
        Border().apply(recorder, square_node, document)
        assert "set_line_color" not in recorder.names()

    def test_width_converted_at_render_time(self, recorder, square_node):
        border = Border(size=1)
        document = Document()
        document.set_unit("mm")
        border.apply(recorder, square_node, document)
        assert recorder.calls_to("set_line_width") == [(pytest.approx(72 / 25.4),)]

    def test_width_with_explicit_unit(self, recorder, square_node, document):
        Border(size="0.5in").apply(recorder, square_node, document)
        assert recorder.calls_to("set_line_width") == [(36.0,)]


class TestRoundedMode:
    @pytest.mark.parametrize("edges", [pf.EDGE_NONE, pf.EDGE_TOP | pf.EDGE_LEFT, pf.EDGE_ALL])
    def test_single_rounded_draw_regardless_of_edges(self, recorder, square_node, document, edges):
        Border(type=edges, radius=3).apply(recorder, square_node, document)
        assert _draw_calls(recorder) == ["draw_rounded_rectangle"]

    def test_spans_top_left_to_bottom_right(self, recorder, square_node, document):
        Border(radius="2 3", position=1).apply(recorder, square_node, document)
        [args] = recorder.calls_to("draw_rounded_rectangle")
        assert args == (-1, 11, 11, -1, [2.0, 3.0], pf.SHAPE_DRAW_STROKE)


class TestFullRectangleMode:
    def test_single_polygon_stroke(self, recorder, square_node, document):
        Border(size=2).apply(recorder, square_node, document)
        assert _draw_calls(recorder) == ["draw_polygon"]

    def test_polygon_closes_over_first_corner(self, recorder, square_node, document):
        Border(size=2).apply(recorder, square_node, document)
        [(xs, ys, draw_type)] = recorder.calls_to("draw_polygon")
        assert xs == [0, 10, 10, 0, 0]
        # closing point pushed half the width past the top-left corner
        assert ys == [10, 10, 0, 0, 11]
        assert draw_type == pf.SHAPE_DRAW_STROKE

    def test_polygon_uses_offset_points(self, recorder, square_node, document):
        Border(size=2, position=-2).apply(recorder, square_node, document)
        [(xs, ys, _)] = recorder.calls_to("draw_polygon")
        assert xs == [2, 8, 8, 2, 2]
        assert ys == [8, 8, 2, 2, 9]


class TestPartialMode:
    def test_top_only(self, recorder, square_node, document):
        Border(type="top", size=2).apply(recorder, square_node, document)
        assert recorder.calls_to("draw_line") == [(-1, 10, 11, 10)]
        assert _draw_calls(recorder) == ["draw_line"]

    def test_left_only(self, recorder, square_node, document):
        Border(type="left", size=2).apply(recorder, square_node, document)
        assert recorder.calls_to("draw_line") == [(0, 1, 0, 9)]

    def test_lines_in_fixed_order(self, recorder, square_node, document):
        Border(type="left+bottom+top", size=2).apply(recorder, square_node, document)
        assert recorder.calls_to("draw_line") == [
            (-1, 10, 11, 10),   # top
            (11, 0, -1, 0),     # bottom, drawn right to left
            (0, 1, 0, 9),       # left, drawn bottom to top
        ]

    @pytest.mark.parametrize("mask", list(range(1, 15)))
    def test_one_line_per_selected_edge(self, recorder, square_node, document, mask):
        Border(type=mask).apply(recorder, square_node, document)
        assert _draw_calls(recorder) == ["draw_line"] * bin(mask).count("1")

    def test_none_draws_nothing(self, recorder, square_node, document):
        Border(type="none", size=2).apply(recorder, square_node, document)
        assert _draw_calls(recorder) == []
        assert recorder.names() == ["set_line_dashing_pattern", "set_line_width"]

    def test_offset_applies_to_lines(self, recorder, square_node, document):
        Border(type="top", size=2, position=1).apply(recorder, square_node, document)
        assert recorder.calls_to("draw_line") == [(-2, 11, 12, 11)]
