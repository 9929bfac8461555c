"""Tests for the border geometry: offset points, edge trimming, flag indices."""

import pytest

from pageforge.core import types as pf
from pageforge.core.document import Document
from pageforge.enhancement.border import compute_offset_points, edge_index, trim_edge


def _as_tuples(boundary):
    return [(p.x, p.y) for p in boundary.get_points()]


class TestComputeOffsetPoints:
    def test_zero_offset_keeps_boundary(self, square_boundary, document):
        points = compute_offset_points(square_boundary, 0, document)
        assert points == pytest.approx(_as_tuples(square_boundary))

    def test_positive_offset_outsets_every_corner(self, square_boundary, document):
        points = compute_offset_points(square_boundary, 2, document)
        assert points == pytest.approx([(-2, 12), (12, 12), (12, -2), (-2, -2), (-2, 12)])

    def test_negative_offset_insets_every_corner(self, square_boundary, document):
        points = compute_offset_points(square_boundary, -1, document)
        assert points == pytest.approx([(1, 9), (9, 9), (9, 1), (1, 1), (1, 9)])

    @pytest.mark.parametrize("offset", [0.5, 3, -2.25])
    def test_offset_then_negated_offset_restores(self, square_boundary, document, offset):
        shifted = compute_offset_points(square_boundary, offset, document)
        restored = compute_offset_points(pf.Boundary(shifted), -offset, document)
        assert restored == pytest.approx(_as_tuples(square_boundary))

    def test_offset_converted_with_document_unit(self, square_boundary):
        points = compute_offset_points(square_boundary, 1, Document(unit="mm"))
        mm = 72 / 25.4
        assert points[0] == pytest.approx((-mm, 10 + mm))

    def test_rectangle_offset_independent_of_edge_length(self, document):
        boundary = pf.Boundary.from_rect(100, 500, 300, 40)
        points = compute_offset_points(boundary, 5, document)
        assert points == pytest.approx([(95, 505), (405, 505), (405, 455), (95, 455), (95, 505)])


class TestTrimEdge:
    @pytest.mark.parametrize("points", [
        [(0, 0), (0, 10)],
        [(0, 10), (0, 0)],
    ])
    def test_vertical_edge_shrinks(self, points):
        x1, y1, x2, y2 = trim_edge(points, 0, 1.5)
        assert x1 == x2 == 0
        assert abs(y2 - y1) == pytest.approx(10 - 2 * 1.5)
        assert min(y1, y2) == pytest.approx(1.5)

    @pytest.mark.parametrize("points", [
        [(0, 5), (10, 5)],
        [(10, 5), (0, 5)],
    ])
    def test_horizontal_edge_extends(self, points):
        x1, y1, x2, y2 = trim_edge(points, 0, 1.5)
        assert y1 == y2 == 5
        assert abs(x2 - x1) == pytest.approx(10 + 2 * 1.5)
        assert min(x1, x2) == pytest.approx(-1.5)

    def test_diagonal_edge_unchanged(self):
        assert trim_edge([(0, 0), (4, 3)], 0, 1) == (0, 0, 4, 3)

    def test_edge_uses_following_point(self, square_boundary, document):
        points = compute_offset_points(square_boundary, 0, document)
        # right edge runs from top-right down to bottom-right
        assert trim_edge(points, 1, 1) == pytest.approx((10, 9, 10, 1))


class TestEdgeIndex:
    @pytest.mark.parametrize("flag, index", [
        (pf.EDGE_TOP, 0),
        (pf.EDGE_RIGHT, 1),
        (pf.EDGE_BOTTOM, 2),
        (pf.EDGE_LEFT, 3),
        (16, 4),
    ])
    def test_index_is_log2_of_flag(self, flag, index):
        assert edge_index(flag) == index
