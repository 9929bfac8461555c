# PageForge - Page Decoration Rendering
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Border Enhancement

Draws a border around the boundary of a node. The border can be limited to
specific edges, shifted inward or outward, drawn with rounded corners and
stroked solid, dotted or with a custom dash pattern.

Edges are selected with a bitmask (EDGE_TOP, EDGE_RIGHT, EDGE_BOTTOM,
EDGE_LEFT) or a "+" joined string of edge names, e.g. "top+bottom".

Allowed styles:
  solid          - solid line
  dotted         - dotted line
  "3 1" / [3, 1] - custom on/off dash pattern

Rendering modes, first match wins:
  1. radius set      - one rounded rectangle, edge selection is ignored
  2. all four edges  - one closed polygon
  3. otherwise       - one independent line per selected edge, trimmed so
                       the corners stay clean (see trim_edge)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Sequence

from ..core import types as pf
from ..core.error import ConfigurationError
from ..core.unit_converter import parse_measure
from .base import EnhancementStyle, draw_boundary, draw_rounded_boundary, lookup_constant

if TYPE_CHECKING:
    from ..core.document import Document
    from ..core.graphics_context import GraphicsContext
    from ..core.node import Node

logger = logging.getLogger(__name__)

EDGE_NAMES = {
    "none": pf.EDGE_NONE,
    "top": pf.EDGE_TOP,
    "right": pf.EDGE_RIGHT,
    "bottom": pf.EDGE_BOTTOM,
    "left": pf.EDGE_LEFT,
    "all": pf.EDGE_ALL,
}

STYLE_NAMES = {
    "solid": pf.DASHING_PATTERN_SOLID,
    "dotted": pf.DASHING_PATTERN_DOTTED,
}

# Per-point offset signs for a boundary traversed top-left, top-right,
# bottom-right, bottom-left, top-left (page space, y grows upward)
_X_SIGNS = (-1, 1, 1, -1, -1)
_Y_SIGNS = (1, 1, -1, -1, 1)


def edge_index(flag: int) -> int:
    """Index of the boundary point an edge flag starts at (log2 of the flag)."""
    return flag.bit_length() - 1


def compute_offset_points(boundary: pf.Boundary, position, converter) -> list[tuple[float, float]]:
    """
    Move every boundary corner outward by a converted offset.

    Args:
        boundary: Node boundary, 5 points for a rectangle
        position: Offset in document units, negative values inset the border
        converter: Object providing convert_unit (usually the document)

    Returns:
        List of (x, y) tuples, one per boundary point.
    """
    offset = converter.convert_unit(position)

    points = []
    for index, point in enumerate(boundary.get_points()):
        x_sign = _X_SIGNS[index] if index < len(_X_SIGNS) else 1
        y_sign = _Y_SIGNS[index] if index < len(_Y_SIGNS) else 1
        points.append((point.x + offset * x_sign, point.y + offset * y_sign))

    return points


def trim_edge(points: Sequence[tuple[float, float]], first_point_index: int,
              half_size: float) -> tuple[float, float, float, float]:
    """
    Endpoints of one edge, adjusted for drawing it as an independent line.

    Vertical edges are shortened by half_size at both ends and horizontal
    edges are lengthened by half_size at both ends. Drawn together, the
    horizontal lines cover the corners and the vertical lines sit between
    them, giving a mitered-looking rectangle without overlap.

    Args:
        points: Offset boundary points
        first_point_index: Edge index, the edge runs to the following point
        half_size: Half of the stroke width

    Returns:
        Tuple (x1, y1, x2, y2).
    """
    x1, y1 = points[first_point_index]
    x2, y2 = points[first_point_index + 1]

    if x1 == x2:
        if y1 <= y2:
            y1 += half_size
            y2 -= half_size
        else:
            y1 -= half_size
            y2 += half_size
    elif y1 == y2:
        if x1 <= x2:
            x1 -= half_size
            x2 += half_size
        else:
            x1 += half_size
            x2 -= half_size

    return x1, y1, x2, y2


def _as_int(value, kind: str, name: str) -> int | None:
    """Integer value of a numeric setting (int, integral float or numeric string), None otherwise."""
    if isinstance(value, bool):
        raise ConfigurationError(f"Invalid {kind} {value!r}", name=name, value=value)
    if isinstance(value, str):
        try:
            value = float(value)
        except ValueError:
            return None
    if isinstance(value, float):
        if not value.is_integer():
            raise ConfigurationError(f"Invalid {kind} {value!r}", name=name, value=value)
        return int(value)
    if isinstance(value, int):
        return value
    return None


def parse_edges(edges) -> int:
    """
    Resolve an edge selector to its bitmask.

    Args:
        edges: Bitmask (number or numeric string), or names joined with "+"

    Raises:
        ConfigurationError: For an unknown edge name or a mask outside 0-15.
    """
    mask = _as_int(edges, "border type", "type")
    if mask is not None:
        if not pf.EDGE_NONE <= mask <= pf.EDGE_ALL:
            raise ConfigurationError(f"Border type mask out of range: {edges!r}", name="type", value=edges)
        return mask

    if not isinstance(edges, str):
        raise ConfigurationError(f"Invalid border type {edges!r}", name="type", value=edges)

    mask = pf.EDGE_NONE
    for name in edges.split("+"):
        mask |= lookup_constant(EDGE_NAMES, "border type", name)
    return mask


def parse_style(style):
    """
    Resolve a border style to a named pattern constant or a dash list.

    Raises:
        ConfigurationError: For an unknown style name or a malformed pattern.
    """
    constant = _as_int(style, "border style", "style")
    if constant is not None:
        if constant not in pf.DASHING_PATTERNS:
            raise ConfigurationError(f"Unknown dash pattern constant {style!r}", name="style", value=style)
        return constant

    if isinstance(style, str):
        if " " not in style.strip():
            return lookup_constant(STYLE_NAMES, "border style", style)
        style = style.split()

    try:
        pattern = [float(length) for length in style]
    except (TypeError, ValueError):
        raise ConfigurationError(f"Invalid dash pattern {style!r}", name="style", value=style) from None

    if any(length < 0 for length in pattern):
        raise ConfigurationError(f"Dash lengths must not be negative: {style!r}", name="style", value=style)
    if pattern and all(length == 0 for length in pattern):
        raise ConfigurationError(f"Dash pattern must not be all zero: {style!r}", name="style", value=style)
    return pattern


class Border:
    """Enhance a node by drawing its border."""

    def __init__(self, color=None, type=pf.EDGE_ALL, size=1, radius=None,
                 style=pf.DASHING_PATTERN_SOLID, position=0) -> None:
        self.appearance = EnhancementStyle(color, radius)
        self._type = parse_edges(type)
        self._style = parse_style(style)

        # Measures are validated now but converted at render time, the
        # document unit may still change before drawing
        parse_measure(size)
        parse_measure(position)
        self.size = size
        self.position = position

        if self.radius is not None and self._type != pf.EDGE_ALL:
            logger.warning("Border radius set, edge selection %d is ignored", self._type)

    @property
    def type(self) -> int:
        return self._type

    @property
    def style(self):
        return self._style

    @property
    def color(self):
        return self.appearance.color

    @property
    def radius(self):
        return self.appearance.radius

    def priority(self) -> int:
        return pf.DRAWING_PRIORITY_BACKGROUND3

    def apply(self, gc: GraphicsContext, node: Node, document: Document) -> None:
        self.appearance.apply_colors(gc)
        gc.set_line_dashing_pattern(self._style)
        size = document.convert_unit(self.size)
        gc.set_line_width(size)

        points = compute_offset_points(node.get_boundary(), self.position, document)

        if self.radius is not None:
            first_x, first_y = points[0]
            diagonal_x, diagonal_y = points[2]
            logger.debug("Drawing rounded border for %r", node)
            draw_rounded_boundary(gc, first_x, first_y, diagonal_x, diagonal_y,
                                  self.radius, pf.SHAPE_DRAW_STROKE)
        elif self._type == pf.EDGE_ALL:
            logger.debug("Drawing full border for %r", node)
            draw_boundary(gc, points, pf.SHAPE_DRAW_STROKE, size / 2)
        else:
            half_size = size / 2
            for edge in pf.EDGE_ORDER:
                if self._type & edge:
                    gc.draw_line(*trim_edge(points, edge_index(edge), half_size))

    def __repr__(self) -> str:
        return (f"Border(type={self._type}, size={self.size!r}, style={self._style!r}, "
                f"radius={self.radius!r}, position={self.position!r})")
