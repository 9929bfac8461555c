# PageForge - Page Decoration Rendering
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
PageForge Enhancement Base Module

An enhancement is a drawing behavior attached to a layout node and applied
by the document during a drawing pass, ordered by its priority. This module
holds what enhancements share:

- Enhancement: the capability protocol the document relies on
- EnhancementStyle: color and corner radius common to all enhancements
- draw_boundary / draw_rounded_boundary: boundary drawing helpers
- lookup_constant: symbolic name lookup for configuration values
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Mapping, Protocol, Sequence

from ..core.color import parse_color
from ..core.error import ConfigurationError, unknown_constant

if TYPE_CHECKING:
    from ..core.document import Document
    from ..core.graphics_context import GraphicsContext
    from ..core.node import Node


class Enhancement(Protocol):
    def apply(self, gc: GraphicsContext, node: Node, document: Document) -> None:
        ...

    def priority(self) -> int:
        ...


class EnhancementStyle:
    """Color and corner radius shared by enhancements."""

    def __init__(self, color=None, radius=None) -> None:
        self.color = parse_color(color) if color is not None else None
        self.radius = parse_radius(radius)

    def apply_colors(self, gc: GraphicsContext) -> None:
        if self.color is not None:
            gc.set_line_color(self.color)
            gc.set_fill_color(self.color)


def parse_radius(radius) -> float | list[float] | None:
    """
    Normalize a corner radius.

    Args:
        radius: None, a number, a sequence of up to four numbers, or a string
            with one to four space separated numbers

    Returns:
        None, a single radius, or a list of per-corner radii.

    Raises:
        ConfigurationError: If the radius is not numeric or has too many values.
    """
    if radius is None:
        return None
    if isinstance(radius, bool):
        raise ConfigurationError(f"Invalid radius {radius!r}", name="radius", value=radius)
    if isinstance(radius, (int, float)):
        return float(radius)

    values = radius.split() if isinstance(radius, str) else list(radius)
    if not 1 <= len(values) <= 4:
        raise ConfigurationError(f"Radius needs 1 to 4 values, got {len(values)}", name="radius", value=radius)
    try:
        radii = [float(value) for value in values]
    except (TypeError, ValueError):
        raise ConfigurationError(f"Invalid radius '{radius}'", name="radius", value=radius)
    return radii[0] if len(radii) == 1 else radii


def lookup_constant(table: Mapping[str, int], kind: str, name: str) -> int:
    """Resolve a symbolic configuration name, names are matched exactly."""
    try:
        return table[name.strip()]
    except KeyError:
        raise unknown_constant(kind, name, table) from None


def draw_boundary(gc: GraphicsContext, points: Sequence[tuple[float, float]],
                  draw_type: int, shift: float = 0.5) -> None:
    """
    Draw the polygon described by boundary points.

    When the last point repeats the first one (a closed boundary), the
    repeated point is pushed `shift` further along the closing edge so that
    a stroke of width 2*shift fully covers the starting corner.

    Args:
        gc: Graphics context to draw on
        points: Boundary points as (x, y) tuples
        draw_type: pf.SHAPE_DRAW_* mode
        shift: Overlap added past the first point on the closing edge
    """
    xs = [x for x, _ in points]
    ys = [y for _, y in points]

    if len(points) > 2 and points[-1] == points[0] and shift:
        px, py = points[-2]
        fx, fy = points[0]
        if fx == px and fy != py:
            ys[-1] += shift if fy > py else -shift
        elif fy == py and fx != px:
            xs[-1] += shift if fx > px else -shift

    gc.draw_polygon(xs, ys, draw_type)


def draw_rounded_boundary(gc: GraphicsContext, x1: float, y1: float, x2: float, y2: float,
                          radius, draw_type: int) -> None:
    gc.draw_rounded_rectangle(x1, y1, x2, y2, radius, draw_type)
