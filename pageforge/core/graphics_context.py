# PageForge - Page Decoration Rendering
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
PageForge Graphics Context Module

The graphics context is the drawing surface enhancements paint on. It keeps
a current graphics state (line width, dash pattern, colors) and records
every drawing call as display list elements in page space. Devices replay
the display list through the shared Cairo renderer.

State set on the context is sticky: nothing is reset between drawing calls
or between enhancements. Callers that need isolation use save_gs/restore_gs.
"""

from __future__ import annotations

from typing import Sequence

from . import types as pf
from .color import parse_color


class GraphicsContext:
    DASHING_PATTERN_SOLID = pf.DASHING_PATTERN_SOLID
    DASHING_PATTERN_DOTTED = pf.DASHING_PATTERN_DOTTED

    SHAPE_DRAW_STROKE = pf.SHAPE_DRAW_STROKE
    SHAPE_DRAW_FILL = pf.SHAPE_DRAW_FILL
    SHAPE_DRAW_FILL_AND_STROKE = pf.SHAPE_DRAW_FILL_AND_STROKE

    def __init__(self, width: float, height: float) -> None:
        self.width = width
        self.height = height
        self.gstate = pf.GraphicsState()
        self.gstate_stack: list[pf.GraphicsState] = []
        self.display_list = pf.DisplayList(width, height)

    # graphics state

    def save_gs(self) -> None:
        self.gstate_stack.append(self.gstate.copy())

    def restore_gs(self) -> None:
        if not self.gstate_stack:
            raise IndexError("restore_gs without matching save_gs")
        self.gstate = self.gstate_stack.pop()

    def set_line_dashing_pattern(self, pattern, phase: float = 0.0) -> None:
        """
        Set the dash pattern used by subsequent strokes.

        Args:
            pattern: DASHING_PATTERN_SOLID, DASHING_PATTERN_DOTTED or a
                sequence of on/off lengths in points
            phase: Distance into the pattern at which to start
        """
        self.gstate.dash_pattern = [pf.resolve_dash_pattern(pattern), float(phase)]

    def set_line_width(self, width: float) -> None:
        self.gstate.line_width = float(abs(width))

    def set_line_color(self, color) -> None:
        self.gstate.line_color = parse_color(color)

    def set_fill_color(self, color) -> None:
        self.gstate.fill_color = parse_color(color)

    # drawing

    def draw_line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        sub_path = pf.SubPath()
        sub_path.append(pf.MoveTo(pf.Point(x1, y1)))
        sub_path.append(pf.LineTo(pf.Point(x2, y2)))
        self._paint(sub_path, pf.SHAPE_DRAW_STROKE)

    def draw_polygon(self, xs: Sequence[float], ys: Sequence[float], draw_type: int) -> None:
        """
        Draw a closed polygon.

        Args:
            xs: X coordinates of the vertices
            ys: Y coordinates of the vertices, same length as xs
            draw_type: SHAPE_DRAW_STROKE, SHAPE_DRAW_FILL or SHAPE_DRAW_FILL_AND_STROKE
        """
        if len(xs) != len(ys):
            raise ValueError(f"Polygon needs as many x as y coordinates ({len(xs)} != {len(ys)})")
        if not xs:
            return

        sub_path = pf.SubPath()
        sub_path.append(pf.MoveTo(pf.Point(xs[0], ys[0])))
        for x, y in zip(xs[1:], ys[1:]):
            sub_path.append(pf.LineTo(pf.Point(x, y)))
        sub_path.append(pf.ClosePath())
        self._paint(sub_path, draw_type)

    def draw_rounded_rectangle(self, x1: float, y1: float, x2: float, y2: float,
                               radius, draw_type: int) -> None:
        """
        Draw a rectangle with rounded corners between two diagonal points.

        Args:
            x1, y1: First corner
            x2, y2: Diagonal corner
            radius: Single radius or up to four radii in the order
                top-left, top-right, bottom-right, bottom-left (CSS shorthand)
            draw_type: SHAPE_DRAW_STROKE, SHAPE_DRAW_FILL or SHAPE_DRAW_FILL_AND_STROKE
        """
        left, right = min(x1, x2), max(x1, x2)
        bottom, top = min(y1, y2), max(y1, y2)

        limit = min(right - left, top - bottom) / 2.0
        r_tl, r_tr, r_br, r_bl = (min(max(r, 0.0), limit) for r in _expand_radius(radius))

        sub_path = pf.SubPath()
        sub_path.append(pf.MoveTo(pf.Point(left + r_tl, top)))
        sub_path.append(pf.LineTo(pf.Point(right - r_tr, top)))
        _corner_to(sub_path, (right - r_tr, top), (right, top), (right, top - r_tr))
        sub_path.append(pf.LineTo(pf.Point(right, bottom + r_br)))
        _corner_to(sub_path, (right, bottom + r_br), (right, bottom), (right - r_br, bottom))
        sub_path.append(pf.LineTo(pf.Point(left + r_bl, bottom)))
        _corner_to(sub_path, (left + r_bl, bottom), (left, bottom), (left, bottom + r_bl))
        sub_path.append(pf.LineTo(pf.Point(left, top - r_tl)))
        _corner_to(sub_path, (left, top - r_tl), (left, top), (left + r_tl, top))
        sub_path.append(pf.ClosePath())
        self._paint(sub_path, draw_type)

    def _paint(self, sub_path: pf.SubPath, draw_type: int) -> None:
        if draw_type not in (pf.SHAPE_DRAW_STROKE, pf.SHAPE_DRAW_FILL, pf.SHAPE_DRAW_FILL_AND_STROKE):
            raise ValueError(f"Unknown draw type {draw_type}")

        # Fill and Stroke both consume the path they follow, FILL_AND_STROKE repeats it
        if draw_type in (pf.SHAPE_DRAW_FILL, pf.SHAPE_DRAW_FILL_AND_STROKE):
            self.display_list.append(_single_path(sub_path))
            self.display_list.append(pf.Fill(self.gstate))
        if draw_type in (pf.SHAPE_DRAW_STROKE, pf.SHAPE_DRAW_FILL_AND_STROKE):
            self.display_list.append(_single_path(sub_path))
            self.display_list.append(pf.Stroke(self.gstate))


def _single_path(sub_path: pf.SubPath) -> pf.Path:
    path = pf.Path()
    path.append(sub_path)
    return path


def _expand_radius(radius) -> tuple[float, float, float, float]:
    if isinstance(radius, (int, float)):
        return (float(radius),) * 4
    values = [float(r) for r in radius]
    if len(values) == 1:
        values *= 4
    elif len(values) == 2:
        values = values * 2
    elif len(values) == 3:
        values.append(values[1])
    elif len(values) != 4:
        raise ValueError(f"Expected 1 to 4 radii, got {len(values)}")
    return tuple(values)


def _corner_to(sub_path: pf.SubPath, start: tuple, corner: tuple, end: tuple) -> None:
    """Append a quarter-circle arc from start to end bending around corner."""
    if start == end:
        # zero radius, the corner stays sharp
        return
    (sx, sy), (cx, cy), (ex, ey) = start, corner, end
    sub_path.append(pf.CurveTo(
        pf.Point(sx + (cx - sx) * pf.KAPPA, sy + (cy - sy) * pf.KAPPA),
        pf.Point(ex + (cx - ex) * pf.KAPPA, ey + (cy - ey) * pf.KAPPA),
        pf.Point(ex, ey),
    ))
