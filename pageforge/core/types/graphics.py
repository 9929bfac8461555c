# PageForge - Page Decoration Rendering
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
PageForge Types Graphics Classes Module

This module contains the graphics and display list types used by the
graphics context. Paths are recorded in page space (points, y grows upward)
and painted later by an output device through the Cairo renderer.
"""

from __future__ import annotations

import copy
from typing import Iterable, Union

from .constants import DASHING_PATTERNS, DASHING_PATTERN_SOLID


# GSTATE
class GraphicsState:
    def __init__(self) -> None:
        self.line_width = 1.0
        self.dash_pattern = [[], 0.0]  # [on/off lengths, phase]
        self.line_color = (0.0, 0.0, 0.0)
        self.fill_color = (0.0, 0.0, 0.0)

    def copy(self) -> GraphicsState:
        new_gs = object.__new__(GraphicsState)
        new_gs.line_width = self.line_width
        new_gs.dash_pattern = copy.deepcopy(self.dash_pattern)
        new_gs.line_color = self.line_color
        new_gs.fill_color = self.fill_color
        return new_gs


class DisplayList(list):
    def __init__(self, width: float = 0, height: float = 0) -> None:
        super().__init__()

        self.width = width
        self.height = height

    """
    This is a list of elements like Paths, Fills and Strokes.
    A Path is a list of SubPaths.
    SubPaths consist of path construction elements: MoveTo, LineTo, CurveTo, ClosePath.
    """


# Path Elements
class Path(list):
    def __init__(self) -> None:
        super().__init__()


class SubPath(list):
    def __init__(self) -> None:
        super().__init__()


class Fill:
    def __init__(self, gs: GraphicsState) -> None:
        self.color = gs.fill_color


class Stroke:
    def __init__(self, gs: GraphicsState) -> None:
        self.color = gs.line_color
        self.line_width = gs.line_width

        user_dashes, user_offset = gs.dash_pattern
        self.dash_pattern = [list(user_dashes), user_offset]


# SubPath Elements
class Point(object):
    def __init__(self, x: Union[int, float], y: Union[int, float]) -> None:
        self.x = x
        self.y = y

    def __iter__(self):
        yield self.x
        yield self.y

    def __eq__(self, other) -> bool:
        if isinstance(other, Point):
            return self.x == other.x and self.y == other.y
        return NotImplemented

    def __repr__(self) -> str:
        return f"Point({self.x!r}, {self.y!r})"


class MoveTo(object):
    def __init__(self, p: Point) -> None:
        self.p = p


class LineTo(object):
    def __init__(self, p: Point) -> None:
        self.p = p


class CurveTo(object):
    def __init__(self, p1: Point, p2: Point, p3: Point) -> None:
        self.p1 = p1
        self.p2 = p2
        self.p3 = p3


class ClosePath(object):
    def __init__(self):
        pass


class Boundary:
    """
    Ordered, closed sequence of points describing a node's extent.

    Points are in page space (y grows upward). A rectangle is traversed
    top-left, top-right, bottom-right, bottom-left and closed by repeating
    the first point, so edge i runs from point i to point i+1.
    """

    def __init__(self, points: Iterable = ()) -> None:
        self._points: list[Point] = []
        self.closed = False
        for point in points:
            self.set_next(*point)

    @classmethod
    def from_rect(cls, x: float, y: float, width: float, height: float) -> Boundary:
        """
        Build a closed rectangular boundary.

        Args:
            x: Left edge
            y: Top edge (page space, so the rectangle extends downward)
            width: Rectangle width
            height: Rectangle height
        """
        boundary = cls()
        boundary.set_next(x, y)
        boundary.set_next(x + width, y)
        boundary.set_next(x + width, y - height)
        boundary.set_next(x, y - height)
        boundary.close()
        return boundary

    def set_next(self, x: float, y: float) -> Boundary:
        if self.closed:
            raise ValueError("Boundary is already closed")
        self._points.append(Point(x, y))
        return self

    def close(self) -> Boundary:
        if self._points and not self.closed:
            first = self._points[0]
            self._points.append(Point(first.x, first.y))
            self.closed = True
        return self

    def get_points(self) -> list[Point]:
        return list(self._points)

    def __iter__(self):
        return iter(self._points)

    def __len__(self) -> int:
        return len(self._points)

    def __getitem__(self, index: int) -> Point:
        return self._points[index]


def resolve_dash_pattern(pattern) -> list[float]:
    """Expand a named dash pattern constant or copy an explicit on/off list."""
    if isinstance(pattern, (list, tuple)):
        return [float(abs(length)) for length in pattern]
    return list(DASHING_PATTERNS.get(pattern, DASHING_PATTERNS[DASHING_PATTERN_SOLID]))
