# PageForge - Page Decoration Rendering
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Layout node with a rectangular boundary and the enhancements attached to it.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from . import types as pf


class Node:
    def __init__(self, boundary: pf.Boundary | None = None, enhancements: Iterable = (),
                 children: Iterable[Node] = (), name: str | None = None) -> None:
        self.boundary = boundary if boundary is not None else pf.Boundary()
        self.enhancements = list(enhancements)
        self.children = list(children)
        self.name = name

    @classmethod
    def from_rect(cls, x: float, y: float, width: float, height: float, **kwargs) -> Node:
        return cls(pf.Boundary.from_rect(x, y, width, height), **kwargs)

    def get_boundary(self) -> pf.Boundary:
        return self.boundary

    def add_enhancement(self, enhancement) -> Node:
        self.enhancements.append(enhancement)
        return self

    def add_child(self, child: Node) -> Node:
        self.children.append(child)
        return self

    def walk(self) -> Iterator[Node]:
        """Yield this node and all descendants, depth first."""
        yield self
        for child in self.children:
            yield from child.walk()

    def __repr__(self) -> str:
        return f"Node({self.name!r})" if self.name else f"Node({self.boundary.get_points()!r})"
