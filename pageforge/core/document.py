# PageForge - Page Decoration Rendering
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
PageForge Document Module

The document owns the unit context enhancements are converted in and runs
the drawing pass: every enhancement of every node becomes a drawing task,
and tasks are executed in descending priority order. Tasks of equal
priority keep the order in which they were collected (depth first over the
node tree, then enhancement order within a node).
"""

from __future__ import annotations

import logging
from typing import Iterable, NamedTuple

from . import types as pf
from .graphics_context import GraphicsContext
from .node import Node
from .unit_converter import UnitConverter

logger = logging.getLogger(__name__)


class DrawingTask(NamedTuple):
    priority: int
    order: int
    node: Node
    enhancement: object


class Document:
    DRAWING_PRIORITY_BACKGROUND1 = pf.DRAWING_PRIORITY_BACKGROUND1
    DRAWING_PRIORITY_BACKGROUND2 = pf.DRAWING_PRIORITY_BACKGROUND2
    DRAWING_PRIORITY_BACKGROUND3 = pf.DRAWING_PRIORITY_BACKGROUND3
    DRAWING_PRIORITY_FOREGROUND1 = pf.DRAWING_PRIORITY_FOREGROUND1
    DRAWING_PRIORITY_FOREGROUND2 = pf.DRAWING_PRIORITY_FOREGROUND2
    DRAWING_PRIORITY_FOREGROUND3 = pf.DRAWING_PRIORITY_FOREGROUND3

    def __init__(self, unit: str = "pt", dpi: float = pf.PPI) -> None:
        self.unit_converter = UnitConverter(unit, dpi)

    def set_unit(self, unit: str) -> None:
        self.unit_converter.set_unit(unit)

    def convert_unit(self, value, unit: str | None = None) -> float:
        return self.unit_converter.convert_unit(value, unit)

    def get_drawing_tasks(self, nodes: Iterable[Node]) -> list[DrawingTask]:
        tasks = []
        for root in nodes:
            for node in root.walk():
                for enhancement in node.enhancements:
                    tasks.append(DrawingTask(enhancement.priority(), len(tasks), node, enhancement))

        tasks.sort(key=lambda task: (-task.priority, task.order))
        return tasks

    def draw(self, gc: GraphicsContext, nodes: Iterable[Node]) -> None:
        """
        Apply all enhancements of the given node trees to a graphics context.

        Args:
            gc: Graphics context to draw on
            nodes: Root nodes of the page
        """
        tasks = self.get_drawing_tasks(nodes)
        logger.debug("Drawing %d enhancement tasks", len(tasks))
        for task in tasks:
            task.enhancement.apply(gc, task.node, self)

    def render_page(self, nodes: Iterable[Node], width: float, height: float) -> GraphicsContext:
        """Draw the node trees on a fresh graphics context of the given page size."""
        gc = GraphicsContext(width, height)
        self.draw(gc, nodes)
        return gc
