# PageForge - Page Decoration Rendering
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Shared Cairo Rendering Module

This module replays a display list recorded by the graphics context onto a
Cairo context. It is used by every output device (PNG, PDF).

Display list coordinates are in page space (points, y grows upward) while
Cairo device space grows downward, so every y coordinate is flipped against
the page height.
"""

import cairo

from ...core import types as pf


def render_display_list(display_list: pf.DisplayList, cairo_ctx, page_height: float,
                        min_line_width: float = 0) -> None:
    """
    Render a display list to a Cairo context.

    Device implementations should:
    1. Create a Cairo surface and context
    2. Set up any device-specific initialization (background color, scaling)
    3. Call this function to render the display list
    4. Finalize output (write to file)

    Args:
        display_list: Elements recorded by a GraphicsContext
        cairo_ctx: Cairo context to render to
        page_height: Height of the page in points (for the y flip)
        min_line_width: Minimum line width threshold for strokes
    """
    for item in display_list:
        if isinstance(item, pf.Path):
            cairo_ctx.new_path()
            for subpath in item:
                for pc_item in subpath:
                    if isinstance(pc_item, pf.MoveTo):
                        cairo_ctx.move_to(pc_item.p.x, page_height - pc_item.p.y)
                        continue
                    if isinstance(pc_item, pf.LineTo):
                        cairo_ctx.line_to(pc_item.p.x, page_height - pc_item.p.y)
                        continue
                    if isinstance(pc_item, pf.CurveTo):
                        cairo_ctx.curve_to(
                            pc_item.p1.x, page_height - pc_item.p1.y,
                            pc_item.p2.x, page_height - pc_item.p2.y,
                            pc_item.p3.x, page_height - pc_item.p3.y,
                        )
                        continue
                    if isinstance(pc_item, pf.ClosePath):
                        cairo_ctx.close_path()
            continue

        if isinstance(item, pf.Fill):
            _set_source(cairo_ctx, item.color)
            cairo_ctx.set_fill_rule(cairo.FILL_RULE_WINDING)
            cairo_ctx.fill()
            continue

        if isinstance(item, pf.Stroke):
            _set_source(cairo_ctx, item.color)
            cairo_ctx.set_line_join(cairo.LINE_JOIN_MITER)
            cairo_ctx.set_line_cap(cairo.LINE_CAP_BUTT)
            cairo_ctx.set_line_width(max(min_line_width, item.line_width))
            cairo_ctx.set_dash(item.dash_pattern[0], item.dash_pattern[1])
            cairo_ctx.stroke()
            continue


def _set_source(cairo_ctx, color) -> None:
    cairo_ctx.set_source_rgb(*color)
