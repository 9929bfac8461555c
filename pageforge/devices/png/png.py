# PageForge - Page Decoration Rendering
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

"""
PNG Output Device

This device renders a display list to a PNG image file using Cairo.
It uses the shared cairo_renderer module for display list rendering.
"""

import logging
import math
import os

import cairo

from ...core import types as pf
from ..common.cairo_renderer import render_display_list

logger = logging.getLogger(__name__)

# Anti-aliasing mode for Cairo rendering.
# Options: cairo.ANTIALIAS_NONE, ANTIALIAS_FAST, ANTIALIAS_GOOD,
#          ANTIALIAS_BEST, ANTIALIAS_GRAY, ANTIALIAS_SUBPIXEL
ANTIALIAS_MODE = cairo.ANTIALIAS_GRAY

ANTIALIAS_MAP = {
    "none": cairo.ANTIALIAS_NONE,
    "fast": cairo.ANTIALIAS_FAST,
    "good": cairo.ANTIALIAS_GOOD,
    "best": cairo.ANTIALIAS_BEST,
    "gray": cairo.ANTIALIAS_GRAY,
    "subpixel": cairo.ANTIALIAS_SUBPIXEL,
}


def write_png(display_list: pf.DisplayList, output_file: str | os.PathLike,
              resolution: float = pf.PPI, antialias: str | None = None) -> cairo.ImageSurface:
    """
    Render a page to a PNG file.

    Args:
        display_list: Page display list, its width/height are in points
        output_file: Destination path
        resolution: Output resolution in pixels per inch
        antialias: Key of ANTIALIAS_MAP, defaults to ANTIALIAS_MODE

    Returns:
        The rendered Cairo image surface.
    """
    scale = resolution / pf.PPI
    width = max(1, math.ceil(display_list.width * scale))
    height = max(1, math.ceil(display_list.height * scale))

    # Create Cairo surface and context
    surface = cairo.ImageSurface(cairo.FORMAT_RGB24, width, height)
    cc = cairo.Context(surface)

    # Fill in the white background
    cc.set_source_rgb(1.0, 1.0, 1.0)
    cc.rectangle(0, 0, width, height)
    cc.fill()

    cc.set_antialias(ANTIALIAS_MAP.get(antialias, ANTIALIAS_MODE))
    cc.scale(scale, scale)

    render_display_list(display_list, cc, display_list.height)

    surface.write_to_png(os.fspath(output_file))
    logger.info("Wrote PNG page %dx%d to %s", width, height, output_file)
    return surface
