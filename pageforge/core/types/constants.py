# PageForge - Page Decoration Rendering
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
PageForge Types Constants Module

This module contains the constants shared by the graphics context, the
enhancements and the document. They define edge selectors, named dash
patterns, shape drawing modes, drawing priorities and measurement units.
"""

# edge selector flags (bitmask, powers of two)
EDGE_NONE = 0
EDGE_TOP = 1
EDGE_RIGHT = 2
EDGE_BOTTOM = 4
EDGE_LEFT = 8
EDGE_ALL = 15

# Fixed order in which partial borders are drawn
EDGE_ORDER = (EDGE_TOP, EDGE_RIGHT, EDGE_BOTTOM, EDGE_LEFT)

# named dash patterns
DASHING_PATTERN_SOLID = 0
DASHING_PATTERN_DOTTED = 1

# on/off lengths (user space) the named patterns expand to
DASHING_PATTERNS = {
    DASHING_PATTERN_SOLID: [],
    DASHING_PATTERN_DOTTED: [1.0, 2.0],
}

# shape drawing modes
SHAPE_DRAW_STROKE = 0
SHAPE_DRAW_FILL = 1
SHAPE_DRAW_FILL_AND_STROKE = 2

# drawing priorities - higher values are drawn first
DRAWING_PRIORITY_BACKGROUND1 = 60
DRAWING_PRIORITY_BACKGROUND2 = 50
DRAWING_PRIORITY_BACKGROUND3 = 40
DRAWING_PRIORITY_FOREGROUND1 = 30
DRAWING_PRIORITY_FOREGROUND2 = 20
DRAWING_PRIORITY_FOREGROUND3 = 10

# points per inch
PPI = 72.0

# size of one unit expressed in points (px depends on dpi, see unit_converter)
UNIT_POINTS = {
    "pt": 1.0,
    "in": PPI,
    "cm": PPI / 2.54,
    "mm": PPI / 25.4,
    "pc": 12.0,
}
UNIT_PX = "px"

# Bezier control point distance for a quarter circle of radius 1
KAPPA = 0.5522847498307936
