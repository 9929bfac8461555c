# PageForge - Page Decoration Rendering
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Color parsing for enhancement configuration.

Colors are accepted as CSS color strings (``"#ff8800"``, ``"red"``,
``"rgb(0, 128, 255)"``) and resolved through Pillow's ImageColor, or as
RGB tuples of floats in the 0-1 range. They are normalized to device RGB
tuples which the Cairo renderer consumes directly.
"""

from __future__ import annotations

from PIL import ImageColor

from .error import ConfigurationError


def parse_color(color) -> tuple[float, float, float]:
    if isinstance(color, (tuple, list)):
        if len(color) != 3:
            raise ConfigurationError(f"RGB color needs 3 components, got {len(color)}", name="color", value=color)
        try:
            components = tuple(float(c) for c in color)
        except (TypeError, ValueError):
            raise ConfigurationError(f"Invalid RGB color {color!r}", name="color", value=color)
        if any(c < 0.0 or c > 1.0 for c in components):
            raise ConfigurationError(f"RGB components must be within 0-1: {color!r}", name="color", value=color)
        return components

    try:
        rgb = ImageColor.getrgb(str(color))
    except ValueError:
        raise ConfigurationError(f"Unknown color '{color}'", name="color", value=color)

    # getrgb returns RGBA for colors with an alpha channel, alpha is not supported
    return rgb[0] / 255.0, rgb[1] / 255.0, rgb[2] / 255.0
