# PageForge - Page Decoration Rendering
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
PageForge Unit Converter Module

Measures in enhancement configuration are given in document units and are
converted to points (the absolute unit of the graphics context) only at
render time. A measure is either a bare number, interpreted in the
converter's current default unit, or a number with an explicit unit suffix.

Supported units:
  pt  - point, 1/72 inch (absolute unit)
  px  - pixel, 1/dpi inch
  in  - inch
  cm  - centimetre
  mm  - millimetre
  pc  - pica, 12 points
"""

from __future__ import annotations

import logging
import re

from . import types as pf
from .error import ConfigurationError

logger = logging.getLogger(__name__)

# <number><unit>, e.g. "2", "-1.5mm", ".5in"
_MEASURE_RE = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+))\s*([a-z]{2})?\s*$")


def _is_known_unit(unit: str) -> bool:
    return unit == pf.UNIT_PX or unit in pf.UNIT_POINTS


def parse_measure(value) -> tuple[float, str | None]:
    """Split a measure into its number and optional unit suffix.

    Args:
        value: A number, or a string such as ``"2"``, ``"1.5mm"`` or ``"-3px"``

    Returns:
        Tuple of (number, unit) where unit is None when no suffix was given.

    Raises:
        ConfigurationError: If the value is not a measure or the unit is unknown.
    """
    if isinstance(value, bool):
        raise ConfigurationError(f"Invalid measure {value!r}", name="measure", value=value)
    if isinstance(value, (int, float)):
        return float(value), None

    match = _MEASURE_RE.match(str(value))
    if match is None:
        raise ConfigurationError(f"Invalid measure '{value}'", name="measure", value=value)

    number, unit = match.groups()
    if unit is not None and not _is_known_unit(unit):
        raise ConfigurationError(f"Unknown unit '{unit}' in measure '{value}'", name="unit", value=unit)
    return float(number), unit


class UnitConverter:
    """Convert document-unit measures to points."""

    def __init__(self, unit: str = "pt", dpi: float = pf.PPI) -> None:
        if dpi <= 0:
            raise ConfigurationError(f"dpi must be positive, got {dpi}", name="dpi", value=dpi)
        self.dpi = float(dpi)
        self.unit = "pt"
        self.set_unit(unit)

    def set_unit(self, unit: str) -> None:
        """Change the unit bare numbers are interpreted in."""
        if not _is_known_unit(unit):
            raise ConfigurationError(f"Unknown unit '{unit}'", name="unit", value=unit)
        if unit != self.unit:
            logger.debug("Document unit changed from %s to %s", self.unit, unit)
        self.unit = unit

    def unit_size(self, unit: str) -> float:
        """Size of one unit in points."""
        if unit == pf.UNIT_PX:
            return pf.PPI / self.dpi
        return pf.UNIT_POINTS[unit]

    def convert_unit(self, value, unit: str | None = None) -> float:
        """
        Convert a measure to points.

        Args:
            value: Number or measure string
            unit: Unit for bare numbers, defaults to the converter's unit

        Returns:
            The measure in points.
        """
        number, suffix = parse_measure(value)
        unit = suffix or unit or self.unit
        if not _is_known_unit(unit):
            raise ConfigurationError(f"Unknown unit '{unit}'", name="unit", value=unit)
        return number * self.unit_size(unit)
