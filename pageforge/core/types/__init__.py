# PageForge - Page Decoration Rendering
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
PageForge Types Package - Public API

Re-exports the constants and graphics types so that callers can use the
single namespace import pattern: `from ..core import types as pf`

**Internal Module Organization:**
- constants.py: edge flags, dash patterns, draw modes, priorities, units
- graphics.py: graphics state, boundary and display list types
"""

from .constants import *
from .graphics import *
