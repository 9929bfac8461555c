# PageForge - Page Decoration Rendering
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
PageForge - border decorations for page rendering.

Typical use:

    from pageforge import Border, Document, Node

    node = Node.from_rect(50, 800, 200, 100, enhancements=[Border(type="top+bottom", size=2)])
    gc = Document().render_page([node], 595, 842)
"""

__version__ = "0.1.0"

from .core.document import Document
from .core.error import ConfigurationError, PageForgeError
from .core.graphics_context import GraphicsContext
from .core.node import Node
from .core.types import Boundary
from .core.unit_converter import UnitConverter
from .enhancement import Border, EnhancementFactory
