# PageForge - Page Decoration Rendering
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

from .base import Enhancement, EnhancementStyle, draw_boundary, draw_rounded_boundary
from .border import Border, compute_offset_points, trim_edge
from .factory import EnhancementFactory
