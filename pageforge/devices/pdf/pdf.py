# PageForge - Page Decoration Rendering
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
PDF Output Device

This module renders display lists to PDF files using Cairo's PDFSurface.
Display lists are already in points, so no scaling is applied; every display
list becomes one page sized after its own width and height.
"""

from __future__ import annotations

import logging
import os
from typing import Iterable

import cairo

from ...core import types as pf
from ..common.cairo_renderer import render_display_list

logger = logging.getLogger(__name__)


class PDFDocumentState:
    """
    Maintains state for a multi-page PDF document.

    Pages are appended one at a time; the document is finalized when
    finalize() is called.
    """

    def __init__(self, file_path, width_pdf: float, height_pdf: float) -> None:
        self.file_path = os.fspath(file_path)
        self.width_pdf = width_pdf
        self.height_pdf = height_pdf

        self.surface = cairo.PDFSurface(self.file_path, width_pdf, height_pdf)
        self.context = cairo.Context(self.surface)

        self.pages_written = 0

    def add_page(self, display_list: pf.DisplayList) -> None:
        if self.pages_written > 0:
            # Advance to next page
            self.surface.show_page()

        # Update page size if different
        if display_list.width != self.width_pdf or display_list.height != self.height_pdf:
            self.surface.set_size(display_list.width, display_list.height)
            self.width_pdf = display_list.width
            self.height_pdf = display_list.height

        render_display_list(display_list, self.context, self.height_pdf)
        self.pages_written += 1

    def finalize(self) -> None:
        # The last page has no successor to call show_page for it
        if self.pages_written > 0:
            self.surface.show_page()
        self.surface.finish()
        logger.info("Wrote %d PDF page(s) to %s", self.pages_written, self.file_path)


def write_pdf(display_lists: Iterable[pf.DisplayList], output_file: str | os.PathLike) -> int:
    """
    Render pages to a PDF file.

    Args:
        display_lists: One display list per page
        output_file: Destination path

    Returns:
        Number of pages written.
    """
    pages = list(display_lists)
    if not pages:
        raise ValueError("No pages to write")

    state = PDFDocumentState(output_file, pages[0].width, pages[0].height)
    for display_list in pages:
        state.add_page(display_list)
    state.finalize()
    return state.pages_written
