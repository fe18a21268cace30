"""
PDF Surface Module.

Drawing surface backed by a ReportLab canvas. Keeps the vertical cursor,
the current page and, for multi-column layouts, the current text column.
All coordinates are absolute PDF points (origin bottom-left).
"""
from io import BytesIO
import logging
from typing import BinaryIO, Optional

from reportlab.pdfgen import canvas as rl_canvas

from .styles import PDFConfig


logger = logging.getLogger("Storyboard.PDFSurface")


class PDFSurface:
    """ReportLab canvas with page / column flow for table drawing."""

    def __init__(self, buffer: Optional[BinaryIO] = None, config: Optional[PDFConfig] = None):
        self.config = config or PDFConfig()
        if self.config.columns < 1:
            raise ValueError("PDFConfig.columns must be at least 1")
        self.buffer = buffer if buffer is not None else BytesIO()
        self.page_width, self.page_height = self.config.page_size

        self.canvas = rl_canvas.Canvas(self.buffer, pagesize=self.config.page_size)
        self.canvas.setTitle(self.config.title)
        self.canvas.setAuthor(self.config.author)

        self.page_number = 1
        self.column_number = 0
        self.cursor_y = self.bounds_top_absolute

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------

    @property
    def margin_box_width(self) -> float:
        return self.page_width - 2 * self.config.margin

    @property
    def bounds_width(self) -> float:
        gutters = self.config.column_gutter * (self.config.columns - 1)
        return (self.margin_box_width - gutters) / self.config.columns

    @property
    def bounds_left_absolute(self) -> float:
        return self.config.margin + self.column_number * (self.bounds_width + self.config.column_gutter)

    @property
    def bounds_bottom_absolute(self) -> float:
        return self.config.margin

    @property
    def bounds_top_absolute(self) -> float:
        return self.page_height - self.config.margin

    @property
    def margin_box_bottom_absolute(self) -> float:
        return self.config.margin

    def is_stretchy(self) -> bool:
        # Page and column boxes have a fixed height
        return False

    # ------------------------------------------------------------------
    # Flow
    # ------------------------------------------------------------------

    def advance_page_or_column(self) -> None:
        """Move to the top of the next column, or of a new page after the last column."""
        if self.column_number + 1 < self.config.columns:
            self.column_number += 1
        else:
            self.canvas.showPage()
            self.page_number += 1
            self.column_number = 0
        self.cursor_y = self.bounds_top_absolute
        logger.debug(f"Advanced to page {self.page_number}, column {self.column_number}")

    def render(self) -> bytes:
        """Finish the document and return the PDF bytes."""
        self.canvas.save()
        return self.buffer.getvalue()
