"""
Text Cell Module

Plain-text cells. Measuring and wrapping are delegated to ReportLab:
`pdfmetrics.stringWidth` gives the unwrapped width, `Paragraph.wrap`
gives the height at a constrained width.
"""

from typing import Any
from xml.sax.saxutils import escape

from reportlab.pdfbase.pdfmetrics import stringWidth
from reportlab.platypus import Paragraph

from ..config import Config
from ..reporting.pdf.styles import create_cell_paragraph_style
from .cell import Cell
from .types import Point, Surface


# Slack added to the wrap width so text measured at exactly its natural
# width does not wrap on rounding
WRAP_TOLERANCE = 1e-3


class TextCell(Cell):
    """Cell holding a run of text, wrapped to the cell width."""

    STYLE_ATTRIBUTES = Cell.STYLE_ATTRIBUTES + (
        "font_name", "font_style", "font_size", "text_color", "align",
    )

    def __init__(self, surface: Surface, content: Any, **options: Any):
        self.font_name = Config.FONT_NAME
        self.font_style = "normal"
        self.font_size = Config.FONT_SIZE
        self.text_color = Config.TEXT_COLOR
        self.align = "left"
        super().__init__(surface, "" if content is None else str(content), **options)

    @property
    def resolved_font(self) -> str:
        if self.font_style == "bold" and self.font_name == Config.FONT_NAME:
            return Config.FONT_NAME_BOLD
        return self.font_name

    def _paragraph(self) -> Paragraph:
        style = create_cell_paragraph_style(
            font_name=self.resolved_font,
            font_size=self.font_size,
            text_color=self.text_color,
            align=self.align,
        )
        markup = escape(self.content).replace("\n", "<br/>")
        return Paragraph(markup, style)

    def natural_content_width(self) -> float:
        widest = max(
            stringWidth(line, self.resolved_font, self.font_size)
            for line in self.content.split("\n")
        )
        # Padded natural width never exceeds the default max (the bounds)
        return min(widest, max(self.surface.bounds_width - self.padding_horizontal, 0.0))

    def natural_content_height(self) -> float:
        if not self.content:
            return self.font_size * Config.LEADING_RATIO
        _, height = self._paragraph().wrap(self.content_width + WRAP_TOLERANCE, float("inf"))
        return height

    def draw_content(self, surface: Surface, point: Point) -> None:
        if not self.content:
            return
        x, y = point
        paragraph = self._paragraph()
        _, height = paragraph.wrap(self.content_width + WRAP_TOLERANCE, float("inf"))
        paragraph.drawOn(
            surface.canvas,
            surface.bounds_left_absolute + x,
            surface.bounds_bottom_absolute + y - height,
        )
