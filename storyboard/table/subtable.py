"""
Subtable Cell Module

A cell whose content is a fully laid out Table. Sizing and drawing are
delegated to the nested table's cells; the nested table keeps its own
resolved widths and never paginates on its own.
"""

import logging
from typing import Any

from .cell import Cell
from .types import Point, Surface


logger = logging.getLogger("Storyboard.SubtableCell")


class SubtableCell(Cell):
    """Cell wrapping a nested Table."""

    STYLE_ATTRIBUTES = Cell.STYLE_ATTRIBUTES + ("font_size", "text_color")

    def __init__(self, surface: Surface, subtable: Any, **options: Any):
        super().__init__(surface, subtable)
        self.subtable = subtable
        self.padding = 0
        if options:
            self.style(**options)

    @property
    def font_size(self):
        return None

    @font_size.setter
    def font_size(self, value: float) -> None:
        # Nested widths and row heights were fixed when the subtable was laid
        # out; pass font_size in the nested cell_style to size with it.
        logger.warning(
            f"font_size {value} applied to an already laid out subtable; "
            "nested cell sizes are not recomputed"
        )
        self.subtable.cells.style({"font_size": value})

    @property
    def text_color(self):
        return None

    @text_color.setter
    def text_color(self, value: Any) -> None:
        self.subtable.cells.style({"text_color": value})

    def natural_content_width(self) -> float:
        return self.subtable.cells.width

    def natural_content_height(self) -> float:
        return self.subtable.cells.height

    @property
    def min_width(self) -> float:
        if self._min_width is not None:
            return self._min_width
        return self.subtable.cells.min_width + self.padding_horizontal

    @min_width.setter
    def min_width(self, value: float) -> None:
        self._min_width = float(value)

    @property
    def max_width(self) -> float:
        if self._max_width is not None:
            return self._max_width
        return self.subtable.cells.max_width + self.padding_horizontal

    @max_width.setter
    def max_width(self, value: float) -> None:
        self._max_width = float(value)

    def draw_content(self, surface: Surface, point: Point) -> None:
        x, y = point
        for placed in self.subtable.cells:
            placed.cell.draw(surface, (x + placed.x, y + placed.y))
