"""
Table Module.

A Table is built once from a two-dimensional list of cellable values and a
surface to measure against. Construction runs, in order:

1. cell construction (TableBuilder)
2. declarative options (cell_style, column_widths, width, header, row_colors)
3. the optional init callback, which may refine sizes and styles
4. column widths, row heights, cell positions

After that the layout is fixed; `draw` may be called any number of times.

Usage:
    from storyboard.table import make_table

    table = make_table([["A", "B"], ["C", "D"]], surface, header=True,
                       row_colors=["ffffff", "eeeeee"])
    table.draw()
"""

import logging
from numbers import Real
from typing import Any, Dict, List, Optional, Sequence, Union

from .builder import build_cells
from .cells import Cells, PlacedCell
from .errors import ColumnWidthsError, TableError
from .heights import apply_row_heights, resolve_row_heights
from .paginator import paginate
from .positions import assign_positions
from .types import ColumnWidths, DrawCall, InitCallback, Surface, TableOptions
from .widths import (
    apply_column_widths,
    column_bounds,
    resolve_column_widths,
    target_width,
)


logger = logging.getLogger("Storyboard.Table")


class Table:
    """Laid-out table of cells, ready to be drawn onto a surface."""

    def __init__(
        self,
        data: Sequence[Sequence[Any]],
        surface: Surface,
        options: Optional[TableOptions] = None,
        init: Optional[InitCallback] = None,
        **option_kwargs: Any,
    ):
        if options is not None and option_kwargs:
            raise ValueError("Pass either a TableOptions instance or keyword options, not both")
        options = options or TableOptions.from_kwargs(**option_kwargs)

        self.surface = surface
        self.header = False
        self.row_colors: Optional[List[Any]] = None
        self._width_override: Optional[float] = None
        self._laid_out = False

        self.cells, self.row_length, self.column_length = build_cells(surface, data, self)
        self._apply_options(options)

        if init is not None:
            init(self)

        self._layout()

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def _apply_options(self, options: TableOptions) -> None:
        if options.cell_style:
            self.cells.style(options.cell_style)
        if options.column_widths is not None:
            self.column_widths = options.column_widths
        if options.width is not None:
            self.width = options.width
        self.header = bool(options.header)
        if options.row_colors is not None:
            self.row_colors = list(options.row_colors)

    def _layout(self) -> None:
        bounds = column_bounds(self.cells, self.column_length)
        self.natural_column_widths = [float(w) for w in bounds.natural]
        self.natural_width = bounds.natural_width
        self._width = target_width(self.natural_width, self.surface.bounds_width, self._width_override)

        self.column_widths_resolved = resolve_column_widths(bounds, self._width)
        apply_column_widths(self.cells, self.column_widths_resolved)

        self.row_heights = resolve_row_heights(self.cells, self.row_length)
        apply_row_heights(self.cells, self.row_heights)

        assign_positions(self.cells, self.column_widths_resolved, self.row_heights)
        self._laid_out = True
        logger.debug(
            f"Laid out {self.row_length}x{self.column_length} table: "
            f"width {self._width:.2f}, height {self.height:.2f}"
        )

    def _assert_not_laid_out(self, what: str) -> None:
        if self._laid_out:
            raise TableError(f"Cannot change {what} after the table has been laid out")

    # ------------------------------------------------------------------
    # Dimensions
    # ------------------------------------------------------------------

    @property
    def width(self) -> float:
        """Resolved table width (or the requested width while building)."""
        if self._laid_out:
            return self._width
        if self._width_override is not None:
            return self._width_override
        return target_width(self.cells.width, self.surface.bounds_width)

    @width.setter
    def width(self, value: float) -> None:
        self._assert_not_laid_out("width")
        self._width_override = float(value)

    @property
    def height(self) -> float:
        if self._laid_out:
            return float(sum(self.row_heights))
        return self.cells.height

    @property
    def column_widths(self) -> List[float]:
        if self._laid_out:
            return list(self.column_widths_resolved)
        return [self.column(c).width for c in range(self.column_length)]

    @column_widths.setter
    def column_widths(self, widths: ColumnWidths) -> None:
        """Fix column widths.

        Accepts a list/tuple (one width per column index), a dict mapping
        column index to width, or a single number applied to every column.
        """
        self._assert_not_laid_out("column widths")
        if isinstance(widths, (list, tuple)):
            for index, w in enumerate(widths):
                self.column(index).width = w
        elif isinstance(widths, dict):
            for index, w in widths.items():
                self.column(index).width = w
        elif isinstance(widths, Real) and not isinstance(widths, bool):
            self.cells.width = widths
        else:
            raise ColumnWidthsError(f"Cannot interpret column widths of type {type(widths).__name__}")

    # ------------------------------------------------------------------
    # Selection & styling
    # ------------------------------------------------------------------

    def row(self, index: int) -> Cells:
        return self.cells.row(index)

    def rows(self, start: int, stop: int) -> Cells:
        return self.cells.rows(start, stop)

    def column(self, index: int) -> Cells:
        return self.cells.column(index)

    def columns(self, start: int, stop: int) -> Cells:
        return self.cells.columns(start, stop)

    def cell(self, row: int, column: int) -> Optional[PlacedCell]:
        return self.cells.at(row, column)

    def style(
        self,
        selection: Union[Cells, PlacedCell],
        settings: Optional[Dict[str, Any]] = None,
        callback=None,
    ) -> None:
        """Style a selection with a mapping and/or a per-cell callback.

        Example:
            table.style(table.row(0), {"background_color": "ff00ff"})
            table.style(table.column(0), callback=lambda c: setattr(c, "border_width", 2))
            table.style(table.cell(0, 0), {"font_style": "bold"})
        """
        selection.style(settings, callback)

    # ------------------------------------------------------------------
    # Drawing
    # ------------------------------------------------------------------

    def draw(self, surface: Optional[Surface] = None, start_cursor: Optional[float] = None) -> List[DrawCall]:
        """Ink the table at the surface cursor (or `start_cursor`)."""
        return paginate(self, surface or self.surface, start_cursor)


def make_table(
    data: Sequence[Sequence[Any]],
    surface: Surface,
    options: Optional[TableOptions] = None,
    init: Optional[InitCallback] = None,
    **option_kwargs: Any,
) -> Table:
    """Set up, but do not draw, a table."""
    return Table(data, surface, options, init, **option_kwargs)


def draw_table(
    data: Sequence[Sequence[Any]],
    surface: Surface,
    options: Optional[TableOptions] = None,
    init: Optional[InitCallback] = None,
    **option_kwargs: Any,
) -> Table:
    """Set up a table and draw it at the surface cursor."""
    table = Table(data, surface, options, init, **option_kwargs)
    table.draw()
    return table
