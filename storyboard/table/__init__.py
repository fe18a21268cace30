"""
Table Layout Module

Resolves column widths and row heights for a grid of cells, positions every
cell, and paginates the result onto a drawing surface.

Usage:
    from storyboard.table import make_table

    table = make_table(data, surface, header=True, row_colors=["ffffff", "eeeeee"])
    calls = table.draw()
"""

from .errors import (
    TableError,
    EmptyTableError,
    InvalidTableDataError,
    CannotFitError,
    ColumnWidthsError,
)
from .types import DrawCall, TableOptions, Surface, CellLike
from .cell import Cell
from .text import TextCell
from .subtable import SubtableCell
from .cells import Cells, PlacedCell
from .factory import CellKind, make_cell
from .table import Table, make_table, draw_table

__all__ = [
    # Main API
    "Table",
    "make_table",
    "draw_table",
    "TableOptions",
    "DrawCall",
    # Cells
    "Cell",
    "TextCell",
    "SubtableCell",
    "Cells",
    "PlacedCell",
    "CellKind",
    "make_cell",
    # Contracts
    "Surface",
    "CellLike",
    # Errors
    "TableError",
    "EmptyTableError",
    "InvalidTableDataError",
    "CannotFitError",
    "ColumnWidthsError",
]
