"""
Table Builder.

Validates raw table data and turns it into the placed-cell grid.
"""

import logging
from typing import Any, Sequence, Tuple

from .cells import Cells, PlacedCell
from .errors import EmptyTableError, InvalidTableDataError
from .factory import make_cell
from .types import Surface


logger = logging.getLogger("Storyboard.TableBuilder")


def _is_row(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def assert_proper_table_data(data: Any) -> None:
    """Raise if `data` cannot be converted into a table.

    Raises:
        EmptyTableError: data is None or has no rows
        InvalidTableDataError: data or one of its rows is not a list/tuple
    """
    if data is None or (hasattr(data, "__len__") and len(data) == 0):
        raise EmptyTableError(
            "data must be a non-empty, non-None, two dimensional list "
            "of cell-convertible objects"
        )
    if not _is_row(data) or not all(_is_row(row) for row in data):
        raise InvalidTableDataError(
            "data must be a two dimensional list of cellable objects"
        )


def build_cells(surface: Surface, data: Sequence[Sequence[Any]], table: Any = None) -> Tuple[Cells, int, int]:
    """Build the cell grid for `data`.

    Args:
        surface: Surface the cells will be measured against
        data: Rows of cellable values
        table: Owning table, stored on each placed cell

    Returns:
        (cells in row-major order, row count, column count)
    """
    assert_proper_table_data(data)

    row_length = len(data)
    column_length = max(len(row) for row in data)
    if column_length == 0:
        raise EmptyTableError("data rows must contain at least one cell")

    placed = []
    for row_number, row_cells in enumerate(data):
        if len(row_cells) < column_length:
            logger.debug(f"Row {row_number} has {len(row_cells)} of {column_length} cells")
        for column_number, cell_data in enumerate(row_cells):
            cell = make_cell(surface, cell_data)
            placed.append(PlacedCell(cell, row_number, column_number, table))

    logger.debug(f"Built {len(placed)} cells ({row_length} rows x {column_length} columns)")
    return Cells(placed), row_length, column_length
