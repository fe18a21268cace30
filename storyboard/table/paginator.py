"""
Paginator / Renderer.

Walks a laid-out table in row-major order and inks it onto a surface,
breaking to a new page (or column) whenever a cell would cross the bottom
of the reference bounds.

Stored cell positions assume an infinitely long canvas starting at y = 0.
`offset` maps that canvas onto the current page: a cell's absolute top is
`placed.y + offset`. Stored positions are never modified, so a table can
be drawn any number of times with the same result.
"""

import logging
from typing import Any, List, Optional

from ..config import Config
from .cells import PlacedCell
from .types import DrawCall, Surface


logger = logging.getLogger("Storyboard.Paginator")


def stripe_index(row: int, header: bool, palette_length: int) -> Optional[int]:
    """Palette index for a row, or None when the row is not striped.

    Rows are numbered by their position in the original data. With a header
    the header row is never striped and striping restarts at row 1.
    """
    if palette_length == 0 or (header and row == 0):
        return None
    return (row - 1 if header else row) % palette_length


def _draw_call(surface: Surface, placed: PlacedCell, x: float, y: float, header_repeat: bool = False) -> DrawCall:
    return DrawCall(
        page=surface.page_number,
        row=placed.row,
        column=placed.column,
        x=x,
        y=y,
        width=placed.cell.width,
        height=placed.cell.height,
        content=getattr(placed.cell, "content", None),
        header_repeat=header_repeat,
    )


def draw_header(table: Any, surface: Surface) -> List[DrawCall]:
    """Draw row 0 at the surface cursor and move the cursor below it."""
    top = surface.cursor_y
    header_row = table.row(0)
    calls = []
    for placed in header_row:
        x, y = placed.x, top - surface.bounds_bottom_absolute
        placed.cell.draw(surface, (x, y))
        calls.append(_draw_call(surface, placed, x, y, header_repeat=True))
    surface.cursor_y = top - header_row.height
    return calls


def paginate(table: Any, surface: Surface, start_cursor: Optional[float] = None) -> List[DrawCall]:
    """Draw `table` onto `surface`, paginating as needed.

    Args:
        table: Laid-out Table
        surface: Surface to ink onto
        start_cursor: Absolute y to start at; defaults to the surface cursor

    Returns:
        Draw calls in the order they were issued
    """
    tolerance = Config.FP_TOLERANCE
    if start_cursor is not None:
        surface.cursor_y = start_cursor
    offset = surface.cursor_y

    palette = list(table.row_colors or [])
    calls: List[DrawCall] = []
    last_top = offset
    last_height = 0.0

    for placed in table.cells:
        # Reference bounds are the non-stretchy bounds used to decide when to
        # flow to a new column / page
        if surface.is_stretchy():
            reference_bottom = surface.margin_box_bottom_absolute
        else:
            reference_bottom = surface.bounds_bottom_absolute

        height = placed.cell.height
        if height - ((placed.y + offset) - reference_bottom) > tolerance:
            surface.advance_page_or_column()
            logger.debug(f"Page break before row {placed.row} (page {surface.page_number})")
            if table.header and placed.row > 0:
                calls.extend(draw_header(table, surface))
            offset = surface.cursor_y - placed.y
            if height - (surface.cursor_y - reference_bottom) > tolerance:
                logger.warning(f"Row {placed.row} is taller than the available page height")

        x = placed.x
        y = placed.y + offset - surface.bounds_bottom_absolute

        index = stripe_index(placed.row, table.header, len(palette))
        if index is not None:
            placed.cell.background_color = palette[index]

        placed.cell.draw(surface, (x, y))
        calls.append(_draw_call(surface, placed, x, y))
        last_top = placed.y + offset
        last_height = height

    surface.cursor_y = last_top - last_height
    logger.debug(f"Drew {len(calls)} cells, ending on page {surface.page_number}")
    return calls
