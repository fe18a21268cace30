"""
Height Resolver.

Row heights are aggregated, never negotiated: once widths are fixed each
cell reports its height at that width and the tallest cell sets the row.
"""

import logging
from typing import List

import numpy as np

from .cells import Cells


logger = logging.getLogger("Storyboard.HeightResolver")


def resolve_row_heights(cells: Cells, row_length: int) -> List[float]:
    """Height of each row: the tallest cell at its resolved width."""
    heights = np.zeros(row_length)
    for placed in cells:
        heights[placed.row] = max(heights[placed.row], placed.cell.height)
    logger.debug(f"Resolved {row_length} row heights, total {heights.sum():.2f}")
    return [float(h) for h in heights]


def apply_row_heights(cells: Cells, heights: List[float]) -> None:
    """Push each row height onto every cell in that row."""
    for row_number, h in enumerate(heights):
        cells.row(row_number).height = h
