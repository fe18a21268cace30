"""
Position Assigner.

Cell positions on an unbounded canvas: x grows right from 0, y grows
downward from 0 as negative values. Translation onto real pages happens
only at draw time.
"""

from typing import List, Sequence

import numpy as np

from .cells import Cells


def column_offsets(widths: Sequence[float]) -> List[float]:
    """Exclusive prefix sum of column widths."""
    sums = np.cumsum(np.asarray(widths, dtype=float))
    return [0.0] + [float(s) for s in sums[:-1]]


def row_offsets(heights: Sequence[float]) -> List[float]:
    """Negative exclusive prefix sum of row heights."""
    sums = np.cumsum(np.asarray(heights, dtype=float))
    return [0.0] + [float(-s) for s in sums[:-1]]


def assign_positions(cells: Cells, widths: Sequence[float], heights: Sequence[float]) -> None:
    """Set every placed cell's (x, y) from its column and row index."""
    xs = column_offsets(widths)
    ys = row_offsets(heights)
    for placed in cells:
        placed.x = xs[placed.column]
        placed.y = ys[placed.row]
