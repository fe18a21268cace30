"""
Width Resolver.

Aggregates per-column sizing bounds and distributes a target table width
across the columns.

Shrinking moves every column from its natural width toward its minimum by
the same fraction; growing moves every column from natural toward maximum
by the same fraction. Either way the column sum equals the target width.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

import numpy as np

from ..config import Config
from .cells import Cells
from .errors import CannotFitError


logger = logging.getLogger("Storyboard.WidthResolver")


@dataclass(frozen=True)
class ColumnBounds:
    """
    Per-column sizing bounds.

    Attributes:
        natural: Widest natural width in each column
        minimum: Largest min width in each column
        maximum: Largest max width in each column
    """
    natural: np.ndarray
    minimum: np.ndarray
    maximum: np.ndarray

    @property
    def natural_width(self) -> float:
        return float(self.natural.sum())

    @property
    def min_width(self) -> float:
        return float(self.minimum.sum())

    @property
    def max_width(self) -> float:
        return float(self.maximum.sum())


def column_bounds(cells: Cells, column_length: int) -> ColumnBounds:
    """Aggregate natural/min/max width per column."""
    natural = np.zeros(column_length)
    minimum = np.zeros(column_length)
    maximum = np.zeros(column_length)

    for placed in cells:
        c = placed.column
        cell = placed.cell
        natural[c] = max(natural[c], cell.natural_width)
        minimum[c] = max(minimum[c], cell.min_width)
        maximum[c] = max(maximum[c], cell.max_width)

    return ColumnBounds(natural=natural, minimum=minimum, maximum=maximum)


def target_width(natural_width: float, available_width: float, override: Optional[float] = None) -> float:
    """Explicit override if given, else the natural width capped at the available width."""
    if override is not None:
        return float(override)
    return float(min(natural_width, available_width))


def resolve_column_widths(
    bounds: ColumnBounds,
    width: float,
    tolerance: float = Config.FP_TOLERANCE,
) -> List[float]:
    """Distribute `width` across columns.

    Args:
        bounds: Column natural/min/max widths
        width: Target table width
        tolerance: Slack for floating point comparisons

    Returns:
        Resolved column widths summing to `width`

    Raises:
        CannotFitError: width is below the sum of column minimums
    """
    natural, minimum, maximum = bounds.natural, bounds.minimum, bounds.maximum
    natural_width = bounds.natural_width
    min_width = bounds.min_width
    max_width = bounds.max_width

    if width < min_width - tolerance:
        logger.warning(f"Table width {width:.2f} is below minimum content width {min_width:.2f}")
        raise CannotFitError(
            f"Table's width ({width:.2f}) was set too small to contain its contents "
            f"(minimum {min_width:.2f})"
        )

    if abs(width - natural_width) <= tolerance:
        resolved = natural.copy()

    elif width < natural_width:
        # Shrink: natural_width > width >= min_width, so the divisor is positive
        f = (width - min_width) / (natural_width - min_width)
        resolved = minimum + f * (natural - minimum)

    elif np.isfinite(max_width) and max_width - natural_width > tolerance:
        if width > max_width + tolerance:
            logger.warning(
                f"Table width {width:.2f} exceeds maximum content width {max_width:.2f}; "
                "columns will grow past their maximum"
            )
        f = (width - natural_width) / (max_width - natural_width)
        resolved = natural + f * (maximum - natural)

    else:
        # No usable headroom between natural and max widths: grow in
        # proportion to natural width instead
        logger.warning(
            f"Columns have no room to grow (natural {natural_width:.2f}, max {max_width:.2f}); "
            "growing in proportion to natural width"
        )
        if natural_width > tolerance:
            resolved = natural * (width / natural_width)
        else:
            resolved = np.full(len(natural), width / len(natural))

    logger.debug(f"Resolved column widths {np.round(resolved, 2).tolist()} for width {width:.2f}")
    return [float(w) for w in resolved]


def apply_column_widths(cells: Cells, widths: List[float]) -> None:
    """Push each resolved width onto every cell in its column."""
    for column_number, w in enumerate(widths):
        cells.column(column_number).width = w
