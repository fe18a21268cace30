"""
Cell Placement and Selection.

`PlacedCell` pairs a cell with its grid coordinates, its owning table and
its canvas position. `Cells` is an ordered selection of placed cells
(a row, a column, a range or the whole table) with aggregate sizing and
bulk styling.
"""

from collections import defaultdict
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional, Tuple

from .types import CellLike


@dataclass(eq=False)
class PlacedCell:
    """A cell in table context: grid coordinates plus canvas position."""
    cell: CellLike
    row: int
    column: int
    table: Any = field(default=None, repr=False)
    x: float = 0.0
    y: float = 0.0

    @property
    def width(self) -> float:
        return self.cell.width

    @property
    def height(self) -> float:
        return self.cell.height

    def style(
        self,
        settings: Optional[Dict[str, Any]] = None,
        callback: Optional[Callable[[CellLike], None]] = None,
    ) -> None:
        """Apply a style mapping and/or a callback to this single cell."""
        if settings:
            self.cell.style(**settings)
        if callback is not None:
            callback(self.cell)


class Cells:
    """Ordered selection of placed cells, stored row-major.

    Row, column and coordinate lookups go through indexes built once per
    selection, so per-row passes over a table stay linear.
    """

    def __init__(self, placed: Iterable[PlacedCell] = ()):
        self._placed: List[PlacedCell] = list(placed)
        self._by_row: Dict[int, List[PlacedCell]] = defaultdict(list)
        self._by_column: Dict[int, List[PlacedCell]] = defaultdict(list)
        self._by_position: Dict[Tuple[int, int], PlacedCell] = {}
        for p in self._placed:
            self._by_row[p.row].append(p)
            self._by_column[p.column].append(p)
            self._by_position[(p.row, p.column)] = p

    def __iter__(self) -> Iterator[PlacedCell]:
        return iter(self._placed)

    def __len__(self) -> int:
        return len(self._placed)

    def __getitem__(self, index: int) -> PlacedCell:
        return self._placed[index]

    def __repr__(self) -> str:
        return f"Cells({len(self._placed)} cells)"

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------

    def row(self, index: int) -> "Cells":
        return Cells(self._by_row.get(index, ()))

    def rows(self, start: int, stop: int) -> "Cells":
        """Rows `start` through `stop`, both inclusive."""
        return Cells(p for p in self._placed if start <= p.row <= stop)

    def column(self, index: int) -> "Cells":
        return Cells(self._by_column.get(index, ()))

    def columns(self, start: int, stop: int) -> "Cells":
        """Columns `start` through `stop`, both inclusive."""
        return Cells(p for p in self._placed if start <= p.column <= stop)

    def at(self, row: int, column: int) -> Optional[PlacedCell]:
        return self._by_position.get((row, column))

    # ------------------------------------------------------------------
    # Aggregates
    # ------------------------------------------------------------------

    def _column_max(self, attr: str) -> float:
        per_column: Dict[int, float] = defaultdict(float)
        for placed in self._placed:
            per_column[placed.column] = max(per_column[placed.column], getattr(placed.cell, attr))
        return sum(per_column.values())

    @property
    def width(self) -> float:
        """Sum over columns of the widest cell in each column."""
        return self._column_max("width")

    @width.setter
    def width(self, value: float) -> None:
        for placed in self._placed:
            placed.cell.width = value

    @property
    def min_width(self) -> float:
        return self._column_max("min_width")

    @property
    def max_width(self) -> float:
        return self._column_max("max_width")

    @property
    def height(self) -> float:
        """Sum over rows of the tallest cell in each row."""
        per_row: Dict[int, float] = defaultdict(float)
        for placed in self._placed:
            per_row[placed.row] = max(per_row[placed.row], placed.cell.height)
        return sum(per_row.values())

    @height.setter
    def height(self, value: float) -> None:
        for placed in self._placed:
            placed.cell.height = value

    # ------------------------------------------------------------------
    # Styling
    # ------------------------------------------------------------------

    def style(
        self,
        settings: Optional[Dict[str, Any]] = None,
        callback: Optional[Callable[[CellLike], None]] = None,
    ) -> None:
        """Apply a style mapping and/or a per-cell callback to every cell."""
        for placed in self._placed:
            if settings:
                placed.cell.style(**settings)
            if callback is not None:
                callback(placed.cell)
