"""
Table Types Module

Data classes and collaborator contracts for the table layout engine.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Protocol, Tuple, Union


Point = Tuple[float, float]
ColumnWidths = Union[List[float], Tuple[float, ...], Dict[int, float], float, int]


class Surface(Protocol):
    """Drawing surface a table is laid out against and inked onto.

    All y values are absolute page coordinates (origin bottom-left).
    """

    cursor_y: float
    page_number: int

    @property
    def bounds_width(self) -> float: ...

    @property
    def bounds_left_absolute(self) -> float: ...

    @property
    def bounds_bottom_absolute(self) -> float: ...

    @property
    def margin_box_bottom_absolute(self) -> float: ...

    def is_stretchy(self) -> bool: ...

    def advance_page_or_column(self) -> None: ...


class CellLike(Protocol):
    """Sizing and drawing capability every table cell provides."""

    natural_width: float
    min_width: float
    max_width: float
    width: float
    height: float
    background_color: Any

    def style(self, **settings: Any) -> None: ...

    def draw(self, surface: Surface, point: Point) -> None: ...


@dataclass(frozen=True)
class DrawCall:
    """
    One positioned draw instruction emitted by the paginator.

    Attributes:
        page: Surface page number the cell was inked on
        row: Row index in the original data
        column: Column index in the original data
        x: Left edge, relative to the surface bounds
        y: Top edge, relative to the surface bounds
        width: Resolved cell width
        height: Resolved cell height
        content: Cell content (text, nested table, ...)
        header_repeat: True when this is a repeated header after a break
    """
    page: int
    row: int
    column: int
    x: float
    y: float
    width: float
    height: float
    content: Any = None
    header_repeat: bool = False


@dataclass
class TableOptions:
    """Declarative table options, applied in field order before the init callback."""
    cell_style: Dict[str, Any] = field(default_factory=dict)
    column_widths: Optional[ColumnWidths] = None
    width: Optional[float] = None
    header: bool = False
    row_colors: Optional[List[Any]] = None

    @classmethod
    def from_kwargs(cls, **kwargs: Any) -> "TableOptions":
        """Build options from keyword arguments, rejecting unknown keys."""
        known = set(cls.__dataclass_fields__)
        unknown = sorted(set(kwargs) - known)
        if unknown:
            raise ValueError(f"Unknown table option(s): {', '.join(unknown)}")
        return cls(**kwargs)


InitCallback = Callable[[Any], None]
