"""
Table Cell Module

Base class for everything that can sit in a table grid. A cell knows its
natural, minimum and maximum width, its height at the width it is given,
and how to ink itself onto a surface. Subclasses only supply the content
size and the content drawing.
"""

from typing import Any, Iterable, Optional, Tuple

from ..config import Config
from ..reporting.pdf.styles import to_color
from .types import Point, Surface


BORDER_SIDES = ("top", "right", "bottom", "left")


def normalize_padding(padding: Any) -> Tuple[float, float, float, float]:
    """Expand a CSS-like padding value to (top, right, bottom, left)."""
    if isinstance(padding, (int, float)):
        return (float(padding),) * 4
    values = [float(p) for p in padding]
    if len(values) == 2:
        return (values[0], values[1], values[0], values[1])
    if len(values) == 3:
        return (values[0], values[1], values[2], values[1])
    if len(values) == 4:
        return tuple(values)
    raise ValueError(f"Padding must have 1, 2, 3 or 4 values, got {len(values)}")


class Cell:
    """
    A single unit of table content.

    Width and height are natural until set; setting the width pins the
    natural, min and max width to that value.
    """

    STYLE_ATTRIBUTES = (
        "padding", "borders", "border_width", "border_color",
        "background_color", "width", "height", "min_width", "max_width",
    )

    def __init__(self, surface: Surface, content: Any = None, **options: Any):
        self.surface = surface
        self.content = content
        self._padding = normalize_padding(Config.CELL_PADDING)
        self._borders = set(BORDER_SIDES)
        self.border_width = Config.BORDER_WIDTH
        self.border_color = Config.BORDER_COLOR
        self.background_color = None
        self._width: Optional[float] = None
        self._height: Optional[float] = None
        self._min_width: Optional[float] = None
        self._max_width: Optional[float] = None
        if options:
            self.style(**options)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.content!r})"

    # ------------------------------------------------------------------
    # Style
    # ------------------------------------------------------------------

    def style(self, **settings: Any) -> None:
        """Apply a mapping of style attributes to this cell."""
        for key, value in settings.items():
            if key not in self.STYLE_ATTRIBUTES:
                raise ValueError(f"{type(self).__name__} has no style attribute '{key}'")
            setattr(self, key, value)

    @property
    def padding(self) -> Tuple[float, float, float, float]:
        return self._padding

    @padding.setter
    def padding(self, value: Any) -> None:
        self._padding = normalize_padding(value)

    @property
    def borders(self) -> Tuple[str, ...]:
        return tuple(side for side in BORDER_SIDES if side in self._borders)

    @borders.setter
    def borders(self, sides: Iterable[str]) -> None:
        sides = set(sides)
        unknown = sides - set(BORDER_SIDES)
        if unknown:
            raise ValueError(f"Unknown border side(s): {sorted(unknown)}")
        self._borders = sides

    @property
    def padding_horizontal(self) -> float:
        return self._padding[1] + self._padding[3]

    @property
    def padding_vertical(self) -> float:
        return self._padding[0] + self._padding[2]

    # ------------------------------------------------------------------
    # Sizing
    # ------------------------------------------------------------------

    def natural_content_width(self) -> float:
        raise NotImplementedError

    def natural_content_height(self) -> float:
        raise NotImplementedError

    @property
    def natural_width(self) -> float:
        if self._width is not None:
            return self._width
        return self.natural_content_width() + self.padding_horizontal

    @property
    def width(self) -> float:
        return self.natural_width

    @width.setter
    def width(self, value: float) -> None:
        self._width = self._min_width = self._max_width = float(value)

    @property
    def min_width(self) -> float:
        if self._min_width is not None:
            return self._min_width
        return self.padding_horizontal

    @min_width.setter
    def min_width(self, value: float) -> None:
        self._min_width = float(value)

    @property
    def max_width(self) -> float:
        if self._max_width is not None:
            return self._max_width
        return self.surface.bounds_width

    @max_width.setter
    def max_width(self, value: float) -> None:
        self._max_width = float(value)

    @property
    def content_width(self) -> float:
        return self.width - self.padding_horizontal

    @property
    def height(self) -> float:
        if self._height is not None:
            return self._height
        return self.natural_content_height() + self.padding_vertical

    @height.setter
    def height(self, value: float) -> None:
        self._height = float(value)

    # ------------------------------------------------------------------
    # Drawing
    # ------------------------------------------------------------------

    def draw(self, surface: Surface, point: Point) -> None:
        """Ink the cell with its top-left corner at `point`.

        `point` is relative to the surface bounds; the cell never stores it.
        """
        x, y = point
        left = surface.bounds_left_absolute + x
        top = surface.bounds_bottom_absolute + y
        self.draw_background(surface, left, top)
        self.draw_borders(surface, left, top)
        self.draw_content(surface, (x + self._padding[3], y - self._padding[0]))

    def draw_background(self, surface: Surface, left: float, top: float) -> None:
        color = to_color(self.background_color)
        if color is None:
            return
        canvas = surface.canvas
        canvas.saveState()
        canvas.setFillColor(color)
        canvas.rect(left, top - self.height, self.width, self.height, stroke=0, fill=1)
        canvas.restoreState()

    def draw_borders(self, surface: Surface, left: float, top: float) -> None:
        color = to_color(self.border_color)
        if color is None or not self._borders or self.border_width <= 0:
            return
        right, bottom = left + self.width, top - self.height
        lines = {
            "top": (left, top, right, top),
            "right": (right, top, right, bottom),
            "bottom": (left, bottom, right, bottom),
            "left": (left, top, left, bottom),
        }
        canvas = surface.canvas
        canvas.saveState()
        canvas.setStrokeColor(color)
        canvas.setLineWidth(self.border_width)
        for side in self.borders:
            canvas.line(*lines[side])
        canvas.restoreState()

    def draw_content(self, surface: Surface, point: Point) -> None:
        raise NotImplementedError
