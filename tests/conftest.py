# Tests configuration for Storyboard
import pytest
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from storyboard.table import Cell


class FakeSurface:
    """In-memory surface: a page box of `width` x `height` with origin at 0."""

    def __init__(self, width=200.0, height=100.0, bottom=0.0, left=0.0,
                 stretchy=False, margin_bottom=None):
        self._width = width
        self._left = left
        self._bottom = bottom
        self.top = bottom + height
        self.stretchy = stretchy
        self._margin_bottom = bottom if margin_bottom is None else margin_bottom
        self.canvas = None
        self.page_number = 1
        self.cursor_y = self.top
        self.events = []

    @property
    def bounds_width(self):
        return self._width

    @property
    def bounds_left_absolute(self):
        return self._left

    @property
    def bounds_bottom_absolute(self):
        return self._bottom

    @property
    def margin_box_bottom_absolute(self):
        return self._margin_bottom

    def is_stretchy(self):
        return self.stretchy

    def advance_page_or_column(self):
        self.page_number += 1
        self.cursor_y = self.top
        self.events.append(("break", self.page_number))


class StubCell(Cell):
    """Cell with fixed content size that records draws instead of inking.

    `height` may be a number or a function of the cell's width.
    """

    def __init__(self, surface, content="", natural=100.0, height=10.0, **options):
        self._natural = natural
        self._content_height = height
        self.drawn = []
        super().__init__(surface, content, padding=0, **options)

    def natural_content_width(self):
        return self._natural

    def natural_content_height(self):
        if callable(self._content_height):
            return self._content_height(self.width)
        return self._content_height

    def draw(self, surface, point):
        self.drawn.append((surface.page_number, point, self.background_color))
        surface.events.append(("draw", self.content, surface.page_number, point))


@pytest.fixture
def surface():
    """Page box 200 wide, 100 tall, bottom at 0."""
    return FakeSurface()


@pytest.fixture
def make_stub(surface):
    """Factory for stub cells bound to the default surface."""
    def _make(content="", **kwargs):
        return StubCell(surface, content, **kwargs)
    return _make


@pytest.fixture
def stub_grid(surface):
    """Factory for a rows x columns grid of identical stub cells."""
    def _grid(rows, columns, natural=50.0, height=30.0, **kwargs):
        return [
            [StubCell(surface, f"r{r}c{c}", natural=natural, height=height, **kwargs)
             for c in range(columns)]
            for r in range(rows)
        ]
    return _grid
