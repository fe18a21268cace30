"""Tests for storyboard/table/widths.py — column width resolution."""

import numpy as np
import pytest

from storyboard.table import CannotFitError, make_table
from storyboard.table.builder import build_cells
from storyboard.table.widths import (
    ColumnBounds,
    column_bounds,
    resolve_column_widths,
    target_width,
)


def bounds(natural, minimum, maximum):
    return ColumnBounds(
        natural=np.array(natural, dtype=float),
        minimum=np.array(minimum, dtype=float),
        maximum=np.array(maximum, dtype=float),
    )


# =========================================================================
# column_bounds / target_width
# =========================================================================

class TestColumnBounds:
    def test_aggregates_are_column_maxima(self, surface, make_stub):
        data = [
            [make_stub(natural=30, min_width=10, max_width=60), make_stub(natural=80, min_width=5)],
            [make_stub(natural=50, min_width=20, max_width=40), make_stub(natural=10, min_width=15)],
        ]
        cells, _, columns = build_cells(surface, data)
        b = column_bounds(cells, columns)
        assert b.natural.tolist() == [50, 80]
        assert b.minimum.tolist() == [20, 15]
        # Second column falls back to the surface width
        assert b.maximum.tolist() == [60, 200]
        assert b.natural_width == 130


class TestTargetWidth:
    def test_override_wins(self):
        assert target_width(500, 200, override=300) == 300

    def test_natural_when_it_fits(self):
        assert target_width(150, 200) == 150

    def test_capped_at_available(self):
        assert target_width(500, 200) == 200


# =========================================================================
# resolve_column_widths
# =========================================================================

class TestResolveColumnWidths:
    def test_natural_width_unchanged(self):
        """Example: two 100pt columns in a 200pt table stay at 100pt."""
        b = bounds([100, 100], [100, 100], [100, 100])
        assert resolve_column_widths(b, 200) == [100, 100]

    def test_shrink_moves_toward_minimum(self):
        b = bounds([100, 300], [20, 60], [500, 500])
        # f = (240 - 80) / (400 - 80) = 0.5
        assert resolve_column_widths(b, 240) == pytest.approx([60, 180])

    def test_shrink_to_minimum(self):
        b = bounds([100, 300], [20, 60], [500, 500])
        assert resolve_column_widths(b, 80) == pytest.approx([20, 60])

    def test_grow_moves_toward_maximum(self):
        b = bounds([100, 100], [10, 10], [200, 400])
        # f = (300 - 200) / (600 - 200) = 0.25
        assert resolve_column_widths(b, 300) == pytest.approx([125, 175])

    def test_grow_past_maximum_still_sums_to_target(self):
        b = bounds([100, 100], [10, 10], [150, 150])
        widths = resolve_column_widths(b, 400)
        assert sum(widths) == pytest.approx(400)
        assert widths == pytest.approx([200, 200])

    def test_cannot_fit(self):
        """Example: min widths summing to 80 cannot fit in 50."""
        b = bounds([100, 100], [40, 40], [100, 100])
        with pytest.raises(CannotFitError):
            resolve_column_widths(b, 50)

    def test_exactly_minimum_fits(self):
        b = bounds([100, 100], [40, 40], [100, 100])
        assert resolve_column_widths(b, 80) == pytest.approx([40, 40])


class TestGrowFallback:
    def test_no_headroom_grows_proportionally(self):
        b = bounds([50, 150], [50, 150], [50, 150])
        assert resolve_column_widths(b, 400) == pytest.approx([100, 300])

    def test_unbounded_max_grows_proportionally(self):
        b = bounds([50, 150], [10, 10], [np.inf, 300])
        assert resolve_column_widths(b, 400) == pytest.approx([100, 300])

    def test_zero_natural_width_splits_evenly(self):
        b = bounds([0, 0, 0], [0, 0, 0], [0, 0, 0])
        assert resolve_column_widths(b, 90) == pytest.approx([30, 30, 30])


class TestWidthProperties:
    @pytest.mark.parametrize("natural,minimum,maximum", [
        ([100, 300], [20, 60], [500, 500]),
        ([10, 10, 10], [5, 1, 8], [50, 20, 90]),
        ([120, 40], [120, 10], [120, 400]),
    ])
    def test_sum_matches_and_columns_stay_in_bounds(self, natural, minimum, maximum):
        b = bounds(natural, minimum, maximum)
        for target in np.linspace(b.min_width, b.max_width, 9):
            widths = resolve_column_widths(b, float(target))
            assert sum(widths) == pytest.approx(target)
            for w, lo, hi in zip(widths, minimum, maximum):
                assert lo - 1e-9 <= w <= hi + 1e-9


# =========================================================================
# Through Table
# =========================================================================

class TestTableWidths:
    def test_columns_uniform_after_resolution(self, surface, make_stub):
        data = [
            [make_stub(natural=30), make_stub(natural=80)],
            [make_stub(natural=50), make_stub(natural=10)],
        ]
        table = make_table(data, surface, width=180)
        for c in range(2):
            widths = {p.cell.width for p in table.column(c)}
            assert len(widths) == 1
        assert sum(table.column_widths) == pytest.approx(180)

    def test_cannot_fit_raised_at_construction(self, surface, make_stub):
        data = [[make_stub(natural=100, min_width=40), make_stub(natural=100, min_width=40)]]
        with pytest.raises(CannotFitError):
            make_table(data, surface, width=50)

    def test_default_width_capped_by_surface(self, surface, stub_grid):
        table = make_table(stub_grid(1, 3, natural=100.0), surface)
        assert table.width == pytest.approx(200)
        assert table.column_widths == pytest.approx([200 / 3] * 3)

    def test_long_text_stays_within_column_bounds(self, surface):
        """A text cell wider than the page is measured no wider than its max."""
        cells, _, columns = build_cells(surface, [["word " * 80, "x"]])
        b = column_bounds(cells, columns)
        assert b.natural[0] <= b.maximum[0]
        for target in np.linspace(b.min_width, b.max_width, 7):
            widths = resolve_column_widths(b, float(target))
            assert sum(widths) == pytest.approx(target)
            for w, lo, hi in zip(widths, b.minimum, b.maximum):
                assert lo - 1e-9 <= w <= hi + 1e-9

    def test_long_text_fills_surface(self, surface):
        table = make_table([["word " * 80]], surface)
        assert table.width == pytest.approx(200)
        assert table.cells[0].cell.max_width == pytest.approx(200)
