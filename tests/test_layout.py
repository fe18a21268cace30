"""Tests for storyboard/table/heights.py and positions.py."""

import pytest

from storyboard.table import make_table
from storyboard.table.positions import column_offsets, row_offsets


class TestOffsets:
    def test_column_offsets_exclusive_prefix_sum(self):
        assert column_offsets([10, 20, 30]) == [0, 10, 30]

    def test_row_offsets_grow_downward(self):
        assert row_offsets([5, 15, 25]) == [0, -5, -20]

    def test_single_entry(self):
        assert column_offsets([42]) == [0]
        assert row_offsets([42]) == [0]


class TestRowHeights:
    def test_row_height_is_tallest_cell(self, surface, make_stub):
        data = [
            [make_stub(height=10), make_stub(height=25)],
            [make_stub(height=40), make_stub(height=5)],
        ]
        table = make_table(data, surface)
        assert table.row_heights == [25, 40]
        assert table.height == pytest.approx(65)

    def test_heights_uniform_per_row(self, surface, make_stub):
        data = [[make_stub(height=10), make_stub(height=25)]]
        table = make_table(data, surface)
        assert {p.cell.height for p in table.row(0)} == {25}

    def test_height_measured_at_resolved_width(self, surface, make_stub):
        """Content that reflows gets taller when its column shrinks."""
        area = 1000.0
        data = [[make_stub(natural=100, height=lambda w: area / w),
                 make_stub(natural=100, height=lambda w: area / w)]]
        narrow = make_table(data, surface, width=100)
        assert narrow.column_widths == pytest.approx([50, 50])
        assert narrow.row_heights == pytest.approx([20])


class TestPositions:
    def test_example_grid(self, surface, make_stub):
        """Example: two 100pt columns, cell (1, 1) starts at x = 100."""
        data = [
            [make_stub("A", natural=100, min_width=100, max_width=100),
             make_stub("B", natural=100, min_width=100, max_width=100)],
            [make_stub("C", natural=100, min_width=100, max_width=100),
             make_stub("D", natural=100, min_width=100, max_width=100)],
        ]
        table = make_table(data, surface, width=200)
        assert table.column_widths == [100, 100]
        assert table.cell(1, 1).x == 100

    def test_positions_are_prefix_sums(self, surface, make_stub):
        data = [
            [make_stub(natural=30, height=10), make_stub(natural=50, height=12)],
            [make_stub(natural=40, height=7), make_stub(natural=20, height=3)],
            [make_stub(natural=10, height=9), make_stub(natural=10, height=1)],
        ]
        table = make_table(data, surface)
        widths, heights = table.column_widths, table.row_heights
        for placed in table.cells:
            assert placed.x == pytest.approx(sum(widths[:placed.column]))
            assert placed.y == pytest.approx(-sum(heights[:placed.row]))

    def test_position_independent_of_own_content(self, surface, make_stub):
        """A small cell in a big row/column sits where its neighbours say."""
        data = [
            [make_stub(natural=80, height=50), make_stub(natural=10, height=1)],
            [make_stub(natural=5, height=2), make_stub(natural=5, height=2)],
        ]
        table = make_table(data, surface)
        assert (table.cell(1, 1).x, table.cell(1, 1).y) == (80, -50)


class TestLargeTables:
    def test_rows_and_columns_indexed(self, surface, stub_grid):
        grid = stub_grid(3000, 3, natural=20.0, height=5.0)
        table = make_table(grid, surface)
        last = table.row(2999)
        assert [p.cell for p in last] == grid[2999]
        assert len(table.column(1)) == 3000
        assert table.cell(2999, 2).y == pytest.approx(-2999 * 5.0)
        assert table.height == pytest.approx(3000 * 5.0)

    def test_selection_indexes_are_local(self, surface, stub_grid):
        table = make_table(stub_grid(4, 3), surface)
        middle = table.rows(1, 2)
        assert len(middle.row(0)) == 0
        assert [p.column for p in middle.row(2)] == [0, 1, 2]
        assert middle.at(3, 0) is None
        assert middle.at(1, 2) is table.cell(1, 2)
