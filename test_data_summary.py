#!/usr/bin/env python3
"""
Unit tests for grid summary statistics.
"""

import pytest

from data_summary import Summary, summarize


class TestSummarize:
    """Test cases for summarize."""

    def test_basic_grid(self):
        grid = [["Region", "2022", "2023"], ["A", "10", "20"], ["B", "5", "Rp 15.000"]]
        summary = summarize(grid)
        assert summary.category_count == 2
        assert summary.year_count == 2
        assert summary.point_count == 4
        assert summary.average == pytest.approx(15035 / 4)
        assert summary.max == 15000
        assert summary.min == 5

    @pytest.mark.parametrize("grid", [None, [], [["Region", "2022"]]])
    def test_insufficient_grid_is_absent(self, grid):
        assert summarize(grid) is None

    def test_blank_and_missing_cells_count_as_zero(self):
        """Sparse rows pull the average and minimum towards zero."""
        grid = [["Region", "2022"], ["A", "10"], ["B", ""], ["C"]]
        summary = summarize(grid)
        assert summary.average == pytest.approx(10 / 3)
        assert summary.max == 10
        assert summary.min == 0

    def test_all_blank_grid_is_zero(self):
        grid = [["Region", "2022"], ["A", ""], ["B", None], ["C"]]
        summary = summarize(grid)
        assert summary == Summary(
            category_count=3, year_count=1, point_count=3, average=0, max=0, min=0,
        )

    def test_negative_values_keep_true_extremes(self):
        grid = [["Region", "2022"], ["A", "-5"], ["B", "-3"]]
        summary = summarize(grid)
        assert summary.max == -3
        assert summary.min == -5
        assert summary.average == pytest.approx(-4)

    def test_unparsable_text_counts_as_zero(self):
        grid = [["Region", "2022", "2023"], ["A", "n/a", "4"]]
        summary = summarize(grid)
        assert summary.average == pytest.approx(2)
        assert summary.min == 0

    def test_oversized_integer_counts_as_zero(self):
        grid = [["Region", "2022"], ["A", 10 ** 400], ["B", "4"]]
        summary = summarize(grid)
        assert summary.average == pytest.approx(2)
        assert summary.min == 0

    def test_category_column_is_ignored(self):
        grid = [["Region", "2022"], ["999", "1"]]
        assert summarize(grid).max == 1

    def test_header_only_grid_width(self):
        grid = [["Region"], ["A", "5"]]
        summary = summarize(grid)
        assert summary.year_count == 0
        assert summary.point_count == 0
        assert summary.average == 0
