#!/usr/bin/env python3
"""
End-to-end tests for the grid-to-chart pipeline.
"""

from unittest.mock import patch

import pytest

from axis_bounds import AxisBounds
from chart_engine import ChartData, build_chart
from series_builder import ChartMode

GRID = [
    ["Region", "2022", "2023"],
    ["A", "10", "20"],
    ["B", "5", "Rp 15.000"],
]

GRIDS = [
    GRID,
    [["A", "10", "20"], ["Region", "2022", "2023"], ["B", "-5", "3"]],
    [["Wilayah", "Tahun 2020", "Tahun 2021"], ["X", "-1.5", "-2"], ["Total", "1", "1"]],
    [["Region", "Jumlah"], ["A", "abc"], ["", "3"], ["B"]],
]


class TestScenarios:
    """Reference scenarios for the pipeline."""

    def test_trend_chart(self):
        chart_data = build_chart(GRID, [2022, 2023], ChartMode.LINE)
        series_set = chart_data.series_set
        assert [s.label for s in series_set.series] == ["2022", "2023"]
        assert series_set.series[0].values == [10.0, 5.0]
        assert series_set.series[1].values == [20.0, 15000.0]
        assert series_set.category_labels == ["A", "B"]
        assert chart_data.bounds.min == 0

    def test_pie_chart(self):
        chart_data = build_chart(GRID, [2022, 2023], ChartMode.PIE, 2023)
        series_set = chart_data.series_set
        assert len(series_set.series) == 1
        assert "2023" in series_set.series[0].label
        assert series_set.series[0].values == [20.0, 15000.0]
        assert series_set.category_labels == ["A", "B"]
        assert chart_data.bounds is None

    def test_swapped_header(self):
        grid = [["A", "10", "20"], ["Region", "2022", "2023"], ["B", "5", "15"]]
        chart_data = build_chart(grid, None, ChartMode.BAR)
        assert chart_data.series_set.category_labels == ["A", "B"]
        assert [s.label for s in chart_data.series_set.series] == ["2022", "2023"]

    def test_unknown_target_year(self):
        chart_data = build_chart(GRID, [2022, 2023], ChartMode.PIE, 1999)
        assert chart_data.series_set.series == []
        assert chart_data.series_set.category_labels == []
        assert chart_data.is_empty

    def test_total_row_excluded_from_proportion(self):
        grid = GRID + [["Total", "15", "35"]]
        chart_data = build_chart(grid, [2022, 2023], ChartMode.DOUGHNUT, 2023)
        assert "Total" not in chart_data.series_set.category_labels
        assert chart_data.series_set.series[0].values == [20.0, 15000.0]


class TestPipelineProperties:
    """Properties that hold for any input."""

    @pytest.mark.parametrize("grid", GRIDS)
    @pytest.mark.parametrize("mode", ChartMode.ALL)
    def test_determinism(self, grid, mode):
        first = build_chart(grid, [2022, 2023], mode, 2023)
        second = build_chart(grid, [2022, 2023], mode, 2023)
        assert first == second

    @pytest.mark.parametrize("grid", GRIDS)
    @pytest.mark.parametrize("mode", [ChartMode.BAR, ChartMode.LINE])
    def test_zero_inclusion_and_row_conservation(self, grid, mode):
        chart_data = build_chart(grid, None, mode)
        bounds = chart_data.bounds
        assert bounds.includes_zero
        if chart_data.series_set.all_values():
            assert bounds.min <= 0 <= bounds.max
        for series in chart_data.series_set.series:
            assert len(series.values) == len(chart_data.series_set.category_labels)

    @pytest.mark.parametrize("grid", GRIDS)
    @pytest.mark.parametrize("mode", ChartMode.PROPORTION)
    def test_proportion_filtering_law(self, grid, mode):
        for year in (2020, 2021, 2022, 2023, None):
            series_set = build_chart(grid, None, mode, year).series_set
            for series in series_set.series:
                assert all(value > 0 for value in series.values)
                assert len(series.values) == len(series_set.category_labels)
            assert all("total" not in label.lower() for label in series_set.category_labels)


class TestDegradedInput:
    """Insufficient or broken input still yields well-formed output."""

    @pytest.mark.parametrize("grid", [None, [], [["Region", "2022"]]])
    def test_insufficient_grid(self, grid):
        chart_data = build_chart(grid, [2022], ChartMode.BAR)
        assert chart_data.is_empty
        assert chart_data.series_set.category_labels == []
        assert chart_data.bounds == AxisBounds()

        pie_data = build_chart(grid, [2022], ChartMode.PIE, 2022)
        assert pie_data.is_empty
        assert pie_data.bounds is None

    def test_unknown_mode_renders_as_bar(self):
        chart_data = build_chart(GRID, [2022, 2023], "radar")
        assert chart_data.mode == ChartMode.BAR
        assert len(chart_data.series_set.series) == 2

    def test_oversized_integer_cell_keeps_the_chart(self):
        grid = [["Region", "2022", "2023"], ["A", 10 ** 400, "20"], ["B", "5", "7"]]
        chart_data = build_chart(grid, [2022, 2023], ChartMode.BAR)
        assert chart_data.series_set.category_labels == ["A", "B"]
        assert chart_data.series_set.series[0].values == [0.0, 5.0]
        assert chart_data.series_set.series[1].values == [20.0, 7.0]

    def test_unexpected_failure_returns_empty_chart(self):
        with patch("chart_engine.build_series", side_effect=RuntimeError("boom")):
            chart_data = build_chart(GRID, [2022, 2023], ChartMode.LINE)
        assert chart_data == ChartData()

    def test_input_grid_is_left_untouched(self):
        grid = [["A", "10", "20"], ["Region", "2022", "2023"]]
        build_chart(grid, None, ChartMode.BAR)
        assert grid == [["A", "10", "20"], ["Region", "2022", "2023"]]


class TestChartDataPayload:
    """Test cases for ChartData.to_dict."""

    def test_bar_payload(self):
        payload = build_chart(GRID, [2022, 2023], ChartMode.BAR).to_dict()
        assert payload["type"] == "bar"
        assert payload["data"]["labels"] == ["A", "B"]
        assert payload["bounds"]["min"] == 0
        assert payload["bounds"]["includeZero"] is True

    def test_pie_payload_has_no_bounds(self):
        payload = build_chart(GRID, [2022, 2023], ChartMode.PIE, 2022).to_dict()
        assert "bounds" not in payload
        assert payload["data"]["datasets"][0]["data"] == [10.0, 5.0]
