#!/usr/bin/env python3
"""
Unit tests for per-table chart configuration handling.
"""

from chart_config import (
    ChartConfig,
    chart_title,
    default_target_year,
    normalize_chart_config,
    sync_chart_configs,
)
from series_builder import ChartMode


class TestDefaultTargetYear:
    """Test cases for default_target_year."""

    def test_keeps_current_selection(self):
        assert default_target_year([2022, 2023], 2023) == 2023

    def test_falls_back_to_first_year(self):
        assert default_target_year([2022, 2023], 1999) == 2022
        assert default_target_year(["2021", "x", 2022]) == 2021

    def test_no_years(self):
        assert default_target_year([], 2023) is None
        assert default_target_year(None) is None


class TestNormalizeChartConfig:
    """Test cases for normalize_chart_config."""

    def test_defaults(self):
        chart_config = normalize_chart_config({})
        assert chart_config == ChartConfig(mode=ChartMode.BAR, height=400, target_year=None)

    def test_values_are_coerced(self):
        chart_config = normalize_chart_config(
            {"type": "PIE", "height": "510", "target_year": "2023"},
            selected_years=[2022, 2023],
        )
        assert chart_config.mode == ChartMode.PIE
        assert chart_config.height == 500
        assert chart_config.target_year == 2023

    def test_invalid_values_fall_back(self):
        chart_config = normalize_chart_config(
            {"mode": "radar", "height": "tall", "target_year": "soon"},
            selected_years=[2020],
        )
        assert chart_config == ChartConfig(mode=ChartMode.BAR, height=400, target_year=2020)

    def test_height_ties_snap_down(self):
        assert normalize_chart_config({"height": 450}).height == 400


class TestSyncChartConfigs:
    """Test cases for sync_chart_configs."""

    def test_new_tables_get_defaults(self):
        synced = sync_chart_configs({}, ["t1"], [2022, 2023])
        assert synced == {"t1": ChartConfig(target_year=2022)}

    def test_existing_config_keeps_mode_and_valid_year(self):
        configs = {"t1": ChartConfig(mode=ChartMode.PIE, height=600, target_year=2023)}
        synced = sync_chart_configs(configs, ["t1"], [2022, 2023])
        assert synced["t1"] == ChartConfig(mode=ChartMode.PIE, height=600, target_year=2023)

    def test_stale_year_is_reset(self):
        configs = {"t1": ChartConfig(mode=ChartMode.DOUGHNUT, target_year=2019)}
        synced = sync_chart_configs(configs, ["t1"], [2022, 2023])
        assert synced["t1"].target_year == 2022
        assert synced["t1"].mode == ChartMode.DOUGHNUT

    def test_cleared_selection_clears_year(self):
        configs = {"t1": ChartConfig(target_year=2022)}
        assert sync_chart_configs(configs, ["t1"], [])["t1"].target_year is None

    def test_vanished_tables_are_dropped_without_mutating_input(self):
        configs = {"t1": ChartConfig(), "gone": ChartConfig()}
        synced = sync_chart_configs(configs, ["t1", "t2"], [2022])
        assert set(synced) == {"t1", "t2"}
        assert set(configs) == {"t1", "gone"}


class TestChartTitle:
    """Test cases for chart_title."""

    def test_comparison_title_lists_years(self):
        title = chart_title("PDRB", ChartConfig(mode=ChartMode.LINE), [2022, 2023])
        assert title == "PDRB (2022, 2023)"

    def test_proportion_title_names_target_year(self):
        title = chart_title("PDRB", ChartConfig(mode=ChartMode.PIE, target_year=2023), [2022, 2023])
        assert title == "PDRB (Tahun 2023)"

    def test_proportion_title_defaults_to_first_year(self):
        title = chart_title("PDRB", ChartConfig(mode=ChartMode.DOUGHNUT), [2021])
        assert title == "PDRB (Tahun 2021)"
