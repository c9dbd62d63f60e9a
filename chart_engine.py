"""
Chart engine entry point.

Runs the full grid-to-chart pipeline: header resolution, row filtering,
series building and axis bounds. Callers re-run it whenever the grid, the
selected years or the chart mode change; identical inputs always give
identical output.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Sequence

from axis_bounds import AxisBounds, compute_bounds
from error_handler import handle_chart_error
from header_resolver import resolve_header
from series_builder import ChartMode, SeriesSet, build_series

logger = logging.getLogger('statchart.chart_engine')


@dataclass
class ChartData:
    """Everything a renderer needs to draw one chart."""

    mode: str = ChartMode.BAR
    series_set: SeriesSet = field(default_factory=SeriesSet)
    bounds: Optional[AxisBounds] = None

    @property
    def is_empty(self) -> bool:
        return self.series_set.is_empty

    def to_dict(self) -> Dict[str, Any]:
        payload = {"type": self.mode, "data": self.series_set.to_dict()}
        if self.bounds is not None:
            payload["bounds"] = {
                "min": self.bounds.min,
                "max": self.bounds.max,
                "includeZero": self.bounds.includes_zero,
            }
        return payload


@handle_chart_error(fallback=ChartData)
def build_chart(grid: Sequence[Sequence[Any]],
                year_axis: Optional[Sequence[int]] = None,
                mode: str = ChartMode.BAR,
                target_year: Optional[int] = None) -> ChartData:
    """
    Transform a raw grid into chart-ready data.

    Args:
        grid: Row-major table of cells; row 0 is usually the year header
        year_axis: Selected years, one per data column, authoritative over
            header text
        mode: "bar", "line", "pie" or "doughnut"
        target_year: Year drawn by pie/doughnut charts

    Returns:
        ChartData; proportion modes carry no axis bounds
    """
    mode = ChartMode.normalize(mode)

    if not grid or len(grid) < 2:
        logger.info("Insufficient data (%d rows)", len(grid) if grid else 0)
        return ChartData(mode=mode, bounds=None if ChartMode.is_proportion(mode) else AxisBounds())

    resolved = resolve_header(grid)
    series_set = build_series(resolved, year_axis, mode, target_year)

    bounds = None
    if not ChartMode.is_proportion(mode):
        bounds = compute_bounds(series_set.all_values())

    logger.info(
        "Built %s chart: %d categories, %d series",
        mode, len(series_set.category_labels), len(series_set.series),
    )
    return ChartData(mode=mode, series_set=series_set, bounds=bounds)
