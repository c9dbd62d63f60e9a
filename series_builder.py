"""
Series building: turns a resolved table into chart-ready series.

Comparison (bar) and trend (line) charts get one series per year column.
Proportion charts (pie, doughnut) get a single series of positive slices
for one target year.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

import pandas as pd

import config
from cell_sanitizer import cell_text, extract_year, sanitize_number
from header_resolver import ResolvedTable
from row_filter import filter_data_rows

logger = logging.getLogger('statchart.series_builder')


class ChartMode:
    """Supported chart presentation modes."""
    BAR = "bar"            # categorical comparison
    LINE = "line"          # trend over time
    PIE = "pie"            # single-period proportion
    DOUGHNUT = "doughnut"  # single-period proportion, hollow

    ALL = (BAR, LINE, PIE, DOUGHNUT)
    PROPORTION = (PIE, DOUGHNUT)

    @classmethod
    def normalize(cls, mode: Any) -> str:
        """Map user input to a known mode; anything unrecognised becomes a bar chart."""
        value = str(mode or "").strip().lower()
        if value in cls.ALL:
            return value
        logger.warning("Unknown chart mode %r, falling back to %s", mode, cls.BAR)
        return cls.BAR

    @classmethod
    def is_proportion(cls, mode: str) -> bool:
        return mode in cls.PROPORTION


@dataclass
class Series:
    """One named list of values bound to the chart categories."""

    label: str
    values: List[float] = field(default_factory=list)


@dataclass
class SeriesSet:
    """Category labels plus the series drawn over them."""

    category_labels: List[str] = field(default_factory=list)
    series: List[Series] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.series

    def all_values(self) -> List[float]:
        return [value for s in self.series for value in s.values]

    def to_dict(self) -> Dict[str, Any]:
        """Chart.js-shaped payload: ``{"labels": [...], "datasets": [...]}``."""
        return {
            "labels": list(self.category_labels),
            "datasets": [{"label": s.label, "data": list(s.values)} for s in self.series],
        }

    def to_dataframe(self) -> pd.DataFrame:
        """One column per series, indexed by category label."""
        # Keyed by position first so repeated labels do not collapse columns
        frame = pd.DataFrame(
            {i: s.values for i, s in enumerate(self.series)},
            index=pd.Index(self.category_labels, name="category"),
        )
        frame.columns = [s.label for s in self.series]
        return frame


def _cell(row: Sequence[Any], index: int) -> Any:
    return row[index] if index < len(row) else None


def _category_label(row: Sequence[Any]) -> str:
    return cell_text(_cell(row, 0))


def column_label(header_row: Sequence[Any], index: int,
                 year_axis: Optional[Sequence[int]] = None) -> str:
    """
    Label for data column ``index`` (1-based, column 0 holds categories).

    The caller's year axis wins; otherwise a year embedded in the header
    text; otherwise a synthetic ``"Column i"``.
    """
    if year_axis and index - 1 < len(year_axis):
        return str(year_axis[index - 1])

    year = extract_year(_cell(header_row, index))
    if year is not None:
        return str(year)
    return f"Column {index}"


def find_year_column_index(header_row: Sequence[Any], target_year: int) -> int:
    """
    Locate the header column holding ``target_year``.

    Matches exact text ("2023"), integer value (2023, "2023.0") or a year
    embedded in text ("Tahun 2023"). Returns -1 when nothing matches.
    """
    target_text = str(target_year)
    for index in range(1, len(header_row)):
        header = cell_text(header_row[index])

        if header == target_text:
            return index

        try:
            if int(float(header)) == target_year:
                return index
        except (ValueError, OverflowError):
            pass

        if extract_year(header) == target_year:
            return index

    logger.info("No header column found for year %s in %s", target_year, list(header_row))
    return -1


def resolve_target_column(header_row: Sequence[Any],
                          year_axis: Optional[Sequence[int]],
                          target_year: Optional[int]) -> Optional[int]:
    """
    Resolve the single column a proportion chart draws from.

    With a year axis, the position of ``target_year`` in it is authoritative
    and header text is ignored. Without one, the header text is searched.
    Returns None when the year cannot be resolved; no closest-year guess
    is made.
    """
    if target_year is None:
        if not year_axis:
            logger.info("No target year and no year axis; nothing to resolve")
            return None
        target_year = year_axis[0]

    if year_axis:
        if target_year not in year_axis:
            logger.info("Target year %s not in year axis %s", target_year, list(year_axis))
            return None
        return 1 + list(year_axis).index(target_year)

    index = find_year_column_index(header_row, target_year)
    return index if index > 0 else None


def _build_column_series(header_row: Sequence[Any],
                         rows: List[List[Any]],
                         year_axis: Optional[Sequence[int]]) -> SeriesSet:
    labels = [_category_label(row) for row in rows]

    series = []
    for index in range(1, len(header_row)):
        label = column_label(header_row, index, year_axis)
        values = [sanitize_number(_cell(row, index)) for row in rows]
        logger.debug("Column %d (%r -> %s): %s", index, _cell(header_row, index), label, values)
        series.append(Series(label=label, values=values))

    return SeriesSet(category_labels=labels, series=series)


def _build_proportion_series(header_row: Sequence[Any],
                             rows: List[List[Any]],
                             year_axis: Optional[Sequence[int]],
                             target_year: Optional[int]) -> SeriesSet:
    column = resolve_target_column(header_row, year_axis, target_year)
    if column is None:
        return SeriesSet()

    if target_year is None:
        target_year = year_axis[0]

    labels = []
    values = []
    for row_index, row in enumerate(rows):
        label = _category_label(row)
        value = sanitize_number(_cell(row, column))

        if "total" in label.lower() or value <= 0:
            logger.debug("Skipped row %d: label=%r, value=%s", row_index, label, value)
            continue

        labels.append(label)
        values.append(value)

    if not values:
        logger.info("No positive slices for year %s", target_year)
        return SeriesSet()

    label = f"{config.proportion_label_prefix} {target_year}"
    return SeriesSet(category_labels=labels, series=[Series(label=label, values=values)])


def build_series(resolved_table: ResolvedTable,
                 year_axis: Optional[Sequence[int]],
                 mode: str,
                 target_year: Optional[int] = None) -> SeriesSet:
    """
    Build the chart-ready series set for a resolved table.

    Args:
        resolved_table: Header and data rows from ``resolve_header``
        year_axis: Caller's ordered years, one per data column, or None
        mode: One of ``ChartMode.ALL``
        target_year: Year drawn by proportion modes; defaults to the first
            year on the axis

    Returns:
        A new SeriesSet; empty when a proportion year cannot be resolved
        or has no positive values
    """
    rows = filter_data_rows(resolved_table.data_rows)
    header_row = resolved_table.header_row

    if ChartMode.is_proportion(mode):
        return _build_proportion_series(header_row, rows, year_axis, target_year)
    return _build_column_series(header_row, rows, year_axis)
