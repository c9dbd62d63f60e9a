"""
Per-table chart settings for a dashboard of statistical tables.

Every table carries its own chart settings. The helpers here normalize loosely
typed settings and keep them in line with the current year selection.
"""

from dataclasses import dataclass, replace
from typing import Dict, Iterable, List, Mapping, Optional

import config
from series_builder import ChartMode


@dataclass(frozen=True)
class ChartConfig:
    """Chart mode, height in pixels and proportion year for one table."""

    mode: str = ChartMode.BAR
    height: int = config.default_chart_height
    target_year: Optional[int] = None


def _as_int(value: object) -> Optional[int]:
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _as_int_list(values: Optional[Iterable[object]]) -> List[int]:
    if not values:
        return []
    out: List[int] = []
    for v in values:
        number = _as_int(v)
        if number is not None:
            out.append(number)
    return out


def default_target_year(selected_years: Iterable[object], current: Optional[int] = None) -> Optional[int]:
    """Keep ``current`` while it is still selected, else fall back to the first selected year."""
    years = _as_int_list(selected_years)
    if not years:
        return None
    if current is not None and current in years:
        return current
    return years[0]


def _snap_height(height: object) -> int:
    value = _as_int(height)
    if value is None:
        return config.default_chart_height
    return min(config.CHART_HEIGHT_OPTIONS, key=lambda option: (abs(option - value), option))


def normalize_chart_config(raw: Mapping[str, object], *, selected_years: Iterable[object] = ()) -> ChartConfig:
    """
    Build a ChartConfig from a raw settings mapping.

    Accepts the mode under either ``mode`` or ``type``; unknown modes become
    bar charts. Heights snap to the nearest selectable option, and the target
    year falls back to the first of ``selected_years`` when it is missing or
    no longer selected.
    """
    raw = raw or {}
    mode = ChartMode.normalize(raw.get("mode", raw.get("type", ChartMode.BAR)))
    height = _snap_height(raw.get("height", config.default_chart_height))
    target_year = default_target_year(selected_years, _as_int(raw.get("target_year")))
    return ChartConfig(mode=mode, height=height, target_year=target_year)


def sync_chart_configs(
    configs: Mapping[str, ChartConfig],
    table_ids: Iterable[str],
    selected_years: Iterable[object],
) -> Dict[str, ChartConfig]:
    """Reconcile per-table configs with the current tables and year selection.

    New tables get a default bar config, existing ones keep their mode and
    height but have their target year moved back onto the selection, and
    configs for tables that disappeared are dropped.
    """
    years = _as_int_list(selected_years)
    synced: Dict[str, ChartConfig] = {}
    for table_id in table_ids:
        current = configs.get(table_id)
        if current is None:
            synced[table_id] = ChartConfig(target_year=default_target_year(years))
        else:
            synced[table_id] = replace(current, target_year=default_target_year(years, current.target_year))
    return synced


def chart_title(table_name: str, chart_config: ChartConfig, selected_years: Iterable[object]) -> str:
    """Title such as "PDRB (Tahun 2023)" for proportion charts or "PDRB (2022, 2023)" otherwise."""
    years = _as_int_list(selected_years)
    if ChartMode.is_proportion(chart_config.mode):
        year = chart_config.target_year if chart_config.target_year is not None else (years[0] if years else "-")
        return f"{table_name} (Tahun {year})"
    return f"{table_name} ({', '.join(str(y) for y in years)})"
