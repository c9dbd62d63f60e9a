"""Summary statistics over a raw grid, independent of chart mode."""

import logging
from dataclasses import dataclass
from typing import Any, Optional, Sequence

from cell_sanitizer import sanitize_number

logger = logging.getLogger('statchart.data_summary')


@dataclass(frozen=True)
class Summary:
    """Counts and extremes of the grid's value cells."""

    category_count: int
    year_count: int
    point_count: int
    average: float
    max: float
    min: float


def summarize(grid: Sequence[Sequence[Any]]) -> Optional[Summary]:
    """
    Summarize the value cells of a grid.

    Row 0 is taken as the header and column 0 as the category label. Every
    value cell under the header is sanitized and counted, so blank, missing
    and unparsable cells all count as zero.

    Returns:
        Summary, or None when the grid has no data row
    """
    if not grid or len(grid) < 2:
        return None

    header = grid[0]
    rows = grid[1:]
    year_count = max(len(header) - 1, 0)

    total = 0.0
    valid_count = 0
    max_value = float("-inf")
    min_value = float("inf")

    for column in range(1, len(header)):
        for row in rows:
            value = sanitize_number(row[column] if column < len(row) else None)
            total += value
            valid_count += 1
            max_value = max(max_value, value)
            min_value = min(min_value, value)

    if not valid_count:
        logger.debug("No value cells observed in %d row(s)", len(rows))

    return Summary(
        category_count=len(rows),
        year_count=year_count,
        point_count=year_count * len(rows),
        average=total / valid_count if valid_count > 0 else 0,
        max=max_value if valid_count else 0,
        min=min_value if valid_count else 0,
    )
