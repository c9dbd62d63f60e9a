"""Removal of stray header and separator rows from the data region."""

import logging
import re
from typing import Any, List, Sequence

from cell_sanitizer import cell_text

logger = logging.getLogger('statchart.row_filter')

HEADER_KEYWORDS = ("tahun", "year")
BARE_YEAR_PATTERN = re.compile(r"^\d{4}$")


def is_stray_header_row(row: Sequence[Any]) -> bool:
    """True when the row's first cell marks a header or separator, not a category."""
    first_cell = cell_text(row[0]) if len(row) > 0 else ""
    if not first_cell:
        return True

    lowered = first_cell.lower()
    if any(keyword in lowered for keyword in HEADER_KEYWORDS):
        return True
    return bool(BARE_YEAR_PATTERN.match(first_cell))


def filter_data_rows(rows: Sequence[Sequence[Any]]) -> List[List[Any]]:
    """Drop stray header rows, keeping the remaining rows in their original order."""
    kept = []
    for row in rows:
        if is_stray_header_row(row):
            logger.debug("Skipping potential header row: %s", list(row))
            continue
        kept.append(list(row))
    return kept
