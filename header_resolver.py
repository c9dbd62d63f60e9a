"""
Header row detection for region x year grids.

Upstream exports sometimes place the first data row above the year header.
The resolver recovers that single swap between rows 0 and 1; deeper
misorderings are left alone and produce a malformed table.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, List, Sequence

from cell_sanitizer import cell_text, looks_like_year

logger = logging.getLogger('statchart.header_resolver')


@dataclass(frozen=True)
class ResolvedTable:
    """A grid split into its year header and its data rows."""

    header_row: List[Any] = field(default_factory=list)
    data_rows: List[List[Any]] = field(default_factory=list)
    swapped: bool = False

    @property
    def column_count(self) -> int:
        return len(self.header_row)


def is_yearlike_row(row: Sequence[Any]) -> bool:
    """
    Check whether every non-first cell of a row reads as a year label.

    Blank cells are tolerated (trailing empty columns are common), but at
    least one cell must actually hold a year.
    """
    labels = [cell_text(cell) for cell in list(row)[1:]]
    filled = [label for label in labels if label]
    if not filled:
        return False
    return all(looks_like_year(label) for label in filled)


def resolve_header(grid: Sequence[Sequence[Any]]) -> ResolvedTable:
    """
    Decide which grid row is the header and which rows are data.

    Args:
        grid: Raw row-major grid; it is never modified

    Returns:
        ResolvedTable with copies of the header and data rows
    """
    rows = [list(row) for row in (grid or [])]
    if not rows:
        return ResolvedTable()

    row0_yearlike = is_yearlike_row(rows[0])
    row1_yearlike = len(rows) > 1 and is_yearlike_row(rows[1])

    if row1_yearlike and not row0_yearlike:
        logger.info("Using row 1 as header (row 0 looks like data)")
        return ResolvedTable(
            header_row=rows[1],
            data_rows=[rows[0]] + rows[2:],
            swapped=True,
        )

    if row0_yearlike and not row1_yearlike:
        logger.debug("Using row 0 as header (contains year labels)")
    else:
        logger.debug(
            "Header ambiguous (row0 yearlike=%s, row1 yearlike=%s); defaulting to row 0",
            row0_yearlike, row1_yearlike,
        )
    return ResolvedTable(header_row=rows[0], data_rows=rows[1:])
