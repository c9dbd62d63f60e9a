"""
Cell sanitizing for statistical table grids.

Grid cells arrive loosely typed: strings with currency prefixes and
thousand separators, plain numbers, or nothing at all. Everything that
turns a cell into a number goes through this module.
"""

import math
import re
from dataclasses import dataclass
from typing import Any, Optional

import config

CELL_EMPTY = "empty"
CELL_NUMERIC = "numeric"
CELL_TEXT = "text"

# A literal Python can already read as a float, e.g. "10", "-1.5", "1e-05"
PLAIN_NUMBER_PATTERN = re.compile(r"^-?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?$")
# Anything that is not part of a number
NON_NUMERIC_PATTERN = re.compile(r"[^\d.\-]")
# Dotted thousand grouping as written in Indonesian tables, e.g. "15.000"
DOTTED_THOUSANDS_PATTERN = re.compile(r"^-?\d{1,3}(?:\.\d{3})+$")
# Leading numeric prefix, read the way a browser's parseFloat reads it
LEADING_NUMBER_PATTERN = re.compile(r"^-?(?:\d+(?:\.\d*)?|\.\d+)")

YEAR_PATTERN = re.compile(r"^(?:.*\D)?(\d{4})$")
EMBEDDED_YEAR_PATTERN = re.compile(r"(?<!\d)(\d{4})(?!\d)")


@dataclass(frozen=True)
class CellValue:
    """A grid cell tagged as empty, numeric or text."""

    kind: str
    text: str = ""
    number: Optional[float] = None

    @property
    def is_empty(self) -> bool:
        return self.kind == CELL_EMPTY


def _is_number(raw: Any) -> bool:
    return isinstance(raw, (int, float)) and not isinstance(raw, bool)


def cell_text(raw: Any) -> str:
    """Trimmed text view of a cell; integral floats lose their ``.0``."""
    if raw is None:
        return ""
    if isinstance(raw, float) and math.isfinite(raw) and raw.is_integer():
        return str(int(raw))
    return str(raw).strip()


def classify_cell(raw: Any) -> CellValue:
    """Tag a raw cell as empty, numeric or text."""
    if _is_number(raw):
        try:
            number = float(raw)
        except OverflowError:
            # int too large for a float
            number = math.inf
        if not math.isfinite(number):
            return CellValue(CELL_TEXT, text=str(number))
        return CellValue(CELL_NUMERIC, text=cell_text(raw), number=number)

    text = cell_text(raw)
    if not text:
        return CellValue(CELL_EMPTY)
    return CellValue(CELL_TEXT, text=text)


def _parse_formatted_text(text: str) -> float:
    """Strip formatting noise from text and read its leading number."""
    numeric_str = NON_NUMERIC_PATTERN.sub("", text)
    if DOTTED_THOUSANDS_PATTERN.match(numeric_str):
        numeric_str = numeric_str.replace(".", "")

    number_match = LEADING_NUMBER_PATTERN.match(numeric_str)
    if not number_match:
        return 0.0
    return float(number_match.group(0))


def sanitize_number(raw: Any) -> float:
    """
    Convert a raw grid cell into a float, never raising.

    Every character that is not a digit, a decimal point or a minus sign is
    stripped before parsing. Empty, missing or unparsable cells become
    ``0.0``; this loss is accepted, callers cannot tell a blank cell from a
    real zero.

    Args:
        raw: Cell value (string, number, None or empty)

    Returns:
        The cell's numeric value
    """
    cell = classify_cell(raw)
    if cell.kind == CELL_EMPTY:
        return 0.0
    if cell.kind == CELL_NUMERIC:
        return cell.number

    if PLAIN_NUMBER_PATTERN.match(cell.text):
        value = float(cell.text)
    else:
        value = _parse_formatted_text(cell.text)

    if not math.isfinite(value):
        return 0.0
    return value


def _in_year_range(year: int) -> bool:
    return config.year_min <= year <= config.year_max


def looks_like_year(raw: Any) -> bool:
    """True for a 4-digit calendar year, optionally prefixed by text ("Tahun 2023")."""
    year_match = YEAR_PATTERN.match(cell_text(raw))
    return bool(year_match) and _in_year_range(int(year_match.group(1)))


def extract_year(raw: Any) -> Optional[int]:
    """Return the first standalone calendar year found in a cell's text."""
    for year_match in EMBEDDED_YEAR_PATTERN.finditer(cell_text(raw)):
        year = int(year_match.group(1))
        if _in_year_range(year):
            return year
    return None
