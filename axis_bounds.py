"""Value-axis range for bar and line charts, always spanning zero."""

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

import config

logger = logging.getLogger('statchart.axis_bounds')


@dataclass(frozen=True)
class AxisBounds:
    """
    Suggested value-axis range.

    ``min``/``max`` of None mean "auto-scale", but the range must still
    include zero.
    """

    min: Optional[float] = None
    max: Optional[float] = None
    includes_zero: bool = True

    @property
    def is_auto(self) -> bool:
        return self.min is None and self.max is None


def compute_bounds(all_values: Iterable[float]) -> AxisBounds:
    """
    Compute a padded axis range that always contains the zero line.

    Padding is ``config.axis_padding_ratio`` of the value range, or 1 when
    all values are equal. The side of the range without values is pinned
    at zero.
    """
    values = list(all_values)
    if not values:
        return AxisBounds()

    lo = min(values)
    hi = max(values)
    value_range = abs(hi - lo)
    padding = value_range * config.axis_padding_ratio if value_range > 0 else 1

    suggested_min = lo - padding if lo < 0 else 0
    suggested_max = hi + padding if hi > 0 else 0

    logger.debug("Axis bounds: values %s..%s -> %s..%s", lo, hi, suggested_min, suggested_max)
    return AxisBounds(min=suggested_min, max=suggested_max)
