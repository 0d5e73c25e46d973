"""Well-tempered linear scale selection.

Four ways of turning a data range and an interval count into axis
boundaries that are integer multiples of a nice number, after Tom Steppe,
"Well Tempered Linear Scales", Computer Language, September 1989:

- fixed_interval_scale: exactly the requested number of intervals
  (enhanced Dixon-Kronmal), centred on the data.
- approximate_interval_scale: the nice number closest to the ideal
  interval size (Lewart); the interval count may differ from the request.
- max_interval_scale: at most the requested number of intervals.
- internal_label_scale: reference values inside the data range.
"""
import logging
import operator
from typing import List, NamedTuple, Tuple

from .labels import LabelBounds, compute_external, compute_internal
from .nice_numbers import closest_nice_number, next_nice_number, smallest_nice_number_not_below

logger = logging.getLogger(__name__)

MIN_INTERVALS = 2
MIN_INTERNAL_INTERVALS = 5


class ScaleResult(NamedTuple):
    """Scale boundaries and the number of intervals between them."""
    scale_min: float
    scale_max: float
    actual_intervals: int

    @property
    def step(self) -> float:
        """The nice number the scale is built on."""
        if not self.actual_intervals:
            return 0.0
        return (self.scale_max - self.scale_min) / self.actual_intervals

    def ticks(self) -> List[float]:
        """Label values from scale_min to scale_max inclusive."""
        step = self.step
        values = [self.scale_min + k * step for k in range(self.actual_intervals)]
        values.append(self.scale_max)
        return values


def _check_range(data_min: float, data_max: float) -> None:
    # Also rejects NaN on either side
    if not data_min < data_max:
        raise ValueError(f"data_min must be smaller than data_max, got {data_min} and {data_max}")


def _check_intervals(name: str, value: int, minimum: int) -> int:
    """Return value as a plain int, accepting integer-like types such as numpy.int64."""
    if isinstance(value, bool):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    try:
        count = operator.index(value)
    except TypeError:
        raise ValueError(f"{name} must be an integer, got {value!r}") from None
    if count < minimum:
        raise ValueError(f"{name} must be at least {minimum}, got {count}")
    return count


def _coarsened_external_bounds(data_min: float, data_max: float,
                               max_intervals: int) -> Tuple[float, LabelBounds]:
    """Externally label with the smallest nice number that needs at most max_intervals."""
    interval_size = (data_max - data_min) / max_intervals
    nice, state = smallest_nice_number_not_below(interval_size)
    bounds = compute_external(data_min, data_max, nice)

    while bounds.span > max_intervals:
        nice, state = next_nice_number(state)
        bounds = compute_external(data_min, data_max, nice)

    logger.debug(f"Range [{data_min}, {data_max}] -> nice number {nice}, multipliers {bounds.lo}..{bounds.hi}")
    return nice, bounds


def fixed_interval_scale(data_min: float, data_max: float, exact_intervals: int) -> ScaleResult:
    """Scale with exactly exact_intervals intervals.

    Args:
        data_min: Smallest data value
        data_max: Largest data value, strictly greater than data_min
        exact_intervals: Number of intervals wanted (at least 2)

    Returns:
        ScaleResult whose actual_intervals equals exact_intervals

    Raises:
        ValueError: If the range is empty or exact_intervals is too small
    """
    _check_range(data_min, data_max)
    exact_intervals = _check_intervals("exact_intervals", exact_intervals, MIN_INTERVALS)

    nice, bounds = _coarsened_external_bounds(data_min, data_max, exact_intervals)

    # Pad with the missing intervals, half on each side. An odd one out
    # goes below when the data sits closer to the low boundary.
    diff = exact_intervals - bounds.span
    adjust = diff // 2
    if diff % 2 == 1:
        if (data_min - bounds.lo * nice) < (bounds.hi * nice - data_max):
            adjust += 1

    adj_lo = bounds.lo - adjust
    adj_hi = adj_lo + exact_intervals

    # Never cross zero when the data does not
    if adj_lo < 0 and bounds.lo >= 0:
        adj_lo = 0
        adj_hi = exact_intervals
    if adj_hi > 0 and bounds.hi <= 0:
        adj_hi = 0
        adj_lo = -exact_intervals

    return ScaleResult(adj_lo * nice, adj_hi * nice, exact_intervals)


def approximate_interval_scale(data_min: float, data_max: float, approx_intervals: int) -> ScaleResult:
    """Scale with roughly approx_intervals intervals, favouring range utilization."""
    _check_range(data_min, data_max)
    approx_intervals = _check_intervals("approx_intervals", approx_intervals, MIN_INTERVALS)

    interval_size = (data_max - data_min) / approx_intervals
    nice, _ = closest_nice_number(interval_size)
    bounds = compute_external(data_min, data_max, nice)
    logger.debug(f"Range [{data_min}, {data_max}] -> closest nice number {nice}, multipliers {bounds.lo}..{bounds.hi}")

    scale_min, scale_max = bounds.values(nice)
    return ScaleResult(scale_min, scale_max, bounds.span)


def max_interval_scale(data_min: float, data_max: float, max_intervals: int) -> ScaleResult:
    """Scale with at most max_intervals intervals and no padding."""
    _check_range(data_min, data_max)
    max_intervals = _check_intervals("max_intervals", max_intervals, MIN_INTERVALS)

    nice, bounds = _coarsened_external_bounds(data_min, data_max, max_intervals)
    scale_min, scale_max = bounds.values(nice)
    return ScaleResult(scale_min, scale_max, bounds.span)


def internal_label_scale(data_min: float, data_max: float, max_intervals: int) -> ScaleResult:
    """Reference values lying inside the data range.

    The returned scale_min/scale_max are the outermost nice multiples
    within [data_min, data_max] rather than boundaries enclosing it.
    """
    _check_range(data_min, data_max)
    max_intervals = _check_intervals("max_intervals", max_intervals, MIN_INTERNAL_INTERVALS)

    interval_size = (data_max - data_min) / max_intervals
    nice, _ = smallest_nice_number_not_below(interval_size)
    bounds = compute_internal(data_min, data_max, nice)
    logger.debug(f"Range [{data_min}, {data_max}] -> internal nice number {nice}, multipliers {bounds.lo}..{bounds.hi}")

    ref_min, ref_max = bounds.values(nice)
    return ScaleResult(ref_min, ref_max, bounds.span)


dixon_kronmal = fixed_interval_scale
lewart = approximate_interval_scale
