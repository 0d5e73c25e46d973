"""Integer multipliers of a nice number that bound a data range."""
import math
from typing import NamedTuple, Tuple


class LabelBounds(NamedTuple):
    """Boundaries expressed as lo * nice and hi * nice."""
    lo: int
    hi: int

    @property
    def span(self) -> int:
        return self.hi - self.lo

    def values(self, nice_number: float) -> Tuple[float, float]:
        return self.lo * nice_number, self.hi * nice_number


def compute_external(data_min: float, data_max: float, nice_number: float) -> LabelBounds:
    """Smallest multiple span of nice_number that contains [data_min, data_max].

    The floor/ceil results are nudged by one when floating point division
    left them a whole step too far out.

    Examples:
        compute_external(3, 27, 5) -> LabelBounds(lo=0, hi=6)
        compute_external(20, 83, 20) -> LabelBounds(lo=1, hi=5)
    """
    lo = math.floor(data_min / nice_number)
    if (lo + 1) * nice_number <= data_min:
        lo += 1

    hi = math.ceil(data_max / nice_number)
    if (hi - 1) * nice_number >= data_max:
        hi -= 1

    return LabelBounds(lo, hi)


def compute_internal(data_min: float, data_max: float, nice_number: float) -> LabelBounds:
    """Largest multiple span of nice_number that lies inside [data_min, data_max].

    Examples:
        compute_internal(12, 88, 20) -> LabelBounds(lo=1, hi=4)
    """
    lo = math.ceil(data_min / nice_number)
    if (lo - 1) * nice_number >= data_min:
        lo -= 1

    hi = math.floor(data_max / nice_number)
    if (hi + 1) * nice_number <= data_max:
        hi += 1

    return LabelBounds(lo, hi)
