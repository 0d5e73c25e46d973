"""Generation of well-tempered ("nice") numbers: {1, 2, 5} times a power of ten."""
import math
from typing import Iterator, NamedTuple, Tuple

# 10.0 only expresses the wrap from 5 back to 1 at the next power of ten,
# and gives the geometric-mean threshold above 5. It is never returned.
MANTISSAS: Tuple[float, ...] = (1.0, 2.0, 5.0, 10.0)
USABLE_MANTISSAS = 3


class NiceNumberState(NamedTuple):
    """Cursor into the nice number sequence."""
    index: int
    power_of_ten: float

    @property
    def value(self) -> float:
        return MANTISSAS[self.index] * self.power_of_ten

    @property
    def upper_threshold(self) -> float:
        """Geometric mean of this nice number and the one after it."""
        return math.sqrt(MANTISSAS[self.index] * MANTISSAS[self.index + 1]) * self.power_of_ten


def power(base: float, exponent: int) -> float:
    """Raise base to an integer power by repeated squaring.

    Examples:
        power(10.0, 3) -> 1000.0
        power(10.0, -2) -> 0.01
    """
    if exponent < 0:
        base = 1.0 / base
        exponent = -exponent

    result = 1.0
    while exponent:
        if exponent & 1:
            result *= base
        exponent >>= 1
        if exponent:
            base *= base
    return result


def first_nice_number(interval_size: float) -> Tuple[float, NiceNumberState]:
    """Return the power of ten just below interval_size and the cursor pointing at it."""
    if not interval_size > 0:
        raise ValueError(f"interval_size must be positive, got {interval_size}")

    exponent = math.floor(math.log10(interval_size))
    power_of_ten = power(10.0, exponent)
    # log10 can round down across a power of ten
    if power_of_ten * 10.0 <= interval_size:
        power_of_ten *= 10.0

    state = NiceNumberState(0, power_of_ten)
    return state.value, state


def next_nice_number(state: NiceNumberState) -> Tuple[float, NiceNumberState]:
    """Advance the cursor one step; the result is always larger than state.value."""
    index = state.index + 1
    power_of_ten = state.power_of_ten
    if index >= USABLE_MANTISSAS:
        index = 0
        power_of_ten *= 10.0

    state = NiceNumberState(index, power_of_ten)
    return state.value, state


def iter_nice_numbers(interval_size: float) -> Iterator[Tuple[float, NiceNumberState]]:
    """Yield (nice_number, state) pairs forever, starting at first_nice_number()."""
    nice, state = first_nice_number(interval_size)
    while True:
        yield nice, state
        nice, state = next_nice_number(state)


def smallest_nice_number_not_below(interval_size: float) -> Tuple[float, NiceNumberState]:
    """Find the smallest nice number that is not smaller than interval_size."""
    nice, state = first_nice_number(interval_size)
    while nice < interval_size:
        nice, state = next_nice_number(state)
    return nice, state


def closest_nice_number(interval_size: float) -> Tuple[float, NiceNumberState]:
    """Find the nice number closest to interval_size.

    Adjacent nice numbers are separated at their geometric mean, so e.g.
    for a power of ten p the break points are sqrt(2)*p, sqrt(10)*p and
    sqrt(50)*p.
    """
    nice, state = first_nice_number(interval_size)
    while state.upper_threshold < interval_size:
        nice, state = next_nice_number(state)
    return nice, state
