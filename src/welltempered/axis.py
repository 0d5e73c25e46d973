"""Axis helpers for chart code that consumes well-tempered scales."""
from typing import List, Sequence, Tuple, Union

from .methods import ScaleMethod, compute_scale


def data_range(values: Sequence) -> Tuple[float, float]:
    """Return (min, max) of values converted to float."""
    if not values:
        raise ValueError("Cannot compute the range of an empty sequence")
    numbers = [float(v) for v in values]
    return min(numbers), max(numbers)


def create_numeric_scale(
    min_val: float,
    max_val: float,
    target_steps: int = 10,
    method: Union[str, ScaleMethod] = 'max'
) -> List[float]:
    """Create a well-tempered numeric scale (tick values) for an axis."""
    if min_val == max_val:
        # Single value, create scale around it
        if min_val == 0:
            return [0]
        return sorted([min_val * 0.9, min_val, min_val * 1.1])

    return compute_scale(min_val, max_val, target_steps, method).ticks()
