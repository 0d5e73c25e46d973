"""Selection of a scale algorithm by name."""
from enum import Enum, auto
from typing import Callable, Union

from .scales import (
    MIN_INTERNAL_INTERVALS,
    MIN_INTERVALS,
    ScaleResult,
    approximate_interval_scale,
    fixed_interval_scale,
    internal_label_scale,
    max_interval_scale,
)


class ScaleMethod(Enum):
    """Available scale algorithms."""
    FIXED = auto()        # Exactly the requested number of intervals
    APPROXIMATE = auto()  # Closest nice interval, count may differ
    MAXIMUM = auto()      # At most the requested number of intervals
    INTERNAL = auto()     # Reference values inside the data range

    @classmethod
    def from_string(cls, method_str: str) -> 'ScaleMethod':
        """Create ScaleMethod from string representation."""
        method_map = {
            'fixed': cls.FIXED,
            'dixon-kronmal': cls.FIXED,
            'approximate': cls.APPROXIMATE,
            'lewart': cls.APPROXIMATE,
            'max': cls.MAXIMUM,
            'maximum': cls.MAXIMUM,
            'internal': cls.INTERNAL,
        }
        method_lower = method_str.lower()
        if method_lower not in method_map:
            valid_methods = ', '.join(sorted(method_map.keys()))
            raise ValueError(f"Invalid scale method: {method_str}. Valid methods: {valid_methods}")
        return method_map[method_lower]

    @property
    def min_intervals(self) -> int:
        """Smallest interval count the algorithm accepts."""
        if self == ScaleMethod.INTERNAL:
            return MIN_INTERNAL_INTERVALS
        return MIN_INTERVALS

    def _function(self) -> Callable[[float, float, int], ScaleResult]:
        function_map = {
            ScaleMethod.FIXED: fixed_interval_scale,
            ScaleMethod.APPROXIMATE: approximate_interval_scale,
            ScaleMethod.MAXIMUM: max_interval_scale,
            ScaleMethod.INTERNAL: internal_label_scale,
        }
        return function_map[self]

    def compute(self, data_min: float, data_max: float, intervals: int) -> ScaleResult:
        """Run the algorithm on a data range."""
        return self._function()(data_min, data_max, intervals)

    def describe(self) -> str:
        """Get a human-readable description of the scale method."""
        descriptions = {
            ScaleMethod.FIXED: "Exact number of intervals, centred on the data",
            ScaleMethod.APPROXIMATE: "Nice interval closest to the requested size, approximate count",
            ScaleMethod.MAXIMUM: "Tightest scale with at most the requested number of intervals",
            ScaleMethod.INTERNAL: "Reference values inside the data range",
        }
        return descriptions[self]


def compute_scale(
    data_min: float,
    data_max: float,
    intervals: int = 10,
    method: Union[str, ScaleMethod] = 'max'
) -> ScaleResult:
    """
    Compute a well-tempered scale with the named algorithm.

    Args:
        data_min: Smallest data value
        data_max: Largest data value
        intervals: Interval count; its meaning depends on the method
        method: Method name (see ScaleMethod.from_string) or member

    Returns:
        ScaleResult from the selected algorithm
    """
    if not isinstance(method, ScaleMethod):
        method = ScaleMethod.from_string(method)
    return method.compute(data_min, data_max, intervals)
