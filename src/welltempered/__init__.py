__version__ = "0.1.0"

from .nice_numbers import (
    MANTISSAS,
    USABLE_MANTISSAS,
    NiceNumberState,
    power,
    first_nice_number,
    next_nice_number,
    iter_nice_numbers,
)
from .labels import (
    LabelBounds,
    compute_external,
    compute_internal,
)
from .scales import (
    MIN_INTERVALS,
    MIN_INTERNAL_INTERVALS,
    ScaleResult,
    fixed_interval_scale,
    approximate_interval_scale,
    max_interval_scale,
    internal_label_scale,
    dixon_kronmal,
    lewart,
)
from .methods import ScaleMethod, compute_scale

__all__ = [
    "MANTISSAS",
    "USABLE_MANTISSAS",
    "NiceNumberState",
    "power",
    "first_nice_number",
    "next_nice_number",
    "iter_nice_numbers",
    "LabelBounds",
    "compute_external",
    "compute_internal",
    "MIN_INTERVALS",
    "MIN_INTERNAL_INTERVALS",
    "ScaleResult",
    "fixed_interval_scale",
    "approximate_interval_scale",
    "max_interval_scale",
    "internal_label_scale",
    "dixon_kronmal",
    "lewart",
    "ScaleMethod",
    "compute_scale",
]
