from .boundary import Boundary, Orderable
from .core import complement, difference, hull, intersection, normalize
from .interval import Interval
from .metrics import (
    count_intervals,
    coverage_ratio,
    max_width,
    min_width,
    total_width,
    width,
)

__all__ = [
    "Boundary",
    "Interval",
    "Orderable",
    "normalize",
    "intersection",
    "hull",
    "difference",
    "complement",
    "width",
    "total_width",
    "max_width",
    "min_width",
    "count_intervals",
    "coverage_ratio",
]
