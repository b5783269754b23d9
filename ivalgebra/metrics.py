"""Aggregate measurements over collections of intervals.

Every function here needs points that support subtraction, such as numbers
or datetimes. Collections are normalized first, so overlapping inputs are
never counted twice.
"""

from collections.abc import Iterable
from typing import Any, Protocol, TypeVar

from ivalgebra.core import intersection, normalize
from ivalgebra.interval import Interval


class Subtractable(Protocol):
    """Points whose difference yields a measurable magnitude."""

    def __lt__(self, other: Any, /) -> bool: ...

    def __sub__(self, other: Any, /) -> Any: ...


S = TypeVar("S", bound=Subtractable)


def width(interval: Interval[S]) -> Any:
    """Return ``right_point - left_point``, ignoring inclusivity."""
    return interval.width()


def total_width(intervals: Iterable[Interval[S]], start: Any = 0) -> Any:
    """Return the combined width of the points covered by ``intervals``.

    Args:
        intervals: Any collection of intervals; overlaps are merged first
        start: Value to accumulate onto, e.g. ``timedelta(0)`` for datetimes
    """
    total = start
    for interval in normalize(intervals):
        total = total + interval.width()
    return total


def max_width(intervals: Iterable[Interval[S]]) -> Any | None:
    """Return the widest non-empty interval's width, or None if there is none."""
    widths = [i.width() for i in intervals if not i.is_empty()]
    return max(widths) if widths else None


def min_width(intervals: Iterable[Interval[S]]) -> Any | None:
    """Return the narrowest non-empty interval's width, or None if there is none."""
    widths = [i.width() for i in intervals if not i.is_empty()]
    return min(widths) if widths else None


def count_intervals(intervals: Iterable[Interval[S]]) -> int:
    """Return how many disjoint pieces ``intervals`` cover."""
    return len(normalize(intervals))


def coverage_ratio(intervals: Iterable[Interval[S]], within: Interval[S]) -> float:
    """Return the fraction of ``within`` covered by ``intervals``.

    Example:
        >>> coverage_ratio([Interval.closed(0, 2), Interval.closed(6, 8)],
        ...                Interval.closed(0, 10))
        0.4
    """
    span = within.width()
    if not span:
        return 0.0

    clipped = [
        piece
        for piece in (intersection(interval, within) for interval in intervals)
        if piece is not None
    ]
    return total_width(clipped, start=span - span) / span
