import logging
from collections.abc import Iterable
from functools import reduce

from ivalgebra.boundary import T
from ivalgebra.interval import Interval, _left_order

logger = logging.getLogger(__name__)


def normalize(intervals: Iterable[Interval[T]]) -> list[Interval[T]]:
    """Return the minimal sorted set of intervals covering the same points.

    Empty intervals are dropped, and any intervals that overlap or touch at
    an included point are merged. The result is ordered by left point and
    no two of its intervals can be united.

    Example:
        >>> pieces = normalize([Interval.closed(5, 7), Interval.closed(1, 3),
        ...                     Interval.closed(2, 6), Interval.open(10, 12)])
        >>> [str(piece) for piece in pieces]
        ['[1, 7]', '(10, 12)']
    """
    ordered = sorted(
        (i._solid() for i in intervals if not i.is_empty()), key=_left_order
    )

    merged: list[Interval[T]] = []
    current: Interval[T] | None = None
    for interval in ordered:
        if current is None:
            current = interval
            continue
        joined = current.union(interval)
        if joined is None:
            merged.append(current)
            current = interval
        else:
            current = joined

    if current is not None:
        merged.append(current)

    logger.debug("normalize: %d non-empty in, %d out", len(ordered), len(merged))
    return merged


def intersection(*intervals: Interval[T]) -> Interval[T] | None:
    """Intersect intervals left to right (equivalent to chaining `&`)."""

    if not intervals:
        raise ValueError(
            f"intersection() requires at least one interval argument.\n"
            f"Example: intersection(Interval.closed(0, 5), Interval.open(2, 8))"
        )

    def reducer(acc: Interval[T] | None, nxt: Interval[T]) -> Interval[T] | None:
        return None if acc is None else acc & nxt

    first = None if intervals[0].is_empty() else intervals[0]
    return reduce(reducer, intervals[1:], first)


def hull(*intervals: Interval[T]) -> Interval[T]:
    """Return the smallest interval spanning every argument (chained `connect`)."""

    if not intervals:
        raise ValueError(
            f"hull() requires at least one interval argument.\n"
            f"Example: hull(Interval.closed(0, 1), Interval.closed(4, 5))"
        )

    def reducer(acc: Interval[T], nxt: Interval[T]) -> Interval[T]:
        return acc.connect(nxt)

    return reduce(reducer, intervals[1:], intervals[0]._solid())


def difference(source: Interval[T], *subtractors: Interval[T]) -> list[Interval[T]]:
    """Remove every subtractor from source and return the remaining pieces.

    Unlike ``Interval.minus``, a subtractor falling strictly inside the
    source is fine here: the source is split and both pieces are kept.

    Algorithm: Normalize the subtractors so they are sorted and disjoint,
    then sweep them left to right over a ``remaining`` cursor interval.
    A cut in the middle emits the piece before it and moves the cursor past
    it; a cut reaching the right end leaves a remainder no later cut touches.
    """
    if source.is_empty():
        return []

    pieces: list[Interval[T]] = []
    remaining = source
    for cut in normalize(subtractors):
        rest = remaining.minus(cut)
        if rest is None:
            pieces.append(Interval(remaining.start, cut.start.complement()))
            remaining = Interval(cut.end.complement(), remaining.end)
        elif rest.is_empty():
            break
        else:
            remaining = rest
    else:
        pieces.append(remaining)

    logger.debug(
        "difference: %d subtractors left %d pieces", len(subtractors), len(pieces)
    )
    return pieces


def complement(
    intervals: Iterable[Interval[T]], within: Interval[T]
) -> list[Interval[T]]:
    """Return the gaps between intervals, bounded to ``within``."""
    return difference(within, *intervals)
