from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Generic

from ivalgebra.boundary import Boundary, T


@dataclass(frozen=True, init=False)
class Interval(Generic[T]):
    """A contiguous range of points, each end included or excluded.

    The start boundary always holds the lesser point: boundaries given in
    reverse order are swapped on construction. Omitting ``end`` builds a
    single-point interval that repeats ``start`` on both sides.

    An interval is empty when both ends sit on the same point and both
    exclude it. Operations never mutate; each returns a new interval, or
    ``None`` when the result is not expressible as one contiguous range.

    Example:
        >>> a = Interval.closed(1.0, 2.0)
        >>> b = Interval.open(1.0, 1.5)
        >>> a & b == b
        True
        >>> print(Interval.right_open(0, 2))
        [0, 2)
    """

    start: Boundary[T]
    end: Boundary[T]

    def __init__(self, start: Boundary[T], end: Boundary[T] | None = None) -> None:
        for edge, bound in (("start", start), ("end", end)):
            if bound is not None and not isinstance(bound, Boundary):
                raise TypeError(
                    f"Interval {edge} must be a Boundary.\n"
                    f"Got {type(bound).__name__!r}: {bound!r}\n"
                    f"Hint: Wrap raw points in a boundary, or use a shortcut:\n"
                    f"  Interval(Boundary.include(0), Boundary.exclude(2))\n"
                    f"  Interval.right_open(0, 2)"
                )

        if end is None:
            end = start
        elif end < start:
            start, end = end, start

        object.__setattr__(self, "start", start)
        object.__setattr__(self, "end", end)

    @classmethod
    def open(cls, start: T, end: T) -> "Interval[T]":
        return cls(Boundary.exclude(start), Boundary.exclude(end))

    @classmethod
    def closed(cls, start: T, end: T) -> "Interval[T]":
        return cls(Boundary.include(start), Boundary.include(end))

    @classmethod
    def left_open(cls, start: T, end: T) -> "Interval[T]":
        return cls(Boundary.exclude(start), Boundary.include(end))

    @classmethod
    def right_open(cls, start: T, end: T) -> "Interval[T]":
        return cls(Boundary.include(start), Boundary.exclude(end))

    @property
    def left_point(self) -> T:
        """Least point, whether or not the interval includes it."""
        return self.start.point

    @property
    def right_point(self) -> T:
        """Greatest point, whether or not the interval includes it."""
        return self.end.point

    @property
    def left_bound(self) -> Boundary[T]:
        return self.start

    @property
    def right_bound(self) -> Boundary[T]:
        return self.end

    def is_empty(self) -> bool:
        return self.start == self.end and self.start.is_open()

    def is_degenerate(self) -> bool:
        """True if both ends sit on the same point."""
        return self.start.point == self.end.point

    def contains(self, point: T) -> bool:
        left, right = self.left_point, self.right_point
        return (
            (left < point and point < right)
            or (point == left and self.start.is_closed())
            or (point == right and self.end.is_closed())
        )

    def __contains__(self, point: Any) -> bool:
        return self.contains(point)

    def _solid(self) -> "Interval[T]":
        # A non-empty single point holds that point however its tags read;
        # spell it as [p, p] so boundary combination sees it as included.
        if self.is_degenerate() and not self.is_empty():
            if self.start.is_open() or self.end.is_open():
                return Interval(Boundary.include(self.left_point))
        return self

    def intersect(self, other: "Interval[T]") -> "Interval[T] | None":
        """Return the points shared by both intervals, or None if there are none."""
        if self.is_empty() or other.is_empty():
            return None

        if self == other:
            return self

        left = self.start.intersect_or_greatest(other.start)
        right = self.end.intersect_or_least(other.end)

        if right.point < left.point:
            return None

        if left.point == right.point:
            # Touching ends, or a single point inside the other operand
            point = left.point
            if self.contains(point) and other.contains(point):
                return Interval(Boundary.include(point))
            return None

        return Interval(left, right)

    def union(self, other: "Interval[T]") -> "Interval[T] | None":
        """Return the set union if it forms a single contiguous interval.

        Disjoint operands, or operands that meet at a point neither of them
        includes, leave a gap and yield None. The empty interval is the
        identity element.
        """
        if other.is_empty():
            return self._solid()
        if self.is_empty():
            return other._solid()

        a, b = sorted((self._solid(), other._solid()), key=_left_order)

        if a.right_point < b.left_point:
            return None
        if a.right_point == b.left_point and a.end.is_open() and b.start.is_open():
            return None

        return a.connect(b)

    def minus(self, other: "Interval[T]") -> "Interval[T] | None":
        """Remove the points of ``other`` from this interval.

        Returns this interval unchanged when the two do not overlap, an empty
        interval when ``other`` covers it completely, and the trimmed
        remainder when ``other`` cuts off one end. Returns None when ``other``
        falls strictly inside, which would leave two separate pieces.
        """
        source = self._solid()
        cut = source.intersect(other._solid())
        if cut is None:
            return self

        keeps_left = cut.start != source.start
        keeps_right = cut.end != source.end

        if keeps_left and keeps_right:
            return None
        if keeps_left:
            return Interval(source.start, cut.start.complement())
        if keeps_right:
            return Interval(cut.end.complement(), source.end)
        return Interval(Boundary.exclude(self.left_point))

    def connect(self, other: "Interval[T]") -> "Interval[T]":
        """Return the smallest interval spanning both operands, gaps included.

        Empty operands contribute nothing, so the hull of two empty intervals
        is the empty left operand, as with ``union``.
        """
        if other.is_empty():
            return self._solid()
        if self.is_empty():
            return other._solid()

        a, b = self._solid(), other._solid()
        return Interval(
            a.start.union_or_least(b.start),
            a.end.union_or_greatest(b.end),
        )

    def width(self) -> Any:
        """Distance between the two end points, ignoring inclusivity.

        Only available when the point type supports subtraction, e.g.
        numbers (giving numbers) or datetimes (giving timedeltas).
        """
        return self.right_point - self.left_point  # type: ignore[operator]

    @staticmethod
    def normalize(intervals: Iterable["Interval[T]"]) -> list["Interval[T]"]:
        """Merge overlapping and touching intervals and drop empty ones."""
        from ivalgebra.core import normalize

        return normalize(intervals)

    def __and__(self, other: "Interval[T]") -> "Interval[T] | None":
        return self.intersect(other)

    def __or__(self, other: "Interval[T]") -> "Interval[T] | None":
        return self.union(other)

    def __sub__(self, other: "Interval[T]") -> "Interval[T] | None":
        return self.minus(other)

    def __str__(self) -> str:
        if self.is_empty():
            return "∅"
        left = "[" if self.start.is_closed() else "("
        right = "]" if self.end.is_closed() else ")"
        return f"{left}{self.left_point!r}, {self.right_point!r}{right}"


def _left_order(interval: Interval[Any]) -> tuple[Any, bool]:
    # A closed start at a point reaches further left than an open one there
    return (interval.left_point, interval.start.is_open())
