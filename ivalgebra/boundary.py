from dataclasses import dataclass
from typing import Any, Generic, Protocol, TypeVar


class Orderable(Protocol):
    """Structural bound for interval points: comparable and equatable."""

    def __lt__(self, other: Any, /) -> bool: ...

    def __eq__(self, other: object, /) -> bool: ...


T = TypeVar("T", bound=Orderable)


@dataclass(frozen=True)
class Boundary(Generic[T]):
    """One end of an interval: a point that is either included or excluded.

    Boundaries compare equal only when both the point and the inclusivity
    match, but order by point alone: neither of `Include(0)` and
    `Exclude(0)` is less than the other. The combinators below decide, point
    by point, how inclusivity propagates when two boundaries are merged:

    - intersection is conjunctive: a shared point survives only if both
      boundaries include it
    - union is disjunctive: a shared point survives if either includes it

    Example:
        >>> Boundary.include(0).intersect_or_least(Boundary.exclude(0))
        Boundary(point=0, closed=False)
        >>> Boundary.include(0).union_or_least(Boundary.exclude(0))
        Boundary(point=0, closed=True)
    """

    point: T
    closed: bool

    @classmethod
    def include(cls, point: T) -> "Boundary[T]":
        return cls(point, True)

    @classmethod
    def exclude(cls, point: T) -> "Boundary[T]":
        return cls(point, False)

    def is_closed(self) -> bool:
        return self.closed

    def is_open(self) -> bool:
        return not self.closed

    def __lt__(self, other: "Boundary[T]") -> bool:
        return self.point < other.point

    def __gt__(self, other: "Boundary[T]") -> bool:
        return other.point < self.point

    def __le__(self, other: "Boundary[T]") -> bool:
        return not other.point < self.point

    def __ge__(self, other: "Boundary[T]") -> bool:
        return not self.point < other.point

    def complement(self) -> "Boundary[T]":
        """Return the boundary at the same point with inclusivity flipped."""
        return Boundary(self.point, not self.closed)

    def intersect_or_least(self, other: "Boundary[T]") -> "Boundary[T]":
        """Intersect boundaries at the same point, else take the lesser one."""
        if self.point == other.point:
            return Boundary(self.point, self.closed and other.closed)
        return self if self.point < other.point else other

    def intersect_or_greatest(self, other: "Boundary[T]") -> "Boundary[T]":
        """Intersect boundaries at the same point, else take the greater one."""
        if self.point == other.point:
            return Boundary(self.point, self.closed and other.closed)
        return other if self.point < other.point else self

    def union_or_least(self, other: "Boundary[T]") -> "Boundary[T]":
        """Unite boundaries at the same point, else take the lesser one."""
        if self.point == other.point:
            return Boundary(self.point, self.closed or other.closed)
        return self if self.point < other.point else other

    def union_or_greatest(self, other: "Boundary[T]") -> "Boundary[T]":
        """Unite boundaries at the same point, else take the greater one."""
        if self.point == other.point:
            return Boundary(self.point, self.closed or other.closed)
        return other if self.point < other.point else self

    def __str__(self) -> str:
        kind = "Include" if self.closed else "Exclude"
        return f"{kind}({self.point!r})"
