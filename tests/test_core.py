import logging

import pytest

from ivalgebra import Interval, complement, difference, hull, intersection, normalize

o = Interval.open
c = Interval.closed
lo = Interval.left_open
ro = Interval.right_open


def covered(intervals: list[Interval[float]], point: float) -> bool:
    return any(point in interval for interval in intervals)


# --- normalize ---


def test_normalize_sorts_and_merges():
    intervals = [c(5, 7), c(1, 3), c(2, 6), o(10, 12)]
    assert normalize(intervals) == [c(1, 7), o(10, 12)]


def test_normalize_merges_touching_at_included_point():
    assert normalize([ro(1, 2), ro(0, 1)]) == [ro(0, 2)]
    assert normalize([c(0, 1), c(1, 2), c(2, 3)]) == [c(0, 3)]


def test_normalize_keeps_gap_at_excluded_point():
    assert normalize([lo(1, 2), ro(0, 1)]) == [ro(0, 1), lo(1, 2)]


def test_normalize_drops_empty():
    assert normalize([o(3, 3), c(0, 1), o(9, 9)]) == [c(0, 1)]
    assert normalize([o(1, 1)]) == []
    assert normalize([]) == []


def test_normalize_closed_start_sorts_first():
    assert normalize([o(0, 2), c(0, 1)]) == [ro(0, 2)]


def test_normalize_absorbs_nested():
    assert normalize([c(2, 3), c(0, 10), o(4, 5)]) == [c(0, 10)]


def test_normalize_spells_single_points_closed():
    assert normalize([lo(4, 4), ro(9, 9)]) == [c(4, 4), c(9, 9)]


def test_normalize_is_idempotent():
    intervals = [o(0, 1), c(1, 1), ro(3, 5), lo(5, 6), o(8, 9), c(8.5, 12), o(20, 20)]
    once = normalize(intervals)
    assert normalize(once) == once


def test_normalize_preserves_covered_points():
    intervals = [o(0, 1), c(1, 1), ro(3, 5), lo(5, 6), o(8, 9), c(8.5, 12), o(2, 2)]
    result = normalize(intervals)

    for step in range(-4, 60):
        point = step / 4
        assert covered(result, point) == covered(intervals, point), point

    for left, right in zip(result, result[1:]):
        assert left.left_point < right.left_point
        assert left.union(right) is None


def test_normalize_accepts_any_iterable():
    assert normalize(c(i, i + 1) for i in range(3)) == [c(0, 3)]


def test_interval_normalize_matches_function():
    intervals = [c(5, 7), c(1, 3), c(2, 6)]
    assert Interval.normalize(intervals) == normalize(intervals)


def test_normalize_logs_counts(caplog):
    with caplog.at_level(logging.DEBUG, logger="ivalgebra.core"):
        normalize([c(0, 2), c(1, 3), o(5, 5)])
    assert "normalize: 2 non-empty in, 1 out" in caplog.text


# --- intersection / hull ---


def test_intersection_folds_all_arguments():
    assert intersection(c(0, 10), c(2, 8), o(3, 9)) == lo(3, 8)
    assert intersection(c(0, 1)) == c(0, 1)


def test_intersection_stops_at_first_gap():
    assert intersection(c(0, 1), c(5, 6), c(0, 10)) is None


def test_intersection_with_empty_argument():
    assert intersection(o(1, 1)) is None
    assert intersection(o(1, 1)) == o(1, 1).intersect(o(1, 1))
    assert intersection(o(1, 1), c(0, 5)) is None
    assert intersection(c(0, 5), o(1, 1)) is None


def test_intersection_requires_arguments():
    with pytest.raises(ValueError, match="at least one interval"):
        intersection()


def test_hull_spans_all_arguments():
    assert hull(c(0, 1), o(4, 5), c(2, 3)) == ro(0, 5)
    assert hull(c(0, 1)) == c(0, 1)


def test_hull_skips_empty_arguments():
    assert hull(o(1, 1), o(2, 2)) == o(1, 1)
    assert hull(o(1, 1)) == hull(o(1, 1), o(2, 2))
    assert hull(o(1, 1)).is_empty()
    assert hull(o(1, 1), c(2, 3)) == c(2, 3)
    assert hull(c(0, 1), o(7, 7), o(8, 8)) == c(0, 1)
    assert hull(lo(4, 4)) == c(4, 4)


def test_hull_requires_arguments():
    with pytest.raises(ValueError, match="at least one interval"):
        hull()


# --- difference / complement ---


def test_difference_carves_holes():
    assert difference(c(0, 10), c(2, 3), c(5, 6)) == [ro(0, 2), o(3, 5), lo(6, 10)]


def test_difference_trims_both_ends():
    assert difference(c(0, 10), c(-5, 2), c(8, 20)) == [o(2, 8)]


def test_difference_merges_overlapping_subtractors():
    assert difference(c(0, 10), c(4, 6), c(2, 5)) == [ro(0, 2), lo(6, 10)]


def test_difference_keeps_excluded_end_points():
    assert difference(c(0, 10), o(0, 10)) == [c(0, 0), c(10, 10)]


def test_difference_trivial_cases():
    assert difference(c(0, 10)) == [c(0, 10)]
    assert difference(c(0, 10), c(20, 30)) == [c(0, 10)]
    assert difference(c(0, 10), c(-1, 11)) == []
    assert difference(o(4, 4), c(0, 1)) == []


def test_complement_finds_gaps():
    gaps = complement([c(5, 6), c(2, 3)], c(0, 10))
    assert gaps == [ro(0, 2), o(3, 5), lo(6, 10)]
    assert complement([], c(0, 1)) == [c(0, 1)]
