"""Comparison, clamping, and range tests."""

from functools import cmp_to_key

import pytest

from conftest import NORMALIZED_TIMES
from pyrostime import (
    Time,
    are_equal,
    clamp_time,
    compare,
    is_greater_than,
    is_less_than,
    is_time_in_range_inclusive,
)


class TestCompare:
    def test_seconds_dominate(self):
        assert compare(Time(sec=2, nsec=0), Time(sec=1, nsec=999_999_999)) > 0

    def test_nanoseconds_break_ties(self):
        assert compare(Time(sec=1, nsec=1), Time(sec=1, nsec=2)) < 0

    def test_equal(self):
        assert compare(Time(sec=1, nsec=1), Time(sec=1, nsec=1)) == 0

    def test_sort_key(self):
        times = [Time(sec=3), Time(sec=1, nsec=5), Time(sec=1), Time(sec=2)]
        assert sorted(times, key=cmp_to_key(compare)) == [
            Time(sec=1),
            Time(sec=1, nsec=5),
            Time(sec=2),
            Time(sec=3),
        ]

    @pytest.mark.parametrize("a", NORMALIZED_TIMES)
    @pytest.mark.parametrize("b", NORMALIZED_TIMES[::3])
    def test_total_order(self, a, b):
        outcomes = [is_less_than(a, b), is_greater_than(a, b), are_equal(a, b)]
        assert outcomes.count(True) == 1

    @pytest.mark.parametrize("a", NORMALIZED_TIMES)
    @pytest.mark.parametrize("b", NORMALIZED_TIMES[::3])
    def test_agrees_with_operators(self, a, b):
        assert (compare(a, b) < 0) == (a < b)
        assert (compare(a, b) == 0) == (a == b)


class TestLessGreaterEqual:
    def test_is_less_than(self):
        assert is_less_than(Time(sec=1), Time(sec=2))
        assert not is_less_than(Time(sec=2), Time(sec=2))

    def test_is_greater_than(self):
        assert is_greater_than(Time(sec=2, nsec=1), Time(sec=2))
        assert not is_greater_than(Time(sec=2), Time(sec=2))

    def test_are_equal_is_structural(self):
        assert are_equal(Time(sec=4, nsec=5), Time(sec=4, nsec=5))
        assert not are_equal(Time(sec=4, nsec=5), Time(sec=4, nsec=6))


class TestClampTime:
    start = Time(sec=10)
    end = Time(sec=20)

    def test_before_start(self):
        assert clamp_time(Time(sec=5), self.start, self.end) == self.start

    def test_after_end(self):
        assert clamp_time(Time(sec=20, nsec=1), self.start, self.end) == self.end

    def test_inside(self):
        assert clamp_time(Time(sec=15, nsec=3), self.start, self.end) == Time(sec=15, nsec=3)

    def test_boundaries(self):
        assert clamp_time(self.start, self.start, self.end) == self.start
        assert clamp_time(self.end, self.start, self.end) == self.end


class TestIsTimeInRangeInclusive:
    start = Time(sec=10)
    end = Time(sec=20)

    def test_inside(self):
        assert is_time_in_range_inclusive(Time(sec=15), self.start, self.end)

    def test_inclusive_bounds(self):
        assert is_time_in_range_inclusive(self.start, self.start, self.end)
        assert is_time_in_range_inclusive(self.end, self.start, self.end)

    def test_outside(self):
        assert not is_time_in_range_inclusive(Time(sec=9, nsec=999_999_999), self.start, self.end)
        assert not is_time_in_range_inclusive(Time(sec=20, nsec=1), self.start, self.end)
