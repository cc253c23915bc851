"""Comparison and range checks for Time values."""

from __future__ import annotations

from pyrostime._time import Time


def compare(left: Time, right: Time) -> int:
    """Compare two times, suitable for ``functools.cmp_to_key``.

    Returns:
        A positive value if ``left`` is later, negative if ``right`` is later,
        or zero if they are equal.
    """
    sec_diff = left.sec - right.sec
    return sec_diff if sec_diff != 0 else left.nsec - right.nsec


def is_less_than(left: Time, right: Time) -> bool:
    return compare(left, right) < 0


def is_greater_than(left: Time, right: Time) -> bool:
    return compare(left, right) > 0


def are_equal(left: Time, right: Time) -> bool:
    return left.sec == right.sec and left.nsec == right.nsec


def clamp_time(time: Time, start: Time, end: Time) -> Time:
    """Clamp ``time`` into the inclusive range ``[start, end]``."""
    if compare(start, time) > 0:
        return Time(sec=start.sec, nsec=start.nsec)
    if compare(end, time) < 0:
        return Time(sec=end.sec, nsec=end.nsec)
    return Time(sec=time.sec, nsec=time.nsec)


def is_time_in_range_inclusive(time: Time, start: Time, end: Time) -> bool:
    """Return True if ``start <= time <= end``."""
    return not (compare(start, time) > 0 or compare(end, time) < 0)
