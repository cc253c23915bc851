"""Conversions between Time and native numbers and datetimes.

The ``from_*`` helpers build signed durations: a negative input yields a
negative ``nsec`` rather than the normalized form. Pass the result through
:func:`pyrostime.fix_time` when the canonical representation is needed.
"""

from __future__ import annotations

import math
from datetime import datetime, timedelta, timezone

from pyrostime._constants import (
    EPOCH,
    MSEC_PER_SEC,
    NSEC_PER_MSEC,
    NSEC_PER_SEC,
    NSEC_PER_USEC,
    USEC_PER_SEC,
)
from pyrostime._errors import ERR_MSG_OUT_OF_RANGE, InvalidTimeError
from pyrostime._time import Time
from pyrostime._utils import ceil_div, round_half_up, trunc_divmod

_ONE_MILLISECOND = timedelta(milliseconds=1)


def _carry_nanoseconds(sec: int, nsec: int) -> Time:
    carry, nsec = trunc_divmod(nsec, NSEC_PER_SEC)
    return Time(sec=sec + carry, nsec=nsec)


def to_date(stamp: Time) -> datetime:
    """Convert to an aware UTC datetime. Sub-millisecond precision is lost."""
    millis, _ = trunc_divmod(to_nano_sec(stamp), NSEC_PER_MSEC)
    try:
        return EPOCH + timedelta(milliseconds=millis)
    except OverflowError as e:
        raise InvalidTimeError(
            ERR_MSG_OUT_OF_RANGE,
            f"time {stamp.sec}s {stamp.nsec}ns is outside the datetime range",
            wrapped=e,
        ) from e


def from_date(date: datetime) -> Time:
    """Convert a datetime to a Time at millisecond resolution.

    Naive datetimes are interpreted as UTC.
    """
    if date.tzinfo is None:
        date = date.replace(tzinfo=timezone.utc)
    millis = (date - EPOCH) // _ONE_MILLISECOND
    _, remainder = trunc_divmod(millis, MSEC_PER_SEC)
    return Time(sec=millis // MSEC_PER_SEC, nsec=remainder * NSEC_PER_MSEC)


def to_nano_sec(stamp: Time) -> int:
    """Convert to an exact integer number of nanoseconds."""
    return stamp.sec * NSEC_PER_SEC + stamp.nsec


def from_nano_sec(nsec: int) -> Time:
    """Split an integer nanosecond count, truncating toward zero."""
    sec, remainder = trunc_divmod(nsec, NSEC_PER_SEC)
    return Time(sec=sec, nsec=remainder)


def to_micro_sec(stamp: Time) -> float:
    return to_nano_sec(stamp) / NSEC_PER_USEC


def to_sec(stamp: Time) -> float:
    return stamp.sec + stamp.nsec * 1e-9


def from_sec(value: float) -> Time:
    """Convert floating seconds, rounding to the nearest nanosecond.

    >>> from_sec(1.9999999994)
    Time(sec=1, nsec=999999999)
    >>> from_sec(1.999999999999)
    Time(sec=2, nsec=0)
    """
    sec = math.trunc(value)
    nsec = round_half_up((value - sec) * NSEC_PER_SEC)
    return _carry_nanoseconds(sec, nsec)


def to_millis(stamp: Time, round_up: bool = True) -> int:
    """Convert to integer milliseconds, rounding the nanosecond part up or down."""
    if round_up:
        return stamp.sec * MSEC_PER_SEC + ceil_div(stamp.nsec, NSEC_PER_MSEC)
    return stamp.sec * MSEC_PER_SEC + stamp.nsec // NSEC_PER_MSEC


def from_millis(value: float) -> Time:
    sec = math.trunc(value / MSEC_PER_SEC)
    nsec = round_half_up((value - sec * MSEC_PER_SEC) * NSEC_PER_MSEC)
    return _carry_nanoseconds(sec, nsec)


def from_micros(value: float) -> Time:
    sec = math.trunc(value / USEC_PER_SEC)
    nsec = round_half_up((value - sec * USEC_PER_SEC) * NSEC_PER_USEC)
    return _carry_nanoseconds(sec, nsec)
