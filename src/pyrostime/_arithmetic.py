"""Normalization and arithmetic over Time values."""

from __future__ import annotations

import math

from pyrostime._constants import NSEC_PER_SEC
from pyrostime._conversions import from_sec, to_sec
from pyrostime._errors import ERR_MSG_INVALID_TIME, InvalidTimeError
from pyrostime._time import Time


def fix_time(t: Time, allow_negative: bool = False) -> Time:
    """Normalize ``t`` so that ``0 <= nsec < 1e9``.

    Whole seconds contained in ``nsec`` (positive or negative) are carried
    into ``sec``. This is the loss-free equivalent of
    ``from_nano_sec(to_nano_sec(t))``.

    Args:
        t: Potentially unnormalized time.
        allow_negative: Permit a negative ``sec`` in the result.

    Returns:
        The normalized Time.

    Raises:
        InvalidTimeError: If the result is negative and ``allow_negative`` is
            False.
    """
    carry, nsec = divmod(t.nsec, NSEC_PER_SEC)
    result = Time(sec=t.sec + carry, nsec=nsec)
    if (not allow_negative and result.sec < 0) or result.nsec < 0:
        from pyrostime._codec import to_string

        raise InvalidTimeError(
            ERR_MSG_INVALID_TIME,
            f"cannot normalize invalid time {to_string(result, allow_negative=True)}",
        )
    return result


def add(left: Time, right: Time) -> Time:
    """Add two times; the sum must not be negative."""
    return fix_time(Time(sec=left.sec + right.sec, nsec=left.nsec + right.nsec))


def subtract(left: Time, right: Time) -> Time:
    """Subtract ``right`` from ``left``, producing a possibly negative duration."""
    return fix_time(
        Time(sec=left.sec - right.sec, nsec=left.nsec - right.nsec),
        allow_negative=True,
    )


def percent_of(start: Time, end: Time, target: Time) -> float:
    """Return the fraction of the way ``target`` lies from ``start`` to ``end``.

    The inverse of :func:`interpolate`. Values inside the range map to
    ``[0.0, 1.0]``; outside it the result is unbounded. A zero-length range
    gives ``nan`` when ``target == start`` and a signed ``inf`` otherwise.
    """
    total = to_sec(subtract(end, start))
    elapsed = to_sec(subtract(target, start))
    if total == 0:
        if elapsed == 0:
            return math.nan
        return math.copysign(math.inf, elapsed)
    return elapsed / total


def interpolate(start: Time, end: Time, fraction: float) -> Time:
    """Linearly interpolate between ``start`` and ``end`` by ``fraction``.

    The inverse of :func:`percent_of`.
    """
    duration = subtract(end, start)
    return add(start, from_sec(fraction * to_sec(duration)))
