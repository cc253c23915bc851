"""Decimal-seconds and RFC3339 string formatting and parsing.

Formatting rejects invalid input by raising. Parsing treats malformed text
as an expected condition and returns None.
"""

from __future__ import annotations

import logging

from lark.exceptions import UnexpectedInput

from pyrostime._arithmetic import fix_time
from pyrostime._constants import (
    FUZZY_THRESHOLD_NSEC,
    FUZZY_UNIT_STEP,
    MSEC_PER_SEC,
    NSEC_DIGITS,
    NSEC_PER_SEC,
    SEC_PER_DAY,
    SEC_PER_HOUR,
    SEC_PER_MINUTE,
)
from pyrostime._conversions import from_nano_sec
from pyrostime._errors import (
    ERR_MSG_INVALID_NANOSECONDS,
    ERR_MSG_NEGATIVE_TIME,
    InvalidTimeError,
    NegativeTimeError,
)
from pyrostime._grammar import parse_decimal_seconds, parse_rfc3339
from pyrostime._time import Time
from pyrostime._utils import (
    civil_from_days,
    days_from_civil,
    round_digits,
    truncate_digits,
)

logger = logging.getLogger(__name__)


def _check_non_negative(stamp: Time) -> None:
    if stamp.sec < 0 or stamp.nsec < 0:
        raise NegativeTimeError(
            ERR_MSG_NEGATIVE_TIME,
            f"invalid negative time {{ sec: {stamp.sec}, nsec: {stamp.nsec} }}",
        )


def to_string(stamp: Time, allow_negative: bool = False) -> str:
    """Format as a decimal number of seconds with nine fractional digits.

    Args:
        stamp: Time to format.
        allow_negative: Permit negative fields instead of raising.

    Returns:
        A string such as ``"102.000000304"``.

    Raises:
        NegativeTimeError: If a field is negative and ``allow_negative`` is
            False.
    """
    if not allow_negative:
        _check_non_negative(stamp)
    return f"{stamp.sec}.{stamp.nsec:0{NSEC_DIGITS}d}"


def from_string(stamp: str, *, fuzzy: bool = False) -> Time | None:
    """Parse a whole or decimal number of seconds.

    A string is used instead of a float because nanosecond precision does not
    survive a 64-bit float at UNIX timestamp magnitudes. Fractional digits
    beyond the ninth are truncated.

    Args:
        stamp: Text such as ``"1508410740.582458241"`` or ``"5001"``.
        fuzzy: Treat an implausibly large whole number (over ~1000 years of
            seconds) as milliseconds, microseconds, or nanoseconds.

    Returns:
        The parsed Time, or None if ``stamp`` is not a decimal number.
    """
    try:
        parsed = parse_decimal_seconds(stamp)
    except UnexpectedInput:
        logger.debug("Rejected decimal-seconds timestamp %r", stamp)
        return None

    if parsed.fraction is not None:
        return Time(
            sec=int(parsed.seconds or "0"),
            nsec=truncate_digits(parsed.fraction, NSEC_DIGITS),
        )

    nsec = int(parsed.seconds) * NSEC_PER_SEC
    if fuzzy:
        while nsec > FUZZY_THRESHOLD_NSEC:
            nsec //= FUZZY_UNIT_STEP
    return from_nano_sec(nsec)


def to_rfc3339_string(stamp: Time) -> str:
    """Format as ``YYYY-MM-DDTHH:MM:SS.nnnnnnnnnZ`` in UTC.

    Like :meth:`datetime.isoformat`, but always with nanosecond precision and
    without an upper bound on the year.

    Raises:
        NegativeTimeError: If either field is negative.
        InvalidTimeError: If ``nsec`` is not below one second.
    """
    _check_non_negative(stamp)
    if stamp.nsec >= NSEC_PER_SEC:
        raise InvalidTimeError(
            ERR_MSG_INVALID_NANOSECONDS,
            f"invalid nanosecond value {stamp.nsec}",
        )
    days, seconds_of_day = divmod(stamp.sec, SEC_PER_DAY)
    year, month, day = civil_from_days(days)
    hour, rest = divmod(seconds_of_day, SEC_PER_HOUR)
    minute, second = divmod(rest, SEC_PER_MINUTE)
    return (
        f"{year}-{month:02d}-{day:02d}"
        f"T{hour:02d}:{minute:02d}:{second:02d}"
        f".{stamp.nsec:0{NSEC_DIGITS}d}Z"
    )


def from_rfc3339_string(stamp: str) -> Time | None:
    """Parse a subset of RFC3339/ISO8601 with up to nanosecond precision.

    Fractions longer than nine digits are rounded to the nearest nanosecond.
    Fields past their calendar range (e.g. hour 24) roll over into the next
    unit.

    Returns:
        The parsed Time, or None if ``stamp`` is malformed.

    Raises:
        InvalidTimeError: If the instant is before the UNIX epoch.
    """
    try:
        fields = parse_rfc3339(stamp)
    except UnexpectedInput:
        logger.debug("Rejected RFC3339 timestamp %r", stamp)
        return None

    month_index = fields.month - 1
    year = fields.year + month_index // 12
    days = days_from_civil(year, month_index % 12 + 1, 1) + fields.day - 1
    utc_seconds = (
        days * SEC_PER_DAY
        + (fields.hour - fields.offset_sign * fields.offset_hours) * SEC_PER_HOUR
        + (fields.minute - fields.offset_sign * fields.offset_minutes) * SEC_PER_MINUTE
        + fields.second
    )
    utc_millis = utc_seconds * MSEC_PER_SEC
    if utc_millis % MSEC_PER_SEC != 0:
        logger.debug("RFC3339 timestamp %r is not on a whole second", stamp)
        return None

    nsec = round_digits(fields.fraction, NSEC_DIGITS) if fields.fraction is not None else 0
    # Rounding may produce exactly one second of nanoseconds.
    return fix_time(Time(sec=utc_millis // MSEC_PER_SEC, nsec=nsec))
