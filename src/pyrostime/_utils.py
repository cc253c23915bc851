"""Integer division and rounding helpers."""

from __future__ import annotations

import math


def trunc_divmod(value: int, divisor: int) -> tuple[int, int]:
    """Divide rounding toward zero; the remainder takes the sign of ``value``.

    Unlike :func:`divmod`, ``trunc_divmod(-1, 1000) == (0, -1)``.
    """
    quotient = abs(value) // abs(divisor)
    if (value < 0) != (divisor < 0):
        quotient = -quotient
    return quotient, value - quotient * divisor


def round_half_up(value: float) -> int:
    """Round to the nearest integer, breaking ties toward positive infinity."""
    whole = math.floor(value)
    return whole + 1 if value - whole >= 0.5 else whole


def ceil_div(value: int, divisor: int) -> int:
    """Exact integer ceiling division."""
    return -(-value // divisor)


def round_digits(digits: str, width: int) -> int:
    """Interpret ``digits`` as a fraction scaled to ``width`` decimal places.

    Shorter strings are zero-extended; longer ones are rounded half-up on the
    first dropped digit, so the result may equal ``10 ** width``.
    """
    excess = len(digits) - width
    if excess <= 0:
        return int(digits) * 10 ** -excess
    scale = 10**excess
    quotient, remainder = divmod(int(digits), scale)
    if 2 * remainder >= scale:
        quotient += 1
    return quotient


def truncate_digits(digits: str, width: int) -> int:
    """Interpret ``digits`` as a fraction of ``width`` places, dropping excess digits."""
    return int(digits[:width].ljust(width, "0"))


# Proleptic Gregorian calendar over unbounded years, in 400-year eras of
# 146097 days counted from 0000-03-01.
_DAYS_PER_ERA = 146_097
_EPOCH_DAY_OFFSET = 719_468


def days_from_civil(year: int, month: int, day: int) -> int:
    """Days since 1970-01-01 for a calendar date; ``month`` must be 1-12."""
    if month <= 2:
        year -= 1
    era = year // 400
    year_of_era = year - era * 400
    day_of_year = (153 * (month + (-3 if month > 2 else 9)) + 2) // 5 + day - 1
    day_of_era = year_of_era * 365 + year_of_era // 4 - year_of_era // 100 + day_of_year
    return era * _DAYS_PER_ERA + day_of_era - _EPOCH_DAY_OFFSET


def civil_from_days(days: int) -> tuple[int, int, int]:
    """Inverse of :func:`days_from_civil`, returning ``(year, month, day)``."""
    days += _EPOCH_DAY_OFFSET
    era = days // _DAYS_PER_ERA
    day_of_era = days - era * _DAYS_PER_ERA
    year_of_era = (
        day_of_era - day_of_era // 1460 + day_of_era // 36524 - day_of_era // 146096
    ) // 365
    day_of_year = day_of_era - (365 * year_of_era + year_of_era // 4 - year_of_era // 100)
    shifted_month = (5 * day_of_year + 2) // 153
    day = day_of_year - (153 * shifted_month + 2) // 5 + 1
    month = shifted_month + 3 if shifted_month < 10 else shifted_month - 9
    year = year_of_era + era * 400 + (1 if month <= 2 else 0)
    return year, month, day
