"""Numeric constants for fixed-point time arithmetic."""

from datetime import datetime, timezone

NSEC_PER_SEC = 1_000_000_000
"""Nanoseconds in one second; upper (exclusive) bound of a normalized ``nsec``."""

NSEC_PER_MSEC = 1_000_000
"""Nanoseconds in one millisecond."""

NSEC_PER_USEC = 1_000
"""Nanoseconds in one microsecond."""

MSEC_PER_SEC = 1_000
"""Milliseconds in one second."""

USEC_PER_SEC = 1_000_000
"""Microseconds in one second."""

NSEC_DIGITS = 9
"""Width of the zero-padded nanosecond field in textual formats."""

FUZZY_THRESHOLD_NSEC = 1000 * 365 * 86400 * NSEC_PER_SEC
"""Roughly 1000 years in nanoseconds.

Bare integer timestamps above this are assumed to be in a finer unit than
seconds when parsing fuzzily.
"""

FUZZY_UNIT_STEP = 1000
"""Divisor applied per step when scaling down an implausibly large timestamp."""

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
"""The UNIX epoch as an aware UTC datetime."""

SEC_PER_MINUTE = 60
"""Seconds in one minute."""

SEC_PER_HOUR = 3600
"""Seconds in one hour."""

SEC_PER_DAY = 86400
"""Seconds in one day; leap seconds are not modelled."""
