"""pyrostime - Nanosecond-precision fixed-point time values."""

from __future__ import annotations

try:
    from pyrostime._version import __version__
except ModuleNotFoundError:  # editable install without VCS metadata
    __version__ = "0.0.0.dev0"

from pyrostime._arithmetic import add, fix_time, interpolate, percent_of, subtract
from pyrostime._codec import (
    from_rfc3339_string,
    from_string,
    to_rfc3339_string,
    to_string,
)
from pyrostime._conversions import (
    from_date,
    from_micros,
    from_millis,
    from_nano_sec,
    from_sec,
    to_date,
    to_micro_sec,
    to_millis,
    to_nano_sec,
    to_sec,
)
from pyrostime._errors import InvalidTimeError, NegativeTimeError, TimeError
from pyrostime._ordering import (
    are_equal,
    clamp_time,
    compare,
    is_greater_than,
    is_less_than,
    is_time_in_range_inclusive,
)
from pyrostime._time import Time, is_time

__all__ = [
    "Time",
    "is_time",
    "fix_time",
    "add",
    "subtract",
    "percent_of",
    "interpolate",
    "to_date",
    "from_date",
    "to_nano_sec",
    "from_nano_sec",
    "to_micro_sec",
    "to_sec",
    "from_sec",
    "to_millis",
    "from_millis",
    "from_micros",
    "to_string",
    "from_string",
    "to_rfc3339_string",
    "from_rfc3339_string",
    "compare",
    "is_less_than",
    "is_greater_than",
    "are_equal",
    "clamp_time",
    "is_time_in_range_inclusive",
    "TimeError",
    "InvalidTimeError",
    "NegativeTimeError",
]
