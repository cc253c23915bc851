"""The Time value type."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from pyrostime._errors import ERR_MSG_NOT_A_TIME, InvalidTimeError

_TIME_KEYS = frozenset({"sec", "nsec"})


@dataclass(frozen=True, order=True)
class Time:
    """A point in time or a duration as whole seconds plus nanoseconds.

    Normalized values satisfy ``0 <= nsec < 1_000_000_000`` with the sign
    carried by ``sec``. Field order makes the generated ordering identical
    to :func:`pyrostime.compare`.
    """

    sec: int = 0
    nsec: int = 0

    @classmethod
    def from_mapping(cls, obj: Any) -> Time:
        """Build a Time from a ``{"sec": ..., "nsec": ...}`` mapping."""
        if not is_time(obj):
            raise InvalidTimeError(ERR_MSG_NOT_A_TIME, f"cannot build a time from {obj!r}")
        if isinstance(obj, Time):
            return obj
        return cls(sec=obj["sec"], nsec=obj["nsec"])

    def as_dict(self) -> dict[str, int]:
        """Return the plain ``{"sec": ..., "nsec": ...}`` mapping accepted by :func:`is_time`."""
        return {"sec": self.sec, "nsec": self.nsec}

    def __add__(self, other: object) -> Time:
        if not isinstance(other, Time):
            return NotImplemented
        from pyrostime._arithmetic import add

        return add(self, other)

    def __sub__(self, other: object) -> Time:
        if not isinstance(other, Time):
            return NotImplemented
        from pyrostime._arithmetic import subtract

        return subtract(self, other)


def is_time(obj: Any) -> bool:
    """Return True if ``obj`` is a Time or a mapping with exactly ``sec`` and ``nsec``."""
    if isinstance(obj, Time):
        return True
    if not isinstance(obj, Mapping):
        return False
    return set(obj.keys()) == _TIME_KEYS
