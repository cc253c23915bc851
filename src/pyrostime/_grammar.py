"""Lark grammars for the textual time formats.

Two formats are recognized:

* decimal seconds, e.g. ``1508410740.582458241``, ``5001``, ``5001.``, ``.5``
* an RFC3339 subset, e.g. ``2021-09-01T18:00:00.123456789+02:00``

Both parsers are built once at import time. Parse failures surface as
:class:`lark.exceptions.UnexpectedInput`.
"""

from __future__ import annotations

from typing import NamedTuple

from lark import Lark, Token, Transformer

_DECIMAL_SECONDS_GRAMMAR = r"""
    start: DIGITS POINT?            -> whole
         | DIGITS? POINT DIGITS     -> fractional

    POINT: "."
    DIGITS: /[0-9]+/
"""

_RFC3339_GRAMMAR = r"""
    start: date _DATE_TIME_SEP time fraction? zone

    date: YEAR "-" TWO_DIGITS "-" TWO_DIGITS
    time: TWO_DIGITS ":" TWO_DIGITS ":" TWO_DIGITS
    fraction: "." DIGITS
    zone: _UTC                              -> utc
        | SIGN TWO_DIGITS ":" TWO_DIGITS    -> offset

    _DATE_TIME_SEP: "T"i
    _UTC: "Z"i
    SIGN: "+" | "-"
    YEAR: /[0-9]{4,}/
    TWO_DIGITS: /[0-9]{2}/
    DIGITS: /[0-9]+/
"""


class DecimalSeconds(NamedTuple):
    """Digit strings of a decimal-seconds timestamp."""

    seconds: str
    fraction: str | None


class RFC3339Fields(NamedTuple):
    """Numeric fields of an RFC3339 timestamp; ``fraction`` keeps its raw digits."""

    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int
    fraction: str | None
    offset_sign: int
    offset_hours: int
    offset_minutes: int


class _DecimalSecondsTransformer(Transformer):
    def whole(self, children: list[Token]) -> DecimalSeconds:
        return DecimalSeconds(seconds=str(children[0]), fraction=None)

    def fractional(self, children: list[Token]) -> DecimalSeconds:
        # An empty integer part (".5") means zero seconds.
        seconds = str(children[0]) if children[0].type == "DIGITS" else ""
        return DecimalSeconds(seconds=seconds, fraction=str(children[-1]))


class _RFC3339Transformer(Transformer):
    def date(self, children: list[Token]) -> tuple[int, ...]:
        return tuple(int(c) for c in children)

    def time(self, children: list[Token]) -> tuple[int, ...]:
        return tuple(int(c) for c in children)

    def fraction(self, children: list[Token]) -> str:
        return str(children[0])

    def utc(self, children: list[Token]) -> tuple[int, int, int]:
        return 1, 0, 0

    def offset(self, children: list[Token]) -> tuple[int, int, int]:
        sign, hours, minutes = children
        return (-1 if sign == "-" else 1), int(hours), int(minutes)

    def start(self, children: list) -> RFC3339Fields:
        if len(children) == 4:
            date, time, fraction, zone = children
        else:
            date, time, zone = children
            fraction = None
        return RFC3339Fields(*date, *time, fraction, *zone)


_decimal_seconds_parser = Lark(
    _DECIMAL_SECONDS_GRAMMAR,
    parser="lalr",
    transformer=_DecimalSecondsTransformer(),
)

_rfc3339_parser = Lark(
    _RFC3339_GRAMMAR,
    parser="lalr",
    transformer=_RFC3339Transformer(),
)


def parse_decimal_seconds(text: str) -> DecimalSeconds:
    """Split a decimal-seconds string into its digit groups."""
    return _decimal_seconds_parser.parse(text)


def parse_rfc3339(text: str) -> RFC3339Fields:
    """Split an RFC3339 timestamp into its numeric fields."""
    return _rfc3339_parser.parse(text)
