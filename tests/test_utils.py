"""Utility function tests."""

import pytest

from pyrostime._utils import (
    ceil_div,
    civil_from_days,
    days_from_civil,
    round_digits,
    round_half_up,
    trunc_divmod,
    truncate_digits,
)


class TestTruncDivmod:
    @pytest.mark.parametrize(
        ("value", "divisor", "expected"),
        [
            (7, 2, (3, 1)),
            (-7, 2, (-3, -1)),
            (7, -2, (-3, 1)),
            (-1, 1000, (0, -1)),
            (-2000, 1000, (-2, 0)),
        ],
    )
    def test_truncates_toward_zero(self, value, divisor, expected):
        assert trunc_divmod(value, divisor) == expected


class TestRoundHalfUp:
    def test_ties_go_up(self):
        assert round_half_up(0.5) == 1
        assert round_half_up(2.5) == 3
        assert round_half_up(-0.5) == 0
        assert round_half_up(-2.5) == -2

    def test_nearest(self):
        assert round_half_up(1.4) == 1
        assert round_half_up(-1.6) == -2

    def test_just_below_half(self):
        assert round_half_up(0.49999999999999994) == 0
        assert round_half_up(-0.5000000000000001) == -1


class TestCeilDiv:
    def test_positive(self):
        assert ceil_div(1, 1_000_000) == 1
        assert ceil_div(2_000_000, 1_000_000) == 2

    def test_negative(self):
        assert ceil_div(-1_500_000, 1_000_000) == -1


class TestRoundDigits:
    def test_zero_extends(self):
        assert round_digits("5", 9) == 500_000_000

    def test_exact_width(self):
        assert round_digits("123456789", 9) == 123_456_789

    def test_rounds_half_up(self):
        assert round_digits("1234567895", 9) == 123_456_790
        assert round_digits("1234567894999", 9) == 123_456_789

    def test_may_overflow(self):
        assert round_digits("9999999995", 9) == 1_000_000_000


class TestTruncateDigits:
    def test_pads(self):
        assert truncate_digits("25", 9) == 250_000_000

    def test_truncates(self):
        assert truncate_digits("1234567899", 9) == 123_456_789


class TestCivilDays:
    @pytest.mark.parametrize(
        ("date", "days"),
        [
            ((1970, 1, 1), 0),
            ((1969, 12, 31), -1),
            ((2000, 2, 29), 11016),
            ((2000, 3, 1), 11017),
            ((2021, 9, 1), 18871),
            ((10000, 1, 1), 2932897),
            ((0, 3, 1), -719468),
        ],
    )
    def test_known_dates(self, date, days):
        assert days_from_civil(*date) == days
        assert civil_from_days(days) == date

    @pytest.mark.parametrize("days", [-800_000, -1, 0, 59, 60, 10_957, 2_932_896, 10**8])
    def test_inverse(self, days):
        assert days_from_civil(*civil_from_days(days)) == days
