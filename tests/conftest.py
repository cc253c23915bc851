"""Shared test fixtures."""

import pytest

from pyrostime import Time


@pytest.fixture
def epoch():
    return Time(sec=0, nsec=0)


@pytest.fixture
def stamp():
    return Time(sec=1508410740, nsec=582458241)


NORMALIZED_TIMES = [
    Time(sec=0, nsec=0),
    Time(sec=0, nsec=1),
    Time(sec=0, nsec=999_999_999),
    Time(sec=1, nsec=0),
    Time(sec=102, nsec=304),
    Time(sec=1508410740, nsec=582458241),
    Time(sec=1624947142, nsec=42),
    Time(sec=10_000_000_001, nsec=500_000_000),
]
