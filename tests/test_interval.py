import pytest

from raydiance.interval import Interval
from raydiance.utils import INFINITY


def test_contains():
    i = Interval(0, 1)
    assert i.contains(0.0)
    assert i.contains(1.0)
    assert i.contains(0.5)
    assert not i.contains(-0.1)
    assert not i.contains(2.0)


def test_surrounds():
    i = Interval(0, 1)
    assert i.surrounds(0.1)
    assert i.surrounds(0.95)
    assert not i.surrounds(0.0)
    assert not i.surrounds(1.0)


def test_empty():
    i = Interval.EMPTY
    assert not i.contains(0.0)
    assert not i.contains(-50.0)
    assert not i.surrounds(100.0)


def test_default_is_empty():
    assert Interval() == Interval.EMPTY
    assert not Interval().contains(0.0)


def test_universe():
    i = Interval.UNIVERSE
    assert i.contains(-20.0)
    assert i.contains(5.0)
    assert i.contains(INFINITY)
    assert not i.surrounds(INFINITY)
    assert i.contains(-INFINITY)
    assert not i.surrounds(-INFINITY)


@pytest.mark.parametrize(
    "x, expected",
    [(0.5, 0.5), (0.0, 0.0), (1.0, 1.0), (-0.5, 0.0), (1.5, 1.0)],
)
def test_clamp(x, expected):
    assert Interval(0.0, 1.0).clamp(x) == expected