import math

import pytest

from raydiance.utils import INFINITY, PI, degrees_to_radians, random_double


@pytest.mark.parametrize(
    "degrees, expected",
    [
        (0.0, 0.0),
        (90.0, PI / 2.0),
        (180.0, PI),
        (270.0, 3.0 * PI / 2.0),
        (360.0, 2.0 * PI),
    ],
)
def test_degrees_to_radians(degrees, expected):
    assert degrees_to_radians(degrees) == pytest.approx(expected, rel=1e-15, abs=0.0)


def test_half_turn_matches_math_pi():
    assert degrees_to_radians(180.0) == pytest.approx(math.pi)


def test_degrees_to_radians_of_infinity_is_infinite():
    assert degrees_to_radians(INFINITY) == INFINITY
    assert degrees_to_radians(-INFINITY) == -INFINITY


def test_random_double_default_range():
    values = [random_double() for _ in range(1000)]
    assert all(0.0 <= v < 1.0 for v in values)


def test_random_double_custom_range():
    values = [random_double(-3.0, -1.0) for _ in range(1000)]
    assert all(-3.0 <= v < -1.0 for v in values)
    assert max(values) - min(values) > 1.0