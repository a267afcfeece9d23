import pytest

from raydiance.vec3 import (
    Vec3,
    cross,
    dot,
    random_unit_vector,
    reflect,
    refract,
    unit_vector,
)


def approx(value):
    return pytest.approx(value, rel=1e-12, abs=1e-15)


def assert_vec(v, x, y, z):
    assert v.x == approx(x)
    assert v.y == approx(y)
    assert v.z == approx(z)


def test_element_access():
    assert_vec(Vec3(), 0.0, 0.0, 0.0)
    assert_vec(Vec3(0.5, 0.6, 0.7), 0.5, 0.6, 0.7)


def test_negation():
    v2 = -Vec3(0.5, 0.6, 0.7)
    assert_vec(v2, -0.5, -0.6, -0.7)
    assert_vec(-v2, 0.5, 0.6, 0.7)


def test_read_write_access():
    v = Vec3(0.5, 0.6, 0.7)
    assert (v[0], v[1], v[2]) == (0.5, 0.6, 0.7)
    v[0] = 0.1
    v[1] = 0.2
    v[2] = 0.3
    assert (v[0], v[1], v[2]) == (0.1, 0.2, 0.3)


def test_index_out_of_range():
    with pytest.raises(IndexError):
        Vec3()[3]


def test_mutating_addition():
    v1 = Vec3(0.5, 0.6, 0.7)
    v1 += Vec3(0.1, 0.2, 0.3)
    assert_vec(v1, 0.6, 0.8, 1.0)
    v1 += v1
    assert_vec(v1, 1.2, 1.6, 2.0)


def test_mutating_scalar_multiplication():
    v = Vec3(0.5, 0.6, 0.7)
    v *= 2.0
    assert_vec(v, 1.0, 1.2, 1.4)
    v *= 0.0
    assert_vec(v, 0.0, 0.0, 0.0)


def test_mutating_scalar_division():
    v = Vec3(0.5, 0.6, 0.7)
    v /= 2.0
    assert_vec(v, 0.25, 0.3, 0.35)
    v /= 0.1
    assert_vec(v, 2.5, 3.0, 3.5)


def test_length():
    assert Vec3(0.5, -0.6, 0.7).length() == approx(1.0488088481701514)
    assert Vec3(0.0, 0.0, 0.0).length() == 0.0


def test_length_squared():
    assert Vec3(-0.5, 0.6, -0.7).length_squared() == approx(1.1)
    assert Vec3(0.0, 0.0, 0.0).length_squared() == 0.0


@pytest.mark.parametrize(
    "v, expected",
    [
        (Vec3(0.0, 0.0, 0.0), True),
        (Vec3(1e-9, 1e-9, 1e-9), True),
        (Vec3(0.0, 1e-5, 0.0), False),
        (Vec3(1e-8, 1e-8, 1e-8), False),
    ],
)
def test_is_near_zero(v, expected):
    assert v.is_near_zero() is expected


def test_addition():
    assert_vec(Vec3(0.5, -0.6, 0.7) + Vec3(0.11, 0.0, 0.3), 0.61, -0.6, 1.0)


def test_subtraction():
    assert_vec(Vec3(0.8, 0.6, 0.3) - Vec3(0.01, 0.2, 0.7), 0.79, 0.4, -0.4)


def test_hadamard_product():
    assert_vec(Vec3(0.5, 0.6, 0.7) * Vec3(0.1, -0.2, 0.0), 0.05, -0.12, 0.0)


def test_scalar_multiplication():
    v2 = Vec3(0.5, 0.6, -0.7) * 2.0
    assert_vec(v2, 1.0, 1.2, -1.4)
    assert_vec(3.0 * v2, 3.0, 3.6, -4.2)


def test_scalar_division():
    assert_vec(Vec3(0.5, 0.6, -0.7) / 2.0, 0.25, 0.3, -0.35)


def test_dot_product():
    assert dot(Vec3(0.5, 0.6, 0.7), Vec3(0.1, -0.2, 0.0)) == approx(-0.07)


def test_cross_product():
    v1 = Vec3(0.5, 0.6, 0.7)
    v2 = Vec3(0.1, -0.2, 0.0)
    assert_vec(cross(v1, v2), 0.14, 0.07, -0.16)
    assert_vec(cross(v2, v1), -0.14, -0.07, 0.16)


def test_unit_vector():
    v2 = unit_vector(Vec3(0.5, 0.6, 0.7))
    assert v2.length() == approx(1.0)
    assert_vec(v2, 0.476731294622796, 0.572077553547355, 0.667423812471915)


def test_unit_vector_of_zero_raises():
    with pytest.raises(ZeroDivisionError):
        unit_vector(Vec3())


def test_reflect():
    r1 = reflect(Vec3(0.5, 0.6, 0.7), Vec3(0.1, -0.2, 0.5))
    assert_vec(r1, 0.44400000000000001, 0.71199999999999997, 0.41999999999999998)
    r2 = reflect(Vec3(0.5, 0.6, 0.7), Vec3(0.0, 0.0, 0.0))
    assert_vec(r2, 0.5, 0.6, 0.7)


def test_refract():
    r1 = refract(Vec3(0.5, 0.6, 0.7), Vec3(0.1, -0.2, 0.5), 1.5)
    assert_vec(r1, 0.59959704801067448, 1.2008059039786507, 0.29798524005337268)
    r2 = refract(Vec3(0.5, 0.6, 0.7), Vec3(0.8, 0.9, -1.4), 0.9)
    assert_vec(r2, 0.21690213899307964, 0.27776490636721457, 1.0379212567621106)


def test_str_format():
    assert str(Vec3(1.0, -2.5, 0.0)) == "1 -2.5 0"


def test_iteration():
    assert list(Vec3(1.0, 2.0, 3.0)) == [1.0, 2.0, 3.0]


def test_random_within_bounds():
    for _ in range(200):
        v = Vec3.random(-2.0, 3.0)
        assert all(-2.0 <= c < 3.0 for c in v)


def test_random_in_unit_sphere():
    for _ in range(200):
        assert Vec3.random_in_unit_sphere().length_squared() < 1.0


def test_random_in_unit_disk():
    for _ in range(200):
        v = Vec3.random_in_unit_disk()
        assert v.z == 0.0
        assert v.length_squared() < 1.0


def test_random_unit_vector_has_unit_length():
    for _ in range(200):
        assert random_unit_vector().length() == pytest.approx(1.0)