"""Three-component vectors and the geometry helpers that act on them."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Union

from raydiance.utils import random_double

_AXES = ("x", "y", "z")
_NEAR_ZERO = 1e-8


@dataclass(slots=True)
class Vec3:
    """A vector (or point) in three-dimensional space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __getitem__(self, index: int) -> float:
        return getattr(self, _AXES[index])

    def __setitem__(self, index: int, value: float) -> None:
        setattr(self, _AXES[index], value)

    def __str__(self) -> str:
        return f"{self.x:g} {self.y:g} {self.z:g}"

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __add__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: Union[Vec3, float]) -> Vec3:
        if isinstance(other, Vec3):
            # Hadamard product
            return Vec3(self.x * other.x, self.y * other.y, self.z * other.z)
        if isinstance(other, (int, float)):
            return Vec3(other * self.x, other * self.y, other * self.z)
        return NotImplemented

    def __rmul__(self, other: float) -> Vec3:
        if isinstance(other, (int, float)):
            return Vec3(other * self.x, other * self.y, other * self.z)
        return NotImplemented

    def __truediv__(self, t: float) -> Vec3:
        if not isinstance(t, (int, float)):
            return NotImplemented
        return (1.0 / t) * self

    def length(self) -> float:
        """Euclidean length of the vector."""
        return math.sqrt(self.length_squared())

    def length_squared(self) -> float:
        """Squared Euclidean length of the vector."""
        return self.x * self.x + self.y * self.y + self.z * self.z

    @staticmethod
    def random(low: float = 0.0, high: float = 1.0) -> Vec3:
        """A vector whose components are uniform in [low, high)."""
        return Vec3(random_double(low, high), random_double(low, high), random_double(low, high))

    @staticmethod
    def random_in_unit_sphere() -> Vec3:
        """A random point strictly inside the unit sphere."""
        while True:
            v = Vec3.random(-1.0, 1.0)
            if v.length_squared() < 1.0:
                return v

    @staticmethod
    def random_in_unit_disk() -> Vec3:
        """A random point strictly inside the unit disk in the z = 0 plane."""
        while True:
            v = Vec3(random_double(-1.0, 1.0), random_double(-1.0, 1.0), 0.0)
            if v.length_squared() < 1.0:
                return v

    def is_near_zero(self) -> bool:
        """True if every component is smaller in magnitude than 1e-8."""
        return all(abs(c) < _NEAR_ZERO for c in self)


Point3 = Vec3


def dot(u: Vec3, v: Vec3) -> float:
    """Dot product of two vectors."""
    return u.x * v.x + u.y * v.y + u.z * v.z


def cross(u: Vec3, v: Vec3) -> Vec3:
    """Cross product of two vectors."""
    return Vec3(
        u.y * v.z - u.z * v.y,
        u.z * v.x - u.x * v.z,
        u.x * v.y - u.y * v.x,
    )


def unit_vector(v: Vec3) -> Vec3:
    """The vector scaled to length one; raises ZeroDivisionError for a zero vector."""
    return v / v.length()


def random_unit_vector() -> Vec3:
    """A random direction of length one."""
    return unit_vector(Vec3.random_in_unit_sphere())


def reflect(v: Vec3, n: Vec3) -> Vec3:
    """Reflect v about the normal n."""
    return v - 2.0 * dot(v, n) * n


def refract(v: Vec3, n: Vec3, index_ratio: float) -> Vec3:
    """Refract the unit vector v through a surface with normal n (Snell's law)."""
    cos_theta = min(dot(-v, n), 1.0)
    out_perp = index_ratio * (v + cos_theta * n)
    out_parallel = -math.sqrt(abs(1.0 - out_perp.length_squared())) * n
    return out_perp + out_parallel