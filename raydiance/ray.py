"""Rays: an origin and a direction."""

from __future__ import annotations

from dataclasses import dataclass, field

from raydiance.vec3 import Point3, Vec3


@dataclass(frozen=True, slots=True)
class Ray:
    """A half-line starting at origin and heading along direction."""

    origin: Point3 = field(default_factory=Vec3)
    direction: Vec3 = field(default_factory=Vec3)

    def at(self, t: float) -> Point3:
        """The point reached after travelling t units of direction."""
        return self.origin + t * self.direction