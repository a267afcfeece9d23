"""Spheres."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from raydiance.hittable import Hittable, Intersection
from raydiance.interval import Interval
from raydiance.material import Material
from raydiance.ray import Ray
from raydiance.vec3 import Point3, dot


@dataclass(frozen=True, slots=True)
class Sphere(Hittable):
    """A sphere with a centre, a radius and a surface material."""

    centre: Point3
    radius: float
    material: Optional[Material]

    def hit(self, ray: Ray, t_range: Interval) -> Optional[Intersection]:
        oc = ray.origin - self.centre
        a = ray.direction.length_squared()
        half_b = dot(oc, ray.direction)
        c = oc.length_squared() - self.radius * self.radius

        discriminant = half_b * half_b - a * c
        if discriminant < 0:
            return None

        sqrtd = math.sqrt(discriminant)
        root = (-half_b - sqrtd) / a
        # Take the nearest root that lies in the acceptable range
        if not t_range.surrounds(root):
            root = (-half_b + sqrtd) / a
            if not t_range.surrounds(root):
                return None

        p = ray.at(root)
        hit = Intersection(p=p, material=self.material, t=root)
        hit.set_face_normal(ray, (p - self.centre) / self.radius)
        return hit