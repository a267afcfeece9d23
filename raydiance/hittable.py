"""Ray–surface intersections and the interface of objects that rays can hit."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

from raydiance.interval import Interval
from raydiance.ray import Ray
from raydiance.vec3 import Point3, Vec3, dot

if TYPE_CHECKING:
    from raydiance.material import Material


@dataclass(slots=True)
class Intersection:
    """Where a ray met a surface, and what that surface is made of."""

    p: Point3 = field(default_factory=Vec3)
    normal: Vec3 = field(default_factory=Vec3)
    material: Optional[Material] = None
    t: float = 0.0
    front_face: bool = False

    def set_face_normal(self, ray: Ray, outward_normal: Vec3) -> None:
        """Orient the normal against the ray and record which side was hit.

        The outward normal is expected to have unit length.
        """
        self.front_face = dot(ray.direction, outward_normal) < 0.0
        self.normal = outward_normal if self.front_face else -outward_normal


class Hittable(ABC):
    """Anything a ray can intersect."""

    @abstractmethod
    def hit(self, ray: Ray, t_range: Interval) -> Optional[Intersection]:
        """Return the nearest intersection with t strictly inside t_range, or None."""