"""A collection of hittable objects."""

from __future__ import annotations

from typing import Optional

from raydiance.hittable import Hittable, Intersection
from raydiance.interval import Interval
from raydiance.ray import Ray


class Scene(Hittable):
    """A list of objects that is hit where its nearest member is hit."""

    def __init__(self, *objects: Hittable) -> None:
        self.objects: list[Hittable] = list(objects)

    def add(self, obj: Hittable) -> None:
        """Append an object to the scene."""
        self.objects.append(obj)

    def clear(self) -> None:
        """Remove every object."""
        self.objects.clear()

    def hit(self, ray: Ray, t_range: Interval) -> Optional[Intersection]:
        closest: Optional[Intersection] = None
        limit = t_range.max
        for obj in self.objects:
            hit = obj.hit(ray, Interval(t_range.min, limit))
            if hit is not None:
                closest = hit
                limit = hit.t
        return closest