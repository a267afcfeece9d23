"""Surface materials and how they scatter incoming light."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from raydiance.colour import Colour
from raydiance.ray import Ray
from raydiance.utils import random_double
from raydiance.vec3 import dot, random_unit_vector, reflect, refract, unit_vector

if TYPE_CHECKING:
    from raydiance.hittable import Intersection


@dataclass(frozen=True, slots=True)
class Scatter:
    """The result of a scattering event: how much light survives and where it goes."""

    attenuation: Colour
    scattered: Ray


class Material(ABC):
    """A surface that scatters or absorbs light."""

    @abstractmethod
    def scatter(self, ray_in: Ray, hit: Intersection) -> Optional[Scatter]:
        """Return the scattered ray and its attenuation, or None if the ray is absorbed."""


@dataclass(frozen=True, slots=True)
class Lambertian(Material):
    """A matte, diffusely reflecting surface."""

    albedo: Colour

    def scatter(self, ray_in: Ray, hit: Intersection) -> Optional[Scatter]:
        direction = hit.normal + random_unit_vector()
        # A random vector nearly opposite the normal would give a degenerate direction
        if direction.is_near_zero():
            direction = hit.normal
        return Scatter(self.albedo, Ray(hit.p, direction))


@dataclass(frozen=True, slots=True, init=False)
class Metal(Material):
    """A reflective surface; fuzz in [0, 1] blurs the reflection."""

    albedo: Colour
    fuzz: float

    def __init__(self, albedo: Colour, fuzz: float) -> None:
        object.__setattr__(self, "albedo", albedo)
        object.__setattr__(self, "fuzz", fuzz if fuzz < 1.0 else 1.0)

    def scatter(self, ray_in: Ray, hit: Intersection) -> Optional[Scatter]:
        reflected = reflect(unit_vector(ray_in.direction), hit.normal)
        scattered = Ray(hit.p, reflected + self.fuzz * random_unit_vector())
        # Rays fuzzed below the surface are absorbed
        if dot(scattered.direction, hit.normal) > 0.0:
            return Scatter(self.albedo, scattered)
        return None


@dataclass(frozen=True, slots=True)
class Dielectric(Material):
    """A transparent material such as glass, diamond or water."""

    refraction_index: float

    def scatter(self, ray_in: Ray, hit: Intersection) -> Optional[Scatter]:
        attenuation = Colour(1.0, 1.0, 1.0)
        ratio = 1.0 / self.refraction_index if hit.front_face else self.refraction_index

        unit_direction = unit_vector(ray_in.direction)
        cos_theta = min(dot(-unit_direction, hit.normal), 1.0)
        sin_theta = math.sqrt(1.0 - cos_theta * cos_theta)

        cannot_refract = ratio * sin_theta > 1.0
        if cannot_refract or self.reflectance(cos_theta, ratio) > random_double():
            direction = reflect(unit_direction, hit.normal)
        else:
            direction = refract(unit_direction, hit.normal, ratio)

        return Scatter(attenuation, Ray(hit.p, direction))

    @staticmethod
    def reflectance(cosine: float, refraction_index: float) -> float:
        """Schlick's approximation of the reflection coefficient."""
        r0 = (1.0 - refraction_index) / (1.0 + refraction_index)
        r0 *= r0
        return r0 + (1.0 - r0) * (1.0 - cosine) ** 5.0