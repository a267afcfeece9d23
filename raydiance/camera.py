"""A positionable pinhole/thin-lens camera that renders scenes to PPM."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import IO

from raydiance.colour import Colour, write_colour
from raydiance.hittable import Hittable
from raydiance.interval import Interval
from raydiance.ray import Ray
from raydiance.utils import INFINITY, degrees_to_radians, random_double
from raydiance.vec3 import Point3, Vec3, cross, unit_vector

_BLACK = Colour(0.0, 0.0, 0.0)
_WHITE = Colour(1.0, 1.0, 1.0)
_SKY = Colour(0.5, 0.7, 1.0)
# Start slightly off the surface to avoid re-hitting it through rounding error
_HIT_RANGE = Interval(0.001, INFINITY)


@dataclass
class Camera:
    """Camera settings plus the viewport geometry derived from them.

    The camera uses a right-handed coordinate system.
    """

    aspect_ratio: float = 16.0 / 9.0
    img_width: int = 400
    samples_per_pixel: int = 10
    max_depth: int = 10
    field_of_view: float = 45.0
    look_from: Point3 = field(default_factory=lambda: Point3(0.0, 0.0, 0.0))
    look_at: Point3 = field(default_factory=lambda: Point3(0.0, 0.0, 1.0))
    camera_up: Vec3 = field(default_factory=lambda: Vec3(0.0, 1.0, 0.0))
    defocus_angle: float = 0.0
    focus_distance: float = 1.0

    img_height: int = field(default=0, init=False)
    _pixel_du: Vec3 = field(default_factory=Vec3, init=False, repr=False)
    _pixel_dv: Vec3 = field(default_factory=Vec3, init=False, repr=False)
    _pixel00: Point3 = field(default_factory=Vec3, init=False, repr=False)
    _defocus_u: Vec3 = field(default_factory=Vec3, init=False, repr=False)
    _defocus_v: Vec3 = field(default_factory=Vec3, init=False, repr=False)

    def render(self, out: IO[str], world: Hittable) -> None:
        """Render the world as a plain-text PPM image written to out."""
        self._initialize()

        out.write(f"P3\n{self.img_width} {self.img_height}\n255\n")

        for y in range(self.img_height):
            print(f"Scan lines remaining: {self.img_height - y}")
            for x in range(self.img_width):
                pixel = sum(
                    (self._ray_colour(self._get_ray(x, y), world) for _ in range(self.samples_per_pixel)),
                    Colour(),
                )
                write_colour(out, pixel, self.samples_per_pixel)

        print("Done.")

    def _initialize(self) -> None:
        self.img_height = max(int(self.img_width / self.aspect_ratio), 1)

        theta = degrees_to_radians(self.field_of_view)
        h = math.tan(theta * 0.5)
        viewport_height = 2.0 * h * self.focus_distance
        # The real image ratio may differ from aspect_ratio after rounding
        viewport_width = viewport_height * (self.img_width / self.img_height)

        w = unit_vector(self.look_from - self.look_at)
        u = unit_vector(cross(self.camera_up, w))
        v = cross(w, u)

        viewport_u = viewport_width * u
        viewport_v = viewport_height * -v

        self._pixel_du = viewport_u / self.img_width
        self._pixel_dv = viewport_v / self.img_height

        top_left = self.look_from - viewport_u * 0.5 - viewport_v * 0.5 - self.focus_distance * w
        self._pixel00 = top_left + self._pixel_du * 0.5 + self._pixel_dv * 0.5

        defocus_radius = self.focus_distance * math.tan(degrees_to_radians(self.defocus_angle) * 0.5)
        self._defocus_u = defocus_radius * u
        self._defocus_v = defocus_radius * v

    def _get_ray(self, x: int, y: int) -> Ray:
        centre = self._pixel00 + x * self._pixel_du + y * self._pixel_dv
        sample = centre + self._sample_pixel()
        origin = self.look_from if self.defocus_angle <= 0.0 else self._sample_defocus_disk()
        return Ray(origin, sample - origin)

    def _ray_colour(self, ray: Ray, world: Hittable) -> Colour:
        throughput = _WHITE
        for _ in range(self.max_depth):
            hit = world.hit(ray, _HIT_RANGE)
            if hit is None:
                a = 0.5 * (unit_vector(ray.direction).y + 1.0)
                return throughput * ((1.0 - a) * _WHITE + a * _SKY)
            if hit.material is None:
                return _BLACK
            scatter = hit.material.scatter(ray, hit)
            if scatter is None:
                return _BLACK
            throughput = throughput * scatter.attenuation
            ray = scatter.scattered
        # Bounce limit exceeded: no more light is gathered
        return _BLACK

    def _sample_pixel(self) -> Vec3:
        px = -0.5 + random_double()
        py = -0.5 + random_double()
        return px * self._pixel_du + py * self._pixel_dv

    def _sample_defocus_disk(self) -> Point3:
        p = Vec3.random_in_unit_disk()
        return self.look_from + self._defocus_u * p.x + self._defocus_v * p.y