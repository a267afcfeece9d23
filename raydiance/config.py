"""Configure a camera and a scene from a parsed JSON scene description."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable

from raydiance.camera import Camera
from raydiance.colour import Colour
from raydiance.material import Dielectric, Lambertian, Material, Metal
from raydiance.scene import Scene
from raydiance.sphere import Sphere
from raydiance.vec3 import Vec3

_SCALARS: tuple[tuple[str, str, Callable[[float], Any]], ...] = (
    ("aspectRatio", "aspect_ratio", float),
    ("imgWidth", "img_width", int),
    ("samplesPerPixel", "samples_per_pixel", int),
    ("maxDepth", "max_depth", int),
    ("fieldOfView", "field_of_view", float),
)
_VECTORS: tuple[tuple[str, str], ...] = (
    ("lookFrom", "look_from"),
    ("lookAt", "look_at"),
    ("cameraUp", "camera_up"),
)
_TRAILING_SCALARS: tuple[tuple[str, str, Callable[[float], Any]], ...] = (
    ("defocusAngle", "defocus_angle", float),
    ("focusDistance", "focus_distance", float),
)


class ConfigError(ValueError):
    """The scene description is missing a value or holds one of the wrong kind."""


def _require_mapping(obj: Any, where: str) -> Mapping:
    if not isinstance(obj, Mapping):
        raise ConfigError(f"{where} must be an object")
    return obj


def _get(obj: Any, key: str, where: str) -> Any:
    mapping = _require_mapping(obj, where)
    if key not in mapping:
        raise ConfigError(f"missing '{key}' in {where}")
    return mapping[key]


def _number(value: Any, kind: Callable[[float], Any], where: str) -> Any:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigError(f"{where} must be a number")
    return kind(value)


def _field(obj: Any, key: str, where: str, kind: Callable[[float], Any] = float) -> Any:
    return _number(_get(obj, key, where), kind, f"{where}.{key}")


def _vector(obj: Any, where: str) -> Vec3:
    return Vec3(*(_field(obj, axis, where) for axis in ("x", "y", "z")))


def _colour(obj: Any, where: str) -> Colour:
    return Colour(*(_field(obj, channel, where) for channel in ("r", "g", "b")))


def set_camera(data: Mapping, cam: Camera) -> None:
    """Copy every camera setting present in data onto cam; absent ones keep their values."""
    _require_mapping(data, "scene config")

    def apply_scalars(table: tuple[tuple[str, str, Callable[[float], Any]], ...]) -> None:
        for key, attr, kind in table:
            if key in data:
                setattr(cam, attr, _number(data[key], kind, key))

    apply_scalars(_SCALARS)
    for key, attr in _VECTORS:
        if key in data:
            setattr(cam, attr, _vector(data[key], key))
    apply_scalars(_TRAILING_SCALARS)


def _material(spec: Any, where: str) -> Material:
    kind = _get(spec, "type", where)
    if kind == "lambertian":
        return Lambertian(_colour(_get(spec, "colour", where), f"{where}.colour"))
    if kind == "metal":
        albedo = _colour(_get(spec, "colour", where), f"{where}.colour")
        return Metal(albedo, _field(spec, "fuzz", where))
    if kind == "dielectric":
        return Dielectric(_field(spec, "refIdx", where))
    raise ConfigError(f"unknown material type {kind!r} in {where}")


def add_objects(data: Mapping, world: Scene) -> None:
    """Add every sphere listed under 'spheres' in data to world."""
    _require_mapping(data, "scene config")
    if "spheres" not in data:
        return
    spheres = data["spheres"]
    if not isinstance(spheres, list):
        raise ConfigError("spheres must be a list")

    for index, spec in enumerate(spheres):
        where = f"spheres[{index}]"
        centre = _vector(_get(spec, "centre", where), f"{where}.centre")
        radius = _field(spec, "radius", where)
        material = _material(_get(spec, "material", where), f"{where}.material")
        world.add(Sphere(centre, radius, material))