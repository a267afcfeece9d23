# raydiance

A small software path tracer. It reads a JSON scene description that lists
spheres, their materials and camera settings. It renders the scene with Monte
Carlo sampling and writes the result as a plain-text PPM (P3) image.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Usage

```
raydiance -s scene.json [-o name]
```

- `-s` gives the path to the scene file. It is required.
- `-o` sets the output name. The default is `img`. The image is written into a
  directory of that name, which is created if it does not exist. The file is
  named `<name>-<DD-MM-YYYY-HH-MM-SS>.ppm`, using local time. If the time
  cannot be read, `unknown` takes its place.

While it renders, the command prints `Scan lines remaining: N` for each row,
then `Done.`.

The exit status is 0 on success and 1 on failure. A failure is an unknown
option, a missing `-s`, a scene file or output file that cannot be opened, a
scene file that is not valid JSON, or a scene description that
`raydiance.config` rejects. Each of these prints a message on standard error.

## Scene files

Every top-level key is optional. Any camera key that is missing keeps the
default shown in the comments below.

```json
{
  "aspectRatio": 1.7777777777777777,
  "imgWidth": 400,
  "samplesPerPixel": 10,
  "maxDepth": 10,
  "fieldOfView": 45.0,
  "lookFrom": {"x": 0.0, "y": 0.0, "z": 0.0},
  "lookAt": {"x": 0.0, "y": 0.0, "z": -1.0},
  "cameraUp": {"x": 0.0, "y": 1.0, "z": 0.0},
  "defocusAngle": 0.0,
  "focusDistance": 1.0,
  "spheres": [
    {
      "centre": {"x": 0.0, "y": -100.5, "z": -1.0},
      "radius": 100.0,
      "material": {"type": "lambertian", "colour": {"r": 0.8, "g": 0.8, "b": 0.0}}
    },
    {
      "centre": {"x": -1.0, "y": 0.0, "z": -1.0},
      "radius": 0.5,
      "material": {"type": "dielectric", "refIdx": 1.5}
    },
    {
      "centre": {"x": 1.0, "y": 0.0, "z": -1.0},
      "radius": 0.5,
      "material": {"type": "metal", "colour": {"r": 0.8, "g": 0.6, "b": 0.2}, "fuzz": 0.1}
    }
  ]
}
```

These are the camera defaults:

| key | default |
| --- | --- |
| `aspectRatio` | 16/9 |
| `imgWidth` | 400 |
| `samplesPerPixel` | 10 |
| `maxDepth` | 10 |
| `fieldOfView` | 45 (vertical, in degrees) |
| `lookFrom` | (0, 0, 0) |
| `lookAt` | (0, 0, 1) |
| `cameraUp` | (0, 1, 0) |
| `defocusAngle` | 0 (no depth-of-field blur) |
| `focusDistance` | 1 |

The image height is `imgWidth / aspectRatio`, rounded down, and is at least 1.
Rays that find nothing show a white-to-blue sky gradient.

Each sphere needs `centre`, `radius` and `material`. The material types are:

- `lambertian`: a matte surface with an albedo `colour`.
- `metal`: a reflective surface with an albedo `colour` and a `fuzz` value.
  A fuzz of 1 or more is capped at 1.
- `dielectric`: a clear material such as glass or water, given by its
  refractive index `refIdx`.

Values must be JSON numbers. Booleans are not accepted. An object that is
missing a required field, a value of the wrong kind, or an unknown material
type raises `raydiance.config.ConfigError`.

## Library use

The renderer can also be used from Python. `Camera.render` writes the PPM
image to the stream it is given. It prints its progress lines to standard
output, so give it a file rather than `sys.stdout`.

```python
from raydiance.camera import Camera
from raydiance.colour import Colour
from raydiance.material import Dielectric, Lambertian, Metal
from raydiance.scene import Scene
from raydiance.sphere import Sphere
from raydiance.vec3 import Vec3

world = Scene()
world.add(Sphere(Vec3(0.0, -100.5, -1.0), 100.0, Lambertian(Colour(0.8, 0.8, 0.0))))
world.add(Sphere(Vec3(0.0, 0.0, -1.0), 0.5, Metal(Colour(0.8, 0.6, 0.2), 0.1)))
world.add(Sphere(Vec3(-1.0, 0.0, -1.0), 0.5, Dielectric(1.5)))

cam = Camera(img_width=200, samples_per_pixel=20, look_at=Vec3(0.0, 0.0, -1.0))
with open("out.ppm", "w", encoding="ascii") as out:
    cam.render(out, world)
```

These are the modules:

- `raydiance.vec3`: `Vec3` (also named `Point3`), and `dot`, `cross`,
  `unit_vector`, `reflect`, `refract` and `random_unit_vector`.
- `raydiance.colour`: `Colour`, and `format_colour` and `write_colour`, which
  turn summed samples into a gamma-corrected 8-bit `R G B` line.
- `raydiance.interval`: `Interval`, with `contains`, `surrounds` and `clamp`,
  and the constants `Interval.EMPTY` and `Interval.UNIVERSE`.
- `raydiance.ray`: `Ray`, with `at(t)`.
- `raydiance.hittable`: the `Hittable` interface and the `Intersection`
  record. `hit(ray, t_range)` returns the nearest `Intersection` or `None`.
- `raydiance.material`: `Lambertian`, `Metal` and `Dielectric`. Each has a
  `scatter` method that returns a `Scatter` (attenuation and scattered ray),
  or `None` when the ray is absorbed.
- `raydiance.sphere` and `raydiance.scene`: `Sphere`, and `Scene`, which has
  `add` and `clear` and hits wherever its nearest member is hit.
- `raydiance.camera`: `Camera`.
- `raydiance.config`: `set_camera(data, cam)` and `add_objects(data, world)`,
  which apply a parsed JSON scene to a `Camera` and a `Scene`.
- `raydiance.files`: `get_timestamp()` and `open_out_stream(name)`.
- `raydiance.cli`: `main(argv=None)`, the `raydiance` command.

## Limitations

- Spheres are the only shape.
- The only output format is plain-text PPM.
- Rendering runs in a single thread. The package does not display or preview
  images.