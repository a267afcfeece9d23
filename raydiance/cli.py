"""Command-line entry point: render a JSON scene description to a PPM image."""

from __future__ import annotations

import getopt
import json
import sys
from contextlib import ExitStack
from typing import Optional, Sequence, TextIO

from raydiance.camera import Camera
from raydiance.config import ConfigError, add_objects, set_camera
from raydiance.files import open_out_stream
from raydiance.scene import Scene

USAGE = "Usage: raydiance -s <scene config file path> [-o <output image name>]"


def _error(message: str) -> int:
    print(message, file=sys.stderr)
    return 1


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the renderer; returns the process exit status."""
    args = sys.argv[1:] if argv is None else list(argv)

    try:
        opts, _ = getopt.getopt(args, "s:o:")
    except getopt.GetoptError:
        return _error(f"Invalid option.\n\n{USAGE}")

    scene_path = ""
    out_name = "img"
    for opt, value in opts:
        if opt == "-s":
            scene_path = value
        elif opt == "-o":
            out_name = value

    if not scene_path:
        return _error(f"Scene config file is required.\n\n{USAGE}")

    with ExitStack() as stack:
        scene_file: Optional[TextIO]
        img_out: Optional[TextIO]
        try:
            scene_file = stack.enter_context(open(scene_path, encoding="utf-8"))
        except OSError:
            scene_file = None
        try:
            img_out = stack.enter_context(open_out_stream(out_name))
        except OSError:
            img_out = None

        if scene_file is None:
            return _error("Failed to open scene config file.")
        if img_out is None:
            return _error("Failed to open file for writing.")

        try:
            scene_config = json.load(scene_file)
            world = Scene()
            add_objects(scene_config, world)
            cam = Camera()
            set_camera(scene_config, cam)
        except json.JSONDecodeError as exc:
            return _error(f"Failed to parse scene config file: {exc}")
        except ConfigError as exc:
            return _error(f"Invalid scene config: {exc}")

        cam.render(img_out, world)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())