[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "raydiance"
version = "1.0.0"
description = "A software path tracer that renders JSON sphere scenes to plain-text PPM images."
requires-python = ">=3.10"
dependencies = []
keywords = ["path tracing", "ray tracing", "rendering", "ppm", "graphics"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
raydiance = "raydiance.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["raydiance"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
