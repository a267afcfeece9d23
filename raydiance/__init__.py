"""A software path tracer that renders JSON sphere scenes to plain-text PPM images."""

__version__ = "1.0.0"