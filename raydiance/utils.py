"""Numeric constants and small helpers shared by the renderer."""

from __future__ import annotations

import math
import random

INFINITY = math.inf
PI = 3.1415926535897932385

_rng = random.Random()


def degrees_to_radians(degrees: float) -> float:
    """Convert an angle from degrees to radians."""
    return degrees * PI / 180.0


def random_double(low: float = 0.0, high: float = 1.0) -> float:
    """Return a uniformly distributed float in the half-open range [low, high)."""
    return low + (high - low) * _rng.random()