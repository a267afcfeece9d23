"""RGB colours and conversion of accumulated samples to 8-bit pixels."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import IO, Iterator, Union

from raydiance.interval import Interval

_INTENSITY = Interval(0.0, 0.999)


@dataclass(frozen=True, slots=True)
class Colour:
    """A linear RGB colour."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.r
        yield self.g
        yield self.b

    def __add__(self, other: Colour) -> Colour:
        if not isinstance(other, Colour):
            return NotImplemented
        return Colour(self.r + other.r, self.g + other.g, self.b + other.b)

    def __mul__(self, other: Union[Colour, float]) -> Colour:
        if isinstance(other, Colour):
            # Hadamard product
            return Colour(self.r * other.r, self.g * other.g, self.b * other.b)
        if isinstance(other, (int, float)):
            return Colour(other * self.r, other * self.g, other * self.b)
        return NotImplemented

    def __rmul__(self, other: float) -> Colour:
        if isinstance(other, (int, float)):
            return Colour(other * self.r, other * self.g, other * self.b)
        return NotImplemented


def format_colour(pixel_colour: Colour, samples_per_pixel: int) -> str:
    """Average the samples, gamma-correct and return the pixel as 'R G B' in 0..255."""
    scale = 1.0 / samples_per_pixel
    channels = (math.sqrt(c * scale) for c in pixel_colour)
    return " ".join(str(int(256 * _INTENSITY.clamp(c))) for c in channels)


def write_colour(out: IO[str], pixel_colour: Colour, samples_per_pixel: int) -> None:
    """Write one pixel line in PPM text form to the stream."""
    out.write(format_colour(pixel_colour, samples_per_pixel) + "\n")