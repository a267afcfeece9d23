"""Closed and open ranges of real numbers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from raydiance.utils import INFINITY


@dataclass(frozen=True, slots=True)
class Interval:
    """A range [min, max]; the default interval is empty."""

    min: float = INFINITY
    max: float = -INFINITY

    EMPTY: ClassVar[Interval]
    UNIVERSE: ClassVar[Interval]

    def contains(self, x: float) -> bool:
        """True if min <= x <= max."""
        return self.min <= x <= self.max

    def surrounds(self, x: float) -> bool:
        """True if min < x < max."""
        return self.min < x < self.max

    def clamp(self, x: float) -> float:
        """Limit x to the interval."""
        if x < self.min:
            return self.min
        if x > self.max:
            return self.max
        return x


Interval.EMPTY = Interval()
Interval.UNIVERSE = Interval(-INFINITY, INFINITY)