"""Angle value type and polar-angle helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from maps.errors import DegenerateInputError

from .point import Point

TWO_PI = 2.0 * math.pi


def angle_in_2pi(radians: float) -> float:
    """Normalise *radians* into the half-open range ``[0, 2π)``."""

    result = math.fmod(radians, TWO_PI)
    if result < 0.0:
        result += TWO_PI
    # ``fmod`` of a tiny negative value can round up to exactly 2π.
    if result >= TWO_PI:
        result = 0.0
    return result


def angle_to(p1: Point, p2: Point) -> float:
    """Return the polar angle of the segment ``p1 → p2``."""

    return math.atan2(p2.y - p1.y, p2.x - p1.x)


@dataclass(frozen=True)
class Angle:
    """Rotation angle that caches its cosine and sine.

    The raw value is kept in ``(-π, π]`` so that repeated ``+`` operations
    never accumulate an unbounded number of turns.
    """

    val: float = 0.0
    cos: float = field(init=False, repr=False, compare=False)
    sin: float = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not math.isfinite(self.val):
            raise DegenerateInputError(f"Angle must be finite, got {self.val!r}")
        wrapped = math.atan2(math.sin(self.val), math.cos(self.val)) if self.val else 0.0
        object.__setattr__(self, "val", wrapped)
        object.__setattr__(self, "cos", math.cos(wrapped))
        object.__setattr__(self, "sin", math.sin(wrapped))

    def __add__(self, radians: float) -> Angle:
        return Angle(self.val + float(radians))

    def __neg__(self) -> Angle:
        return Angle(-self.val)

    def in_2pi(self) -> float:
        """Return the angle normalised into ``[0, 2π)``."""

        return angle_in_2pi(self.val)

    def degrees(self) -> float:
        return math.degrees(self.val)


__all__ = ["Angle", "TWO_PI", "angle_in_2pi", "angle_to"]
