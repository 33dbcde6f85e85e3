"""Two-dimensional point and vector value type."""

from __future__ import annotations

import math
from dataclasses import dataclass

from maps.config import POINT_EPSILON


@dataclass(frozen=True)
class Point:
    """A coordinate pair used for both positions and displacements."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Point:
        return Point(-self.x, -self.y)

    def __mul__(self, factor: float) -> Point:
        return Point(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __truediv__(self, factor: float) -> Point:
        return Point(self.x / factor, self.y / factor)

    def __iter__(self):
        yield self.x
        yield self.y

    # ------------------------------------------------------------------
    def norm(self) -> float:
        """Return the Euclidean length of the vector."""

        return math.hypot(self.x, self.y)

    def length(self, other: Point) -> float:
        """Return the distance between this point and *other*."""

        return math.hypot(other.x - self.x, other.y - self.y)

    def rotated(self, cos: float, sin: float) -> Point:
        """Rotate counter-clockwise about the origin by the given cosine/sine."""

        return Point(self.x * cos - self.y * sin, self.x * sin + self.y * cos)

    def equal_dx_dy(self, other: Point, eps: float) -> bool:
        """Return ``True`` when both axes differ by no more than *eps*."""

        return abs(self.x - other.x) <= eps and abs(self.y - other.y) <= eps

    def almost_equal(self, other: Point, eps: float = POINT_EPSILON) -> bool:
        return self.equal_dx_dy(other, eps)

    def is_almost_zero(self, eps: float = POINT_EPSILON) -> bool:
        return abs(self.x) <= eps and abs(self.y) <= eps

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y)


__all__ = ["Point"]
