"""Axis-aligned rectangle value type."""

from __future__ import annotations

from dataclasses import dataclass

from maps.config import POINT_EPSILON

from .point import Point


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle stored as its min/max bounds.

    The naming follows pixel space, where ``y`` grows downwards: the *top*
    edge is ``min_y`` and the *bottom* edge is ``max_y``.
    """

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    def __post_init__(self) -> None:
        # Normalise so that callers may pass corners in any order.
        if self.min_x > self.max_x:
            lo, hi = self.max_x, self.min_x
            object.__setattr__(self, "min_x", lo)
            object.__setattr__(self, "max_x", hi)
        if self.min_y > self.max_y:
            lo, hi = self.max_y, self.min_y
            object.__setattr__(self, "min_y", lo)
            object.__setattr__(self, "max_y", hi)

    # ------------------------------------------------------------------
    @classmethod
    def from_points(cls, p1: Point, p2: Point) -> Rect:
        """Build the rectangle spanned by two opposite corners."""

        return cls(p1.x, p1.y, p2.x, p2.y)

    @classmethod
    def from_size(cls, x0: float, y0: float, width: float, height: float) -> Rect:
        """Build a rectangle from its origin corner and size."""

        return cls(x0, y0, x0 + width, y0 + height)

    # ------------------------------------------------------------------
    def size_x(self) -> float:
        return self.max_x - self.min_x

    def size_y(self) -> float:
        return self.max_y - self.min_y

    def center(self) -> Point:
        return Point((self.min_x + self.max_x) * 0.5, (self.min_y + self.max_y) * 0.5)

    def left_top(self) -> Point:
        return Point(self.min_x, self.min_y)

    def right_top(self) -> Point:
        return Point(self.max_x, self.min_y)

    def right_bottom(self) -> Point:
        return Point(self.max_x, self.max_y)

    def left_bottom(self) -> Point:
        return Point(self.min_x, self.max_y)

    def corners(self) -> tuple[Point, Point, Point, Point]:
        """Return the corners in ``left_top``, clockwise order."""

        return (self.left_top(), self.right_top(), self.right_bottom(), self.left_bottom())

    def is_empty(self) -> bool:
        """Return ``True`` when either side has zero length."""

        return self.size_x() <= 0.0 or self.size_y() <= 0.0

    def contains_point(self, point: Point, eps: float = POINT_EPSILON) -> bool:
        return (
            self.min_x - eps <= point.x <= self.max_x + eps
            and self.min_y - eps <= point.y <= self.max_y + eps
        )

    def add(self, point: Point) -> Rect:
        """Return the smallest rectangle containing this one and *point*."""

        return Rect(
            min(self.min_x, point.x),
            min(self.min_y, point.y),
            max(self.max_x, point.x),
            max(self.max_y, point.y),
        )

    def almost_equal(self, other: Rect, eps: float = POINT_EPSILON) -> bool:
        return (
            abs(self.min_x - other.min_x) <= eps
            and abs(self.min_y - other.min_y) <= eps
            and abs(self.max_x - other.max_x) <= eps
            and abs(self.max_y - other.max_y) <= eps
        )

    @classmethod
    def bounding(cls, points) -> Rect:
        """Return the bounding box of a non-empty iterable of points."""

        iterator = iter(points)
        try:
            first = next(iterator)
        except StopIteration:
            raise ValueError("Cannot bound an empty point sequence") from None
        rect = cls(first.x, first.y, first.x, first.y)
        for point in iterator:
            rect = rect.add(point)
        return rect


__all__ = ["Rect"]
