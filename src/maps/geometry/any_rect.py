"""Oriented rectangle: a local rectangle rotated about a global centre."""

from __future__ import annotations

from dataclasses import dataclass

from .angles import Angle
from .point import Point
from .rect import Rect


@dataclass(frozen=True)
class AnyRect:
    """Rectangle with its own orientation in global space.

    ``local_rect`` is expressed in the rectangle's own axes, which are rotated
    by ``angle`` and centred on ``center``.  A viewport's visible area is an
    ``AnyRect`` whose local rect is symmetric about the origin.
    """

    center: Point
    angle: Angle
    local_rect: Rect

    def global_center(self) -> Point:
        return self.center

    def convert_from(self, local: Point) -> Point:
        """Map a point from the rectangle's local axes into global space."""

        return self.center + local.rotated(self.angle.cos, self.angle.sin)

    def convert_to(self, point: Point) -> Point:
        """Map a global point into the rectangle's local axes."""

        return (point - self.center).rotated(self.angle.cos, -self.angle.sin)

    def global_corners(self) -> tuple[Point, Point, Point, Point]:
        return tuple(self.convert_from(corner) for corner in self.local_rect.corners())  # type: ignore[return-value]

    def global_rect(self) -> Rect:
        """Return the axis-aligned bounding box of the rotated rectangle."""

        return Rect.bounding(self.global_corners())

    def is_point_inside(self, point: Point) -> bool:
        return self.local_rect.contains_point(self.convert_to(point))


__all__ = ["AnyRect"]
