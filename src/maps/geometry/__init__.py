"""Value types shared by the viewport transform.

The package keeps the primitives small: points, angles, axis-aligned and
oriented rectangles, plus the numpy matrix builders used to compose them.
"""

from . import matrix
from .angles import TWO_PI, Angle, angle_in_2pi, angle_to
from .any_rect import AnyRect
from .point import Point
from .rect import Rect

__all__ = [
    "TWO_PI",
    "Angle",
    "AnyRect",
    "Point",
    "Rect",
    "angle_in_2pi",
    "angle_to",
    "matrix",
]
