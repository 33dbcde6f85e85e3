"""Viewport geometry for the map renderer.

The high-level entry point is :class:`ScreenBase`, which maps between the
widget's pixels and the global map plane.  Qt conversions live in
:mod:`maps.qt_adapter` so the core stays importable without a GUI stack.
"""

from .errors import (
    DegenerateInputError,
    GeometryError,
    MapsError,
    NotSimilarityError,
    SingularMatrixError,
)
from .geometry import Angle, AnyRect, Point, Rect
from .screen_base import GtoPParams, ScreenBase, is_panning_and_rotate

__all__ = [
    "Angle",
    "AnyRect",
    "DegenerateInputError",
    "GeometryError",
    "GtoPParams",
    "MapsError",
    "NotSimilarityError",
    "Point",
    "Rect",
    "ScreenBase",
    "SingularMatrixError",
    "is_panning_and_rotate",
]
