"""Custom exception hierarchy for the map engine."""

from __future__ import annotations


class MapsError(Exception):
    """Base class for all custom errors raised by the map engine."""


class GeometryError(MapsError):
    """Base class for failures in the viewport geometry."""


class DegenerateInputError(GeometryError, ValueError):
    """Raised when an input collapses to zero size or zero length."""


class SingularMatrixError(GeometryError):
    """Raised when a transform matrix cannot be inverted."""


class NotSimilarityError(GeometryError, ValueError):
    """Raised when a matrix is not a rotation, uniform scale and translation."""


__all__ = [
    "DegenerateInputError",
    "GeometryError",
    "MapsError",
    "NotSimilarityError",
    "SingularMatrixError",
]
