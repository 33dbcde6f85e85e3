"""3x3 homogeneous matrix helpers built on :mod:`numpy`.

Matrices use the row-vector convention: a point transforms as
``[x, y, 1] @ m`` and the translation lives in the last row.  Every builder
returns ``m @ step`` so that the new step is applied *after* the transform
already described by ``m``, which lets pipelines read top to bottom.
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import ArrayLike

from maps.config import SIMILARITY_TOLERANCE
from maps.errors import NotSimilarityError, SingularMatrixError

from .point import Point


def identity() -> np.ndarray:
    return np.identity(3, dtype=np.float64)


def as_matrix(m: ArrayLike) -> np.ndarray:
    """Return *m* as a fresh ``float64`` 3x3 array."""

    matrix = np.array(m, dtype=np.float64)
    if matrix.shape != (3, 3):
        raise ValueError(f"Expected a 3x3 matrix, got shape {matrix.shape}")
    return matrix


def shift(m: np.ndarray, dx: float, dy: float) -> np.ndarray:
    step = np.array(
        [
            [1.0, 0.0, 0.0],
            [0.0, 1.0, 0.0],
            [dx, dy, 1.0],
        ],
        dtype=np.float64,
    )
    return m @ step


def scale(m: np.ndarray, sx: float, sy: float) -> np.ndarray:
    step = np.array(
        [
            [sx, 0.0, 0.0],
            [0.0, sy, 0.0],
            [0.0, 0.0, 1.0],
        ],
        dtype=np.float64,
    )
    return m @ step


def rotate(m: np.ndarray, cos: float, sin: float) -> np.ndarray:
    """Append a counter-clockwise rotation given by its cosine and sine."""

    step = np.array(
        [
            [cos, sin, 0.0],
            [-sin, cos, 0.0],
            [0.0, 0.0, 1.0],
        ],
        dtype=np.float64,
    )
    return m @ step


def rotate_angle(m: np.ndarray, radians: float) -> np.ndarray:
    return rotate(m, math.cos(radians), math.sin(radians))


def inverse(m: np.ndarray) -> np.ndarray:
    """Invert *m*, raising :class:`SingularMatrixError` when impossible."""

    matrix = np.asarray(m, dtype=np.float64)
    if not np.all(np.isfinite(matrix)):
        raise SingularMatrixError("Matrix contains non-finite values")
    try:
        result = np.linalg.inv(matrix)
    except np.linalg.LinAlgError as exc:
        raise SingularMatrixError("Matrix is singular and cannot be inverted") from exc
    # Near-singular inputs can slip past LAPACK and overflow instead.
    if not np.all(np.isfinite(result)):
        raise SingularMatrixError("Matrix is too close to singular to invert")
    return result


def transform_point(point: Point, m: np.ndarray) -> Point:
    x = point.x * m[0, 0] + point.y * m[1, 0] + m[2, 0]
    y = point.x * m[0, 1] + point.y * m[1, 1] + m[2, 1]
    return Point(float(x), float(y))


def check_similarity(m: np.ndarray, tolerance: float = SIMILARITY_TOLERANCE) -> None:
    """Raise :class:`NotSimilarityError` unless *m* is rotation·scale·shift.

    Both orientation-preserving matrices and those including a single axis
    reflection (such as the Y flip between pixel and global space) pass.
    """

    if not np.all(np.isfinite(m)):
        raise NotSimilarityError("Matrix contains non-finite values")
    if abs(m[0, 2]) > tolerance or abs(m[1, 2]) > tolerance or abs(m[2, 2] - 1.0) > tolerance:
        raise NotSimilarityError("Matrix has a projective component")

    row0 = m[0, :2]
    row1 = m[1, :2]
    norm0 = float(np.hypot(*row0))
    norm1 = float(np.hypot(*row1))
    if norm0 == 0.0 or norm1 == 0.0:
        raise NotSimilarityError("Matrix collapses an axis to zero length")

    limit = tolerance * max(norm0, norm1)
    if abs(norm0 - norm1) > limit:
        raise NotSimilarityError(
            f"Matrix scales the axes unevenly ({norm0:.6g} vs {norm1:.6g})"
        )
    if abs(float(np.dot(row0, row1))) > limit * max(norm0, norm1):
        raise NotSimilarityError("Matrix axes are not orthogonal (shear)")


__all__ = [
    "as_matrix",
    "check_similarity",
    "identity",
    "inverse",
    "rotate",
    "rotate_angle",
    "scale",
    "shift",
    "transform_point",
]
