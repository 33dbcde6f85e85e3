"""Conversions between the viewport geometry and Qt value types.

The widgets paint with :class:`~PySide6.QtGui.QPainter` and receive gestures as
Qt points, so the transform is handed over as a :class:`QTransform`.  Qt uses
the same row-vector layout as :mod:`maps.geometry.matrix` (``m31``/``m32`` hold
the translation), which makes the conversion a straight element copy.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike
from PySide6.QtCore import QPointF, QRect, QRectF
from PySide6.QtGui import QTransform

from maps.geometry import matrix
from maps.geometry.point import Point
from maps.geometry.rect import Rect
from maps.screen_base import ScreenBase


def to_qtransform(m: ArrayLike) -> QTransform:
    """Return *m* as a :class:`QTransform`."""

    m = matrix.as_matrix(m)
    return QTransform(
        float(m[0, 0]), float(m[0, 1]), float(m[0, 2]),
        float(m[1, 0]), float(m[1, 1]), float(m[1, 2]),
        float(m[2, 0]), float(m[2, 1]), float(m[2, 2]),
    )


def from_qtransform(transform: QTransform) -> np.ndarray:
    return np.array(
        [
            [transform.m11(), transform.m12(), transform.m13()],
            [transform.m21(), transform.m22(), transform.m23()],
            [transform.m31(), transform.m32(), transform.m33()],
        ],
        dtype=np.float64,
    )


def point_from_qt(point: QPointF) -> Point:
    return Point(float(point.x()), float(point.y()))


def point_to_qt(point: Point) -> QPointF:
    return QPointF(point.x, point.y)


def rect_from_qt(rect: QRect | QRectF) -> Rect:
    """Convert a Qt rectangle, using ``x + width`` to avoid ``QRect.right()``'s off-by-one."""

    return Rect.from_size(float(rect.x()), float(rect.y()), float(rect.width()), float(rect.height()))


def rect_to_qt(rect: Rect) -> QRectF:
    return QRectF(rect.min_x, rect.min_y, rect.size_x(), rect.size_y())


def gtop_qtransform(screen: ScreenBase) -> QTransform:
    """Return the painter transform that draws global geometry in pixels."""

    return to_qtransform(screen.gtop_matrix)


def ptog_qtransform(screen: ScreenBase) -> QTransform:
    return to_qtransform(screen.ptog_matrix)


def apply_gesture_transform(screen: ScreenBase, transform: QTransform) -> None:
    """Feed a gesture-built global to pixel :class:`QTransform` to *screen*."""

    screen.set_gtop_matrix(from_qtransform(transform))


__all__ = [
    "apply_gesture_transform",
    "from_qtransform",
    "gtop_qtransform",
    "point_from_qt",
    "point_to_qt",
    "ptog_qtransform",
    "rect_from_qt",
    "rect_to_qt",
    "to_qtransform",
]
