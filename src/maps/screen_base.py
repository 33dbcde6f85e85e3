"""Viewport transform between pixel space and the global map plane.

A :class:`ScreenBase` owns four primary parameters: the pixel rectangle of the
viewport, the scale (global units per pixel), the rotation angle and the
global origin shown in the middle of the viewport.  Everything else (the two
3x3 matrices, the oriented visible rectangle and its bounding box) is derived
from those four values and recomputed eagerly after each mutation, so readers
never observe a stale matrix.

Pixel space has ``y`` growing downwards while global space has ``y`` growing
upwards.  The pixel to global pipeline therefore reads::

    shift(-pixel_center) → flip y → scale → rotate(angle) → shift(org)

and the global to pixel matrix is its numerical inverse.
"""

from __future__ import annotations

import logging
import math
from typing import NamedTuple

import numpy as np
from numpy.typing import ArrayLike

from maps.config import (
    DEFAULT_ANGLE,
    DEFAULT_ORG,
    DEFAULT_PIXEL_RECT,
    DEFAULT_SCALE,
    PAN_ROTATE_TOLERANCE,
)
from maps.errors import DegenerateInputError
from maps.geometry import matrix
from maps.geometry.angles import Angle, angle_in_2pi, angle_to
from maps.geometry.any_rect import AnyRect
from maps.geometry.point import Point
from maps.geometry.rect import Rect

LOGGER = logging.getLogger(__name__)


class GtoPParams(NamedTuple):
    """Parameters recovered from a global to pixel similarity matrix."""

    angle: float
    scale: float
    dx: float
    dy: float


class _DerivedState(NamedTuple):
    ptog: np.ndarray
    gtop: np.ndarray
    global_rect: AnyRect
    clip_rect: Rect


def _require_pixel_rect(rect: Rect) -> Rect:
    rect = Rect(float(rect.min_x), float(rect.min_y), float(rect.max_x), float(rect.max_y))
    if not (rect.size_x() > 0.0 and rect.size_y() > 0.0) or not (
        math.isfinite(rect.size_x()) and math.isfinite(rect.size_y())
    ):
        LOGGER.warning("Rejecting degenerate pixel rect %r", rect)
        raise DegenerateInputError(
            f"Pixel rect must have a positive width and height, got {rect!r}"
        )
    return rect


def _compute_derived(pixel_rect: Rect, scale: float, angle: Angle, org: Point) -> _DerivedState:
    """Build matrices and visible rectangles for the given primary state."""

    center = pixel_rect.center()

    ptog = matrix.identity()
    ptog = matrix.shift(ptog, -center.x, -center.y)
    ptog = matrix.scale(ptog, 1.0, -1.0)
    ptog = matrix.scale(ptog, scale, scale)
    ptog = matrix.rotate(ptog, angle.cos, angle.sin)
    ptog = matrix.shift(ptog, org.x, org.y)

    gtop = matrix.inverse(ptog)

    # Half extents come straight from the matrix: how far the right and top
    # edge midpoints land from the projected centre.
    global_center = matrix.transform_point(center, ptog)
    size_x = matrix.transform_point(Point(pixel_rect.max_x, center.y), ptog).length(global_center)
    size_y = matrix.transform_point(Point(center.x, pixel_rect.min_y), ptog).length(global_center)

    global_rect = AnyRect(org, angle, Rect(-size_x, -size_y, size_x, size_y))
    return _DerivedState(ptog, gtop, global_rect, global_rect.global_rect())


class ScreenBase:
    """Maintain the pan, zoom and rotation of a single map viewport."""

    def __init__(self) -> None:
        self._pixel_rect = Rect(*DEFAULT_PIXEL_RECT)
        self._scale = DEFAULT_SCALE
        self._angle = Angle(DEFAULT_ANGLE)
        self._org = Point(*DEFAULT_ORG)
        self._ptog = matrix.identity()
        self._gtop = matrix.identity()
        self._global_rect = AnyRect(self._org, self._angle, Rect(0.0, 0.0, 0.0, 0.0))
        self._clip_rect = Rect(0.0, 0.0, 0.0, 0.0)
        self.update_dependent_parameters()

    @classmethod
    def from_rects(cls, pixel_rect: Rect, global_rect: AnyRect) -> ScreenBase:
        """Create a screen showing *global_rect* fitted inside *pixel_rect*."""

        screen = cls()
        screen.on_size(pixel_rect)
        screen.set_from_rect(global_rect)
        return screen

    def copy(self) -> ScreenBase:
        """Return an independent snapshot of this screen."""

        clone = type(self).__new__(type(self))
        clone.__dict__.update(self.__dict__)
        clone._ptog = self._ptog.copy()
        clone._gtop = self._gtop.copy()
        return clone

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(pixel_rect={self._pixel_rect!r}, scale={self._scale!r}, "
            f"angle={self._angle.val!r}, org={self._org!r})"
        )

    # ------------------------------------------------------------------
    # Derived state
    # ------------------------------------------------------------------
    def update_dependent_parameters(self) -> None:
        """Recompute matrices and visible rectangles from the primary state."""

        self._commit()

    def _commit(
        self,
        *,
        pixel_rect: Rect | None = None,
        scale: float | None = None,
        angle: Angle | None = None,
        org: Point | None = None,
    ) -> None:
        # Everything is computed before assignment so a failure leaves the
        # previous, consistent state untouched.
        pixel_rect = self._pixel_rect if pixel_rect is None else pixel_rect
        scale = self._scale if scale is None else scale
        angle = self._angle if angle is None else angle
        org = self._org if org is None else org

        if not (scale > 0.0 and math.isfinite(scale)):
            LOGGER.warning("Rejecting non-positive scale %r", scale)
            raise DegenerateInputError(f"Scale must be positive and finite, got {scale!r}")
        if not org.is_finite():
            raise DegenerateInputError(f"Origin must be finite, got {org!r}")

        derived = _compute_derived(pixel_rect, scale, angle, org)

        self._pixel_rect = pixel_rect
        self._scale = scale
        self._angle = angle
        self._org = org
        self._ptog = derived.ptog
        self._gtop = derived.gtop
        self._global_rect = derived.global_rect
        self._clip_rect = derived.clip_rect

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------
    @property
    def pixel_rect(self) -> Rect:
        return self._pixel_rect

    @property
    def global_rect(self) -> AnyRect:
        return self._global_rect

    @property
    def clip_rect(self) -> Rect:
        return self._clip_rect

    @property
    def gtop_matrix(self) -> np.ndarray:
        return self._gtop.copy()

    @property
    def ptog_matrix(self) -> np.ndarray:
        return self._ptog.copy()

    def get_scale(self) -> float:
        return self._scale

    def get_angle(self) -> float:
        return self._angle.val

    def get_org(self) -> Point:
        return self._org

    def get_width(self) -> int:
        return int(math.floor(self._pixel_rect.size_x() + 0.5))

    def get_height(self) -> int:
        return int(math.floor(self._pixel_rect.size_y() + 0.5))

    def get_min_pixel_rect_size(self) -> float:
        return min(self._pixel_rect.size_x(), self._pixel_rect.size_y())

    # ------------------------------------------------------------------
    # Fitting
    # ------------------------------------------------------------------
    def set_from_rects(self, global_rect: AnyRect, pixel_rect: Rect) -> None:
        """Show *global_rect* entirely inside *pixel_rect* without stretching.

        The larger of the horizontal and vertical ratios wins, so the content
        may be letterboxed along one axis but is never cropped.
        """

        pixel_rect = _require_pixel_rect(pixel_rect)
        local = global_rect.local_rect
        h_scale = local.size_x() / pixel_rect.size_x()
        v_scale = local.size_y() / pixel_rect.size_y()
        scale = max(h_scale, v_scale)
        if scale <= 0.0:
            LOGGER.warning("Rejecting zero-size global rect %r", global_rect)
            raise DegenerateInputError(f"Global rect has no extent: {global_rect!r}")

        LOGGER.debug(
            "Fitting global rect %r into %r (scale %.6g)", global_rect, pixel_rect, scale
        )
        self._commit(scale=scale, angle=global_rect.angle, org=global_rect.global_center())

    def set_from_rect(self, global_rect: AnyRect) -> None:
        """Fit *global_rect* into the current pixel rectangle."""

        self.set_from_rects(global_rect, self._pixel_rect)

    # ------------------------------------------------------------------
    # Incremental mutators
    # ------------------------------------------------------------------
    def set_org(self, point: Point) -> None:
        self._commit(org=point)

    def move(self, dx: float, dy: float) -> None:
        """Pan so the content follows a pixel-space drag of ``(dx, dy)``."""

        self._commit(org=self.ptog(self.gtop(self._org) - Point(dx, dy)))

    def move_g(self, point: Point) -> None:
        """Pan by a displacement expressed in global units."""

        self._commit(org=self._org - point)

    def scale(self, factor: float) -> None:
        """Zoom by *factor*; values above one zoom in."""

        if not (factor > 0.0 and math.isfinite(factor)):
            LOGGER.warning("Rejecting zoom factor %r", factor)
            raise DegenerateInputError(f"Zoom factor must be positive and finite, got {factor!r}")
        self._commit(scale=self._scale / factor)

    def rotate(self, angle: float) -> None:
        """Rotate the view by *angle* radians relative to its current angle."""

        self._commit(angle=self._angle + angle)

    def set_angle(self, angle: float) -> None:
        self._commit(angle=Angle(angle))

    def on_size(self, rect: Rect) -> None:
        """Adopt a new pixel rectangle, keeping scale, angle and origin."""

        rect = _require_pixel_rect(rect)
        LOGGER.debug("Viewport resized to %r", rect)
        self._commit(pixel_rect=rect)

    def on_size_xywh(self, x0: int, y0: int, width: int, height: int) -> None:
        self.on_size(Rect(x0, y0, x0 + width, y0 + height))

    # ------------------------------------------------------------------
    # Point and rectangle queries
    # ------------------------------------------------------------------
    def gtop(self, point: Point) -> Point:
        """Map a global point to pixel coordinates."""

        return matrix.transform_point(point, self._gtop)

    def ptog(self, point: Point) -> Point:
        """Map a pixel point to global coordinates."""

        return matrix.transform_point(point, self._ptog)

    def gtop_rect(self, rect: Rect) -> Rect:
        """Map the ``left_top``/``right_bottom`` corner pair of *rect* to pixels.

        Only the two diagonal corners are transformed, which is exact for an
        unrotated screen.  Use :attr:`global_rect` style oriented rectangles
        when the rotation matters.
        """

        return Rect.from_points(self.gtop(rect.left_top()), self.gtop(rect.right_bottom()))

    def ptog_rect(self, rect: Rect) -> Rect:
        return Rect.from_points(self.ptog(rect.left_top()), self.ptog(rect.right_bottom()))

    def get_touch_rect(self, pix_point: Point, pix_radius: float) -> AnyRect:
        """Return the global square covering a touch of *pix_radius* pixels."""

        radius = pix_radius * self._scale
        return AnyRect(self.ptog(pix_point), self._angle, Rect(-radius, -radius, radius, radius))

    # ------------------------------------------------------------------
    # Matrix-first construction
    # ------------------------------------------------------------------
    @staticmethod
    def calc_transform(old_pt1: Point, old_pt2: Point, new_pt1: Point, new_pt2: Point) -> np.ndarray:
        """Return the similarity mapping ``old_pt1 → new_pt1`` and ``old_pt2 → new_pt2``.

        This is what a two-finger gesture produces: the uniform scale is the
        ratio of the segment lengths and the rotation is the difference of
        their polar angles.

        Raises:
            DegenerateInputError: when either pair of points coincides.
        """

        old_length = old_pt1.length(old_pt2)
        new_length = new_pt1.length(new_pt2)
        if old_length == 0.0 or not math.isfinite(old_length):
            raise DegenerateInputError(
                f"Reference points must be distinct, got {old_pt1!r} twice"
            )
        if new_length == 0.0 or not math.isfinite(new_length):
            raise DegenerateInputError(
                f"Target points must be distinct, got {new_pt1!r} twice"
            )

        s = new_length / old_length
        a = angle_to(new_pt1, new_pt2) - angle_to(old_pt1, old_pt2)

        m = matrix.identity()
        m = matrix.shift(m, -old_pt1.x, -old_pt1.y)
        m = matrix.rotate_angle(m, a)
        m = matrix.scale(m, s, s)
        m = matrix.shift(m, new_pt1.x, new_pt1.y)
        return m

    def set_gtop_matrix(self, m: ArrayLike) -> None:
        """Adopt an externally built global to pixel matrix.

        The matrix must be a similarity transform.  Angle and scale are read
        back from it, the origin becomes whatever global point the matrix
        puts in the middle of the pixel rectangle, and the derived state is
        then rebuilt from those parameters.
        """

        m = matrix.as_matrix(m)
        params = self.extract_gtop_params(m)
        ptog = matrix.inverse(m)
        org = matrix.transform_point(self._pixel_rect.center(), ptog)
        LOGGER.debug(
            "Adopting global to pixel matrix: angle %.6g, scale %.6g, origin %r",
            params.angle,
            params.scale,
            org,
        )

        self._commit(scale=1.0 / params.scale, angle=Angle(-params.angle), org=org)

    @staticmethod
    def extract_gtop_params(m: ArrayLike) -> GtoPParams:
        """Decompose a similarity matrix into angle, scale and translation.

        ``angle`` is normalised into ``[0, 2π)``.

        Raises:
            NotSimilarityError: when *m* contains shear, uneven scale or a
                projective component.
        """

        m = matrix.as_matrix(m)
        matrix.check_similarity(m)
        s = math.hypot(m[0, 0], m[0, 1])
        a = angle_in_2pi(math.atan2(-m[0, 1], m[0, 0]))
        return GtoPParams(angle=a, scale=s, dx=float(m[2, 0]), dy=float(m[2, 1]))


def is_panning_and_rotate(s1: ScreenBase, s2: ScreenBase) -> bool:
    """Return ``True`` when going from *s1* to *s2* involves no zoom.

    A reference offset, taken from the corner-to-centre vector of the first
    screen's visible rectangle, is laid out along each screen's own axes and
    projected to pixels.  Equal pixel displacements mean equal scale, whatever
    the pan and rotation are.
    """

    r1 = s1.global_rect.local_rect
    r2 = s2.global_rect.local_rect
    c1 = r1.center()
    c2 = r2.center()

    offset = Point(c1.x - r1.min_x, c1.y - r1.min_y)

    p1 = s1.gtop(s1.global_rect.convert_from(c1)) - s1.gtop(s1.global_rect.convert_from(c1 + offset))
    p2 = s2.gtop(s2.global_rect.convert_from(c2)) - s2.gtop(s2.global_rect.convert_from(c2 + offset))

    return p1.equal_dx_dy(p2, PAN_ROTATE_TOLERANCE)


__all__ = ["GtoPParams", "ScreenBase", "is_panning_and_rotate"]
