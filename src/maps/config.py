"""Default configuration values for the map viewport."""

from __future__ import annotations

from typing import Final

# The viewport a freshly created screen describes before the widget reports
# its real size.  The origin is the centre of that rectangle so the identity
# layout holds: global ``(320, 240)`` sits in the middle of the pixels.
DEFAULT_PIXEL_RECT: Final[tuple[float, float, float, float]] = (0.0, 0.0, 640.0, 480.0)
DEFAULT_SCALE: Final[float] = 0.1
DEFAULT_ANGLE: Final[float] = 0.0
DEFAULT_ORG: Final[tuple[float, float]] = (320.0, 240.0)

# Absolute per-axis tolerance used when comparing the pixel displacement of
# two screens in ``is_panning_and_rotate``.
PAN_ROTATE_TOLERANCE: Final[float] = 1e-5

# Relative tolerance when checking that a 3x3 matrix is a similarity.
SIMILARITY_TOLERANCE: Final[float] = 1e-6

# Default epsilon for approximate point and rectangle equality.
POINT_EPSILON: Final[float] = 1e-9
