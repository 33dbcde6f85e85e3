import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

# Make ``maps`` importable without installing the project.
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from maps.geometry.rect import Rect  # noqa: E402
from maps.screen_base import ScreenBase  # noqa: E402


@pytest.fixture
def screen():
    """Return a default 640x480 screen centred on global ``(320, 240)``."""
    return ScreenBase()


@pytest.fixture
def rotated_screen():
    """Return a wide screen that is zoomed, rotated and panned away from the defaults."""
    s = ScreenBase()
    s.on_size(Rect(0, 0, 1024, 600))
    s.scale(4.0)
    s.rotate(0.6)
    s.move(37.0, -12.5)
    return s
