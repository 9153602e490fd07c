"""
Pytest fixtures for harmonic playground tests.
"""
import pytest
import sys
from pathlib import Path

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from harmonic_bank import HarmonicBank
from renderer import DrawingSurface
from scheduler import FrameScheduler


class RecordingSurface(DrawingSurface):
    """Records draw calls instead of painting pixels."""

    def __init__(self):
        self.calls = []

    def clear(self):
        self.calls.clear()
        self.calls.append(("clear",))

    def draw_dashed_line(self, p1, p2):
        self.calls.append(("dashed", p1, p2))

    def draw_polyline(self, points, color, width, glow=False):
        self.calls.append(("polyline", points, color, width, glow))

    def of_kind(self, kind):
        return [c for c in self.calls if c[0] == kind]


@pytest.fixture
def bank():
    """Default 12-harmonic bank."""
    return HarmonicBank(12)


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture
def scheduler():
    """Scheduler wired to recording surfaces with a 100x80 viewport."""
    sched = FrameScheduler(RecordingSurface(), RecordingSurface())
    sched.resize(100, 80, 1.0)
    return sched
