"""
conftest.py
-----------
Shared pytest configuration and fixtures for Cactus Run tests.

Contains:
- Headless SDL setup so pygame never opens a window
- Common fixtures (draw manager, scheduler, clock, config)
- Pytest markers
"""

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import copy

import pytest
from unittest.mock import MagicMock

from cactus_run.core.runtime.frame_scheduler import FrameScheduler
from cactus_run.core.runtime.game_settings import DEFAULT_GAME_CONFIG


# ===========================================================
# Test Helpers
# ===========================================================

class FakeClock:
    """Manually advanced wall clock in milliseconds."""

    def __init__(self, now=0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, ms):
        self.now += ms


def create_mock_surface(width=50, height=50):
    """Create a mock pygame.Surface with common methods."""
    surface = MagicMock()
    surface.get_width.return_value = width
    surface.get_height.return_value = height
    surface.get_size.return_value = (width, height)
    return surface


# ===========================================================
# Fixtures
# ===========================================================

@pytest.fixture
def mock_draw_manager():
    """Mock for DrawManager with the drawing-surface methods."""
    draw_manager = MagicMock()
    draw_manager.clear = MagicMock()
    draw_manager.fill_rect = MagicMock()
    draw_manager.fill_text = MagicMock()
    draw_manager.draw_image = MagicMock()
    draw_manager.load_image.return_value = create_mock_surface(20, 40)
    return draw_manager


@pytest.fixture
def scheduler():
    return FrameScheduler()


@pytest.fixture
def fake_clock():
    return FakeClock()


@pytest.fixture
def game_config():
    """Independent copy of the built-in defaults."""
    return copy.deepcopy(DEFAULT_GAME_CONFIG)


# ===========================================================
# Pytest configuration
# ===========================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
    config.addinivalue_line("markers", "unit: marks tests as unit tests")
    config.addinivalue_line("markers", "regression: marks tests as regression tests")


def pytest_collection_modifyitems(config, items):
    """Mark everything not marked integration as a unit test."""
    for item in items:
        if item.get_closest_marker("integration") is None:
            item.add_marker(pytest.mark.unit)
