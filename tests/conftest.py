"""Pytest configuration and fixtures."""

import logging

import pytest

from displaytopo.config.settings import reset_settings
from displaytopo.coordinates.types import Rect
from displaytopo.displays.display import Display


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Keep settings from leaking between tests or from the environment."""
    for name in ("DISPLAYTOPO_REGISTRY_BACKEND", "DISPLAYTOPO_LAYOUT_FILE"):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture(autouse=True)
def restore_root_logging():
    """Undo logging setup done by a test, e.g. handlers bound to CliRunner streams."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def single_display() -> Display:
    """One 2x monitor at the origin."""
    return Display(physical_bounds=Rect(0, 0, 1000, 800), scale=2.0, is_main=True, name="solo")


@pytest.fixture
def dual_displays() -> list[Display]:
    """A 1x monitor at the origin with a 2x monitor touching its right edge.

    Layout (physical):
        A: x=0,    y=0, 1000x800, scale 1.0
        B: x=1000, y=0,  200x800, scale 2.0
    """
    return [
        Display(physical_bounds=Rect(0, 0, 1000, 800), scale=1.0, is_main=True, name="A"),
        Display(physical_bounds=Rect(1000, 0, 200, 800), scale=2.0, name="B"),
    ]


@pytest.fixture
def triple_displays() -> list[Display]:
    """Three monitors: a 1.5x one left of the root and a 2x one below it.

    Layout (physical):
        L:    x=-1500, y=100, 1500x900, scale 1.5
        Main: x=0,     y=0,   1920x1080, scale 1.0
        Down: x=0,     y=1080, 2000x1200, scale 2.0
    """
    return [
        Display(physical_bounds=Rect(-1500, 100, 1500, 900), scale=1.5, name="L"),
        Display(physical_bounds=Rect(0, 0, 1920, 1080), scale=1.0, is_main=True, name="Main"),
        Display(physical_bounds=Rect(0, 1080, 2000, 1200), scale=2.0, name="Down"),
    ]
