"""Tests for the static display registry."""

import json

import pytest

from displaytopo.config.models.layout import DisplayConfig, DisplayLayout, RectConfig
from displaytopo.config_exceptions import InvalidConfigurationException
from displaytopo.coordinates.types import Rect
from displaytopo.displays.display import Display
from displaytopo.registry.static import StaticDisplayRegistry


class TestStaticDisplayRegistry:
    """Test StaticDisplayRegistry."""

    def test_empty_by_default(self) -> None:
        """Test that a bare registry reports no displays."""
        assert StaticDisplayRegistry().enumerate_displays() == []

    def test_reports_given_displays(self, dual_displays: list[Display]) -> None:
        """Test that the configured displays are reported in order."""
        registry = StaticDisplayRegistry(dual_displays)

        assert registry.enumerate_displays() == dual_displays

    def test_returns_copy(self, dual_displays: list[Display]) -> None:
        """Test that callers cannot change the registry through the result."""
        registry = StaticDisplayRegistry(dual_displays)

        registry.enumerate_displays().clear()

        assert len(registry.enumerate_displays()) == 2

    def test_set_displays(self, dual_displays: list[Display]) -> None:
        """Test replacing the displays."""
        registry = StaticDisplayRegistry(dual_displays)

        registry.set_displays(dual_displays[:1])

        assert registry.enumerate_displays() == dual_displays[:1]

    def test_from_layout(self) -> None:
        """Test building a registry from a layout model."""
        layout = DisplayLayout(
            displays=[
                DisplayConfig(
                    physical_bounds=RectConfig(width=1920, height=1080), is_main=True, name="main"
                )
            ]
        )

        (display,) = StaticDisplayRegistry.from_layout(layout).enumerate_displays()

        assert display.physical_bounds == Rect(0, 0, 1920, 1080)
        assert display.is_main
        assert display.name == "main"

    def test_from_file(self, tmp_path) -> None:
        """Test building a registry from a layout file."""
        path = tmp_path / "layout.json"
        path.write_text(
            json.dumps([{"physicalBounds": {"x": 0, "y": 0, "width": 800, "height": 600}}])
        )

        registry = StaticDisplayRegistry.from_file(path)

        assert len(registry.enumerate_displays()) == 1

    def test_from_missing_file(self, tmp_path) -> None:
        """Test that a missing layout file is a configuration error."""
        with pytest.raises(InvalidConfigurationException):
            StaticDisplayRegistry.from_file(tmp_path / "missing.json")

    def test_repr(self, dual_displays: list[Display]) -> None:
        """Test StaticDisplayRegistry string representation."""
        assert repr(StaticDisplayRegistry(dual_displays)) == "StaticDisplayRegistry(displays=2)"
