"""Registry backed by a fixed list of displays or a layout file."""

from collections.abc import Iterable
from pathlib import Path
from typing import TYPE_CHECKING

from ..config.loader import load_layout
from ..config.models.layout import DisplayLayout
from .base import DisplayRegistry

if TYPE_CHECKING:
    from ..displays.display import Display


class StaticDisplayRegistry(DisplayRegistry):
    """Registry that always reports the same displays.

    Useful for tests, for replaying a captured layout, and for headless
    environments where no monitor can be queried.
    """

    name = "static"

    def __init__(self, displays: Iterable["Display"] = ()) -> None:
        self._displays = list(displays)

    @classmethod
    def from_layout(cls, layout: DisplayLayout) -> "StaticDisplayRegistry":
        return cls(layout.to_displays())

    @classmethod
    def from_file(cls, path: str | Path) -> "StaticDisplayRegistry":
        """Create a registry from a JSON or YAML layout file.

        Raises:
            InvalidConfigurationException: If the layout file is invalid
        """
        return cls.from_layout(load_layout(path))

    def set_displays(self, displays: Iterable["Display"]) -> None:
        """Replace the reported displays, as a hot-plug would."""
        self._displays = list(displays)

    def enumerate_displays(self) -> list["Display"]:
        return list(self._displays)

    def __repr__(self) -> str:
        return f"StaticDisplayRegistry(displays={len(self._displays)})"
