"""MSS-based display registry.

MSS reports every monitor's position and size in physical pixels, with the
combined virtual monitor at index 0. It does not report per-monitor scale
factors, so the system DPI is used for every monitor.
"""

import sys

import mss

from ..config.settings import DisplaySettings, get_settings
from ..coordinates.types import Rect
from ..displays.display import Display
from ..logging import get_logger
from ..topology_exceptions import RegistryException
from .base import DisplayRegistry

logger = get_logger(__name__)


class MSSDisplayRegistry(DisplayRegistry):
    """Enumerate physical monitors through MSS."""

    name = "mss"

    def __init__(self, settings: DisplaySettings | None = None):
        """Initialize the registry.

        Args:
            settings: Settings, defaults to get_settings()
        """
        self.settings = settings or get_settings()

    def enumerate_displays(self) -> list[Display]:
        """Enumerate monitors.

        The monitor at the origin is main, or the first monitor if none is.

        Returns:
            Raw displays in MSS order

        Raises:
            RegistryException: If MSS cannot query the monitors
        """
        try:
            with mss.mss() as sct:
                monitors = list(sct.monitors)
        except Exception as e:
            raise RegistryException(str(e), backend=self.name) from e

        # Skip index 0 as it's the combined virtual monitor
        physical_monitors = monitors[1:]
        scale = self._get_scale()

        main_index = 0
        for i, mon in enumerate(physical_monitors):
            if mon["left"] == 0 and mon["top"] == 0:
                main_index = i
                break

        displays = []
        for i, mon in enumerate(physical_monitors):
            display = Display(
                physical_bounds=Rect(mon["left"], mon["top"], mon["width"], mon["height"]),
                scale=scale,
                is_main=(i == main_index),
                name=f"Monitor {i + 1}",
            )
            displays.append(display)

            logger.debug(
                "display_enumerated",
                index=i,
                bounds=repr(display.physical_bounds),
                scale=scale,
                is_main=display.is_main,
            )

        return displays

    def _get_scale(self) -> float:
        """Get the DPI scale factor for the current system.

        Returns:
            DPI scale factor, or the configured default when unavailable
        """
        if not self.settings.enable_dpi_scaling:
            return self.settings.default_scale

        if sys.platform == "win32":
            try:
                import ctypes

                user32 = ctypes.windll.user32  # type: ignore[attr-defined]
                user32.SetProcessDPIAware()
                dpi = user32.GetDpiForSystem()
                if dpi > 0:
                    return float(dpi / 96.0)
            except (AttributeError, OSError) as e:
                logger.debug("dpi_detection_failed", error=str(e))

        return self.settings.default_scale
