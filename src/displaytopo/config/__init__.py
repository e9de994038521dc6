"""Configuration package.

Usage:
    from displaytopo.config import get_settings

    settings = get_settings()
    print(settings.edge_abs_tolerance)

    # Loading a layout file
    from displaytopo.config import load_layout

    layout = load_layout("layouts/dual.json")
    displays = layout.to_displays()
"""

from .settings import DisplaySettings, get_settings, reset_settings
from .models import DisplayConfig, DisplayLayout, InsetsConfig, RectConfig
from .loader import load_layout

__all__ = [
    "DisplaySettings",
    "get_settings",
    "reset_settings",
    "load_layout",
    "DisplayLayout",
    "DisplayConfig",
    "RectConfig",
    "InsetsConfig",
]
