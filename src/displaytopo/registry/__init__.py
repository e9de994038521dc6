"""Display registries: where raw display records come from.

- `DisplayRegistry` - interface
- `StaticDisplayRegistry` - fixed displays or a layout file
- `MSSDisplayRegistry` - live monitors through MSS
- `create_registry` - pick a registry from settings
"""

from ..config.settings import DisplaySettings, get_settings
from ..config_exceptions import InvalidConfigurationException
from .base import DisplayRegistry
from .static import StaticDisplayRegistry
from .mss_registry import MSSDisplayRegistry


def create_registry(settings: DisplaySettings | None = None) -> DisplayRegistry:
    """Create the registry selected by ``settings.registry_backend``.

    Raises:
        InvalidConfigurationException: If the static backend has no layout file
    """
    settings = settings or get_settings()

    if settings.registry_backend == "static":
        if settings.layout_file is None:
            raise InvalidConfigurationException(
                "layout_file", "required when registry_backend is 'static'"
            )
        return StaticDisplayRegistry.from_file(settings.layout_file)

    return MSSDisplayRegistry(settings)


__all__ = [
    "DisplayRegistry",
    "StaticDisplayRegistry",
    "MSSDisplayRegistry",
    "create_registry",
]
