"""displaytopo: unified logical coordinates across multiple monitors.

Operating systems report each monitor's bounds in physical pixels, each with
its own scale factor. displaytopo resolves those into one seamless logical
desktop where neighbouring monitors touch edge to edge, then converts points
and rectangles between the two spaces.

Usage:
    >>> from displaytopo import Display, Rect, Point, resolve, CoordinateMapper
    >>>
    >>> displays = resolve([
    ...     Display(Rect(0, 0, 1000, 800), scale=1.0, is_main=True),
    ...     Display(Rect(1000, 0, 200, 800), scale=2.0),
    ... ])
    >>> displays[1].logical_bounds
    Rect(x=1000.0, y=0.0, width=100.0, height=400.0)
    >>> CoordinateMapper(displays).physical_to_logical(Point(1100, 200))
    Point(x=1050.0, y=100.0)
"""

__version__ = "0.1.0"

from .exceptions import (
    ConfigurationException,
    DisconnectedTopologyError,
    DisplayTopologyException,
    EmptyTopologyError,
    InvalidConfigurationException,
    InvalidDisplayError,
    NoMatchingEdgeError,
    RegistryException,
    TopologyException,
)
from .coordinates import Insets, Point, Rect, Tolerance
from .config import DisplaySettings, get_settings, load_layout
from .displays import (
    CoordinateMapper,
    Display,
    DisplayService,
    LogicalBoundsResolver,
    resolve,
    select_root,
)
from .registry import DisplayRegistry, MSSDisplayRegistry, StaticDisplayRegistry, create_registry

__all__ = [
    "__version__",
    # Geometry
    "Point",
    "Rect",
    "Insets",
    "Tolerance",
    # Displays
    "Display",
    "select_root",
    "LogicalBoundsResolver",
    "resolve",
    "CoordinateMapper",
    "DisplayService",
    # Registries
    "DisplayRegistry",
    "StaticDisplayRegistry",
    "MSSDisplayRegistry",
    "create_registry",
    # Configuration
    "DisplaySettings",
    "get_settings",
    "load_layout",
    # Exceptions
    "DisplayTopologyException",
    "TopologyException",
    "EmptyTopologyError",
    "DisconnectedTopologyError",
    "NoMatchingEdgeError",
    "InvalidDisplayError",
    "RegistryException",
    "ConfigurationException",
    "InvalidConfigurationException",
]
