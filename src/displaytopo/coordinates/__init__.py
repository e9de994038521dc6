"""Geometry primitives shared by physical and logical space.

## Coordinate Spaces

1. **Physical** - raw OS pixels, as reported per monitor
2. **Logical** - the unified, DPI-normalized virtual desktop

A monitor at scale 2.0 that is 2000 physical pixels wide is 1000 logical
units wide. Both spaces use the same value types; which space a value
belongs to is decided by the caller.

## Exports

- `Point` - 2D point
- `Rect` - Axis-aligned rectangle (x, y, width, height)
- `Insets` - Edge insets (safe areas, keyboards)
- `Tolerance` - Approximate equality for edge coordinates
"""

from .geometry import DEFAULT_TOLERANCE, Tolerance, bounding_box
from .types import Insets, Point, Rect

__all__ = [
    "Point",
    "Rect",
    "Insets",
    "Tolerance",
    "DEFAULT_TOLERANCE",
    "bounding_box",
]
