"""Display topology: records, resolution and coordinate mapping.

## Pipeline

1. A registry reports raw `Display` records (physical bounds, scale, ...)
2. `select_root` picks the display anchoring the logical origin
3. `LogicalBoundsResolver` walks the touching-display graph from the root
   and assigns logical and user bounds to every display
4. `CoordinateMapper` answers lookups and conversions over the result

`DisplayService` runs steps 1-3 on every refresh and keeps the last good
topology when a refresh fails.

## Example

```
Monitor layout (physical):
    A: x=0,    y=0, 1000x800, scale 1.0   (root, at the origin)
    B: x=1000, y=0,  200x800, scale 2.0   (touches A's right edge)

Logical layout:
    A: x=0,    y=0, 1000x800
    B: x=1000, y=0,  100x400
```
"""

from .display import Display
from .adjacency import AdjacencyGraph, Edge, touching_edge
from .root_selector import select_root
from .resolver import LogicalBoundsResolver, TopologyNode, resolve
from .mapper import CoordinateMapper
from .service import DisplayService, TopologyListener

__all__ = [
    "Display",
    "AdjacencyGraph",
    "Edge",
    "touching_edge",
    "select_root",
    "LogicalBoundsResolver",
    "TopologyNode",
    "resolve",
    "CoordinateMapper",
    "DisplayService",
    "TopologyListener",
]
