"""Root display selection.

The root display anchors the logical desktop: its logical bounds are its
physical bounds divided by its own scale.
"""

from collections.abc import Sequence

from ..coordinates.types import Point
from ..topology_exceptions import EmptyTopologyError
from .display import Display


def select_root(displays: Sequence[Display]) -> int:
    """Pick the index of the root display.

    The first display whose raw placement starts exactly at (0, 0) wins.
    Otherwise the display whose raw placement is closest to the origin is
    used, the earliest one on a tie.

    Args:
        displays: Displays in enumeration order

    Returns:
        Index of the root display

    Raises:
        EmptyTopologyError: If there are no displays
    """
    if not displays:
        raise EmptyTopologyError()

    for index, display in enumerate(displays):
        if display.placement.top_left.is_origin():
            return index

    origin = Point()
    best_index = 0
    best_distance = float("inf")

    for index, display in enumerate(displays):
        distance = display.placement.top_left.distance_from(origin)
        if distance < best_distance:
            best_distance = distance
            best_index = index

    return best_index
