"""Adjacency between displays.

Two displays touch when they share all or part of an edge in physical
space. Adjacency is evaluated on demand while the resolver walks the
display graph; no adjacency matrix is built.
"""

from collections.abc import Iterable, Iterator, Sequence
from enum import Enum

from ..coordinates.geometry import (
    DEFAULT_TOLERANCE,
    Tolerance,
    horizontal_spans_meet,
    vertical_spans_meet,
)
from ..coordinates.types import Rect
from .display import Display


class Edge(Enum):
    """Side of a reference display that another display touches."""

    LEFT = "left"
    RIGHT = "right"
    TOP = "top"
    BOTTOM = "bottom"


class AdjacencyGraph:
    """Touching relation over an ordered sequence of displays.

    Example:
        >>> graph = AdjacencyGraph(displays)
        >>> graph.touches(0, 1)
        True
        >>> graph.touching_edge(1, 0)
        <Edge.RIGHT: 'right'>
    """

    def __init__(self, displays: Sequence[Display], tolerance: Tolerance = DEFAULT_TOLERANCE):
        self.displays = displays
        self.tolerance = tolerance

    def touching_edge(self, index: int, reference: int) -> Edge | None:
        """Report which side of ``reference`` the display at ``index`` touches.

        Sides are tried in the order left, right, top, bottom and the first
        match wins, so a display meeting the reference at a corner resolves
        to the horizontal side.

        Args:
            index: Index of the display being placed
            reference: Index of the display it is placed against

        Returns:
            The touching side of the reference display, or None
        """
        return touching_edge(
            self.displays[index].physical_bounds,
            self.displays[reference].physical_bounds,
            self.tolerance,
        )

    def touches(self, a: int, b: int) -> bool:
        """Check whether two displays share an edge."""
        return a != b and self.touching_edge(a, b) is not None

    def neighbours(self, index: int, candidates: Iterable[int] | None = None) -> Iterator[int]:
        """Yield, in enumeration order, the displays touching ``index``.

        Args:
            index: Display to find neighbours of
            candidates: Restrict the search to these indices
        """
        if candidates is None:
            candidates = range(len(self.displays))

        for other in candidates:
            if self.touches(other, index):
                yield other


def touching_edge(
    rect: Rect, reference: Rect, tolerance: Tolerance = DEFAULT_TOLERANCE
) -> Edge | None:
    """Report which side of ``reference`` the rectangle ``rect`` touches.

    Facing edges must be approximately equal and the spans along the other
    axis must overlap or meet.
    """
    if tolerance.equal(rect.right, reference.left) and vertical_spans_meet(
        rect, reference, tolerance
    ):
        return Edge.LEFT
    if tolerance.equal(rect.left, reference.right) and vertical_spans_meet(
        rect, reference, tolerance
    ):
        return Edge.RIGHT
    if tolerance.equal(rect.bottom, reference.top) and horizontal_spans_meet(
        rect, reference, tolerance
    ):
        return Edge.TOP
    if tolerance.equal(rect.top, reference.bottom) and horizontal_spans_meet(
        rect, reference, tolerance
    ):
        return Edge.BOTTOM
    return None
