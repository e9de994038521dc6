"""Logical bounds resolution.

Converts every display's bounds from physical to logical pixels so that
touching monitors also touch in logical space, whatever their scale factors.

The displays form a graph where an edge joins two monitors that share a
physical edge. The root display (see ``root_selector``) is converted by
dividing its physical bounds by its own scale. Every other display is placed
against an already-resolved parent: its logical size comes from its own
scale, and its position is taken from the parent's logical edge it touches.

Example:
    Display A: physical (0, 0, 1000x800), scale 1.0 -> root
    Display B: physical (1000, 0, 200x800), scale 2.0, touches A's right edge

    A logical: (0, 0, 1000x800)
    B logical: (1000, 0, 100x400)   # left edge == A's logical right edge
"""

import dataclasses
from collections.abc import Sequence
from dataclasses import dataclass

from ..config.settings import DisplaySettings, get_settings
from ..coordinates.geometry import Tolerance
from ..coordinates.types import Point, Rect
from ..logging import get_logger
from ..topology_exceptions import DisconnectedTopologyError, NoMatchingEdgeError
from .adjacency import AdjacencyGraph, Edge
from .display import Display
from .root_selector import select_root

logger = get_logger(__name__)


@dataclass
class TopologyNode:
    """Scratch state for one display during a resolution pass.

    Nodes live in a list indexed like the display sequence; ``parent`` is an
    index into that list. The root is its own parent.

    Attributes:
        index: Index of the display this node represents
        is_root: True for the root display
        parent: Index of the node this one was placed against
        logical_area: Logical bounds, set once the node has been processed
    """

    index: int
    is_root: bool = False
    parent: int | None = None
    logical_area: Rect | None = None


class LogicalBoundsResolver:
    """Resolve logical bounds for a set of displays.

    The resolver holds no state between calls; each call to ``resolve``
    works on its own node list and returns new Display values.

    Example:
        >>> resolver = LogicalBoundsResolver()
        >>> resolved = resolver.resolve(displays)
        >>> resolved[1].logical_bounds
        Rect(x=1000.0, y=0.0, width=100.0, height=400.0)
    """

    def __init__(
        self, tolerance: Tolerance | None = None, settings: DisplaySettings | None = None
    ) -> None:
        """Initialize the resolver.

        Args:
            tolerance: Edge comparison tolerance. Taken from settings when omitted.
            settings: Settings to read the tolerance from. Defaults to get_settings().
        """
        if tolerance is None:
            settings = settings or get_settings()
            tolerance = Tolerance(
                absolute=settings.edge_abs_tolerance, relative=settings.edge_rel_tolerance
            )
        self.tolerance = tolerance

    def resolve(self, displays: Sequence[Display]) -> list[Display]:
        """Resolve logical and user bounds for every display.

        Args:
            displays: Raw displays in enumeration order

        Returns:
            New Display values, in the same order, with logical_bounds and
            user_bounds set. An empty input gives an empty list.

        Raises:
            DisconnectedTopologyError: If a display does not touch any display
                connected to the root
            NoMatchingEdgeError: If a display shares no edge with its parent
        """
        if not displays:
            return []

        if len(displays) == 1:
            display = displays[0]
            return [
                dataclasses.replace(
                    display,
                    logical_bounds=display.placement / display.scale,
                    user_bounds=display.user_area / display.scale,
                )
            ]

        graph = AdjacencyGraph(displays, self.tolerance)
        nodes = [TopologyNode(index=i) for i in range(len(displays))]

        root = select_root(displays)
        nodes[root].is_root = True

        self._process(nodes[root], nodes, graph)

        unreachable = [node.index for node in nodes if node.parent is None]
        if unreachable:
            raise DisconnectedTopologyError(unreachable, root)

        return [self._apply(displays[node.index], node) for node in nodes]

    def _process(
        self, node: TopologyNode, nodes: list[TopologyNode], graph: AdjacencyGraph
    ) -> None:
        """Set the logical area of ``node``, then process its unvisited neighbours."""
        display = graph.displays[node.index]
        physical = display.physical_bounds

        if node.is_root:
            node.logical_area = physical / display.scale
            node.parent = node.index
        else:
            assert node.parent is not None
            node.logical_area = self._place(node, nodes[node.parent], graph)

        logger.debug(
            "display_resolved",
            index=node.index,
            parent=node.parent,
            logical_area=repr(node.logical_area),
        )

        children = list(
            graph.neighbours(node.index, [n.index for n in nodes if n.parent is None])
        )
        for child in children:
            nodes[child].parent = node.index

        for child in children:
            self._process(nodes[child], nodes, graph)

    def _place(self, node: TopologyNode, parent: TopologyNode, graph: AdjacencyGraph) -> Rect:
        """Compute the logical area of a non-root node from its resolved parent.

        The coordinate along the shared edge is divided by the parent's scale,
        not the node's own, so both sides of the edge agree on it.
        """
        display = graph.displays[node.index]
        physical = display.physical_bounds
        parent_scale = graph.displays[parent.index].scale
        parent_area = parent.logical_area
        assert parent_area is not None

        width = physical.width / display.scale
        height = physical.height / display.scale

        edge = graph.touching_edge(node.index, parent.index)

        if edge is Edge.LEFT:
            position = Point(parent_area.left - width, physical.top / parent_scale)
        elif edge is Edge.RIGHT:
            position = Point(parent_area.right, physical.top / parent_scale)
        elif edge is Edge.TOP:
            position = Point(physical.left / parent_scale, parent_area.top - height)
        elif edge is Edge.BOTTOM:
            position = Point(physical.left / parent_scale, parent_area.bottom)
        else:
            raise NoMatchingEdgeError(node.index, parent.index)

        return Rect(position.x, position.y, width, height)

    @staticmethod
    def _apply(display: Display, node: TopologyNode) -> Display:
        """Return a copy of ``display`` carrying the node's resolved bounds.

        The user area keeps its offset from the raw placement, scaled by the
        display's own scale, relative to the resolved logical top-left.
        """
        logical = node.logical_area
        assert logical is not None

        placement = display.placement
        relative_user_area = display.user_area.translated(-placement.x, -placement.y)
        user_bounds = (relative_user_area / display.scale).translated(logical.x, logical.y)

        return dataclasses.replace(display, logical_bounds=logical, user_bounds=user_bounds)


def resolve(displays: Sequence[Display], tolerance: Tolerance | None = None) -> list[Display]:
    """Resolve logical bounds with a one-off resolver.

    Args:
        displays: Raw displays in enumeration order
        tolerance: Optional edge comparison tolerance

    Returns:
        Resolved displays in the same order
    """
    return LogicalBoundsResolver(tolerance=tolerance).resolve(displays)
