"""Tests for logical bounds resolution."""

import pytest

from displaytopo.config.settings import DisplaySettings
from displaytopo.coordinates.geometry import Tolerance
from displaytopo.coordinates.types import Rect
from displaytopo.displays.adjacency import AdjacencyGraph
from displaytopo.displays.display import Display
from displaytopo.displays.resolver import LogicalBoundsResolver, TopologyNode, resolve
from displaytopo.topology_exceptions import DisconnectedTopologyError, NoMatchingEdgeError


# Neighbours of a 1000x800 display at the origin, one per side
NEIGHBOUR_BOUNDS = {
    "left": Rect(-600, 0, 600, 600),
    "right": Rect(1000, 0, 600, 600),
    "top": Rect(0, -600, 600, 600),
    "bottom": Rect(0, 800, 600, 600),
}


def _approx_rect(rect: Rect) -> tuple:
    return pytest.approx((rect.x, rect.y, rect.width, rect.height))


def _as_tuple(rect: Rect | None) -> tuple:
    assert rect is not None
    return (rect.x, rect.y, rect.width, rect.height)


class TestResolveBasics:
    """Test trivial inputs."""

    def test_empty(self) -> None:
        """Test that no displays resolve to no displays."""
        assert resolve([]) == []

    def test_single_display(self, single_display: Display) -> None:
        """Test the single display fast path."""
        (resolved,) = resolve([single_display])

        assert resolved.logical_bounds == Rect(0, 0, 500, 400)
        assert resolved.user_bounds == Rect(0, 0, 500, 400)

    def test_single_display_away_from_origin(self) -> None:
        """Test that a lone display keeps its position divided by its scale."""
        display = Display(physical_bounds=Rect(100, 100, 1000, 800), scale=2.0)

        (resolved,) = resolve([display])

        assert resolved.logical_bounds == Rect(50, 50, 500, 400)

    def test_inputs_not_modified(self, dual_displays: list[Display]) -> None:
        """Test that resolution returns new values and leaves its input alone."""
        resolved = resolve(dual_displays)

        assert all(d.logical_bounds is None for d in dual_displays)
        assert all(d.is_resolved for d in resolved)

    def test_order_preserved(self, triple_displays: list[Display]) -> None:
        """Test that output order matches input order."""
        resolved = resolve(triple_displays)

        assert [d.name for d in resolved] == [d.name for d in triple_displays]

    def test_other_fields_preserved(self, dual_displays: list[Display]) -> None:
        """Test that only logical and user bounds change."""
        resolved = resolve(dual_displays)

        for raw, new in zip(dual_displays, resolved):
            assert new.physical_bounds == raw.physical_bounds
            assert new.scale == raw.scale
            assert new.is_main == raw.is_main
            assert new.raw_placement == raw.raw_placement


class TestEdgePlacement:
    """Test placement against each side of the parent."""

    def test_right(self, dual_displays: list[Display]) -> None:
        """Test a higher-density display to the right of the root."""
        a, b = resolve(dual_displays)

        assert a.logical_bounds == Rect(0, 0, 1000, 800)
        assert b.logical_bounds == Rect(1000, 0, 100, 400)

    def test_left(self) -> None:
        """Test a display to the left of the root."""
        displays = [
            Display(physical_bounds=Rect(0, 0, 1000, 800)),
            Display(physical_bounds=Rect(-400, 0, 400, 800), scale=2.0),
        ]

        _, b = resolve(displays)

        assert b.logical_bounds == Rect(-200, 0, 200, 400)

    def test_top(self) -> None:
        """Test a display above the root."""
        displays = [
            Display(physical_bounds=Rect(0, 0, 1000, 800)),
            Display(physical_bounds=Rect(0, -600, 800, 600), scale=1.5),
        ]

        _, b = resolve(displays)

        assert _as_tuple(b.logical_bounds) == _approx_rect(Rect(0, -400, 800 / 1.5, 400))

    def test_bottom(self) -> None:
        """Test a display below the root."""
        displays = [
            Display(physical_bounds=Rect(0, 0, 1000, 800)),
            Display(physical_bounds=Rect(0, 800, 1000, 600), scale=2.0),
        ]

        _, b = resolve(displays)

        assert b.logical_bounds == Rect(0, 800, 500, 300)

    def test_cross_axis_uses_parent_scale(self) -> None:
        """Test that the offset along the shared edge is divided by the parent's scale."""
        displays = [
            Display(physical_bounds=Rect(0, 0, 2000, 1600), scale=2.0),
            Display(physical_bounds=Rect(2000, 400, 1000, 800), scale=1.0),
        ]

        _, b = resolve(displays)

        assert b.logical_bounds == Rect(1000, 200, 1000, 800)

    def test_three_displays(self, triple_displays: list[Display]) -> None:
        """Test displays left of and below a main display at the origin."""
        left, main, down = resolve(triple_displays)

        assert main.logical_bounds == Rect(0, 0, 1920, 1080)
        assert left.logical_bounds == Rect(-1000, 100, 1000, 600)
        assert down.logical_bounds == Rect(0, 1080, 1000, 600)

    def test_chain(self) -> None:
        """Test a display placed against a non-root parent."""
        displays = [
            Display(physical_bounds=Rect(0, 0, 1000, 800)),
            Display(physical_bounds=Rect(1000, 0, 2000, 1600), scale=2.0),
            Display(physical_bounds=Rect(3000, 0, 1000, 800)),
        ]

        _, b, c = resolve(displays)

        assert b.logical_bounds == Rect(1000, 0, 1000, 800)
        assert c.logical_bounds == Rect(2000, 0, 1000, 800)

    def test_root_away_from_origin(self) -> None:
        """Test that a root not at the origin is divided by its own scale."""
        displays = [
            Display(physical_bounds=Rect(100, 50, 1000, 800), scale=2.0),
            Display(physical_bounds=Rect(1100, 50, 500, 800)),
        ]

        a, b = resolve(displays)

        assert a.logical_bounds == Rect(50, 25, 500, 400)
        assert b.logical_bounds == Rect(550, 25, 500, 800)

    @pytest.mark.parametrize("scale_a", [1.0, 1.25, 1.5, 2.0])
    @pytest.mark.parametrize("scale_b", [1.0, 1.75, 3.0])
    @pytest.mark.parametrize("side", ["left", "right", "top", "bottom"])
    def test_touching_displays_stay_touching(
        self, side: str, scale_a: float, scale_b: float
    ) -> None:
        """Test that neighbours share an edge in logical space for any side and scales."""
        neighbour = NEIGHBOUR_BOUNDS[side]
        displays = [
            Display(physical_bounds=Rect(0, 0, 1000, 800), scale=scale_a),
            Display(physical_bounds=neighbour, scale=scale_b),
        ]

        a, b = resolve(displays)
        root, other = a.logical_bounds, b.logical_bounds

        assert root is not None and other is not None
        if side == "left":
            assert other.right == pytest.approx(root.left)
        elif side == "right":
            assert other.left == pytest.approx(root.right)
        elif side == "top":
            assert other.bottom == pytest.approx(root.top)
        else:
            assert other.top == pytest.approx(root.bottom)
        assert other.width == pytest.approx(neighbour.width / scale_b)
        assert other.height == pytest.approx(neighbour.height / scale_b)

    def test_input_order_does_not_matter_for_trees(self, triple_displays: list[Display]) -> None:
        """Test that reversing enumeration order gives the same bounds."""
        forward = {d.name: d.logical_bounds for d in resolve(triple_displays)}
        backward = {d.name: d.logical_bounds for d in resolve(list(reversed(triple_displays)))}

        assert forward == backward


class TestUserBounds:
    """Test user area resolution."""

    def test_user_area_offset_is_scaled(self) -> None:
        """Test that the user area keeps its scaled offset from the logical top-left."""
        displays = [
            Display(physical_bounds=Rect(0, 0, 1000, 800), raw_user_area=Rect(0, 0, 1000, 760)),
            Display(
                physical_bounds=Rect(1000, 0, 200, 800),
                scale=2.0,
                raw_user_area=Rect(1000, 20, 200, 780),
            ),
        ]

        a, b = resolve(displays)

        assert a.user_bounds == Rect(0, 0, 1000, 760)
        assert b.user_bounds == Rect(1000, 10, 100, 390)

    def test_user_bounds_default_to_logical(self, dual_displays: list[Display]) -> None:
        """Test that without a separate user area the user bounds equal the logical bounds."""
        for display in resolve(dual_displays):
            assert display.user_bounds == display.logical_bounds


class TestResolveErrors:
    """Test failure modes."""

    def test_disconnected(self, dual_displays: list[Display]) -> None:
        """Test that a display touching nothing is reported."""
        displays = [
            dual_displays[0],
            Display(physical_bounds=Rect(5000, 0, 100, 100), name="far"),
        ]

        with pytest.raises(DisconnectedTopologyError) as exc_info:
            resolve(displays)

        assert exc_info.value.unreachable == [1]
        assert exc_info.value.root == 0
        assert exc_info.value.error_code == "DISCONNECTED_TOPOLOGY"

    def test_gap_is_disconnected(self) -> None:
        """Test that a small gap between monitors is not bridged."""
        displays = [
            Display(physical_bounds=Rect(0, 0, 1000, 800)),
            Display(physical_bounds=Rect(1001, 0, 1000, 800)),
        ]

        with pytest.raises(DisconnectedTopologyError):
            resolve(displays)

    def test_identical_bounds_are_disconnected(self) -> None:
        """Test that mirrored displays do not touch."""
        displays = [
            Display(physical_bounds=Rect(0, 0, 1000, 800)),
            Display(physical_bounds=Rect(0, 0, 1000, 800)),
        ]

        with pytest.raises(DisconnectedTopologyError) as exc_info:
            resolve(displays)

        assert exc_info.value.unreachable == [1]

    def test_no_matching_edge(self) -> None:
        """Test that placing a display against a non-touching parent fails."""
        displays = [
            Display(physical_bounds=Rect(0, 0, 100, 100)),
            Display(physical_bounds=Rect(500, 500, 100, 100)),
        ]
        graph = AdjacencyGraph(displays)
        parent = TopologyNode(index=0, is_root=True, parent=0, logical_area=Rect(0, 0, 100, 100))
        child = TopologyNode(index=1, parent=0)

        with pytest.raises(NoMatchingEdgeError):
            LogicalBoundsResolver()._place(child, parent, graph)


class TestResolverTolerance:
    """Test the edge comparison tolerance."""

    def _displays(self) -> list[Display]:
        return [
            Display(physical_bounds=Rect(0, 0, 1000, 800)),
            Display(physical_bounds=Rect(1000.5, 0, 1000, 800)),
        ]

    def test_default_tolerance_rejects_half_pixel(self) -> None:
        """Test that the default tolerance does not bridge half a pixel."""
        with pytest.raises(DisconnectedTopologyError):
            LogicalBoundsResolver().resolve(self._displays())

    def test_tolerance_from_settings(self) -> None:
        """Test that the tolerance is read from settings."""
        resolver = LogicalBoundsResolver(settings=DisplaySettings(edge_abs_tolerance=1.0))

        _, b = resolver.resolve(self._displays())

        assert b.logical_bounds == Rect(1000, 0, 1000, 800)

    def test_explicit_tolerance(self) -> None:
        """Test that an explicit tolerance overrides settings."""
        resolved = resolve(self._displays(), tolerance=Tolerance(absolute=1.0))

        assert len(resolved) == 2
