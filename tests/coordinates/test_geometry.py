"""Tests for tolerant edge comparisons."""

from displaytopo.coordinates.geometry import (
    Tolerance,
    bounding_box,
    horizontal_spans_meet,
    vertical_spans_meet,
)
from displaytopo.coordinates.types import Rect


class TestTolerance:
    """Test approximate equality."""

    def test_exact_values_are_equal(self) -> None:
        """Test that identical values compare equal."""
        assert Tolerance().equal(1000.0, 1000.0)

    def test_rounding_noise_is_absorbed(self) -> None:
        """Test that noise below the absolute tolerance is ignored."""
        assert Tolerance().equal(1000.0, 1000.0000004)
        assert Tolerance().equal(-1920.0, -1919.9999999)

    def test_distinct_pixels_are_not_equal(self) -> None:
        """Test that whole-pixel differences are not absorbed."""
        assert not Tolerance().equal(1000.0, 1001.0)
        assert not Tolerance().equal(1000.0, 1000.01)

    def test_custom_tolerance(self) -> None:
        """Test a looser absolute tolerance."""
        assert Tolerance(absolute=0.5).equal(1000.0, 1000.4)

    def test_spans_meet(self) -> None:
        """Test overlapping, meeting and disjoint ranges."""
        tolerance = Tolerance()

        assert tolerance.spans_meet(0, 100, 50, 150)
        assert tolerance.spans_meet(0, 100, 100, 200)
        assert tolerance.spans_meet(100, 200, 0, 100)
        assert tolerance.spans_meet(0, 100, 100.0000001, 200)
        assert not tolerance.spans_meet(0, 100, 101, 200)
        assert not tolerance.spans_meet(101, 200, 0, 100)


class TestSpans:
    """Test span helpers on rectangles."""

    def test_horizontal_spans(self) -> None:
        """Test x range overlap."""
        assert horizontal_spans_meet(Rect(0, 0, 100, 10), Rect(50, 500, 100, 10))
        assert not horizontal_spans_meet(Rect(0, 0, 100, 10), Rect(200, 0, 100, 10))

    def test_vertical_spans(self) -> None:
        """Test y range overlap."""
        assert vertical_spans_meet(Rect(0, 0, 10, 100), Rect(500, 100, 10, 100))
        assert not vertical_spans_meet(Rect(0, 0, 10, 100), Rect(0, 300, 10, 100))


class TestBoundingBox:
    """Test bounding_box."""

    def test_empty(self) -> None:
        """Test that no rectangles give an empty Rect."""
        assert bounding_box([]) == Rect()

    def test_multiple(self) -> None:
        """Test the box around several rectangles."""
        rects = [Rect(0, 0, 100, 100), Rect(-50, 20, 10, 10), Rect(90, 90, 100, 200)]

        assert bounding_box(rects) == Rect(-50, 0, 240, 290)
