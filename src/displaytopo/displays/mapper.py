"""Coordinate mapping over resolved displays.

The mapper answers "which display is this on?" and converts points and
rectangles between physical and logical space. It holds no state of its own:
it reads the display sequence it was given by reference.

Lookups and conversions never raise. With no displays, lookups return None
and conversions return their input unchanged.

Usage:
    >>> mapper = CoordinateMapper(resolved_displays)
    >>> mapper.physical_to_logical(Point(1100, 200))
    Point(x=1050.0, y=100.0)
    >>> mapper.display_for_point(Point(1050, 100), physical=False)
    Display(physical=Rect(x=1000, ...), scale=2.0, ...)
"""

from collections.abc import Sequence
from typing import overload

from ..coordinates.geometry import bounding_box
from ..coordinates.types import Point, Rect
from .display import Display


class CoordinateMapper:
    """Point and rectangle queries over a resolved display sequence."""

    def __init__(self, displays: Sequence[Display]) -> None:
        """Initialize the mapper.

        Args:
            displays: Resolved displays in enumeration order
        """
        self.displays = displays

    @staticmethod
    def _bounds(display: Display, physical: bool) -> Rect | None:
        return display.physical_bounds if physical else display.logical_bounds

    def display_for_rect(self, rect: Rect, physical: bool = False) -> Display | None:
        """Find the display that overlaps a rectangle the most.

        On equal overlap (including no overlap at all) the later display in
        enumeration order wins.

        Args:
            rect: Rectangle to look up
            physical: True if ``rect`` is in physical space

        Returns:
            Best matching display, or None if there are no displays
        """
        best: Display | None = None
        best_area = -1.0

        for display in self.displays:
            bounds = self._bounds(display, physical)
            if bounds is None:
                continue

            area = bounds.intersection_area(rect)
            if area >= best_area:
                best_area = area
                best = display

        return best

    def display_for_point(self, point: Point, physical: bool = False) -> Display | None:
        """Find the display containing a point, or the nearest one.

        The first display containing the point is returned. If none contains
        it, the display whose centre is closest wins, the later display in
        enumeration order on a tie.

        Args:
            point: Point to look up
            physical: True if ``point`` is in physical space

        Returns:
            Best matching display, or None if there are no displays
        """
        best: Display | None = None
        best_distance = float("inf")

        for display in self.displays:
            bounds = self._bounds(display, physical)
            if bounds is None:
                continue

            if bounds.contains(point):
                return display

            distance = bounds.centre.distance_from(point)
            if distance <= best_distance:
                best_distance = distance
                best = display

        return best

    def _lookup(self, value: Point | Rect, physical: bool) -> Display | None:
        if isinstance(value, Rect):
            return self.display_for_rect(value, physical)
        return self.display_for_point(value, physical)

    @overload
    def physical_to_logical(self, value: Point, display: Display | None = None) -> Point: ...

    @overload
    def physical_to_logical(self, value: Rect, display: Display | None = None) -> Rect: ...

    def physical_to_logical(
        self, value: Point | Rect, display: Display | None = None
    ) -> Point | Rect:
        """Convert a physical point or rectangle to logical space.

        ``(value - physical_top_left) / scale + logical_top_left``, using the
        given display, or the display the value is on when omitted.
        Rectangle sizes are divided by the scale.

        Args:
            value: Point or Rect in physical space
            display: Display whose scale factor to use

        Returns:
            The value in logical space, unchanged if no display applies
        """
        if display is None:
            display = self._lookup(value, physical=True)
        if display is None or display.logical_bounds is None:
            return value

        physical_origin = display.physical_bounds.top_left
        logical_origin = display.logical_bounds.top_left

        if isinstance(value, Rect):
            relative = value.translated(-physical_origin.x, -physical_origin.y) / display.scale
            return relative.translated(logical_origin.x, logical_origin.y)

        return (value - physical_origin) / display.scale + logical_origin

    @overload
    def logical_to_physical(self, value: Point, display: Display | None = None) -> Point: ...

    @overload
    def logical_to_physical(self, value: Rect, display: Display | None = None) -> Rect: ...

    def logical_to_physical(
        self, value: Point | Rect, display: Display | None = None
    ) -> Point | Rect:
        """Convert a logical point or rectangle to physical space.

        Exact inverse of ``physical_to_logical`` for the same display.

        Args:
            value: Point or Rect in logical space
            display: Display whose scale factor to use

        Returns:
            The value in physical space, unchanged if no display applies
        """
        if display is None:
            display = self._lookup(value, physical=False)
        if display is None or display.logical_bounds is None:
            return value

        physical_origin = display.physical_bounds.top_left
        logical_origin = display.logical_bounds.top_left

        if isinstance(value, Rect):
            relative = value.translated(-logical_origin.x, -logical_origin.y) * display.scale
            return relative.translated(physical_origin.x, physical_origin.y)

        return (value - logical_origin) * display.scale + physical_origin

    def primary_display(self) -> Display | None:
        """Get the main display, or None if no display is marked main."""
        for display in self.displays:
            if display.is_main:
                return display
        return None

    def rectangle_list(self, user_areas_only: bool = False) -> list[Rect]:
        """Logical (or user) bounds of every resolved display, in order."""
        rects = []
        for display in self.displays:
            bounds = display.user_bounds if user_areas_only else display.logical_bounds
            if bounds is not None:
                rects.append(bounds)
        return rects

    def total_bounds(self, user_areas_only: bool = False) -> Rect:
        """Bounding box of every resolved display in logical space.

        Args:
            user_areas_only: Use user bounds instead of full logical bounds

        Returns:
            Bounding rectangle, empty Rect() when there are no displays
        """
        return bounding_box(self.rectangle_list(user_areas_only))

    def __len__(self) -> int:
        return len(self.displays)

    def __repr__(self) -> str:
        """Developer-friendly representation."""
        return f"CoordinateMapper(displays={len(self.displays)})"
