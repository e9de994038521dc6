"""Geometry value types for display topology.

This module defines immutable coordinate types shared by physical and
logical space:

1. Point - A 2D position
2. Rect - An axis-aligned rectangle (x, y, width, height)
3. Insets - Distances measured inwards from each edge of a rectangle

All values are floats. Physical coordinates are raw OS pixels; logical
coordinates are DPI-normalized desktop units. The types carry no notion of
which space they live in, the caller decides.
"""

import math
from dataclasses import dataclass

__all__ = [
    "Point",
    "Rect",
    "Insets",
]


@dataclass(frozen=True)
class Point:
    """A 2D point.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> "Point":
        return Point(self.x * factor, self.y * factor)

    def __truediv__(self, divisor: float) -> "Point":
        return Point(self.x / divisor, self.y / divisor)

    def is_origin(self) -> bool:
        """Check whether both coordinates are exactly zero."""
        return self.x == 0 and self.y == 0

    def distance_from(self, other: "Point") -> float:
        """Euclidean distance to another point."""
        return math.hypot(self.x - other.x, self.y - other.y)

    def rounded(self) -> "Point":
        """Point with both coordinates rounded to the nearest integer."""
        return Point(float(round(self.x)), float(round(self.y)))

    def __repr__(self) -> str:
        """Developer-friendly representation."""
        return f"Point(x={self.x}, y={self.y})"


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle.

    The rectangle covers the half-open ranges ``[x, right)`` and
    ``[y, bottom)``.

    Attributes:
        x: X coordinate of the top-left corner
        y: Y coordinate of the top-left corner
        width: Width (never negative)
        height: Height (never negative)
    """

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @classmethod
    def from_edges(cls, left: float, top: float, right: float, bottom: float) -> "Rect":
        """Create a rectangle from its edge coordinates."""
        return cls(left, top, right - left, bottom - top)

    @property
    def left(self) -> float:
        return self.x

    @property
    def top(self) -> float:
        return self.y

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def top_left(self) -> Point:
        return Point(self.x, self.y)

    @property
    def centre(self) -> Point:
        return Point(self.x + self.width / 2, self.y + self.height / 2)

    @property
    def area(self) -> float:
        return self.width * self.height

    def contains(self, point: Point) -> bool:
        """Check if a point lies inside the rectangle.

        The right and bottom edges are exclusive, so a point on a shared
        edge between two touching rectangles belongs to exactly one of them.
        """
        return self.x <= point.x < self.right and self.y <= point.y < self.bottom

    def intersection(self, other: "Rect") -> "Rect":
        """Overlap of two rectangles, empty at the origin of the overlap when disjoint."""
        left = max(self.x, other.x)
        top = max(self.y, other.y)
        right = min(self.right, other.right)
        bottom = min(self.bottom, other.bottom)

        if right <= left or bottom <= top:
            return Rect(left, top, 0.0, 0.0)

        return Rect.from_edges(left, top, right, bottom)

    def intersection_area(self, other: "Rect") -> float:
        """Area of the overlap with another rectangle (0 when disjoint)."""
        return self.intersection(other).area

    def union(self, other: "Rect") -> "Rect":
        """Smallest rectangle containing both rectangles."""
        return Rect.from_edges(
            min(self.x, other.x),
            min(self.y, other.y),
            max(self.right, other.right),
            max(self.bottom, other.bottom),
        )

    def __mul__(self, factor: float) -> "Rect":
        return Rect(self.x * factor, self.y * factor, self.width * factor, self.height * factor)

    def __truediv__(self, divisor: float) -> "Rect":
        return Rect(
            self.x / divisor, self.y / divisor, self.width / divisor, self.height / divisor
        )

    def translated(self, dx: float, dy: float) -> "Rect":
        return Rect(self.x + dx, self.y + dy, self.width, self.height)

    def __repr__(self) -> str:
        """Developer-friendly representation."""
        return f"Rect(x={self.x}, y={self.y}, width={self.width}, height={self.height})"


@dataclass(frozen=True)
class Insets:
    """Distances measured inwards from each edge of a rectangle.

    Used for platform metadata such as safe areas and on-screen keyboards.
    """

    top: float = 0.0
    left: float = 0.0
    bottom: float = 0.0
    right: float = 0.0
