"""Tolerant edge comparisons between rectangles.

Monitor bounds reported by the OS can carry rounding noise after DPI
conversion, so edge coordinates are compared with a tolerance instead of
exact equality.
"""

import math
from dataclasses import dataclass

from .types import Rect


@dataclass(frozen=True)
class Tolerance:
    """Absolute and relative tolerance for coordinate comparisons."""

    absolute: float = 1e-6
    relative: float = 1e-9

    def equal(self, a: float, b: float) -> bool:
        """Check whether two coordinates are approximately equal."""
        return math.isclose(a, b, rel_tol=self.relative, abs_tol=self.absolute)

    def spans_meet(self, start_a: float, end_a: float, start_b: float, end_b: float) -> bool:
        """Check whether two closed ranges overlap or touch end to end."""
        if start_a > end_b and not self.equal(start_a, end_b):
            return False
        if start_b > end_a and not self.equal(start_b, end_a):
            return False
        return True


DEFAULT_TOLERANCE = Tolerance()


def horizontal_spans_meet(a: Rect, b: Rect, tolerance: Tolerance = DEFAULT_TOLERANCE) -> bool:
    """Check whether the x ranges of two rectangles overlap or meet."""
    return tolerance.spans_meet(a.left, a.right, b.left, b.right)


def vertical_spans_meet(a: Rect, b: Rect, tolerance: Tolerance = DEFAULT_TOLERANCE) -> bool:
    """Check whether the y ranges of two rectangles overlap or meet."""
    return tolerance.spans_meet(a.top, a.bottom, b.top, b.bottom)


def bounding_box(rects: list[Rect]) -> Rect:
    """Smallest rectangle containing every rectangle, empty Rect() for no input."""
    if not rects:
        return Rect()

    total = rects[0]
    for rect in rects[1:]:
        total = total.union(rect)
    return total
