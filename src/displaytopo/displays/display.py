"""Display record.

One Display describes one physical monitor as reported by the platform
registry, plus the logical bounds computed for it by the resolver.
"""

from dataclasses import dataclass, field

from ..coordinates.types import Insets, Rect
from ..topology_exceptions import InvalidDisplayError


@dataclass(frozen=True)
class Display:
    """Information about one monitor.

    Physical fields are what the OS reports and never change. The logical
    fields are ``None`` until the display has been through a resolution
    pass, which returns new Display values rather than mutating these.

    Example:
        A 2x monitor to the right of a 1x monitor:

            Display(physical_bounds=Rect(0, 0, 1000, 800), scale=1.0, is_main=True)
            Display(physical_bounds=Rect(1000, 0, 200, 800), scale=2.0)

        After resolution the second display has logical bounds
        Rect(1000, 0, 100, 400): its left edge meets the first display's
        logical right edge.

    Attributes:
        physical_bounds: Bounds in physical pixels. Used for adjacency and
            for physical-space lookups.
        scale: Physical pixels per logical pixel (> 0)
        is_main: True for the platform's primary monitor
        raw_placement: Raw position reported by the registry, used to pick
            the root display. Defaults to physical_bounds.
        raw_user_area: Usable area (excluding menu bars, docks, taskbars) in
            the same space as raw_placement. Defaults to raw_placement.
        logical_bounds: Resolved bounds in logical pixels
        user_bounds: Resolved usable area in logical pixels
        dpi: Optional dots-per-inch reported by the platform
        safe_area_insets: Optional safe-area insets
        keyboard_insets: Optional on-screen keyboard insets
        vertical_frequency_hz: Optional refresh rate
        name: Optional human-readable name
    """

    physical_bounds: Rect
    scale: float = 1.0
    is_main: bool = False
    raw_placement: Rect | None = None
    raw_user_area: Rect | None = None
    logical_bounds: Rect | None = None
    user_bounds: Rect | None = None
    dpi: float | None = None
    safe_area_insets: Insets = field(default_factory=Insets)
    keyboard_insets: Insets = field(default_factory=Insets)
    vertical_frequency_hz: float | None = None
    name: str | None = None

    def __post_init__(self) -> None:
        if not self.scale > 0:
            raise InvalidDisplayError("scale", f"must be positive, got {self.scale}")
        for field_name in ("physical_bounds", "raw_placement", "raw_user_area"):
            rect = getattr(self, field_name)
            if rect is not None and (rect.width < 0 or rect.height < 0):
                raise InvalidDisplayError(field_name, f"size must not be negative, got {rect}")

        # Frozen dataclass: defaults are filled in through object.__setattr__
        if self.raw_placement is None:
            object.__setattr__(self, "raw_placement", self.physical_bounds)
        if self.raw_user_area is None:
            object.__setattr__(self, "raw_user_area", self.raw_placement)

    @property
    def placement(self) -> Rect:
        """Raw placement, never None after construction."""
        assert self.raw_placement is not None
        return self.raw_placement

    @property
    def user_area(self) -> Rect:
        """Raw user area, never None after construction."""
        assert self.raw_user_area is not None
        return self.raw_user_area

    @property
    def is_resolved(self) -> bool:
        """True once logical bounds have been assigned."""
        return self.logical_bounds is not None

    def __repr__(self) -> str:
        """Developer-friendly representation."""
        main_str = " (main)" if self.is_main else ""
        name_str = f"{self.name!r}, " if self.name else ""
        return (
            f"Display({name_str}physical={self.physical_bounds}, "
            f"scale={self.scale}, logical={self.logical_bounds}{main_str})"
        )
