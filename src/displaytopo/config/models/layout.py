"""
Display layout configuration models.

A layout file describes a fixed set of displays, in enumeration order, the
way a platform registry would report them. Layouts are used by the static
registry, by tests and by the command line tools.
"""

from typing import TYPE_CHECKING

from pydantic import BaseModel, Field, model_validator

from ...coordinates.types import Insets, Rect

if TYPE_CHECKING:
    from ...displays.display import Display


class RectConfig(BaseModel):
    """Rectangle in x/y/width/height form."""

    x: float = 0.0
    y: float = 0.0
    width: float = Field(0.0, ge=0.0)
    height: float = Field(0.0, ge=0.0)

    def to_rect(self) -> Rect:
        return Rect(self.x, self.y, self.width, self.height)


class InsetsConfig(BaseModel):
    """Insets measured inwards from each edge."""

    top: float = 0.0
    left: float = 0.0
    bottom: float = 0.0
    right: float = 0.0

    def to_insets(self) -> Insets:
        return Insets(self.top, self.left, self.bottom, self.right)


class DisplayConfig(BaseModel):
    """One raw display record.

    ``raw_placement`` and ``user_area`` default to the physical bounds.
    ``user_area`` must be expressed in the same space as ``raw_placement``.
    """

    name: str | None = None
    physical_bounds: RectConfig = Field(alias="physicalBounds")
    raw_placement: RectConfig | None = Field(None, alias="rawPlacement")
    user_area: RectConfig | None = Field(None, alias="userArea")
    scale: float = Field(1.0, gt=0.0)
    is_main: bool = Field(False, alias="isMain")
    dpi: float | None = Field(None, gt=0.0)
    safe_area_insets: InsetsConfig = Field(default_factory=InsetsConfig, alias="safeAreaInsets")
    keyboard_insets: InsetsConfig = Field(default_factory=InsetsConfig, alias="keyboardInsets")
    vertical_frequency_hz: float | None = Field(None, gt=0.0, alias="verticalFrequencyHz")

    model_config = {"populate_by_name": True}

    def to_display(self) -> "Display":
        from ...displays.display import Display

        physical = self.physical_bounds.to_rect()
        placement = self.raw_placement.to_rect() if self.raw_placement else physical
        user_area = self.user_area.to_rect() if self.user_area else placement

        return Display(
            physical_bounds=physical,
            raw_placement=placement,
            raw_user_area=user_area,
            scale=self.scale,
            is_main=self.is_main,
            dpi=self.dpi,
            safe_area_insets=self.safe_area_insets.to_insets(),
            keyboard_insets=self.keyboard_insets.to_insets(),
            vertical_frequency_hz=self.vertical_frequency_hz,
            name=self.name,
        )


class DisplayLayout(BaseModel):
    """An ordered set of displays."""

    name: str | None = None
    displays: list[DisplayConfig] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_single_main(self) -> "DisplayLayout":
        main_count = sum(1 for display in self.displays if display.is_main)
        if main_count > 1:
            raise ValueError(f"At most one display may be main, got {main_count}")
        return self

    def to_displays(self) -> list["Display"]:
        return [display.to_display() for display in self.displays]
