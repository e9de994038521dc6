"""Pydantic models for display layout files."""

from .layout import DisplayConfig, DisplayLayout, InsetsConfig, RectConfig

__all__ = [
    "DisplayConfig",
    "DisplayLayout",
    "InsetsConfig",
    "RectConfig",
]
