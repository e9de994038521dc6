"""Configuration management for displaytopo using pydantic-settings.

Settings can be supplied through environment variables (``DISPLAYTOPO_``
prefix), a ``.env`` file, or direct instantiation.
"""

from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class DisplaySettings(BaseSettings):
    """Main configuration settings for display topology resolution."""

    model_config = SettingsConfigDict(
        env_prefix="DISPLAYTOPO_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Adjacency tolerance
    edge_abs_tolerance: float = Field(
        1e-6, ge=0.0, description="Absolute tolerance when comparing edge coordinates"
    )
    edge_rel_tolerance: float = Field(
        1e-9, ge=0.0, description="Relative tolerance when comparing edge coordinates"
    )

    # Registry settings
    registry_backend: Literal["mss", "static"] = Field(
        "mss", description="Where raw display records come from"
    )
    layout_file: Path | None = Field(
        None, description="Layout file used by the static registry backend"
    )
    enable_dpi_scaling: bool = Field(True, description="Query the system DPI for mss displays")
    default_scale: float = Field(
        1.0, gt=0.0, description="Scale factor used when the DPI cannot be detected"
    )

    # Logging settings
    debug_mode: bool = Field(False, description="Enable debug logging")
    log_level: str = Field("INFO", description="Log level when debug mode is off")
    structured_logging: bool = Field(True, description="Render logs as JSON")
    log_file: Path | None = Field(None, description="Optional log file")

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {value}")
        return level

    @property
    def effective_log_level(self) -> str:
        """Log level after applying debug mode."""
        return "DEBUG" if self.debug_mode else self.log_level


# Singleton instance
_settings: DisplaySettings | None = None


def get_settings() -> DisplaySettings:
    """Get the cached settings instance.

    Returns:
        DisplaySettings instance
    """
    global _settings

    if _settings is None:
        _settings = DisplaySettings()

    return _settings


def reset_settings() -> None:
    """Reset the settings singleton (mainly for testing)."""
    global _settings
    _settings = None
