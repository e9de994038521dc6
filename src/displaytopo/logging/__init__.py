"""Logging module for displaytopo."""

from .logger import TopologyLogger, configure_from_settings, get_logger, setup_logging

__all__ = [
    "setup_logging",
    "configure_from_settings",
    "get_logger",
    "TopologyLogger",
]
