"""structlog setup for displaytopo.

Events are rendered by structlog and written through the standard library
``logging`` handlers, so applications embedding displaytopo can route them
like any other log record. The first call to ``get_logger`` (made when the
package is imported) configures structlog from the settings, but only adds
root handlers when the root logger has none, so a host application keeps its
own. Call ``setup_logging`` or ``configure_from_settings`` to take over the
root logger explicitly.
"""

import logging
import sys
import time
from pathlib import Path
from typing import Any, cast

import structlog

from ..config.settings import DisplaySettings, get_settings

_configured = False


def _build_processors(structured: bool, add_timestamp: bool, colorize: bool) -> list[Any]:
    processors: list[Any] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
    ]
    if add_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    processors += [
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if structured:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=colorize))
    return processors


def _build_handlers(console: bool, log_file: Path | None) -> list[logging.Handler]:
    handlers: list[logging.Handler] = []

    # stdout belongs to command output
    if console:
        handlers.append(logging.StreamHandler(sys.stderr))

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    if not handlers:
        handlers.append(logging.NullHandler())

    for handler in handlers:
        handler.setFormatter(logging.Formatter("%(message)s"))
    return handlers


def setup_logging(
    level: str = "INFO",
    log_file: Path | None = None,
    structured: bool = True,
    console: bool = True,
    add_timestamp: bool = True,
    colorize: bool = False,
    replace_handlers: bool = True,
) -> None:
    """Configure structlog and the root stdlib logger.

    Args:
        level: Minimum level name, e.g. "DEBUG" or "WARNING"
        log_file: Also write events to this file
        structured: Render JSON lines instead of console text
        console: Write events to stderr
        add_timestamp: Add an ISO timestamp to every event
        colorize: Colour console text (ignored for JSON output)
        replace_handlers: Replace existing root handlers. When False, a root
            logger that already has handlers is left untouched.
    """
    global _configured

    structlog.configure(
        processors=_build_processors(structured, add_timestamp, colorize and console),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    root = logging.getLogger()
    if replace_handlers or not root.handlers:
        logging.basicConfig(
            format="%(message)s",
            level=getattr(logging, level.upper()),
            handlers=_build_handlers(console, log_file),
            force=True,
        )
    _configured = True


def configure_from_settings(
    settings: DisplaySettings | None = None, replace_handlers: bool = True
) -> None:
    """Configure logging from DisplaySettings.

    Debug mode switches to the coloured console renderer at DEBUG level.
    See ``setup_logging`` for ``replace_handlers``.
    """
    settings = settings or get_settings()
    setup_logging(
        level=settings.effective_log_level,
        log_file=settings.log_file,
        structured=settings.structured_logging and not settings.debug_mode,
        colorize=settings.debug_mode,
        replace_handlers=replace_handlers,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger, configuring logging on first use.

    Args:
        name: Logger name, normally ``__name__``
    """
    if not _configured:
        try:
            configure_from_settings(replace_handlers=False)
        except (OSError, ValueError):
            # Unusable settings or log path
            setup_logging(level="INFO", structured=False, replace_handlers=False)
    return cast(structlog.stdlib.BoundLogger, structlog.get_logger(name))


class TopologyLogger:
    """Resolution and topology change events."""

    def __init__(self, base_logger: structlog.stdlib.BoundLogger | None = None) -> None:
        self.logger = base_logger or get_logger(__name__)

    def log_resolution_start(self, display_count: int, **kwargs) -> dict[str, Any]:
        """Emit ``topology_resolution_started`` and start timing the pass.

        Returns:
            Context to hand back to ``log_resolution_end``
        """
        self.logger.debug("topology_resolution_started", display_count=display_count, **kwargs)
        return {"display_count": display_count, "start_time": time.perf_counter(), **kwargs}

    def log_resolution_end(
        self,
        context: dict[str, Any],
        success: bool,
        error: Exception | None = None,
        **kwargs,
    ) -> None:
        """Emit ``topology_resolved`` or ``topology_resolution_failed`` with the duration.

        Args:
            context: Value returned by ``log_resolution_start``
            success: Whether the pass produced a topology
            error: The failure, if any
            **kwargs: Extra fields for the event
        """
        fields = {key: value for key, value in context.items() if key != "start_time"}
        fields["duration"] = time.perf_counter() - context["start_time"]
        fields.update(kwargs)

        if success:
            self.logger.info("topology_resolved", **fields)
            return

        fields["error"] = str(error) if error else None
        fields["error_type"] = type(error).__name__ if error else None
        self.logger.error("topology_resolution_failed", **fields)

    def log_topology_change(self, old_count: int, new_count: int, **kwargs) -> None:
        """Emit ``topology_changed`` with the display counts before and after."""
        self.logger.info("topology_changed", old_count=old_count, new_count=new_count, **kwargs)
