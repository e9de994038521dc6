"""Display service: owns the current resolved display topology.

The service pulls raw display records from a registry, resolves them, and
keeps the last good result. Call ``refresh()`` at startup and whenever the
platform reports a display change.

There is no process-wide instance: create one service per display source
and pass it where it is needed. All calls are expected to come from the one
thread that owns the UI; the service does no locking.

Usage:
    >>> from displaytopo.displays import DisplayService
    >>> from displaytopo.registry import StaticDisplayRegistry
    >>>
    >>> service = DisplayService(StaticDisplayRegistry(displays))
    >>> service.refresh()
    True
    >>> service.mapper.physical_to_logical(Point(1100, 200))
    Point(x=1050.0, y=100.0)
"""

from collections.abc import Callable

from ..base_exceptions import DisplayTopologyException
from ..config.settings import DisplaySettings, get_settings
from ..logging import TopologyLogger, get_logger
from ..registry.base import DisplayRegistry
from ..topology_exceptions import TopologyException, topology_error_context
from .display import Display
from .mapper import CoordinateMapper
from .resolver import LogicalBoundsResolver

logger = get_logger(__name__)

TopologyListener = Callable[[tuple[Display, ...], tuple[Display, ...]], None]


class DisplayService:
    """Current resolved display set plus change notification.

    Example:
        >>> service = DisplayService(registry)
        >>> service.add_listener(lambda old, new: print(f"{len(old)} -> {len(new)}"))
        >>> service.refresh()  # prints "0 -> 2" on first successful refresh
        >>> service.primary_display()
        Display(physical=Rect(...), scale=1.0, ... (main))
    """

    def __init__(
        self,
        registry: DisplayRegistry,
        settings: DisplaySettings | None = None,
        resolver: LogicalBoundsResolver | None = None,
    ) -> None:
        """Initialize the service. Displays stay empty until refresh() is called.

        Args:
            registry: Source of raw display records
            settings: Settings, defaults to get_settings()
            resolver: Resolver to use, built from settings when omitted
        """
        self.registry = registry
        self.settings = settings or get_settings()
        self.resolver = resolver or LogicalBoundsResolver(settings=self.settings)
        self._displays: tuple[Display, ...] = ()
        self._mapper = CoordinateMapper(self._displays)
        self._listeners: list[TopologyListener] = []
        self._topology_logger = TopologyLogger(logger)
        self.last_error: DisplayTopologyException | None = None

    @property
    def displays(self) -> tuple[Display, ...]:
        """Resolved displays in enumeration order."""
        return self._displays

    @property
    def mapper(self) -> CoordinateMapper:
        """Coordinate mapper over the current displays."""
        return self._mapper

    def add_listener(self, listener: TopologyListener) -> None:
        """Register a callback invoked with (old, new) when the displays change."""
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove_listener(self, listener: TopologyListener) -> None:
        """Unregister a callback. Unknown callbacks are ignored."""
        if listener in self._listeners:
            self._listeners.remove(listener)

    def refresh(self, raise_on_error: bool = False) -> bool:
        """Re-enumerate and re-resolve the displays.

        On failure the previous displays are kept and the error is stored
        in ``last_error``.

        Args:
            raise_on_error: Re-raise enumeration or topology errors instead
                of returning False

        Returns:
            True if the new topology was applied

        Raises:
            DisplayTopologyException: Only when raise_on_error is True
        """
        try:
            raw_displays = self.registry.enumerate_displays()
        except DisplayTopologyException as e:
            logger.error("display_enumeration_failed", error=str(e))
            self.last_error = e
            if raise_on_error:
                raise
            return False

        context = self._topology_logger.log_resolution_start(len(raw_displays))

        try:
            with topology_error_context("resolve", display_count=len(raw_displays)):
                resolved = tuple(self.resolver.resolve(raw_displays))
        except TopologyException as e:
            self._topology_logger.log_resolution_end(
                context, success=False, error=e, kept_display_count=len(self._displays)
            )
            self.last_error = e
            if raise_on_error:
                raise
            return False

        self._topology_logger.log_resolution_end(context, success=True)
        self.last_error = None
        self._apply(resolved)
        return True

    def _apply(self, resolved: tuple[Display, ...]) -> None:
        old = self._displays
        self._displays = resolved
        self._mapper = CoordinateMapper(resolved)

        if old == resolved:
            return

        self._topology_logger.log_topology_change(len(old), len(resolved))
        for listener in list(self._listeners):
            listener(old, resolved)

    def primary_display(self) -> Display | None:
        """Get the main display of the current topology."""
        return self._mapper.primary_display()

    def __repr__(self) -> str:
        """Developer-friendly representation."""
        total = self._mapper.total_bounds()
        return (
            f"DisplayService("
            f"displays={len(self._displays)}, "
            f"total_bounds={total.width}x{total.height} at ({total.x}, {total.y}))"
        )
