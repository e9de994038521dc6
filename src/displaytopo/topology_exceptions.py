"""Topology exceptions.

This module contains exceptions raised while turning a set of raw display
records into a resolved logical desktop, plus registry failures.
"""

from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from typing import Any

from .base_exceptions import DisplayTopologyException


class TopologyException(DisplayTopologyException):
    """Base exception for topology resolution errors."""

    pass


class EmptyTopologyError(TopologyException):
    """Raised when a root display is requested from an empty display set."""

    def __init__(self, **kwargs) -> None:
        """Initialize with optional context."""
        super().__init__(
            "Cannot select a root display: no displays were supplied",
            error_code="EMPTY_TOPOLOGY",
            context=kwargs,
        )


class DisconnectedTopologyError(TopologyException):
    """Raised when some displays cannot be reached from the root display."""

    def __init__(self, unreachable: Sequence[int], root: int, **kwargs) -> None:
        """Initialize with the indices of the unreachable displays."""
        indices = ", ".join(str(i) for i in unreachable)
        super().__init__(
            f"Displays [{indices}] do not touch any display connected to root display {root}",
            error_code="DISCONNECTED_TOPOLOGY",
            context={"unreachable": list(unreachable), "root": root, **kwargs},
        )
        self.unreachable = list(unreachable)
        self.root = root


class NoMatchingEdgeError(TopologyException):
    """Raised when a display shares no edge with the parent it was attached to.

    This indicates an inconsistency between adjacency detection and
    resolution and should never happen.
    """

    def __init__(self, index: int, parent: int, **kwargs) -> None:
        """Initialize with the offending child/parent pair."""
        super().__init__(
            f"Display {index} does not share an edge with its parent display {parent}",
            error_code="NO_MATCHING_EDGE",
            context={"index": index, "parent": parent, **kwargs},
        )


class InvalidDisplayError(TopologyException):
    """Raised when a display record carries impossible values."""

    def __init__(self, field_name: str, reason: str, **kwargs) -> None:
        """Initialize with field details."""
        super().__init__(
            f"Invalid display field '{field_name}': {reason}",
            error_code="INVALID_DISPLAY",
            context={"field": field_name, "reason": reason, **kwargs},
        )


class RegistryException(DisplayTopologyException):
    """Raised when the platform display registry cannot enumerate displays."""

    def __init__(self, reason: str, backend: str | None = None, **kwargs) -> None:
        """Initialize with enumeration details."""
        message = "Display enumeration failed"
        if backend is not None:
            message += f" ({backend})"
        message += f": {reason}"

        super().__init__(
            message,
            error_code="REGISTRY_FAILED",
            context={"reason": reason, "backend": backend, **kwargs},
        )


@contextmanager
def topology_error_context(operation: str, **details: Any) -> Iterator[None]:
    """Context manager to add topology operation context to exceptions.

    Usage:
        with topology_error_context("resolve", display_count=3):
            resolve(displays)

    Args:
        operation: Operation being performed
        **details: Additional details about the operation

    Raises:
        TopologyException: Wraps unexpected exceptions with operation context
    """
    try:
        yield
    except DisplayTopologyException:
        raise
    except Exception as e:
        raise TopologyException(
            f"{operation} failed: {e}", error_code="TOPOLOGY_ERROR", context=details
        ) from e
