"""Root of the displaytopo exception hierarchy."""

from typing import Any


class DisplayTopologyException(Exception):
    """Base class for every error raised by displaytopo.

    Attributes:
        message: Human-readable description
        error_code: Stable code for programmatic handling, e.g. "DISCONNECTED_TOPOLOGY"
        context: Structured details, safe to pass to a logger as fields
    """

    def __init__(
        self, message: str, error_code: str | None = None, context: dict[str, Any] | None = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.context = context or {}

    def __str__(self) -> str:
        if self.error_code is None:
            return self.message
        return f"[{self.error_code}] {self.message}"
