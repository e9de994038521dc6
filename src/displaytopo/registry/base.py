"""Interface for platform display registries."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..displays.display import Display


class DisplayRegistry(ABC):
    """Source of raw display records.

    Implementations talk to the platform (or to a fixed layout) and report
    one unresolved Display per monitor, in the platform's enumeration order.
    """

    name: str = "registry"

    @abstractmethod
    def enumerate_displays(self) -> list["Display"]:
        """Enumerate the connected displays.

        Returns:
            Raw displays in enumeration order

        Raises:
            RegistryException: If the platform cannot be queried
        """
        pass
