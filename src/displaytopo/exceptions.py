"""Exception hierarchy for displaytopo.

This module re-exports all exceptions from domain-specific modules
for convenience.
"""

from .base_exceptions import DisplayTopologyException
from .config_exceptions import ConfigurationException, InvalidConfigurationException
from .topology_exceptions import (
    DisconnectedTopologyError,
    EmptyTopologyError,
    InvalidDisplayError,
    NoMatchingEdgeError,
    RegistryException,
    TopologyException,
    topology_error_context,
)

__all__ = [
    # Base
    "DisplayTopologyException",
    # Topology
    "TopologyException",
    "EmptyTopologyError",
    "DisconnectedTopologyError",
    "NoMatchingEdgeError",
    "InvalidDisplayError",
    "RegistryException",
    "topology_error_context",
    # Configuration
    "ConfigurationException",
    "InvalidConfigurationException",
]
