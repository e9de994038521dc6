"""Tests for the displaytopo exception hierarchy."""

import pytest

from displaytopo.exceptions import (
    ConfigurationException,
    DisconnectedTopologyError,
    DisplayTopologyException,
    EmptyTopologyError,
    InvalidConfigurationException,
    InvalidDisplayError,
    NoMatchingEdgeError,
    RegistryException,
    TopologyException,
    topology_error_context,
)


class TestHierarchy:
    """Test exception base classes."""

    @pytest.mark.parametrize(
        "error",
        [
            EmptyTopologyError(),
            DisconnectedTopologyError([1], 0),
            NoMatchingEdgeError(1, 0),
            InvalidDisplayError("scale", "must be positive"),
        ],
    )
    def test_topology_errors(self, error: Exception) -> None:
        """Test that resolution errors share a base class."""
        assert isinstance(error, TopologyException)
        assert isinstance(error, DisplayTopologyException)

    def test_registry_error_is_not_topology_error(self) -> None:
        """Test that enumeration failures are distinct from resolution failures."""
        error = RegistryException("no display server")

        assert isinstance(error, DisplayTopologyException)
        assert not isinstance(error, TopologyException)

    def test_configuration_error(self) -> None:
        """Test configuration error base class."""
        assert isinstance(InvalidConfigurationException("k", "bad"), ConfigurationException)


class TestMessages:
    """Test messages, codes and context."""

    def test_str_includes_code(self) -> None:
        """Test that the error code prefixes the message."""
        assert str(EmptyTopologyError()).startswith("[EMPTY_TOPOLOGY] ")

    def test_str_without_code(self) -> None:
        """Test a plain message."""
        assert str(DisplayTopologyException("plain")) == "plain"

    def test_disconnected_context(self) -> None:
        """Test that unreachable displays are reported."""
        error = DisconnectedTopologyError([2, 3], root=0)

        assert error.unreachable == [2, 3]
        assert error.root == 0
        assert error.context == {"unreachable": [2, 3], "root": 0}
        assert "[2, 3]" in str(error)

    def test_no_matching_edge_context(self) -> None:
        """Test the child/parent pair is recorded."""
        error = NoMatchingEdgeError(4, parent=1)

        assert error.context == {"index": 4, "parent": 1}
        assert error.error_code == "NO_MATCHING_EDGE"

    def test_registry_backend_in_message(self) -> None:
        """Test that the backend name is shown."""
        error = RegistryException("timeout", backend="mss")

        assert str(error) == "[REGISTRY_FAILED] Display enumeration failed (mss): timeout"


class TestTopologyErrorContext:
    """Test topology_error_context."""

    def test_passes_through_own_errors(self) -> None:
        """Test that displaytopo errors are re-raised unchanged."""
        error = EmptyTopologyError()

        with pytest.raises(EmptyTopologyError) as exc_info:
            with topology_error_context("resolve"):
                raise error

        assert exc_info.value is error

    def test_wraps_other_errors(self) -> None:
        """Test that other errors are wrapped with operation context."""
        with pytest.raises(TopologyException) as exc_info:
            with topology_error_context("resolve", display_count=3):
                raise ZeroDivisionError("division by zero")

        assert exc_info.value.error_code == "TOPOLOGY_ERROR"
        assert exc_info.value.context == {"display_count": 3}
        assert "resolve failed" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, ZeroDivisionError)

    def test_no_error(self) -> None:
        """Test that the block runs normally."""
        with topology_error_context("resolve"):
            value = 1

        assert value == 1
