"""displaytopo CLI - Main entry point.

Provides commands for validating layout files, resolving display
topologies and converting coordinates.

Exit codes:
    0: Success
    2: Configuration error
    3: Topology or runtime error
"""

import json
import sys

import click

from .. import __version__
from ..base_exceptions import DisplayTopologyException
from ..config.loader import load_layout
from ..config_exceptions import ConfigurationException
from ..coordinates.types import Point
from ..displays.display import Display
from ..displays.mapper import CoordinateMapper
from ..displays.resolver import LogicalBoundsResolver
from ..logging import setup_logging
from ..topology_exceptions import TopologyException
from .formatters import format_displays

# Exit codes
EXIT_SUCCESS = 0
EXIT_CONFIG_ERROR = 2
EXIT_TOPOLOGY_ERROR = 3


def _configure_logging(verbose: bool) -> None:
    setup_logging(level="DEBUG" if verbose else "WARNING", structured=False)


def _load_displays(layout_path: str) -> list[Display]:
    """Load raw displays from a layout file, exiting on configuration errors."""
    try:
        return load_layout(layout_path).to_displays()
    except ConfigurationException as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(EXIT_CONFIG_ERROR)


def _resolve(displays: list[Display]) -> list[Display]:
    """Resolve displays, exiting on topology errors."""
    try:
        return LogicalBoundsResolver().resolve(displays)
    except TopologyException as e:
        click.echo(f"Topology error: {e}", err=True)
        sys.exit(EXIT_TOPOLOGY_ERROR)


@click.group()
@click.version_option(version=__version__, prog_name="displaytopo")
@click.pass_context
def main(ctx: click.Context) -> None:
    """displaytopo CLI - Multi-monitor logical coordinate resolution.

    Validate layout files, resolve logical bounds and convert coordinates.
    """
    ctx.ensure_object(dict)


@main.command()
@click.argument("layout_path", type=click.Path(exists=True))
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
def validate(layout_path: str, verbose: bool) -> None:
    """Validate a display layout file.

    LAYOUT_PATH: Path to the layout file (JSON or YAML)
    """
    _configure_logging(verbose)

    displays = _load_displays(layout_path)
    click.echo(f"Layout is valid: {layout_path} ({len(displays)} displays)")

    if verbose:
        for i, display in enumerate(displays):
            click.echo(f"  {i}: {display!r}")

    sys.exit(EXIT_SUCCESS)


@main.command()
@click.argument("layout_path", type=click.Path(exists=True), required=False)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["table", "json"]),
    default="table",
    help="Output format",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
def resolve(layout_path: str | None, output_format: str, verbose: bool) -> None:
    """Resolve logical bounds for a layout.

    LAYOUT_PATH: Path to the layout file. When omitted, the connected
    monitors are enumerated with MSS.
    """
    _configure_logging(verbose)

    if layout_path is not None:
        displays = _load_displays(layout_path)
    else:
        from ..registry.mss_registry import MSSDisplayRegistry

        try:
            displays = MSSDisplayRegistry().enumerate_displays()
        except DisplayTopologyException as e:
            click.echo(f"Error: {e}", err=True)
            sys.exit(EXIT_TOPOLOGY_ERROR)

    resolved = _resolve(displays)
    total = CoordinateMapper(resolved).total_bounds()
    click.echo(format_displays(resolved, total, output_format))
    sys.exit(EXIT_SUCCESS)


@main.command()
@click.argument("layout_path", type=click.Path(exists=True))
@click.argument("x", type=float)
@click.argument("y", type=float)
@click.option(
    "--to-physical",
    is_flag=True,
    help="Treat X Y as logical and convert to physical (default: physical to logical)",
)
@click.option("--round", "round_result", is_flag=True, help="Round the result to whole pixels")
@click.option("--json", "as_json", is_flag=True, help="Output JSON")
def convert(
    layout_path: str, x: float, y: float, to_physical: bool, round_result: bool, as_json: bool
) -> None:
    """Convert a point between physical and logical space.

    LAYOUT_PATH: Path to the layout file (JSON or YAML)
    """
    _configure_logging(False)

    mapper = CoordinateMapper(_resolve(_load_displays(layout_path)))
    point = Point(x, y)

    if to_physical:
        converted = mapper.logical_to_physical(point)
        display = mapper.display_for_point(point, physical=False)
    else:
        converted = mapper.physical_to_logical(point)
        display = mapper.display_for_point(point, physical=True)

    index = next((i for i, d in enumerate(mapper.displays) if d is display), None)

    if round_result:
        converted = converted.rounded()

    if as_json:
        click.echo(json.dumps({"x": converted.x, "y": converted.y, "display": index}))
    else:
        click.echo(f"{converted.x:g} {converted.y:g} (display {index})")

    sys.exit(EXIT_SUCCESS)

