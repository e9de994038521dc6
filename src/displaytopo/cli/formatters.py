"""Output formatters for the command line tools.

- JSON: machine-readable
- Table: fixed-width text for terminals
"""

import json
from collections.abc import Sequence
from typing import Any

from ..coordinates.types import Rect
from ..displays.display import Display


def _rect_dict(rect: Rect | None) -> dict[str, float] | None:
    if rect is None:
        return None
    return {"x": rect.x, "y": rect.y, "width": rect.width, "height": rect.height}


def display_to_dict(index: int, display: Display) -> dict[str, Any]:
    """Convert a display to a JSON-friendly dict."""
    return {
        "index": index,
        "name": display.name,
        "isMain": display.is_main,
        "scale": display.scale,
        "physicalBounds": _rect_dict(display.physical_bounds),
        "logicalBounds": _rect_dict(display.logical_bounds),
        "userBounds": _rect_dict(display.user_bounds),
    }


def format_displays(
    displays: Sequence[Display], total: Rect | None = None, format_type: str = "table"
) -> str:
    """Format resolved displays in the specified format.

    Args:
        displays: Resolved displays
        total: Optional total logical bounds
        format_type: Output format ("json" or "table")

    Returns:
        Formatted string output

    Raises:
        ValueError: If format_type is not recognized
    """
    if format_type == "json":
        return _format_json(displays, total)
    elif format_type == "table":
        return _format_table(displays, total)
    else:
        raise ValueError(f"Unknown format type: {format_type}")


def _format_json(displays: Sequence[Display], total: Rect | None) -> str:
    output: dict[str, Any] = {
        "displays": [display_to_dict(i, d) for i, d in enumerate(displays)],
    }
    if total is not None:
        output["totalBounds"] = _rect_dict(total)

    return json.dumps(output, indent=2)


def _format_rect(rect: Rect | None) -> str:
    if rect is None:
        return "-"
    return f"{rect.x:g},{rect.y:g} {rect.width:g}x{rect.height:g}"


def _format_table(displays: Sequence[Display], total: Rect | None) -> str:
    lines = []

    header = f"{'#':>2}  {'name':<12} {'scale':>5}  {'physical':<22} {'logical':<22} {'user':<22}"
    lines.append(header)
    lines.append("-" * len(header))

    for i, display in enumerate(displays):
        name = (display.name or "")[:11] + ("*" if display.is_main else "")
        lines.append(
            f"{i:>2}  {name:<12} {display.scale:>5g}  "
            f"{_format_rect(display.physical_bounds):<22} "
            f"{_format_rect(display.logical_bounds):<22} "
            f"{_format_rect(display.user_bounds):<22}"
        )

    if total is not None:
        lines.append("")
        lines.append(f"Total logical bounds: {_format_rect(total)}")

    return "\n".join(lines)
