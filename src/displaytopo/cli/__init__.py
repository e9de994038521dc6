"""displaytopo Command Line Interface.

Provides CLI commands for:
- Validating display layout files
- Resolving logical bounds for a layout or the connected monitors
- Converting points between physical and logical space

Usage:
    python -m displaytopo.cli --help
    python -m displaytopo.cli resolve layout.json --format json

Or via the installed entry point:
    displaytopo --help
"""

from .main import main

__all__ = ["main"]
