"""Layout file loading.

Layout files are JSON, or YAML when PyYAML is installed.
"""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from ..config_exceptions import InvalidConfigurationException
from .models.layout import DisplayLayout


def _read_layout_data(path: Path) -> Any:
    text = path.read_text(encoding="utf-8")

    if path.suffix in (".yaml", ".yml"):
        try:
            import yaml
        except ImportError as e:
            raise InvalidConfigurationException(
                str(path), "PyYAML not installed. Install with: pip install pyyaml"
            ) from e
        try:
            return yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise InvalidConfigurationException(str(path), f"invalid YAML: {e}") from e

    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise InvalidConfigurationException(str(path), f"invalid JSON: {e}") from e


def load_layout(path: str | Path) -> DisplayLayout:
    """Load and validate a display layout file.

    Args:
        path: Path to a JSON or YAML layout file

    Returns:
        Validated DisplayLayout

    Raises:
        InvalidConfigurationException: If the file is missing, unparsable or invalid
    """
    path = Path(path)

    if not path.exists():
        raise InvalidConfigurationException(str(path), "layout file not found")

    data = _read_layout_data(path)

    # A bare list is accepted as the display list
    if isinstance(data, list):
        data = {"displays": data}

    try:
        return DisplayLayout.model_validate(data)
    except ValidationError as e:
        raise InvalidConfigurationException(
            str(path), f"{e.error_count()} validation error(s)", errors=e.errors()
        ) from e
