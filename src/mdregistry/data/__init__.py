"""
Bundled data resources.

Provides access to the baseline metadata registry, bundled presets, default
configuration and schemas using importlib.resources.
"""

from __future__ import annotations

import json
from importlib import resources
from pathlib import Path
from typing import Any

import yaml


def get_data_path(subpackage: str, filename: str = "") -> Path:
    """
    Get absolute path to a data file or directory.

    Args:
        subpackage: Name of the data subdirectory (e.g., "config", "presets").
            An empty string addresses the data root itself.
        filename: Optional filename within the subdirectory

    Returns:
        Absolute path to the file or directory

    Example:
        >>> get_data_path("config", "registry.yaml")
        PosixPath('/path/to/mdregistry/data/config/registry.yaml')
    """
    pkg = resources.files("mdregistry.data")
    base = Path(str(pkg / subpackage)) if subpackage else Path(str(pkg))
    return base / filename if filename else base


def read_yaml(subpackage: str, filename: str) -> dict[str, Any]:
    """Read and parse a bundled YAML data file."""
    path = get_data_path(subpackage, filename)
    return yaml.safe_load(path.read_text(encoding="utf-8")) or {}


def read_json(subpackage: str, filename: str) -> Any:
    """Read and parse a bundled JSON data file."""
    path = get_data_path(subpackage, filename)
    return json.loads(path.read_text(encoding="utf-8"))


__all__ = ["get_data_path", "read_yaml", "read_json"]
