"""Project access for registry variants.

Locates the project file by walking up from a directory and extracts the
declared registry customizations and preset names. Every failure to obtain a
usable project is reported as a :class:`ProjectNotFound` value, never raised:
missing projects are an expected condition for callers.
"""
from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional, Protocol, Tuple, Union

from mdregistry.core.config import RegistryConfig
from mdregistry.core.schemas import SchemaValidationError, validate_registry_shape
from mdregistry.core.utils.io import read_json

from .types import empty_registry

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ProjectFound:
    """A project file was found and parsed.

    Attributes:
        path: Absolute path of the project file
        customizations: Direct registry overrides (neutral registry when undeclared)
        preset_names: Preset names in application order (empty when undeclared)
    """

    path: Path
    customizations: Mapping[str, Any] = field(default_factory=empty_registry)
    preset_names: Tuple[str, ...] = ()

    @property
    def root(self) -> Path:
        return self.path.parent


@dataclass(frozen=True, slots=True)
class ProjectNotFound:
    """No usable project for ``start_dir``; ``reason`` is for diagnostics only."""

    start_dir: Path
    reason: str


ProjectLookup = Union[ProjectFound, ProjectNotFound]


class ProjectAccessor(Protocol):
    def lookup(self, directory: Path) -> ProjectLookup: ...


def find_project_file(start: Path, filename: str) -> Optional[Path]:
    """Return the nearest ``filename`` in ``start`` or any of its parents."""
    start = start.resolve()
    for candidate_dir in (start, *start.parents):
        candidate = candidate_dir / filename
        if candidate.is_file():
            return candidate
    return None


class SfProjectAccessor:
    """Read registry settings from an ``sfdx-project.json`` style project file."""

    def __init__(self, config: Optional[RegistryConfig] = None) -> None:
        self.config = config or RegistryConfig()

    def lookup(self, directory: Path) -> ProjectLookup:
        directory = Path(directory)
        try:
            if not directory.is_dir():
                return ProjectNotFound(directory, f"{directory} is not a directory")
            project_file = find_project_file(directory, self.config.project_file)
        except OSError as exc:
            return ProjectNotFound(directory, f"unable to access {directory}: {exc}")
        if project_file is None:
            return ProjectNotFound(
                directory, f"no {self.config.project_file} in {directory} or its parents"
            )

        try:
            data = read_json(project_file)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            return ProjectNotFound(directory, f"unable to read {project_file}: {exc}")
        if not isinstance(data, dict):
            return ProjectNotFound(directory, f"{project_file} does not contain a JSON object")

        customizations = data.get(self.config.customizations_key)
        if customizations is None:
            customizations = empty_registry()
        elif not isinstance(customizations, dict):
            return ProjectNotFound(
                directory, f"{self.config.customizations_key} in {project_file} must be an object"
            )
        else:
            try:
                validate_registry_shape(customizations)
            except SchemaValidationError as exc:
                return ProjectNotFound(
                    directory, f"{self.config.customizations_key} in {project_file} is malformed: {exc}"
                )

        presets = data.get(self.config.presets_key)
        if presets is None:
            presets = []
        elif not isinstance(presets, list) or not all(isinstance(p, str) for p in presets):
            return ProjectNotFound(
                directory, f"{self.config.presets_key} in {project_file} must be a list of names"
            )

        logger.debug("Using project file %s", project_file)
        return ProjectFound(
            path=project_file,
            customizations=customizations,
            preset_names=tuple(presets),
        )


__all__ = [
    "ProjectFound",
    "ProjectNotFound",
    "ProjectLookup",
    "ProjectAccessor",
    "SfProjectAccessor",
    "find_project_file",
]
