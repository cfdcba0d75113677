"""Named registry presets.

A preset is a partial registry stored as ``<name>.json``. Presets are searched
in the configured extra directories first, then in the bundled
``mdregistry.data/presets`` directory; the first match wins.

Unlike a missing project, a preset that cannot be loaded is always an error.
"""
from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from mdregistry.core.config import RegistryConfig
from mdregistry.core.exceptions import PresetLoadError
from mdregistry.core.schemas import SchemaValidationError, validate_registry_shape
from mdregistry.core.utils.io import read_json
from mdregistry.data import get_data_path

from .merge import first_level_merge
from .types import MetadataRegistry, empty_registry

logger = logging.getLogger(__name__)

_PRESET_NAME_RE = re.compile(r"^[A-Za-z0-9][A-Za-z0-9_.-]*$")


def bundled_presets_dir() -> Path:
    return get_data_path("presets")


class PresetStore:
    """Load presets by name from an ordered list of directories."""

    def __init__(self, extra_dirs: Optional[Sequence[Path]] = None) -> None:
        self.search_dirs: List[Path] = [Path(d) for d in (extra_dirs or [])]
        self.search_dirs.append(bundled_presets_dir())

    @classmethod
    def from_config(
        cls, config: Optional[RegistryConfig] = None, *, base_dir: Optional[Path] = None
    ) -> "PresetStore":
        """Build a store from ``registry.preset_dirs``.

        Relative directories resolve against ``base_dir`` (the project root when
        known), else the current working directory.
        """
        config = config or RegistryConfig()
        base = Path(base_dir) if base_dir is not None else Path.cwd()
        dirs = [d if d.is_absolute() else base / d for d in config.preset_dirs]
        return cls(dirs)

    def path_for(self, name: str) -> Path:
        """Return the file that would be read for ``name``.

        When no directory holds the preset, the bundled location is returned so
        error messages point at the canonical place.

        Raises:
            PresetLoadError: a search directory cannot be accessed
        """
        filename = f"{name}.json"
        for directory in self.search_dirs:
            candidate = directory / filename
            try:
                if candidate.is_file():
                    return candidate
            except OSError as exc:
                raise PresetLoadError(name, candidate, details=str(exc)) from exc
        return self.search_dirs[-1] / filename

    def load(self, name: str) -> MetadataRegistry:
        """Read preset ``name`` as a full registry.

        Raises:
            PresetLoadError: invalid name, missing file, unreadable or malformed
                content, or a document that is not registry-shaped
        """
        if not isinstance(name, str) or not _PRESET_NAME_RE.match(name):
            raise PresetLoadError(str(name), bundled_presets_dir(), details="invalid preset name")

        path = self.path_for(name)
        try:
            raw = read_json(path)
        except FileNotFoundError as exc:
            raise PresetLoadError(name, path, details="not found") from exc
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise PresetLoadError(name, path, details=str(exc)) from exc

        try:
            validate_registry_shape(raw)
        except SchemaValidationError as exc:
            raise PresetLoadError(name, path, details=str(exc)) from exc

        logger.debug("Loaded preset %s from %s", name, path)
        return first_level_merge(empty_registry(), raw)

    def available(self) -> List[str]:
        """Names of all presets visible to this store, sorted."""
        names = set()
        for directory in self.search_dirs:
            try:
                if directory.is_dir():
                    names.update(p.stem for p in directory.glob("*.json") if p.is_file())
            except OSError as exc:
                logger.warning("Skipping unreadable preset directory %s: %s", directory, exc)
        return sorted(names)


def resolve_presets(
    names: Iterable[str], store: Optional[PresetStore] = None
) -> MetadataRegistry:
    """Fold presets into one registry, later names overriding earlier ones.

    A preset that fails to load aborts the whole resolution.
    """
    store = store or PresetStore.from_config()
    resolved = empty_registry()
    for name in names:
        resolved = first_level_merge(resolved, store.load(name))
    return resolved


__all__ = ["PresetStore", "resolve_presets", "bundled_presets_dir"]
