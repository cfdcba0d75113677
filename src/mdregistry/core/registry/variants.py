"""Effective registry: the bundled registry plus project presets and customizations.

Layering, lowest to highest priority:

1. Bundled baseline (``mdregistry.data/metadataRegistry.json``)
2. Presets named by the project, in the order listed
3. The project's direct customizations

Nothing is cached; every call re-reads the project and presets.
"""
from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Optional

from mdregistry.core.config import RegistryConfig
from mdregistry.core.utils.freeze import deep_freeze
from mdregistry.data import read_json

from .merge import first_level_merge
from .presets import PresetStore, resolve_presets
from .project import ProjectAccessor, ProjectNotFound, SfProjectAccessor
from .types import MetadataRegistry, empty_registry

logger = logging.getLogger(__name__)


def load_baseline_registry() -> MetadataRegistry:
    """Read the bundled registry (a new dict on each call)."""
    return first_level_merge(empty_registry(), read_json("", "metadataRegistry.json"))


def load_variants(
    project_dir: Optional[Path | str] = None,
    *,
    accessor: Optional[ProjectAccessor] = None,
    store: Optional[PresetStore] = None,
) -> MetadataRegistry:
    """Read the project to get registry presets and customizations.

    Args:
        project_dir: Directory to start the project search from (default: cwd)
        accessor: Project accessor (default: ``SfProjectAccessor``)
        store: Preset store (default: built from config, relative to the project root)

    Returns:
        Presets merged in order with customizations on top, or the neutral
        registry when there is no usable project.

    Raises:
        PresetLoadError: if the project names a preset that cannot be loaded
    """
    directory = Path(project_dir) if project_dir is not None else Path.cwd()
    config: Optional[RegistryConfig] = None
    if accessor is None:
        config = RegistryConfig()
        accessor = SfProjectAccessor(config)

    lookup = accessor.lookup(directory)
    if isinstance(lookup, ProjectNotFound):
        logger.debug("no project found, using standard registry (%s)", lookup.reason)
        return empty_registry()

    custom_types = lookup.customizations.get("types") or {}
    if custom_types:
        logger.debug(
            "found registryCustomizations for types [%s] in %s",
            ",".join(custom_types.keys()),
            lookup.path,
        )
    if lookup.preset_names:
        logger.debug("using registryPresets [%s] in %s", ",".join(lookup.preset_names), lookup.path)

    if store is None:
        store = PresetStore.from_config(config, base_dir=lookup.root)
    from_presets = resolve_presets(lookup.preset_names, store)
    return first_level_merge(from_presets, lookup.customizations)


def get_effective_registry(
    project_dir: Optional[Path | str] = None,
    *,
    baseline: Optional[Mapping[str, Any]] = None,
    accessor: Optional[ProjectAccessor] = None,
    store: Optional[PresetStore] = None,
) -> MetadataRegistry:
    """Combine the baseline registry with project overrides and freeze the result.

    The returned registry is read-only all the way down (mappings are
    ``MappingProxyType``, lists are tuples) and shares no state with
    ``baseline`` or any preset.
    """
    if baseline is None:
        baseline = load_baseline_registry()
    variants = load_variants(project_dir, accessor=accessor, store=store)
    return deep_freeze(first_level_merge(baseline, variants))


__all__ = ["get_effective_registry", "load_variants", "load_baseline_registry"]
