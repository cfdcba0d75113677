"""Effective metadata registry resolution.

Public API:
- ``get_effective_registry``: baseline + presets + customizations, frozen
- ``first_level_merge``: merge two registries category by category
"""
from __future__ import annotations

from mdregistry.core.utils.freeze import deep_freeze, thaw

from .merge import first_level_merge
from .presets import PresetStore, bundled_presets_dir, resolve_presets
from .project import (
    ProjectAccessor,
    ProjectFound,
    ProjectLookup,
    ProjectNotFound,
    SfProjectAccessor,
    find_project_file,
)
from .types import CATEGORIES, MetadataRegistry, empty_registry
from .variants import get_effective_registry, load_baseline_registry, load_variants

__all__ = [
    "CATEGORIES",
    "MetadataRegistry",
    "empty_registry",
    "first_level_merge",
    "PresetStore",
    "bundled_presets_dir",
    "resolve_presets",
    "ProjectAccessor",
    "ProjectFound",
    "ProjectLookup",
    "ProjectNotFound",
    "SfProjectAccessor",
    "find_project_file",
    "get_effective_registry",
    "load_baseline_registry",
    "load_variants",
    "deep_freeze",
    "thaw",
]
