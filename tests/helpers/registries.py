"""Registry builders and fakes for tests."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional

from mdregistry.core.exceptions import PresetLoadError
from mdregistry.core.registry import (
    MetadataRegistry,
    ProjectFound,
    ProjectLookup,
    ProjectNotFound,
    empty_registry,
    first_level_merge,
)


def registry(**categories: Mapping[str, Any]) -> MetadataRegistry:
    """Full registry with the given categories filled in."""
    return first_level_merge(empty_registry(), categories)


class FakePresetStore:
    """In-memory preset store recording which presets were requested."""

    def __init__(self, presets: Optional[Dict[str, Mapping[str, Any]]] = None) -> None:
        self.presets = dict(presets or {})
        self.requested: List[str] = []

    def load(self, name: str) -> MetadataRegistry:
        self.requested.append(name)
        if name not in self.presets:
            raise PresetLoadError(name, Path("/fake/presets") / f"{name}.json", details="not found")
        return first_level_merge(empty_registry(), self.presets[name])

    def available(self) -> List[str]:
        return sorted(self.presets)


class FakeAccessor:
    """Project accessor returning a fixed lookup result."""

    def __init__(
        self,
        customizations: Optional[Mapping[str, Any]] = None,
        presets: Iterable[str] = (),
        *,
        found: bool = True,
    ) -> None:
        self.customizations = customizations
        self.presets = tuple(presets)
        self.found = found
        self.seen: List[Path] = []

    def lookup(self, directory: Path) -> ProjectLookup:
        self.seen.append(Path(directory))
        if not self.found:
            return ProjectNotFound(Path(directory), "no project")
        return ProjectFound(
            path=Path(directory) / "sfdx-project.json",
            customizations=self.customizations if self.customizations is not None else empty_registry(),
            preset_names=self.presets,
        )
