from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Mapping


class MdRegistryError(Exception):
    """Base exception for the metadata registry package."""

    context: Dict[str, Any]

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        if context is not None:
            # Store a shallow copy to avoid accidental mutation.
            self.context = dict(context)
        else:
            self.context = {}

    def to_json_error(self) -> Dict[str, Any]:
        """Return a JSON-serializable error payload."""
        return {
            "message": str(self),
            "code": self.__class__.__name__,
            "context": self.context,
        }


class PresetLoadError(MdRegistryError, LookupError):
    """Raised when a named preset cannot be read or parsed.

    Always fatal: a project naming a broken preset never gets a partial registry.
    """

    def __init__(
        self,
        preset: str,
        path: Path | str,
        *,
        details: str | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        ctx = dict(context or {})
        ctx["preset"] = preset
        ctx["path"] = str(path)
        if details:
            ctx["details"] = details
        message = f"Failed to load preset {preset} in {path}"
        MdRegistryError.__init__(self, message, context=ctx)
        LookupError.__init__(self, message)
        self.preset = preset
        self.path = Path(path)


class ConfigError(MdRegistryError, ValueError):
    """Raised when package configuration is invalid."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        MdRegistryError.__init__(self, message, context=context)
        ValueError.__init__(self, message)


__all__ = [
    "MdRegistryError",
    "PresetLoadError",
    "ConfigError",
]
