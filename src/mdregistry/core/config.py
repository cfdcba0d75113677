"""
Configuration for effective registry resolution (YAML defaults + env overrides).

Configuration sources (highest to lowest priority):
1. Environment variables: MDREGISTRY_<section>__<key>
2. Bundled defaults: mdregistry.data/config/registry.yaml

Configuration is loaded on every access; nothing is cached between calls.
"""
from __future__ import annotations

import copy
import json
import logging
import os
from functools import cached_property
from pathlib import Path
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple

from mdregistry.core.exceptions import ConfigError
from mdregistry.data import read_yaml as read_data_yaml

logger = logging.getLogger(__name__)

ENV_PREFIX = "MDREGISTRY_"


class ConfigManager:
    """Load bundled configuration and apply ``MDREGISTRY_*`` overrides."""

    def __init__(self, environ: Optional[Mapping[str, str]] = None) -> None:
        self.environ = os.environ if environ is None else environ

    def _as_json(self, v: str) -> Optional[Any]:
        s = v.strip()
        if (s.startswith("{") and s.endswith("}")) or (s.startswith("[") and s.endswith("]")):
            try:
                return json.loads(s)
            except ValueError:
                return None
        return None

    def _coerce_type(self, value: str) -> Any:
        result = self._as_json(value)
        if result is not None:
            return result
        return value.strip()

    def _parse_env_key(self, raw: str) -> List[str]:
        segs = raw.split("__")
        if any(seg == "" for seg in segs):
            raise ConfigError(
                f"Malformed {ENV_PREFIX}* key: empty segment in '{raw}'.",
                context={"key": f"{ENV_PREFIX}{raw}"},
            )
        return [seg.lower() for seg in segs]

    def _iter_env_overrides(self) -> Iterator[Tuple[List[str], Any]]:
        for key in sorted(self.environ.keys()):
            if not key.startswith(ENV_PREFIX):
                continue
            raw = key[len(ENV_PREFIX):]
            if not raw:
                raise ConfigError(f"Malformed {ENV_PREFIX}* key", context={"key": key})
            yield self._parse_env_key(raw), self._coerce_type(self.environ[key])

    def _set_nested(self, root: Dict[str, Any], path: List[str], value: Any) -> None:
        cur = root
        for part in path[:-1]:
            key_candidates = {k.lower(): k for k in cur.keys() if isinstance(k, str)}
            key_to_use = key_candidates.get(part, part)
            nxt = cur.setdefault(key_to_use, {})
            if not isinstance(nxt, dict):
                raise ConfigError(
                    f"Cannot override '{'.'.join(path)}': '{key_to_use}' is not a section",
                    context={"path": path},
                )
            cur = nxt
        leaf = path[-1]
        lower_map = {k.lower(): k for k in cur.keys() if isinstance(k, str)}
        cur[lower_map.get(leaf, leaf)] = value

    def apply_env_overrides(self, cfg: Dict[str, Any]) -> None:
        for path, typed_value in self._iter_env_overrides():
            logger.debug("Applying env override %s", ".".join(path))
            self._set_nested(cfg, path, typed_value)

    def load_config(self) -> Dict[str, Any]:
        """Return the merged configuration as a new dict."""
        cfg = copy.deepcopy(read_data_yaml("config", "registry.yaml"))
        if not isinstance(cfg, dict):
            raise ConfigError("Bundled registry.yaml must contain a mapping")
        self.apply_env_overrides(cfg)
        return cfg


class RegistryConfig:
    """Typed access to the ``registry`` configuration section."""

    def __init__(self, environ: Optional[Mapping[str, str]] = None) -> None:
        self._config = ConfigManager(environ).load_config()

    @cached_property
    def section(self) -> Dict[str, Any]:
        section = self._config.get("registry") or {}
        if not isinstance(section, dict):
            raise ConfigError("registry section must be a mapping")
        return section

    def _required_str(self, key: str) -> str:
        value = self.section.get(key)
        if not isinstance(value, str) or not value.strip():
            raise ConfigError(f"registry.{key} must be a non-empty string", context={"key": key})
        return value.strip()

    @cached_property
    def project_file(self) -> str:
        """Name of the project file searched for upward from a directory."""
        return self._required_str("project_file")

    @cached_property
    def customizations_key(self) -> str:
        return self._required_str("customizations_key")

    @cached_property
    def presets_key(self) -> str:
        return self._required_str("presets_key")

    @cached_property
    def preset_dirs(self) -> List[Path]:
        """Extra preset directories, in search order (unresolved)."""
        raw = self.section.get("preset_dirs") or []
        if isinstance(raw, str):
            raw = [p for p in raw.split(os.pathsep) if p.strip()]
        if not isinstance(raw, list):
            raise ConfigError("registry.preset_dirs must be a list of paths")
        return [Path(str(p)).expanduser() for p in raw]


__all__ = ["ConfigManager", "RegistryConfig", "ENV_PREFIX"]
