import os
import sys
from pathlib import Path
from typing import Any, Callable, Optional, Sequence

import pytest

# Keep the repository free of Python bytecode and __pycache__ artifacts during tests.
sys.dont_write_bytecode = True

TESTS_ROOT = Path(__file__).resolve().parent
REPO_ROOT = TESTS_ROOT.parent
SRC_ROOT = REPO_ROOT / "src"

# Make src/ importable as 'mdregistry'
for p in (SRC_ROOT, TESTS_ROOT):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))

from helpers.io_utils import write_json  # noqa: E402


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Drop MDREGISTRY_* overrides inherited from the developer's shell."""
    for key in list(os.environ):
        if key.startswith("MDREGISTRY_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def make_project(tmp_path: Path) -> Callable[..., Path]:
    """Create an sfdx-project.json under tmp_path and return its directory."""

    def _make(
        customizations: Optional[dict[str, Any]] = None,
        presets: Optional[Sequence[str]] = None,
        *,
        subdir: str = "project",
        extra: Optional[dict[str, Any]] = None,
    ) -> Path:
        root = tmp_path / subdir
        data: dict[str, Any] = {
            "packageDirectories": [{"path": "force-app", "default": True}],
            "sourceApiVersion": "59.0",
        }
        if customizations is not None:
            data["registryCustomizations"] = customizations
        if presets is not None:
            data["registryPresets"] = list(presets)
        data.update(extra or {})
        write_json(root / "sfdx-project.json", data)
        return root

    return _make


@pytest.fixture
def preset_dir(tmp_path: Path) -> Callable[..., Path]:
    """Write preset JSON files into tmp_path/presets and return the directory."""
    directory = tmp_path / "presets"
    directory.mkdir(exist_ok=True)

    def _write(name: str, content: Any) -> Path:
        write_json(directory / f"{name}.json", content)
        return directory

    return _write
