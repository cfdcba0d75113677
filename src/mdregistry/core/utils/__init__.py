"""Generic helpers (I/O and immutability) used by the registry core."""
from __future__ import annotations

from .freeze import deep_freeze, thaw
from .io import read_json

__all__ = ["deep_freeze", "thaw", "read_json"]
