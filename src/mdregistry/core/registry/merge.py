"""First-level registry merging.

Only the children of the top-level categories are merged. A key present in
both operands takes the override value as a whole; values are never merged
recursively (unlike ``deep_merge`` used for configuration).
"""
from __future__ import annotations

from typing import Any, Dict, Mapping

from .types import CATEGORIES, MetadataRegistry


def _category(registry: Mapping[str, Any], name: str) -> Mapping[str, Any]:
    value = registry.get(name)
    return value if value is not None else {}


def first_level_merge(
    original: Mapping[str, Any], overrides: Mapping[str, Any]
) -> MetadataRegistry:
    """Merge two registries category by category without mutating either.

    Args:
        original: Base registry (lower priority)
        overrides: Registry whose entries win on key collisions. Missing
            categories are treated as empty.

    Returns:
        New registry with all four categories present

    Example:
        >>> base = {"types": {"A": 1}, "suffixes": {"a": "A"}}
        >>> merged = first_level_merge(base, {"types": {"A": 2, "B": 3}})
        >>> merged["types"], merged["suffixes"]
        ({'A': 2, 'B': 3}, {'a': 'A'})
    """
    merged: Dict[str, Dict[str, Any]] = {}
    for name in CATEGORIES:
        merged[name] = {**_category(original, name), **_category(overrides, name)}
    return merged  # type: ignore[return-value]


__all__ = ["first_level_merge"]
