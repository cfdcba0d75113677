"""Registry data model.

A registry is a plain JSON-shaped mapping with four top-level categories.
Values inside each category are opaque to this package.
"""
from __future__ import annotations

from typing import Any, Dict, Tuple, TypedDict


class MetadataRegistry(TypedDict):
    """The four-category registry record.

    Attributes:
        types: type name -> type definition
        childTypes: child type name -> parent type name
        suffixes: file suffix -> type name
        strictDirectoryNames: directory name -> type name
    """

    types: Dict[str, Any]
    childTypes: Dict[str, Any]
    suffixes: Dict[str, Any]
    strictDirectoryNames: Dict[str, Any]


CATEGORIES: Tuple[str, ...] = ("types", "childTypes", "suffixes", "strictDirectoryNames")


def empty_registry() -> MetadataRegistry:
    """Return a new neutral registry (all four categories present and empty)."""
    return {
        "types": {},
        "childTypes": {},
        "suffixes": {},
        "strictDirectoryNames": {},
    }


__all__ = ["MetadataRegistry", "CATEGORIES", "empty_registry"]
