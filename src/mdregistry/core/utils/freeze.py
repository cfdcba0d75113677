"""Recursive freezing of JSON-like structures.

``deep_freeze`` turns nested containers into read-only equivalents:

- mappings -> ``types.MappingProxyType`` over a fresh ``dict``
- lists/tuples -> ``tuple``
- sets -> ``frozenset``

Scalars are returned unchanged. The input is never modified; every container
in the output is newly built, so the result shares no mutable state with it.
"""
from __future__ import annotations

from collections.abc import Mapping, Set
from types import MappingProxyType
from typing import Any


def deep_freeze(value: Any) -> Any:
    """Return a recursively immutable copy of ``value``.

    Example:
        >>> frozen = deep_freeze({"a": {"b": [1, 2]}})
        >>> frozen["a"]["b"]
        (1, 2)
        >>> frozen["a"]["c"] = 3
        Traceback (most recent call last):
        ...
        TypeError: 'mappingproxy' object does not support item assignment
    """
    if isinstance(value, Mapping):
        return MappingProxyType({k: deep_freeze(v) for k, v in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(deep_freeze(v) for v in value)
    if isinstance(value, Set):
        return frozenset(deep_freeze(v) for v in value)
    return value


def thaw(value: Any) -> Any:
    """Inverse of :func:`deep_freeze` for serialization.

    Mappings become ``dict`` and tuples become ``list`` so the result can be
    passed to ``json.dumps`` or ``yaml.safe_dump``.
    """
    if isinstance(value, Mapping):
        return {k: thaw(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [thaw(v) for v in value]
    if isinstance(value, Set):
        return sorted(thaw(v) for v in value)
    return value


__all__ = ["deep_freeze", "thaw"]
