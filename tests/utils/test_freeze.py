from __future__ import annotations

from types import MappingProxyType

import pytest

from mdregistry.core.utils.freeze import deep_freeze, thaw


def test_nested_mappings_become_read_only() -> None:
    frozen = deep_freeze({"a": {"b": {"c": 1}}})

    assert isinstance(frozen, MappingProxyType)
    assert isinstance(frozen["a"]["b"], MappingProxyType)
    with pytest.raises(TypeError):
        frozen["a"]["b"]["c"] = 2  # type: ignore[index]
    with pytest.raises(TypeError):
        frozen["new"] = 1  # type: ignore[index]


def test_sequences_and_sets_are_frozen() -> None:
    frozen = deep_freeze({"items": [1, {"x": [2, 3]}], "tags": {"a", "b"}})

    assert frozen["items"] == (1, {"x": (2, 3)})
    assert isinstance(frozen["tags"], frozenset)
    with pytest.raises(AttributeError):
        frozen["items"].append(4)  # type: ignore[attr-defined]


def test_source_is_not_aliased() -> None:
    source = {"a": {"b": 1}, "l": [1]}
    frozen = deep_freeze(source)

    source["a"]["b"] = 99
    source["l"].append(2)

    assert frozen["a"]["b"] == 1
    assert frozen["l"] == (1,)


def test_scalars_pass_through() -> None:
    assert deep_freeze(5) == 5
    assert deep_freeze("text") == "text"
    assert deep_freeze(None) is None


def test_thaw_produces_plain_containers() -> None:
    plain = thaw(deep_freeze({"a": {"b": [1, 2]}, "s": {"y", "x"}}))

    assert plain == {"a": {"b": [1, 2]}, "s": ["x", "y"]}
    assert type(plain["a"]) is dict
    plain["a"]["c"] = 3
