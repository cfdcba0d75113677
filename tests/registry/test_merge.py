"""First-level merge semantics."""
from __future__ import annotations

import copy

import pytest

from mdregistry.core.registry import CATEGORIES, empty_registry, first_level_merge

from helpers.registries import registry


@pytest.fixture
def sample():
    return registry(
        types={"apexclass": {"id": "apexclass", "suffix": "cls"}},
        childTypes={"customfield": "customobject"},
        suffixes={"cls": "apexclass"},
        strictDirectoryNames={"lwc": "lightningcomponentbundle"},
    )


def test_empty_registry_has_all_categories() -> None:
    empty = empty_registry()
    assert set(empty) == set(CATEGORIES)
    assert all(empty[c] == {} for c in CATEGORIES)


def test_empty_registry_returns_new_dicts() -> None:
    first = empty_registry()
    first["types"]["x"] = 1
    assert empty_registry()["types"] == {}


def test_neutral_is_identity_on_both_sides(sample) -> None:
    assert first_level_merge(sample, empty_registry()) == sample
    assert first_level_merge(empty_registry(), sample) == sample


def test_override_wins_on_collision() -> None:
    original = registry(types={"Foo": "A", "Bar": "keep"})
    overrides = registry(types={"Foo": "B"})

    merged = first_level_merge(original, overrides)

    assert merged["types"] == {"Foo": "B", "Bar": "keep"}


def test_merge_is_not_commutative() -> None:
    a = registry(types={"Foo": "A"})
    b = registry(types={"Foo": "B"})
    assert first_level_merge(a, b)["types"]["Foo"] == "B"
    assert first_level_merge(b, a)["types"]["Foo"] == "A"


def test_collision_replaces_whole_value() -> None:
    original = registry(types={"permissionset": {"id": "permissionset", "children": {"a": 1}}})
    overrides = registry(types={"permissionset": {"id": "permissionset", "strategies": {}}})

    merged = first_level_merge(original, overrides)

    assert merged["types"]["permissionset"] == {"id": "permissionset", "strategies": {}}


def test_categories_are_independent() -> None:
    original = registry(types={"x": "type"}, suffixes={"x": "suffix"})
    overrides = registry(types={"x": "other-type"})

    merged = first_level_merge(original, overrides)

    assert merged["types"] == {"x": "other-type"}
    assert merged["suffixes"] == {"x": "suffix"}


def test_missing_override_category_is_treated_as_empty(sample) -> None:
    merged = first_level_merge(sample, {"types": {"new": 1}})

    assert merged["types"] == {**sample["types"], "new": 1}
    for category in ("childTypes", "suffixes", "strictDirectoryNames"):
        assert merged[category] == sample[category]


def test_none_override_category_is_treated_as_empty(sample) -> None:
    merged = first_level_merge(sample, {"suffixes": None})
    assert merged["suffixes"] == sample["suffixes"]


def test_partial_original_still_yields_all_categories() -> None:
    merged = first_level_merge({"types": {"a": 1}}, {})
    assert set(merged) == set(CATEGORIES)
    assert merged["childTypes"] == {}


def test_inputs_are_not_mutated(sample) -> None:
    overrides = registry(types={"apexclass": "replaced"}, suffixes={"trigger": "apextrigger"})
    before_original = copy.deepcopy(sample)
    before_overrides = copy.deepcopy(overrides)

    merged = first_level_merge(sample, overrides)
    merged["types"]["added"] = True

    assert sample == before_original
    assert overrides == before_overrides


def test_unknown_top_level_keys_are_dropped() -> None:
    merged = first_level_merge(registry(), {"types": {}, "somethingElse": {"a": 1}})
    assert "somethingElse" not in merged
