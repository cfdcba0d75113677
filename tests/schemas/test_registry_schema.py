from __future__ import annotations

import pytest

from mdregistry.core.schemas import SchemaValidationError, load_schema, validate_registry_shape


def test_schema_loads() -> None:
    schema = load_schema("registry")
    assert set(schema["properties"]) == {"types", "childTypes", "suffixes", "strictDirectoryNames"}


@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"types": {}},
        {"types": {"x": {"anything": ["goes"]}}, "suffixes": {"x": "x"}},
        {"unknownCategory": 1},
    ],
)
def test_registry_shaped_documents_pass(payload) -> None:
    validate_registry_shape(payload)


@pytest.mark.parametrize(
    "payload",
    [
        [],
        "types",
        {"types": []},
        {"childTypes": "x"},
        {"strictDirectoryNames": None},
    ],
)
def test_wrongly_shaped_documents_fail(payload) -> None:
    with pytest.raises(SchemaValidationError) as excinfo:
        validate_registry_shape(payload)
    assert excinfo.value.errors
