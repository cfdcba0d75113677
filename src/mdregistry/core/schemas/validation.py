"""Shared schema validation utilities.

Registry documents read from disk (presets) are checked against a JSON Schema
stored as YAML under ``mdregistry.data/schemas/``. Only the top-level shape is
checked; category contents stay opaque.
"""
from __future__ import annotations

from typing import Any, Dict, List

from jsonschema import Draft202012Validator

from mdregistry.data import read_yaml


class SchemaValidationError(ValueError):
    """Raised when schema validation fails."""

    def __init__(self, message: str, errors: List[str]) -> None:
        super().__init__(message)
        self.errors = errors


def load_schema(schema_name: str) -> Dict[str, Any]:
    """Load a bundled schema. Appends ``.schema.yaml`` when no extension is given."""
    filename = schema_name if schema_name.endswith(".yaml") else f"{schema_name}.schema.yaml"
    return read_yaml("schemas", filename)


def _format_error(error: Any) -> str:
    location = "/".join(str(p) for p in error.path) or "<root>"
    return f"{location}: {error.message}"


def validate_registry_shape(payload: Any) -> None:
    """Raise ``SchemaValidationError`` if ``payload`` is not registry-shaped."""
    validator = Draft202012Validator(load_schema("registry"))
    errors = sorted(validator.iter_errors(payload), key=lambda e: [str(p) for p in e.path])
    if errors:
        messages = [_format_error(e) for e in errors]
        raise SchemaValidationError("; ".join(messages), messages)


__all__ = ["SchemaValidationError", "load_schema", "validate_registry_shape"]
