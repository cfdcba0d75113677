"""Shape checks for registry documents."""
from __future__ import annotations

from .validation import SchemaValidationError, load_schema, validate_registry_shape

__all__ = ["SchemaValidationError", "load_schema", "validate_registry_shape"]
