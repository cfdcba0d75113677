"""Core library for effective metadata registry resolution."""

from . import exceptions  # noqa: F401
