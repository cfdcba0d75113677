"""Unified CLI output formatting utilities.

Supports JSON and text output modes. Frozen registries are thawed before
serialization.
"""
from __future__ import annotations

import json
import sys
from typing import Any, Optional

import yaml

from mdregistry.core.exceptions import MdRegistryError
from mdregistry.core.utils.freeze import thaw


class OutputFormatter:
    """Unified output formatter for CLI commands."""

    def __init__(self, json_mode: bool = False, indent: int = 2):
        self.json_mode = json_mode
        self.indent = indent

    def error(
        self,
        error: Exception,
        message: Optional[str] = None,
        *,
        error_code: str = "error",
    ) -> None:
        """Output error result to stderr.

        Args:
            error: The exception that occurred
            message: Optional human-readable message (defaults to str(error))
            error_code: Error code for JSON output
        """
        msg = message or str(error)
        if self.json_mode:
            output: dict[str, Any] = {
                "error": error_code,
                "message": msg,
            }
            if isinstance(error, MdRegistryError) and error.context:
                output["context"] = error.context
            print(json.dumps(output, indent=self.indent), file=sys.stderr)
        else:
            print(f"Error: {msg}", file=sys.stderr)

    def json_output(self, data: Any) -> None:
        print(json.dumps(thaw(data), indent=self.indent, default=str))

    def yaml_output(self, data: Any) -> None:
        print(
            yaml.safe_dump(
                thaw(data),
                default_flow_style=False,
                sort_keys=True,
                allow_unicode=True,
            ).rstrip()
        )

    def text(self, message: str) -> None:
        print(message)

