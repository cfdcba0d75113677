"""
mdregistry registry show command.

SUMMARY: Show the effective registry for a project

Displays the bundled registry merged with the project's registryPresets and
registryCustomizations. Supports filtering by category and JSON/YAML output.
"""

from __future__ import annotations

import argparse
import sys

from mdregistry.cli import (
    OutputFormatter,
    add_standard_flags,
    configure_logging,
    get_project_dir,
)
from mdregistry.core.exceptions import MdRegistryError
from mdregistry.core.registry import CATEGORIES, get_effective_registry

SUMMARY = "Show the effective registry for a project"


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    parser.add_argument(
        "--category",
        choices=list(CATEGORIES),
        help="Only show one registry category",
    )
    parser.add_argument(
        "--format",
        choices=["json", "yaml"],
        default="json",
        help="Output format (default: json)",
    )
    add_standard_flags(parser)


def main(args: argparse.Namespace) -> int:
    """Show the effective registry."""
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))
    configure_logging(args)

    try:
        registry = get_effective_registry(get_project_dir(args))
    except MdRegistryError as e:
        formatter.error(e, error_code="registry_show_error")
        return 1

    data = registry[args.category] if args.category else registry
    if args.json or args.format == "json":
        formatter.json_output(data)
    else:
        formatter.yaml_output(data)
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    cli_args = parser.parse_args()
    sys.exit(main(cli_args))
