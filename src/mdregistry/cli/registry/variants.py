"""
mdregistry registry variants command.

SUMMARY: Show only the project's presets and customizations

Prints what the project layers on top of the bundled registry, without the
bundled registry itself. Prints an empty registry when there is no project.
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
from mdregistry.core.registry import load_variants

SUMMARY = "Show only the project's presets and customizations"


def register_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--format",
        choices=["json", "yaml"],
        default="yaml",
        help="Output format (default: yaml)",
    )
    add_standard_flags(parser)


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))
    configure_logging(args)

    try:
        variants = load_variants(get_project_dir(args))
    except MdRegistryError as e:
        formatter.error(e, error_code="registry_variants_error")
        return 1

    if args.json or args.format == "json":
        formatter.json_output(variants)
    else:
        formatter.yaml_output(variants)
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    cli_args = parser.parse_args()
    sys.exit(main(cli_args))
