"""
mdregistry registry presets command.

SUMMARY: List available registry presets

Lists presets from the configured preset directories and the bundled presets.
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
from mdregistry.core.config import RegistryConfig
from mdregistry.core.exceptions import MdRegistryError
from mdregistry.core.registry import PresetStore, ProjectFound, SfProjectAccessor

SUMMARY = "List available registry presets"


def register_args(parser: argparse.ArgumentParser) -> None:
    add_standard_flags(parser)


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))
    configure_logging(args)

    project_dir = get_project_dir(args)
    try:
        config = RegistryConfig()
    except MdRegistryError as e:
        formatter.error(e, error_code="registry_presets_error")
        return 1

    lookup = SfProjectAccessor(config).lookup(project_dir)
    base_dir = lookup.root if isinstance(lookup, ProjectFound) else project_dir
    store = PresetStore.from_config(config, base_dir=base_dir)
    names = store.available()
    active = list(lookup.preset_names) if isinstance(lookup, ProjectFound) else []

    if args.json:
        formatter.json_output({"presets": names, "active": active})
        return 0

    if not names:
        formatter.text("No presets available")
        return 0
    for name in names:
        marker = "*" if name in active else " "
        formatter.text(f"{marker} {name}")
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    cli_args = parser.parse_args()
    sys.exit(main(cli_args))
