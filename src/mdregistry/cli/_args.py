"""Common CLI argument registration utilities."""
from __future__ import annotations

import argparse


def add_json_flag(parser: argparse.ArgumentParser) -> None:
    """Add --json flag for JSON output mode."""
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON",
    )


def add_project_dir_flag(parser: argparse.ArgumentParser) -> None:
    """Add --project-dir flag (defaults to the current directory)."""
    parser.add_argument(
        "--project-dir",
        type=str,
        help="Directory to search for the project file (default: current directory)",
    )


def add_verbose_flag(parser: argparse.ArgumentParser) -> None:
    """Add --verbose flag enabling debug logging."""
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log debug information to stderr",
    )


def add_standard_flags(parser: argparse.ArgumentParser) -> None:
    add_json_flag(parser)
    add_project_dir_flag(parser)
    add_verbose_flag(parser)
