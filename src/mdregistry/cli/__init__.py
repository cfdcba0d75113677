"""
mdregistry CLI package.

Commands are auto-discovered from subfolders (registry/, ...). Each command
module exposes ``SUMMARY``, ``register_args(parser)`` and ``main(args)``.
"""
from ._output import OutputFormatter
from ._args import (
    add_json_flag,
    add_project_dir_flag,
    add_verbose_flag,
    add_standard_flags,
)
from ._utils import configure_logging, get_project_dir

__all__ = [
    "OutputFormatter",
    "add_json_flag",
    "add_project_dir_flag",
    "add_verbose_flag",
    "add_standard_flags",
    "configure_logging",
    "get_project_dir",
]
