"""Shared CLI utilities."""
from __future__ import annotations

import argparse
import logging
from pathlib import Path


def get_project_dir(args: argparse.Namespace) -> Path:
    """Project directory from ``--project-dir`` or the current directory."""
    raw = getattr(args, "project_dir", None)
    if raw:
        return Path(raw).expanduser().resolve()
    return Path.cwd()


def configure_logging(args: argparse.Namespace) -> None:
    """Send package debug logs to stderr when ``--verbose`` is set."""
    if getattr(args, "verbose", False):
        logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")
        logging.getLogger("mdregistry").setLevel(logging.DEBUG)
