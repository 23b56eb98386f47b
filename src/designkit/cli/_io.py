"""Shared input handling for file-based commands."""

from __future__ import annotations

import sys
from pathlib import Path

import click


def read_source(path: str | None, usage: str) -> str:
    """Read a UTF-8 input file, exiting with code 1 on a missing path or read error."""
    if not path:
        click.echo(f"Usage: {usage}", err=True)
        sys.exit(1)
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        click.echo(f"Error reading file: {exc}", err=True)
        sys.exit(1)
