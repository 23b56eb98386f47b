"""CLI command: designkit css-audit -- specificity and !important report."""

from __future__ import annotations

import click

from designkit.cli._io import read_source
from designkit.css import analyze, audit, format_report


@click.command("css-audit")
@click.argument("cssfile", required=False)
def css_audit(cssfile: str | None) -> None:
    """Audit a stylesheet for high specificity and !important usage.

    Prints a Markdown report with suggested :where() rewrites.
    """
    source = read_source(cssfile, "designkit css-audit <path-to-css-file>")
    click.echo(format_report(audit(source), analyze(source)))
