"""CLI command: designkit ux-audit -- product grid checklist."""

from __future__ import annotations

import click

from designkit.cli._io import read_source
from designkit.ux import audit, format_report


@click.command("ux-audit")
@click.argument("htmlfile", required=False)
def ux_audit(htmlfile: str | None) -> None:
    """Check product listing markup against e-commerce UX guidelines."""
    source = read_source(htmlfile, "designkit ux-audit <path-to-html-file>")
    click.echo(format_report(audit(source)))
