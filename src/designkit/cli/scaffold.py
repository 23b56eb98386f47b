"""CLI command: designkit scaffold -- atomic design component folders."""

from __future__ import annotations

import sys

import click

from designkit.errors import ScaffoldError
from designkit.scaffold import scaffold_structure
from designkit.scaffold import scaffold as make_component


@click.command()
@click.argument("component_name", required=False)
@click.argument("level", required=False)
@click.option(
    "--output",
    type=click.Path(file_okay=False),
    help="Create atoms/, molecules/ and organisms/ under this directory instead",
)
@click.option(
    "--base-path",
    default=".",
    show_default=True,
    type=click.Path(file_okay=False),
    help="Directory to create the component in",
)
def scaffold(
    component_name: str | None, level: str | None, output: str | None, base_path: str
) -> None:
    """Generate a component folder: COMPONENT_NAME LEVEL (atom|molecule|organism)."""
    try:
        if output:
            result = scaffold_structure(output)
            click.echo(f"Created structure at: {result.path}")
            for d in result.dirs:
                click.echo(f"  - {d}")
            return

        if not component_name or not level:
            click.echo(
                "Usage: designkit scaffold <ComponentName> <atom|molecule|organism>",
                err=True,
            )
            click.echo("   or: designkit scaffold --output <path>", err=True)
            sys.exit(1)

        created = make_component(component_name, level, base_path)
    except (ScaffoldError, OSError) as exc:
        click.echo(str(exc), err=True)
        sys.exit(1)

    click.echo(f"Created: {created.path}")
    for f in created.files:
        click.echo(f"  - {f}")
