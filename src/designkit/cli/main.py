"""designkit CLI entry point: Click group with subcommands."""

from __future__ import annotations

import logging

import click

from designkit import __version__


class _ClickHandler(logging.Handler):
    """Route log records through click so they honour redirected stderr."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            click.echo(self.format(record), err=True)
        except Exception:
            self.handleError(record)


def _configure_logging(verbose: bool) -> None:
    logger = logging.getLogger("designkit")
    if not any(isinstance(h, _ClickHandler) for h in logger.handlers):
        handler = _ClickHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
        logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


@click.group()
@click.version_option(version=__version__, prog_name="designkit")
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr")
def cli(verbose: bool) -> None:
    """designkit - front-end audits, component scaffolding and charts."""
    _configure_logging(verbose)


# Import and register subcommands
from designkit.cli.chart import chart  # noqa: E402
from designkit.cli.css_audit import css_audit  # noqa: E402
from designkit.cli.scaffold import scaffold  # noqa: E402
from designkit.cli.ux_audit import ux_audit  # noqa: E402

cli.add_command(css_audit)
cli.add_command(ux_audit)
cli.add_command(scaffold)
cli.add_command(chart)
