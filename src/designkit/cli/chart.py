"""CLI command: designkit chart -- render JSON series as SVG."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from designkit.chart import generate_line_chart, generate_small_multiples
from designkit.config import ChartConfig
from designkit.errors import ChartError


@click.command()
@click.argument("datafile", type=click.Path(exists=True, dir_okay=False))
@click.option("-o", "--output", type=click.Path(dir_okay=False), help="Write SVG here instead of stdout")
@click.option("--width", type=int, help="Panel width in pixels")
@click.option("--height", type=int, help="Panel height in pixels")
@click.option("--columns", type=int, help="Panels per row (small multiples)")
@click.option("--stroke", help="Line and label colour")
@click.option("--area", is_flag=True, help="Shade the area under each line")
def chart(
    datafile: str,
    output: str | None,
    width: int | None,
    height: int | None,
    columns: int | None,
    stroke: str | None,
    area: bool,
) -> None:
    """Render a JSON data file as a minimal SVG chart.

    A flat list of numbers renders a line chart; a list of lists renders
    small multiples on a shared scale.
    """
    config = ChartConfig().with_overrides(
        width=width, height=height, columns=columns, stroke=stroke, area=area or None
    )
    try:
        data = json.loads(Path(datafile).read_text(encoding="utf-8"))
        if not isinstance(data, list):
            raise ChartError("Data file must contain a JSON list")
        if data and all(isinstance(d, list) for d in data):
            svg = generate_small_multiples(data, config)
        else:
            svg = generate_line_chart(data, config)
        if output:
            Path(output).write_text(svg + "\n", encoding="utf-8")
    except (json.JSONDecodeError, ChartError) as exc:
        click.echo(f"Chart error: {exc}", err=True)
        sys.exit(1)
    except (OSError, UnicodeDecodeError) as exc:
        click.echo(f"Error reading or writing file: {exc}", err=True)
        sys.exit(1)

    if output:
        click.echo(f"Wrote {output}")
    else:
        click.echo(svg)
