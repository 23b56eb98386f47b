"""Minimal-ink SVG charts: a single line chart and small multiples.

All geometry is driven by a :class:`~designkit.config.ChartConfig`; pass
``config.with_overrides(...)`` to change dimensions or styling per call.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from html import escape
from typing import Union

from designkit.config import ChartConfig
from designkit.errors import ChartError

__all__ = ["generate_line_chart", "generate_small_multiples", "series_values"]

logger = logging.getLogger(__name__)

_XML_HEADER = '<?xml version="1.0" encoding="UTF-8"?>'
_SVG_NS = "http://www.w3.org/2000/svg"

Point = Union[float, Mapping[str, float]]


def _num(value: float) -> str:
    """Render a coordinate without a trailing ``.0`` on whole numbers."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def series_values(data: Sequence[Point], index: int | None = None) -> list[float]:
    """Normalize a series of numbers or ``{"value": n}`` mappings to floats."""
    values: list[float] = []
    for point in data:
        if isinstance(point, Mapping):
            if "value" not in point:
                raise ChartError("Data point mapping is missing 'value'", series_index=index)
            point = point["value"]
        try:
            values.append(float(point))
        except (TypeError, ValueError):
            raise ChartError(f"Invalid data point: {point!r}", series_index=index) from None
    if not values:
        raise ChartError("Series must contain at least one value", series_index=index)
    return values


def _path(values: list[float], lo: float, hi: float, config: ChartConfig) -> str:
    m = config.margin
    w, h = config.plot_width, config.plot_height
    span = hi - lo or 1
    steps = len(values) - 1 or 1
    points = []
    for i, v in enumerate(values):
        x = m.left + (i / steps) * w
        y = m.top + h - ((v - lo) / span) * h
        points.append(f"{_num(x)},{_num(y)}")
    return "M " + " L ".join(points)


def _area(d: str, count: int, config: ChartConfig, indent: str) -> str:
    """Closed path under the line, filled with ``config.fill``; empty unless ``config.area``."""
    if not config.area:
        return ""
    m = config.margin
    base = _num(m.top + config.plot_height)
    right = m.left + config.plot_width if count > 1 else m.left
    closed = f"{d} L {_num(right)},{base} L {m.left},{base} Z"
    return f'<path d="{closed}" fill="{escape(config.fill)}" stroke="none"/>\n{indent}'


def _label(text: str, y: float, config: ChartConfig, fill: str | None = None) -> str:
    fill_attr = f' fill="{escape(fill)}"' if fill else ""
    return (
        f'<text x="{config.margin.left}" y="{_num(y)}" font-size="{config.font_size}" '
        f'font-family="{escape(config.font_family)}"{fill_attr}>{text}</text>'
    )


def _panel(values: list[float], lo: float, hi: float, config: ChartConfig) -> str:
    m = config.margin
    d = _path(values, lo, hi, config)
    top = _label(f"{hi:.1f}", m.top - 6, config, fill=config.stroke)
    area = _area(d, len(values), config, "    ")
    bottom = _label(f"{lo:.1f}", m.top + config.plot_height + 4, config, fill=config.stroke)
    return f"""
  <g class="panel">
    {area}<path d="{d}" fill="none" stroke="{escape(config.stroke)}" stroke-width="1.5"/>
    {top}
    {bottom}
  </g>"""


def generate_line_chart(data: Sequence[Point], config: ChartConfig | None = None) -> str:
    """Render one series as a line with only its max and min labelled."""
    config = config or ChartConfig()
    values = series_values(data)
    lo, hi = min(values), max(values)
    m = config.margin
    d = _path(values, lo, hi, config)
    top = _label(f"{hi:.1f}", m.top - 6, config)
    area = _area(d, len(values), config, "  ")
    bottom = _label(f"{lo:.1f}", m.top + config.plot_height + 4, config)
    logger.debug("Line chart: %d point(s), range %s..%s", len(values), lo, hi)
    return f"""{_XML_HEADER}
<svg xmlns="{_SVG_NS}" viewBox="0 0 {config.width} {config.height}" width="{config.width}" height="{config.height}" class="tufte-line-chart">
  {area}<path d="{d}" fill="none" stroke="{escape(config.stroke)}" stroke-width="1.5"/>
  {top}
  {bottom}
</svg>"""


def generate_small_multiples(
    datasets: Sequence[Sequence[Point]], config: ChartConfig | None = None
) -> str:
    """Render several series as a grid of panels sharing one vertical scale.

    Panels fill ``config.columns`` per row; each panel is ``width`` by
    ``height``.
    """
    config = config or ChartConfig()
    if not datasets:
        raise ChartError("At least one series is required")
    if config.columns < 1:
        raise ChartError("columns must be at least 1")
    series = [series_values(data, index=i) for i, data in enumerate(datasets)]
    lo = min(min(v) for v in series)
    hi = max(max(v) for v in series)

    cols = config.columns
    rows = -(-len(series) // cols)
    total_width = config.width * cols
    total_height = config.height * rows

    panels = []
    for i, values in enumerate(series):
        x = (i % cols) * config.width
        y = (i // cols) * config.height
        panels.append(f'<g transform="translate({x},{y})">{_panel(values, lo, hi, config)}</g>')
    body = "".join(panels)
    logger.debug("Small multiples: %d panel(s) in %d row(s)", len(series), rows)

    return f"""{_XML_HEADER}
<svg xmlns="{_SVG_NS}" viewBox="0 0 {total_width} {total_height}" width="{total_width}" height="{total_height}" class="tufte-small-multiples">
  <title>Small multiples</title>
  {body}
</svg>"""
