from designkit.chart.svg import generate_line_chart, generate_small_multiples, series_values

__all__ = ["generate_line_chart", "generate_small_multiples", "series_values"]
