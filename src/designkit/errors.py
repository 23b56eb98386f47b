"""Error hierarchy for designkit utilities."""
from __future__ import annotations


class DesignkitError(Exception):
    """Base class for all designkit errors."""


class ScaffoldError(DesignkitError):
    """Raised when a component scaffold cannot be generated."""

    def __init__(self, message: str, level: str | None = None) -> None:
        self.level = level
        super().__init__(message)


class ChartError(DesignkitError):
    """Raised when chart data cannot be rendered."""

    def __init__(self, message: str, series_index: int | None = None) -> None:
        self.series_index = series_index
        super().__init__(message)
