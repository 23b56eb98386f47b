"""designkit: front-end developer utilities (CSS audit, UX audit, scaffolding, charts)."""
from __future__ import annotations

__version__ = "0.1.0"

from designkit.config import ChartConfig, Margin
from designkit.errors import ChartError, DesignkitError, ScaffoldError

__all__ = [
    "__version__",
    "ChartConfig",
    "Margin",
    "DesignkitError",
    "ScaffoldError",
    "ChartError",
]
