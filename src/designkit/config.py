from __future__ import annotations

from dataclasses import dataclass, field, replace


@dataclass(frozen=True)
class Margin:
    top: int = 20
    right: int = 20
    bottom: int = 30
    left: int = 40


@dataclass(frozen=True)
class ChartConfig:
    width: int = 400
    height: int = 300
    margin: Margin = field(default_factory=Margin)
    stroke: str = "#333"
    fill: str = "rgba(0,0,0,0.1)"
    font_size: int = 12
    font_family: str = "Georgia, serif"
    columns: int = 2  # small multiples only
    area: bool = False  # shade under the line with `fill`

    @property
    def plot_width(self) -> int:
        return self.width - self.margin.left - self.margin.right

    @property
    def plot_height(self) -> int:
        return self.height - self.margin.top - self.margin.bottom

    def with_overrides(self, **overrides: object) -> ChartConfig:
        """Return a copy with the named fields replaced; ``None`` values are ignored."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes)
