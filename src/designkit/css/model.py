"""CSS audit model: Rule, Specificity, Issue, and report dataclasses."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


@dataclass(frozen=True)
class Rule:
    """A single ``selector-group { declarations }`` block.

    Attributes:
        selectors: Trimmed members of the comma-separated selector group,
            in source order.
        declarations: Raw text between the braces (not parsed further).
        important_count: Number of ``!important`` occurrences in the block.
    """

    selectors: tuple[str, ...]
    declarations: str
    important_count: int = 0

    @property
    def group(self) -> str:
        return ", ".join(self.selectors)


@dataclass(frozen=True)
class Specificity:
    """Heuristic CSS specificity triple.

    ``classes`` covers classes, attribute selectors and pseudo-classes;
    ``elements`` covers type selectors and pseudo-elements.
    """

    ids: int = 0
    classes: int = 0
    elements: int = 0

    @property
    def score(self) -> int:
        return self.ids * 100 + self.classes * 10 + self.elements

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.ids, self.classes, self.elements)

    def __str__(self) -> str:
        return f"({self.ids},{self.classes},{self.elements})"


class IssueType(StrEnum):
    HIGH_SPECIFICITY = "high-specificity"
    IMPORTANT_USAGE = "important-usage"


@dataclass(frozen=True)
class Issue:
    type: IssueType
    selector: str
    fix: str

    def to_dict(self) -> dict[str, str]:
        return {"type": str(self.type), "selector": self.selector, "fix": self.fix}


@dataclass(frozen=True)
class CSSReport:
    """Result of :func:`designkit.css.analyze`."""

    issues: tuple[Issue, ...]
    suggested_code: str

    def issues_of(self, kind: IssueType) -> list[Issue]:
        return [i for i in self.issues if i.type is kind]

    def to_dict(self) -> dict[str, object]:
        return {
            "issues": [i.to_dict() for i in self.issues],
            "suggested_code": self.suggested_code,
        }


@dataclass(frozen=True)
class SelectorFinding:
    selectors: tuple[str, ...]
    specificity: Specificity


@dataclass(frozen=True)
class ImportantFinding:
    selectors: tuple[str, ...]
    count: int


@dataclass(frozen=True)
class AuditSummary:
    """Rule-level summary produced by :func:`designkit.css.audit`."""

    total_rules: int
    high_specificity: tuple[SelectorFinding, ...] = ()
    important_usage: tuple[ImportantFinding, ...] = ()
    suggestions: tuple[str, ...] = ()
