"""Specificity and ``!important`` analysis over parsed stylesheet rules."""

from __future__ import annotations

import logging

from designkit.css.model import (
    AuditSummary,
    CSSReport,
    ImportantFinding,
    Issue,
    IssueType,
    SelectorFinding,
    Specificity,
)
from designkit.css.parser import parse_rules, specificity

__all__ = ["analyze", "audit", "is_high_specificity", "lower_specificity"]

logger = logging.getLogger(__name__)

HIGH_SCORE = 100
MAX_CLASSES = 2
MAX_PARTS = 2

COMBINATORS = frozenset({">", "+", "~"})

IMPORTANT_FIX = "Remove !important; use cascade order or custom properties instead."
NO_FIXES = "/* No high-specificity selectors to fix */"

SUGGEST_LOWER_SPECIFICITY = (
    "Consider lowering specificity with :where() or cascade layers (@layer)."
)
SUGGEST_REDUCE_IMPORTANT = (
    "Reduce !important; prefer cascade order or custom properties."
)
SUGGEST_NONE = "No major specificity or !important issues found."


def is_high_specificity(selector: str, spec: Specificity | None = None) -> bool:
    """Return True for multi-part selectors that are hard to override.

    A selector qualifies when it has more than one whitespace-separated part
    and either scores an ID or stacks two class-like units, or when it has
    more than two parts at all.
    """
    parts = selector.split()
    if len(parts) <= 1:
        return False
    if spec is None:
        spec = specificity(selector)
    heavy = spec.score >= HIGH_SCORE or spec.classes >= MAX_CLASSES
    return heavy or len(parts) > MAX_PARTS


def lower_specificity(selector: str) -> str:
    """Wrap every part but the last in ``:where()``.

    ``.nav .item.active`` becomes ``:where(.nav) .item.active``. A combinator
    directly before the last part stays outside the wrapper.
    """
    parts = selector.split()
    if len(parts) <= 1:
        return selector
    prefix, last = parts[:-1], parts[-1]
    combinator = ""
    if prefix[-1] in COMBINATORS:
        combinator = prefix.pop() + " "
    if not prefix:
        return selector
    return f":where({' '.join(prefix)}) {combinator}{last}"


def _before_after(before: str, after: str) -> str:
    return f"/* Before */\n{before} {{ ... }}\n/* After */\n{after} {{ ... }}"


def analyze(source: str) -> CSSReport:
    """Audit stylesheet text for specificity and ``!important`` problems.

    Returns a :class:`CSSReport` whose issues are ordered by rule, each
    rule's high-specificity issues ahead of its ``!important`` issue. Any
    string is accepted; text without rule blocks yields an empty report.
    """
    issues: list[Issue] = []
    pairs: list[tuple[str, str]] = []

    for rule in parse_rules(source):
        for selector in rule.selectors:
            spec = specificity(selector)
            if not is_high_specificity(selector, spec):
                continue
            after = lower_specificity(selector)
            logger.debug("High specificity %s for %r", spec, selector)
            issues.append(
                Issue(
                    type=IssueType.HIGH_SPECIFICITY,
                    selector=rule.group,
                    fix=f"Use :where() to lower specificity: {after}",
                )
            )
            pairs.append((selector, after))
        if rule.important_count > 0:
            issues.append(
                Issue(
                    type=IssueType.IMPORTANT_USAGE,
                    selector=rule.group,
                    fix=IMPORTANT_FIX,
                )
            )

    if pairs:
        suggested_code = "\n\n".join(_before_after(b, a) for b, a in pairs)
    else:
        suggested_code = NO_FIXES
    return CSSReport(issues=tuple(issues), suggested_code=suggested_code)


def audit(source: str) -> AuditSummary:
    """Summarize rule counts, ID-weight selectors and ``!important`` usage."""
    rules = parse_rules(source)
    high: list[SelectorFinding] = []
    important: list[ImportantFinding] = []

    for rule in rules:
        top: Specificity | None = None
        for selector in rule.selectors:
            spec = specificity(selector)
            if top is None or spec.score > top.score:
                top = spec
        if top is not None and top.score >= HIGH_SCORE:
            high.append(SelectorFinding(selectors=rule.selectors, specificity=top))
        if rule.important_count > 0:
            important.append(
                ImportantFinding(selectors=rule.selectors, count=rule.important_count)
            )

    suggestions: list[str] = []
    if high:
        suggestions.append(SUGGEST_LOWER_SPECIFICITY)
    if important:
        suggestions.append(SUGGEST_REDUCE_IMPORTANT)
    if not suggestions and rules:
        suggestions.append(SUGGEST_NONE)

    return AuditSummary(
        total_rules=len(rules),
        high_specificity=tuple(high),
        important_usage=tuple(important),
        suggestions=tuple(suggestions),
    )
