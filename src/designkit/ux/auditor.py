"""Run product grid checks over an HTML string."""

from __future__ import annotations

import logging
from typing import Sequence

from designkit.ux.checks import PRODUCT_GRID_CHECKS
from designkit.ux.model import Check, CheckResult, Page, Summary, UXAudit

__all__ = ["audit", "audit_ecommerce"]

logger = logging.getLogger(__name__)

PRODUCT_GRID_SECTION = "Product grid / listing"


def audit(html: str, checks: Sequence[Check] | None = None) -> UXAudit:
    """Audit markup against the product grid checklist.

    Returns a UXAudit with one CheckResult per check, in checklist order,
    and a summary score as a rounded percentage of passed checks.
    """
    page = Page.from_html(html)
    results: list[CheckResult] = []
    for check in checks if checks is not None else PRODUCT_GRID_CHECKS:
        passed = bool(check.test(page))
        logger.debug("Check %s: %s", check.id, "pass" if passed else "fail")
        results.append(CheckResult(id=check.id, label=check.label, passed=passed))

    passed_count = sum(1 for r in results if r.passed)
    total = len(results)
    # halves round up
    score = int(passed_count * 100 / total + 0.5) if total else 0
    return UXAudit(
        section=PRODUCT_GRID_SECTION,
        checks=tuple(results),
        summary=Summary(passed=passed_count, total=total, score=score),
    )


def audit_ecommerce(html: str) -> list[str]:
    """Return one message per failed check, for quick scripted use."""
    return [f"Missing or insufficient: {c.label}" for c in audit(html).failed]
