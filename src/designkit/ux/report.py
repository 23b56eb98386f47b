"""Markdown rendering for UX audit results."""

from __future__ import annotations

from designkit.ux.model import UXAudit


def format_report(result: UXAudit) -> str:
    summary = result.summary
    lines = [
        "# Baymard-style Ecommerce UX Audit",
        "",
        f"## {result.section}",
        "",
        f"**Score: {summary.passed}/{summary.total}** ({summary.score}%)",
        "",
        "| Check | Status |",
        "|-------|--------|",
    ]
    for check in result.checks:
        status = "✅ Pass" if check.passed else "❌ Fail"
        lines.append(f"| {check.label} | {status} |")
    return "\n".join(lines)
