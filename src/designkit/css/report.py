"""Markdown rendering for CSS audit results."""

from __future__ import annotations

from designkit.css.model import AuditSummary, CSSReport

__all__ = ["format_report"]


def format_report(summary: AuditSummary, report: CSSReport | None = None) -> str:
    """Format an audit summary (and optionally a fix report) as Markdown."""
    lines = [
        "# CSS Audit Report",
        "",
        f"- **Total rules:** {summary.total_rules}",
        "",
    ]
    if summary.high_specificity:
        lines.append("## High specificity")
        for finding in summary.high_specificity:
            lines.append(f"- `{', '.join(finding.selectors)}` -> {finding.specificity}")
        lines.append("")
    if summary.important_usage:
        lines.append("## !important usage")
        for finding in summary.important_usage:
            lines.append(f"- `{', '.join(finding.selectors)}`: {finding.count} use(s)")
        lines.append("")
    lines.append("## Suggestions")
    lines.extend(f"- {s}" for s in summary.suggestions)

    if report is not None and report.issues:
        lines.append("")
        lines.append("## Issues")
        for issue in report.issues:
            lines.append(f"- **{issue.type}** `{issue.selector}`: {issue.fix}")
        lines.append("")
        lines.append("## Suggested code")
        lines.append("")
        lines.append("```css")
        lines.append(report.suggested_code)
        lines.append("```")
    return "\n".join(lines)
