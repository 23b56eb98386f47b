from designkit.css.analyzer import analyze, audit
from designkit.css.model import (
    AuditSummary,
    CSSReport,
    ImportantFinding,
    Issue,
    IssueType,
    Rule,
    SelectorFinding,
    Specificity,
)
from designkit.css.parser import parse_rules, specificity
from designkit.css.report import format_report

__all__ = [
    "analyze",
    "audit",
    "format_report",
    "parse_rules",
    "specificity",
    "AuditSummary",
    "CSSReport",
    "ImportantFinding",
    "Issue",
    "IssueType",
    "Rule",
    "SelectorFinding",
    "Specificity",
]
