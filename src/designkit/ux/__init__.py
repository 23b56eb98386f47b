from designkit.ux.auditor import audit, audit_ecommerce
from designkit.ux.checks import PRODUCT_GRID_CHECKS
from designkit.ux.model import Check, CheckResult, Page, Summary, UXAudit
from designkit.ux.report import format_report

__all__ = [
    "audit",
    "audit_ecommerce",
    "format_report",
    "PRODUCT_GRID_CHECKS",
    "Check",
    "CheckResult",
    "Page",
    "Summary",
    "UXAudit",
]
