"""UX audit model: Page, Check, CheckResult, and audit result dataclasses."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable

from bs4 import BeautifulSoup

_WS_RE = re.compile(r"\s+")


@dataclass(frozen=True)
class Page:
    """Markup under audit plus its visible text.

    Attributes:
        html: The raw markup, matched by structural checks.
        text: Visible text with whitespace collapsed, matched by copy checks.
    """

    html: str
    text: str

    @classmethod
    def from_html(cls, html: str) -> Page:
        soup = BeautifulSoup(html, "html.parser")
        body = soup.body or soup
        text = _WS_RE.sub(" ", body.get_text(" ")).strip()
        return cls(html=html, text=text)


@dataclass(frozen=True)
class Check:
    id: str
    label: str
    test: Callable[[Page], bool]


@dataclass(frozen=True)
class CheckResult:
    id: str
    label: str
    passed: bool


@dataclass(frozen=True)
class Summary:
    passed: int
    total: int
    score: int  # percent, 0-100


@dataclass(frozen=True)
class UXAudit:
    section: str
    checks: tuple[CheckResult, ...]
    summary: Summary

    @property
    def failed(self) -> list[CheckResult]:
        return [c for c in self.checks if not c.passed]
