"""Pattern-based stylesheet parser.

This is a heuristic, not a CSS grammar: nested blocks and at-rules are not
understood, and unterminated blocks are silently skipped.

Syntax example:
    #app .nav a, .btn { color: red !important; }
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator

from designkit.css.model import Rule, Specificity

__all__ = ["parse_rules", "specificity", "strip_comments"]

logger = logging.getLogger(__name__)

_COMMENT_RE = re.compile(r"/\*.*?\*/", re.DOTALL)
_IMPORTANT_RE = re.compile(r"!important")

_ID_RE = re.compile(r"#[a-zA-Z_-][\w-]*")
_CLASS_RE = re.compile(r"\.[a-zA-Z_-][\w-]*")
_ATTR_RE = re.compile(r"\[[^\]]+\]")
# single colon only; "::" is a pseudo-element
_PSEUDO_CLASS_RE = re.compile(r"(?<!:):[a-zA-Z_-][\w-]*")
_PSEUDO_ELEMENT_RE = re.compile(r"::[a-zA-Z_-][\w-]*")
# type selector at the start or right after a combinator
_ELEMENT_RE = re.compile(r"(?:^|(?<=[\s+>~]))[a-zA-Z][\w-]*")


def strip_comments(text: str) -> str:
    return _COMMENT_RE.sub("", text)


def specificity(selector: str) -> Specificity:
    """Compute the (ids, classes, elements) specificity of one selector."""
    s = strip_comments(selector).strip()
    ids = len(_ID_RE.findall(s))
    classes = (
        len(_CLASS_RE.findall(s))
        + len(_ATTR_RE.findall(s))
        + len(_PSEUDO_CLASS_RE.findall(s))
    )
    elements = len(_ELEMENT_RE.findall(s)) + len(_PSEUDO_ELEMENT_RE.findall(s))
    return Specificity(ids=ids, classes=classes, elements=elements)


def _split_group(raw: str) -> tuple[str, ...]:
    """Split a selector group on commas, dropping empty members."""
    parts = (p.strip() for p in strip_comments(raw).split(","))
    return tuple(p for p in parts if p)


def _blocks(source: str) -> Iterator[tuple[str, str]]:
    """Yield ``(selector_group, body)`` pairs by walking brace positions.

    The group runs from the end of the previous block to the next ``{`` and
    must not be empty; the body runs to the next ``}``. Scanning stops when
    either brace is missing.
    """
    pos = 0
    while True:
        open_ = source.find("{", pos)
        if open_ == -1:
            return
        if open_ == pos:
            pos += 1
            continue
        close = source.find("}", open_ + 1)
        if close == -1:
            return
        yield source[pos:open_], source[open_ + 1:close]
        pos = close + 1


def parse_rules(source: str) -> list[Rule]:
    """Parse stylesheet text into rules, in source order.

    A block whose selector group is empty after comment stripping is kept
    with an empty ``selectors`` tuple so its ``!important`` usage still counts.
    """
    rules: list[Rule] = []
    for group, body in _blocks(source):
        rules.append(
            Rule(
                selectors=_split_group(group),
                declarations=body,
                important_count=len(_IMPORTANT_RE.findall(body)),
            )
        )
    logger.debug("Parsed %d rule(s) from %d characters", len(rules), len(source))
    return rules
