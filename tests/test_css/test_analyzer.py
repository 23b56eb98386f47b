"""Tests for the CSS specificity analyzer and summary audit."""

import time

import pytest

from designkit.css import IssueType, analyze, audit
from designkit.css.analyzer import (
    IMPORTANT_FIX,
    NO_FIXES,
    SUGGEST_LOWER_SPECIFICITY,
    SUGGEST_NONE,
    SUGGEST_REDUCE_IMPORTANT,
    is_high_specificity,
    lower_specificity,
)


# ---------------------------------------------------------------------------
# analyze: empty and trivial input
# ---------------------------------------------------------------------------


class TestAnalyzeEmpty:
    def test_empty_string(self):
        report = analyze("")
        assert report.issues == ()
        assert report.suggested_code == NO_FIXES

    def test_text_without_blocks(self):
        assert analyze("body color red").to_dict() == {
            "issues": [],
            "suggested_code": "/* No high-specificity selectors to fix */",
        }

    def test_simple_selector_not_flagged(self):
        assert analyze(".card p { margin: 0; }").issues == ()

    def test_empty_group_still_reports_important(self):
        report = analyze(".a{} { color: red !important }")
        assert [i.type for i in report.issues] == [IssueType.IMPORTANT_USAGE]
        assert report.issues[0].selector == ""

    @pytest.mark.parametrize(
        "source",
        ["a" * 100_000, ".a { } /*" + "x" * 100_000, "}" * 100_000, ".a {" + "b" * 100_000],
    )
    def test_large_input_scans_linearly(self, source):
        start = time.perf_counter()
        analyze(source)
        assert time.perf_counter() - start < 2.0


# ---------------------------------------------------------------------------
# analyze: high specificity
# ---------------------------------------------------------------------------


class TestHighSpecificity:
    def test_nav_item_active(self):
        report = analyze(".nav .nav-item.active { color: blue; }")
        assert len(report.issues) == 1
        issue = report.issues[0]
        assert issue.type is IssueType.HIGH_SPECIFICITY
        assert issue.selector == ".nav .nav-item.active"
        assert ":where(" in issue.fix
        assert issue.fix == "Use :where() to lower specificity: :where(.nav) .nav-item.active"

    def test_suggested_code_block(self):
        report = analyze(".nav .nav-item.active { color: blue; }")
        assert report.suggested_code == (
            "/* Before */\n.nav .nav-item.active { ... }\n"
            "/* After */\n:where(.nav) .nav-item.active { ... }"
        )

    def test_id_in_compound(self):
        report = analyze("#app .title { color: red; }")
        assert [i.type for i in report.issues] == [IssueType.HIGH_SPECIFICITY]

    def test_deep_descendant_chain(self):
        report = analyze("header nav ul li a { color: red; }")
        assert report.issues[0].fix.endswith(":where(header nav ul li) a")

    def test_combinator_kept_outside_where(self):
        report = analyze(".menu > .item { }")
        assert report.issues[0].fix.endswith(":where(.menu) > .item")

    @pytest.mark.parametrize(
        "selector, expected",
        [
            (".a .b .c", ":where(.a .b) .c"),
            (".list > .item", ":where(.list) > .item"),
            (".label + .input", ":where(.label) + .input"),
            ("h2 ~ p", ":where(h2) ~ p"),
        ],
    )
    def test_three_part_fix_text(self, selector, expected):
        report = analyze(f"{selector} {{ }}")
        assert report.issues[0].fix == f"Use :where() to lower specificity: {expected}"

    def test_issue_references_full_group(self):
        report = analyze("#a .b, .c { color: red; }")
        assert len(report.issues) == 1
        assert report.issues[0].selector == "#a .b, .c"
        assert "/* Before */\n#a .b { ... }" in report.suggested_code

    def test_pairs_joined_in_order(self):
        report = analyze("#a .b { } #c .d { }")
        blocks = report.suggested_code.split("\n\n")
        assert len(blocks) == 2
        assert blocks[0].startswith("/* Before */\n#a .b")
        assert blocks[1].startswith("/* Before */\n#c .d")


# ---------------------------------------------------------------------------
# analyze: !important
# ---------------------------------------------------------------------------


class TestImportantUsage:
    def test_single_important(self):
        report = analyze(".a { color: red !important; }")
        assert len(report.issues_of(IssueType.IMPORTANT_USAGE)) == 1
        assert report.issues_of(IssueType.HIGH_SPECIFICITY) == []
        assert report.issues[0].selector == ".a"
        assert report.issues[0].fix == IMPORTANT_FIX
        assert report.suggested_code == NO_FIXES

    def test_one_issue_per_rule(self):
        report = analyze(".a, .b { color: red !important; margin: 0 !important; }")
        assert len(report.issues) == 1
        assert report.issues[0].selector == ".a, .b"

    def test_high_specificity_precedes_important(self):
        report = analyze("#a .b { color: red !important; }")
        assert [i.type for i in report.issues] == [
            IssueType.HIGH_SPECIFICITY,
            IssueType.IMPORTANT_USAGE,
        ]


class TestOrderingAndIdempotence:
    def test_two_rules_in_source_order(self):
        css = "#app .title { color: red; }\n.btn { color: blue !important; }"
        report = analyze(css)
        assert [i.type for i in report.issues] == [
            IssueType.HIGH_SPECIFICITY,
            IssueType.IMPORTANT_USAGE,
        ]

    def test_reverse_order(self):
        css = ".btn { color: blue !important; }\n#app .title { color: red; }"
        report = analyze(css)
        assert [i.type for i in report.issues] == [
            IssueType.IMPORTANT_USAGE,
            IssueType.HIGH_SPECIFICITY,
        ]

    def test_idempotent(self):
        css = "#app .title { color: red !important; } .x .y .z { }"
        assert analyze(css) == analyze(css)
        assert analyze(css).to_dict() == analyze(css).to_dict()

    def test_to_dict_shape(self):
        data = analyze(".a { color: red !important; }").to_dict()
        assert data["issues"] == [
            {"type": "important-usage", "selector": ".a", "fix": IMPORTANT_FIX}
        ]


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


class TestHelpers:
    def test_single_part_never_high(self):
        assert not is_high_specificity("#app")
        assert not is_high_specificity(".a.b.c")

    def test_two_light_parts(self):
        assert not is_high_specificity(".card p")

    def test_three_parts(self):
        assert is_high_specificity("a b c")

    def test_lower_single_part_unchanged(self):
        assert lower_specificity(".solo") == ".solo"


# ---------------------------------------------------------------------------
# audit summary
# ---------------------------------------------------------------------------


class TestAuditSummary:
    def test_counts_and_suggestions(self):
        summary = audit("#app { } .btn { color: red !important; } div { }")
        assert summary.total_rules == 3
        assert len(summary.high_specificity) == 1
        assert summary.high_specificity[0].selectors == ("#app",)
        assert summary.high_specificity[0].specificity.as_tuple() == (1, 0, 0)
        assert summary.important_usage[0].count == 1
        assert summary.suggestions == (SUGGEST_LOWER_SPECIFICITY, SUGGEST_REDUCE_IMPORTANT)

    def test_clean_stylesheet(self):
        summary = audit(".a { } .b { }")
        assert summary.suggestions == (SUGGEST_NONE,)

    def test_empty_stylesheet_has_no_suggestions(self):
        summary = audit("")
        assert summary.total_rules == 0
        assert summary.suggestions == ()

    def test_highest_selector_in_group(self):
        summary = audit("div, #x { }")
        assert summary.high_specificity[0].specificity.score == 100
