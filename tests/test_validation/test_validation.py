"""Tests for component validation rules."""

from pathlib import Path

import pytest

from themed_style.model.component import Component, StyleBlock
from themed_style.model.diagnostic import Diagnostic, Severity
from themed_style.parser import parse_component
from themed_style.validation import ValidationError, validate, validate_or_raise
from themed_style.validation.rules import (
    check_duplicate_ids,
    check_replace_on_base_block,
    check_replace_target_exists,
    check_theme_has_value,
)

FIXTURES = Path(__file__).parent.parent / "fixtures"


def _component(*attr_sets: dict) -> Component:
    return Component(styles=[StyleBlock(content=".a{}", attrs=a) for a in attr_sets])


class TestCheckThemeHasValue:
    def test_valueless_theme(self):
        diags = check_theme_has_value(_component({"theme": True}))
        assert len(diags) == 1
        assert diags[0].is_error
        assert diags[0].block_index == 0

    def test_named_theme_ok(self):
        assert check_theme_has_value(_component({"theme": "a"})) == []


class TestCheckReplaceOnBaseBlock:
    def test_flags_base_replace(self):
        diags = check_replace_on_base_block(_component({}, {"replace": True}))
        assert [d.block_index for d in diags] == [1]
        assert diags[0].is_warning

    def test_themed_replace_ok(self):
        assert check_replace_on_base_block(_component({"theme": "a", "replace": True})) == []


class TestCheckReplaceTargetExists:
    def test_missing_target(self):
        diags = check_replace_target_exists(_component({"theme": "a", "replace": "x"}))
        assert len(diags) == 1
        assert "replace='x'" in diags[0].message

    def test_target_found(self):
        c = _component({"id": "x"}, {"theme": "a", "replace": "x"})
        assert check_replace_target_exists(c) == []

    def test_target_in_other_scope(self):
        c = _component({"id": "x"}, {"theme": "a", "replace": "x", "scoped": True})
        diags = check_replace_target_exists(c)
        assert len(diags) == 1
        assert "scoped base" in diags[0].message

    def test_boolean_replace_ignored(self):
        assert check_replace_target_exists(_component({"theme": "a", "replace": True})) == []


class TestCheckDuplicateIds:
    def test_duplicate(self):
        diags = check_duplicate_ids(_component({"id": "x"}, {"id": "y"}, {"id": "x"}))
        assert len(diags) == 1
        assert diags[0].block_index == 2
        assert "style#0" in diags[0].message

    def test_unique(self):
        assert check_duplicate_ids(_component({"id": "x"}, {"id": "y"})) == []


class TestValidate:
    def test_clean_component(self):
        src = (FIXTURES / "card.vue").read_text()
        assert validate(parse_component(src)) == []

    def test_lint_fixture(self):
        src = (FIXTURES / "lint_issues.vue").read_text()
        diags = validate(parse_component(src))
        rules = sorted(d.rule for d in diags)
        assert rules == [
            "check_duplicate_ids",
            "check_replace_on_base_block",
            "check_replace_target_exists",
            "check_theme_has_value",
        ]

    def test_extra_rules(self):
        def always(component: Component) -> list[Diagnostic]:
            return [Diagnostic(rule="always", severity=Severity.INFO, message="hi")]

        diags = validate(Component(), extra_rules=[always])
        assert [d.rule for d in diags] == ["always"]

    def test_validate_or_raise(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_or_raise(_component({"theme": True}))
        assert len(exc_info.value.diagnostics) == 1
        assert "1 error(s)" in str(exc_info.value)

    def test_validate_or_raise_returns_warnings(self):
        diags = validate_or_raise(_component({"replace": True}))
        assert len(diags) == 1
        assert diags[0].is_warning


class TestDiagnosticStr:
    def test_with_block(self):
        d = Diagnostic(rule="r", severity=Severity.WARNING, message="m", block_index=3)
        assert str(d) == "WARNING [style#3]: m"

    def test_without_block(self):
        d = Diagnostic(rule="r", severity=Severity.ERROR, message="m")
        assert str(d) == "ERROR: m"
