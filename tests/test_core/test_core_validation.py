"""Tests for the property validation rules."""

import pytest

from atomstyle.config import CompilerConfig
from atomstyle.errors import ValidationError
from atomstyle.model.diagnostic import Diagnostic, Severity
from atomstyle.validation import (
    ALL_RULES,
    suggest_properties,
    validate_property,
    validate_property_or_raise,
)


def _webkit_user_select(prop, value):
    if prop == "user-select":
        return f"-webkit-user-select:{value};user-select:{value}"
    return None


# ---------------------------------------------------------------------------
# Known properties
# ---------------------------------------------------------------------------


class TestKnownProperty:
    def test_known(self):
        assert validate_property("color", CompilerConfig()) == []

    def test_custom_property(self):
        assert validate_property("--brand-color", CompilerConfig()) == []

    def test_allow_list(self):
        config = CompilerConfig(allowed_properties={"my-prop"})
        assert validate_property("my-prop", config) == []

    def test_unknown_has_suggestions(self):
        diags = validate_property("colr", CompilerConfig())
        assert len(diags) == 1
        assert diags[0].is_error
        assert "color" in diags[0].suggestions
        assert "Did you mean" in diags[0].message

    def test_suggestions_capped(self):
        assert len(suggest_properties("margin-x")) <= 3

    def test_raise(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_property_or_raise("backgroud-color", CompilerConfig(), definition="button")
        assert "background-color" in exc_info.value.suggestions
        assert exc_info.value.diagnostics[0].definition == "button"

    def test_prefixed_unknown_without_prefixer(self):
        diags = validate_property("-webkit-user-select", CompilerConfig())
        assert [d.rule for d in diags] == ["check_known_property"]


# ---------------------------------------------------------------------------
# Policy warnings
# ---------------------------------------------------------------------------


class TestPolicyWarnings:
    def test_deprecated_builtin_list(self):
        diags = validate_property("word-wrap", CompilerConfig())
        assert [d.rule for d in diags] == ["check_deprecated"]
        assert diags[0].is_warning

    def test_custom_checker_replaces_list(self):
        config = CompilerConfig(deprecation_checker=lambda p: p == "color")
        assert [d.rule for d in validate_property("color", config)] == ["check_deprecated"]
        assert validate_property("word-wrap", config) == []

    def test_unnecessary_vendor_prefix(self):
        config = CompilerConfig(vendor_prefixer=_webkit_user_select)
        diags = validate_property("-webkit-user-select", config)
        assert [d.rule for d in diags] == ["check_vendor_prefix"]
        assert diags[0].suggestions == ("user-select",)

    def test_warnings_returned_not_raised(self):
        diags = validate_property_or_raise("grid-gap", CompilerConfig(), definition="layout")
        assert len(diags) == 1
        assert str(diags[0]) == "WARNING [class=layout]: Property 'grid-gap' is deprecated."

    def test_extra_rules(self):
        def no_floats(prop, config):
            if prop == "float":
                return [Diagnostic(rule="no_floats", severity=Severity.ERROR, message="no floats")]
            return []

        with pytest.raises(ValidationError, match="no floats"):
            validate_property_or_raise("float", CompilerConfig(), extra_rules=[no_floats])

    def test_rule_list(self):
        assert [r.__name__ for r in ALL_RULES] == [
            "check_known_property",
            "check_vendor_prefix",
            "check_deprecated",
        ]


# ---------------------------------------------------------------------------
# Diagnostic model
# ---------------------------------------------------------------------------


class TestDiagnostic:
    def test_package_imports(self):
        import atomstyle

        assert atomstyle.ValidationError is ValidationError

    def test_severity_flags(self):
        diag = Diagnostic(rule="r", severity=Severity.ERROR, message="bad", css_property="colr")
        assert diag.is_error
        assert not diag.is_warning

    def test_str_names_property_without_definition(self):
        diag = Diagnostic(rule="r", severity=Severity.WARNING, message="old", css_property="clip")
        assert str(diag) == "WARNING [property=clip]: old"

    def test_with_definition_keeps_property(self):
        diag = Diagnostic(rule="r", severity=Severity.WARNING, message="old", css_property="clip")
        attributed = diag.with_definition("card")
        assert attributed.definition == "card"
        assert attributed.css_property == "clip"
        assert str(attributed) == "WARNING [class=card]: old"

    def test_rules_record_property(self):
        diags = validate_property("word-wrap", CompilerConfig())
        assert diags[0].css_property == "word-wrap"
