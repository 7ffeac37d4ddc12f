"""Tests for RuleRegistry, CompilerConfig and the error types."""

import threading

import pytest

from atomstyle.config import CompilerConfig, ShorthandBehavior
from atomstyle.errors import (
    CompileError,
    LoadError,
    PolicyWarning,
    StyleReferenceError,
    ValidationError,
)
from atomstyle.model.diagnostic import Diagnostic, Severity
from atomstyle.model.entry import AtomicClassEntry
from atomstyle.registry import RuleRegistry


def _entry(name, prop="color", priority=3007, selector=None):
    return AtomicClassEntry(
        class_name=name,
        property=prop,
        value="red",
        ltr_css=f".{name}{{{prop}:red}}",
        priority=priority,
        selector_suffix=selector,
    )


# ---------------------------------------------------------------------------
# RuleRegistry
# ---------------------------------------------------------------------------


class TestRuleRegistry:
    def test_insert_and_get(self):
        reg = RuleRegistry()
        entry = _entry("xaaa")
        assert reg.insert(entry) is True
        assert reg.get("xaaa") is entry
        assert "xaaa" in reg
        assert len(reg) == 1

    def test_first_writer_wins(self):
        reg = RuleRegistry()
        first = _entry("xaaa")
        reg.insert(first)
        assert reg.insert(_entry("xaaa", prop="background-color")) is False
        assert reg.get("xaaa") is first

    def test_null_entries_skipped(self):
        reg = RuleRegistry()
        assert reg.insert(AtomicClassEntry.null("color")) is False
        assert len(reg) == 0

    def test_insert_all(self):
        reg = RuleRegistry()
        reg.insert(_entry("xaaa"))
        added = reg.insert_all([_entry("xaaa"), _entry("xbbb"), AtomicClassEntry.null("color")])
        assert added == 1
        assert len(reg) == 2

    def test_missing(self):
        reg = RuleRegistry()
        assert reg.get("nope") is None
        assert "nope" not in reg

    def test_sorted_entries(self):
        reg = RuleRegistry()
        reg.insert(_entry("xccc", prop="color", priority=3137, selector=":hover"))
        reg.insert(_entry("xbbb", prop="margin", priority=1004))
        reg.insert(_entry("xddd", prop="border-color", priority=2008))
        reg.insert(_entry("xaaa", prop="border-bottom", priority=2008))
        reg.insert(_entry("xeee", prop="color", priority=3007))
        assert [e.class_name for e in reg.sorted_entries()] == [
            "xbbb", "xaaa", "xddd", "xeee", "xccc",
        ]

    def test_snapshot_is_a_copy(self):
        reg = RuleRegistry()
        reg.insert(_entry("xaaa"))
        snap = reg.snapshot()
        snap.clear()
        assert len(reg) == 1

    def test_clear(self):
        reg = RuleRegistry()
        reg.insert(_entry("xaaa"))
        reg.clear()
        assert len(reg) == 0

    def test_repr(self):
        reg = RuleRegistry()
        reg.insert(_entry("xaaa"))
        assert repr(reg) == "RuleRegistry(entries=1)"

    def test_concurrent_inserts(self):
        reg = RuleRegistry()
        entries = [_entry(f"x{i:03d}") for i in range(200)]
        results = []
        lock = threading.Lock()

        def worker():
            added = sum(reg.insert(e) for e in entries)
            with lock:
                results.append(added)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(reg) == 200
        assert sum(results) == 200


# ---------------------------------------------------------------------------
# CompilerConfig
# ---------------------------------------------------------------------------


class TestCompilerConfig:
    def test_defaults(self):
        config = CompilerConfig()
        assert config.shorthand_behavior is ShorthandBehavior.ACCEPT
        assert config.use_css_layers is False
        assert config.class_name_prefix == "x"
        assert config.allowed_properties == frozenset()

    def test_behavior_from_string(self):
        assert CompilerConfig(shorthand_behavior="forbid").shorthand_behavior is ShorthandBehavior.FORBID

    def test_bad_behavior(self):
        with pytest.raises(ValueError, match="Unknown shorthand behavior"):
            CompilerConfig(shorthand_behavior="explode")

    @pytest.mark.parametrize("prefix", ["", "1x", "#"])
    def test_bad_prefix(self, prefix):
        with pytest.raises(ValueError, match="class_name_prefix"):
            CompilerConfig(class_name_prefix=prefix)

    def test_allowed_properties_frozen(self):
        config = CompilerConfig(allowed_properties=["a-prop"])
        assert config.allowed_properties == frozenset({"a-prop"})

    def test_from_mapping(self):
        config = CompilerConfig.from_mapping(
            {"use-css-layers": True, "shorthand_behavior": "flatten", "debug_class_names": True}
        )
        assert config.use_css_layers is True
        assert config.shorthand_behavior is ShorthandBehavior.FLATTEN
        assert config.debug_class_names is True

    def test_from_mapping_rejects_unknown(self):
        with pytest.raises(ValueError, match="Unknown config option 'colour'"):
            CompilerConfig.from_mapping({"colour": "red"})

    def test_from_mapping_rejects_callables(self):
        with pytest.raises(ValueError):
            CompilerConfig.from_mapping({"vendor_prefixer": "x"})


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class TestErrors:
    def test_validation_from_string(self):
        exc = ValidationError("bad value")
        assert str(exc) == "bad value"
        assert len(exc.diagnostics) == 1
        assert exc.diagnostics[0].is_error
        assert isinstance(exc, CompileError)

    def test_validation_multiple(self):
        diags = [
            Diagnostic(rule="a", severity=Severity.ERROR, message="first"),
            Diagnostic(rule="b", severity=Severity.WARNING, message="ignored"),
            Diagnostic(rule="c", severity=Severity.ERROR, message="second"),
        ]
        exc = ValidationError(diags)
        assert str(exc) == "Validation failed with 2 error(s): first; second"

    def test_reference_error_message(self):
        exc = StyleReferenceError(
            "var colors.primary", "classes.button", "via define_vars('colors', ...)"
        )
        assert str(exc) == (
            "Reference to var colors.primary is not defined (referenced from classes.button); "
            "expected a definition via define_vars('colors', ...)"
        )
        assert isinstance(exc, LookupError)
        assert exc.reference == "var colors.primary"

    def test_reference_error_reason(self):
        exc = StyleReferenceError("class base", reason="is defined after its use")
        assert str(exc) == "Reference to class base is defined after its use"

    def test_load_error_path(self):
        assert str(LoadError("boom", path="a.json")) == "a.json: boom"
        assert LoadError("boom").path is None

    def test_policy_warning_category(self):
        assert issubclass(PolicyWarning, UserWarning)
