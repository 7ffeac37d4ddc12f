"""Tests for the declaration processors and rule text."""

import pytest

from atomstyle.config import CompilerConfig
from atomstyle.css.rules import (
    SPECIFICITY_BUMP,
    class_selector,
    declaration,
    wrap_at_rules,
)
from atomstyle.errors import ValidationError
from atomstyle.hashing import atomic_class_name
from atomstyle.model.entry import AtomicClassEntry, ConditionalBundle
from atomstyle.model.refs import first_that_works
from atomstyle.processors import (
    ProcessContext,
    dynamic_var_name,
    process_declarations,
    process_dynamic,
)


def _webkit_user_select(prop, value):
    if prop == "user-select":
        return f"-webkit-user-select:{value};user-select:{value}"
    return None


@pytest.fixture
def ctx():
    return ProcessContext(CompilerConfig(), definition="sample")


# ---------------------------------------------------------------------------
# Rule text helpers
# ---------------------------------------------------------------------------


class TestRuleText:
    def test_bump(self):
        assert SPECIFICITY_BUMP == ":not(#\\#)"
        assert class_selector("xabc", ":hover", bump=True) == ".xabc:not(#\\#):hover"

    def test_pseudo_element_last(self):
        assert class_selector("xabc", ":hover", "::before") == ".xabc:hover::before"

    def test_wrap_sorted(self):
        css = wrap_at_rules(".a{b:c}", "@supports (d: e)@media (x)")
        assert css == "@supports (d: e){@media (x){.a{b:c}}}"

    def test_declaration_prefixer_fallthrough(self):
        assert declaration("color", "red", _webkit_user_select) == "color:red"


# ---------------------------------------------------------------------------
# Simple declarations
# ---------------------------------------------------------------------------


class TestSimple:
    def test_plain(self, ctx):
        entries = process_declarations(ctx, {"color": "red"})
        entry = entries["color"]
        name = atomic_class_name("color", "red")
        assert entry.class_name == name
        assert entry.ltr_css == f".{name}{{color:red}}"
        assert entry.rtl_css is None
        assert entry.priority == 3007

    def test_snake_case_keys(self, ctx):
        entries = process_declarations(ctx, {"background_color": "red"})
        assert list(entries) == ["background-color"]

    def test_equivalent_values_share_a_class(self, ctx):
        a = process_declarations(ctx, {"margin": 0})["margin"]
        b = process_declarations(ctx, {"margin": "0px"})["margin"]
        assert a.class_name == b.class_name

    def test_null_entry(self, ctx):
        entry = process_declarations(ctx, {"color": None})["color"]
        assert entry == AtomicClassEntry.null("color")
        assert entry.class_name is None

    def test_fallback_list(self, ctx):
        entry = process_declarations(ctx, {"position": ["sticky", "fixed"]})["position"]
        assert entry.value == "sticky, fixed"
        assert entry.ltr_css == f".{entry.class_name}{{position:fixed;position:sticky}}"

    def test_first_that_works(self, ctx):
        entry = process_declarations(
            ctx, {"color": first_that_works("var(--a)", "var(--b)", "red")}
        )["color"]
        assert entry.ltr_css == f".{entry.class_name}{{color:var(--a,var(--b,red))}}"

    def test_custom_property(self, ctx):
        entry = process_declarations(ctx, {"--brand": "#0af"})["--brand"]
        assert entry.priority == 1
        assert entry.ltr_css.endswith("{--brand:#0af}")

    def test_debug_class_names(self):
        ctx = ProcessContext(CompilerConfig(debug_class_names=True))
        entry = process_declarations(ctx, {"color": "red"})["color"]
        assert entry.class_name == atomic_class_name("color", "red") + "-color"

    def test_prefix(self):
        ctx = ProcessContext(CompilerConfig(class_name_prefix="s"))
        entry = process_declarations(ctx, {"color": "red"})["color"]
        assert entry.class_name.startswith("s")


class TestErrors:
    def test_unknown_property(self, ctx):
        with pytest.raises(ValidationError) as exc_info:
            process_declarations(ctx, {"colr": "red"})
        assert "color" in exc_info.value.suggestions

    def test_condition_as_property(self, ctx):
        with pytest.raises(ValidationError, match="cannot be used as a property"):
            process_declarations(ctx, {":hover": {"color": "red"}})

    def test_invalid_value(self, ctx):
        with pytest.raises(ValidationError):
            process_declarations(ctx, {"color": True})


# ---------------------------------------------------------------------------
# Conditional declarations
# ---------------------------------------------------------------------------


class TestConditional:
    def test_bundle_keys(self, ctx):
        bundle = process_declarations(
            ctx, {"color": {"default": "red", ":hover": "blue", "@media (min-width: 1px)": "green"}}
        )["color"]
        assert isinstance(bundle, ConditionalBundle)
        assert list(bundle) == ["default", ":hover", "@media (min-width: 1px)"]

    def test_hover_rule_is_bumped(self, ctx):
        entry = process_declarations(ctx, {"color": {"default": "red", ":hover": "blue"}})["color"][":hover"]
        assert entry.ltr_css == f".{entry.class_name}:not(#\\#):hover{{color:blue}}"
        assert entry.priority == 3007 + 130

    def test_media_rule(self, ctx):
        entry = process_declarations(ctx, {"color": {"@media (min-width: 1px)": "green"}})["color"][
            "@media (min-width: 1px)"
        ]
        assert entry.ltr_css == (
            f"@media (min-width: 1px){{.{entry.class_name}:not(#\\#){{color:green}}}}"
        )
        assert entry.at_rule == "@media (min-width: 1px)"

    def test_no_bump_with_layers(self):
        ctx = ProcessContext(CompilerConfig(use_css_layers=True))
        entry = process_declarations(ctx, {"color": {":hover": "blue"}})["color"][":hover"]
        assert entry.ltr_css == f".{entry.class_name}:hover{{color:blue}}"

    def test_nested_conditions(self, ctx):
        bundle = process_declarations(
            ctx, {"color": {"@media (min-width: 1px)": {"default": "red", ":hover": "blue"}}}
        )["color"]
        entry = bundle["@media (min-width: 1px):hover"]
        assert entry.selector_suffix == ":hover"
        assert entry.at_rule == "@media (min-width: 1px)"

    def test_stacked_at_rules(self, ctx):
        entry = process_declarations(
            ctx,
            {"display": {"@supports (display: grid)": {"@media (min-width: 1px)": "grid"}}},
        )["display"]["@supports (display: grid)@media (min-width: 1px)"]
        assert entry.ltr_css == (
            "@supports (display: grid){@media (min-width: 1px)"
            f"{{.{entry.class_name}:not(#\\#){{display:grid}}}}}}"
        )
        assert entry.priority == 3000 + 500

    def test_null_branch(self, ctx):
        bundle = process_declarations(ctx, {"color": {"default": "red", ":hover": None}})["color"]
        assert bundle[":hover"].is_null
        assert bundle.class_names() == [bundle["default"].class_name]

    def test_whitespace_variants_last_wins(self, ctx):
        bundle = process_declarations(
            ctx,
            {
                "color": {
                    "default": "red",
                    "@media (min-width: 1px)": "blue",
                    "@media  (min-width:  1px)": "green",
                }
            },
        )["color"]
        assert len(bundle) == 2
        assert bundle["@media (min-width: 1px)"].value == "green"

    def test_last_media_query_wins(self, ctx):
        bundle = process_declarations(
            ctx,
            {
                "width": {
                    "default": "10px",
                    "@media (min-width: 1000px)": "20px",
                    "@media (min-width: 2000px)": "30px",
                }
            },
        )["width"]
        bounded = "@media (min-width: 1000px) and (max-width: 1999.99px)"
        first = bundle["@media (min-width: 1000px)"]
        assert first.at_rule == bounded
        assert first.class_name == atomic_class_name("width", "20px", at_rule=bounded)
        assert bundle["@media (min-width: 2000px)"].at_rule == "@media (min-width: 2000px)"

    def test_contextual_selector(self, ctx):
        from atomstyle.selectors import when

        key = when.ancestor(":hover")
        entry = process_declarations(ctx, {"opacity": {"default": 1, key: 0.5}})["opacity"][key]
        assert entry.ltr_css == (
            f".{entry.class_name}:not(#\\#):where(.x-default-marker:hover *){{opacity:.5}}"
        )


# ---------------------------------------------------------------------------
# Pseudo-elements
# ---------------------------------------------------------------------------


class TestPseudoElement:
    def test_block(self, ctx):
        entries = process_declarations(ctx, {"::before": {"content": "''", "color": "red"}})
        assert set(entries) == {"content::before", "color::before"}
        entry = entries["content::before"]
        assert entry.pseudo_element == "::before"
        assert entry.ltr_css == f'.{entry.class_name}::before{{content:""}}'
        assert entry.priority == 3006 + 5000

    def test_conditions_inside(self, ctx):
        bundle = process_declarations(
            ctx, {"::after": {"color": {"default": "red", ":hover": "blue"}}}
        )["color::after"]
        entry = bundle[":hover"]
        assert entry.ltr_css == f".{entry.class_name}:not(#\\#):hover::after{{color:blue}}"

    def test_differs_from_plain(self, ctx):
        entries = process_declarations(ctx, {"color": "red", "::before": {"color": "red"}})
        assert entries["color"].class_name != entries["color::before"].class_name

    def test_nested_selector_rejected(self, ctx):
        with pytest.raises(ValidationError):
            process_declarations(ctx, {"::before": {":hover": {"color": "red"}}})

    def test_non_mapping_rejected(self, ctx):
        with pytest.raises(ValidationError, match="must map to a set of properties"):
            process_declarations(ctx, {"::before": "red"})


# ---------------------------------------------------------------------------
# Direction, prefixes, policy
# ---------------------------------------------------------------------------


class TestDirectionAndPrefixes:
    def test_logical_property_mirrored(self, ctx):
        entry = process_declarations(ctx, {"margin_inline_start": 10})["margin-inline-start"]
        assert entry.value == "10px"
        assert entry.ltr_css == f".{entry.class_name}{{margin-left:10px}}"
        assert entry.rtl_css == f'html[dir="rtl"] .{entry.class_name}{{margin-right:10px}}'

    def test_vendor_prefixer(self):
        ctx = ProcessContext(CompilerConfig(vendor_prefixer=_webkit_user_select))
        entry = process_declarations(ctx, {"user_select": "none"})["user-select"]
        assert entry.ltr_css == (
            f".{entry.class_name}{{-webkit-user-select:none;user-select:none}}"
        )

    def test_vendor_warning_collected(self):
        ctx = ProcessContext(CompilerConfig(vendor_prefixer=_webkit_user_select))
        process_declarations(ctx, {"-webkit-user-select": "none"})
        assert [d.rule for d in ctx.diagnostics] == ["check_vendor_prefix"]

    def test_deprecated_warning_collected(self, ctx):
        process_declarations(ctx, {"word_wrap": "break-word"})
        assert ctx.diagnostics[0].definition == "sample"

    def test_flatten_policy(self):
        ctx = ProcessContext(CompilerConfig(shorthand_behavior="flatten"))
        entries = process_declarations(ctx, {"padding": "1px 2px"})
        assert list(entries) == ["padding-top", "padding-right", "padding-bottom", "padding-left"]
        assert entries["padding-right"].value == "2px"

    def test_forbid_policy(self):
        ctx = ProcessContext(CompilerConfig(shorthand_behavior="forbid"))
        with pytest.raises(ValidationError):
            process_declarations(ctx, {"margin": 0, "margin_top": 1})


# ---------------------------------------------------------------------------
# Dynamic
# ---------------------------------------------------------------------------


class TestDynamic:
    def test_var_name(self):
        assert dynamic_var_name("opacity") == "--x-opacity"
        assert dynamic_var_name("--size", "s") == "--s-size"

    def test_entries(self, ctx):
        entries = process_dynamic(ctx, ("opacity", "width"))
        entry = entries["opacity"]
        assert entry.var_name == "--x-opacity"
        assert entry.value == "var(--x-opacity)"
        assert entry.ltr_css == f".{entry.class_name}{{opacity:var(--x-opacity)}}"
        assert entries["width"].var_name == "--x-width"

    def test_unknown_property(self, ctx):
        with pytest.raises(ValidationError):
            process_dynamic(ctx, ("opacty",))
