"""Tests for vars, consts, themes, keyframes, position-try and view transitions."""

import pytest

from atomstyle.config import CompilerConfig
from atomstyle.errors import ValidationError
from atomstyle.hashing import content_hash
from atomstyle.model.refs import typed
from atomstyle.processors import ProcessContext
from atomstyle.tokens import (
    compile_const,
    compile_keyframes,
    compile_position_try,
    compile_theme,
    compile_var,
    compile_view_transition,
    var_css_name,
)
from atomstyle.tokens.keyframes import frame_order
from atomstyle.tokens.vars import property_rule, root_rules


@pytest.fixture
def ctx():
    return ProcessContext(CompilerConfig())


# ---------------------------------------------------------------------------
# Vars and consts
# ---------------------------------------------------------------------------


class TestVars:
    def test_css_name(self):
        assert var_css_name("colors", "primary") == "--v" + content_hash("var:colors.primary")

    def test_plain(self):
        var = compile_var("colors", "primary", "#0af")
        assert var.values == {None: "#0af"}
        assert var.reference == f"var({var.css_name})"
        assert var.syntax is None

    def test_numbers_are_unitless(self):
        assert compile_var("space", "unit", 4).values == {None: "4"}

    def test_conditional(self):
        var = compile_var(
            "colors", "bg", {"default": "white", "@media (prefers-color-scheme: dark)": "black"}
        )
        assert var.values == {None: "white", "@media (prefers-color-scheme: dark)": "black"}

    def test_selector_condition_rejected(self):
        with pytest.raises(ValidationError, match="only 'default' and at-rules"):
            compile_var("colors", "bg", {"default": "white", ":hover": "black"})

    def test_typed(self):
        var = compile_var("motion", "angle", typed("<angle>", "0deg", inherits=False))
        assert var.syntax == "<angle>"
        assert property_rule(var) == (
            f'@property {var.css_name} {{ syntax: "<angle>"; inherits: false; initial-value: 0deg }}'
        )

    def test_typed_needs_default(self):
        with pytest.raises(ValidationError, match="needs a default"):
            compile_var("c", "x", typed("<color>", {"@media (x)": "red"}))

    def test_root_rules(self):
        a = compile_var("colors", "bg", {"default": "white", "@media (x)": "black"})
        b = compile_var("colors", "fg", "black")
        assert root_rules([a, b]) == [
            f":root{{{a.css_name}:white;{b.css_name}:black;}}",
            f"@media (x){{:root{{{a.css_name}:black;}}}}",
        ]


class TestConsts:
    def test_value(self):
        assert compile_const("space", "md", "16px").value == "16px"

    def test_number_bare(self):
        assert compile_const("z", "modal", 100).value == "100"

    @pytest.mark.parametrize("raw", [None, {"a": 1}, ["a"]])
    def test_rejects_non_scalar(self, raw):
        with pytest.raises(ValidationError):
            compile_const("space", "bad", raw)


# ---------------------------------------------------------------------------
# Themes
# ---------------------------------------------------------------------------


class TestThemes:
    def _base(self):
        return {
            "primary": compile_var("colors", "primary", "blue"),
            "bg": compile_var("colors", "bg", "white"),
        }

    def test_class_and_css(self):
        base = self._base()
        theme = compile_theme("colors", "dark", {"bg": "black"}, base)
        cls = theme.class_name
        assert cls.startswith("t") and len(cls) == 8
        assert theme.css == (f".{cls},.{cls}:root{{{base['bg'].css_name}:black;}}",)

    def test_content_addressed(self):
        base = self._base()
        a = compile_theme("colors", "dark", {"bg": "black", "primary": "cyan"}, base)
        b = compile_theme("colors", "night", {"primary": "cyan", "bg": "black"}, base)
        assert a.class_name == b.class_name

    def test_at_rule_blocks(self):
        base = self._base()
        theme = compile_theme("colors", "dark", {"bg": {"default": "black", "@media (x)": "#111"}}, base)
        assert len(theme.css) == 2
        assert theme.css[1].startswith("@media (x){")

    def test_unknown_var(self):
        with pytest.raises(ValidationError, match="does not define"):
            compile_theme("colors", "dark", {"accent": "red"}, self._base())


# ---------------------------------------------------------------------------
# Keyframes
# ---------------------------------------------------------------------------


class TestKeyframes:
    def test_frame_order(self):
        keys = ["to", "50%", "from", "25.5%"]
        assert sorted(keys, key=frame_order) == ["from", "25.5%", "50%", "to"]

    def test_compile(self, ctx):
        kf = compile_keyframes(ctx, "fade", {"to": {"opacity": 1}, "from": {"opacity": 0}})
        assert kf.identifier.startswith("x")
        assert kf.identifier.endswith("-B")
        assert kf.css == (f"@keyframes {kf.identifier}{{from{{opacity:0;}}to{{opacity:1;}}}}",)

    def test_content_addressed(self, ctx):
        a = compile_keyframes(ctx, "fade", {"from": {"opacity": 0}, "to": {"opacity": 1}})
        b = compile_keyframes(ctx, "appear", {"to": {"opacity": "1"}, "from": {"opacity": "0"}})
        assert a.identifier == b.identifier

    def test_rtl_variant(self, ctx):
        kf = compile_keyframes(ctx, "slide", {"from": {"margin_inline_start": 0}, "to": {"margin_inline_start": 10}})
        assert kf.css[0] == (
            f"@keyframes {kf.identifier}{{from{{margin-left:0;}}to{{margin-left:10px;}}}}"
        )
        assert kf.css[1] == (
            f'html[dir="rtl"]{{@keyframes {kf.identifier}'
            "{from{margin-right:0;}to{margin-right:10px;}}}"
        )

    def test_invalid_selector(self, ctx):
        with pytest.raises(ValidationError, match="Invalid keyframe selector"):
            compile_keyframes(ctx, "bad", {"middle": {"opacity": 1}})

    def test_unknown_property(self, ctx):
        with pytest.raises(ValidationError):
            compile_keyframes(ctx, "bad", {"from": {"opacty": 1}})

    def test_empty(self, ctx):
        with pytest.raises(ValidationError):
            compile_keyframes(ctx, "bad", {})


# ---------------------------------------------------------------------------
# Position-try
# ---------------------------------------------------------------------------


class TestPositionTry:
    def test_compile(self, ctx):
        pt = compile_position_try(ctx, "below", {"top": "anchor(bottom)", "left": 0})
        assert pt.identifier.startswith("--x")
        assert pt.css == f"@position-try {pt.identifier}{{left:0;top:anchor(bottom);}}"

    def test_logical_inset(self, ctx):
        pt = compile_position_try(ctx, "start", {"inset_inline_start": "anchor(end)"})
        assert "left:anchor(end);" in pt.css

    def test_disallowed_property(self, ctx):
        with pytest.raises(ValidationError, match="not allowed in position-try"):
            compile_position_try(ctx, "bad", {"color": "red"})

    def test_order_independent(self, ctx):
        a = compile_position_try(ctx, "a", {"top": 0, "left": 0})
        b = compile_position_try(ctx, "b", {"left": 0, "top": 0})
        assert a.identifier == b.identifier


# ---------------------------------------------------------------------------
# View transitions
# ---------------------------------------------------------------------------


class TestViewTransitions:
    def test_compile(self, ctx):
        vt = compile_view_transition(
            ctx, "fade", {"new": {"opacity": 1}, "::view-transition-old": {"opacity": 0}}
        )
        cls = vt.class_name
        assert vt.css == (
            f"::view-transition-old(*.{cls}){{opacity:0;}}",
            f"::view-transition-new(*.{cls}){{opacity:1;}}",
        )

    def test_invalid_kind(self, ctx):
        with pytest.raises(ValidationError, match="Invalid view transition key"):
            compile_view_transition(ctx, "bad", {"middle": {"opacity": 1}})

    def test_unknown_property(self, ctx):
        with pytest.raises(ValidationError):
            compile_view_transition(ctx, "bad", {"old": {"opcity": 1}})
