"""Tests for condition keys, pseudo ordering, media rewrites and contextual selectors."""

import pytest

from atomstyle.errors import ValidationError
from atomstyle.model.refs import Marker
from atomstyle.selectors import when
from atomstyle.selectors.condition import (
    DEFAULT,
    at_rule_kind,
    combine,
    flatten_conditions,
    is_conditional_map,
    normalize_condition,
    parse_combined,
    split_at_rules,
)
from atomstyle.selectors.media import (
    WidthQuery,
    format_length,
    last_media_query_wins,
    parse_width_query,
)
from atomstyle.selectors.pseudo import (
    pseudo_priority,
    sort_combined_pseudos,
    split_pseudos,
)


# ---------------------------------------------------------------------------
# Combined condition parsing
# ---------------------------------------------------------------------------


class TestParseCombined:
    def test_none(self):
        assert parse_combined(None) == (None, None)
        assert parse_combined("") == (None, None)

    def test_pseudo_only(self):
        assert parse_combined(":hover") == (":hover", None)

    def test_at_rule_only(self):
        assert parse_combined("@media (min-width: 768px)") == (None, "@media (min-width: 768px)")

    def test_at_rule_then_pseudo(self):
        assert parse_combined("@media (min-width: 768px):hover") == (
            ":hover",
            "@media (min-width: 768px)",
        )

    def test_pseudo_then_at_rule(self):
        assert parse_combined(":hover@media (x)") == (":hover", "@media (x)")

    def test_colon_inside_parens_is_not_a_suffix(self):
        assert parse_combined("@supports (color: oklch(0 0 0))@media (y):hover") == (
            ":hover",
            "@supports (color: oklch(0 0 0))@media (y)",
        )


class TestSplitAtRules:
    def test_single(self):
        assert split_at_rules("@media (x)") == ["@media (x)"]

    def test_stacked(self):
        assert split_at_rules("@supports (display: grid)@media (x)") == [
            "@supports (display: grid)",
            "@media (x)",
        ]

    def test_kind(self):
        assert at_rule_kind("@container card (min-width: 1px)") == "@container"
        assert at_rule_kind("@starting-style") == "@starting-style"


class TestCombine:
    def test_default_is_transparent(self):
        assert combine(None, DEFAULT) is None
        assert combine(":hover", DEFAULT) == ":hover"

    def test_textual_append(self):
        assert combine("@media (x)", ":hover") == "@media (x):hover"
        assert combine(None, ":focus") == ":focus"


class TestConditionalMap:
    def test_default_key(self):
        assert is_conditional_map({"default": "red", "foo": 1})

    def test_all_condition_keys(self):
        assert is_conditional_map({":hover": "red", "@media (x)": "blue"})

    def test_plain_values(self):
        assert not is_conditional_map("red")
        assert not is_conditional_map({})
        assert not is_conditional_map({"color": "red"})


class TestFlatten:
    def test_scalar(self):
        assert flatten_conditions("red") == [(None, "red")]

    def test_nested(self):
        value = {
            "default": "red",
            ":hover": "blue",
            "@media (min-width: 1px)": {"default": "green", ":hover": "white"},
        }
        assert flatten_conditions(value) == [
            (None, "red"),
            (":hover", "blue"),
            ("@media (min-width: 1px)", "green"),
            ("@media (min-width: 1px):hover", "white"),
        ]

    def test_whitespace_normalized(self):
        pairs = flatten_conditions({"@media  ( min-width:  1px )": "red"})
        assert pairs == [("@media (min-width: 1px)", "red")]

    def test_invalid_key(self):
        with pytest.raises(ValidationError, match="Invalid condition key 'hover'"):
            flatten_conditions({"default": "red", "hover": "blue"}, prop="color")

    def test_nested_property_map_rejected(self):
        with pytest.raises(ValidationError, match="not conditions"):
            flatten_conditions({"color": "red"}, prop="color")

    def test_normalize_condition(self):
        assert normalize_condition("  @media   (x)  ") == "@media (x)"


# ---------------------------------------------------------------------------
# Pseudo-classes and pseudo-elements
# ---------------------------------------------------------------------------


class TestPseudos:
    def test_split(self):
        assert split_pseudos(":hover::before:focus") == [":hover", "::before", ":focus"]

    def test_split_keeps_arguments(self):
        assert split_pseudos(":not(:hover):focus") == [":not(:hover)", ":focus"]

    def test_sort(self):
        assert sort_combined_pseudos(":hover:active") == ":active:hover"

    def test_sort_keeps_pseudo_elements_in_place(self):
        assert sort_combined_pseudos(":hover::before") == ":hover::before"
        assert sort_combined_pseudos("::after:hover:focus") == "::after:focus:hover"

    def test_functional_unchanged(self):
        assert sort_combined_pseudos(":nth-child(2):hover") == ":nth-child(2):hover"

    def test_priorities(self):
        assert pseudo_priority(None) == 0
        assert pseudo_priority(":hover") == 130
        assert pseudo_priority(":focus-visible") == 160
        assert pseudo_priority(":hover:active") == 300
        assert pseudo_priority("::before") == 5000
        assert pseudo_priority("::before:hover") == 5130

    def test_unknown_pseudo(self):
        assert pseudo_priority(":popover-open") == 40

    def test_functional_priority_uses_base(self):
        assert pseudo_priority(":nth-child(2n)") == 60


# ---------------------------------------------------------------------------
# Width media queries
# ---------------------------------------------------------------------------


class TestWidthQuery:
    def test_min_width(self):
        assert parse_width_query("@media (min-width: 768px)") == WidthQuery("min-width", 768.0, "px")

    def test_max_width_em(self):
        assert parse_width_query("@media (max-width: 40em)") == WidthQuery("max-width", 40.0, "em")

    @pytest.mark.parametrize(
        "query",
        [
            "@media (prefers-color-scheme: dark)",
            "@media (min-width: 1px) and (max-width: 2px)",
            "@supports (display: grid)",
            "@media screen",
        ],
    )
    def test_not_width(self, query):
        assert parse_width_query(query) is None

    def test_format_length(self):
        assert format_length(1999.99) == "1999.99"
        assert format_length(500.0) == "500"


class TestLastMediaQueryWins:
    def test_min_widths_get_upper_bounds(self):
        keys = [None, "@media (min-width: 1000px)", "@media (min-width: 2000px)"]
        result = last_media_query_wins(keys)
        assert result[None] is None
        assert result["@media (min-width: 1000px)"] == (
            "@media (min-width: 1000px) and (max-width: 1999.99px)"
        )
        assert result["@media (min-width: 2000px)"] == "@media (min-width: 2000px)"

    def test_max_widths_get_lower_bounds(self):
        keys = ["@media (max-width: 900px)", "@media (max-width: 500px)"]
        result = last_media_query_wins(keys)
        assert result["@media (max-width: 900px)"] == (
            "@media (min-width: 500.01px) and (max-width: 900px)"
        )
        assert result["@media (max-width: 500px)"] == "@media (max-width: 500px)"

    def test_single_query_unchanged(self):
        keys = ["@media (min-width: 768px)"]
        assert last_media_query_wins(keys) == {"@media (min-width: 768px)": "@media (min-width: 768px)"}

    def test_suffix_groups_separately(self):
        keys = [
            "@media (min-width: 100px):hover",
            "@media (min-width: 200px):hover",
            "@media (min-width: 300px)",
        ]
        result = last_media_query_wins(keys)
        assert result["@media (min-width: 100px):hover"] == (
            "@media (min-width: 100px) and (max-width: 199.99px):hover"
        )
        assert result["@media (min-width: 200px):hover"] == "@media (min-width: 200px):hover"
        assert result["@media (min-width: 300px)"] == "@media (min-width: 300px)"

    def test_non_width_queries_ignored(self):
        keys = ["@media (prefers-reduced-motion: reduce)", ":hover"]
        assert last_media_query_wins(keys) == {k: k for k in keys}


# ---------------------------------------------------------------------------
# Contextual selectors
# ---------------------------------------------------------------------------


class TestWhen:
    def test_ancestor_default_marker(self):
        assert when.ancestor(":hover") == ":where(.x-default-marker:hover *)"

    def test_descendant(self):
        assert when.descendant(":focus") == ":where(:has(.x-default-marker:focus))"

    def test_siblings(self):
        assert when.sibling_before(":hover") == ":where(.x-default-marker:hover ~ *)"
        assert when.sibling_after(":hover") == ":where(:has(~ .x-default-marker:hover))"
        assert when.any_sibling(":hover") == (
            ":where(.x-default-marker:hover ~ *, :has(~ .x-default-marker:hover))"
        )

    def test_named_marker(self):
        marker = when.define_marker("card")
        assert isinstance(marker, Marker)
        assert marker.class_name.startswith("x")
        assert len(marker.class_name) == 8
        assert when.ancestor(":hover", marker) == f":where(.{marker.class_name}:hover *)"

    def test_marker_is_deterministic(self):
        assert when.define_marker("card") == when.define_marker("card")
        assert when.define_marker("card") != when.define_marker("row")

    def test_pseudo_element_rejected(self):
        with pytest.raises(ValidationError, match="Pseudo-elements"):
            when.ancestor("::before")

    def test_missing_colon_rejected(self):
        with pytest.raises(ValidationError):
            when.descendant("hover")

    def test_usable_as_condition_key(self):
        pairs = flatten_conditions({"default": "1", when.ancestor(":hover"): ".5"})
        assert pairs == [(None, "1"), (":where(.x-default-marker:hover *)", ".5")]
