"""Rule text for atomic classes: selectors, declarations, at-rule wrapping."""

from __future__ import annotations

from typing import Sequence

from atomstyle.config import CompilerConfig, VendorPrefixer
from atomstyle.rtl import ltr_declaration, rtl_declaration
from atomstyle.selectors.condition import split_at_rules

SPECIFICITY_BUMP = ":not(#\\#)"
RTL_SCOPE = 'html[dir="rtl"]'


def declaration(prop: str, value: str, prefixer: VendorPrefixer | None = None) -> str:
    """``prop:value``, or the prefixer's expansion of it."""
    if prefixer is not None:
        prefixed = prefixer(prop, value)
        if prefixed:
            return prefixed
    return f"{prop}:{value}"


def declarations(
    prop: str, values: Sequence[str], prefixer: VendorPrefixer | None = None
) -> str:
    return ";".join(declaration(prop, value, prefixer) for value in values)


def class_selector(
    class_name: str,
    selector_suffix: str | None = None,
    pseudo_element: str | None = None,
    bump: bool = False,
) -> str:
    """``.x1a2b3c4:not(#\\#):hover::before`` style selector for one class."""
    selector = f".{class_name}"
    if bump:
        selector += SPECIFICITY_BUMP
    return selector + (selector_suffix or "") + (pseudo_element or "")


def wrap_at_rules(css: str, at_rule: str | None) -> str:
    """Nest *css* inside each stacked at-rule, in a stable sorted order."""
    if not at_rule:
        return css
    for part in sorted(split_at_rules(at_rule)):
        css = f"{part}{{{css}}}"
    return css


def atomic_rules(
    class_name: str,
    prop: str,
    values: Sequence[str],
    config: CompilerConfig,
    selector_suffix: str | None = None,
    pseudo_element: str | None = None,
    at_rule: str | None = None,
) -> tuple[str, str | None]:
    """Return the ``(ltr_css, rtl_css)`` rule texts for one atomic class.

    Conditional rules get a specificity bump unless CSS layers order them.
    """
    bump = not config.use_css_layers and bool(selector_suffix or at_rule)
    selector = class_selector(class_name, selector_suffix, pseudo_element, bump)
    prefixer = config.vendor_prefixer

    ltr = [ltr_declaration(prop, value) for value in values]
    ltr_body = ";".join(declaration(p, v, prefixer) for p, v in ltr)
    ltr_css = wrap_at_rules(f"{selector}{{{ltr_body}}}", at_rule)

    mirrored = [rtl_declaration(prop, value) for value in values]
    if any(m is None for m in mirrored):
        return ltr_css, None
    rtl_body = ";".join(declaration(p, v, prefixer) for p, v in mirrored)  # type: ignore[misc]
    rtl_css = wrap_at_rules(f"{RTL_SCOPE} {selector}{{{rtl_body}}}", at_rule)
    return ltr_css, rtl_css
