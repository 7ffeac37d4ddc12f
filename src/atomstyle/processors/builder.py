"""Shared entry construction for the declaration processors."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from atomstyle.config import CompilerConfig
from atomstyle.css.rules import atomic_rules
from atomstyle.hashing import atomic_class_name
from atomstyle.model.diagnostic import Diagnostic
from atomstyle.model.entry import AtomicClassEntry
from atomstyle.model.refs import FirstThatWorks
from atomstyle.priority import priority
from atomstyle.selectors.pseudo import is_pseudo_element, split_pseudos
from atomstyle.validation import validate_property_or_raise
from atomstyle.values.fallback import FallbackValue, first_that_works, plain_fallback
from atomstyle.values.normalize import normalize_value


@dataclass
class ProcessContext:
    """Per-definition processing state.

    Attributes:
        config: Compiler options.
        definition: Name of the definition being processed, for messages.
        diagnostics: Non-fatal findings collected while processing.
    """

    config: CompilerConfig
    definition: str | None = None
    diagnostics: list[Diagnostic] = field(default_factory=list)

    def check_property(self, prop: str) -> None:
        """Validate *prop*, raising on errors and collecting warnings."""
        self.diagnostics.extend(
            d
            for d in validate_property_or_raise(prop, self.config, self.definition)
            if not d.is_error
        )


def dash_case(prop: str) -> str:
    """``background_color`` -> ``background-color``; custom properties as-is."""
    if prop.startswith("--"):
        return prop
    return prop.replace("_", "-")


def normalize_leaf(prop: str, value: Any) -> str | FallbackValue:
    if isinstance(value, FirstThatWorks):
        return first_that_works(prop, value.values)
    if isinstance(value, (list, tuple)):
        return plain_fallback(prop, value)
    return normalize_value(prop, value)


def split_pseudo_element(
    selector_suffix: str | None, pseudo_element: str | None = None
) -> tuple[str | None, str | None]:
    """Move pseudo-element tokens out of a combined suffix."""
    if not selector_suffix or "::" not in selector_suffix:
        return selector_suffix, pseudo_element
    classes: list[str] = []
    elements: list[str] = [pseudo_element] if pseudo_element else []
    for token in split_pseudos(selector_suffix):
        (elements if is_pseudo_element(token) else classes).append(token)
    return ("".join(classes) or None, "".join(elements) or None)


def build_entry(
    ctx: ProcessContext,
    prop: str,
    value: Any,
    selector_suffix: str | None = None,
    pseudo_element: str | None = None,
    at_rule: str | None = None,
    var_name: str | None = None,
) -> AtomicClassEntry:
    """Normalize *value* and build the atomic entry for one condition."""
    if value is None:
        return AtomicClassEntry.null(prop)
    selector_suffix, pseudo_element = split_pseudo_element(selector_suffix, pseudo_element)
    normalized = normalize_leaf(prop, value)
    if isinstance(normalized, FallbackValue):
        hashed, emitted = normalized.value, normalized.emitted
    else:
        hashed, emitted = normalized, (normalized,)

    config = ctx.config
    class_name = atomic_class_name(
        prop, hashed, selector_suffix, pseudo_element, at_rule, prefix=config.class_name_prefix
    )
    if config.debug_class_names:
        class_name = f"{class_name}-{prop.lstrip('-')}"
    ltr_css, rtl_css = atomic_rules(
        class_name, prop, emitted, config, selector_suffix, pseudo_element, at_rule
    )
    return AtomicClassEntry(
        class_name=class_name,
        property=prop,
        value=hashed,
        ltr_css=ltr_css,
        rtl_css=rtl_css,
        priority=priority(prop, selector_suffix, at_rule, pseudo_element),
        selector_suffix=selector_suffix,
        pseudo_element=pseudo_element,
        at_rule=at_rule,
        var_name=var_name,
    )
