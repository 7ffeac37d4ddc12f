"""Assemble the final stylesheet from compiled rules."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from atomstyle.config import CompilerConfig
from atomstyle.model.entry import AtomicClassEntry

log = logging.getLogger("atomstyle.css")

TIER_SIZE = 1000


@dataclass(frozen=True)
class CSSRule:
    """One emitted rule and the priority it was sorted by."""

    css_text: str
    priority: int = 0


def dynamic_property_rule(var_name: str) -> str:
    """Non-inheriting registration so pseudo-elements do not pick up runtime values."""
    return f'@property {var_name} {{ syntax: "*"; inherits: false; }}'


def layer_name(config: CompilerConfig, priority: int) -> str:
    return f"{config.layer_name}-p{priority // TIER_SIZE}"


def _entry_rules(entry: AtomicClassEntry) -> list[str]:
    rules = [entry.ltr_css] if entry.ltr_css else []
    if entry.rtl_css:
        rules.append(entry.rtl_css)
    return rules


def atomic_css_rules(entries: Iterable[AtomicClassEntry], config: CompilerConfig) -> list[CSSRule]:
    """Atomic rules in cascade order, each followed by its RTL mirror.

    With layers enabled the rules are grouped into one ``@layer`` block
    per priority tier, preceded by the layer order statement.
    """
    ordered = sorted(entries, key=lambda e: e.sort_key)
    if not config.use_css_layers:
        return [CSSRule(css, e.priority) for e in ordered for css in _entry_rules(e)]

    layers: dict[str, list[str]] = {}
    first_priority: dict[str, int] = {}
    for entry in ordered:
        name = layer_name(config, entry.priority)
        layers.setdefault(name, []).extend(_entry_rules(entry))
        first_priority.setdefault(name, entry.priority)
    if not layers:
        return []
    rules = [CSSRule(f"@layer {', '.join(layers)};", 0)]
    for name, body in layers.items():
        rules.append(CSSRule(f"@layer {name}{{{''.join(body)}}}", first_priority[name]))
    return rules


def assemble(
    atomic: Iterable[AtomicClassEntry],
    config: CompilerConfig,
    property_rules: Iterable[str] = (),
    dynamic_vars: Iterable[str] = (),
    keyframes: Iterable[str] = (),
    root_rules: Iterable[str] = (),
    position_try: Iterable[str] = (),
    view_transitions: Iterable[str] = (),
    themes: Iterable[str] = (),
) -> list[CSSRule]:
    """Order every rule of the stylesheet and drop exact duplicates.

    Order: ``@property`` rules (typed vars, then dynamic vars),
    ``@keyframes``, ``:root`` blocks, ``@position-try``, view
    transitions, atomic rules, theme classes.
    """
    leading = [
        *property_rules,
        *(dynamic_property_rule(v) for v in sorted(set(dynamic_vars))),
        *keyframes,
        *root_rules,
        *position_try,
        *view_transitions,
    ]
    rules = [CSSRule(css) for css in leading]
    rules.extend(atomic_css_rules(atomic, config))
    rules.extend(CSSRule(css) for css in themes)

    seen: set[str] = set()
    unique: list[CSSRule] = []
    for rule in rules:
        if rule.css_text in seen:
            continue
        seen.add(rule.css_text)
        unique.append(rule)
    log.debug("assembled %d rules (%d duplicates dropped)", len(unique), len(rules) - len(unique))
    return unique


def render(rules: Iterable[CSSRule]) -> str:
    return "\n".join(rule.css_text for rule in rules)
