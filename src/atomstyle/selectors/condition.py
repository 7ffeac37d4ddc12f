"""Condition keys: parsing, combining and flattening nested condition maps."""

from __future__ import annotations

import re
from typing import Any, Mapping

from atomstyle.errors import ValidationError

DEFAULT = "default"

_WHITESPACE_RE = re.compile(r"\s+")


def normalize_condition(key: str) -> str:
    """Collapse whitespace runs so equivalent conditions compare equal."""
    key = _WHITESPACE_RE.sub(" ", key.strip())
    key = re.sub(r"\(\s+", "(", key)
    return re.sub(r"\s+\)", ")", key)


def is_condition_key(key: object) -> bool:
    return isinstance(key, str) and (key == DEFAULT or key[:1] in (":", "@"))


def is_conditional_map(value: object) -> bool:
    """True when *value* is a map of conditions rather than nested properties.

    A mapping is conditional if it has a ``"default"`` key or all of its
    keys are selector / at-rule strings.  An empty mapping is not.
    """
    if not isinstance(value, Mapping) or not value:
        return False
    if DEFAULT in value:
        return True
    return all(isinstance(k, str) and k[:1] in (":", "@") for k in value)


def combine(parent: str | None, child: str) -> str | None:
    """Append *child* to *parent*; ``"default"`` is transparent."""
    if child == DEFAULT:
        return parent
    return (parent or "") + child


def _top_level_index(selector: str, target: str, start: int = 0) -> int:
    depth = 0
    for i in range(start, len(selector)):
        ch = selector[i]
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth = max(depth - 1, 0)
        elif ch == target and depth == 0:
            return i
    return -1


def parse_combined(selector: str | None) -> tuple[str | None, str | None]:
    """Split a combined condition into ``(selector_suffix, at_rule)``.

    ``"@supports (color: oklch(0 0 0))@media (y):hover"`` yields
    ``(":hover", "@supports (color: oklch(0 0 0))@media (y)")``: at-rule
    preludes keep their parenthesized parts whole, and the suffix starts at
    the first colon outside any parentheses.  A selector that does not
    start with ``@`` is a suffix, possibly followed by an at-rule.
    """
    if not selector:
        return (None, None)
    if selector.startswith("@"):
        colon = _top_level_index(selector, ":")
        if colon == -1:
            return (None, selector.strip())
        return (selector[colon:] or None, selector[:colon].strip() or None)
    at = _top_level_index(selector, "@")
    if at > 0:
        return (selector[:at], selector[at:].strip())
    return (selector, None)


def split_at_rules(at_rule: str) -> list[str]:
    """Split stacked at-rules ``"@supports (x)@media (y)"`` into parts."""
    parts: list[str] = []
    start = 0
    while True:
        nxt = _top_level_index(at_rule, "@", start + 1)
        if nxt == -1:
            parts.append(at_rule[start:].strip())
            return [p for p in parts if p]
        parts.append(at_rule[start:nxt].strip())
        start = nxt


def at_rule_kind(at_rule: str) -> str:
    """``"@media (x)"`` -> ``"@media"``."""
    match = re.match(r"@[\w-]+", at_rule)
    return match.group(0) if match else at_rule


def flatten_conditions(
    value: Any, parent: str | None = None, prop: str | None = None
) -> list[tuple[str | None, Any]]:
    """Flatten a nested condition map into ``(combined_key, leaf)`` pairs.

    Nested maps combine textually (``":hover"`` inside ``"@media (x)"``
    gives ``"@media (x):hover"``); ``None`` as key means unconditioned.
    Order follows declaration order, depth first.
    """
    if not is_conditional_map(value):
        if isinstance(value, Mapping):
            raise ValidationError(_invalid_map_message(value, prop))
        return [(parent, value)]

    pairs: list[tuple[str | None, Any]] = []
    for key, inner in value.items():
        if not is_condition_key(key):
            raise ValidationError(
                f"Invalid condition key '{key}'"
                + (f" for property '{prop}'" if prop else "")
                + ". Conditions must be 'default' or start with ':' or '@'."
            )
        combined = combine(parent, key if key == DEFAULT else normalize_condition(key))
        pairs.extend(flatten_conditions(inner, combined, prop))
    return pairs


def _invalid_map_message(value: Mapping, prop: str | None) -> str:
    keys = ", ".join(repr(k) for k in value)
    target = f"property '{prop}'" if prop else "a property"
    return (
        f"Value for {target} is a mapping with keys {keys}, which are not "
        "conditions. Use 'default', pseudo-classes (':hover') or at-rules ('@media ...')."
    )
