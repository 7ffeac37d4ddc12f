"""Shorthand / longhand collision policies.

``accept``  keeps declarations as written; priority ordering lets a
            longhand refine its shorthand.
``flatten`` rewrites positional shorthands (``margin: "1px 2px"``) into
            their longhands.
``forbid``  rejects a declaration set containing a shorthand together
            with one of its longhands.
"""

from __future__ import annotations

from typing import Any, Mapping

from atomstyle.config import ShorthandBehavior
from atomstyle.errors import ValidationError
from atomstyle.properties import BOX_SHORTHANDS, PAIR_SHORTHANDS, SHORTHAND_LONGHANDS
from atomstyle.selectors.condition import is_conditional_map

Declaration = tuple[str, Any]

_IMPORTANT = "!important"


def split_tokens(value: str) -> list[str]:
    """Split on whitespace outside parentheses: ``"calc(1px + 2px) 0"`` -> 2 tokens."""
    tokens: list[str] = []
    current = ""
    depth = 0
    for ch in value:
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth = max(depth - 1, 0)
        if ch.isspace() and depth == 0:
            if current:
                tokens.append(current)
            current = ""
        else:
            current += ch
    if current:
        tokens.append(current)
    return tokens


def all_longhands(prop: str) -> set[str]:
    """Every property *prop* sets, following nested shorthands."""
    result: set[str] = set()
    pending = list(SHORTHAND_LONGHANDS.get(prop, ()))
    while pending:
        name = pending.pop()
        if name not in result:
            result.add(name)
            pending.extend(SHORTHAND_LONGHANDS.get(name, ()))
    return result


def _positional(prop: str, value: Any) -> list[Any] | None:
    """Split one scalar shorthand value into per-longhand values, if possible."""
    if value is None or isinstance(value, (int, float)):
        return [value] * len(SHORTHAND_LONGHANDS[prop])
    if not isinstance(value, str):
        return None
    text = value.strip()
    important = ""
    if text.endswith(_IMPORTANT):
        text = text[: -len(_IMPORTANT)].strip()
        important = _IMPORTANT
    if "/" in text or "," in text:
        return None
    tokens = split_tokens(text)
    if prop in BOX_SHORTHANDS:
        if len(tokens) == 1:
            parts = tokens * 4
        elif len(tokens) == 2:
            parts = [tokens[0], tokens[1], tokens[0], tokens[1]]
        elif len(tokens) == 3:
            parts = [tokens[0], tokens[1], tokens[2], tokens[1]]
        elif len(tokens) == 4:
            parts = tokens
        else:
            return None
    elif prop in PAIR_SHORTHANDS:
        if len(tokens) == 1:
            parts = tokens * 2
        elif len(tokens) == 2:
            parts = tokens
        else:
            return None
    else:
        return None
    return [part + important for part in parts]


def _expand_value(prop: str, value: Any) -> list[Any] | None:
    if is_conditional_map(value):
        per_key: dict[str, list[Any]] = {}
        for key, inner in value.items():
            expanded = _expand_value(prop, inner)
            if expanded is None:
                return None
            per_key[key] = expanded
        count = len(SHORTHAND_LONGHANDS[prop])
        return [{key: parts[i] for key, parts in per_key.items()} for i in range(count)]
    if isinstance(value, Mapping):
        return None
    return _positional(prop, value)


class ShorthandExpander:
    """Apply a :class:`ShorthandBehavior` to a declaration list."""

    def __init__(self, behavior: ShorthandBehavior = ShorthandBehavior.ACCEPT) -> None:
        self.behavior = behavior

    def expand_declaration(self, prop: str, value: Any) -> list[Declaration]:
        """Expand a single declaration under the flatten policy."""
        if self.behavior is not ShorthandBehavior.FLATTEN:
            return [(prop, value)]
        if prop not in BOX_SHORTHANDS and prop not in PAIR_SHORTHANDS:
            return [(prop, value)]
        parts = _expand_value(prop, value)
        if parts is None:
            return [(prop, value)]
        return list(zip(SHORTHAND_LONGHANDS[prop], parts))

    def check_collisions(self, declarations: list[Declaration]) -> None:
        """Raise when a shorthand shares a declaration set with its longhand."""
        props = [prop for prop, _ in declarations]
        present = set(props)
        for prop in props:
            if prop not in SHORTHAND_LONGHANDS:
                continue
            clashes = sorted(all_longhands(prop) & present)
            if clashes:
                raise ValidationError(
                    f"Shorthand property '{prop}' cannot be combined with "
                    f"{', '.join(repr(c) for c in clashes)} when shorthands are forbidden. "
                    f"Use only longhand properties instead of '{prop}'."
                )

    def apply(self, declarations: list[Declaration]) -> list[Declaration]:
        if self.behavior is ShorthandBehavior.FORBID:
            self.check_collisions(declarations)
            return list(declarations)
        if self.behavior is ShorthandBehavior.FLATTEN:
            expanded: list[Declaration] = []
            for prop, value in declarations:
                expanded.extend(self.expand_declaration(prop, value))
            return expanded
        return list(declarations)
