"""Fallback values: several declarations of one property in one rule.

A plain list is a preference order.  The browser keeps the last
declaration it understands, so declarations are emitted in reverse::

    ["sticky", "-webkit-sticky", "fixed"]
    -> position:fixed;position:-webkit-sticky;position:sticky

``first_that_works`` additionally folds CSS variables into a single
nested ``var()`` so the browser falls through unset variables.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Callable, Sequence

from atomstyle.errors import ValidationError
from atomstyle.values.normalize import normalize_value

_VAR_RE = re.compile(r"^var\((--[\w-]+)\)$")


@dataclass(frozen=True)
class FallbackValue:
    """Normalized fallback declarations for one property.

    Attributes:
        preferred: Values in preference order (most preferred first).
    """

    preferred: tuple[str, ...]

    @property
    def value(self) -> str:
        """The value hashed into the class name."""
        return ", ".join(self.preferred)

    @property
    def emitted(self) -> tuple[str, ...]:
        """Values in emission order, least preferred first."""
        return tuple(reversed(self.preferred))


def is_var(value: str) -> bool:
    return bool(_VAR_RE.match(value))


def nest_vars(names: Sequence[str], fallback: str | None) -> str:
    """``["var(--a)", "var(--b)"], "red"`` -> ``var(--a,var(--b,red))``."""
    acc = fallback
    for var in reversed(names):
        match = _VAR_RE.match(var)
        assert match is not None
        name = match.group(1)
        acc = f"var({name},{acc})" if acc is not None else f"var({name})"
    assert acc is not None
    return acc


def _normalize_all(prop: str, values: Sequence[Any], resolve: Callable[[Any], Any]) -> list[str]:
    if not values:
        raise ValidationError(f"Empty fallback list for property '{prop}'")
    normalized = []
    for raw in values:
        raw = resolve(raw)
        if isinstance(raw, (list, tuple, dict)) or raw is None:
            raise ValidationError(
                f"Fallback values for '{prop}' must be strings or numbers, got {raw!r}"
            )
        normalized.append(normalize_value(prop, raw))
    return normalized


def plain_fallback(
    prop: str, values: Sequence[Any], resolve: Callable[[Any], Any] = lambda v: v
) -> FallbackValue:
    return FallbackValue(tuple(_normalize_all(prop, values, resolve)))


def first_that_works(
    prop: str, values: Sequence[Any], resolve: Callable[[Any], Any] = lambda v: v
) -> FallbackValue:
    """Leading ``var()`` values nest around the first literal after them."""
    normalized = _normalize_all(prop, values, resolve)
    leading_vars: list[str] = []
    for value in normalized:
        if not is_var(value):
            break
        leading_vars.append(value)
    if not leading_vars:
        return FallbackValue(tuple(normalized))
    rest = normalized[len(leading_vars):]
    nested = nest_vars(leading_vars, rest[0] if rest else None)
    return FallbackValue((nested, *rest[1:]))
