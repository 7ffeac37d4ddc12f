"""Last-media-query-wins transform for width-based conditions.

Given several ``min-width`` queries on one property, every query but the
widest gets an upper bound just below the next one, so the matching
ranges never overlap and declaration order stops mattering::

    "@media (min-width: 1000px)"  ->  "@media (min-width: 1000px) and (max-width: 1999.99px)"
    "@media (min-width: 2000px)"  ->  unchanged

``max-width`` queries get the mirrored lower bound.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from lark import Lark, Token, Transformer
from lark.exceptions import LarkError

from atomstyle.selectors.condition import parse_combined

GRAMMAR_PATH = Path(__file__).parent / "media_query.lark"

_STEP = 0.01


@dataclass(frozen=True)
class WidthQuery:
    """A parsed ``@media (min-width|max-width: <n><unit>)`` query."""

    feature: str  # "min-width" or "max-width"
    value: float
    unit: str


class MediaQueryTransformer(Transformer):  # type: ignore[type-arg]
    """Turn a media query parse tree into a :class:`WidthQuery`."""

    def length(self, items: list[Token]) -> tuple[float, str]:
        return (float(items[0]), str(items[1]))

    def feature(self, items: list[Any]) -> WidthQuery:
        value, unit = items[1]
        return WidthQuery(feature=str(items[0]), value=value, unit=unit)

    def start(self, items: list[WidthQuery]) -> WidthQuery:
        return items[0]


_parser: Lark | None = None


def _get_parser() -> Lark:
    global _parser
    if _parser is None:
        _parser = Lark(GRAMMAR_PATH.read_text(), parser="lalr", start="start")
    return _parser


def parse_width_query(at_rule: str) -> WidthQuery | None:
    """Parse a single width media query, or return None if it is anything else."""
    try:
        tree = _get_parser().parse(at_rule)
    except LarkError:
        return None
    return MediaQueryTransformer().transform(tree)


def format_length(value: float) -> str:
    text = f"{round(value, 2):.2f}".rstrip("0").rstrip(".")
    return text or "0"


def _bounded(low: float, high: float, unit: str) -> str:
    return (
        f"@media (min-width: {format_length(low)}{unit}) "
        f"and (max-width: {format_length(high)}{unit})"
    )


def _rewrites(queries: list[tuple[str, WidthQuery]]) -> dict[str, str]:
    """Map each at-rule needing a bound to its rewritten form."""
    rewrites: dict[str, str] = {}
    mins = sorted((q for q in queries if q[1].feature == "min-width"), key=lambda q: q[1].value)
    maxes = sorted(
        (q for q in queries if q[1].feature == "max-width"), key=lambda q: -q[1].value
    )
    if len(mins) >= 2:
        for (at_rule, query), (_, nxt) in zip(mins, mins[1:]):
            rewrites[at_rule] = _bounded(query.value, nxt.value - _STEP, query.unit)
    if len(maxes) >= 2:
        for (at_rule, query), (_, nxt) in zip(maxes, maxes[1:]):
            rewrites[at_rule] = _bounded(nxt.value + _STEP, query.value, query.unit)
    return rewrites


def last_media_query_wins(keys: list[str | None]) -> dict[str | None, str | None]:
    """Return ``{combined_key: transformed_key}`` for a property's conditions.

    Keys are combined condition strings; only those whose at-rule part is a
    single width query take part, grouped by their selector suffix.  Keys
    that need no change map to themselves.
    """
    groups: dict[str | None, list[tuple[str, WidthQuery]]] = {}
    for key in keys:
        suffix, at_rule = parse_combined(key)
        if at_rule is None:
            continue
        query = parse_width_query(at_rule)
        if query is not None:
            groups.setdefault(suffix, []).append((at_rule, query))

    result: dict[str | None, str | None] = {key: key for key in keys}
    for suffix, queries in groups.items():
        rewrites = _rewrites(queries)
        if not rewrites:
            continue
        for key in keys:
            key_suffix, at_rule = parse_combined(key)
            if key_suffix == suffix and at_rule in rewrites:
                result[key] = rewrites[at_rule] + (suffix or "")
    return result
