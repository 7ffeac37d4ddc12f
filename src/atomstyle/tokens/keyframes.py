"""Keyframes: content-hashed ``@keyframes`` rules."""

from __future__ import annotations

import re
from typing import Any, Mapping

from atomstyle.errors import ValidationError
from atomstyle.hashing import content_hash
from atomstyle.processors.builder import ProcessContext, dash_case
from atomstyle.rtl import ltr_declaration, rtl_declaration
from atomstyle.tokens.model import KeyframesDefinition
from atomstyle.values.normalize import normalize_value

_PERCENT_RE = re.compile(r"^(\d+(?:\.\d+)?)%$")


def frame_order(selector: str) -> tuple[float, str]:
    """Sort key for frame selectors: ``from`` first, ``to`` last."""
    if selector in ("from", "0%"):
        return (0.0, selector)
    if selector in ("to", "100%"):
        return (100.0, selector)
    match = _PERCENT_RE.match(selector)
    if match:
        return (float(match.group(1)), selector)
    return (50.0, selector)


def _frame_selector(key: str) -> str:
    selector = ",".join(part.strip() for part in str(key).split(","))
    for part in selector.split(","):
        if part not in ("from", "to") and not _PERCENT_RE.match(part):
            raise ValidationError(
                f"Invalid keyframe selector '{key}'; use 'from', 'to' or percentages"
            )
    return selector


def _render(identifier: str, frames: list[tuple[str, list[tuple[str, str]]]]) -> str:
    body = "".join(
        selector + "{" + "".join(f"{p}:{v};" for p, v in decls) + "}"
        for selector, decls in frames
    )
    return f"@keyframes {identifier}{{{body}}}"


def compile_keyframes(
    ctx: ProcessContext, name: str, frames: Mapping[str, Mapping[str, Any]]
) -> KeyframesDefinition:
    """Normalize *frames* and derive the animation name from their content.

    Logical properties get an extra ``html[dir="rtl"]`` scoped variant.
    """
    if not isinstance(frames, Mapping) or not frames:
        raise ValidationError(f"Keyframes '{name}' must map frame selectors to declarations")

    normalized: list[tuple[str, list[tuple[str, str]]]] = []
    for key, declarations in frames.items():
        selector = _frame_selector(key)
        if not isinstance(declarations, Mapping):
            raise ValidationError(f"Frame '{key}' of keyframes '{name}' must be a mapping")
        decls = []
        for prop, raw in declarations.items():
            prop = dash_case(str(prop))
            ctx.check_property(prop)
            decls.append((prop, normalize_value(prop, raw)))
        normalized.append((selector, decls))
    normalized.sort(key=lambda frame: frame_order(frame[0]))

    ltr = [(s, [ltr_declaration(p, v) for p, v in decls]) for s, decls in normalized]
    rtl = [
        (s, [rtl_declaration(p, v) or ltr_declaration(p, v) for p, v in decls])
        for s, decls in normalized
    ]
    canonical = "".join(
        s + "{" + "".join(f"{p}:{v};" for p, v in decls) + "}" for s, decls in normalized
    )
    identifier = ctx.config.class_name_prefix + content_hash("<>" + canonical) + "-B"

    css = [_render(identifier, ltr)]
    if rtl != ltr:
        css.append(f'html[dir="rtl"]{{{_render(identifier, rtl)}}}')
    return KeyframesDefinition(name=name, identifier=identifier, css=tuple(css))
