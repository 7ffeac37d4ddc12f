"""Bidi mirroring for direction-sensitive properties and values.

Logical inline properties compile to physical ones: the LTR rule uses
the left-side property and a paired RTL rule, scoped to
``html[dir="rtl"]``, uses the right-side one.  ``float``/``clear``
logical keywords and ``background-position`` start/end keywords are
mirrored the same way.
"""

from __future__ import annotations

import re


def _inline_pair(prefix: str, suffix: str = "") -> dict[str, tuple[str, str]]:
    return {
        f"{prefix}-inline-start{suffix}": (f"{prefix}-left{suffix}", f"{prefix}-right{suffix}"),
        f"{prefix}-inline-end{suffix}": (f"{prefix}-right{suffix}", f"{prefix}-left{suffix}"),
    }


# logical property -> (physical for LTR, physical for RTL)
LOGICAL_PROPERTIES: dict[str, tuple[str, str]] = {
    **_inline_pair("margin"),
    **_inline_pair("padding"),
    **_inline_pair("scroll-margin"),
    **_inline_pair("scroll-padding"),
    **_inline_pair("border"),
    **_inline_pair("border", "-width"),
    **_inline_pair("border", "-style"),
    **_inline_pair("border", "-color"),
    "inset-inline-start": ("left", "right"),
    "inset-inline-end": ("right", "left"),
    "border-start-start-radius": ("border-top-left-radius", "border-top-right-radius"),
    "border-start-end-radius": ("border-top-right-radius", "border-top-left-radius"),
    "border-end-start-radius": ("border-bottom-left-radius", "border-bottom-right-radius"),
    "border-end-end-radius": ("border-bottom-right-radius", "border-bottom-left-radius"),
}

LOGICAL_VALUE_PROPERTIES = frozenset({"float", "clear"})

# logical keyword -> (LTR keyword, RTL keyword)
LOGICAL_VALUES: dict[str, tuple[str, str]] = {
    "inline-start": ("left", "right"),
    "inline-end": ("right", "left"),
    "start": ("left", "right"),
    "end": ("right", "left"),
}


_LOGICAL_WORD_RE = re.compile(r"(?<![\w-])(inline-start|inline-end|start|end)(?![\w-])")


def _flip_words(value: str, index: int) -> str:
    return _LOGICAL_WORD_RE.sub(lambda m: LOGICAL_VALUES[m.group(1)][index], value)


def _has_logical_words(value: str) -> bool:
    return _LOGICAL_WORD_RE.search(value) is not None


def _split_important(value: str) -> tuple[str, str]:
    if value.endswith("!important"):
        return (value[: -len("!important")], "!important")
    return (value, "")


def ltr_declaration(prop: str, value: str) -> tuple[str, str]:
    """The ``(property, value)`` pair emitted for left-to-right documents."""
    value, important = _split_important(value)
    if prop in LOGICAL_PROPERTIES:
        prop = LOGICAL_PROPERTIES[prop][0]
    elif prop in LOGICAL_VALUE_PROPERTIES and value in LOGICAL_VALUES:
        value = LOGICAL_VALUES[value][0]
    elif prop == "background-position" and _has_logical_words(value):
        value = _flip_words(value, 0)
    return (prop, value + important)


def rtl_declaration(prop: str, value: str) -> tuple[str, str] | None:
    """The mirrored pair for right-to-left documents, or None if unaffected."""
    value, important = _split_important(value)
    if prop in LOGICAL_PROPERTIES:
        prop = LOGICAL_PROPERTIES[prop][1]
    elif prop in LOGICAL_VALUE_PROPERTIES and value in LOGICAL_VALUES:
        value = LOGICAL_VALUES[value][1]
    elif prop == "background-position" and _has_logical_words(value):
        value = _flip_words(value, 1)
    else:
        return None
    return (prop, value + important)
