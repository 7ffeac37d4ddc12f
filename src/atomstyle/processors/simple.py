"""SimpleProcessor: unconditioned declarations."""

from __future__ import annotations

from typing import Any

from atomstyle.model.entry import AtomicClassEntry
from atomstyle.processors.builder import ProcessContext, build_entry


def process_simple(
    ctx: ProcessContext, prop: str, value: Any, pseudo_element: str | None = None
) -> AtomicClassEntry:
    """One entry for a plain value; ``None`` becomes an unset marker."""
    if value is None:
        return AtomicClassEntry.null(prop)
    return build_entry(ctx, prop, value, pseudo_element=pseudo_element)
