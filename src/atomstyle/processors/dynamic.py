"""DynamicProcessor: properties whose values are supplied at merge time."""

from __future__ import annotations

from atomstyle.model.entry import AtomicClassEntry
from atomstyle.processors.builder import ProcessContext, build_entry


def dynamic_var_name(prop: str, prefix: str = "x") -> str:
    """``opacity`` -> ``--x-opacity``."""
    return f"--{prefix}-{prop.lstrip('-')}"


def process_dynamic(ctx: ProcessContext, properties: tuple[str, ...]) -> dict[str, AtomicClassEntry]:
    """One entry per property reading ``var(--x-<property>)``."""
    entries: dict[str, AtomicClassEntry] = {}
    for prop in properties:
        ctx.check_property(prop)
        var_name = dynamic_var_name(prop, ctx.config.class_name_prefix)
        entries[prop] = build_entry(ctx, prop, f"var({var_name})", var_name=var_name)
    return entries
