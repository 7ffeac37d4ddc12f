"""Declaration processors: turn declarations into atomic class entries.

``process_declarations`` routes each declaration to the right processor:

* ``"::before": {...}`` blocks go to the pseudo-element processor;
* mappings go to the conditional processor;
* everything else (scalars, fallback lists, ``None``) to the simple one.

The configured shorthand policy is applied before routing.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from atomstyle.errors import ValidationError
from atomstyle.model.entry import EntryValue
from atomstyle.processors.builder import ProcessContext, build_entry, dash_case
from atomstyle.processors.conditional import process_conditional
from atomstyle.processors.dynamic import dynamic_var_name, process_dynamic
from atomstyle.processors.pseudo_element import process_pseudo_element
from atomstyle.processors.simple import process_simple
from atomstyle.shorthand import ShorthandExpander


def process_declarations(
    ctx: ProcessContext, declarations: Mapping[str, Any] | Iterable[tuple[str, Any]]
) -> dict[str, EntryValue]:
    """Compile one definition's declarations into ``{key: entry | bundle}``."""
    items = declarations.items() if isinstance(declarations, Mapping) else declarations
    plain: list[tuple[str, Any]] = []
    pseudo_blocks: list[tuple[str, Any]] = []
    for key, value in items:
        key = dash_case(str(key))
        if key.startswith("::"):
            pseudo_blocks.append((key, value))
        elif key.startswith(":") or key.startswith("@"):
            raise ValidationError(
                f"Condition '{key}' cannot be used as a property; "
                "conditions go inside a property's value: {'color': {'default': ..., "
                f"'{key}': ...}}}}"
            )
        else:
            plain.append((key, value))

    expander = ShorthandExpander(ctx.config.shorthand_behavior)
    result: dict[str, EntryValue] = {}
    for prop, value in expander.apply(plain):
        ctx.check_property(prop)
        if isinstance(value, Mapping):
            result[prop] = process_conditional(ctx, prop, value)
        else:
            result[prop] = process_simple(ctx, prop, value)
    for pseudo_element, body in pseudo_blocks:
        result.update(process_pseudo_element(ctx, pseudo_element, body, expander.apply))
    return result


__all__ = [
    "ProcessContext",
    "build_entry",
    "dash_case",
    "dynamic_var_name",
    "process_conditional",
    "process_declarations",
    "process_dynamic",
    "process_pseudo_element",
    "process_simple",
]
