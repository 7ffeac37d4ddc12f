"""PseudoElementProcessor: property maps nested under ``::before`` and friends."""

from __future__ import annotations

from typing import Any, Mapping

from atomstyle.errors import ValidationError
from atomstyle.model.entry import EntryValue
from atomstyle.processors.builder import ProcessContext, dash_case
from atomstyle.processors.conditional import process_conditional
from atomstyle.processors.simple import process_simple
from atomstyle.selectors.condition import is_conditional_map


def process_pseudo_element(
    ctx: ProcessContext, pseudo_element: str, body: Any, expand
) -> dict[str, EntryValue]:
    """Entries for each property inside a pseudo-element block.

    Keys are ``"<property><pseudo-element>"`` (``"color::before"``).
    *expand* applies the shorthand policy to the inner declarations.
    """
    if not isinstance(body, Mapping) or is_conditional_map(body):
        raise ValidationError(
            f"Pseudo-element '{pseudo_element}' must map to a set of properties"
        )
    result: dict[str, EntryValue] = {}
    for prop, value in expand([(dash_case(str(k)), v) for k, v in body.items()]):
        if prop.startswith(":") or prop.startswith("@"):
            raise ValidationError(
                f"'{prop}' inside '{pseudo_element}' is not a property; "
                "pseudo-elements cannot nest selectors or at-rules, "
                "put conditions on the property values instead"
            )
        ctx.check_property(prop)
        key = f"{prop}{pseudo_element}"
        if is_conditional_map(value):
            result[key] = process_conditional(ctx, prop, value, pseudo_element=pseudo_element)
        else:
            result[key] = process_simple(ctx, prop, value, pseudo_element=pseudo_element)
    return result
