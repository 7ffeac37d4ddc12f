"""Position-try fallbacks for anchor positioning."""

from __future__ import annotations

from typing import Any, Mapping

from atomstyle.errors import ValidationError
from atomstyle.hashing import content_hash
from atomstyle.processors.builder import ProcessContext, dash_case
from atomstyle.properties import POSITION_TRY_PROPERTIES
from atomstyle.rtl import ltr_declaration
from atomstyle.tokens.model import PositionTryDefinition
from atomstyle.values.normalize import normalize_value


def compile_position_try(
    ctx: ProcessContext, name: str, declarations: Mapping[str, Any]
) -> PositionTryDefinition:
    """Compile an ``@position-try`` rule; only positioning properties are allowed."""
    if not isinstance(declarations, Mapping) or not declarations:
        raise ValidationError(f"Position-try '{name}' must map properties to values")
    decls: list[tuple[str, str]] = []
    for prop, raw in declarations.items():
        prop = dash_case(str(prop))
        if prop not in POSITION_TRY_PROPERTIES:
            raise ValidationError(
                f"Property '{prop}' is not allowed in position-try '{name}'. "
                f"Allowed: {', '.join(sorted(POSITION_TRY_PROPERTIES))}"
            )
        if raw is None or isinstance(raw, (Mapping, list, tuple)):
            raise ValidationError(
                f"Position-try '{name}' value for '{prop}' must be a string or number"
            )
        decls.append(ltr_declaration(prop, normalize_value(prop, raw)))
    decls.sort()
    body = "".join(f"{p}:{v};" for p, v in decls)
    identifier = f"--{ctx.config.class_name_prefix}{content_hash(body)}"
    return PositionTryDefinition(
        name=name, identifier=identifier, css=f"@position-try {identifier}{{{body}}}"
    )
