"""View transition classes: ``::view-transition-*`` pseudo-element rules."""

from __future__ import annotations

from typing import Any, Mapping

from atomstyle.errors import ValidationError
from atomstyle.hashing import content_hash
from atomstyle.processors.builder import ProcessContext, dash_case
from atomstyle.tokens.model import ViewTransitionDefinition
from atomstyle.values.normalize import normalize_value

TRANSITION_KINDS = ("group", "image-pair", "old", "new")


def _kind(key: str) -> str:
    kind = str(key)
    if kind.startswith("::view-transition-"):
        kind = kind[len("::view-transition-"):]
    if kind not in TRANSITION_KINDS:
        raise ValidationError(
            f"Invalid view transition key '{key}'. "
            f"Valid keys: {', '.join(TRANSITION_KINDS)}"
        )
    return kind


def compile_view_transition(
    ctx: ProcessContext, name: str, body: Mapping[str, Mapping[str, Any]]
) -> ViewTransitionDefinition:
    """Compile the per-pseudo-element declarations of a view transition class."""
    if not isinstance(body, Mapping) or not body:
        raise ValidationError(f"View transition '{name}' must map pseudo-elements to declarations")

    blocks: list[tuple[str, list[tuple[str, str]]]] = []
    for key, declarations in body.items():
        kind = _kind(key)
        if not isinstance(declarations, Mapping):
            raise ValidationError(f"View transition '{name}' key '{key}' must map to declarations")
        decls = []
        for prop, raw in declarations.items():
            prop = dash_case(str(prop))
            ctx.check_property(prop)
            decls.append((prop, normalize_value(prop, raw)))
        blocks.append((kind, decls))
    blocks.sort(key=lambda block: TRANSITION_KINDS.index(block[0]))

    blob = "".join(
        f"::view-transition-{kind}:" + "".join(f"{p}:{v};" for p, v in decls) + ";"
        for kind, decls in blocks
    )
    class_name = ctx.config.class_name_prefix + content_hash(blob)
    css = tuple(
        f"::view-transition-{kind}(*.{class_name}){{"
        + "".join(f"{p}:{v};" for p, v in decls)
        + "}"
        for kind, decls in blocks
    )
    return ViewTransitionDefinition(name=name, class_name=class_name, css=css)
