"""Theme classes: scoped overrides of a var group."""

from __future__ import annotations

import json
from typing import Any, Mapping

from atomstyle.css.rules import wrap_at_rules
from atomstyle.errors import ValidationError
from atomstyle.hashing import content_hash
from atomstyle.tokens.model import ThemeDefinition, VarDefinition
from atomstyle.tokens.vars import conditional_token_values

THEME_PREFIX = "t"


def compile_theme(
    namespace: str,
    name: str,
    overrides: Mapping[str, Any],
    base: Mapping[str, VarDefinition],
) -> ThemeDefinition:
    """Compile *overrides* of the var group *base* into a theme class.

    Raises:
        ValidationError: if an override names a var the group does not define.
    """
    unknown = [key for key in overrides if key not in base]
    if unknown:
        raise ValidationError(
            f"Theme '{name}' overrides {', '.join(repr(k) for k in unknown)}, which "
            f"var group '{namespace}' does not define. "
            f"Defined vars: {', '.join(base) or '(none)'}"
        )

    groups: dict[str | None, list[str]] = {}
    body: list[str] = []
    for key, raw in overrides.items():
        var = base[key]
        values = conditional_token_values(f"{namespace}.{name}.{key}", var.css_name, raw)
        for at_rule, value in values.items():
            groups.setdefault(at_rule, []).append(f"{var.css_name}:{value};")
            body.append(f"{at_rule or ''}{var.css_name}:{value}")

    blob = json.dumps([namespace, sorted(body)], separators=(",", ":"))
    class_name = THEME_PREFIX + content_hash(f"theme:{blob}")
    rules = []
    for at_rule in sorted(groups, key=lambda a: (a is not None, a or "")):
        block = f".{class_name},.{class_name}:root{{{''.join(groups[at_rule])}}}"
        rules.append(wrap_at_rules(block, at_rule))
    return ThemeDefinition(namespace=namespace, name=name, class_name=class_name, css=tuple(rules))
