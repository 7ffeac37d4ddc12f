"""Var and const tokens."""

from __future__ import annotations

from typing import Any

from atomstyle.css.rules import wrap_at_rules
from atomstyle.errors import ValidationError
from atomstyle.hashing import content_hash
from atomstyle.model.refs import TypedValue
from atomstyle.selectors.condition import flatten_conditions, parse_combined
from atomstyle.tokens.model import ConstDefinition, VarDefinition
from atomstyle.values.normalize import normalize_value

VAR_PREFIX = "--v"


def var_css_name(namespace: str, name: str) -> str:
    """Hashed custom property name for the var ``namespace.name``."""
    return VAR_PREFIX + content_hash(f"var:{namespace}.{name}")


def conditional_token_values(label: str, css_name: str, raw: Any) -> dict[str | None, str]:
    """Normalize a token value that may vary by at-rule.

    Only ``"default"`` and at-rule conditions make sense on ``:root``.
    """
    values: dict[str | None, str] = {}
    for key, leaf in flatten_conditions(raw, None, label):
        suffix, at_rule = parse_combined(key)
        if suffix is not None:
            raise ValidationError(
                f"Token '{label}' uses selector condition '{suffix}'; "
                "only 'default' and at-rules are allowed for tokens"
            )
        if leaf is None:
            raise ValidationError(f"Token '{label}' has no value for condition {key!r}")
        values[at_rule] = normalize_value(css_name, leaf)
    return values


def compile_var(namespace: str, name: str, raw: Any) -> VarDefinition:
    css_name = var_css_name(namespace, name)
    label = f"{namespace}.{name}"
    syntax: str | None = None
    inherits = True
    if isinstance(raw, TypedValue):
        syntax, inherits, raw = raw.syntax, raw.inherits, raw.value
    values = conditional_token_values(label, css_name, raw)
    if syntax is not None and None not in values:
        raise ValidationError(f"Typed var '{label}' needs a default value for @property")
    return VarDefinition(
        namespace=namespace,
        name=name,
        css_name=css_name,
        values=values,
        syntax=syntax,
        inherits=inherits,
    )


def compile_const(namespace: str, name: str, raw: Any) -> ConstDefinition:
    if isinstance(raw, (dict, list, tuple)) or raw is None:
        raise ValidationError(f"Const '{namespace}.{name}' must be a string or number")
    return ConstDefinition(namespace, name, normalize_value("--const", raw))


def property_rule(var: VarDefinition) -> str:
    """``@property`` rule for a typed var."""
    inherits = "true" if var.inherits else "false"
    return (
        f'@property {var.css_name} {{ syntax: "{var.syntax}"; inherits: {inherits}; '
        f"initial-value: {var.values[None]} }}"
    )


def root_rules(vars_: list[VarDefinition]) -> list[str]:
    """``:root`` blocks, the unconditioned block first, then one per at-rule."""
    groups: dict[str | None, list[str]] = {}
    for var in vars_:
        for at_rule, value in var.values.items():
            groups.setdefault(at_rule, []).append(f"{var.css_name}:{value};")
    rules: list[str] = []
    for at_rule in sorted(groups, key=lambda a: (a is not None, a or "")):
        rules.append(wrap_at_rules(f":root{{{''.join(groups[at_rule])}}}", at_rule))
    return rules
