"""Property validator: runs all property rules and reports diagnostics."""

from __future__ import annotations

from typing import Callable

from atomstyle.config import CompilerConfig
from atomstyle.errors import ValidationError
from atomstyle.model.diagnostic import Diagnostic
from atomstyle.validation.rules import ALL_RULES

RuleFunc = Callable[[str, CompilerConfig], list[Diagnostic]]


def validate_property(
    prop: str, config: CompilerConfig, extra_rules: list[RuleFunc] | None = None
) -> list[Diagnostic]:
    """Run all property rules against *prop*.

    Returns the full list of diagnostics (errors, warnings, info).
    """
    rules: list[RuleFunc] = list(ALL_RULES)
    if extra_rules:
        rules.extend(extra_rules)
    diagnostics: list[Diagnostic] = []
    for rule in rules:
        diagnostics.extend(rule(prop, config))
    return diagnostics


def validate_property_or_raise(
    prop: str,
    config: CompilerConfig,
    definition: str | None = None,
    extra_rules: list[RuleFunc] | None = None,
) -> list[Diagnostic]:
    """Validate *prop*; raises :class:`ValidationError` on ERROR diagnostics.

    Warnings are returned for the caller to report.
    """
    diagnostics = [
        d.with_definition(definition)
        for d in validate_property(prop, config, extra_rules=extra_rules)
    ]
    errors = [d for d in diagnostics if d.is_error]
    if errors:
        raise ValidationError(errors)
    return diagnostics
