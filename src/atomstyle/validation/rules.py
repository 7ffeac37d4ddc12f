"""Property-name checks.

Each rule takes a dash-cased property name and the compiler config and
returns a list of Diagnostic objects describing any issues found.
"""

from __future__ import annotations

import difflib
import re

from atomstyle.config import CompilerConfig
from atomstyle.model.diagnostic import Diagnostic, Severity
from atomstyle.properties import DEPRECATED_PROPERTIES, KNOWN_PROPERTIES

MAX_SUGGESTIONS = 3

_VENDOR_PREFIX_RE = re.compile(r"^-(webkit|moz|ms|o)-(.+)$")


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def is_custom_property(prop: str) -> bool:
    return prop.startswith("--")


def unprefixed(prop: str) -> str | None:
    """``-webkit-user-select`` -> ``user-select``; None when not prefixed."""
    match = _VENDOR_PREFIX_RE.match(prop)
    return match.group(2) if match else None


def prefixer_handles(prop: str, config: CompilerConfig) -> bool:
    """True when the configured prefixer already emits the prefixed *prop*."""
    base = unprefixed(prop)
    if base is None or config.vendor_prefixer is None:
        return False
    output = config.vendor_prefixer(base, "test")
    return output is not None and f"{prop}:" in output


def suggest_properties(prop: str, known: frozenset[str] = KNOWN_PROPERTIES) -> list[str]:
    """Up to three known properties that look like *prop*."""
    candidates = sorted(known)
    suggestions = difflib.get_close_matches(prop, candidates, n=MAX_SUGGESTIONS, cutoff=0.6)
    if len(suggestions) < MAX_SUGGESTIONS and len(prop) >= 3:
        for name in candidates:
            if name not in suggestions and (prop in name or name in prop):
                suggestions.append(name)
                if len(suggestions) == MAX_SUGGESTIONS:
                    break
    return suggestions


# ---------------------------------------------------------------------------
# Rules
# ---------------------------------------------------------------------------


def check_known_property(prop: str, config: CompilerConfig) -> list[Diagnostic]:
    """Property must be a known CSS property, a custom property or allow-listed."""
    if (
        is_custom_property(prop)
        or prop in KNOWN_PROPERTIES
        or prop in config.allowed_properties
        or prefixer_handles(prop, config)
    ):
        return []
    suggestions = suggest_properties(prop, KNOWN_PROPERTIES | config.allowed_properties)
    message = f"Unknown CSS property '{prop}'."
    fix = None
    if suggestions:
        fix = f"Did you mean: {', '.join(suggestions)}?"
        message = f"{message} {fix}"
    return [
        Diagnostic(
            rule="check_known_property",
            severity=Severity.ERROR,
            message=message,
            css_property=prop,
            fix=fix,
            suggestions=tuple(suggestions),
        )
    ]


def check_vendor_prefix(prop: str, config: CompilerConfig) -> list[Diagnostic]:
    """A prefix the configured prefixer already adds is unnecessary."""
    if not prefixer_handles(prop, config):
        return []
    base = unprefixed(prop)
    return [
        Diagnostic(
            rule="check_vendor_prefix",
            severity=Severity.WARNING,
            message=(
                f"Unnecessary vendor prefix '{prop}'. Use '{base}' instead; "
                "the configured prefixer adds vendor prefixes automatically."
            ),
            css_property=prop,
            fix=f"Replace '{prop}' with '{base}'.",
            suggestions=(base,) if base else (),
        )
    ]


def check_deprecated(prop: str, config: CompilerConfig) -> list[Diagnostic]:
    """Flag deprecated properties.

    Uses the configured deprecation checker, or the built-in list when
    none is configured.
    """
    checker = config.deprecation_checker or DEPRECATED_PROPERTIES.__contains__
    if not checker(prop):
        return []
    return [
        Diagnostic(
            rule="check_deprecated",
            severity=Severity.WARNING,
            message=f"Property '{prop}' is deprecated.",
            css_property=prop,
        )
    ]


# ---------------------------------------------------------------------------
# Rule registry
# ---------------------------------------------------------------------------

ALL_RULES = [
    check_known_property,
    check_vendor_prefix,
    check_deprecated,
]
