"""Diagnostic model: structured findings produced while compiling styles."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Severity(Enum):
    """Severity level for a diagnostic message."""

    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"


@dataclass(frozen=True)
class Diagnostic:
    """A single finding about a style definition.

    Attributes:
        rule: Identifier for the check that produced this diagnostic.
        severity: How serious the issue is.
        message: Human-readable description of the problem.
        definition: The class or token definition involved, if known.
        css_property: The CSS property involved, if applicable.
        fix: Suggested remediation, if available.
        suggestions: Candidate replacements, e.g. close property names.
    """

    rule: str
    severity: Severity
    message: str
    definition: str | None = None
    css_property: str | None = None
    fix: str | None = None
    suggestions: tuple[str, ...] = ()

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    @property
    def is_warning(self) -> bool:
        return self.severity is Severity.WARNING

    def with_definition(self, definition: str | None) -> Diagnostic:
        """Return a copy attributed to *definition* (keeps an existing one)."""
        if self.definition or not definition:
            return self
        return Diagnostic(
            rule=self.rule,
            severity=self.severity,
            message=self.message,
            definition=definition,
            css_property=self.css_property,
            fix=self.fix,
            suggestions=self.suggestions,
        )

    def __str__(self) -> str:
        location = ""
        if self.definition:
            location = f" [class={self.definition}]"
        elif self.css_property:
            location = f" [property={self.css_property}]"
        return f"{self.severity.value}{location}: {self.message}"
