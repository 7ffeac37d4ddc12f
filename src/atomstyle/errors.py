"""Exception and warning types raised while compiling styles."""

from __future__ import annotations

from atomstyle.model.diagnostic import Diagnostic, Severity


class CompileError(Exception):
    """Base class for every fatal compile-time error."""


class ValidationError(CompileError):
    """Raised when a definition produces ERROR-severity diagnostics.

    Covers unknown properties, disallowed properties inside restricted
    definitions (position-try, view transitions), malformed dynamic
    parameter lists, invalid values and forbidden shorthand collisions.
    """

    def __init__(self, diagnostics: list[Diagnostic] | str) -> None:
        if isinstance(diagnostics, str):
            diagnostics = [
                Diagnostic(rule="validation", severity=Severity.ERROR, message=diagnostics)
            ]
        self.diagnostics = diagnostics
        messages = [d.message for d in diagnostics if d.is_error]
        if len(messages) == 1:
            super().__init__(messages[0])
        else:
            super().__init__(
                f"Validation failed with {len(messages)} error(s): " + "; ".join(messages)
            )

    @property
    def suggestions(self) -> list[str]:
        """Suggested replacements attached to the error diagnostics."""
        return [s for d in self.diagnostics if d.is_error for s in d.suggestions]


class StyleReferenceError(CompileError, LookupError):
    """Raised when a reference names something missing or defined later.

    Attributes:
        reference: Human-readable form of the reference (``var colors.primary``).
        location: Where the reference was made, if known.
        expected: Where the referenced entity was expected to be defined.
    """

    def __init__(
        self,
        reference: str,
        location: str | None = None,
        expected: str | None = None,
        reason: str = "is not defined",
    ) -> None:
        self.reference = reference
        self.location = location
        self.expected = expected
        message = f"Reference to {reference} {reason}"
        if location:
            message += f" (referenced from {location})"
        if expected:
            message += f"; expected a definition {expected}"
        super().__init__(message)


class LoadError(CompileError):
    """Raised when a style source document cannot be loaded."""

    def __init__(self, message: str, path: str | None = None) -> None:
        self.path = path
        super().__init__(f"{path}: {message}" if path else message)


class PolicyWarning(UserWarning):
    """Non-fatal finding: deprecated property, unnecessary vendor prefix."""
