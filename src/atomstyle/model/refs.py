"""Reference and value-marker types used inside declarations.

References are placeholders resolved during compilation: a var reference
becomes ``var(--v1a2b3c4)``, a const reference its literal value, a
keyframes reference the generated animation name, and so on.  They can
be joined with strings via ``+`` to build composite values::

    keyframes_ref("spin") + " 1s linear infinite"
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


class _Concatenable:
    def __add__(self, other: object) -> Composite:
        return Composite(_parts(self) + _parts(other))

    def __radd__(self, other: object) -> Composite:
        return Composite(_parts(other) + _parts(self))


def _parts(value: object) -> tuple[Any, ...]:
    if isinstance(value, Composite):
        return value.parts
    return (value,)


@dataclass(frozen=True)
class VarRef(_Concatenable):
    """Reference to a var token: ``(namespace, name)``."""

    namespace: str
    name: str

    def __str__(self) -> str:
        return f"var {self.namespace}.{self.name}"


@dataclass(frozen=True)
class ConstRef(_Concatenable):
    """Reference to a const token, inlined at compile time."""

    namespace: str
    name: str

    def __str__(self) -> str:
        return f"const {self.namespace}.{self.name}"


@dataclass(frozen=True)
class KeyframesRef(_Concatenable):
    name: str

    def __str__(self) -> str:
        return f"keyframes {self.name}"


@dataclass(frozen=True)
class PositionTryRef(_Concatenable):
    name: str

    def __str__(self) -> str:
        return f"position-try {self.name}"


@dataclass(frozen=True)
class ViewTransitionRef(_Concatenable):
    name: str

    def __str__(self) -> str:
        return f"view-transition {self.name}"


@dataclass(frozen=True)
class Composite(_Concatenable):
    """A value assembled from literal strings and references."""

    parts: tuple[Any, ...]


@dataclass(frozen=True)
class IncludeRef:
    """Includes the declarations of an earlier class."""

    name: str

    def __str__(self) -> str:
        return f"class {self.name}"


@dataclass(frozen=True)
class FirstThatWorks:
    """Explicit fallback marker; var-shaped values nest into one ``var()``."""

    values: tuple[Any, ...]


@dataclass(frozen=True)
class TypedValue:
    """A var value registered with ``@property`` so it can be animated."""

    syntax: str
    value: Any
    inherits: bool = True


@dataclass(frozen=True)
class Marker:
    """A marker class used by contextual selectors."""

    class_name: str


@dataclass(frozen=True)
class RawClass:
    """A literal class name passed through merging untouched."""

    class_name: str


# ---------------------------------------------------------------------------
# Constructors
# ---------------------------------------------------------------------------


def var_ref(namespace: str, name: str) -> VarRef:
    return VarRef(namespace, name)


def const_ref(namespace: str, name: str) -> ConstRef:
    return ConstRef(namespace, name)


def keyframes_ref(name: str) -> KeyframesRef:
    return KeyframesRef(name)


def position_try_ref(name: str) -> PositionTryRef:
    return PositionTryRef(name)


def view_transition_ref(name: str) -> ViewTransitionRef:
    return ViewTransitionRef(name)


def include(name: str) -> IncludeRef:
    return IncludeRef(name)


def first_that_works(*values: Any) -> FirstThatWorks:
    return FirstThatWorks(tuple(values))


def raw_class(name: str) -> RawClass:
    """Mix a non-atomic class, such as a utility class, into a merge."""
    return RawClass(name)


def typed(syntax: str, value: Any, inherits: bool = True) -> TypedValue:
    """Wrap a var value so it is emitted with an ``@property`` rule.

    *syntax* is the CSS syntax string, e.g. ``"<color>"`` or ``"<length>"``.
    """
    return TypedValue(syntax, value, inherits)
