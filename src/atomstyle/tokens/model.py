"""Compiled token models: vars, themes, keyframes, position-try, view transitions."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class VarDefinition:
    """A root-scoped custom property.

    Attributes:
        namespace: The var group the token belongs to.
        name: Token name within the group.
        css_name: Hashed custom property name, e.g. ``--v1a2b3c4``.
        values: Normalized value per at-rule; ``None`` is the unconditioned value.
        syntax: ``@property`` syntax for typed vars, else None.
        inherits: ``@property`` inherits flag for typed vars.
    """

    namespace: str
    name: str
    css_name: str
    values: dict[str | None, str] = field(default_factory=dict)
    syntax: str | None = None
    inherits: bool = True

    @property
    def reference(self) -> str:
        return f"var({self.css_name})"


@dataclass(frozen=True)
class ConstDefinition:
    namespace: str
    name: str
    value: str


@dataclass(frozen=True)
class ThemeDefinition:
    """Overrides of a var group, applied by adding ``class_name`` to an element."""

    namespace: str
    name: str
    class_name: str
    css: tuple[str, ...] = ()


@dataclass(frozen=True)
class KeyframesDefinition:
    name: str
    identifier: str
    css: tuple[str, ...] = ()


@dataclass(frozen=True)
class PositionTryDefinition:
    name: str
    identifier: str
    css: str = ""


@dataclass(frozen=True)
class ViewTransitionDefinition:
    name: str
    class_name: str
    css: tuple[str, ...] = ()
