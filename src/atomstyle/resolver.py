"""Reference resolution for the second compile pass."""

from __future__ import annotations

from typing import Any, Mapping

from atomstyle.errors import StyleReferenceError
from atomstyle.model.refs import (
    Composite,
    ConstRef,
    FirstThatWorks,
    KeyframesRef,
    PositionTryRef,
    TypedValue,
    VarRef,
    ViewTransitionRef,
)
from atomstyle.tokens.model import (
    ConstDefinition,
    KeyframesDefinition,
    PositionTryDefinition,
    VarDefinition,
    ViewTransitionDefinition,
)
from atomstyle.values.numbers import format_number

Key = tuple[str, str]


class Resolver:
    """Replaces references with their compiled values.

    *sequence* maps ``(kind, name)`` to the position at which the entity
    was registered in pass 1.  A reference made from a site registered
    at or before its target is a forward reference and fails, exactly
    like a missing one.
    """

    def __init__(self, sequence: Mapping[Key, int]) -> None:
        self.sequence = sequence
        self.vars: dict[str, dict[str, VarDefinition]] = {}
        self.consts: dict[str, dict[str, ConstDefinition]] = {}
        self.keyframes: dict[str, KeyframesDefinition] = {}
        self.position_try: dict[str, PositionTryDefinition] = {}
        self.view_transitions: dict[str, ViewTransitionDefinition] = {}

    # --- ordering -------------------------------------------------------------

    def check(
        self, kind: str, name: str, reference: str, site: int, location: str, expected: str
    ) -> None:
        """Raise unless ``(kind, name)`` was registered before *site*."""
        seq = self.sequence.get((kind, name))
        if seq is None:
            raise StyleReferenceError(reference, location, expected)
        if seq >= site:
            raise StyleReferenceError(
                reference, location, f"before {location}", reason="is defined after its use"
            )

    # --- resolution -----------------------------------------------------------

    def resolve(self, value: Any, site: int, location: str) -> Any:
        """Return *value* with every reference replaced, recursively."""
        if isinstance(value, VarRef):
            return self._var(value, site, location).reference
        if isinstance(value, ConstRef):
            return self._const(value, site, location).value
        if isinstance(value, KeyframesRef):
            self.check("keyframes", value.name, str(value), site, location,
                       f"via define_keyframes('{value.name}', ...)")
            return self.keyframes[value.name].identifier
        if isinstance(value, PositionTryRef):
            self.check("position_try", value.name, str(value), site, location,
                       f"via define_position_try('{value.name}', ...)")
            return self.position_try[value.name].identifier
        if isinstance(value, ViewTransitionRef):
            self.check("view_transition", value.name, str(value), site, location,
                       f"via define_view_transition('{value.name}', ...)")
            return self.view_transitions[value.name].class_name
        if isinstance(value, Composite):
            return "".join(self._part(p, site, location) for p in value.parts)
        if isinstance(value, FirstThatWorks):
            return FirstThatWorks(tuple(self.resolve(v, site, location) for v in value.values))
        if isinstance(value, TypedValue):
            return TypedValue(value.syntax, self.resolve(value.value, site, location), value.inherits)
        if isinstance(value, Mapping):
            return {k: self.resolve(v, site, location) for k, v in value.items()}
        if isinstance(value, (list, tuple)):
            return [self.resolve(v, site, location) for v in value]
        return value

    def _part(self, part: Any, site: int, location: str) -> str:
        resolved = self.resolve(part, site, location)
        if isinstance(resolved, (int, float)) and not isinstance(resolved, bool):
            return format_number(resolved)
        return str(resolved)

    def _var(self, ref: VarRef, site: int, location: str) -> VarDefinition:
        self.check("vars", ref.namespace, str(ref), site, location,
                   f"via define_vars('{ref.namespace}', ...)")
        group = self.vars[ref.namespace]
        if ref.name not in group:
            raise StyleReferenceError(
                str(ref), location, f"in var group '{ref.namespace}' (defines: {', '.join(group)})"
            )
        return group[ref.name]

    def _const(self, ref: ConstRef, site: int, location: str) -> ConstDefinition:
        self.check("consts", ref.namespace, str(ref), site, location,
                   f"via define_consts('{ref.namespace}', ...)")
        group = self.consts[ref.namespace]
        if ref.name not in group:
            raise StyleReferenceError(
                str(ref), location, f"in const group '{ref.namespace}' (defines: {', '.join(group)})"
            )
        return group[ref.name]
