"""Compiled style models: atomic class entries, bundles and class definitions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Union


@dataclass(frozen=True)
class AtomicClassEntry:
    """One atomic class: a single property/value under one condition.

    ``class_name`` is a pure function of ``(property, value,
    selector_suffix, pseudo_element, at_rule)``, so the same declaration
    compiled from two different definitions yields the same entry.

    Attributes:
        class_name: The generated class, or None for an explicit unset.
        property: The dash-cased CSS property.
        value: The normalized value that was hashed.
        ltr_css: The complete rule text, at-rule wrapping included.
        rtl_css: The mirrored rule for right-to-left documents, if any.
        priority: Cascade order key, see :mod:`atomstyle.priority`.
        selector_suffix: Pseudo-class or contextual selector suffix.
        pseudo_element: Pseudo-element such as ``::before``.
        at_rule: Wrapping at-rule(s) such as ``@media (min-width: 40em)``.
        is_null: True when the declaration explicitly unsets the property.
        var_name: Custom property read by a dynamic entry.
    """

    class_name: str | None
    property: str
    value: str | None
    ltr_css: str | None = None
    rtl_css: str | None = None
    priority: int = 0
    selector_suffix: str | None = None
    pseudo_element: str | None = None
    at_rule: str | None = None
    is_null: bool = False
    var_name: str | None = None

    @classmethod
    def null(cls, prop: str) -> AtomicClassEntry:
        """An unset marker: removes *prop* when merged after another class."""
        return cls(class_name=None, property=prop, value=None, is_null=True)

    @property
    def selector_text(self) -> str:
        return "".join(
            part or "" for part in (self.pseudo_element, self.selector_suffix, self.at_rule)
        )

    @property
    def sort_key(self) -> tuple[int, str, str, str]:
        return (self.priority, self.property, self.selector_text, self.class_name or "")


@dataclass(frozen=True)
class ConditionalBundle:
    """Condition-specific entries for one property.

    Keys are condition strings as written (``"default"``, ``":hover"``,
    ``"@media (max-width: 40em)"``); ``"default"`` holds the
    unconditioned entry when present.
    """

    entries: dict[str, AtomicClassEntry] = field(default_factory=dict)

    def __getitem__(self, condition: str) -> AtomicClassEntry:
        return self.entries[condition]

    def __contains__(self, condition: object) -> bool:
        return condition in self.entries

    def __iter__(self):
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def items(self):
        return self.entries.items()

    def class_names(self) -> list[str]:
        return [e.class_name for e in self.entries.values() if e.class_name]


EntryValue = Union[AtomicClassEntry, ConditionalBundle]


def iter_entries(entries: dict[str, EntryValue]):
    """Yield every AtomicClassEntry in an entry map, bundles flattened."""
    for value in entries.values():
        if isinstance(value, ConditionalBundle):
            yield from value.entries.values()
        else:
            yield value


@dataclass(frozen=True)
class ClassDefinition:
    """A compiled static class: canonical property key to entry or bundle."""

    name: str
    entries: dict[str, EntryValue] = field(default_factory=dict)
    location: str | None = None

    def class_names(self) -> list[str]:
        return [e.class_name for e in iter_entries(self.entries) if e.class_name]


@dataclass(frozen=True)
class DynamicClassDefinition:
    """A compiled dynamic class whose values arrive at merge time.

    Attributes:
        name: The dynamic class name.
        params: Ordered parameter names callers supply arguments for.
        properties: Ordered canonical properties the class sets.
        entries: One entry per property, each reading ``var(--x-<property>)``.
        compute: Optional callable mapping arguments to ``{property: value}``.
        location: Where the class was defined, if known.
    """

    name: str
    params: tuple[str, ...]
    properties: tuple[str, ...]
    entries: dict[str, AtomicClassEntry] = field(default_factory=dict)
    compute: Callable[..., dict[str, Any]] | None = None
    location: str | None = None

    def var_name(self, prop: str) -> str:
        entry = self.entries[prop]
        assert entry.var_name is not None
        return entry.var_name
