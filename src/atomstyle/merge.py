"""StyleMerger: compose compiled classes into a class string and inline style."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping

from atomstyle.errors import StyleReferenceError, ValidationError
from atomstyle.model.entry import (
    AtomicClassEntry,
    ClassDefinition,
    ConditionalBundle,
    DynamicClassDefinition,
    EntryValue,
)
from atomstyle.model.refs import Marker, RawClass
from atomstyle.selectors.condition import DEFAULT
from atomstyle.values.numbers import number_to_css


@dataclass(frozen=True)
class MergeResult:
    """What a renderer spreads onto an element.

    Attributes:
        class_string: Space-separated atomic classes.
        inline_style: ``--x-prop: value`` pairs for dynamic classes, or None.
    """

    class_string: str
    inline_style: str | None = None


def flatten_refs(refs: Iterable[Any]) -> list[Any]:
    """Flatten nested lists and drop falsy refs (``None``, ``False``, ``""``)."""
    flat: list[Any] = []
    for ref in refs:
        if isinstance(ref, list):
            flat.extend(flatten_refs(ref))
        elif ref is None or ref is False or ref == "":
            continue
        else:
            flat.append(ref)
    return flat


def dynamic_value(prop: str, value: Any) -> str:
    """Inline-style text for a runtime value: strings as-is, numbers with units."""
    if isinstance(value, bool):
        raise ValidationError(f"Boolean value {value!r} is not a valid CSS value for '{prop}'")
    if isinstance(value, (int, float)):
        return number_to_css(prop, value)
    return str(value)


def format_style(style: Mapping[str, Any] | str | None) -> str | None:
    if style is None or isinstance(style, str):
        return style or None
    return "; ".join(f"{key.replace('_', '-')}: {value}" for key, value in style.items()) or None


class StyleMerger:
    """Last-wins merging over compiled static and dynamic classes.

    The merger only reads the compiled maps, so one instance can serve
    any number of concurrent merges.
    """

    def __init__(
        self,
        classes: Mapping[str, ClassDefinition],
        dynamic: Mapping[str, DynamicClassDefinition] | None = None,
    ) -> None:
        self._classes = classes
        self._dynamic = dynamic or {}

    def merge(self, refs: Iterable[Any], style: Mapping[str, Any] | str | None = None) -> MergeResult:
        """Merge *refs* in order into one class string.

        A ref is a static class name, a ``(dynamic_name, args)`` pair, a
        :class:`Marker` or :class:`RawClass`, or a nested list of these.
        Markers and raw classes are appended after the atomic classes.
        Falsy refs are skipped.  *style* is extra inline style appended after the
        dynamic custom properties.
        """
        props: dict[str, AtomicClassEntry | dict[str, AtomicClassEntry]] = {}
        var_values: dict[str, str] = {}
        extra: list[str] = []

        for ref in flatten_refs(refs):
            if isinstance(ref, (Marker, RawClass)):
                extra.append(ref.class_name)
            elif isinstance(ref, tuple):
                name, args = ref if len(ref) == 2 else (ref[0], ())
                definition = self._dynamic_definition(name)
                values = self._dynamic_values(definition, args)
                for prop, entry in definition.entries.items():
                    self._merge_key(props, prop, entry)
                    if prop in values and values[prop] is not None:
                        var_values[definition.var_name(prop)] = dynamic_value(prop, values[prop])
            elif isinstance(ref, str):
                if ref in self._dynamic and ref not in self._classes:
                    raise ValidationError(
                        f"Dynamic class '{ref}' needs arguments; pass ('{ref}', args)"
                    )
                definition = self._classes.get(ref)
                if definition is None:
                    raise StyleReferenceError(
                        f"class {ref}", expected="via define_class, or wrap it in raw_class()"
                    )
                for key, value in definition.entries.items():
                    self._merge_key(props, key, value)
            else:
                raise ValidationError(
                    f"Cannot merge {ref!r}; expected a class name, marker, raw_class or (name, args)"
                )

        classes: list[str] = []
        for value in props.values():
            if isinstance(value, dict):
                classes.extend(e.class_name for e in value.values() if e.class_name)
            elif value.class_name:
                classes.append(value.class_name)
        classes.extend(extra)
        class_string = " ".join(dict.fromkeys(classes))

        inline = "; ".join(f"{name}: {value}" for name, value in var_values.items()) or None
        extra_style = format_style(style)
        if extra_style:
            inline = f"{inline}; {extra_style}" if inline else extra_style
        return MergeResult(class_string=class_string, inline_style=inline)

    # --- helpers --------------------------------------------------------------

    @staticmethod
    def _merge_key(
        props: dict[str, AtomicClassEntry | dict[str, AtomicClassEntry]],
        key: str,
        value: EntryValue,
    ) -> None:
        if isinstance(value, AtomicClassEntry):
            if value.is_null:
                props.pop(key, None)
            else:
                props[key] = value
            return

        current = props.get(key)
        if isinstance(current, AtomicClassEntry):
            conditions = {DEFAULT: current}
        else:
            conditions = dict(current or {})
        for condition, entry in value.items():
            if entry.is_null:
                conditions.pop(condition, None)
            else:
                conditions[condition] = entry
        if conditions:
            props[key] = conditions
        else:
            props.pop(key, None)

    def _dynamic_definition(self, name: str) -> DynamicClassDefinition:
        definition = self._dynamic.get(name)
        if definition is None:
            raise StyleReferenceError(f"dynamic class {name}", expected="via define_dynamic")
        return definition

    @staticmethod
    def _dynamic_values(definition: DynamicClassDefinition, args: Any) -> dict[str, Any]:
        if isinstance(args, Mapping):
            missing = [p for p in definition.params if p not in args]
            if missing:
                raise ValidationError(
                    f"Dynamic class '{definition.name}' is missing argument(s): {', '.join(missing)}"
                )
            positional = [args[p] for p in definition.params]
        elif isinstance(args, (list, tuple)):
            positional = list(args)
        else:
            positional = [args]
        if len(positional) != len(definition.params):
            raise ValidationError(
                f"Dynamic class '{definition.name}' takes {len(definition.params)} argument(s) "
                f"({', '.join(definition.params)}), got {len(positional)}"
            )
        if definition.compute is not None:
            computed = definition.compute(*positional)
            return {key.replace("_", "-") if not key.startswith("--") else key: value
                    for key, value in computed.items()}
        return dict(zip(definition.properties, positional))


def merge(
    classes: Mapping[str, ClassDefinition],
    refs: Iterable[Any],
    dynamic: Mapping[str, DynamicClassDefinition] | None = None,
) -> MergeResult:
    """Convenience wrapper around :meth:`StyleMerger.merge`."""
    return StyleMerger(classes, dynamic).merge(refs)
