"""StyleSheet builder and the two-pass compile.

Definitions are collected with the ``define_*`` methods and compiled in
one explicit step::

    sheet = StyleSheet()
    sheet.define_vars("colors", {"primary": "#0af"})
    sheet.define_class("button", {"color": var_ref("colors", "primary")})
    styles = sheet.compile()
    styles.merge(["button"]).class_string

Pass 1 numbers every definition in registration order.  Pass 2 compiles
tokens in that order, then classes (optionally in parallel), resolving
references by lookup.  A reference to something registered later, or
never, raises :class:`StyleReferenceError`.
"""

from __future__ import annotations

import logging
import warnings
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Mapping, Sequence

from atomstyle.config import CompilerConfig
from atomstyle.css.emitter import CSSRule, assemble, render
from atomstyle.errors import PolicyWarning, StyleReferenceError, ValidationError
from atomstyle.merge import MergeResult, StyleMerger
from atomstyle.model.diagnostic import Diagnostic
from atomstyle.model.entry import ClassDefinition, DynamicClassDefinition, iter_entries
from atomstyle.model.refs import IncludeRef, Marker
from atomstyle.processors import ProcessContext, dash_case, process_declarations, process_dynamic
from atomstyle.registry import RuleRegistry
from atomstyle.resolver import Resolver
from atomstyle.selectors.when import define_marker
from atomstyle.tokens.keyframes import compile_keyframes
from atomstyle.tokens.model import ThemeDefinition, VarDefinition
from atomstyle.tokens.position_try import compile_position_try
from atomstyle.tokens.themes import compile_theme
from atomstyle.tokens.vars import compile_const, compile_var, property_rule, root_rules
from atomstyle.tokens.view_transitions import compile_view_transition

log = logging.getLogger("atomstyle")


@dataclass(frozen=True)
class _Definition:
    kind: str
    name: str
    body: Any
    seq: int
    location: str


@dataclass
class CompiledStyles:
    """Everything one compile produced.

    Attributes:
        rules: Ordered, deduplicated stylesheet rules.
        classes: Compiled static classes by name.
        dynamic: Compiled dynamic classes by name.
        diagnostics: Non-fatal findings (policy warnings).
    """

    config: CompilerConfig
    rules: list[CSSRule] = field(default_factory=list)
    classes: dict[str, ClassDefinition] = field(default_factory=dict)
    dynamic: dict[str, DynamicClassDefinition] = field(default_factory=dict)
    diagnostics: list[Diagnostic] = field(default_factory=list)
    resolver: Resolver | None = None
    themes: dict[tuple[str, str], ThemeDefinition] = field(default_factory=dict)
    markers: dict[str, Marker] = field(default_factory=dict)

    @property
    def css(self) -> str:
        return render(self.rules)

    def merge(self, refs: Iterable[Any], style: Mapping[str, Any] | str | None = None) -> MergeResult:
        """Compose classes into a class string and optional inline style."""
        return StyleMerger(self.classes, self.dynamic).merge(refs, style)

    # --- lookups --------------------------------------------------------------

    def var(self, namespace: str, name: str) -> str:
        """``var(--v...)`` reference text for a var token."""
        group = self._resolver.vars.get(namespace, {})
        if name not in group:
            raise StyleReferenceError(f"var {namespace}.{name}", expected=f"via define_vars('{namespace}', ...)")
        return group[name].reference

    def const(self, namespace: str, name: str) -> str:
        group = self._resolver.consts.get(namespace, {})
        if name not in group:
            raise StyleReferenceError(f"const {namespace}.{name}", expected=f"via define_consts('{namespace}', ...)")
        return group[name].value

    def theme_class(self, namespace: str, name: str) -> str:
        theme = self.themes.get((namespace, name))
        if theme is None:
            raise StyleReferenceError(
                f"theme {namespace}.{name}", expected=f"via define_theme('{namespace}', '{name}', ...)"
            )
        return theme.class_name

    def keyframes(self, name: str) -> str:
        if name not in self._resolver.keyframes:
            raise StyleReferenceError(f"keyframes {name}", expected=f"via define_keyframes('{name}', ...)")
        return self._resolver.keyframes[name].identifier

    def position_try(self, name: str) -> str:
        if name not in self._resolver.position_try:
            raise StyleReferenceError(f"position-try {name}", expected=f"via define_position_try('{name}', ...)")
        return self._resolver.position_try[name].identifier

    def view_transition(self, name: str) -> str:
        if name not in self._resolver.view_transitions:
            raise StyleReferenceError(
                f"view-transition {name}", expected=f"via define_view_transition('{name}', ...)"
            )
        return self._resolver.view_transitions[name].class_name

    def marker(self, name: str) -> Marker:
        if name not in self.markers:
            raise StyleReferenceError(f"marker {name}", expected=f"via define_marker('{name}')")
        return self.markers[name]

    @property
    def _resolver(self) -> Resolver:
        assert self.resolver is not None
        return self.resolver


class StyleSheet:
    """Collects style definitions and compiles them.

    Args:
        config: Compiler options; defaults to ``CompilerConfig()``.
        registry: Shared rule registry; a fresh one is created if omitted.
    """

    def __init__(
        self, config: CompilerConfig | None = None, registry: RuleRegistry | None = None
    ) -> None:
        self.config = config or CompilerConfig()
        self.registry = registry if registry is not None else RuleRegistry()
        self._definitions: list[_Definition] = []
        self._names: set[tuple[str, str]] = set()
        self._markers: dict[str, Marker] = {}

    # --- pass 1: registration -------------------------------------------------

    def _register(self, kind: str, name: str, body: Any, location: str | None) -> None:
        if (kind, name) in self._names:
            label = kind.replace("_", " ")
            raise ValidationError(f"Duplicate {label} definition '{name}'")
        self._names.add((kind, name))
        self._definitions.append(
            _Definition(kind, name, body, len(self._definitions), location or f"{kind} '{name}'")
        )

    def define_vars(self, namespace: str, values: Mapping[str, Any], location: str | None = None) -> None:
        """Define a group of root custom properties."""
        if not isinstance(values, Mapping):
            raise ValidationError(f"Vars '{namespace}' must be a mapping of names to values")
        self._register("vars", namespace, dict(values), location)

    def define_consts(self, namespace: str, values: Mapping[str, Any], location: str | None = None) -> None:
        """Define a group of constants, inlined wherever they are referenced."""
        if not isinstance(values, Mapping):
            raise ValidationError(f"Consts '{namespace}' must be a mapping of names to values")
        self._register("consts", namespace, dict(values), location)

    def define_theme(
        self, namespace: str, name: str, overrides: Mapping[str, Any], location: str | None = None
    ) -> None:
        """Override some vars of group *namespace* under a theme class."""
        self._register("theme", f"{namespace}.{name}", (namespace, name, dict(overrides)), location)

    def define_keyframes(self, name: str, frames: Mapping[str, Any], location: str | None = None) -> None:
        self._register("keyframes", name, frames, location)

    def define_position_try(
        self, name: str, declarations: Mapping[str, Any], location: str | None = None
    ) -> None:
        self._register("position_try", name, declarations, location)

    def define_view_transition(
        self, name: str, body: Mapping[str, Any], location: str | None = None
    ) -> None:
        self._register("view_transition", name, body, location)

    def define_marker(self, name: str) -> Marker:
        """Create a named marker class for contextual selectors."""
        marker = define_marker(name, self.config.class_name_prefix)
        self._markers[name] = marker
        return marker

    def define_class(
        self,
        name: str,
        declarations: Mapping[str, Any] | Sequence[Mapping[str, Any] | IncludeRef],
        location: str | None = None,
    ) -> None:
        """Define a static class.

        *declarations* is a mapping, or a list mixing mappings and
        :func:`~atomstyle.model.refs.include` refs applied in order.
        """
        if isinstance(declarations, Mapping):
            parts: list[Any] = [declarations]
        elif isinstance(declarations, (list, tuple)):
            parts = list(declarations)
        else:
            raise ValidationError(f"Class '{name}' declarations must be a mapping or a list")
        for part in parts:
            if not isinstance(part, (Mapping, IncludeRef)):
                raise ValidationError(
                    f"Class '{name}' may only combine mappings and include() refs, got {part!r}"
                )
        self._register("class", name, parts, location)

    def define_dynamic(
        self,
        name: str,
        params: Sequence[str],
        properties: Sequence[str] | None = None,
        compute: Callable[..., Mapping[str, Any]] | None = None,
        location: str | None = None,
    ) -> None:
        """Define a class whose values are supplied when merging.

        Without *compute*, each parameter sets the property at the same
        position in *properties* (which defaults to *params*).
        """
        if isinstance(params, str) or not isinstance(params, (list, tuple)) or not params:
            raise ValidationError(
                f"Dynamic class '{name}' needs a non-empty list of parameter names"
            )
        bad = [p for p in params if not isinstance(p, str) or not p]
        if bad:
            raise ValidationError(f"Dynamic class '{name}' has invalid parameter name(s): {bad!r}")
        if len(set(params)) != len(params):
            raise ValidationError(f"Dynamic class '{name}' repeats a parameter name")
        props = tuple(dash_case(p) for p in (properties if properties is not None else params))
        if not props:
            raise ValidationError(f"Dynamic class '{name}' sets no properties")
        if compute is None and len(props) != len(params):
            raise ValidationError(
                f"Dynamic class '{name}' has {len(params)} parameter(s) but "
                f"{len(props)} propert(ies); pass compute= to map them"
            )
        self._register("dynamic", name, (tuple(params), props, compute), location)

    # --- pass 2: compile ------------------------------------------------------

    def compile(self, workers: int | None = None) -> CompiledStyles:
        """Compile every definition; *workers* > 1 processes classes in parallel."""
        sequence = {(d.kind, d.name): d.seq for d in self._definitions}
        resolver = Resolver(sequence)
        result = CompiledStyles(config=self.config, resolver=resolver, markers=dict(self._markers))
        property_rules: list[str] = []
        dynamic_vars: list[str] = []
        keyframes_css: list[str] = []
        position_css: list[str] = []
        transition_css: list[str] = []
        theme_css: list[str] = []

        for d in self._definitions:
            if d.kind in ("class", "dynamic"):
                continue
            ctx = ProcessContext(self.config, definition=d.name)
            if d.kind == "vars":
                group: dict[str, VarDefinition] = {}
                for key, raw in d.body.items():
                    var = compile_var(d.name, key, resolver.resolve(raw, d.seq, d.location))
                    group[key] = var
                    if var.syntax is not None:
                        property_rules.append(property_rule(var))
                resolver.vars[d.name] = group
            elif d.kind == "consts":
                resolver.consts[d.name] = {
                    key: compile_const(d.name, key, resolver.resolve(raw, d.seq, d.location))
                    for key, raw in d.body.items()
                }
            elif d.kind == "theme":
                namespace, name, overrides = d.body
                resolver.check("vars", namespace, f"vars {namespace}", d.seq, d.location,
                               f"via define_vars('{namespace}', ...)")
                theme = compile_theme(
                    namespace, name, resolver.resolve(overrides, d.seq, d.location),
                    resolver.vars[namespace],
                )
                result.themes[(namespace, name)] = theme
                theme_css.extend(theme.css)
            elif d.kind == "keyframes":
                kf = compile_keyframes(ctx, d.name, resolver.resolve(d.body, d.seq, d.location))
                resolver.keyframes[d.name] = kf
                keyframes_css.extend(kf.css)
            elif d.kind == "position_try":
                pt = compile_position_try(ctx, d.name, resolver.resolve(d.body, d.seq, d.location))
                resolver.position_try[d.name] = pt
                position_css.append(pt.css)
            elif d.kind == "view_transition":
                vt = compile_view_transition(ctx, d.name, resolver.resolve(d.body, d.seq, d.location))
                resolver.view_transitions[d.name] = vt
                transition_css.extend(vt.css)
            result.diagnostics.extend(ctx.diagnostics)

        classes = [d for d in self._definitions if d.kind in ("class", "dynamic")]
        compiled = self._compile_classes(classes, resolver, workers)
        for d in classes:
            definition, diagnostics = compiled[d.name, d.kind]
            result.diagnostics.extend(diagnostics)
            if isinstance(definition, DynamicClassDefinition):
                result.dynamic[d.name] = definition
                dynamic_vars.extend(e.var_name for e in definition.entries.values() if e.var_name)
            else:
                result.classes[d.name] = definition

        vars_ = [v for group in resolver.vars.values() for v in group.values()]
        result.rules = assemble(
            self.registry.sorted_entries(),
            self.config,
            property_rules=property_rules,
            dynamic_vars=dynamic_vars,
            keyframes=keyframes_css,
            root_rules=root_rules(vars_),
            position_try=position_css,
            view_transitions=transition_css,
            themes=theme_css,
        )
        for diagnostic in result.diagnostics:
            log.warning("%s", diagnostic)
            warnings.warn(str(diagnostic), PolicyWarning, stacklevel=2)
        log.info(
            "compiled %d classes into %d rules",
            len(result.classes) + len(result.dynamic),
            len(result.rules),
        )
        return result

    def _compile_classes(
        self, classes: list[_Definition], resolver: Resolver, workers: int | None
    ) -> dict[tuple[str, str], tuple[Any, list[Diagnostic]]]:
        compiled: dict[tuple[str, str], tuple[Any, list[Diagnostic]]] = {}
        if not workers or workers <= 1 or len(classes) <= 1:
            for d in classes:
                compiled[d.name, d.kind] = self._compile_class(d, resolver)
            return compiled

        failures: list[tuple[int, Exception]] = []
        with ThreadPoolExecutor(max_workers=workers) as pool:
            futures = {pool.submit(self._compile_class, d, resolver): d for d in classes}
            for future in as_completed(futures):
                d = futures[future]
                try:
                    compiled[d.name, d.kind] = future.result()
                except Exception as exc:
                    failures.append((d.seq, exc))
        if failures:
            # Report the failure a sequential compile would have hit first.
            raise min(failures, key=lambda f: f[0])[1]
        return compiled

    def _compile_class(self, d: _Definition, resolver: Resolver) -> tuple[Any, list[Diagnostic]]:
        ctx = ProcessContext(self.config, definition=d.name)
        if d.kind == "dynamic":
            params, props, compute = d.body
            entries = process_dynamic(ctx, props)
            definition: Any = DynamicClassDefinition(
                name=d.name, params=params, properties=props, entries=entries,
                compute=compute, location=d.location,
            )
            self.registry.insert_all(entries.values())
        else:
            declarations = self._expand_includes(d, resolver)
            entries = process_declarations(ctx, resolver.resolve(declarations, d.seq, d.location))
            definition = ClassDefinition(name=d.name, entries=entries, location=d.location)
            # Only a fully processed class reaches the registry.
            self.registry.insert_all(iter_entries(entries))
        log.debug("compiled %s '%s'", d.kind, d.name)
        return definition, ctx.diagnostics

    def _expand_includes(self, d: _Definition, resolver: Resolver) -> dict[str, Any]:
        """Flatten includes into one declaration map, later keys winning."""
        merged: dict[str, Any] = {}
        for part in d.body:
            if isinstance(part, IncludeRef):
                resolver.check("class", part.name, str(part), d.seq, d.location,
                               f"via define_class('{part.name}', ...)")
                included = next(x for x in self._definitions if x.kind == "class" and x.name == part.name)
                items = self._expand_includes(included, resolver).items()
            else:
                items = ((dash_case(str(k)), v) for k, v in part.items())
            for key, value in items:
                merged.pop(key, None)
                merged[key] = value
        return merged
