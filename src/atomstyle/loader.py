"""Load style definitions from a JSON document.

Document shape (every section optional)::

    {
      "config": {"use_css_layers": true},
      "vars": {"colors": {"primary": "#0af"}},
      "consts": {"space": {"md": "16px"}},
      "themes": {"colors": {"dark": {"primary": "#fff"}}},
      "keyframes": {"spin": {"from": {"rotate": "0deg"}, "to": {"rotate": "360deg"}}},
      "position_try": {"below": {"top": "anchor(bottom)"}},
      "view_transitions": {"fade": {"old": {"opacity": 0}}},
      "markers": ["card"],
      "classes": {"button": {"color": {"$var": "colors.primary"}}},
      "dynamic": {"fade": {"params": ["opacity"]}}
    }

Reference forms inside values: ``{"$var": "ns.name"}``, ``{"$const":
"ns.name"}``, ``{"$keyframes": name}``, ``{"$position_try": name}``,
``{"$view_transition": name}``, ``{"$concat": [...]}``,
``{"$first_that_works": [...]}`` and ``{"$typed": {"syntax", "value",
"inherits"}}``.  A class body may be a list mixing declaration maps and
``{"$include": name}``.

Sections are registered in the order listed above, so classes can refer
to any token, and tokens to tokens of earlier groups.
"""

from __future__ import annotations

import json
import logging
from dataclasses import replace
from pathlib import Path
from typing import Any, Mapping

from atomstyle.config import CompilerConfig
from atomstyle.errors import LoadError
from atomstyle.model.refs import (
    Composite,
    const_ref,
    first_that_works,
    include,
    keyframes_ref,
    position_try_ref,
    typed,
    var_ref,
    view_transition_ref,
)
from atomstyle.registry import RuleRegistry
from atomstyle.stylesheet import StyleSheet

log = logging.getLogger("atomstyle.loader")

SECTIONS = (
    "config",
    "vars",
    "consts",
    "themes",
    "keyframes",
    "position_try",
    "view_transitions",
    "markers",
    "classes",
    "dynamic",
)


# ---------------------------------------------------------------------------
# Value forms
# ---------------------------------------------------------------------------


def _dotted(form: str, value: Any) -> tuple[str, str]:
    if isinstance(value, list) and len(value) == 2 and all(isinstance(v, str) for v in value):
        return value[0], value[1]
    if isinstance(value, str) and "." in value:
        namespace, _, name = value.rpartition(".")
        return namespace, name
    raise LoadError(f"'{form}' expects \"namespace.name\", got {value!r}")


def _name(form: str, value: Any) -> str:
    if not isinstance(value, str) or not value:
        raise LoadError(f"'{form}' expects a name, got {value!r}")
    return value


def _typed(value: Any) -> Any:
    if not isinstance(value, Mapping) or "syntax" not in value or "value" not in value:
        raise LoadError("'$typed' expects an object with 'syntax' and 'value'")
    return typed(value["syntax"], decode_value(value["value"]), bool(value.get("inherits", True)))


def _list(form: str, value: Any) -> list[Any]:
    if not isinstance(value, list):
        raise LoadError(f"'{form}' expects a list, got {value!r}")
    return [decode_value(v) for v in value]


_FORMS = {
    "$var": lambda v: var_ref(*_dotted("$var", v)),
    "$const": lambda v: const_ref(*_dotted("$const", v)),
    "$keyframes": lambda v: keyframes_ref(_name("$keyframes", v)),
    "$position_try": lambda v: position_try_ref(_name("$position_try", v)),
    "$view_transition": lambda v: view_transition_ref(_name("$view_transition", v)),
    "$concat": lambda v: Composite(tuple(_list("$concat", v))),
    "$first_that_works": lambda v: first_that_works(*_list("$first_that_works", v)),
    "$typed": _typed,
}


def decode_value(value: Any) -> Any:
    """Turn ``{"$form": ...}`` objects into reference values, recursively."""
    if isinstance(value, Mapping):
        forms = [k for k in value if isinstance(k, str) and k.startswith("$")]
        if forms:
            if len(value) != 1 or forms[0] not in _FORMS:
                raise LoadError(
                    f"Unknown value form {forms[0]!r}; expected one of: {', '.join(_FORMS)}"
                )
            return _FORMS[forms[0]](value[forms[0]])
        return {k: decode_value(v) for k, v in value.items()}
    if isinstance(value, list):
        return [decode_value(v) for v in value]
    return value


def _class_body(name: str, body: Any) -> Any:
    if isinstance(body, list):
        parts = []
        for part in body:
            if isinstance(part, Mapping) and set(part) == {"$include"}:
                parts.append(include(_name("$include", part["$include"])))
            elif isinstance(part, Mapping):
                parts.append(decode_value(part))
            else:
                raise LoadError(f"Class '{name}' list items must be objects, got {part!r}")
        return parts
    if not isinstance(body, Mapping):
        raise LoadError(f"Class '{name}' must be an object or a list")
    return decode_value(body)


def _section(data: Mapping[str, Any], key: str, kind: type = dict) -> Any:
    value = data.get(key, kind())
    if not isinstance(value, kind):
        raise LoadError(f"Section '{key}' must be a JSON {'object' if kind is dict else 'array'}")
    return value


# ---------------------------------------------------------------------------
# Documents
# ---------------------------------------------------------------------------


def load_document(
    data: Mapping[str, Any],
    config: CompilerConfig | None = None,
    registry: RuleRegistry | None = None,
    overrides: Mapping[str, Any] | None = None,
) -> StyleSheet:
    """Register every definition of a parsed document on a new StyleSheet.

    *config* replaces the document's ``config`` section; *overrides*
    are applied on top of whichever config is used.
    """
    if not isinstance(data, Mapping):
        raise LoadError("Style document must be a JSON object")
    unknown = [k for k in data if k not in SECTIONS]
    if unknown:
        raise LoadError(
            f"Unknown section(s) {', '.join(map(repr, unknown))}; expected: {', '.join(SECTIONS)}"
        )
    if config is None:
        try:
            config = CompilerConfig.from_mapping(_section(data, "config"))
        except ValueError as exc:
            raise LoadError(f"Invalid config: {exc}") from exc
    if overrides:
        config = replace(config, **dict(overrides))

    sheet = StyleSheet(config, registry)
    for namespace, values in _section(data, "vars").items():
        sheet.define_vars(namespace, decode_value(values), location=f"vars.{namespace}")
    for namespace, values in _section(data, "consts").items():
        sheet.define_consts(namespace, decode_value(values), location=f"consts.{namespace}")
    for namespace, themes in _section(data, "themes").items():
        if not isinstance(themes, Mapping):
            raise LoadError(f"themes.{namespace} must map theme names to overrides")
        for name, overrides_ in themes.items():
            sheet.define_theme(namespace, name, decode_value(overrides_),
                               location=f"themes.{namespace}.{name}")
    for name, frames in _section(data, "keyframes").items():
        sheet.define_keyframes(name, decode_value(frames), location=f"keyframes.{name}")
    for name, decls in _section(data, "position_try").items():
        sheet.define_position_try(name, decode_value(decls), location=f"position_try.{name}")
    for name, body in _section(data, "view_transitions").items():
        sheet.define_view_transition(name, decode_value(body), location=f"view_transitions.{name}")
    for name in _section(data, "markers", list):
        sheet.define_marker(_name("markers", name))
    for name, body in _section(data, "classes").items():
        sheet.define_class(name, _class_body(name, body), location=f"classes.{name}")
    for name, spec in _section(data, "dynamic").items():
        if not isinstance(spec, Mapping) or "params" not in spec:
            raise LoadError(f"dynamic.{name} must be an object with 'params'")
        sheet.define_dynamic(
            name, spec["params"], spec.get("properties"), location=f"dynamic.{name}"
        )
    return sheet


def load_file(
    path: str | Path,
    config: CompilerConfig | None = None,
    registry: RuleRegistry | None = None,
    overrides: Mapping[str, Any] | None = None,
) -> StyleSheet:
    """Read and register a JSON style document from *path*."""
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise LoadError(f"cannot read file: {exc.strerror or exc}", path=str(path)) from exc
    except json.JSONDecodeError as exc:
        raise LoadError(
            f"invalid JSON at line {exc.lineno}, column {exc.colno}: {exc.msg}", path=str(path)
        ) from exc
    try:
        sheet = load_document(data, config, registry, overrides)
    except LoadError as exc:
        if exc.path is None:
            raise LoadError(str(exc), path=str(path)) from exc
        raise
    log.debug("loaded %s", path)
    return sheet
