"""Contextual selectors: style an element by the state of a related element.

Each helper returns a condition key usable in a conditional value::

    {"default": "1", when.ancestor(":hover"): ".5"}

The observed element carries a marker class, either the default marker
or one created with :func:`define_marker`.
"""

from __future__ import annotations

from atomstyle.errors import ValidationError
from atomstyle.hashing import content_hash
from atomstyle.model.refs import Marker


def default_marker(prefix: str = "x") -> Marker:
    return Marker(f"{prefix}-default-marker")


def define_marker(name: str, prefix: str = "x") -> Marker:
    """A named marker with a content-addressed class."""
    return Marker(prefix + content_hash(f"marker:{name}"))


def _marker_class(marker: Marker | str | None) -> str:
    if marker is None:
        return default_marker().class_name
    if isinstance(marker, Marker):
        return marker.class_name
    return marker


def _validate_pseudo(pseudo: str) -> None:
    if pseudo.startswith("::"):
        raise ValidationError(
            f"Pseudo-elements are not supported in contextual selectors (got '{pseudo}')"
        )
    if not pseudo.startswith(":"):
        raise ValidationError(f"Pseudo selector must start with ':' (got '{pseudo}')")


def ancestor(pseudo: str, marker: Marker | str | None = None) -> str:
    """Matches when an ancestor carrying the marker is in *pseudo* state."""
    _validate_pseudo(pseudo)
    return f":where(.{_marker_class(marker)}{pseudo} *)"


def descendant(pseudo: str, marker: Marker | str | None = None) -> str:
    """Matches when a descendant carrying the marker is in *pseudo* state."""
    _validate_pseudo(pseudo)
    return f":where(:has(.{_marker_class(marker)}{pseudo}))"


def sibling_before(pseudo: str, marker: Marker | str | None = None) -> str:
    """Matches when a preceding sibling carrying the marker is in *pseudo* state."""
    _validate_pseudo(pseudo)
    return f":where(.{_marker_class(marker)}{pseudo} ~ *)"


def sibling_after(pseudo: str, marker: Marker | str | None = None) -> str:
    """Matches when a following sibling carrying the marker is in *pseudo* state."""
    _validate_pseudo(pseudo)
    return f":where(:has(~ .{_marker_class(marker)}{pseudo}))"


def any_sibling(pseudo: str, marker: Marker | str | None = None) -> str:
    _validate_pseudo(pseudo)
    cls = _marker_class(marker)
    return f":where(.{cls}{pseudo} ~ *, :has(~ .{cls}{pseudo}))"
