"""Content-addressed identifiers for atomic classes and other CSS artifacts."""

from __future__ import annotations

import hashlib

from atomstyle.selectors.pseudo import sort_combined_pseudos

DELIMITER = "\x1f"
HASH_LENGTH = 7


def content_hash(blob: str) -> str:
    """Return the short hex digest of an arbitrary serialized body."""
    return hashlib.md5(blob.encode("utf-8")).hexdigest()[:HASH_LENGTH]


def atomic_class_name(
    prop: str,
    value: str,
    selector_suffix: str | None = None,
    pseudo_element: str | None = None,
    at_rule: str | None = None,
    prefix: str = "x",
) -> str:
    """Return the class name for one atomic declaration.

    Pure in its five inputs: the same declaration compiled from any
    definition, in any compile, gets the same class.
    """
    suffix = sort_combined_pseudos(selector_suffix) if selector_suffix else ""
    blob = DELIMITER.join((prop, value, suffix, pseudo_element or "", at_rule or ""))
    return prefix + content_hash(blob)
