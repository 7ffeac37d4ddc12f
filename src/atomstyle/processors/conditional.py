"""ConditionalProcessor: values keyed by pseudo-classes and at-rules."""

from __future__ import annotations

import logging
from typing import Any

from atomstyle.model.entry import AtomicClassEntry, ConditionalBundle
from atomstyle.processors.builder import ProcessContext, build_entry
from atomstyle.selectors.condition import DEFAULT, flatten_conditions, parse_combined
from atomstyle.selectors.media import last_media_query_wins

log = logging.getLogger("atomstyle.processors")


def process_conditional(
    ctx: ProcessContext, prop: str, value: Any, pseudo_element: str | None = None
) -> ConditionalBundle:
    """Flatten a condition map into one entry per condition.

    Nested conditions combine textually.  When two branches flatten to the
    same condition the one written last wins.  Width media queries are
    then bounded so the last one written wins where ranges overlap.  The
    bundle is keyed by the combined condition as written, ``"default"``
    for the unconditioned branch.
    """
    flattened: dict[str | None, Any] = {}
    for key, leaf in flatten_conditions(value, None, prop):
        if key in flattened:
            log.debug("condition %r for %s overridden by a later value", key, prop)
        flattened[key] = leaf

    rewritten = last_media_query_wins(list(flattened))
    entries: dict[str, AtomicClassEntry] = {}
    for key, leaf in flattened.items():
        suffix, at_rule = parse_combined(rewritten[key])
        bundle_key = key if key is not None else DEFAULT
        if leaf is None:
            entries[bundle_key] = AtomicClassEntry.null(prop)
        else:
            entries[bundle_key] = build_entry(
                ctx, prop, leaf, selector_suffix=suffix, pseudo_element=pseudo_element,
                at_rule=at_rule,
            )
    return ConditionalBundle(entries)
