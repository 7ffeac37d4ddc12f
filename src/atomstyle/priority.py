"""Cascade priority for atomic rules.

Emitted rules are sorted by ``(priority, property, selector)``, so the
priority alone decides which of two rules for overlapping properties
wins in the browser:

* shorthands sort before their longhands (a longhand always refines);
* within a tier, property groups sort layout-first, misc-last;
* pseudo-classes push a rule later, pseudo-elements much later;
* at-rules push it later again, so an active query beats the base rule.
"""

from __future__ import annotations

from atomstyle.properties import (
    PHYSICAL_LONGHANDS,
    SHORTHANDS_OF_LONGHANDS,
    SHORTHANDS_OF_SHORTHANDS,
    group_of,
)
from atomstyle.selectors.condition import at_rule_kind, split_at_rules
from atomstyle.selectors.pseudo import PSEUDO_ELEMENT_PRIORITY, pseudo_priority

CUSTOM_PROPERTY_PRIORITY = 1
SHORTHANDS_OF_SHORTHANDS_PRIORITY = 1000
SHORTHANDS_OF_LONGHANDS_PRIORITY = 2000
LONGHAND_PRIORITY = 3000
PHYSICAL_LONGHAND_PRIORITY = 4000

AT_RULE_PRIORITIES: dict[str, int] = {
    "@supports": 200,
    "@media": 300,
    "@container": 400,
    "@starting-style": 500,
}
UNKNOWN_AT_RULE_PRIORITY = 200


def property_priority(prop: str) -> int:
    """Base priority of *prop*: shorthand tier plus its group index."""
    if prop.startswith("--"):
        return CUSTOM_PROPERTY_PRIORITY
    if prop in SHORTHANDS_OF_SHORTHANDS:
        tier = SHORTHANDS_OF_SHORTHANDS_PRIORITY
    elif prop in SHORTHANDS_OF_LONGHANDS:
        tier = SHORTHANDS_OF_LONGHANDS_PRIORITY
    elif prop in PHYSICAL_LONGHANDS:
        tier = PHYSICAL_LONGHAND_PRIORITY
    else:
        tier = LONGHAND_PRIORITY
    return tier + group_of(prop)


def at_rule_priority(at_rule: str | None) -> int:
    if not at_rule:
        return 0
    return sum(
        AT_RULE_PRIORITIES.get(at_rule_kind(part), UNKNOWN_AT_RULE_PRIORITY)
        for part in split_at_rules(at_rule)
    )


def priority(
    prop: str,
    selector_suffix: str | None = None,
    at_rule: str | None = None,
    pseudo_element: str | None = None,
) -> int:
    """Total cascade priority for one atomic rule."""
    total = property_priority(prop)
    total += pseudo_priority(selector_suffix)
    if pseudo_element:
        total += PSEUDO_ELEMENT_PRIORITY
    total += at_rule_priority(at_rule)
    return total
