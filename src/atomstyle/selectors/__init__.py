from atomstyle.selectors.condition import (
    DEFAULT,
    combine,
    flatten_conditions,
    is_conditional_map,
    parse_combined,
    split_at_rules,
)
from atomstyle.selectors.pseudo import pseudo_priority, sort_combined_pseudos

__all__ = [
    "DEFAULT",
    "combine",
    "flatten_conditions",
    "is_conditional_map",
    "parse_combined",
    "split_at_rules",
    "pseudo_priority",
    "sort_combined_pseudos",
]
