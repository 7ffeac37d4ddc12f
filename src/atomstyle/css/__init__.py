from atomstyle.css.emitter import CSSRule, assemble, atomic_css_rules, render
from atomstyle.css.rules import RTL_SCOPE, SPECIFICITY_BUMP, atomic_rules, wrap_at_rules

__all__ = [
    "CSSRule",
    "RTL_SCOPE",
    "SPECIFICITY_BUMP",
    "assemble",
    "atomic_css_rules",
    "atomic_rules",
    "render",
    "wrap_at_rules",
]
