from atomstyle.validation.rules import ALL_RULES, suggest_properties
from atomstyle.validation.validator import (
    RuleFunc,
    validate_property,
    validate_property_or_raise,
)

__all__ = [
    "ALL_RULES",
    "RuleFunc",
    "suggest_properties",
    "validate_property",
    "validate_property_or_raise",
]
