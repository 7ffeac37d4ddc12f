from atomstyle.values.fallback import FallbackValue, first_that_works, plain_fallback
from atomstyle.values.normalize import normalize_value
from atomstyle.values.numbers import format_number, number_to_css

__all__ = [
    "FallbackValue",
    "first_that_works",
    "plain_fallback",
    "normalize_value",
    "format_number",
    "number_to_css",
]
