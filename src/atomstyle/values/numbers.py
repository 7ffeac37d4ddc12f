"""Numeric value formatting and unit assignment."""

from __future__ import annotations

from atomstyle.errors import ValidationError
from atomstyle.properties import TIME_PROPERTIES, UNITLESS_PROPERTIES

DECIMAL_PLACES = 4


def format_number(number: float) -> str:
    """Format *number* rounded to four places without trailing zeros."""
    if isinstance(number, int):
        return str(number)
    text = f"{round(number, DECIMAL_PLACES):.{DECIMAL_PLACES}f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


def is_unitless(prop: str) -> bool:
    return prop.startswith("--") or prop in UNITLESS_PROPERTIES


def number_to_css(prop: str, number: int | float) -> str:
    """Render a numeric value for *prop*: bare, in ``ms`` or in ``px``."""
    if isinstance(number, bool):
        raise ValidationError(
            f"Boolean value {number!r} is not a valid CSS value for '{prop}'"
        )
    text = format_number(number)
    if is_unitless(prop):
        return text
    if prop in TIME_PROPERTIES:
        return f"{text}ms"
    return f"{text}px"
