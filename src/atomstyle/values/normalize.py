"""Value normalization.

Every value goes through the same chain of small string normalizers so
that equivalent spellings (``0px`` and ``0``, ``500ms`` and ``.5s``)
produce one canonical string, and therefore one class.  Normalizing an
already normalized value returns it unchanged.
"""

from __future__ import annotations

import re
from typing import Callable

from atomstyle.errors import ValidationError
from atomstyle.properties import IDENTIFIER_LIST_PROPERTIES
from atomstyle.values.numbers import format_number, number_to_css

Normalizer = Callable[[str], str]

LENGTH_UNITS = (
    "px", "em", "rem", "vh", "vw", "vmin", "vmax", "ch", "ex", "cm", "mm",
    "in", "pt", "pc", "dvh", "dvw", "lvh", "lvw", "svh", "svw", "cqw", "cqh",
)

# ---------------------------------------------------------------------------
# Patterns
# ---------------------------------------------------------------------------

_COMMA_RE = re.compile(r"\s*,\s*")
_SPACES_RE = re.compile(r"\s+")
_OPEN_PAREN_RE = re.compile(r"\(\s+")
_CLOSE_PAREN_RE = re.compile(r"\s+\)")
_IMPORTANT_RE = re.compile(r"\s*!\s*important$", re.IGNORECASE)
_MS_RE = re.compile(r"(?<![\w.])(\d+(?:\.\d+)?)ms\b")
_LEADING_ZERO_RE = re.compile(r"(?<![\w.])0\.(\d+)")
_ZERO_ANGLE_RE = re.compile(r"(?<![\w.])0(?:deg|grad|turn|rad)\b")
_ZERO_TIME_RE = re.compile(r"(?<![\w.])0(?:ms|s)\b")
_ZERO_LENGTH_RE = re.compile(
    r"(?<![\w.])0(?:" + "|".join(LENGTH_UNITS) + r")\b(?!\()"
)
_EMPTY_QUOTES_RE = re.compile(r"''")

# ---------------------------------------------------------------------------
# Normalizers
# ---------------------------------------------------------------------------


def normalize_whitespace(value: str) -> str:
    """Single-space the value and trim spaces next to commas and parens.

    Spaces around ``+``/``-`` inside ``calc()`` survive, since they are
    single spaces between tokens.
    """
    value = value.strip()
    value = _COMMA_RE.sub(",", value)
    value = _SPACES_RE.sub(" ", value)
    value = _OPEN_PAREN_RE.sub("(", value)
    return _CLOSE_PAREN_RE.sub(")", value)


def normalize_important(value: str) -> str:
    return _IMPORTANT_RE.sub("!important", value)


def normalize_timings(value: str) -> str:
    """``1234ms`` -> ``1.234s``; values under 10ms stay in milliseconds."""

    def repl(match: re.Match[str]) -> str:
        ms = float(match.group(1))
        if ms < 10:
            return match.group(0)
        return format_number(ms / 1000) + "s"

    return _MS_RE.sub(repl, value)


def normalize_zero_dimensions(value: str) -> str:
    """Drop units from zero lengths; zero times become ``0s``, angles ``0deg``.

    Inside function arguments a zero length is only rewritten when it is
    a whole argument, so ``calc(0px + 1em)`` keeps its unit.
    """
    value = _ZERO_ANGLE_RE.sub("0deg", value)
    value = _ZERO_TIME_RE.sub("0s", value)

    def repl(match: re.Match[str]) -> str:
        before = value[: match.start()]
        if before.count("(") > before.count(")"):
            after = value[match.end():]
            if after and after[0] not in ",)":
                return match.group(0)
        return "0"

    return _ZERO_LENGTH_RE.sub(repl, value)


def normalize_leading_zero(value: str) -> str:
    return _LEADING_ZERO_RE.sub(r".\1", value)


def normalize_empty_quotes(value: str) -> str:
    return _EMPTY_QUOTES_RE.sub('""', value)


BUILTIN_NORMALIZERS: list[Normalizer] = [
    normalize_whitespace,
    normalize_important,
    normalize_timings,
    normalize_zero_dimensions,
    normalize_leading_zero,
    normalize_empty_quotes,
]


def apply_normalizers(value: str, normalizers: list[Normalizer] | None = None) -> str:
    """Run *value* through the built-in normalizers (and any extra ones)."""
    chain = list(BUILTIN_NORMALIZERS)
    if normalizers:
        chain.extend(normalizers)
    for normalizer in chain:
        value = normalizer(value)
    return value


# ---------------------------------------------------------------------------
# Property-specific rules
# ---------------------------------------------------------------------------

CONTENT_FUNCTIONS = (
    "attr(", "counter(", "counters(", "url(", "linear-gradient(",
    "radial-gradient(", "conic-gradient(", "repeating-linear-gradient(",
    "repeating-radial-gradient(", "image-set(", "var(",
)

CONTENT_KEYWORDS = frozenset({
    "normal", "none", "open-quote", "close-quote", "no-open-quote",
    "no-close-quote", "inherit", "initial", "revert", "revert-layer", "unset",
})

GLOBAL_KEYWORDS = frozenset({"inherit", "initial", "revert", "revert-layer", "unset"})

QUOTED_PROPERTIES = frozenset({"content", "hyphenate-character", "quotes"})


def _is_quoted(value: str) -> bool:
    return len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"')


def quote_content(value: str) -> str:
    """Wrap plain ``content`` text in double quotes."""
    if (
        value in CONTENT_KEYWORDS
        or value.startswith(CONTENT_FUNCTIONS)
        or _is_quoted(value)
    ):
        return value
    return '"' + value.replace('"', '\\"') + '"'


def quote_hyphenate_character(value: str) -> str:
    if value == "auto" or value in GLOBAL_KEYWORDS or _is_quoted(value):
        return value
    return '"' + value.replace('"', '\\"') + '"'


def normalize_identifier_list(value: str) -> str:
    """``background_color, --my_var`` -> ``background-color,--my_var``."""
    segments = [s.strip() for s in value.split(",")]
    return ",".join(s if s.startswith("--") else s.replace("_", "-") for s in segments)


def _normalize_quoted(prop: str, value: str) -> str:
    value = normalize_important(value.strip())
    important = value.endswith("!important")
    if important:
        value = value[: -len("!important")].rstrip()
    if value == "''":
        value = '""'
    if prop == "content":
        value = quote_content(value)
    elif prop == "hyphenate-character":
        value = quote_hyphenate_character(value)
    return value + ("!important" if important else "")


def normalize_value(prop: str, raw: object) -> str:
    """Return the canonical string form of *raw* for property *prop*.

    Raises:
        ValidationError: for booleans, None and other non-scalar values.
    """
    if isinstance(raw, bool) or raw is None:
        raise ValidationError(f"Invalid value {raw!r} for property '{prop}'")
    if isinstance(raw, (int, float)):
        raw = number_to_css(prop, raw)
    if not isinstance(raw, str):
        raise ValidationError(
            f"Invalid value {raw!r} for property '{prop}': expected a string or number"
        )
    if prop in QUOTED_PROPERTIES:
        return _normalize_quoted(prop, raw)
    value = apply_normalizers(raw)
    if prop in IDENTIFIER_LIST_PROPERTIES:
        value = normalize_identifier_list(value)
    return value
