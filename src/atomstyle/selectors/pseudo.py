"""Pseudo-class and pseudo-element splitting, ordering and priorities."""

from __future__ import annotations

PSEUDO_ELEMENT_PRIORITY = 5000
UNKNOWN_PSEUDO_PRIORITY = 40

PSEUDO_CLASS_PRIORITIES: dict[str, int] = {
    ":is": 40,
    ":where": 40,
    ":not": 40,
    ":has": 45,
    ":dir": 50,
    ":lang": 51,
    ":first-child": 52,
    ":first-of-type": 53,
    ":last-child": 54,
    ":last-of-type": 55,
    ":only-child": 56,
    ":only-of-type": 57,
    ":nth-child": 60,
    ":nth-last-child": 61,
    ":nth-of-type": 62,
    ":nth-last-of-type": 63,
    ":empty": 70,
    ":link": 80,
    ":any-link": 81,
    ":local-link": 82,
    ":target-within": 83,
    ":target": 84,
    ":visited": 85,
    ":enabled": 91,
    ":disabled": 92,
    ":required": 93,
    ":optional": 94,
    ":read-only": 95,
    ":read-write": 96,
    ":placeholder-shown": 97,
    ":in-range": 98,
    ":out-of-range": 99,
    ":default": 100,
    ":checked": 101,
    ":indeterminate": 101,
    ":blank": 102,
    ":valid": 103,
    ":invalid": 104,
    ":user-invalid": 105,
    ":autofill": 110,
    ":picture-in-picture": 120,
    ":modal": 121,
    ":fullscreen": 122,
    ":paused": 123,
    ":playing": 124,
    ":current": 125,
    ":past": 126,
    ":future": 127,
    ":hover": 130,
    ":focus-within": 140,
    ":focus": 150,
    ":focus-visible": 160,
    ":active": 170,
}


def split_pseudos(selector: str) -> list[str]:
    """Split a combined selector into its top-level pseudo tokens.

    ``":hover::before:focus"`` -> ``[":hover", "::before", ":focus"]``.
    Parenthesized arguments stay attached to their pseudo-class.
    """
    tokens: list[str] = []
    current = ""
    depth = 0
    i = 0
    while i < len(selector):
        ch = selector[i]
        if ch == ":" and depth == 0:
            if current:
                tokens.append(current)
            if selector.startswith("::", i):
                current = "::"
                i += 2
                continue
            current = ":"
        else:
            if ch == "(":
                depth += 1
            elif ch == ")":
                depth = max(depth - 1, 0)
            current += ch
        i += 1
    if current:
        tokens.append(current)
    return tokens


def is_pseudo_element(token: str) -> bool:
    return token.startswith("::")


def sort_pseudos(tokens: list[str]) -> list[str]:
    """Sort pseudo-classes alphabetically; pseudo-elements stay in place."""
    result: list[str] = []
    group: list[str] = []
    for token in tokens:
        if is_pseudo_element(token):
            result.extend(sorted(group))
            group = []
            result.append(token)
        else:
            group.append(token)
    result.extend(sorted(group))
    return result


def sort_combined_pseudos(selector: str) -> str:
    """Canonical form of a combined selector, used for hashing.

    Selectors containing functional pseudo-classes are returned unchanged.
    """
    if not selector or "(" in selector or not selector.startswith(":"):
        return selector
    return "".join(sort_pseudos(split_pseudos(selector)))


def pseudo_class_priority(token: str) -> int:
    base = token.split("(", 1)[0]
    return PSEUDO_CLASS_PRIORITIES.get(base, UNKNOWN_PSEUDO_PRIORITY)


def pseudo_priority(selector: str | None) -> int:
    """Total cascade offset contributed by a combined pseudo selector.

    Pseudo-classes sum their table values; a pseudo-element adds 5000.
    """
    if not selector:
        return 0
    total = 0
    for token in split_pseudos(selector):
        if is_pseudo_element(token):
            total += PSEUDO_ELEMENT_PRIORITY
        elif token.startswith(":"):
            total += pseudo_class_priority(token)
    return total
