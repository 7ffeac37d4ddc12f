"""Compiler configuration."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any, Callable, Mapping

VendorPrefixer = Callable[[str, str], "str | None"]
DeprecationChecker = Callable[[str], bool]


class ShorthandBehavior(Enum):
    """How shorthand properties interact with their longhands."""

    ACCEPT = "accept"  # keep both; cascade order decides
    FLATTEN = "flatten"  # expand shorthands into longhands
    FORBID = "forbid"  # error when a shorthand meets one of its longhands


@dataclass(frozen=True)
class CompilerConfig:
    """Options that shape compiled class names and emitted CSS.

    Attributes:
        shorthand_behavior: Policy applied by the shorthand expander.
        use_css_layers: Group rules in ``@layer`` blocks instead of bumping
            the specificity of conditional rules.
        class_name_prefix: Leading letter(s) of every generated identifier.
        vendor_prefixer: ``(property, value) -> declarations`` used to emit
            prefixed declarations; returns None when no prefixing applies.
        deprecation_checker: ``property -> bool``; True flags a warning.
        allowed_properties: Extra property names accepted as known.
        debug_class_names: Append the property name to class names.
        layer_name: Base name of the ``@layer`` blocks.
    """

    shorthand_behavior: ShorthandBehavior = ShorthandBehavior.ACCEPT
    use_css_layers: bool = False
    class_name_prefix: str = "x"
    vendor_prefixer: VendorPrefixer | None = None
    deprecation_checker: DeprecationChecker | None = None
    allowed_properties: frozenset[str] = field(default_factory=frozenset)
    debug_class_names: bool = False
    layer_name: str = "atomstyle"

    def __post_init__(self) -> None:
        if isinstance(self.shorthand_behavior, str):
            try:
                behavior = ShorthandBehavior(self.shorthand_behavior)
            except ValueError:
                choices = ", ".join(b.value for b in ShorthandBehavior)
                raise ValueError(
                    f"Unknown shorthand behavior '{self.shorthand_behavior}'. "
                    f"Expected one of: {choices}"
                ) from None
            object.__setattr__(self, "shorthand_behavior", behavior)
        if not isinstance(self.allowed_properties, frozenset):
            object.__setattr__(self, "allowed_properties", frozenset(self.allowed_properties))
        prefix = self.class_name_prefix
        if not prefix or not (prefix[0].isalpha() or prefix[0] in "_-"):
            raise ValueError(
                f"class_name_prefix must start with a letter, got '{prefix}'"
            )

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> CompilerConfig:
        """Build a config from a plain mapping, e.g. a JSON ``config`` section.

        Keys may be snake_case or dash-case; callables cannot be supplied
        this way.
        """
        known = {f.name for f in fields(cls)} - {"vendor_prefixer", "deprecation_checker"}
        kwargs: dict[str, Any] = {}
        for key, value in data.items():
            name = key.replace("-", "_")
            if name not in known:
                raise ValueError(f"Unknown config option '{key}'")
            kwargs[name] = value
        return cls(**kwargs)
