"""atomstyle model layer -- public type re-exports."""

from atomstyle.model.diagnostic import Diagnostic, Severity
from atomstyle.model.entry import (
    AtomicClassEntry,
    ClassDefinition,
    ConditionalBundle,
    DynamicClassDefinition,
    EntryValue,
    iter_entries,
)
from atomstyle.model.refs import (
    Composite,
    ConstRef,
    FirstThatWorks,
    IncludeRef,
    KeyframesRef,
    Marker,
    PositionTryRef,
    TypedValue,
    VarRef,
    ViewTransitionRef,
)

__all__ = [
    # diagnostic
    "Severity",
    "Diagnostic",
    # entries
    "AtomicClassEntry",
    "ConditionalBundle",
    "ClassDefinition",
    "DynamicClassDefinition",
    "EntryValue",
    "iter_entries",
    # references
    "VarRef",
    "ConstRef",
    "KeyframesRef",
    "PositionTryRef",
    "ViewTransitionRef",
    "Composite",
    "IncludeRef",
    "FirstThatWorks",
    "TypedValue",
    "Marker",
]
