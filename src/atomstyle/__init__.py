"""atomstyle: a deterministic atomic-CSS compiler."""

__version__ = "0.1.0"

# Configuration and errors
from atomstyle.config import CompilerConfig, ShorthandBehavior
from atomstyle.errors import (
    CompileError,
    LoadError,
    PolicyWarning,
    StyleReferenceError,
    ValidationError,
)

# Hashing and references
from atomstyle.hashing import atomic_class_name, content_hash
from atomstyle.model.refs import (
    const_ref,
    first_that_works,
    include,
    keyframes_ref,
    position_try_ref,
    raw_class,
    typed,
    var_ref,
    view_transition_ref,
)

# Compiling and merging
from atomstyle.css.emitter import CSSRule
from atomstyle.loader import load_document, load_file
from atomstyle.merge import MergeResult, StyleMerger
from atomstyle.registry import RuleRegistry
from atomstyle.selectors import when
from atomstyle.stylesheet import CompiledStyles, StyleSheet

__all__ = [
    "__version__",
    # config / errors
    "CompilerConfig",
    "ShorthandBehavior",
    "CompileError",
    "LoadError",
    "PolicyWarning",
    "StyleReferenceError",
    "ValidationError",
    # hashing / references
    "atomic_class_name",
    "content_hash",
    "const_ref",
    "first_that_works",
    "include",
    "keyframes_ref",
    "position_try_ref",
    "raw_class",
    "typed",
    "var_ref",
    "view_transition_ref",
    # compile / merge
    "CSSRule",
    "CompiledStyles",
    "MergeResult",
    "RuleRegistry",
    "StyleMerger",
    "StyleSheet",
    "load_document",
    "load_file",
    "when",
]
