from atomstyle.tokens.keyframes import compile_keyframes
from atomstyle.tokens.model import (
    ConstDefinition,
    KeyframesDefinition,
    PositionTryDefinition,
    ThemeDefinition,
    VarDefinition,
    ViewTransitionDefinition,
)
from atomstyle.tokens.position_try import compile_position_try
from atomstyle.tokens.themes import compile_theme
from atomstyle.tokens.vars import compile_const, compile_var, var_css_name
from atomstyle.tokens.view_transitions import compile_view_transition

__all__ = [
    "ConstDefinition",
    "KeyframesDefinition",
    "PositionTryDefinition",
    "ThemeDefinition",
    "VarDefinition",
    "ViewTransitionDefinition",
    "compile_const",
    "compile_keyframes",
    "compile_position_try",
    "compile_theme",
    "compile_var",
    "compile_view_transition",
    "var_css_name",
]
