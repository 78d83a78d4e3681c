"""
Nested text styling.

    style_set.py     StyleSet overrides and stack folding
    transitions.py   Diff two effective styles into commands
    text.py          StyledNode tree and renderer
"""

from posprint.style.style_set import STYLE_PROPERTIES, StyleSet, fold
from posprint.style.text import (
    NodeLike,
    Styled,
    StyledNode,
    Text,
    aligned,
    as_node,
    bold,
    double_strike,
    double_underlined,
    reversed,
    rotated,
    sized,
    underlined,
    upside_down,
)
from posprint.style.transitions import STYLE_DEFAULTS, resolve, transition_commands

__all__ = [
    "StyleSet",
    "fold",
    "STYLE_PROPERTIES",
    "STYLE_DEFAULTS",
    "resolve",
    "transition_commands",
    "StyledNode",
    "Text",
    "Styled",
    "NodeLike",
    "as_node",
    "bold",
    "underlined",
    "double_underlined",
    "double_strike",
    "reversed",
    "upside_down",
    "rotated",
    "sized",
    "aligned",
]
