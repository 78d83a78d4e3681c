"""
Style transition emitter.

Diffs two effective styles into the commands that move the printer from
one to the other. Unset properties are read as the power-on defaults in
``STYLE_DEFAULTS`` before comparing, so ``StyleSet()`` and an explicit
"all off" style produce no commands between them.
"""

from __future__ import annotations

from typing import Callable, Final

from posprint.commands.base import Command
from posprint.commands.character import (
    CharacterSize,
    Justification,
    RotationMode,
    SetCharacterSize,
    SetDoubleStrike,
    SetEmphasized,
    SetJustification,
    SetReverse,
    SetRotation,
    SetUnderline,
    SetUpsideDown,
    UnderlineThickness,
)
from posprint.style.style_set import StyleSet

__all__ = ["STYLE_DEFAULTS", "transition_commands", "resolve"]

STYLE_DEFAULTS: Final[StyleSet] = StyleSet(
    emphasis=False,
    underline=UnderlineThickness.OFF,
    double_strike=False,
    size=CharacterSize.standard(),
    reverse=False,
    upside_down=False,
    rotation=RotationMode.OFF,
    justification=Justification.LEFT,
)
"""Printer state after ``ESC @``; every property set."""

# property -> command factory, in canonical order
_SETTERS: Final[dict[str, Callable[..., Command]]] = {
    "emphasis": SetEmphasized,
    "underline": SetUnderline,
    "double_strike": SetDoubleStrike,
    "size": SetCharacterSize,
    "reverse": SetReverse,
    "upside_down": SetUpsideDown,
    "rotation": SetRotation,
    "justification": SetJustification,
}


def resolve(style: StyleSet) -> StyleSet:
    """Fill every unset property of ``style`` from ``STYLE_DEFAULTS``."""
    return STYLE_DEFAULTS.merge(style)


def transition_commands(previous: StyleSet, new: StyleSet) -> list[Command]:
    """
    Commands that change the printer from ``previous`` to ``new``.

    At most one command per property, in canonical order. Returns an empty
    list when both styles agree on every property after default
    substitution.

    Example:
        >>> transition_commands(StyleSet(), StyleSet().with_emphasis(True))
        [SetEmphasized(on=True)]
    """
    before = resolve(previous)
    after = resolve(new)
    commands: list[Command] = []
    for name, setter in _SETTERS.items():
        value = getattr(after, name)
        if getattr(before, name) != value:
            commands.append(setter(value))
    return commands
