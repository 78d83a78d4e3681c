"""
Sparse text style overrides and stack folding.

A ``StyleSet`` records which formatting properties a scope overrides. A
property left as ``None`` is inherited from the enclosing scope. Folding a
stack of StyleSets resolves the effective style: for every property the
innermost scope that sets it wins. Global defaults are not applied here;
they only matter when two effective styles are diffed into commands.

Example:
    >>> outer = StyleSet().with_emphasis(True)
    >>> inner = StyleSet().with_underline(True)
    >>> effective = fold([outer, inner])
    >>> effective.emphasis, effective.underline
    (True, <UnderlineThickness.ONE_DOT: 1>)
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Iterable, Optional, Union

from posprint.commands.character import (
    CharacterSize,
    Justification,
    RotationMode,
    UnderlineThickness,
)

__all__ = ["StyleSet", "fold", "STYLE_PROPERTIES"]


@dataclass(frozen=True, slots=True)
class StyleSet:
    """
    Immutable set of formatting overrides.

    Field order is the canonical property order used when emitting
    transition commands.
    """

    emphasis: Optional[bool] = None
    underline: Optional[UnderlineThickness] = None
    double_strike: Optional[bool] = None
    size: Optional[CharacterSize] = None
    reverse: Optional[bool] = None
    upside_down: Optional[bool] = None
    rotation: Optional[RotationMode] = None
    justification: Optional[Justification] = None

    # -------------------------------------------------------------------------
    # Fluent setters (each returns a new StyleSet)
    # -------------------------------------------------------------------------

    def with_emphasis(self, on: bool = True) -> StyleSet:
        return replace(self, emphasis=bool(on))

    def with_bold(self, on: bool = True) -> StyleSet:
        """Alias for ``with_emphasis``."""
        return self.with_emphasis(on)

    def with_underline(self, mode: Union[UnderlineThickness, bool] = True) -> StyleSet:
        """``True`` selects 1-dot underline, ``False`` turns it off."""
        if isinstance(mode, bool):
            mode = UnderlineThickness.ONE_DOT if mode else UnderlineThickness.OFF
        return replace(self, underline=UnderlineThickness(mode))

    def with_double_underline(self, on: bool = True) -> StyleSet:
        return self.with_underline(UnderlineThickness.TWO_DOT if on else UnderlineThickness.OFF)

    def with_double_strike(self, on: bool = True) -> StyleSet:
        return replace(self, double_strike=bool(on))

    def with_size(self, size: CharacterSize) -> StyleSet:
        return replace(self, size=size)

    def with_reverse(self, on: bool = True) -> StyleSet:
        return replace(self, reverse=bool(on))

    def with_upside_down(self, on: bool = True) -> StyleSet:
        return replace(self, upside_down=bool(on))

    def with_rotation(self, mode: Union[RotationMode, bool] = True) -> StyleSet:
        if isinstance(mode, bool):
            mode = RotationMode.CLOCKWISE_90 if mode else RotationMode.OFF
        return replace(self, rotation=RotationMode(mode))

    def with_rotated(self, on: bool = True) -> StyleSet:
        return self.with_rotation(on)

    def with_justification(self, justification: Justification) -> StyleSet:
        return replace(self, justification=Justification(justification))

    # -------------------------------------------------------------------------
    # Queries and combination
    # -------------------------------------------------------------------------

    def is_empty(self) -> bool:
        """True iff every property is unset."""
        return all(getattr(self, name) is None for name in STYLE_PROPERTIES)

    def merge(self, other: StyleSet) -> StyleSet:
        """Overlay ``other`` on top of ``self``: other's set properties win."""
        overrides = {
            name: value
            for name in STYLE_PROPERTIES
            if (value := getattr(other, name)) is not None
        }
        return replace(self, **overrides) if overrides else self


STYLE_PROPERTIES: tuple[str, ...] = tuple(f.name for f in fields(StyleSet))
"""Property names in canonical order."""


def fold(stack: Iterable[StyleSet]) -> StyleSet:
    """
    Resolve a style stack, outermost first, into one effective StyleSet.

    ``fold([])`` is fully unset; ``fold([s]) == s``.
    """
    effective = StyleSet()
    for style in stack:
        effective = effective.merge(style)
    return effective
