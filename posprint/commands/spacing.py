"""
Line spacing, character spacing, tabs and horizontal positioning.

Horizontal and vertical motion units default to 1/180 inch on the
SRP-350plus; positions and margins are 16-bit little-endian values.

Reference: Bixolon SRP-350plus Command Manual, "Line Spacing Commands",
"Print Position Commands"
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Final

from posprint.commands.base import ESC, GS, check_range, u16_le, u8
from posprint.errors import ValidationError

__all__ = [
    "MAX_TAB_STOPS",
    "SetDefaultLineSpacing",
    "SetLineSpacing",
    "SetRightSpacing",
    "SetHorizontalTabs",
    "SetAbsolutePosition",
    "SetRelativePosition",
    "SetLeftMargin",
    "SetPrintingWidth",
]

MAX_TAB_STOPS: Final[int] = 32


@dataclass(frozen=True, slots=True)
class SetDefaultLineSpacing:
    """
    Select default line spacing (about 1/6 inch).

    Command: ESC 2
    Hex: 1B 32
    """

    def encode(self) -> bytes:
        return bytes([ESC, ord("2")])


@dataclass(frozen=True, slots=True)
class SetLineSpacing:
    """
    Set line spacing to ``units`` vertical motion units.

    Command: ESC 3 n
    Hex: 1B 33 n
    """

    units: int

    def __post_init__(self) -> None:
        u8("line spacing", self.units)

    def encode(self) -> bytes:
        return bytes([ESC, ord("3"), self.units])


@dataclass(frozen=True, slots=True)
class SetRightSpacing:
    """
    Set right-side character spacing.

    Command: ESC SP n
    Hex: 1B 20 n
    """

    units: int

    def __post_init__(self) -> None:
        u8("right spacing", self.units)

    def encode(self) -> bytes:
        return bytes([ESC, ord(" "), self.units])


@dataclass(frozen=True, slots=True)
class SetHorizontalTabs:
    """
    Set horizontal tab stop positions (in character columns).

    Command: ESC D n1 ... nk NUL
    Hex: 1B 44 n1 ... nk 00

    Positions must be strictly ascending, each 1-255, at most 32 stops.
    An empty tuple clears all tab stops.

    Example:
        >>> SetHorizontalTabs((8, 16, 24)).encode()
        b'\\x1bD\\x08\\x10\\x18\\x00'
    """

    positions: tuple[int, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        positions = tuple(self.positions)
        if len(positions) > MAX_TAB_STOPS:
            raise ValidationError(
                f"at most {MAX_TAB_STOPS} tab stops allowed, got {len(positions)}",
                name="tab stops",
                value=positions,
            )
        previous = 0
        for position in positions:
            check_range("tab position", position, 1, 0xFF)
            if position <= previous:
                raise ValidationError(
                    f"tab positions must be strictly ascending: {positions}",
                    name="tab stops",
                    value=positions,
                )
            previous = position
        object.__setattr__(self, "positions", positions)

    @classmethod
    def clear(cls) -> "SetHorizontalTabs":
        return cls(())

    def encode(self) -> bytes:
        return bytes([ESC, ord("D"), *self.positions, 0x00])


@dataclass(frozen=True, slots=True)
class SetAbsolutePosition:
    """
    Move to an absolute position from the start of the line.

    Command: ESC $ nL nH
    Hex: 1B 24 nL nH
    """

    position: int

    def __post_init__(self) -> None:
        check_range("absolute position", self.position, 0, 0xFFFF)

    def encode(self) -> bytes:
        return bytes([ESC, ord("$")]) + u16_le(self.position)


@dataclass(frozen=True, slots=True)
class SetRelativePosition:
    """
    Move relative to the current position; negative moves left.

    Command: ESC \\ nL nH
    Hex: 1B 5C nL nH (signed 16-bit, two's complement)

    Example:
        >>> SetRelativePosition(-100).encode()
        b'\\x1b\\\\\\x9c\\xff'
    """

    offset: int

    def __post_init__(self) -> None:
        check_range("relative position", self.offset, -0x8000, 0x7FFF)

    def encode(self) -> bytes:
        return bytes([ESC, ord("\\")]) + u16_le(self.offset)


@dataclass(frozen=True, slots=True)
class SetLeftMargin:
    """
    Set the left margin.

    Command: GS L nL nH
    Hex: 1D 4C nL nH
    Note: Only takes effect at the beginning of a line.
    """

    margin: int = 0

    def __post_init__(self) -> None:
        check_range("left margin", self.margin, 0, 0xFFFF)

    def encode(self) -> bytes:
        return bytes([GS, ord("L")]) + u16_le(self.margin)


@dataclass(frozen=True, slots=True)
class SetPrintingWidth:
    """
    Set the printing area width.

    Command: GS W nL nH
    Hex: 1D 57 nL nH
    """

    width: int

    def __post_init__(self) -> None:
        check_range("printing width", self.width, 0, 0xFFFF)

    def encode(self) -> bytes:
        return bytes([GS, ord("W")]) + u16_le(self.width)
