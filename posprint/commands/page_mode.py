"""
Page mode commands.

In page mode the printer lays data out in a buffered print area and only
prints when FF arrives. ``ESC L`` enters page mode, ``FF`` prints the page,
``ESC S`` returns to standard mode.

Reference: Bixolon SRP-350plus Command Manual, "Page Mode Commands"
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from posprint.commands.base import ESC, GS, check_range, u16_le

__all__ = [
    "PrintDirection",
    "PrintArea",
    "EnterPageMode",
    "ExitPageMode",
    "SetPrintDirection",
    "SetPrintArea",
    "SetHorizontalPosition",
    "SetVerticalPosition",
]

_U16_MAX = 0xFFFF


class PrintDirection(IntEnum):
    """Starting corner and direction of page-mode printing (``ESC T n``)."""

    LEFT_TO_RIGHT = 0  # upper left
    BOTTOM_TO_TOP = 1  # lower left
    RIGHT_TO_LEFT = 2  # lower right
    TOP_TO_BOTTOM = 3  # upper right


@dataclass(frozen=True, slots=True)
class PrintArea:
    """
    Page-mode print area in motion units.

    All four fields are 16-bit unsigned values.
    """

    x: int
    y: int
    width: int
    height: int

    def __post_init__(self) -> None:
        check_range("print area x", self.x, 0, _U16_MAX)
        check_range("print area y", self.y, 0, _U16_MAX)
        check_range("print area width", self.width, 0, _U16_MAX)
        check_range("print area height", self.height, 0, _U16_MAX)

    @classmethod
    def default_80mm(cls) -> PrintArea:
        """Full printable area of 80 mm paper."""
        return cls(0, 0, 512, 1662)

    @classmethod
    def default_58mm(cls) -> PrintArea:
        """Full printable area of 58 mm paper."""
        return cls(0, 0, 360, 1662)


@dataclass(frozen=True, slots=True)
class EnterPageMode:
    """
    Switch from standard mode to page mode.

    Command: ESC L
    Hex: 1B 4C
    """

    def encode(self) -> bytes:
        return bytes([ESC, ord("L")])


@dataclass(frozen=True, slots=True)
class ExitPageMode:
    """
    Discard page-mode buffer and return to standard mode.

    Command: ESC S
    Hex: 1B 53
    """

    def encode(self) -> bytes:
        return bytes([ESC, ord("S")])


@dataclass(frozen=True, slots=True)
class SetPrintDirection:
    """
    Select print direction in page mode.

    Command: ESC T n
    Hex: 1B 54 n
    """

    direction: PrintDirection = PrintDirection.LEFT_TO_RIGHT

    def encode(self) -> bytes:
        return bytes([ESC, ord("T"), int(self.direction)])


@dataclass(frozen=True, slots=True)
class SetPrintArea:
    """
    Set the print area in page mode.

    Command: ESC W xL xH yL yH dxL dxH dyL dyH
    Hex: 1B 57 + four little-endian 16-bit values

    Example:
        >>> SetPrintArea(PrintArea.default_80mm()).encode().hex(" ")
        '1b 57 00 00 00 00 00 02 7e 06'
    """

    area: PrintArea

    def encode(self) -> bytes:
        a = self.area
        return (
            bytes([ESC, ord("W")])
            + u16_le(a.x)
            + u16_le(a.y)
            + u16_le(a.width)
            + u16_le(a.height)
        )


@dataclass(frozen=True, slots=True)
class SetHorizontalPosition:
    """
    Set absolute horizontal print position.

    Command: ESC $ nL nH
    Hex: 1B 24 nL nH
    """

    position: int

    def __post_init__(self) -> None:
        check_range("horizontal position", self.position, 0, _U16_MAX)

    def encode(self) -> bytes:
        return bytes([ESC, ord("$")]) + u16_le(self.position)


@dataclass(frozen=True, slots=True)
class SetVerticalPosition:
    """
    Set absolute vertical print position (page mode only).

    Command: GS $ nL nH
    Hex: 1D 24 nL nH
    """

    position: int

    def __post_init__(self) -> None:
        check_range("vertical position", self.position, 0, _U16_MAX)

    def encode(self) -> bytes:
        return bytes([GS, ord("$")]) + u16_le(self.position)
