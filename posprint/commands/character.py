"""
Character formatting commands.

Emphasis, underline, double-strike, font, size, justification, upside-down,
rotation, reverse and smoothing. Every mode must be sent BEFORE the text it
affects; modes persist until changed or until ``ESC @``.

Reference: Bixolon SRP-350plus Command Manual, "Character Commands"
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from posprint.commands.base import ESC, GS, check_range

__all__ = [
    "UnderlineThickness",
    "Font",
    "ScaleFactor",
    "CharacterSize",
    "Justification",
    "RotationMode",
    "SetEmphasized",
    "SetUnderline",
    "SetDoubleStrike",
    "SelectFont",
    "SetCharacterSize",
    "SetJustification",
    "SetUpsideDown",
    "SetRotation",
    "SetReverse",
    "SetSmoothing",
]

# =============================================================================
# PARAMETER TYPES
# =============================================================================


class UnderlineThickness(IntEnum):
    """Underline mode ``n`` of ``ESC -``."""

    OFF = 0
    ONE_DOT = 1
    TWO_DOT = 2


class Font(IntEnum):
    """Character font ``n`` of ``ESC M``."""

    A = 0  # 12x24 dots
    B = 1  # 9x17 dots


class ScaleFactor(IntEnum):
    """
    Character magnification, 1x to 8x.

    The member value is the 3-bit field sent to the printer (scale - 1).
    """

    X1 = 0
    X2 = 1
    X3 = 2
    X4 = 3
    X5 = 4
    X6 = 5
    X7 = 6
    X8 = 7

    @property
    def multiplier(self) -> int:
        return self.value + 1

    @classmethod
    def from_int(cls, multiplier: int) -> "ScaleFactor":
        """
        Build from a human multiplier (1-8).

        Raises:
            OutOfRangeError: If ``multiplier`` is outside 1-8.
        """
        check_range("scale factor", multiplier, 1, 8)
        return cls(multiplier - 1)


@dataclass(frozen=True, slots=True)
class CharacterSize:
    """Independent width and height magnification."""

    width: ScaleFactor = ScaleFactor.X1
    height: ScaleFactor = ScaleFactor.X1

    @classmethod
    def standard(cls) -> CharacterSize:
        return cls(ScaleFactor.X1, ScaleFactor.X1)

    @classmethod
    def double(cls) -> CharacterSize:
        return cls(ScaleFactor.X2, ScaleFactor.X2)

    @classmethod
    def double_width(cls) -> CharacterSize:
        return cls(ScaleFactor.X2, ScaleFactor.X1)

    @classmethod
    def double_height(cls) -> CharacterSize:
        return cls(ScaleFactor.X1, ScaleFactor.X2)

    @classmethod
    def of(cls, width: int, height: int) -> CharacterSize:
        """Build from human multipliers, e.g. ``CharacterSize.of(3, 2)``."""
        return cls(ScaleFactor.from_int(width), ScaleFactor.from_int(height))

    def to_byte(self) -> int:
        """Bits 4-6 carry width, bits 0-2 carry height."""
        return (int(self.width) << 4) | int(self.height)


class Justification(IntEnum):
    """Alignment ``n`` of ``ESC a``."""

    LEFT = 0
    CENTER = 1
    RIGHT = 2


class RotationMode(IntEnum):
    """Rotation ``n`` of ``ESC V``."""

    OFF = 0
    CLOCKWISE_90 = 1


# =============================================================================
# COMMANDS
# =============================================================================


@dataclass(frozen=True, slots=True)
class SetEmphasized:
    """
    Turn emphasized (bold) mode on or off.

    Command: ESC E n
    Hex: 1B 45 n
    """

    on: bool = True

    def encode(self) -> bytes:
        return bytes([ESC, ord("E"), int(bool(self.on))])


@dataclass(frozen=True, slots=True)
class SetUnderline:
    """
    Select underline mode.

    Command: ESC - n
    Hex: 1B 2D n
    Values: 0 = off, 1 = 1-dot, 2 = 2-dot
    """

    thickness: UnderlineThickness = UnderlineThickness.ONE_DOT

    def encode(self) -> bytes:
        return bytes([ESC, ord("-"), int(self.thickness)])


@dataclass(frozen=True, slots=True)
class SetDoubleStrike:
    """
    Turn double-strike mode on or off.

    Command: ESC G n
    Hex: 1B 47 n
    """

    on: bool = True

    def encode(self) -> bytes:
        return bytes([ESC, ord("G"), int(bool(self.on))])


@dataclass(frozen=True, slots=True)
class SelectFont:
    """
    Select character font.

    Command: ESC M n
    Hex: 1B 4D n
    """

    font: Font = Font.A

    def encode(self) -> bytes:
        return bytes([ESC, ord("M"), int(self.font)])


@dataclass(frozen=True, slots=True)
class SetCharacterSize:
    """
    Select character width and height magnification.

    Command: GS ! n
    Hex: 1D 21 n
    Encoding: bits 4-6 = width - 1, bits 0-2 = height - 1

    Example:
        >>> SetCharacterSize(CharacterSize.double()).encode()
        b'\\x1d!\\x11'
    """

    size: CharacterSize = CharacterSize()

    def encode(self) -> bytes:
        return bytes([GS, ord("!"), self.size.to_byte()])


@dataclass(frozen=True, slots=True)
class SetJustification:
    """
    Align all data in one line.

    Command: ESC a n
    Hex: 1B 61 n
    Note: Only takes effect at the beginning of a line.
    """

    justification: Justification = Justification.LEFT

    def encode(self) -> bytes:
        return bytes([ESC, ord("a"), int(self.justification)])


@dataclass(frozen=True, slots=True)
class SetUpsideDown:
    """
    Turn upside-down (180 degree) printing on or off.

    Command: ESC { n
    Hex: 1B 7B n
    Note: Only takes effect at the beginning of a line.
    """

    on: bool = True

    def encode(self) -> bytes:
        return bytes([ESC, ord("{"), int(bool(self.on))])


@dataclass(frozen=True, slots=True)
class SetRotation:
    """
    Turn 90 degree clockwise rotation on or off.

    Command: ESC V n
    Hex: 1B 56 n
    """

    mode: RotationMode = RotationMode.CLOCKWISE_90

    def encode(self) -> bytes:
        return bytes([ESC, ord("V"), int(self.mode)])


@dataclass(frozen=True, slots=True)
class SetReverse:
    """
    Turn white/black reverse printing on or off.

    Command: GS B n
    Hex: 1D 42 n
    """

    on: bool = True

    def encode(self) -> bytes:
        return bytes([GS, ord("B"), int(bool(self.on))])


@dataclass(frozen=True, slots=True)
class SetSmoothing:
    """
    Turn smoothing of enlarged characters on or off.

    Command: GS b n
    Hex: 1D 62 n
    """

    on: bool = True

    def encode(self) -> bytes:
        return bytes([GS, ord("b"), int(bool(self.on))])
