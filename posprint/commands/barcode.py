"""
One-dimensional barcode commands.

Barcode height, module width, HRI (human readable interpretation) settings
and the ``GS k`` print command. Payloads are validated against the chosen
symbology when ``PrintBarcode`` is constructed.

Reference: Bixolon SRP-350plus Command Manual, "Bar Code Commands"
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, Final, Union

from posprint.commands.base import GS, u8
from posprint.errors import (
    InvalidBarcodeCharacterError,
    InvalidBarcodeLengthError,
    ItfOddLengthError,
)

__all__ = [
    "DEFAULT_BARCODE_HEIGHT",
    "BarcodeWidth",
    "HriPosition",
    "HriFont",
    "BarcodeSystem",
    "SetBarcodeHeight",
    "SetBarcodeWidth",
    "SetHriPosition",
    "SetHriFont",
    "PrintBarcode",
]

DEFAULT_BARCODE_HEIGHT: Final[int] = 162

# =============================================================================
# PARAMETER TYPES
# =============================================================================


class BarcodeWidth(IntEnum):
    """Module width ``n`` of ``GS w``."""

    THIN = 2
    NORMAL = 3
    MEDIUM = 4
    WIDE = 5
    EXTRA_WIDE = 6


class HriPosition(IntEnum):
    """Where the HRI text is printed (``GS H n``)."""

    NONE = 0
    ABOVE = 1
    BELOW = 2
    BOTH = 3


class HriFont(IntEnum):
    """HRI font (``GS f n``)."""

    A = 0
    B = 1


class BarcodeSystem(IntEnum):
    """
    Barcode symbology ``m`` of ``GS k m n d1...dn``.

    The printer computes check digits for UPC/JAN when they are omitted.
    """

    UPC_A = 65
    UPC_E = 66
    JAN13 = 67  # EAN-13
    JAN8 = 68  # EAN-8
    CODE39 = 69
    ITF = 70  # Interleaved 2 of 5
    CODABAR = 71
    CODE93 = 72
    CODE128 = 73

    @property
    def label(self) -> str:
        return _RULES[self][2]


# =============================================================================
# VALIDATION TABLES
# =============================================================================

_DIGITS: Final[frozenset[int]] = frozenset(b"0123456789")
_CODE39_CHARS: Final[frozenset[int]] = _DIGITS | frozenset(
    b"ABCDEFGHIJKLMNOPQRSTUVWXYZ $%*+-./"
)
_CODABAR_CHARS: Final[frozenset[int]] = _DIGITS | frozenset(b"ABCD$+-./:")


def _is_digit(byte: int) -> bool:
    return byte in _DIGITS


def _is_code39(byte: int) -> bool:
    return byte in _CODE39_CHARS


def _is_codabar(byte: int) -> bool:
    return byte in _CODABAR_CHARS


def _is_ascii(byte: int) -> bool:
    return byte <= 127


# system -> (min length, max length, display name, character predicate)
_RULES: Final[dict[BarcodeSystem, tuple[int, int, str, Callable[[int], bool]]]] = {
    BarcodeSystem.UPC_A: (11, 12, "UPC-A", _is_digit),
    BarcodeSystem.UPC_E: (11, 12, "UPC-E", _is_digit),
    BarcodeSystem.JAN13: (12, 13, "JAN-13", _is_digit),
    BarcodeSystem.JAN8: (7, 8, "JAN-8", _is_digit),
    BarcodeSystem.CODE39: (1, 255, "CODE39", _is_code39),
    BarcodeSystem.ITF: (2, 255, "ITF", _is_digit),
    BarcodeSystem.CODABAR: (1, 255, "CODABAR", _is_codabar),
    BarcodeSystem.CODE93: (1, 255, "CODE93", _is_ascii),
    BarcodeSystem.CODE128: (2, 255, "CODE128", _is_ascii),
}


# =============================================================================
# COMMANDS
# =============================================================================


@dataclass(frozen=True, slots=True)
class SetBarcodeHeight:
    """
    Set barcode height in dots.

    Command: GS h n
    Hex: 1D 68 n
    Default: 162 dots. Heights below 1 are raised to 1.
    """

    dots: int = DEFAULT_BARCODE_HEIGHT

    def __post_init__(self) -> None:
        u8("barcode height", self.dots)
        object.__setattr__(self, "dots", max(1, self.dots))

    def encode(self) -> bytes:
        return bytes([GS, ord("h"), self.dots])


@dataclass(frozen=True, slots=True)
class SetBarcodeWidth:
    """
    Set barcode module width.

    Command: GS w n
    Hex: 1D 77 n (n = 2-6)
    """

    width: BarcodeWidth = BarcodeWidth.NORMAL

    def encode(self) -> bytes:
        return bytes([GS, ord("w"), int(self.width)])


@dataclass(frozen=True, slots=True)
class SetHriPosition:
    """
    Select HRI character print position.

    Command: GS H n
    Hex: 1D 48 n
    """

    position: HriPosition = HriPosition.NONE

    def encode(self) -> bytes:
        return bytes([GS, ord("H"), int(self.position)])


@dataclass(frozen=True, slots=True)
class SetHriFont:
    """
    Select HRI character font.

    Command: GS f n
    Hex: 1D 66 n
    """

    font: HriFont = HriFont.A

    def encode(self) -> bytes:
        return bytes([GS, ord("f"), int(self.font)])


@dataclass(frozen=True, slots=True)
class PrintBarcode:
    """
    Print a barcode.

    Command: GS k m n d1...dn
    Hex: 1D 6B m n d1...dn

    Validation on construction:
        - data length within the symbology's range
        - ITF requires an even number of digits
        - every byte allowed by the symbology

    Raises:
        InvalidBarcodeLengthError: Data too short or too long.
        ItfOddLengthError: ITF data with odd length.
        InvalidBarcodeCharacterError: Disallowed byte; carries its position.

    Example:
        >>> PrintBarcode(BarcodeSystem.CODE39, b"ABC").encode()
        b'\\x1dkE\\x03ABC'
    """

    system: BarcodeSystem
    data: Union[bytes, str]

    def __post_init__(self) -> None:
        data = self.data.encode("utf-8") if isinstance(self.data, str) else bytes(self.data)
        min_len, max_len, name, allowed = _RULES[self.system]

        if not (min_len <= len(data) <= max_len):
            raise InvalidBarcodeLengthError(name, len(data), min_len, max_len)

        if self.system is BarcodeSystem.ITF and len(data) % 2 != 0:
            raise ItfOddLengthError(len(data))

        for position, byte in enumerate(data):
            if not allowed(byte):
                raise InvalidBarcodeCharacterError(name, data, position)

        object.__setattr__(self, "data", data)

    def encode(self) -> bytes:
        return bytes([GS, ord("k"), int(self.system), len(self.data)]) + self.data
