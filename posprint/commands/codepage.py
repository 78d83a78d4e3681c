"""
Character table (code page) and international character set commands.

The code page decides how bytes 128-255 are drawn; the international set
swaps a handful of ASCII positions (35, 36, 64, 91-96, 123-126) for
localized glyphs. Text must be encoded for the same code page that was
selected on the printer.

Reference: Bixolon SRP-350plus Command Manual, "ESC t", "ESC R"
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

from posprint.commands.base import ESC

__all__ = [
    "CodePage",
    "InternationalCharacterSet",
    "SelectCodePage",
    "SelectCharacterSet",
]

# =============================================================================
# CODE PAGES
# =============================================================================


class CodePage(IntEnum):
    """
    Character code tables selectable with ``ESC t n``.

    The member value is the ``n`` byte sent to the printer.
    """

    CP437 = 0  # USA, Standard Europe (default)
    KATAKANA = 1
    CP850 = 2  # Multilingual
    CP860 = 3  # Portuguese
    CP863 = 4  # Canadian-French
    CP865 = 5  # Nordic
    WIN1252 = 16  # Latin I
    CP866 = 17  # Cyrillic #2
    CP852 = 18  # Latin 2
    CP858 = 19  # Euro
    CP862 = 21  # Hebrew DOS
    CP864 = 22  # Arabic
    THAI42 = 23
    WIN1253 = 24  # Greek
    WIN1254 = 25  # Turkish
    WIN1257 = 26  # Baltic
    FARSI = 27
    WIN1251 = 28  # Cyrillic
    CP737 = 29  # Greek
    CP775 = 30  # Baltic
    THAI14 = 31
    HEBREW_OLD = 32
    WIN1255 = 33  # Hebrew New
    THAI11 = 34
    THAI18 = 35
    CP855 = 36  # Cyrillic
    CP857 = 37  # Turkish
    CP928 = 38  # Greek
    THAI16 = 39
    WIN1256 = 40  # Arabic

    @property
    def codec(self) -> Optional[str]:
        """
        Python codec name for this table, or None if Python has none.

        Tables without a codec can only carry ASCII text.
        """
        return _CODECS.get(self)


_CODECS: dict[CodePage, str] = {
    CodePage.CP437: "cp437",
    CodePage.CP850: "cp850",
    CodePage.CP860: "cp860",
    CodePage.CP863: "cp863",
    CodePage.CP865: "cp865",
    CodePage.WIN1252: "cp1252",
    CodePage.CP866: "cp866",
    CodePage.CP852: "cp852",
    CodePage.CP858: "cp858",
    CodePage.CP862: "cp862",
    CodePage.CP864: "cp864",
    CodePage.WIN1253: "cp1253",
    CodePage.WIN1254: "cp1254",
    CodePage.WIN1257: "cp1257",
    CodePage.WIN1251: "cp1251",
    CodePage.CP737: "cp737",
    CodePage.CP775: "cp775",
    CodePage.WIN1255: "cp1255",
    CodePage.CP855: "cp855",
    CodePage.CP857: "cp857",
    CodePage.WIN1256: "cp1256",
}


class InternationalCharacterSet(IntEnum):
    """International character sets selectable with ``ESC R n``."""

    USA = 0
    FRANCE = 1
    GERMANY = 2
    UK = 3
    DENMARK_I = 4
    SWEDEN = 5
    ITALY = 6
    SPAIN_I = 7
    JAPAN = 8
    NORWAY = 9
    DENMARK_II = 10
    SPAIN_II = 11
    LATIN_AMERICA = 12
    KOREA = 13


# =============================================================================
# COMMANDS
# =============================================================================


@dataclass(frozen=True, slots=True)
class SelectCodePage:
    """
    Select character code table.

    Command: ESC t n
    Hex: 1B 74 n
    """

    code_page: CodePage = CodePage.CP437

    def encode(self) -> bytes:
        return bytes([ESC, ord("t"), int(self.code_page)])


@dataclass(frozen=True, slots=True)
class SelectCharacterSet:
    """
    Select international character set.

    Command: ESC R n
    Hex: 1B 52 n
    """

    charset: InternationalCharacterSet = InternationalCharacterSet.USA

    def encode(self) -> bytes:
        return bytes([ESC, ord("R"), int(self.charset)])
