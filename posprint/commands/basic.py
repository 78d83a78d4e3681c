"""
Basic print and feed commands.

Line feed, form feed, tabs and paper feeding. These are single control
bytes or short ESC sequences that print the buffer and advance paper.

Reference: Bixolon SRP-350plus Command Manual, "Print Commands"
"""

from dataclasses import dataclass

from posprint.commands.base import CR, ESC, FF, HT, LF, u8

__all__ = [
    "LineFeed",
    "FormFeed",
    "CarriageReturn",
    "HorizontalTab",
    "PrintAndFeed",
    "FeedLines",
    "PrintText",
]


@dataclass(frozen=True, slots=True)
class LineFeed:
    """
    Print the line buffer and feed one line.

    Command: LF
    Hex: 0A
    """

    def encode(self) -> bytes:
        return bytes([LF])


@dataclass(frozen=True, slots=True)
class FormFeed:
    """
    Print the page buffer (page mode) and return to standard mode start.

    Command: FF
    Hex: 0C
    Note: In page mode FF prints the buffered page; it is the page end marker.
    """

    def encode(self) -> bytes:
        return bytes([FF])


@dataclass(frozen=True, slots=True)
class CarriageReturn:
    """
    Print and carriage return.

    Command: CR
    Hex: 0D
    Note: Ignored by most thermal models when auto line feed is disabled.
    """

    def encode(self) -> bytes:
        return bytes([CR])


@dataclass(frozen=True, slots=True)
class HorizontalTab:
    """
    Move the print position to the next tab stop.

    Command: HT
    Hex: 09
    """

    def encode(self) -> bytes:
        return bytes([HT])


@dataclass(frozen=True, slots=True)
class PrintAndFeed:
    """
    Print the buffer and feed paper by ``units`` vertical motion units.

    Command: ESC J n
    Hex: 1B 4A n
    Range: 0-255
    """

    units: int

    def __post_init__(self) -> None:
        u8("feed units", self.units)

    def encode(self) -> bytes:
        return bytes([ESC, ord("J"), self.units])


@dataclass(frozen=True, slots=True)
class FeedLines:
    """
    Print the buffer and feed ``lines`` lines.

    Command: ESC d n
    Hex: 1B 64 n
    Range: 0-255
    """

    lines: int

    def __post_init__(self) -> None:
        u8("feed lines", self.lines)

    def encode(self) -> bytes:
        return bytes([ESC, ord("d"), self.lines])


@dataclass(frozen=True, slots=True)
class PrintText:
    """
    Already-encoded text bytes sent verbatim.

    Use ``StyledNode`` to print unicode text; this command carries bytes that
    were encoded for the active code page by the caller.
    """

    data: bytes

    def encode(self) -> bytes:
        return bytes(self.data)
