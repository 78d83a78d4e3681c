"""
Command contract and shared byte-encoding helpers.

Every ESC/POS instruction in this package is a frozen dataclass exposing a
single ``encode()`` method. Parameters are validated when the command is
constructed; ``encode()`` only lays out bytes and cannot fail.

Reference: Bixolon SRP-350plus Command Manual, Chapter 2
"""

from __future__ import annotations

from typing import Final, Iterable, Protocol, TypeVar, runtime_checkable

from posprint.errors import OutOfRangeError

__all__ = [
    "ESC",
    "GS",
    "FS",
    "DLE",
    "EOT",
    "DC4",
    "LF",
    "FF",
    "CR",
    "HT",
    "CAN",
    "Command",
    "QueryCommand",
    "check_range",
    "u8",
    "u16_le",
    "encode_all",
    "raw_bytes",
]

# =============================================================================
# CONTROL BYTES
# =============================================================================

ESC: Final[int] = 0x1B
"""Escape - starts most ESC/POS commands."""

GS: Final[int] = 0x1D
"""Group Separator - starts GS commands."""

FS: Final[int] = 0x1C
"""File Separator - starts FS commands."""

DLE: Final[int] = 0x10
"""Data Link Escape - starts real-time commands."""

EOT: Final[int] = 0x04
"""End of Transmission - used by real-time status requests."""

DC4: Final[int] = 0x14
"""Device Control 4 - used by real-time requests."""

LF: Final[int] = 0x0A
FF: Final[int] = 0x0C
CR: Final[int] = 0x0D
HT: Final[int] = 0x09
CAN: Final[int] = 0x18

R_co = TypeVar("R_co", covariant=True)


# =============================================================================
# CONTRACT
# =============================================================================


@runtime_checkable
class Command(Protocol):
    """A printer instruction that serializes to ESC/POS bytes."""

    def encode(self) -> bytes:
        """Return the literal protocol bytes for this instruction."""
        ...


@runtime_checkable
class QueryCommand(Command, Protocol[R_co]):
    """A command the printer answers with a status response."""

    def parse_response(self, data: bytes) -> R_co:
        """
        Decode the printer's response.

        Raises:
            StatusParseError: If the response is empty or malformed.
        """
        ...


# =============================================================================
# HELPERS
# =============================================================================


def check_range(name: str, value: int, min_value: int, max_value: int) -> int:
    """
    Validate that ``value`` lies in ``[min_value, max_value]``.

    Returns:
        The value, unchanged.

    Raises:
        OutOfRangeError: If the value is outside the range or not an int.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise OutOfRangeError(name, value, min_value, max_value)
    if not (min_value <= value <= max_value):
        raise OutOfRangeError(name, value, min_value, max_value)
    return value


def u8(name: str, value: int) -> int:
    """Validate a single-byte parameter (0-255)."""
    return check_range(name, value, 0, 0xFF)


def u16_le(value: int) -> bytes:
    """
    Split a 16-bit value into little-endian ``nL nH`` bytes.

    Negative values are laid out as two's complement.

    Example:
        >>> u16_le(512)
        b'\\x00\\x02'
    """
    value &= 0xFFFF
    return bytes([value & 0xFF, (value >> 8) & 0xFF])


def encode_all(commands: Iterable[Command]) -> bytes:
    """Concatenate the encodings of several commands in order."""
    return b"".join(cmd.encode() for cmd in commands)


def raw_bytes(data: bytes) -> bytes:
    """
    Copy a bytes-like payload.

    Raises:
        TypeError: If ``data`` is not bytes, bytearray or memoryview. An int
            would otherwise become that many NUL bytes.
    """
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError(f"expected a bytes-like object, got {type(data).__name__}")
    return bytes(data)
