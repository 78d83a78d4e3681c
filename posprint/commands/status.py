"""
Real-time status requests and automatic status back (ASB).

``TransmitStatus`` is a query command: the printer answers with a single
status byte whose meaning depends on the requested status type.

Reference: Bixolon SRP-350plus Command Manual, "DLE EOT", "GS a"
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, IntFlag
from typing import Union

from posprint.commands.base import DLE, EOT, GS
from posprint.errors import StatusParseError

__all__ = [
    "StatusType",
    "PrinterStatus",
    "OfflineStatus",
    "ErrorStatus",
    "PaperRollStatus",
    "StatusResponse",
    "TransmitStatus",
    "AsbFlags",
    "EnableAsb",
]


class StatusType(IntEnum):
    """Status block ``n`` of ``DLE EOT n``."""

    PRINTER = 1
    OFFLINE = 2
    ERROR = 3
    PAPER_ROLL = 4


# =============================================================================
# RESPONSES
# =============================================================================


@dataclass(frozen=True, slots=True)
class PrinterStatus:
    drawer_open: bool
    online: bool
    feed_button_pressed: bool
    paper_present: bool

    @classmethod
    def from_byte(cls, byte: int) -> PrinterStatus:
        return cls(
            drawer_open=bool(byte & 0x04),
            online=not byte & 0x08,
            feed_button_pressed=bool(byte & 0x20),
            paper_present=(byte & 0x60) != 0x60,
        )


@dataclass(frozen=True, slots=True)
class OfflineStatus:
    cover_open: bool
    paper_feeding: bool
    recoverable_error: bool
    cutter_error: bool

    @classmethod
    def from_byte(cls, byte: int) -> OfflineStatus:
        return cls(
            cover_open=bool(byte & 0x04),
            paper_feeding=bool(byte & 0x08),
            recoverable_error=bool(byte & 0x20),
            cutter_error=bool(byte & 0x40),
        )


@dataclass(frozen=True, slots=True)
class ErrorStatus:
    recoverable_error: bool
    cutter_error: bool
    unrecoverable_error: bool

    @classmethod
    def from_byte(cls, byte: int) -> ErrorStatus:
        return cls(
            recoverable_error=bool(byte & 0x04),
            cutter_error=bool(byte & 0x08),
            unrecoverable_error=bool(byte & 0x20),
        )


@dataclass(frozen=True, slots=True)
class PaperRollStatus:
    paper_near_end: bool
    paper_end: bool

    @classmethod
    def from_byte(cls, byte: int) -> PaperRollStatus:
        return cls(
            paper_near_end=bool(byte & 0x0C),
            paper_end=bool(byte & 0x60),
        )


StatusResponse = Union[PrinterStatus, OfflineStatus, ErrorStatus, PaperRollStatus]

_PARSERS = {
    StatusType.PRINTER: PrinterStatus.from_byte,
    StatusType.OFFLINE: OfflineStatus.from_byte,
    StatusType.ERROR: ErrorStatus.from_byte,
    StatusType.PAPER_ROLL: PaperRollStatus.from_byte,
}


# =============================================================================
# COMMANDS
# =============================================================================


@dataclass(frozen=True, slots=True)
class TransmitStatus:
    """
    Transmit real-time status.

    Command: DLE EOT n
    Hex: 10 04 n (n = 1-4)

    Example:
        >>> TransmitStatus(StatusType.PRINTER).parse_response(b"\\x16")
        PrinterStatus(drawer_open=True, online=True, feed_button_pressed=False, paper_present=True)
    """

    status_type: StatusType = StatusType.PRINTER

    def encode(self) -> bytes:
        return bytes([DLE, EOT, int(self.status_type)])

    def parse_response(self, data: bytes) -> StatusResponse:
        """
        Decode the first status byte; extra bytes are ignored.

        Raises:
            StatusParseError: If ``data`` is empty.
        """
        if not data:
            raise StatusParseError(f"empty response to {self.status_type.name} status request")
        return _PARSERS[self.status_type](data[0])


class AsbFlags(IntFlag):
    """Status categories reported automatically when they change."""

    NONE = 0
    DRAWER = 0x01
    ONLINE_OFFLINE = 0x02
    ERROR = 0x04
    PAPER_ROLL = 0x08
    ALL = DRAWER | ONLINE_OFFLINE | ERROR | PAPER_ROLL


@dataclass(frozen=True, slots=True)
class EnableAsb:
    """
    Enable or disable automatic status back.

    Command: GS a n
    Hex: 1D 61 n
    """

    flags: AsbFlags = AsbFlags.NONE

    def encode(self) -> bytes:
        return bytes([GS, ord("a"), int(self.flags)])
