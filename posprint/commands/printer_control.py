"""
Printer control commands: initialization, drawer pulses, buffer cancel.

Pulse durations have a hard ceiling in the protocol. Instead of rejecting
out-of-range durations, these commands clamp them into the accepted range
at construction time.

Reference: Bixolon SRP-350plus Command Manual, "Miscellaneous Commands"
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Final

from posprint.commands.base import CAN, DC4, DLE, ESC

__all__ = [
    "DrawerPin",
    "Initialize",
    "GeneratePulse",
    "GenerateRealtimePulse",
    "CancelPrintData",
    "SetPanelButtons",
    "REALTIME_PULSE_MAX",
]

REALTIME_PULSE_MIN: Final[int] = 1
REALTIME_PULSE_MAX: Final[int] = 8
"""Real-time pulse time ceiling, in 100 ms units."""


class DrawerPin(IntEnum):
    """Cash drawer kick-out connector pin."""

    PIN2 = 0
    PIN5 = 1


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


@dataclass(frozen=True, slots=True)
class Initialize:
    """
    Clear the print buffer and reset all modes to power-on defaults.

    Command: ESC @
    Hex: 1B 40
    """

    def encode(self) -> bytes:
        return bytes([ESC, ord("@")])


@dataclass(frozen=True, slots=True)
class GeneratePulse:
    """
    Output a pulse on the drawer kick-out connector.

    Command: ESC p m t1 t2
    Hex: 1B 70 m t1 t2
    Timing: ON time = t1 x 2 ms, OFF time = t2 x 2 ms
    Rule: t2 must not be shorter than t1; OFF time is raised to ON time.

    Both times are clamped to 0-255.
    """

    pin: DrawerPin = DrawerPin.PIN2
    on_time: int = 50
    off_time: int = 250

    def __post_init__(self) -> None:
        on_time = _clamp(int(self.on_time), 0, 0xFF)
        off_time = max(on_time, _clamp(int(self.off_time), 0, 0xFF))
        object.__setattr__(self, "on_time", on_time)
        object.__setattr__(self, "off_time", off_time)

    def encode(self) -> bytes:
        return bytes([ESC, ord("p"), int(self.pin), self.on_time, self.off_time])


@dataclass(frozen=True, slots=True)
class GenerateRealtimePulse:
    """
    Output a pulse in real time, bypassing the receive buffer.

    Command: DLE DC4 1 m t
    Hex: 10 14 01 m t
    Timing: pulse ON = t x 100 ms, OFF = t x 100 ms, t in 1-8

    ``pulse_time`` is clamped to 1-8.
    """

    pin: DrawerPin = DrawerPin.PIN2
    pulse_time: int = 1

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "pulse_time",
            _clamp(int(self.pulse_time), REALTIME_PULSE_MIN, REALTIME_PULSE_MAX),
        )

    def encode(self) -> bytes:
        return bytes([DLE, DC4, 0x01, int(self.pin), self.pulse_time])


@dataclass(frozen=True, slots=True)
class CancelPrintData:
    """
    Delete all print data in the current print area (page mode).

    Command: CAN
    Hex: 18
    """

    def encode(self) -> bytes:
        return bytes([CAN])


@dataclass(frozen=True, slots=True)
class SetPanelButtons:
    """
    Enable or disable the panel (FEED) button.

    Command: ESC c 5 n
    Hex: 1B 63 35 n
    """

    enabled: bool = True

    def encode(self) -> bytes:
        # n = 1 disables the button
        return bytes([ESC, ord("c"), ord("5"), 0 if self.enabled else 1])
