"""
Macro definition and execution.

Everything sent between two ``GS :`` commands is recorded as a macro and
can be replayed with ``GS ^``.
"""

from dataclasses import dataclass
from enum import IntEnum

from posprint.commands.base import GS, u8

__all__ = ["MacroExecutionMode", "ToggleMacroDefinition", "ExecuteMacro"]


class MacroExecutionMode(IntEnum):
    CONTINUOUS = 0
    WAIT_FOR_BUTTON = 1


@dataclass(frozen=True, slots=True)
class ToggleMacroDefinition:
    """
    Start or end macro definition.

    Command: GS :
    Hex: 1D 3A
    """

    def encode(self) -> bytes:
        return bytes([GS, ord(":")])


@dataclass(frozen=True, slots=True)
class ExecuteMacro:
    """
    Execute the defined macro.

    Command: GS ^ r t m
    Hex: 1D 5E r t m
    r = repetitions (at least 1), t = wait between runs in 100 ms units,
    m = 0 continuous, 1 wait for FEED button

    ``times`` below 1 is raised to 1.
    """

    times: int = 1
    wait_100ms: int = 0
    mode: MacroExecutionMode = MacroExecutionMode.CONTINUOUS

    def __post_init__(self) -> None:
        u8("macro times", self.times)
        u8("macro wait", self.wait_100ms)
        object.__setattr__(self, "times", max(1, self.times))

    @classmethod
    def once(cls) -> "ExecuteMacro":
        return cls()

    @classmethod
    def repeat(cls, times: int, wait_100ms: int) -> "ExecuteMacro":
        return cls(times, wait_100ms)

    def with_mode(self, mode: MacroExecutionMode) -> "ExecuteMacro":
        return ExecuteMacro(self.times, self.wait_100ms, mode)

    def encode(self) -> bytes:
        return bytes([GS, ord("^"), self.times, self.wait_100ms, int(self.mode)])
