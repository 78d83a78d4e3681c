"""
Paper cutting commands.

Reference: Bixolon SRP-350plus Command Manual, "GS V"
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

from posprint.commands.base import GS, u8
from posprint.errors import ValidationError

__all__ = ["CutMode", "CutPaper"]


class CutMode(IntEnum):
    """Cut function selector ``m`` of ``GS V``."""

    FULL = 0
    PARTIAL = 1
    FEED_AND_FULL = 65
    FEED_AND_PARTIAL = 66


@dataclass(frozen=True, slots=True)
class CutPaper:
    """
    Cut the paper, optionally after feeding.

    Command: GS V m        (m = 0, 1)
             GS V m n      (m = 65, 66; feed n units then cut)
    Hex: 1D 56 m [n]

    Example:
        >>> CutPaper.feed_and_partial(3).encode()
        b'\\x1dVB\\x03'
    """

    mode: CutMode = CutMode.PARTIAL
    feed: Optional[int] = None

    def __post_init__(self) -> None:
        if self.mode in (CutMode.FEED_AND_FULL, CutMode.FEED_AND_PARTIAL):
            if self.feed is None:
                object.__setattr__(self, "feed", 0)
            u8("cut feed", self.feed)  # type: ignore[arg-type]
        elif self.feed is not None:
            raise ValidationError(
                f"cut mode {self.mode.name} does not take a feed amount",
                name="cut feed",
                value=self.feed,
            )

    @classmethod
    def full(cls) -> "CutPaper":
        return cls(CutMode.FULL)

    @classmethod
    def partial(cls) -> "CutPaper":
        return cls(CutMode.PARTIAL)

    @classmethod
    def feed_and_full(cls, feed: int) -> "CutPaper":
        return cls(CutMode.FEED_AND_FULL, feed)

    @classmethod
    def feed_and_partial(cls, feed: int) -> "CutPaper":
        return cls(CutMode.FEED_AND_PARTIAL, feed)

    def encode(self) -> bytes:
        out = bytes([GS, ord("V"), int(self.mode)])
        if self.feed is not None:
            out += bytes([self.feed])
        return out
