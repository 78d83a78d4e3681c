"""Tests for posprint/commands/spacing.py: line spacing, tabs, margins and positioning."""

import pytest

from posprint.commands.spacing import (
    MAX_TAB_STOPS,
    SetAbsolutePosition,
    SetDefaultLineSpacing,
    SetHorizontalTabs,
    SetLeftMargin,
    SetLineSpacing,
    SetPrintingWidth,
    SetRelativePosition,
    SetRightSpacing,
)
from posprint.errors import OutOfRangeError, ValidationError


def test_line_spacing() -> None:
    assert SetDefaultLineSpacing().encode() == b"\x1b2"
    assert SetLineSpacing(60).encode() == b"\x1b3\x3c"
    assert SetRightSpacing(5).encode() == b"\x1b \x05"


def test_line_spacing_range() -> None:
    with pytest.raises(OutOfRangeError):
        SetLineSpacing(256)


class TestHorizontalTabs:
    def test_encode(self) -> None:
        assert SetHorizontalTabs((8, 16, 24)).encode() == b"\x1bD\x08\x10\x18\x00"

    def test_clear(self) -> None:
        assert SetHorizontalTabs.clear().encode() == b"\x1bD\x00"

    def test_list_is_accepted(self) -> None:
        cmd = SetHorizontalTabs([4, 8])  # type: ignore[arg-type]
        assert cmd.positions == (4, 8)

    def test_must_ascend(self) -> None:
        with pytest.raises(ValidationError):
            SetHorizontalTabs((8, 8))
        with pytest.raises(ValidationError):
            SetHorizontalTabs((16, 8))

    def test_position_range(self) -> None:
        with pytest.raises(OutOfRangeError):
            SetHorizontalTabs((0, 8))
        with pytest.raises(OutOfRangeError):
            SetHorizontalTabs((8, 256))

    def test_max_stops(self) -> None:
        SetHorizontalTabs(tuple(range(1, MAX_TAB_STOPS + 1)))
        with pytest.raises(ValidationError):
            SetHorizontalTabs(tuple(range(1, MAX_TAB_STOPS + 2)))


@pytest.mark.parametrize(
    "command,expected",
    [
        (SetAbsolutePosition(256), b"\x1b$\x00\x01"),
        (SetRelativePosition(100), b"\x1b\\\x64\x00"),
        (SetRelativePosition(-100), b"\x1b\\\x9c\xff"),
        (SetLeftMargin(50), b"\x1dL\x32\x00"),
        (SetPrintingWidth(512), b"\x1dW\x00\x02"),
    ],
)
def test_position_commands(command: object, expected: bytes) -> None:
    assert command.encode() == expected  # type: ignore[attr-defined]


def test_relative_position_range() -> None:
    SetRelativePosition(-32768)
    SetRelativePosition(32767)
    with pytest.raises(OutOfRangeError):
        SetRelativePosition(32768)
    with pytest.raises(OutOfRangeError):
        SetAbsolutePosition(-1)
