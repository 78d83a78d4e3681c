"""Tests for posprint/commands/base.py helpers and the command protocols."""

import pytest

from posprint.commands.base import (
    Command,
    QueryCommand,
    check_range,
    encode_all,
    raw_bytes,
    u16_le,
    u8,
)
from posprint.commands.basic import LineFeed
from posprint.commands.character import SetEmphasized
from posprint.commands.status import StatusType, TransmitStatus
from posprint.errors import OutOfRangeError, ValidationError


def test_check_range_returns_value() -> None:
    assert check_range("x", 5, 0, 10) == 5
    assert check_range("x", 0, 0, 10) == 0
    assert check_range("x", 10, 0, 10) == 10


@pytest.mark.parametrize("value", [-1, 11, 1000])
def test_check_range_rejects_out_of_range(value: int) -> None:
    with pytest.raises(OutOfRangeError) as exc_info:
        check_range("width", value, 0, 10)
    err = exc_info.value
    assert err.name == "width"
    assert err.value == value
    assert err.min == 0
    assert err.max == 10
    assert "width" in str(err)


@pytest.mark.parametrize("value", [True, 1.5, "3", None])
def test_check_range_rejects_non_int(value: object) -> None:
    with pytest.raises(OutOfRangeError):
        check_range("n", value, 0, 10)  # type: ignore[arg-type]


def test_out_of_range_is_value_error() -> None:
    with pytest.raises(ValueError):
        u8("n", 256)
    assert issubclass(OutOfRangeError, ValidationError)


def test_u8_bounds() -> None:
    assert u8("n", 0) == 0
    assert u8("n", 255) == 255
    with pytest.raises(OutOfRangeError):
        u8("n", -1)


@pytest.mark.parametrize(
    "value,expected",
    [
        (0, b"\x00\x00"),
        (1, b"\x01\x00"),
        (256, b"\x00\x01"),
        (512, b"\x00\x02"),
        (1662, b"\x7e\x06"),
        (0xFFFF, b"\xff\xff"),
        (-100, b"\x9c\xff"),
    ],
)
def test_u16_le(value: int, expected: bytes) -> None:
    assert u16_le(value) == expected


def test_encode_all_concatenates_in_order() -> None:
    data = encode_all([SetEmphasized(True), LineFeed(), SetEmphasized(False)])
    assert data == b"\x1bE\x01\n\x1bE\x00"


def test_encode_all_empty() -> None:
    assert encode_all([]) == b""


def test_commands_satisfy_protocol() -> None:
    assert isinstance(LineFeed(), Command)
    assert isinstance(TransmitStatus(StatusType.PRINTER), QueryCommand)
    assert not isinstance(LineFeed(), QueryCommand)


def test_equal_fields_encode_identically() -> None:
    assert SetEmphasized(True) == SetEmphasized(True)
    assert SetEmphasized(True).encode() == SetEmphasized(True).encode()


@pytest.mark.parametrize("data", [b"\x00\x01", bytearray(b"\x00\x01"), memoryview(b"\x00\x01")])
def test_raw_bytes_copies_bytes_like(data: object) -> None:
    result = raw_bytes(data)  # type: ignore[arg-type]
    assert result == b"\x00\x01"
    assert type(result) is bytes


@pytest.mark.parametrize("data", [3, "abc", [0, 1], None])
def test_raw_bytes_rejects_other_types(data: object) -> None:
    with pytest.raises(TypeError):
        raw_bytes(data)  # type: ignore[arg-type]
