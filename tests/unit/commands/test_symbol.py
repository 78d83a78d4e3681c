"""
Tests for posprint/commands/symbol.py

QR Code and PDF417 function sequences, parameter validation and the fluent
with_* builders.
"""

import pytest

from posprint.commands.symbol import (
    QR_MAX_DATA,
    Pdf417Columns,
    Pdf417ErrorCorrection,
    Pdf417Rows,
    PrintPdf417,
    PrintQrCode,
    QrErrorCorrection,
    QrModel,
)
from posprint.errors import OutOfRangeError, Pdf417Error, QrCodeError


class TestQrCode:
    def test_default_sequence(self) -> None:
        data = PrintQrCode(b"ABC").encode()
        expected = (
            b"\x1d(k\x04\x00\x31\x41\x32\x00"  # model 2
            b"\x1d(k\x03\x00\x31\x43\x03"  # module size 3
            b"\x1d(k\x03\x00\x31\x45\x30"  # error correction L
            b"\x1d(k\x06\x00\x31\x50\x30ABC"  # store
            b"\x1d(k\x03\x00\x31\x51\x30"  # print
        )
        assert data == expected

    def test_fluent_settings(self) -> None:
        cmd = (
            PrintQrCode("hi")
            .with_model(QrModel.MODEL1)
            .with_module_size(8)
            .with_error_correction(QrErrorCorrection.H)
        )
        data = cmd.encode()
        assert b"\x31\x41\x31\x00" in data
        assert b"\x31\x43\x08" in data
        assert b"\x31\x45\x33" in data

    def test_fluent_returns_new_value(self) -> None:
        base = PrintQrCode(b"x")
        changed = base.with_module_size(5)
        assert base.module_size == 3
        assert changed.module_size == 5

    def test_store_length_is_little_endian(self) -> None:
        data = PrintQrCode(b"A" * 300).encode()
        # 300 + 3 = 303 = 0x012F
        assert b"\x1d(k\x2f\x01\x31\x50\x30" in data

    def test_empty_data_rejected(self) -> None:
        with pytest.raises(QrCodeError):
            PrintQrCode(b"")

    def test_max_data(self) -> None:
        PrintQrCode(b"1" * QR_MAX_DATA)
        with pytest.raises(QrCodeError):
            PrintQrCode(b"1" * (QR_MAX_DATA + 1))

    @pytest.mark.parametrize("size", [0, 9])
    def test_module_size_range(self, size: int) -> None:
        with pytest.raises(OutOfRangeError):
            PrintQrCode(b"x", module_size=size)


class TestPdf417:
    def test_default_sequence(self) -> None:
        data = PrintPdf417(b"DATA").encode()
        expected = (
            b"\x1d(k\x03\x00\x30\x41\x00"
            b"\x1d(k\x03\x00\x30\x42\x00"
            b"\x1d(k\x03\x00\x30\x43\x03"
            b"\x1d(k\x03\x00\x30\x44\x03"
            b"\x1d(k\x04\x00\x30\x45\x30\x31"
            b"\x1d(k\x07\x00\x30\x50\x30DATA"
            b"\x1d(k\x03\x00\x30\x51\x30"
        )
        assert data == expected

    def test_manual_columns_and_rows(self) -> None:
        cmd = (
            PrintPdf417(b"x")
            .with_columns(Pdf417Columns.manual(5))
            .with_rows(Pdf417Rows.manual(10))
            .with_module_width(2)
            .with_module_height(8)
            .with_error_correction(Pdf417ErrorCorrection.LEVEL8)
        )
        data = cmd.encode()
        assert b"\x30\x41\x05" in data
        assert b"\x30\x42\x0a" in data
        assert b"\x30\x43\x02" in data
        assert b"\x30\x44\x08" in data
        assert b"\x30\x45\x30\x38" in data

    def test_auto(self) -> None:
        assert Pdf417Columns.auto().is_auto
        assert Pdf417Rows.auto().is_auto
        assert not Pdf417Columns.manual(1).is_auto

    @pytest.mark.parametrize("count", [0, 31])
    def test_invalid_columns(self, count: int) -> None:
        with pytest.raises(Pdf417Error):
            Pdf417Columns.manual(count)

    @pytest.mark.parametrize("count", [2, 91])
    def test_invalid_rows(self, count: int) -> None:
        with pytest.raises(Pdf417Error):
            Pdf417Rows.manual(count)

    def test_module_size_range(self) -> None:
        with pytest.raises(OutOfRangeError):
            PrintPdf417(b"x", module_width=1)
