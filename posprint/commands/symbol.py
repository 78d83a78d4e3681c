"""
Two-dimensional symbol commands: QR Code and PDF417.

Both symbols use the ``GS ( k`` function family. A print is a fixed
sequence of set-up functions, then "store data", then "print stored
symbol". Each command in this module emits the whole sequence.

Reference: Bixolon SRP-350plus Command Manual, "GS ( k"
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import IntEnum
from typing import Final, Union

from posprint.commands.base import GS, check_range, u16_le
from posprint.errors import Pdf417Error, QrCodeError

__all__ = [
    "QR_MAX_DATA",
    "QrModel",
    "QrErrorCorrection",
    "PrintQrCode",
    "Pdf417Columns",
    "Pdf417Rows",
    "Pdf417ErrorCorrection",
    "PrintPdf417",
]

QR_MAX_DATA: Final[int] = 7089
"""Largest QR payload (numeric mode, version 40, level L)."""

# store payload length field includes 3 header bytes
_PDF417_MAX_DATA: Final[int] = 0xFFFF - 3

_QR_FN: Final[int] = 49  # cn for QR Code
_PDF417_FN: Final[int] = 48  # cn for PDF417


def _gs_k(cn: int, fn: int, *params: int) -> bytes:
    """One ``GS ( k pL pH cn fn params`` function with a fixed-size body."""
    return bytes([GS, ord("("), ord("k")]) + u16_le(len(params) + 2) + bytes([cn, fn, *params])


def _store(cn: int, data: bytes) -> bytes:
    """``GS ( k`` store-data function: length covers cn, fn, m and data."""
    return bytes([GS, ord("("), ord("k")]) + u16_le(len(data) + 3) + bytes([cn, 80, 48]) + data


def _as_bytes(data: Union[bytes, str]) -> bytes:
    return data.encode("utf-8") if isinstance(data, str) else bytes(data)


# =============================================================================
# QR CODE
# =============================================================================


class QrModel(IntEnum):
    MODEL1 = 49
    MODEL2 = 50


class QrErrorCorrection(IntEnum):
    """Error correction level: L 7%, M 15%, Q 25%, H 30%."""

    L = 48
    M = 49
    Q = 50
    H = 51


@dataclass(frozen=True, slots=True)
class PrintQrCode:
    """
    Store and print a QR Code symbol.

    Sequence:
        GS ( k 4 0 49 65 model 0        select model
        GS ( k 3 0 49 67 size           module size (1-8 dots)
        GS ( k 3 0 49 69 level          error correction
        GS ( k pL pH 49 80 48 data      store data
        GS ( k 3 0 49 81 48             print

    Raises:
        QrCodeError: Empty data or more than 7089 bytes.
        OutOfRangeError: Module size outside 1-8.
    """

    data: Union[bytes, str]
    model: QrModel = QrModel.MODEL2
    module_size: int = 3
    error_correction: QrErrorCorrection = QrErrorCorrection.L

    def __post_init__(self) -> None:
        data = _as_bytes(self.data)
        if not data:
            raise QrCodeError("QR code data cannot be empty", name="qr data", value=0)
        if len(data) > QR_MAX_DATA:
            raise QrCodeError(
                f"QR code data too long: {len(data)} bytes (max {QR_MAX_DATA})",
                name="qr data",
                value=len(data),
            )
        check_range("qr module size", self.module_size, 1, 8)
        object.__setattr__(self, "data", data)

    def with_model(self, model: QrModel) -> PrintQrCode:
        return replace(self, model=model)

    def with_module_size(self, size: int) -> PrintQrCode:
        return replace(self, module_size=size)

    def with_error_correction(self, level: QrErrorCorrection) -> PrintQrCode:
        return replace(self, error_correction=level)

    def encode(self) -> bytes:
        return b"".join(
            [
                _gs_k(_QR_FN, 65, int(self.model), 0),
                _gs_k(_QR_FN, 67, self.module_size),
                _gs_k(_QR_FN, 69, int(self.error_correction)),
                _store(_QR_FN, self.data),  # type: ignore[arg-type]
                _gs_k(_QR_FN, 81, 48),
            ]
        )


# =============================================================================
# PDF417
# =============================================================================


@dataclass(frozen=True, slots=True)
class Pdf417Columns:
    """Data column count; 0 lets the printer choose."""

    count: int = 0

    @classmethod
    def auto(cls) -> Pdf417Columns:
        return cls(0)

    @classmethod
    def manual(cls, count: int) -> Pdf417Columns:
        """
        Raises:
            Pdf417Error: If ``count`` is outside 1-30.
        """
        if isinstance(count, bool) or not isinstance(count, int) or not 1 <= count <= 30:
            raise Pdf417Error(
                f"invalid PDF417 column count {count} (must be 1-30)",
                name="pdf417 columns",
                value=count,
            )
        return cls(count)

    @property
    def is_auto(self) -> bool:
        return self.count == 0


@dataclass(frozen=True, slots=True)
class Pdf417Rows:
    """Row count; 0 lets the printer choose."""

    count: int = 0

    @classmethod
    def auto(cls) -> Pdf417Rows:
        return cls(0)

    @classmethod
    def manual(cls, count: int) -> Pdf417Rows:
        """
        Raises:
            Pdf417Error: If ``count`` is outside 3-90.
        """
        if isinstance(count, bool) or not isinstance(count, int) or not 3 <= count <= 90:
            raise Pdf417Error(
                f"invalid PDF417 row count {count} (must be 3-90)",
                name="pdf417 rows",
                value=count,
            )
        return cls(count)

    @property
    def is_auto(self) -> bool:
        return self.count == 0


class Pdf417ErrorCorrection(IntEnum):
    LEVEL0 = 48
    LEVEL1 = 49
    LEVEL2 = 50
    LEVEL3 = 51
    LEVEL4 = 52
    LEVEL5 = 53
    LEVEL6 = 54
    LEVEL7 = 55
    LEVEL8 = 56


@dataclass(frozen=True, slots=True)
class PrintPdf417:
    """
    Store and print a PDF417 symbol.

    Sequence:
        GS ( k 3 0 48 65 cols           columns (0 = auto)
        GS ( k 3 0 48 66 rows           rows (0 = auto)
        GS ( k 3 0 48 67 w              module width (2-8)
        GS ( k 3 0 48 68 h              module height (2-8)
        GS ( k 4 0 48 69 48 level       error correction by level
        GS ( k pL pH 48 80 48 data      store data
        GS ( k 3 0 48 81 48             print
    """

    data: Union[bytes, str]
    columns: Pdf417Columns = Pdf417Columns()
    rows: Pdf417Rows = Pdf417Rows()
    module_width: int = 3
    module_height: int = 3
    error_correction: Pdf417ErrorCorrection = Pdf417ErrorCorrection.LEVEL1

    def __post_init__(self) -> None:
        data = _as_bytes(self.data)
        if len(data) > _PDF417_MAX_DATA:
            raise Pdf417Error(
                f"PDF417 data too long: {len(data)} bytes (max {_PDF417_MAX_DATA})",
                name="pdf417 data",
                value=len(data),
            )
        check_range("pdf417 module width", self.module_width, 2, 8)
        check_range("pdf417 module height", self.module_height, 2, 8)
        object.__setattr__(self, "data", data)

    def with_columns(self, columns: Pdf417Columns) -> PrintPdf417:
        return replace(self, columns=columns)

    def with_rows(self, rows: Pdf417Rows) -> PrintPdf417:
        return replace(self, rows=rows)

    def with_module_width(self, width: int) -> PrintPdf417:
        return replace(self, module_width=width)

    def with_module_height(self, height: int) -> PrintPdf417:
        return replace(self, module_height=height)

    def with_error_correction(self, level: Pdf417ErrorCorrection) -> PrintPdf417:
        return replace(self, error_correction=level)

    def encode(self) -> bytes:
        return b"".join(
            [
                _gs_k(_PDF417_FN, 65, self.columns.count),
                _gs_k(_PDF417_FN, 66, self.rows.count),
                _gs_k(_PDF417_FN, 67, self.module_width),
                _gs_k(_PDF417_FN, 68, self.module_height),
                _gs_k(_PDF417_FN, 69, 48, int(self.error_correction)),
                _store(_PDF417_FN, self.data),  # type: ignore[arg-type]
                _gs_k(_PDF417_FN, 81, 48),
            ]
        )
