"""
Exception hierarchy for posprint.

Two failure kinds exist below the printer layer:

- construction-time validation (``ValidationError`` and subclasses): a
  command parameter violated a range, length or parity constraint. The
  command is never created.
- text encoding (``EncodingError``): a character has no representation in
  the active code page.

``Command.encode()`` and ``PageBuilder.build()`` never raise. The printer
wrappers add ``PrinterError`` for transport and query failures.
"""

from __future__ import annotations

from typing import Optional


class PosPrintError(Exception):
    """Base exception for all posprint failures."""

    def __init__(self, message: str = "", *, cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.__cause__ = cause


# Construction-time validation
class ValidationError(PosPrintError, ValueError):
    """A command parameter violated a protocol constraint."""

    def __init__(
        self,
        message: str,
        *,
        name: str = "",
        value: object = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.name = name
        self.value = value


class OutOfRangeError(ValidationError):
    """Numeric parameter outside its allowed range."""

    def __init__(self, name: str, value: int, min_value: int, max_value: int) -> None:
        super().__init__(
            f"{name} value {value} out of range ({min_value}-{max_value})",
            name=name,
            value=value,
        )
        self.min = min_value
        self.max = max_value


class BarcodeError(ValidationError):
    """Base class for barcode payload violations."""


class InvalidBarcodeLengthError(BarcodeError):
    def __init__(self, system: str, actual: int, min_len: int, max_len: int) -> None:
        super().__init__(
            f"invalid barcode length for {system}: got {actual}, expected {min_len}-{max_len}",
            name=system,
            value=actual,
        )
        self.system = system
        self.actual = actual
        self.min = min_len
        self.max = max_len


class ItfOddLengthError(BarcodeError):
    def __init__(self, actual: int) -> None:
        super().__init__(
            f"ITF barcode requires even number of digits, got {actual}",
            name="ITF",
            value=actual,
        )
        self.actual = actual


class InvalidBarcodeCharacterError(BarcodeError):
    """A byte in the barcode data is not allowed by the symbology."""

    def __init__(self, system: str, data: bytes, position: int) -> None:
        char = data[position : position + 1]
        super().__init__(
            f"invalid character {char!r} at position {position} in {system} barcode",
            name=system,
            value=data,
        )
        self.system = system
        self.data = data
        self.position = position


class QrCodeError(ValidationError):
    """QR code data is empty or too long."""


class Pdf417Error(ValidationError):
    """PDF417 column or row count out of range."""


class ImageError(ValidationError):
    """Image data does not match the declared geometry."""


# Text encoding
class EncodingError(PosPrintError):
    """
    Character not representable in the active code page.

    Attributes:
        text: The full source text being encoded.
        position: Index of the offending character in ``text``.
        character: The offending character.
        code_page: Name of the code page in use.
        hint: Optional suggestion for the caller.
    """

    def __init__(
        self,
        text: str,
        position: int,
        code_page: str,
        *,
        hint: Optional[str] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        self.text = text
        self.position = position
        self.character = text[position] if 0 <= position < len(text) else ""
        self.code_page = code_page
        self.hint = hint
        super().__init__(
            f"character {self.character!r} at position {position} "
            f"not representable in {code_page}",
            cause=cause,
        )


# Status responses
class StatusParseError(PosPrintError):
    """Status response from the printer is empty or malformed."""


# Printer wrapper
class PrinterError(PosPrintError):
    """Base class for printer wrapper failures."""


class TransportError(PrinterError):
    """I/O failure while talking to the printer."""


class NoReaderError(PrinterError):
    """A query was issued on a printer opened without a reader."""


class NoResponseError(PrinterError):
    """The printer returned no bytes for a query."""


__all__ = [
    "PosPrintError",
    "ValidationError",
    "OutOfRangeError",
    "BarcodeError",
    "InvalidBarcodeLengthError",
    "ItfOddLengthError",
    "InvalidBarcodeCharacterError",
    "QrCodeError",
    "Pdf417Error",
    "ImageError",
    "EncodingError",
    "StatusParseError",
    "PrinterError",
    "TransportError",
    "NoReaderError",
    "NoResponseError",
]
