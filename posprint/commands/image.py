"""
Bit image and raster image commands.

Four ways to get pixels onto paper:

- ``ESC *``: column-format bit image for one print line (8 or 24 dots tall).
- ``GS v 0``: row-format raster image of arbitrary height.
- ``GS *`` + ``GS /``: download an image to printer RAM, then print it.

``PrintRasterImage.from_image`` converts a Pillow image into raster data:
the image is flattened onto white, dithered to 1 bit, padded to a whole
number of bytes per row and packed with 1 = black.

Reference: Bixolon SRP-350plus Command Manual, "Bit Image Commands"
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import IntEnum
from typing import Optional

from PIL import Image

from posprint.commands.base import ESC, GS, check_range, u16_le
from posprint.errors import ImageError

__all__ = [
    "BitImageMode",
    "RasterImageMode",
    "DownloadedImageMode",
    "SelectBitImageMode",
    "PrintRasterImage",
    "DefineDownloadedImage",
    "PrintDownloadedImage",
]

logger = logging.getLogger(__name__)

_U16_MAX = 0xFFFF


class BitImageMode(IntEnum):
    """Density ``m`` of ``ESC *``."""

    SINGLE_DENSITY_8 = 0
    DOUBLE_DENSITY_8 = 1
    SINGLE_DENSITY_24 = 32
    DOUBLE_DENSITY_24 = 33

    @property
    def bytes_per_column(self) -> int:
        return 3 if self.value >= 32 else 1


class RasterImageMode(IntEnum):
    """Scaling ``m`` of ``GS v 0``."""

    NORMAL = 0
    DOUBLE_WIDTH = 1
    DOUBLE_HEIGHT = 2
    QUADRUPLE = 3


class DownloadedImageMode(IntEnum):
    """Scaling ``m`` of ``GS /``."""

    NORMAL = 0
    DOUBLE_WIDTH = 1
    DOUBLE_HEIGHT = 2
    QUADRUPLE = 3


def _check_length(what: str, data: bytes, expected: int) -> None:
    if len(data) != expected:
        raise ImageError(
            f"{what} data length {len(data)} does not match geometry ({expected} bytes expected)",
            name=what,
            value=len(data),
        )


@dataclass(frozen=True, slots=True)
class SelectBitImageMode:
    """
    Print one line of column-format bit image.

    Command: ESC * m nL nH d1...dk
    Hex: 1B 2A m nL nH data
    k = width for 8-dot modes, width x 3 for 24-dot modes

    Raises:
        ImageError: If ``data`` length does not match ``width`` and mode.
    """

    width: int
    data: bytes
    mode: BitImageMode = BitImageMode.DOUBLE_DENSITY_24

    def __post_init__(self) -> None:
        check_range("bit image width", self.width, 0, _U16_MAX)
        data = bytes(self.data)
        _check_length("bit image", data, self.width * self.mode.bytes_per_column)
        object.__setattr__(self, "data", data)

    def encode(self) -> bytes:
        return bytes([ESC, ord("*"), int(self.mode)]) + u16_le(self.width) + self.data


@dataclass(frozen=True, slots=True)
class PrintRasterImage:
    """
    Print a raster bit image.

    Command: GS v 0 m xL xH yL yH d1...dk
    Hex: 1D 76 30 m xL xH yL yH data
    k = width_bytes x height_dots; each byte holds 8 horizontal dots,
    most significant bit leftmost, 1 = black.

    Raises:
        ImageError: If ``data`` length does not match the geometry.
    """

    width_bytes: int
    height_dots: int
    data: bytes
    mode: RasterImageMode = RasterImageMode.NORMAL

    def __post_init__(self) -> None:
        check_range("raster width", self.width_bytes, 0, _U16_MAX)
        check_range("raster height", self.height_dots, 0, _U16_MAX)
        data = bytes(self.data)
        _check_length("raster image", data, self.width_bytes * self.height_dots)
        object.__setattr__(self, "data", data)

    @classmethod
    def from_image(
        cls,
        image: Image.Image,
        *,
        max_width: Optional[int] = None,
        dither: bool = True,
        mode: RasterImageMode = RasterImageMode.NORMAL,
    ) -> PrintRasterImage:
        """
        Convert a Pillow image to a raster command.

        Args:
            image: Any Pillow image. Transparent areas print as white.
            max_width: Scale down (keeping aspect) if wider, in dots.
                Use 512 for 80 mm paper, 360 for 58 mm.
            dither: Floyd-Steinberg dithering; otherwise plain threshold.
            mode: Raster scaling mode.
        """
        if image.mode in ("RGBA", "LA") or (image.mode == "P" and "transparency" in image.info):
            rgba = image.convert("RGBA")
            background = Image.new("RGBA", rgba.size, "white")
            image = Image.alpha_composite(background, rgba)

        if max_width is not None and image.width > max_width:
            height = max(1, round(image.height * max_width / image.width))
            logger.debug("Scaling image %s -> %s", image.size, (max_width, height))
            image = image.resize((max_width, height), Image.Resampling.LANCZOS)

        mono = image.convert("L").convert(
            "1", dither=Image.Dither.FLOYDSTEINBERG if dither else Image.Dither.NONE
        )
        width_bytes = (mono.width + 7) // 8
        canvas = Image.new("1", (width_bytes * 8, mono.height), 1)
        canvas.paste(mono, (0, 0))

        # Pillow packs "1" mode with 1 = white; the printer wants 1 = black
        data = bytes(b ^ 0xFF for b in canvas.tobytes())
        logger.debug("Raster image %dx%d dots, %d bytes", canvas.width, canvas.height, len(data))
        return cls(width_bytes, mono.height, data, mode)

    def with_mode(self, mode: RasterImageMode) -> PrintRasterImage:
        return replace(self, mode=mode)

    def encode(self) -> bytes:
        return (
            bytes([GS, ord("v"), ord("0"), int(self.mode)])
            + u16_le(self.width_bytes)
            + u16_le(self.height_dots)
            + self.data
        )


@dataclass(frozen=True, slots=True)
class DefineDownloadedImage:
    """
    Define a downloaded bit image in printer RAM.

    Command: GS * x y d1...dk
    Hex: 1D 2A x y data
    Size: x * 8 dots wide, y * 8 dots tall, k = x * y * 8 (column format)
    """

    width_bytes: int
    height_bytes: int
    data: bytes

    def __post_init__(self) -> None:
        check_range("downloaded image width", self.width_bytes, 1, 0xFF)
        check_range("downloaded image height", self.height_bytes, 1, 0xFF)
        data = bytes(self.data)
        _check_length("downloaded image", data, self.width_bytes * self.height_bytes * 8)
        object.__setattr__(self, "data", data)

    def encode(self) -> bytes:
        return bytes([GS, ord("*"), self.width_bytes, self.height_bytes]) + self.data


@dataclass(frozen=True, slots=True)
class PrintDownloadedImage:
    """
    Print the downloaded bit image.

    Command: GS / m
    Hex: 1D 2F m
    """

    mode: DownloadedImageMode = DownloadedImageMode.NORMAL

    def encode(self) -> bytes:
        return bytes([GS, ord("/"), int(self.mode)])
