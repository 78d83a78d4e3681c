"""
Tests for posprint/commands/image.py

Bit image, raster and downloaded image commands, including conversion of
Pillow images to raster data.
"""

import pytest
from PIL import Image

from posprint.commands.image import (
    BitImageMode,
    DefineDownloadedImage,
    DownloadedImageMode,
    PrintDownloadedImage,
    PrintRasterImage,
    RasterImageMode,
    SelectBitImageMode,
)
from posprint.errors import ImageError


class TestBitImage:
    def test_24_dot_encoding(self) -> None:
        cmd = SelectBitImageMode(2, b"\xff" * 6)
        assert cmd.encode() == b"\x1b*\x21\x02\x00" + b"\xff" * 6

    def test_8_dot_encoding(self) -> None:
        cmd = SelectBitImageMode(3, b"\x01\x02\x03", BitImageMode.SINGLE_DENSITY_8)
        assert cmd.encode() == b"\x1b*\x00\x03\x00\x01\x02\x03"

    def test_length_mismatch(self) -> None:
        with pytest.raises(ImageError):
            SelectBitImageMode(2, b"\xff" * 5)


class TestRasterImage:
    def test_encoding(self) -> None:
        cmd = PrintRasterImage(2, 2, b"\xaa\xbb\xcc\xdd")
        assert cmd.encode() == b"\x1dv0\x00\x02\x00\x02\x00\xaa\xbb\xcc\xdd"

    def test_with_mode(self) -> None:
        cmd = PrintRasterImage(1, 1, b"\x80").with_mode(RasterImageMode.QUADRUPLE)
        assert cmd.encode()[3] == 3

    def test_length_mismatch(self) -> None:
        with pytest.raises(ImageError):
            PrintRasterImage(2, 2, b"\x00\x00\x00")

    def test_from_image_black_and_white(self) -> None:
        img = Image.new("L", (10, 2), 255)
        img.putpixel((0, 0), 0)
        img.putpixel((9, 1), 0)
        cmd = PrintRasterImage.from_image(img, dither=False)
        assert cmd.width_bytes == 2
        assert cmd.height_dots == 2
        # row 0: first dot black; row 1: tenth dot black; padding is white
        assert cmd.data == b"\x80\x00\x00\x40"

    def test_from_image_transparent_is_white(self) -> None:
        img = Image.new("RGBA", (8, 1), (0, 0, 0, 0))
        cmd = PrintRasterImage.from_image(img, dither=False)
        assert cmd.data == b"\x00"

    def test_from_image_all_black(self) -> None:
        img = Image.new("RGB", (16, 3), "black")
        cmd = PrintRasterImage.from_image(img)
        assert cmd.data == b"\xff" * 6

    def test_from_image_scales_to_max_width(self) -> None:
        img = Image.new("L", (1024, 100), 255)
        cmd = PrintRasterImage.from_image(img, max_width=512)
        assert cmd.width_bytes == 64
        assert cmd.height_dots == 50


class TestDownloadedImage:
    def test_define(self) -> None:
        cmd = DefineDownloadedImage(1, 2, b"\x00" * 16)
        assert cmd.encode() == b"\x1d*\x01\x02" + b"\x00" * 16

    def test_define_length_mismatch(self) -> None:
        with pytest.raises(ImageError):
            DefineDownloadedImage(1, 1, b"\x00" * 7)

    def test_print(self) -> None:
        assert PrintDownloadedImage().encode() == b"\x1d/\x00"
        assert PrintDownloadedImage(DownloadedImageMode.DOUBLE_HEIGHT).encode() == b"\x1d/\x02"
