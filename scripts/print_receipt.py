#!/usr/bin/env python3
"""
Demo: print a sample receipt.

Usage:
    python scripts/print_receipt.py                  # configured device
    python scripts/print_receipt.py --out receipt.bin
    python scripts/print_receipt.py --out - | xxd    # hex dump to stdout
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from posprint import (
    BarcodeSystem,
    CharacterSize,
    CutPaper,
    FeedLines,
    HriPosition,
    Justification,
    PrintBarcode,
    Printer,
    PrintQrCode,
    SetHriPosition,
    bold,
    get_logger,
    load_config,
)

logger = get_logger(__name__)

ITEMS = [
    ("Coffee", "3.50"),
    ("Croissant", "2.80"),
    ("Orange juice", "4.20"),
]


def print_receipt(printer: Printer, width: int) -> None:
    header = bold("CORNER CAFE").sized(CharacterSize.double()).aligned(Justification.CENTER)
    printer.initialize()
    printer.println(header)
    printer.println("12 Market Street".ljust(width))
    printer.println("-" * width)

    for name, price in ITEMS:
        printer.println(name.ljust(width - len(price)) + price)

    printer.println("-" * width)
    total = "10.50"
    printer.println(bold("TOTAL".ljust(width - len(total)) + total))
    printer.send(FeedLines(1))

    printer.send(SetHriPosition(HriPosition.BELOW))
    printer.send(PrintBarcode(BarcodeSystem.CODE39, b"R-000042"))
    printer.send(PrintQrCode("https://example.com/r/42"))
    printer.send(CutPaper.feed_and_partial(3))


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument("--out", help="write to this file ('-' for stdout) instead of the device")
    args = parser.parse_args()

    config = load_config()
    width = 32 if config.paper_width_mm == 58 else 48

    if args.out == "-":
        printer = Printer(
            sys.stdout.buffer,
            code_page=config.code_page,
            encoder=config.encoder(),
            line_spacing=config.line_spacing,
        )
    elif args.out:
        printer = Printer.open(
            Path(args.out),
            code_page=config.code_page,
            encoder=config.encoder(),
            line_spacing=config.line_spacing,
        )
    else:
        printer = Printer.from_config(config)

    with printer:
        print_receipt(printer, width)
    logger.info("Receipt sent")
    return 0


if __name__ == "__main__":
    sys.exit(main())
