"""Printer wrappers: blocking (``Printer``) and asyncio (``AsyncPrinter``)."""

from posprint.printer.async_printer import AsyncPrinter
from posprint.printer.sync import Printer

__all__ = ["Printer", "AsyncPrinter"]
