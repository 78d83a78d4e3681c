"""
Blocking printer wrapper.

``Printer`` writes encoded commands, styled text and pages to any binary
stream (a device file, a socket's ``makefile("rwb")``, ``io.BytesIO``).
Status queries need a readable stream as well.

Example:
    >>> with Printer.open("/dev/usb/lp0") as printer:
    ...     printer.initialize().println(bold("Hello")).send(CutPaper.partial())
"""

from __future__ import annotations

import logging
from pathlib import Path
from types import TracebackType
from typing import BinaryIO, Optional, Type, TypeVar, Union

from posprint.commands.base import Command, QueryCommand, raw_bytes
from posprint.commands.codepage import CodePage, SelectCodePage
from posprint.commands.printer_control import Initialize
from posprint.commands.spacing import SetLineSpacing
from posprint.config import PrinterConfig
from posprint.encoding import TextEncoder
from posprint.errors import NoReaderError, NoResponseError, TransportError
from posprint.page import PageBuilder
from posprint.style.text import NodeLike, as_node

__all__ = ["Printer", "QUERY_READ_SIZE"]

logger = logging.getLogger(__name__)

QUERY_READ_SIZE = 64
R = TypeVar("R")


class Printer:
    """
    Synchronous ESC/POS printer over a binary stream.

    Write methods return ``self`` for chaining. I/O failures are raised as
    ``TransportError`` with the ``OSError`` as cause. Not thread-safe.

    Args:
        writer: Writable binary stream.
        reader: Readable binary stream for status queries, if any.
        code_page: Code page used to encode text (must match the one
            selected on the printer).
        encoder: Text encoder; defaults to the strict code page encoder.
        line_spacing: Line spacing in motion units applied by
            ``initialize()``; None keeps the printer default.
        owns_streams: Close the streams in ``close()``.
    """

    def __init__(
        self,
        writer: BinaryIO,
        reader: Optional[BinaryIO] = None,
        *,
        code_page: CodePage = CodePage.CP437,
        encoder: Optional[TextEncoder] = None,
        owns_streams: bool = False,
        line_spacing: Optional[int] = None,
    ) -> None:
        self.writer = writer
        self.reader = reader
        self.code_page = code_page
        self.encoder = encoder
        self.line_spacing = line_spacing
        self._owns_streams = owns_streams
        self._closed = False

    @classmethod
    def open(
        cls,
        path: Union[str, Path],
        *,
        readable: bool = False,
        code_page: CodePage = CodePage.CP437,
        encoder: Optional[TextEncoder] = None,
        line_spacing: Optional[int] = None,
    ) -> Printer:
        """
        Open a printer device file, e.g. ``/dev/usb/lp0``.

        With ``readable=True`` the device is opened read-write so status
        queries work.

        Raises:
            TransportError: The device cannot be opened.
        """
        mode = "r+b" if readable else "wb"
        try:
            stream = open(path, mode, buffering=0)
        except OSError as e:
            logger.error("Could not open printer device %s: %s", path, e)
            raise TransportError(f"could not open printer device {path}: {e}", cause=e) from e
        logger.info("Opened printer device %s", path)
        return cls(
            stream,  # type: ignore[arg-type]
            stream if readable else None,  # type: ignore[arg-type]
            code_page=code_page,
            encoder=encoder,
            owns_streams=True,
            line_spacing=line_spacing,
        )

    @classmethod
    def from_config(cls, config: PrinterConfig, *, readable: bool = False) -> Printer:
        """Open the configured device with its code page, encoder and line spacing."""
        return cls.open(
            config.device,
            readable=readable,
            code_page=config.code_page,
            encoder=config.encoder(),
            line_spacing=config.line_spacing,
        )

    def __repr__(self) -> str:
        return f"Printer(writer={self.writer!r}, code_page={self.code_page.name})"

    # -------------------------------------------------------------------------
    # Context manager
    # -------------------------------------------------------------------------

    def __enter__(self) -> Printer:
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.close()

    # -------------------------------------------------------------------------
    # Output
    # -------------------------------------------------------------------------

    def _write(self, data: bytes) -> None:
        try:
            self.writer.write(data)
        except OSError as e:
            logger.error("Write of %d bytes failed: %s", len(data), e)
            raise TransportError(f"write failed: {e}", cause=e) from e

    def send(self, command: Command) -> Printer:
        self._write(command.encode())
        return self

    def send_raw(self, data: bytes) -> Printer:
        self._write(raw_bytes(data))
        return self

    def print(self, text: NodeLike) -> Printer:
        """Render styled text (no line feed) and send it."""
        self._write(as_node(text).render(self.code_page, self.encoder))
        return self

    def println(self, text: NodeLike = "") -> Printer:
        """Render styled text followed by a line feed and send it."""
        self._write(as_node(text).render_line(self.code_page, self.encoder))
        return self

    def print_page(self, page: PageBuilder) -> Printer:
        self._write(page.build())
        return self

    def print_page_and_exit(self, page: PageBuilder) -> Printer:
        self._write(page.build_and_exit())
        return self

    def initialize(self) -> Printer:
        """
        Send ``ESC @``, then restore this printer's code page and line spacing.

        ``ESC @`` resets the device to CP437; ``ESC t`` follows whenever
        text is encoded for another code page.
        """
        self.send(Initialize())
        if self.code_page is not CodePage.CP437:
            self.send(SelectCodePage(self.code_page))
        if self.line_spacing is not None:
            self.send(SetLineSpacing(self.line_spacing))
        return self

    def set_code_page(self, code_page: CodePage) -> Printer:
        """Select ``code_page`` on the printer and use it for later text."""
        self.send(SelectCodePage(code_page))
        self.code_page = code_page
        return self

    def flush(self) -> Printer:
        try:
            self.writer.flush()
        except OSError as e:
            logger.error("Flush failed: %s", e)
            raise TransportError(f"flush failed: {e}", cause=e) from e
        return self

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def query(self, command: QueryCommand[R]) -> R:
        """
        Send a query command and parse the printer's answer.

        Raises:
            NoReaderError: The printer has no reader.
            NoResponseError: The reader returned no bytes.
            StatusParseError: The response could not be parsed.
            TransportError: I/O failure.
        """
        if self.reader is None:
            raise NoReaderError("printer was opened without a reader; status queries unavailable")
        self.send(command).flush()
        try:
            response = self.reader.read(QUERY_READ_SIZE)
        except OSError as e:
            logger.error("Read failed: %s", e)
            raise TransportError(f"read failed: {e}", cause=e) from e
        if not response:
            raise NoResponseError(f"no response to {command!r}")
        logger.debug("Query %r -> %s", command, response.hex(" "))
        return command.parse_response(response)

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """Flush, and close the streams if this printer opened them."""
        if self._closed:
            return
        self._closed = True
        try:
            self.flush()
        finally:
            if self._owns_streams:
                self.writer.close()
                if self.reader is not None and self.reader is not self.writer:
                    self.reader.close()
                logger.info("Printer closed")
