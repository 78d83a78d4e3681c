"""
asyncio printer wrapper.

``AsyncPrinter`` mirrors ``Printer`` with coroutines over an
``asyncio.StreamWriter`` / ``asyncio.StreamReader`` pair (or any objects
with the same ``write``/``drain``/``read`` surface).

Example:
    >>> reader, writer = await asyncio.open_connection("192.168.1.50", 9100)
    >>> async with AsyncPrinter(writer, reader) as printer:
    ...     await printer.initialize()
    ...     await printer.println(bold("Order #42"))
    ...     status = await printer.query(TransmitStatus(StatusType.PAPER_ROLL))
"""

from __future__ import annotations

import logging
from types import TracebackType
from typing import Any, Optional, Protocol, Type, TypeVar

from posprint.commands.base import Command, QueryCommand, raw_bytes
from posprint.commands.codepage import CodePage, SelectCodePage
from posprint.commands.printer_control import Initialize
from posprint.commands.spacing import SetLineSpacing
from posprint.encoding import TextEncoder
from posprint.errors import NoReaderError, NoResponseError, TransportError
from posprint.page import PageBuilder
from posprint.printer.sync import QUERY_READ_SIZE
from posprint.style.text import NodeLike, as_node

__all__ = ["AsyncPrinter", "AsyncWriter", "AsyncReader"]

logger = logging.getLogger(__name__)

R = TypeVar("R")


class AsyncWriter(Protocol):
    def write(self, data: bytes) -> Any: ...

    async def drain(self) -> None: ...


class AsyncReader(Protocol):
    async def read(self, n: int = -1) -> bytes: ...


class AsyncPrinter:
    """
    Asynchronous ESC/POS printer.

    Every write is followed by ``drain()`` so back-pressure is honoured.
    Not safe for concurrent use from several tasks.
    """

    def __init__(
        self,
        writer: AsyncWriter,
        reader: Optional[AsyncReader] = None,
        *,
        code_page: CodePage = CodePage.CP437,
        encoder: Optional[TextEncoder] = None,
        line_spacing: Optional[int] = None,
    ) -> None:
        self.writer = writer
        self.reader = reader
        self.code_page = code_page
        self.encoder = encoder
        self.line_spacing = line_spacing

    def __repr__(self) -> str:
        return f"AsyncPrinter(writer={self.writer!r}, code_page={self.code_page.name})"

    async def __aenter__(self) -> AsyncPrinter:
        return self

    async def __aexit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        await self.close()

    async def _write(self, data: bytes) -> None:
        try:
            self.writer.write(data)
            await self.writer.drain()
        except OSError as e:
            logger.error("Write of %d bytes failed: %s", len(data), e)
            raise TransportError(f"write failed: {e}", cause=e) from e

    async def send(self, command: Command) -> AsyncPrinter:
        await self._write(command.encode())
        return self

    async def send_raw(self, data: bytes) -> AsyncPrinter:
        await self._write(raw_bytes(data))
        return self

    async def print(self, text: NodeLike) -> AsyncPrinter:
        await self._write(as_node(text).render(self.code_page, self.encoder))
        return self

    async def println(self, text: NodeLike = "") -> AsyncPrinter:
        await self._write(as_node(text).render_line(self.code_page, self.encoder))
        return self

    async def print_page(self, page: PageBuilder) -> AsyncPrinter:
        await self._write(page.build())
        return self

    async def print_page_and_exit(self, page: PageBuilder) -> AsyncPrinter:
        await self._write(page.build_and_exit())
        return self

    async def initialize(self) -> AsyncPrinter:
        """Send ``ESC @``, then restore the code page and line spacing."""
        await self.send(Initialize())
        if self.code_page is not CodePage.CP437:
            await self.send(SelectCodePage(self.code_page))
        if self.line_spacing is not None:
            await self.send(SetLineSpacing(self.line_spacing))
        return self

    async def set_code_page(self, code_page: CodePage) -> AsyncPrinter:
        await self.send(SelectCodePage(code_page))
        self.code_page = code_page
        return self

    async def flush(self) -> AsyncPrinter:
        try:
            await self.writer.drain()
        except OSError as e:
            logger.error("Drain failed: %s", e)
            raise TransportError(f"flush failed: {e}", cause=e) from e
        return self

    async def query(self, command: QueryCommand[R]) -> R:
        """
        Raises:
            NoReaderError: The printer has no reader.
            NoResponseError: The reader returned no bytes.
            StatusParseError: The response could not be parsed.
            TransportError: I/O failure.
        """
        if self.reader is None:
            raise NoReaderError("printer was created without a reader; status queries unavailable")
        await self.send(command)
        try:
            response = await self.reader.read(QUERY_READ_SIZE)
        except OSError as e:
            logger.error("Read failed: %s", e)
            raise TransportError(f"read failed: {e}", cause=e) from e
        if not response:
            raise NoResponseError(f"no response to {command!r}")
        logger.debug("Query %r -> %s", command, response.hex(" "))
        return command.parse_response(response)

    async def close(self) -> None:
        """Drain, then close the writer if it can be closed, even when draining fails."""
        try:
            await self.flush()
        finally:
            close = getattr(self.writer, "close", None)
            if close is not None:
                close()
                wait_closed = getattr(self.writer, "wait_closed", None)
                if wait_closed is not None:
                    await wait_closed()
            logger.info("Async printer closed")
