"""Tests for posprint/printer/async_printer.py driven with asyncio.run and fake streams."""

import asyncio
from typing import Optional

import pytest

from posprint.commands.codepage import CodePage
from posprint.commands.paper import CutPaper
from posprint.commands.status import OfflineStatus, StatusType, TransmitStatus
from posprint.errors import NoReaderError, NoResponseError, TransportError
from posprint.page import PageBuilder
from posprint.printer.async_printer import AsyncPrinter
from posprint.style.text import bold


class FakeWriter:
    def __init__(self, fail: bool = False, fail_drain: bool = False) -> None:
        self.buffer = bytearray()
        self.fail = fail
        self.fail_drain = fail_drain
        self.drains = 0
        self.closed = False
        self.waited = False

    def write(self, data: bytes) -> None:
        if self.fail:
            raise ConnectionResetError("peer closed")
        self.buffer += data

    async def drain(self) -> None:
        if self.fail_drain:
            raise ConnectionResetError("peer closed")
        self.drains += 1

    def close(self) -> None:
        self.closed = True

    async def wait_closed(self) -> None:
        self.waited = True


class BareWriter:
    def __init__(self) -> None:
        self.buffer = bytearray()

    def write(self, data: bytes) -> None:
        self.buffer += data

    async def drain(self) -> None:
        pass


class FakeReader:
    def __init__(self, response: bytes = b"", error: Optional[OSError] = None) -> None:
        self.response = response
        self.error = error

    async def read(self, n: int = -1) -> bytes:
        if self.error is not None:
            raise self.error
        return self.response


def run(coro):  # type: ignore[no-untyped-def]
    return asyncio.run(coro)


def test_writes_and_drains() -> None:
    writer = FakeWriter()

    async def scenario() -> None:
        printer = AsyncPrinter(writer)
        await printer.initialize()
        await printer.println(bold("Hi"))
        await printer.print("x")
        await printer.send(CutPaper.full())
        await printer.send_raw(b"\x07")

    run(scenario())
    assert bytes(writer.buffer) == b"\x1b@\x1bE\x01Hi\x1bE\x00\nx\x1dV\x00\x07"
    assert writer.drains == 5


def test_pages() -> None:
    writer = FakeWriter()

    async def scenario() -> None:
        printer = AsyncPrinter(writer)
        page = PageBuilder().text("p")
        await printer.print_page(page)
        await printer.print_page_and_exit(page)

    run(scenario())
    assert bytes(writer.buffer) == b"\x1bLp\x0c\x1bLp\x0c\x1bS"


def test_context_manager_closes_writer() -> None:
    writer = FakeWriter()

    async def scenario() -> None:
        async with AsyncPrinter(writer) as printer:
            await printer.println()

    run(scenario())
    assert writer.closed
    assert writer.waited


def test_close_without_close_method() -> None:
    writer = BareWriter()

    async def scenario() -> None:
        async with AsyncPrinter(writer) as printer:
            await printer.print("ok")

    run(scenario())
    assert bytes(writer.buffer) == b"ok"


def test_close_failure_still_closes_writer() -> None:
    writer = FakeWriter(fail_drain=True)
    with pytest.raises(TransportError):
        run(AsyncPrinter(writer).close())
    assert writer.closed
    assert writer.waited


def test_initialize_restores_code_page_and_spacing() -> None:
    writer = FakeWriter()
    printer = AsyncPrinter(writer, code_page=CodePage.CP866, line_spacing=40)
    run(printer.initialize())
    assert bytes(writer.buffer) == b"\x1b@\x1bt\x11\x1b3\x28"


def test_initialize_default_code_page() -> None:
    writer = FakeWriter()
    run(AsyncPrinter(writer).initialize())
    assert bytes(writer.buffer) == b"\x1b@"


def test_send_raw_rejects_int() -> None:
    writer = FakeWriter()
    with pytest.raises(TypeError):
        run(AsyncPrinter(writer).send_raw(7))  # type: ignore[arg-type]
    assert bytes(writer.buffer) == b""


def test_write_failure() -> None:
    printer = AsyncPrinter(FakeWriter(fail=True))
    with pytest.raises(TransportError) as exc_info:
        run(printer.send_raw(b"x"))
    assert isinstance(exc_info.value.__cause__, ConnectionResetError)


class TestQuery:
    def test_offline_status(self) -> None:
        writer = FakeWriter()
        printer = AsyncPrinter(writer, FakeReader(b"\x16"))
        status = run(printer.query(TransmitStatus(StatusType.OFFLINE)))
        assert bytes(writer.buffer) == b"\x10\x04\x02"
        assert isinstance(status, OfflineStatus)
        assert status.cover_open

    def test_without_reader(self) -> None:
        with pytest.raises(NoReaderError):
            run(AsyncPrinter(FakeWriter()).query(TransmitStatus()))

    def test_empty_response(self) -> None:
        with pytest.raises(NoResponseError):
            run(AsyncPrinter(FakeWriter(), FakeReader(b"")).query(TransmitStatus()))

    def test_read_failure(self) -> None:
        reader = FakeReader(error=ConnectionResetError("gone"))
        with pytest.raises(TransportError):
            run(AsyncPrinter(FakeWriter(), reader).query(TransmitStatus()))
