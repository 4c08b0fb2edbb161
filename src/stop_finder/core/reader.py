"""Interactive line reader."""

import asyncio
import io
import os
import sys
import threading
from types import TracebackType
from typing import TextIO

from rich.console import Console


def _resolve(future: asyncio.Future, line: str) -> None:
    if not future.done():
        future.set_result(line)


def _reject(future: asyncio.Future, error: Exception) -> None:
    if not future.done():
        future.set_exception(error)


def _read_descriptor_line(fd: int, encoding: str) -> str:
    """Read one line straight from ``fd``, bypassing Python's buffered stdin."""
    data = bytearray()
    while True:
        byte = os.read(fd, 1)
        if not byte:
            if not data:
                raise EOFError("End of input")
            break
        if byte == b"\n":
            break
        data += byte
    return data.decode(encoding).rstrip("\r")


class ConsoleLineReader:
    """Reads lines from the terminal without blocking the event loop.

    Use as an async context manager; ``ask`` is only available between
    ``__aenter__`` and ``__aexit__``. Lines are read on a daemon thread from
    the raw file descriptor, so an interrupted prompt holds no interpreter
    locks and never keeps the process alive.
    """

    def __init__(
        self, console: Console | None = None, stdin: TextIO | None = None
    ) -> None:
        self.console = console or Console()
        self.stdin = stdin
        self._open = False

    def _read_line(self) -> str:
        stdin = self.stdin if self.stdin is not None else sys.stdin
        try:
            fd = stdin.fileno()
        except (AttributeError, io.UnsupportedOperation):
            # In-memory streams have no descriptor to block on
            line = stdin.readline()
            if not line:
                raise EOFError("End of input")
            return line.rstrip("\r\n")
        return _read_descriptor_line(fd, getattr(stdin, "encoding", None) or "utf-8")

    async def ask(self, message: str) -> str:
        """Show ``message`` and wait for one line of input."""
        if not self._open:
            raise RuntimeError("Line reader is not open")

        self.console.print(message, end="", markup=False, highlight=False)

        loop = asyncio.get_running_loop()
        future: asyncio.Future = loop.create_future()

        def read_line() -> None:
            try:
                line = self._read_line()
            except Exception as e:
                loop.call_soon_threadsafe(_reject, future, e)
            else:
                loop.call_soon_threadsafe(_resolve, future, line)

        threading.Thread(target=read_line, name="line-reader", daemon=True).start()
        return await future

    async def __aenter__(self) -> "ConsoleLineReader":
        self._open = True
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self._open = False
