"""Unit tests for the console line reader."""

import os
import selectors
import signal
import subprocess
import sys
import time
from io import StringIO

import pytest
from rich.console import Console

from stop_finder.core.reader import ConsoleLineReader


def make_console():
    return Console(file=StringIO(), force_terminal=False)


class TestConsoleLineReader:
    """Test ConsoleLineReader."""

    @pytest.mark.asyncio
    async def test_ask_returns_line(self):
        console = make_console()

        async with ConsoleLineReader(console, StringIO("SW1A 1AA\n")) as reader:
            line = await reader.ask("Enter your postcode: ")

        assert line == "SW1A 1AA"
        assert console.file.getvalue() == "Enter your postcode: "

    @pytest.mark.asyncio
    async def test_prompt_printed_literally(self):
        console = make_console()

        async with ConsoleLineReader(console, StringIO("E1\n")) as reader:
            await reader.ask("[bold]Postcode:[/bold] ")

        assert console.file.getvalue() == "[bold]Postcode:[/bold] "

    @pytest.mark.asyncio
    async def test_ask_reads_from_descriptor(self):
        read_fd, write_fd = os.pipe()
        os.write(write_fd, b"N1 9GU\r\nleftover\n")
        os.close(write_fd)

        with os.fdopen(read_fd, "r", encoding="utf-8") as stdin:
            async with ConsoleLineReader(make_console(), stdin) as reader:
                line = await reader.ask("Enter your postcode: ")

        assert line == "N1 9GU"

    @pytest.mark.asyncio
    async def test_ask_after_release_fails(self):
        reader = ConsoleLineReader(make_console(), StringIO("E1\n"))
        async with reader:
            pass

        with pytest.raises(RuntimeError, match="not open"):
            await reader.ask("Enter your postcode: ")

    @pytest.mark.asyncio
    async def test_ask_before_acquire_fails(self):
        with pytest.raises(RuntimeError, match="not open"):
            await ConsoleLineReader(make_console(), StringIO("E1\n")).ask(
                "Enter your postcode: "
            )

    @pytest.mark.asyncio
    async def test_eof_propagates(self):
        with pytest.raises(EOFError):
            async with ConsoleLineReader(make_console(), StringIO("")) as reader:
                await reader.ask("Enter your postcode: ")

    @pytest.mark.asyncio
    async def test_eof_on_descriptor_propagates(self):
        read_fd, write_fd = os.pipe()
        os.close(write_fd)

        with os.fdopen(read_fd, "r", encoding="utf-8") as stdin:
            with pytest.raises(EOFError):
                async with ConsoleLineReader(make_console(), stdin) as reader:
                    await reader.ask("Enter your postcode: ")


def _read_until(process, marker, timeout):
    """Read stdout until ``marker`` shows up or ``timeout`` passes."""
    output = b""
    deadline = time.monotonic() + timeout
    with selectors.DefaultSelector() as selector:
        selector.register(process.stdout, selectors.EVENT_READ)
        while marker not in output and time.monotonic() < deadline:
            if not selector.select(timeout=0.1):
                continue
            chunk = os.read(process.stdout.fileno(), 1024)
            if not chunk:
                break
            output += chunk
    return output


@pytest.mark.skipif(sys.platform == "win32", reason="POSIX signals only")
def test_interrupt_at_prompt_exits():
    """Test that Ctrl-C while waiting for a postcode exits with status 1."""
    process = subprocess.Popen(
        [sys.executable, "-m", "stop_finder.cli.main", "nearby"],
        stdin=subprocess.PIPE,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
    )
    try:
        output = _read_until(process, b"Enter your postcode", timeout=20)
        assert b"Enter your postcode" in output

        process.send_signal(signal.SIGINT)
        returncode = process.wait(timeout=10)
        stderr = process.stderr.read()
    finally:
        if process.poll() is None:
            process.kill()
            process.wait()
        process.stdin.close()
        process.stdout.close()
        process.stderr.close()

    assert returncode == 1
    assert b"No postcode entered" in stderr
