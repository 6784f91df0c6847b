"""Input sources and output sinks the engine talks to.

The engine only needs two capabilities:

- LineReader: ``await readline()`` returning one line, "" at end of input
- TextWriter: ``await write(text)`` and ``await flush()``

Bindings are provided for blocking text streams (stdin, files), asyncio
streams, and in-memory buffers for tests.

Sharing:
    One reader or writer must not be used by two asks running at the same
    time. Interleaving is undefined; serialize access or use distinct
    handles.
"""

from __future__ import annotations

import asyncio
import io
import sys
import threading
from collections.abc import Iterable
from concurrent.futures import Future
from typing import Protocol, TextIO, runtime_checkable


@runtime_checkable
class LineReader(Protocol):
    """Anything that yields text lines."""

    async def readline(self) -> str:
        """Return the next line including its terminator, or "" at EOF."""
        ...


@runtime_checkable
class TextWriter(Protocol):
    """Anything that accepts and flushes text."""

    async def write(self, text: str) -> None: ...

    async def flush(self) -> None: ...


def _read_into(future: Future, stream: TextIO) -> None:
    if not future.set_running_or_notify_cancel():
        return
    try:
        future.set_result(stream.readline())
    except BaseException as e:
        future.set_exception(e)


class StreamReader:
    """Reads lines from a blocking text stream such as ``sys.stdin``.

    Each read runs on its own daemon thread so the event loop stays free to
    fire timeouts. When a read is abandoned (the ask timed out), the thread
    keeps waiting and its line is handed to the next ``readline()`` call on
    this reader, so nothing typed is lost.

    Caveat:
        Blocking reads cannot be interrupted. If this reader is discarded
        after a timeout, its pending thread may still consume one line from
        the underlying stream.
    """

    def __init__(self, stream: TextIO | None = None):
        self.stream = stream if stream is not None else sys.stdin
        self._pending: Future | None = None
        self._lock = threading.Lock()

    @property
    def pending(self) -> bool:
        """True while an abandoned read is still outstanding."""
        return self._pending is not None

    def _start_read(self) -> Future:
        with self._lock:
            if self._pending is None:
                future: Future = Future()
                thread = threading.Thread(
                    target=_read_into,
                    args=(future, self.stream),
                    name="question-reader",
                    daemon=True,
                )
                self._pending = future
                thread.start()
            return self._pending

    def _release(self, future: Future) -> None:
        with self._lock:
            if self._pending is future:
                self._pending = None

    async def readline(self) -> str:
        future = self._start_read()
        try:
            line = await asyncio.shield(asyncio.wrap_future(future))
        except asyncio.CancelledError:
            # The read stays pending for the next call
            raise
        except Exception:
            self._release(future)
            raise
        self._release(future)
        return line


class AsyncStreamReader:
    """Reads lines from an ``asyncio.StreamReader``.

    Cancelling a read leaves incomplete data in the stream buffer, so a
    later read sees it.
    """

    def __init__(self, stream: asyncio.StreamReader, encoding: str = "utf-8"):
        self.stream = stream
        self.encoding = encoding

    async def readline(self) -> str:
        data = await self.stream.readline()
        return data.decode(self.encoding)


class BufferReader:
    """In-memory reader over a string or a sequence of lines.

    Examples:
        >>> reader = BufferReader("maybe\\ny\\n")
        >>> reader = BufferReader(["maybe", "y"])  # terminators added
    """

    def __init__(self, source: str | Iterable[str] = ""):
        if not isinstance(source, str):
            source = "".join(line if line.endswith("\n") else f"{line}\n" for line in source)
        self._buffer = io.StringIO(source)
        self.lines_read = 0

    async def readline(self) -> str:
        line = self._buffer.readline()
        if line:
            self.lines_read += 1
        return line


class QueueReader:
    """Reader fed line by line from other tasks.

    ``readline()`` suspends until a line is fed or the reader is closed.
    Lines fed after ``close()`` are dropped.
    """

    _CLOSED = object()

    def __init__(self):
        self._queue: asyncio.Queue = asyncio.Queue()
        self.closed = False

    def feed(self, line: str) -> None:
        if self.closed:
            return
        self._queue.put_nowait(line if line.endswith("\n") else f"{line}\n")

    def close(self) -> None:
        if self.closed:
            return
        self.closed = True
        self._queue.put_nowait(self._CLOSED)

    async def readline(self) -> str:
        item = await self._queue.get()
        if item is self._CLOSED:
            # Stay closed for later reads
            self._queue.put_nowait(self._CLOSED)
            return ""
        return item


class StreamWriter:
    """Writes to a text stream such as ``sys.stdout`` or a file."""

    def __init__(self, stream: TextIO | None = None):
        self.stream = stream if stream is not None else sys.stdout

    async def write(self, text: str) -> None:
        self.stream.write(text)

    async def flush(self) -> None:
        self.stream.flush()


class BufferWriter:
    """Collects everything written in memory."""

    def __init__(self):
        self._buffer = io.StringIO()
        self.flushes = 0

    async def write(self, text: str) -> None:
        self._buffer.write(text)

    async def flush(self) -> None:
        self.flushes += 1

    def getvalue(self) -> str:
        return self._buffer.getvalue()


_shared_stdin: StreamReader | None = None


def stdin_reader() -> StreamReader:
    """Return the process-wide reader for ``sys.stdin``.

    Sharing one reader lets a line read after a timeout reach the next ask.
    """
    global _shared_stdin
    if _shared_stdin is None or _shared_stdin.stream is not sys.stdin:
        _shared_stdin = StreamReader(sys.stdin)
    return _shared_stdin


def stdout_writer() -> StreamWriter:
    return StreamWriter(sys.stdout)


def stderr_writer() -> StreamWriter:
    return StreamWriter(sys.stderr)
