"""
Log destinations and the fan-out writer composed from them.
"""

from __future__ import annotations

import threading
import weakref
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Iterable

# One lock per console stream, shared by every sink writing to it
_STREAM_LOCKS: weakref.WeakKeyDictionary[Any, threading.Lock] = weakref.WeakKeyDictionary()
_STREAM_LOCKS_GUARD = threading.Lock()


def _lock_for_stream(stream: Any) -> threading.Lock:
    with _STREAM_LOCKS_GUARD:
        lock = _STREAM_LOCKS.get(stream)
        if lock is None:
            lock = _STREAM_LOCKS[stream] = threading.Lock()
        return lock


# =============================================================================
# Sink Abstraction (Strategy Pattern)
# =============================================================================


class Sink(ABC):
    """Abstract base class for log destinations."""

    @abstractmethod
    def write(self, text: str) -> None:
        """Write text to the destination."""
        ...

    @abstractmethod
    def flush(self) -> None:
        """Push buffered text to the destination."""
        ...

    @abstractmethod
    def close(self) -> None:
        """Release resources owned by the sink."""
        ...


class StreamSink(Sink):
    """Console destination. The stream is borrowed and never closed.

    Args:
        stream: Text stream such as ``sys.stdout`` or ``sys.stderr``
    """

    def __init__(self, stream: Any):
        self._stream = stream
        self._lock = _lock_for_stream(stream)

    @property
    def stream(self) -> Any:
        return self._stream

    def write(self, text: str) -> None:
        with self._lock:
            self._stream.write(text)

    def flush(self) -> None:
        with self._lock:
            self._stream.flush()

    def close(self) -> None:
        pass


class FileSink(Sink):
    """Local file opened in create-or-append mode.

    Missing parent directories are not created; opening such a path raises
    the ``OSError`` from ``open``.
    """

    def __init__(self, path: str | Path):
        self._path = Path(path)
        self._file = open(self._path, "a", encoding="utf-8")
        self._lock = threading.Lock()

    @property
    def path(self) -> Path:
        return self._path

    @property
    def closed(self) -> bool:
        return self._file.closed

    def write(self, text: str) -> None:
        with self._lock:
            self._file.write(text)

    def flush(self) -> None:
        with self._lock:
            self._file.flush()

    def close(self) -> None:
        with self._lock:
            if not self._file.closed:
                self._file.close()


# =============================================================================
# Fan-out Writer
# =============================================================================


class CompositeWriter:
    """File-like writer delivering every write to all of its sinks.

    A writer without sinks accepts and discards everything. Sinks are
    written in order and the first failing sink raises; writes already
    delivered to earlier sinks are kept.
    """

    def __init__(self, sinks: Iterable[Sink] = ()):
        self._sinks = tuple(sinks)
        self._lock = threading.Lock()

    @property
    def sinks(self) -> tuple[Sink, ...]:
        return self._sinks

    def write(self, text: str) -> int:
        with self._lock:
            for sink in self._sinks:
                sink.write(text)
        return len(text)

    def flush(self) -> None:
        with self._lock:
            for sink in self._sinks:
                sink.flush()


def new_writer(path: str, verbose: bool, console: Any) -> CompositeWriter:
    """Compose the destinations of one channel.

    ==========  =======  ================
    path        verbose  destinations
    ==========  =======  ================
    empty       no       none
    empty       yes      console
    set         no       file
    set         yes      file + console
    ==========  =======  ================

    Raises:
        OSError: The file at ``path`` could not be opened
    """
    sinks: list[Sink] = []
    if path:
        sinks.append(FileSink(path))
    if verbose:
        sinks.append(StreamSink(console))
    return CompositeWriter(sinks)
