"""
Logger construction from the logging configuration.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from typing import Any, Optional

import structlog
from structlog.typing import FilteringBoundLogger

from ..config.logging import LoggingSettings
from ..exceptions import LoggerSetupError
from .formatters import add_timestamp, render_line
from .sinks import CompositeWriter, FileSink, StreamSink, new_writer


class WriterLogger:
    """Wrapped logger emitting each rendered entry as a single write."""

    def __init__(self, writer: CompositeWriter):
        self._writer = writer

    def msg(self, message: str) -> None:
        self._writer.write(message + "\n")
        self._writer.flush()

    log = debug = info = warning = warn = error = critical = exception = fatal = msg


def _make_logger(writer: CompositeWriter, *, with_datetime: bool) -> FilteringBoundLogger:
    """Bind a structlog logger to a writer with the plain line renderer."""
    processors: list[Any] = [structlog.processors.format_exc_info]
    if with_datetime:
        processors.append(add_timestamp)
    processors.append(render_line)

    return structlog.wrap_logger(
        WriterLogger(writer),
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(logging.INFO),
        context_class=dict,
        cache_logger_on_first_use=False,
    )


def get_logger() -> FilteringBoundLogger:
    """Timestamped console logger on the current ``sys.stderr``.

    Used wherever no configured logger exists yet, e.g. for failures of
    the configuration or of ``build_loggers`` itself.
    """
    return _make_logger(CompositeWriter([StreamSink(sys.stderr)]), with_datetime=True)


@dataclass
class Loggers:
    """The info and error channels plus the files they write to.

    ``close`` is the cleanup handle; it is idempotent and also runs when
    the instance is used as a context manager.
    """

    info: FilteringBoundLogger
    error: FilteringBoundLogger
    files: list[FileSink] = field(default_factory=list)

    def close(self) -> None:
        for sink in self.files:
            sink.close()

    def __enter__(self) -> "Loggers":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()


def _open_writer(channel: str, path: str, verbose: bool, console: Any) -> CompositeWriter:
    try:
        return new_writer(path, verbose, console)
    except OSError as exc:
        raise LoggerSetupError(channel, exc) from exc


def _file_sinks(writer: CompositeWriter) -> list[FileSink]:
    return [sink for sink in writer.sinks if isinstance(sink, FileSink)]


def build_loggers(
    settings: LoggingSettings,
    *,
    stdout: Optional[Any] = None,
    stderr: Optional[Any] = None,
) -> Loggers:
    """
    Build the info and error loggers described by ``settings``.

    Args:
        settings: Log file paths, verbosity and timestamp switch
        stdout: Console stream of the info channel (default: sys.stdout)
        stderr: Console stream of the error channel (default: sys.stderr)

    Raises:
        LoggerSetupError: A log file could not be opened. No file stays
            open when this is raised.
    """
    stdout = sys.stdout if stdout is None else stdout
    stderr = sys.stderr if stderr is None else stderr

    error_writer = _open_writer("error", settings.error_path, settings.verbose, stderr)
    try:
        info_writer = _open_writer("info", settings.info_path, settings.verbose, stdout)
    except LoggerSetupError:
        for sink in _file_sinks(error_writer):
            sink.close()
        raise

    with_datetime = not settings.no_datetime
    return Loggers(
        info=_make_logger(info_writer, with_datetime=with_datetime),
        error=_make_logger(error_writer, with_datetime=with_datetime),
        files=_file_sinks(error_writer) + _file_sinks(info_writer),
    )
