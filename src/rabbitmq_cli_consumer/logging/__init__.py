"""
Logging for the consumer front end.

Two severity channels (info, error) are built from ``LoggingSettings``.
Each channel fans out to an optional log file and an optional console
stream, with an optional ``YYYY/MM/DD hh:mm:ss`` prefix on every entry.

Library: structlog (processor pipeline over a plain writer).
"""

from .core import Loggers, build_loggers, get_logger
from .sinks import CompositeWriter, new_writer

__all__ = ["CompositeWriter", "Loggers", "build_loggers", "get_logger", "new_writer"]
