"""
Structlog processors producing plain text log lines.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from structlog.typing import EventDict, WrappedLogger

from ..exceptions import message_chain

TIMESTAMP_FORMAT = "%Y/%m/%d %H:%M:%S"


def add_timestamp(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Add a local ``YYYY/MM/DD hh:mm:ss`` timestamp to the log event."""
    event_dict["timestamp"] = datetime.now().strftime(TIMESTAMP_FORMAT)
    return event_dict


def render_message(event: Any) -> str:
    """Render an event; exceptions become their message chain, one per line."""
    if isinstance(event, BaseException):
        return "\n".join(message_chain(event))
    return str(event)


def render_line(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> str:
    """Render the event dict as ``[timestamp ]message[ key=value...]``."""
    timestamp = event_dict.pop("timestamp", None)
    message = render_message(event_dict.pop("event", ""))
    traceback = event_dict.pop("exception", None)

    extras = [f"{k}={v}" for k, v in event_dict.items()]
    if extras:
        message = f"{message} " + " ".join(extras)
    if traceback:
        message = f"{message}\n{traceback.rstrip()}"

    if timestamp:
        return f"{timestamp} {message}"
    return message
