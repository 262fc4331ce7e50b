"""
Error taxonomy for the consumer front end.

Errors are plain exceptions chained with ``raise ... from ...``; the
explicit cause chain doubles as the message chain rendered on exit.
"""

from __future__ import annotations

from typing import Optional


class ConsumerError(Exception):
    """Root of all errors raised by this package."""


class ExitError(ConsumerError):
    """Failure that requests a specific process exit status.

    The message may be empty, in which case nothing is logged on exit.
    """

    def __init__(self, message: str = "", exit_code: int = 1) -> None:
        super().__init__(message)
        self.message = message
        self.exit_code = exit_code


class ContextError(ConsumerError):
    """Outer context message wrapped around another error."""


class ConfigurationError(ConsumerError):
    """The configuration source could not be read or validated."""


class LoggerSetupError(ConsumerError):
    """A log destination could not be opened.

    Args:
        channel: Severity channel that failed ("info" or "error")
        cause: Underlying OS error
    """

    def __init__(self, channel: str, cause: OSError) -> None:
        super().__init__(f"failed creating {channel} log: {cause}")
        self.channel = channel


# =============================================================================
# Chain helpers
# =============================================================================


def with_message(err: BaseException, message: str) -> ContextError:
    """Wrap ``err`` with an outer context message."""
    wrapped = ContextError(message)
    wrapped.__cause__ = err
    return wrapped


def _walk(err: BaseException) -> list[BaseException]:
    """Errors of the explicit cause chain, outermost first."""
    chain: list[BaseException] = []
    current: Optional[BaseException] = err
    while current is not None and not any(current is seen for seen in chain):
        chain.append(current)
        current = current.__cause__
    return chain


def message_chain(err: BaseException) -> list[str]:
    """Non-empty messages of the cause chain, innermost cause first."""
    return [str(e) for e in reversed(_walk(err)) if str(e)]


def exit_code_of(err: BaseException) -> Optional[int]:
    """Explicit exit status carried by the chain, outermost wins."""
    for e in _walk(err):
        code = getattr(e, "exit_code", None)
        if isinstance(code, int):
            return code
    return None
