"""
Translation of a terminal error into a log entry and a process exit status.
"""

from __future__ import annotations

import sys
from typing import Any, Callable, Final, Optional

from .exceptions import exit_code_of, message_chain
from .logging import get_logger

EXIT_OK: Final[int] = 0
EXIT_FAILURE: Final[int] = 1

# Termination primitive; replaced in tests
exit_process: Callable[[int], Any] = sys.exit


def handle_exit_error(
    err: Optional[BaseException],
    *,
    logger: Optional[Any] = None,
    exit_func: Optional[Callable[[int], Any]] = None,
) -> None:
    """
    Log ``err`` and request process termination.

    - ``None``: nothing is logged and no exit is requested.
    - With an explicit exit status (``ExitError``): exit with that status,
      logging the message chain only when it is non-empty.
    - Otherwise: log the message chain and exit with ``EXIT_FAILURE``.

    The message chain is logged as one entry, innermost cause first, one
    message per line. Termination is requested even when the log write
    fails; the write error is re-raised afterwards.

    Args:
        err: Error returned by the consumer run
        logger: Error sink (default: timestamped stderr logger)
        exit_func: Termination primitive (default: ``exit_process``)
    """
    if err is None:
        return

    if logger is None:
        logger = get_logger()
    terminate = exit_func if exit_func is not None else exit_process

    code = exit_code_of(err)
    try:
        if message_chain(err):
            logger.error(err)
    finally:
        terminate(EXIT_FAILURE if code is None else code)
