"""Command-line entry point of the consumer front end."""

from __future__ import annotations

import argparse
from typing import Any, Callable, Optional, Sequence

from .config import load_logging_settings
from .exceptions import ConsumerError
from .exit import handle_exit_error
from .logging import Loggers, build_loggers

Consumer = Callable[[Loggers], Any]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rabbitmq-cli-consumer",
        description="Consume RabbitMQ messages and hand them to an executable",
    )
    parser.add_argument(
        "-c",
        "--configuration",
        help="Location of the INI configuration file",
    )
    parser.add_argument(
        "-V",
        "--verbose",
        action="store_true",
        help="Also write info and error logs to the console",
    )
    parser.add_argument(
        "--no-datetime",
        action="store_true",
        help="Do not prefix log entries with date and time",
    )
    return parser


def _flag_overrides(args: argparse.Namespace) -> dict[str, Any]:
    """Flags only switch options on, never off."""
    overrides: dict[str, Any] = {}
    if args.verbose:
        overrides["verbose"] = True
    if args.no_datetime:
        overrides["no_datetime"] = True
    return overrides


def main(consumer: Consumer, argv: Optional[Sequence[str]] = None) -> None:
    """
    Load the configuration, build the loggers and run ``consumer``.

    Failures before the loggers exist are reported on stderr. Any error
    raised by ``consumer`` goes to the error logger; both paths end in
    ``handle_exit_error``. Log files are closed on every exit path.
    """
    args = build_parser().parse_args(argv)

    try:
        settings = load_logging_settings(args.configuration, **_flag_overrides(args))
        loggers = build_loggers(settings)
    except ConsumerError as exc:
        handle_exit_error(exc)
        return

    with loggers:
        try:
            consumer(loggers)
        except Exception as exc:
            handle_exit_error(exc, logger=loggers.error)
