"""
Consumer Configuration Module.

The configuration file is INI formatted; this module only maps its
``[logs]`` section onto ``LoggingSettings``:

    [logs]
    error = /var/log/consumer/error.log
    info = /var/log/consumer/info.log
    verbose = On
    nodatetime = Off

Usage:
    from rabbitmq_cli_consumer.config import load_logging_settings

    settings = load_logging_settings("consumer.conf", verbose=True)
"""

from __future__ import annotations

import configparser
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from ..exceptions import ConfigurationError
from .logging import LoggingSettings

LOGS_SECTION = "logs"

# INI key -> LoggingSettings field
_LOGS_KEYS = {
    "error": "error_path",
    "info": "info_path",
    "verbose": "verbose",
    "nodatetime": "no_datetime",
}


def logs_section(text: str) -> dict[str, str]:
    """Recognized ``[logs]`` values of an INI document, keyed by field name."""
    parser = configparser.ConfigParser(interpolation=None)
    try:
        parser.read_string(text)
    except configparser.Error as exc:
        raise ConfigurationError(f"failed parsing configuration: {exc}") from exc

    if not parser.has_section(LOGS_SECTION):
        return {}
    return {_LOGS_KEYS[key]: value for key, value in parser.items(LOGS_SECTION) if key in _LOGS_KEYS}


def _build(values: dict[str, Any], overrides: dict[str, Any]) -> LoggingSettings:
    try:
        return LoggingSettings(**{**values, **overrides})
    except ValidationError as exc:
        raise ConfigurationError(f"invalid logs configuration: {exc}") from exc


def logging_settings_from_string(text: str, **overrides: Any) -> LoggingSettings:
    """Build settings from INI text; ``overrides`` win over file values."""
    return _build(logs_section(text), overrides)


def load_logging_settings(path: str | Path | None = None, **overrides: Any) -> LoggingSettings:
    """
    Build settings from an INI file.

    Without ``path`` only the environment and ``overrides`` apply.

    Raises:
        ConfigurationError: The file is unreadable, malformed or holds
            invalid values
    """
    if path is None:
        return _build({}, overrides)
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigurationError(f"failed reading configuration: {exc}") from exc
    return logging_settings_from_string(text, **overrides)


__all__ = [
    "LoggingSettings",
    "load_logging_settings",
    "logging_settings_from_string",
    "logs_section",
]
