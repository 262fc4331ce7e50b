import os

import pytest

from rabbitmq_cli_consumer import exit as exit_module


@pytest.fixture(autouse=True)
def clean_logging_env(monkeypatch):
    """Keep RCC_LOG_* variables of the calling shell out of the settings."""
    for name in list(os.environ):
        if name.startswith("RCC_LOG_"):
            monkeypatch.delenv(name)


@pytest.fixture
def exit_codes(monkeypatch):
    """Record termination requests instead of exiting the test process."""
    codes: list[int] = []
    monkeypatch.setattr(exit_module, "exit_process", codes.append)
    return codes
