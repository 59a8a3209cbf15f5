"""
Pytest fixtures for service_logger tests. Loggers write to an in-memory sink.
"""

from __future__ import annotations

import io
import re

import pytest

ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")


@pytest.fixture
def sink():
    """In-memory text stream passed as the logger's output file."""
    return io.StringIO()


@pytest.fixture
def clean_env(tmp_path, monkeypatch):
    """Unset logger env vars and run from an empty dir so no .env is picked up."""
    for name in ("LOG_LEVEL", "LOG_DISABLE_JSON", "APP_ENV"):
        # setenv first so teardown also undoes values loaded from .env
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    return monkeypatch


@pytest.fixture
def json_config():
    from service_logger.config import LoggerConfig

    return LoggerConfig(level="debug", environment="production")


@pytest.fixture
def plain_config():
    from service_logger.config import LoggerConfig

    return LoggerConfig(level="debug", environment="production", disable_json=True)


@pytest.fixture
def dev_config():
    from service_logger.config import LoggerConfig

    return LoggerConfig(level="debug")


def output_lines(stream: io.StringIO) -> list[str]:
    return stream.getvalue().splitlines()


def strip_ansi(text: str) -> str:
    return ANSI_RE.sub("", text)
