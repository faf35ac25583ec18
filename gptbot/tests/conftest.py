"""Pytest configuration for the engine test suite.

Isolates every test from the developer's environment (API keys, config file,
``.env``) and provides a list handler for asserting on structured log events.
"""

from __future__ import annotations

import json
import logging
from typing import Iterator, List

import pytest

from gptbot.base.logging import BASE_LOGGER_NAME, get_logger
from gptbot.config import reset_config_cache

_ISOLATED_ENV = (
    "OPENAI_API_KEY",
    "OPENAI_MODEL",
    "OPENAI_BASE_URL",
    "OPENAI_ORGANIZATION",
    "GPTBOT_CONFIG_FILE",
    "GPTBOT_LOG_LEVEL",
    "GPTBOT_HTTP_TIMEOUT_SECONDS",
    "GPTBOT_CONNECT_TIMEOUT_SECONDS",
)


class ListHandler(logging.Handler):
    """Capture log records and decode the JSON payloads."""

    def __init__(self) -> None:
        super().__init__(level=logging.DEBUG)
        self.messages: List[str] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.messages.append(record.getMessage())

    def events(self, name: str | None = None) -> List[dict]:
        out = []
        for msg in self.messages:
            payload = json.loads(msg)
            if name is None or payload.get("event") == name:
                out.append(payload)
        return out


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> Iterator[None]:
    """Clear gptbot-related env vars and point ``.env`` lookups at an empty dir."""
    for name in _ISOLATED_ENV:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("DOTENV_FILE", str(tmp_path / "missing.env"))
    reset_config_cache()
    yield
    reset_config_cache()


@pytest.fixture()
def log_records() -> Iterator[ListHandler]:
    """Attach a ``ListHandler`` to the shared ``gptbot`` logger for one test."""
    logger = get_logger(BASE_LOGGER_NAME)
    handler = ListHandler()
    logger.addHandler(handler)
    previous = logger.level
    logger.setLevel(logging.DEBUG)
    yield handler
    logger.removeHandler(handler)
    logger.setLevel(previous)
