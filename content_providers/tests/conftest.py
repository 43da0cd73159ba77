"""Pytest configuration for the content providers test suite.

Provides environment isolation for provider configuration (env vars and the
config file cache) and a structured log capture attached to the shared base
logger.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Iterator, List, Optional

import pytest

from content_providers.base.logging import BASE_LOGGER_NAME, get_logger
from content_providers.config import reset_config_cache

_PROVIDER_ENV_VARS = (
    "OPENROUTER_API_KEY",
    "OPENROUTER_MODEL",
    "OPENROUTER_BASE_URL",
    "OPENROUTER_REFERER",
    "OPENROUTER_TITLE",
    "PROVIDERS_CONFIG_FILE",
    "PROVIDERS_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def isolated_provider_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Clear provider env vars and the config file cache around every test."""

    for name in _PROVIDER_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_config_cache()
    yield
    reset_config_cache()


class _ListHandler(logging.Handler):
    """Capture log records into a list for assertions."""

    def __init__(self) -> None:
        super().__init__(level=logging.DEBUG)
        self.records: List[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)


class LogCapture:
    """Decoded view over captured structured events."""

    def __init__(self, handler: _ListHandler) -> None:
        self._handler = handler

    @property
    def records(self) -> List[logging.LogRecord]:
        return self._handler.records

    def events(self, name: Optional[str] = None) -> List[Dict[str, Any]]:
        out: List[Dict[str, Any]] = []
        for record in self._handler.records:
            try:
                payload = json.loads(record.getMessage())
            except ValueError:
                continue
            if isinstance(payload, dict) and (name is None or payload.get("event") == name):
                payload["_level"] = record.levelno
                out.append(payload)
        return out


@pytest.fixture()
def log_capture() -> Iterator[LogCapture]:
    """Attach a DEBUG-level collector to the base logger (which does not propagate)."""

    base = get_logger(BASE_LOGGER_NAME)
    handler = _ListHandler()
    previous_level = base.level
    base.addHandler(handler)
    base.setLevel(logging.DEBUG)
    try:
        yield LogCapture(handler)
    finally:
        base.removeHandler(handler)
        base.setLevel(previous_level)
