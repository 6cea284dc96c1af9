"""Pytest configuration.

This configuration ensures:
1. Settings load with ENVIRONMENT=testing (JSON logs) unless overridden
2. Test markers are registered
3. Shared handler doubles are available as fixtures
"""

import os
from typing import Any
from unittest.mock import MagicMock

import pytest

# Must run before src.core.config is imported (settings load at import time)
os.environ.setdefault("ENVIRONMENT", "testing")


class RecordingHandler:
    """Handler double that records payloads and a shared call log.

    Attributes:
        name: Label written to the shared call log.
        received: Payloads this handler received, in order.
        call_log: Optional list shared between handlers to observe ordering.
    """

    def __init__(self, name: str, call_log: list[str] | None = None) -> None:
        self.name = name
        self.received: list[Any] = []
        self.call_log = call_log

    def update(self, payload: Any) -> None:
        self.received.append(payload)
        if self.call_log is not None:
            self.call_log.append(self.name)


class FailingHandler:
    """Handler double whose update always raises."""

    def __init__(self, error: Exception | None = None) -> None:
        self.error = error or RuntimeError("Handler intentionally failed")
        self.calls = 0

    def update(self, payload: Any) -> None:
        self.calls += 1
        raise self.error


class UnprintableError(Exception):
    """Exception whose str() itself raises."""

    def __str__(self) -> str:
        raise RuntimeError("__str__ is broken")


@pytest.fixture
def mock_logger() -> MagicMock:
    """Logger double satisfying LoggerProtocol."""
    return MagicMock()


@pytest.fixture
def call_log() -> list[str]:
    return []


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "integration: Integration tests with real structlog and wiring"
    )
