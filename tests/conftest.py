"""Shared test fixtures for all test modules."""

from collections.abc import Callable, Mapping
from datetime import UTC, datetime
from typing import Any

import pytest

from gelfkit.adapters.sinks.in_memory import InMemoryGelfSink
from gelfkit.core.converter import GelfConverter
from gelfkit.core.models import LogEvent, LogLevel
from gelfkit.core.ports import ContextUnavailable

FIXED_HOST = "test-host"
FIXED_TIMESTAMP = datetime(2023, 12, 11, 13, 6, 40, 250000, tzinfo=UTC)


class StaticAmbientContext:
    """Ambient context accessor returning a fixed result."""

    def __init__(self, result: Mapping[str, str] | ContextUnavailable) -> None:
        self.result = result

    def get_ambient_context(self) -> Mapping[str, str] | ContextUnavailable:
        return self.result


@pytest.fixture
def make_event() -> Callable[..., LogEvent]:
    """Factory fixture for LogEvent objects with sensible defaults.

    Used in tests to build events while only naming the fields under test.
    """

    def _event(
        message: str | None = "test message",
        level: Any = LogLevel.INFO,
        **kwargs: Any,
    ) -> LogEvent:
        kwargs.setdefault("timestamp", FIXED_TIMESTAMP)
        kwargs.setdefault("logger_name", "tests")
        return LogEvent(message=message, level=level, **kwargs)

    return _event


@pytest.fixture
def converter() -> GelfConverter:
    """Converter with a fixed host name and no ambient context."""
    return GelfConverter(host_resolver=lambda: FIXED_HOST)


@pytest.fixture
def ambient_converter() -> Callable[..., GelfConverter]:
    """Factory fixture for converters reading a static ambient context."""

    def _converter(result: Mapping[str, str] | ContextUnavailable) -> GelfConverter:
        return GelfConverter(
            host_resolver=lambda: FIXED_HOST,
            ambient_context=StaticAmbientContext(result),
        )

    return _converter


@pytest.fixture
def sink() -> InMemoryGelfSink:
    """Fixture providing an empty in-memory sink."""
    return InMemoryGelfSink()
