from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timezone
from typing import Any

import pytest

from lib_log_media.domain import LogLevel, Message, SetupRegistry
from lib_log_media.runtime import LoggingRuntime, build_runtime, reset_runtime

FIXED_TIME = datetime(2025, 12, 30, 10, 30, 45, 123456, tzinfo=timezone.utc)


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", "os_agnostic: test runs on every platform")


class RecordingFallback:
    """Collect fallback lines instead of printing them."""

    def __init__(self) -> None:
        self.lines: list[str] = []

    def emit(self, line: str) -> None:
        self.lines.append(line)


class FixedClock:
    def now(self) -> datetime:
        return FIXED_TIME


class CounterIds:
    def __init__(self) -> None:
        self.counter = 0

    def __call__(self) -> str:
        self.counter += 1
        return f"msg-{self.counter:03d}"


class SyslogRecorder:
    def __init__(self) -> None:
        self.calls: list[tuple[int, str]] = []

    def __call__(self, priority: int, line: str) -> None:
        self.calls.append((priority, line))


@pytest.fixture(autouse=True)
def _reset_process_runtime() -> Any:
    reset_runtime()
    yield
    reset_runtime()


@pytest.fixture
def fallback() -> RecordingFallback:
    return RecordingFallback()


@pytest.fixture
def syslog_sender() -> SyslogRecorder:
    return SyslogRecorder()


@pytest.fixture
def runtime(fallback: RecordingFallback, syslog_sender: SyslogRecorder) -> LoggingRuntime:
    return build_runtime(fallback=fallback, clock=FixedClock(), id_provider=CounterIds(), syslog_sender=syslog_sender)


@pytest.fixture
def setup_registry() -> SetupRegistry:
    return SetupRegistry()


@pytest.fixture
def message_factory() -> Callable[..., Message]:
    def _factory(text: str = "hello", level: LogLevel = LogLevel.INFO, context: dict[str, Any] | None = None, **overrides: Any) -> Message:
        fields: dict[str, Any] = {
            "id": "msg-001",
            "level": level,
            "text": text,
            "context": context or {},
            "time": FIXED_TIME,
        }
        fields.update(overrides)
        return Message(**fields)

    return _factory
