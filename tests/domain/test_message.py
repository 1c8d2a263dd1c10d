from __future__ import annotations

import dataclasses
from datetime import datetime, timedelta, timezone

import pytest

from lib_log_media.domain.levels import LogLevel
from lib_log_media.domain.message import Message
from tests.os_markers import OS_AGNOSTIC


@OS_AGNOSTIC
def test_message_requires_timezone_aware_time() -> None:
    with pytest.raises(ValueError, match="timezone-aware"):
        Message(id="msg-1", level=LogLevel.INFO, text="hello", time=datetime(2025, 12, 30, 10, 0))


@OS_AGNOSTIC
def test_message_normalises_time_to_utc() -> None:
    plus_two = timezone(timedelta(hours=2))
    message = Message(id="msg-1", level=LogLevel.INFO, text="hello", time=datetime(2025, 12, 30, 12, 0, tzinfo=plus_two))

    assert message.time.tzinfo is timezone.utc
    assert message.time.hour == 10


@OS_AGNOSTIC
def test_message_allows_empty_text(message_factory) -> None:
    assert message_factory(text="").text == ""


@OS_AGNOSTIC
def test_message_rejects_empty_id(message_factory) -> None:
    with pytest.raises(ValueError, match="id"):
        message_factory(id="")


@OS_AGNOSTIC
def test_message_is_frozen(message_factory) -> None:
    message = message_factory()
    with pytest.raises(dataclasses.FrozenInstanceError):
        message.text = "changed"  # type: ignore[misc]


@OS_AGNOSTIC
def test_message_context_is_copied(message_factory) -> None:
    context = {"user": 1}
    message = message_factory(context=context)
    context["user"] = 2

    assert message.context == {"user": 1}


@OS_AGNOSTIC
def test_to_dict_uses_wire_field_names_in_order(message_factory) -> None:
    data = message_factory(text="User logged in", level=LogLevel.NOTICE, context={"user_id": 123}).to_dict()

    assert list(data) == ["id", "level", "message", "context", "time"]
    assert data["message"] == "User logged in"
    assert data["level"] == "NOTICE"
    assert data["context"] == {"user_id": 123}
    assert data["time"] == "2025-12-30T10:30:45.123456+00:00"


@OS_AGNOSTIC
def test_to_dict_keeps_microseconds_when_zero(message_factory) -> None:
    message = message_factory(time=datetime(2025, 1, 1, tzinfo=timezone.utc))
    assert message.to_dict()["time"] == "2025-01-01T00:00:00.000000+00:00"
