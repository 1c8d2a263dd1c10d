from __future__ import annotations

import json

import pytest

from lib_log_media.adapters import syslog as syslog_module
from lib_log_media.adapters.syslog import SyslogMedium, priority_for, write_syslog
from lib_log_media.domain import EncodingFailure, LogLevel
from tests.conftest import RecordingFallback, SyslogRecorder


@pytest.mark.parametrize(
    "level, priority",
    [
        (LogLevel.EMERGENCY, 0),
        (LogLevel.ALERT, 1),
        (LogLevel.CRITICAL, 2),
        (LogLevel.ERROR, 3),
        (LogLevel.WARNING, 4),
        (LogLevel.NOTICE, 5),
        (LogLevel.INFO, 6),
        (LogLevel.DEBUG, 7),
    ],
)
def test_levels_map_to_syslog_priorities(level: LogLevel, priority: int) -> None:
    assert priority_for(level.value) == priority


def test_unknown_level_names_map_to_info() -> None:
    assert priority_for("TRACE") == 6


def test_medium_sends_json_line_with_priority(message_factory, fallback: RecordingFallback, syslog_sender: SyslogRecorder) -> None:
    medium = SyslogMedium(fallback=fallback, sender=syslog_sender)

    medium.write(message_factory(text="disk failing", level=LogLevel.CRITICAL, context={"disk": "sda"}))

    priority, line = syslog_sender.calls[0]
    assert priority == 2
    assert json.loads(line)["context"] == {"disk": "sda"}
    assert fallback.lines == []


def test_missing_system_facility_falls_back_to_stderr_channel(
    monkeypatch: pytest.MonkeyPatch, message_factory, fallback: RecordingFallback
) -> None:
    monkeypatch.setattr(syslog_module, "_system_sender", lambda: None)
    medium = SyslogMedium(fallback=fallback)

    medium.write(message_factory(text="no syslog here"))

    assert len(fallback.lines) == 1
    assert fallback.lines[0].startswith("[SYSLOG] {")
    assert json.loads(fallback.lines[0][len("[SYSLOG] ") :])["message"] == "no syslog here"


def test_write_syslog_reports_success_on_fallback(fallback: RecordingFallback, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(syslog_module, "_system_sender", lambda: None)
    assert write_syslog(6, "line", sender=None, fallback=fallback) is True


def test_unencodable_message_raises(message_factory, fallback: RecordingFallback, syslog_sender: SyslogRecorder) -> None:
    medium = SyslogMedium(fallback=fallback, sender=syslog_sender)

    with pytest.raises(EncodingFailure, match="syslog"):
        medium.write(message_factory(context={"bad": object()}))

    assert syslog_sender.calls == []
