"""Immutable log message travelling from the dispatcher to every medium.

Purpose
-------
Capture one log event exactly once: identifier and timestamp are fixed at
creation so every medium persists the same values, whenever it writes.

Contents
--------
* :class:`Message` frozen dataclass with the wire projection.
* ``_ensure_aware`` timestamp guard.

System Role
-----------
Domain value consumed by :mod:`lib_log_media.domain.codec` and by all adapters.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from .levels import LogLevel


def _ensure_aware(ts: datetime) -> datetime:
    """Validate that ``ts`` is timezone-aware and normalise to UTC."""
    if ts.tzinfo is None or ts.tzinfo.utcoffset(ts) is None:
        raise ValueError("time must be timezone-aware")
    return ts.astimezone(timezone.utc)


def format_time(ts: datetime) -> str:
    """Render ``ts`` as ISO-8601 with microseconds and UTC offset.

    Examples
    --------
    >>> format_time(datetime(2025, 12, 30, 10, 30, 45, 123456, tzinfo=timezone.utc))
    '2025-12-30T10:30:45.123456+00:00'
    """

    return ts.isoformat(timespec="microseconds")


@dataclass(slots=True, frozen=True)
class Message:
    """One log event.

    Attributes
    ----------
    id:
        Random UUID string assigned at creation.
    level:
        :class:`LogLevel` severity.
    text:
        Human-readable message; empty strings are allowed.
    context:
        Shallow copy of caller-supplied JSON-style data.
    time:
        Creation timestamp in UTC.
    """

    id: str
    level: LogLevel
    text: str
    context: dict[str, Any] = field(default_factory=dict)
    time: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("id must not be empty")
        object.__setattr__(self, "time", _ensure_aware(self.time))
        object.__setattr__(self, "context", dict(self.context or {}))

    def to_dict(self) -> dict[str, Any]:
        """Return the wire projection; key order is part of the format."""

        return {
            "id": self.id,
            "level": self.level.value,
            "message": self.text,
            "context": dict(self.context),
            "time": format_time(self.time),
        }


__all__ = ["Message", "format_time"]
