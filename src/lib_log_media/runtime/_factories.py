"""Concrete clock and identifier providers used by the composition root."""

from __future__ import annotations

from datetime import datetime, timezone
from uuid import uuid4

from lib_log_media.application.ports import ClockPort, IdProvider


class SystemClock(ClockPort):
    """Clock returning timezone-aware UTC timestamps."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class UuidProvider(IdProvider):
    """Generate random (version 4) UUIDs in canonical hyphenated form."""

    def __call__(self) -> str:
        return str(uuid4())


__all__ = ["SystemClock", "UuidProvider"]
