"""Message creation use case."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from lib_log_media.application.ports.time import ClockPort, IdProvider
from lib_log_media.domain.levels import LogLevel
from lib_log_media.domain.message import Message


def create_message(
    level: LogLevel,
    text: str,
    context: Mapping[str, Any] | None = None,
    *,
    clock: ClockPort,
    id_provider: IdProvider,
) -> Message:
    """Build a :class:`Message` with a fresh identifier and the current time.

    Performs no I/O. Context values are not checked here; encodability is
    decided by :func:`lib_log_media.domain.codec.validate` at write time.
    """

    return Message(
        id=id_provider(),
        level=level,
        text=text,
        context=dict(context or {}),
        time=clock.now(),
    )


__all__ = ["create_message"]
