"""Medium port describing the single write contract every destination meets.

Purpose
-------
Define the extension point of the library: anything that can take a
:class:`Message` and persist it (or raise a :class:`LogMediaError`) can be
handed to the dispatcher.

System Role
-----------
The dispatcher depends only on this protocol; syslog, file, and SQLite
adapters, as well as third-party sinks, implement it.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from lib_log_media.domain.message import Message


@runtime_checkable
class MediumPort(Protocol):
    """Persist one message to a configured destination."""

    name: str

    def write(self, message: Message) -> None:
        """Write ``message`` or raise a destination-specific failure."""


__all__ = ["MediumPort"]
