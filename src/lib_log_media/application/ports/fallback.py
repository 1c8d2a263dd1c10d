"""Port for the always-available fallback channel."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class FallbackPort(Protocol):
    """Emit a single diagnostic line when a medium cannot be used."""

    def emit(self, line: str) -> None:
        """Write ``line`` followed by a newline."""


__all__ = ["FallbackPort"]
