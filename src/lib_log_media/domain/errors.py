"""Failure taxonomy raised by media and their setup routines.

Setup failures (:class:`FileSetupFailure`, :class:`StoreFailure` raised while
creating a table) surface from media constructors. Write failures surface from
``MediumPort.write`` and are contained by the dispatcher.
"""

from __future__ import annotations

from typing import Any


class LogMediaError(Exception):
    """Base class for every failure raised by the media layer."""

    def __init__(self, reason: str, *, target: str | None = None) -> None:
        self.reason = reason
        self.target = target
        super().__init__(f"{reason}: {target}" if target else reason)


class EncodingFailure(LogMediaError):
    """The message projection cannot be represented as JSON."""

    def __init__(self, data: Any, reason: str) -> None:
        super().__init__(f"Failed to encode message to JSON ({reason})")
        self.data = data


class FileSetupFailure(LogMediaError):
    """Parent directory or target file is unusable at configuration time."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(reason, target=path)
        self.path = path


class FileLockFailure(LogMediaError):
    """The log file could not be opened or exclusively locked."""

    def __init__(self, path: str, reason: str = "Failed to acquire lock for log file") -> None:
        super().__init__(reason, target=path)
        self.path = path


class FileWriteFailure(LogMediaError):
    """The write call itself failed after the file was opened."""

    def __init__(self, path: str, reason: str = "Failed to write to log file") -> None:
        super().__init__(reason, target=path)
        self.path = path


class StoreFailure(LogMediaError):
    """The SQLite store could not be opened, prepared, or written."""

    def __init__(self, path: str, reason: str, *, table: str | None = None) -> None:
        target = f"{path}@{table}" if table else path
        super().__init__(reason, target=target)
        self.path = path
        self.table = table


__all__ = [
    "EncodingFailure",
    "FileLockFailure",
    "FileSetupFailure",
    "FileWriteFailure",
    "LogMediaError",
    "StoreFailure",
]
