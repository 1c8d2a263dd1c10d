"""File media appending one JSON object per line.

Purpose
-------
Persist messages to plain files either with an exclusive advisory lock
(:class:`FileLockMedium`, safe across processes) or without any locking
(:class:`FilePutMedium`, faster but only safe for a single writer: concurrent
writers may interleave records).

Contents
--------
* :func:`ensure_exists` - one-time path validation run at construction.
* :func:`lock_and_write` / :func:`append` - per-message write primitives.
* :class:`FileLockMedium` / :class:`FilePutMedium` - :class:`MediumPort`
  implementations.

System Role
-----------
Configuration problems (missing or unwritable parent, parent that is a regular
file) raise :class:`FileSetupFailure` when the medium is built, not on the
first log call.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import BinaryIO

from lib_log_media.application.ports.media import MediumPort
from lib_log_media.domain.codec import encode, validate
from lib_log_media.domain.errors import EncodingFailure, FileLockFailure, FileSetupFailure, FileWriteFailure
from lib_log_media.domain.message import Message
from lib_log_media.domain.setup_registry import SetupRegistry

logger = logging.getLogger(__name__)

RECORD_SEPARATOR = b"\n"


def _reason(text: str, exc: OSError) -> str:
    detail = exc.strerror or str(exc)
    return f"{text} ({detail})"


def ensure_exists(path: str | os.PathLike[str]) -> Path:
    """Make sure ``path`` can be appended to, creating what is missing.

    Raises
    ------
    FileSetupFailure
        When the parent is not a directory, cannot be created, is not
        writable, or the file itself cannot be created.
    """

    target = Path(path)
    parent = target.parent

    if parent.exists() and not parent.is_dir():
        raise FileSetupFailure(str(parent), "Parent path is not a directory")

    if not parent.exists():
        try:
            parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise FileSetupFailure(str(parent), _reason("Cannot create directory", exc)) from exc

    if not os.access(parent, os.W_OK):
        raise FileSetupFailure(str(parent), "Parent directory is not writable")

    if target.is_dir():
        raise FileSetupFailure(str(target), "Target path is a directory")

    if not target.exists():
        try:
            target.touch(exist_ok=True)
        except OSError as exc:
            raise FileSetupFailure(str(target), _reason("Cannot create file", exc)) from exc

    logger.debug("log file ready: %s", target)
    return target


def _flock(handle: BinaryIO, path: Path, *, exclusive: bool) -> None:
    try:
        import fcntl
    except ImportError as exc:  # pragma: no cover - non-POSIX platforms
        raise FileLockFailure(str(path), "File locking is not supported on this platform") from exc
    fcntl.flock(handle.fileno(), fcntl.LOCK_EX if exclusive else fcntl.LOCK_UN)


def lock_and_write(path: str | os.PathLike[str], data: bytes) -> None:
    """Append ``data`` plus the record separator under an exclusive lock.

    The lock is held only for this call and is released, and the handle
    closed, on every exit path. Acquisition blocks until the lock is free.
    """

    target = Path(path)
    try:
        handle = open(target, "ab")
    except OSError as exc:
        raise FileLockFailure(str(target), _reason("Failed to open log file", exc)) from exc

    try:
        try:
            _flock(handle, target, exclusive=True)
        except OSError as exc:
            raise FileLockFailure(str(target), _reason("Failed to acquire lock for log file", exc)) from exc
        try:
            handle.write(data + RECORD_SEPARATOR)
            handle.flush()
        except OSError as exc:
            raise FileWriteFailure(str(target), _reason("Failed to write to log file", exc)) from exc
        finally:
            _flock(handle, target, exclusive=False)
    finally:
        handle.close()


def append(path: str | os.PathLike[str], data: bytes) -> None:
    """Append ``data`` plus the record separator without locking."""

    target = Path(path)
    try:
        with open(target, "ab") as handle:
            handle.write(data + RECORD_SEPARATOR)
    except OSError as exc:
        raise FileWriteFailure(str(target), _reason("Failed to write to log file", exc)) from exc


def _encode_checked(message: Message) -> bytes:
    if not validate(message):
        raise EncodingFailure(message.to_dict(), "message cannot be JSON encoded")
    return encode(message)


class _FileMedium(MediumPort):
    _setup_prefix = "file"

    def __init__(self, path: str | os.PathLike[str], *, setup_registry: SetupRegistry | None = None) -> None:
        self.path = Path(path)
        self.name = f"file {self.path}"
        registry = setup_registry if setup_registry is not None else SetupRegistry()
        key = f"{self._setup_prefix}:{os.path.abspath(self.path)}"
        registry.once(key, lambda: ensure_exists(self.path))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self.path)!r})"


class FileLockMedium(_FileMedium):
    """Append messages under an exclusive ``flock``; safe for many writers."""

    _setup_prefix = "file_lock"

    def write(self, message: Message) -> None:
        lock_and_write(self.path, _encode_checked(message))


class FilePutMedium(_FileMedium):
    """Append messages without locking; only safe for a single writer."""

    _setup_prefix = "file_put"

    def write(self, message: Message) -> None:
        append(self.path, _encode_checked(message))


__all__ = [
    "FileLockMedium",
    "FilePutMedium",
    "RECORD_SEPARATOR",
    "append",
    "ensure_exists",
    "lock_and_write",
]
