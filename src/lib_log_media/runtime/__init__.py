"""Runtime façade exposing the module-level logging API.

Purpose
-------
Offer the entry points host applications call (``log`` and the per-level
helpers, media factories, default-media accessors) without importing the inner
layers. All calls go through one process-wide :class:`LoggingRuntime`, built
lazily on first use; :func:`build_runtime` creates isolated runtimes for
callers that prefer explicit wiring.

Contents
--------
* ``log`` / ``emergency`` ... ``debug`` - dispatch a message.
* ``system_log`` / ``file_put`` / ``file_lock`` / ``sqlite`` - media factories.
* ``set_default_media`` / ``get_default_media`` - default-media registry.
* ``create_message`` / ``validate`` / ``encode`` - message helpers.
* ``reset_runtime`` - drop process-wide state (tests, reconfiguration).

System Role
-----------
Outer shell of the package: policy stays in the application layer, concrete
I/O stays in the adapters.
"""

from __future__ import annotations

from collections.abc import Mapping
from os import PathLike
from typing import Any

from lib_log_media.adapters import FileLockMedium, FilePutMedium, SqliteMedium, SyslogMedium
from lib_log_media.domain import LogLevel, Message, coerce_level, encode, validate

from ._composition import build_runtime
from ._state import LoggingRuntime, clear_runtime, current_runtime, is_initialised, set_runtime


def _runtime() -> LoggingRuntime:
    return current_runtime(build_runtime)


def log(text: str, level: str | LogLevel, context: Mapping[str, Any] | None = None, *media: Any) -> None:
    """Send ``text`` at ``level`` to ``media`` (or to the default media).

    Failures of individual media are reported on stderr and never raised.
    An unknown ``level`` name is logged at ``INFO``.

    Examples
    --------
    >>> received = []
    >>> log("hello world", "INFO", {"app": "demo"}, received.append)
    >>> received[0].text, received[0].level.value
    ('hello world', 'INFO')
    """

    _runtime().log(text, level, context, *media)


def emergency(text: str, context: Mapping[str, Any] | None = None, *media: Any) -> None:
    """System is unusable."""
    log(text, LogLevel.EMERGENCY, context, *media)


def alert(text: str, context: Mapping[str, Any] | None = None, *media: Any) -> None:
    """Action must be taken immediately."""
    log(text, LogLevel.ALERT, context, *media)


def critical(text: str, context: Mapping[str, Any] | None = None, *media: Any) -> None:
    log(text, LogLevel.CRITICAL, context, *media)


def error(text: str, context: Mapping[str, Any] | None = None, *media: Any) -> None:
    log(text, LogLevel.ERROR, context, *media)


def warning(text: str, context: Mapping[str, Any] | None = None, *media: Any) -> None:
    log(text, LogLevel.WARNING, context, *media)


def notice(text: str, context: Mapping[str, Any] | None = None, *media: Any) -> None:
    """Normal but significant condition."""
    log(text, LogLevel.NOTICE, context, *media)


def info(text: str, context: Mapping[str, Any] | None = None, *media: Any) -> None:
    log(text, LogLevel.INFO, context, *media)


def debug(text: str, context: Mapping[str, Any] | None = None, *media: Any) -> None:
    log(text, LogLevel.DEBUG, context, *media)


def set_default_media(*media: Any) -> list[Any]:
    """Replace the default media wholesale and return them.

    Examples
    --------
    >>> reset_runtime()
    >>> sink = lambda message: None
    >>> set_default_media(sink) == [sink]
    True
    >>> reset_runtime()
    """

    return _runtime().set_default_media(*media)


def get_default_media() -> list[Any]:
    """Return the default media, installing the system log when none are set."""

    return _runtime().get_default_media()


def system_log() -> SyslogMedium:
    """Return a medium writing to the operating system log."""

    return _runtime().system_log()


def file_put(path: str | PathLike[str]) -> FilePutMedium:
    """Return an unlocked append medium for ``path``.

    Suitable for single-process logging only; concurrent writers may
    interleave records. Raises :class:`FileSetupFailure` when the path is
    unusable.
    """

    return _runtime().file_put(path)


def file_lock(path: str | PathLike[str]) -> FileLockMedium:
    """Return an append medium for ``path`` guarded by an exclusive file lock.

    Raises :class:`FileSetupFailure` when the path is unusable.
    """

    return _runtime().file_lock(path)


def sqlite(path: str | PathLike[str], table_name: str | None = None) -> SqliteMedium:
    """Return a medium inserting rows into ``table_name`` (default ``logs``).

    The table is created immediately; :class:`StoreFailure` is raised when the
    database cannot be opened or prepared.
    """

    return _runtime().sqlite(path, table_name)


def create_message(level: str | LogLevel, text: str, context: Mapping[str, Any] | None = None) -> Message:
    """Build a :class:`Message` with a fresh id and the current UTC time.

    Unknown level names become ``INFO``.
    """

    return _runtime().create(coerce_level(level, default=LogLevel.INFO), text, context)


def reset_runtime() -> None:
    """Forget default media and completed setups of the process-wide runtime."""

    clear_runtime()


__all__ = [
    "LoggingRuntime",
    "alert",
    "build_runtime",
    "create_message",
    "critical",
    "current_runtime",
    "debug",
    "emergency",
    "encode",
    "error",
    "file_lock",
    "file_put",
    "get_default_media",
    "info",
    "is_initialised",
    "log",
    "notice",
    "reset_runtime",
    "set_default_media",
    "set_runtime",
    "sqlite",
    "system_log",
    "validate",
    "warning",
]
