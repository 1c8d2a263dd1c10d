"""Runtime state container and access helpers."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from os import PathLike
from threading import RLock
from typing import Any

from lib_log_media.adapters import FileLockMedium, FilePutMedium, SqliteMedium, SyslogMedium
from lib_log_media.adapters.syslog import Sender
from lib_log_media.application.ports import FallbackPort
from lib_log_media.application.use_cases import DefaultMediaRegistry, Dispatcher
from lib_log_media.domain import LogLevel, Message, SetupRegistry


@dataclass(slots=True)
class LoggingRuntime:
    """Aggregate of live collaborators assembled by :func:`build_runtime`.

    Each runtime owns its setup cache and default media, so independent
    runtimes never observe each other's configuration.
    """

    setup_registry: SetupRegistry
    defaults: DefaultMediaRegistry
    fallback: FallbackPort
    dispatch: Dispatcher
    create: Callable[..., Message]
    syslog_sender: Sender | None = None

    def log(self, text: str, level: str | LogLevel, context: Mapping[str, Any] | None = None, *media: Any) -> None:
        self.dispatch(text, level, context, *media)

    def set_default_media(self, *media: Any) -> list[Any]:
        return self.defaults.set(*media)

    def get_default_media(self) -> list[Any]:
        return self.defaults.get()

    def system_log(self) -> SyslogMedium:
        return SyslogMedium(fallback=self.fallback, sender=self.syslog_sender)

    def file_put(self, path: str | PathLike[str]) -> FilePutMedium:
        return FilePutMedium(path, setup_registry=self.setup_registry)

    def file_lock(self, path: str | PathLike[str]) -> FileLockMedium:
        return FileLockMedium(path, setup_registry=self.setup_registry)

    def sqlite(self, path: str | PathLike[str], table_name: str | None = None) -> SqliteMedium:
        return SqliteMedium(path, table_name, setup_registry=self.setup_registry)


_STATE: LoggingRuntime | None = None
_STATE_LOCK = RLock()


def set_runtime(runtime: LoggingRuntime) -> None:
    """Install ``runtime`` as the process-wide instance."""

    with _STATE_LOCK:
        global _STATE
        _STATE = runtime


def clear_runtime() -> None:
    """Drop the process-wide runtime; the next access builds a fresh one."""

    with _STATE_LOCK:
        global _STATE
        _STATE = None


def current_runtime(factory: Callable[[], LoggingRuntime]) -> LoggingRuntime:
    """Return the process-wide runtime, building it with ``factory`` on first use."""

    with _STATE_LOCK:
        global _STATE
        if _STATE is None:
            _STATE = factory()
        return _STATE


def is_initialised() -> bool:
    with _STATE_LOCK:
        return _STATE is not None


__all__ = [
    "LoggingRuntime",
    "clear_runtime",
    "current_runtime",
    "is_initialised",
    "set_runtime",
]
