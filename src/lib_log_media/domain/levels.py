"""Severity levels understood by every medium.

Purpose
-------
Offer the closed set of eight severities a message can carry. Levels are
compared by name only; the single numeric use (syslog priorities) lives in the
syslog adapter.

Contents
--------
* :class:`LogLevel` enum with name-based conversion helpers.
* :func:`coerce_level` accepting either enum members or strings.
"""

from __future__ import annotations

from enum import Enum


class LogLevel(Enum):
    """Enumerated severities, valued by their canonical upper-case names."""

    EMERGENCY = "EMERGENCY"
    ALERT = "ALERT"
    CRITICAL = "CRITICAL"
    ERROR = "ERROR"
    WARNING = "WARNING"
    NOTICE = "NOTICE"
    INFO = "INFO"
    DEBUG = "DEBUG"

    @property
    def severity(self) -> str:
        """Return the lowercase severity name."""

        return self.name.lower()

    @classmethod
    def from_name(cls, name: str) -> "LogLevel":
        normalized = name.strip().upper()
        try:
            return cls[normalized]
        except KeyError as exc:
            raise ValueError(f"Unknown log level: {name!r}") from exc


def coerce_level(level: str | LogLevel, default: LogLevel | None = None) -> LogLevel:
    """Return ``level`` as a :class:`LogLevel`, parsing strings by name.

    Unknown names raise :class:`ValueError` unless ``default`` is given, in
    which case ``default`` is returned.

    Examples
    --------
    >>> coerce_level("error") is LogLevel.ERROR
    True
    >>> coerce_level(LogLevel.NOTICE) is LogLevel.NOTICE
    True
    >>> coerce_level("verbose", default=LogLevel.INFO) is LogLevel.INFO
    True
    """

    if isinstance(level, LogLevel):
        return level
    if isinstance(level, str) and level.strip().upper() in LogLevel.__members__:
        return LogLevel.from_name(level)
    if default is not None:
        return default
    raise ValueError(f"Unknown log level: {level!r}")


__all__ = ["LogLevel", "coerce_level"]
