"""System log medium.

Purpose
-------
Send each message, JSON-encoded, to the operating system log at the priority
matching its level.

Contents
--------
* :data:`_PRIORITY_MAP` - level name to syslog priority.
* :func:`priority_for` - lenient mapping used for arbitrary level strings.
* :func:`write_syslog` - primitive wrapping the platform facility.
* :class:`SyslogMedium` - concrete :class:`MediumPort`.

System Role
-----------
Default medium installed by the runtime when no defaults were configured.
"""

from __future__ import annotations

from collections.abc import Callable

from lib_log_media.application.ports.fallback import FallbackPort
from lib_log_media.application.ports.media import MediumPort
from lib_log_media.domain.codec import encode, validate
from lib_log_media.domain.errors import EncodingFailure
from lib_log_media.domain.message import Message

Sender = Callable[[int, str], None]

LOG_EMERG = 0
LOG_ALERT = 1
LOG_CRIT = 2
LOG_ERR = 3
LOG_WARNING = 4
LOG_NOTICE = 5
LOG_INFO = 6
LOG_DEBUG = 7

_PRIORITY_MAP = {
    "EMERGENCY": LOG_EMERG,
    "ALERT": LOG_ALERT,
    "CRITICAL": LOG_CRIT,
    "ERROR": LOG_ERR,
    "WARNING": LOG_WARNING,
    "NOTICE": LOG_NOTICE,
    "INFO": LOG_INFO,
    "DEBUG": LOG_DEBUG,
}
#: Syslog priorities (RFC 5424 numeric severities) keyed by level name.


def priority_for(level: str) -> int:
    """Return the syslog priority for ``level``; unknown names map to INFO.

    Examples
    --------
    >>> priority_for("error"), priority_for("EMERGENCY"), priority_for("verbose")
    (3, 0, 6)
    """

    return _PRIORITY_MAP.get(level.strip().upper(), LOG_INFO)


def _system_sender() -> Sender | None:
    """Return :func:`syslog.syslog` or ``None`` on platforms without it."""
    try:
        import syslog
    except ImportError:  # pragma: no cover - non-POSIX platforms
        return None
    return syslog.syslog


def write_syslog(priority: int, line: str, *, sender: Sender | None, fallback: FallbackPort) -> bool:
    """Emit ``line`` at ``priority``.

    When no system facility exists the line goes to ``fallback`` prefixed
    with ``[SYSLOG]`` and the call still counts as a success.
    """

    resolved = sender if sender is not None else _system_sender()
    if resolved is None:
        fallback.emit(f"[SYSLOG] {line}")
        return True
    resolved(priority, line)
    return True


class SyslogMedium(MediumPort):
    """Write messages to the system log. Needs no setup."""

    name = "syslog"

    def __init__(self, *, fallback: FallbackPort, sender: Sender | None = None) -> None:
        self._fallback = fallback
        self._sender = sender

    def write(self, message: Message) -> None:
        if not validate(message):
            raise EncodingFailure(message.to_dict(), "message cannot be JSON encoded for syslog")
        line = encode(message).decode("utf-8")
        write_syslog(priority_for(message.level.value), line, sender=self._sender, fallback=self._fallback)

    def __repr__(self) -> str:
        return "SyslogMedium()"


__all__ = ["SyslogMedium", "priority_for", "write_syslog"]
