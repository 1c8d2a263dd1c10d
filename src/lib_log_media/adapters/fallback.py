"""Rich-backed fallback channel writing diagnostic lines to stderr.

Purpose
-------
Give the dispatcher (and the syslog medium) an output that is always
available, even when every configured medium is broken.

System Role
-----------
Concrete :class:`FallbackPort`. Markup, highlighting, emoji codes, and
wrapping are disabled so the original message text is reproduced verbatim.
"""

from __future__ import annotations

from rich.console import Console

from lib_log_media.application.ports.fallback import FallbackPort


class StderrFallback(FallbackPort):
    """Print fallback lines on the process stderr.

    Examples
    --------
    >>> from io import StringIO
    >>> buffer = StringIO()
    >>> fallback = StderrFallback(console=Console(file=buffer))
    >>> fallback.emit("[LOGGER] Original message: [b]hello[/b]")
    >>> buffer.getvalue()
    '[LOGGER] Original message: [b]hello[/b]\\n'
    """

    def __init__(self, *, console: Console | None = None) -> None:
        self._console = console if console is not None else Console(stderr=True)

    def emit(self, line: str) -> None:
        self._console.print(line, markup=False, highlight=False, emoji=False, soft_wrap=True)


__all__ = ["StderrFallback"]
