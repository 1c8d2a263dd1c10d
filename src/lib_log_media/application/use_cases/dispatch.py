"""Use case fanning a single message out to media with failure isolation.

Purpose
-------
Resolve the media for a log call (explicit arguments, else the registry's
defaults), hand the message to each in order, and keep every failure inside
this module: the failure and the original text are written to the fallback
channel and the next medium is tried.

Contents
--------
* :class:`CallableMedium` and :func:`as_medium` - adapt plain callables to
  :class:`MediumPort`.
* :class:`Dispatcher` and :func:`create_dispatch` - the dispatch callable.

System Role
-----------
Application-layer orchestrator invoked by the runtime façade
(:func:`lib_log_media.log` and the per-level helpers).
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

from lib_log_media.application.ports import ClockPort, FallbackPort, IdProvider, MediumPort
from lib_log_media.domain.errors import LogMediaError
from lib_log_media.domain.levels import LogLevel, coerce_level
from lib_log_media.domain.message import Message

from .defaults import DefaultMediaRegistry
from .messages import create_message

logger = logging.getLogger(__name__)

FALLBACK_PREFIX = "[LOGGER]"


class CallableMedium(MediumPort):
    """Wrap a ``Callable[[Message], Any]`` so it satisfies :class:`MediumPort`."""

    def __init__(self, fn: Callable[[Message], Any], *, name: str | None = None) -> None:
        self._fn = fn
        self.name = name or getattr(fn, "__qualname__", None) or repr(fn)

    def write(self, message: Message) -> None:
        self._fn(message)

    def __repr__(self) -> str:
        return f"CallableMedium({self.name!r})"


def as_medium(candidate: Any) -> MediumPort:
    """Return ``candidate`` as a :class:`MediumPort`.

    Objects that already provide ``write`` are returned unchanged; plain
    callables are wrapped in :class:`CallableMedium`.

    Examples
    --------
    >>> medium = as_medium(lambda message: None)
    >>> isinstance(medium, CallableMedium)
    True
    >>> as_medium(medium) is medium
    True
    """

    if isinstance(candidate, MediumPort):
        return candidate
    if callable(candidate):
        return CallableMedium(candidate)
    raise TypeError(f"Not a medium: {candidate!r}")


def _medium_name(medium: Any) -> str:
    return str(getattr(medium, "name", None) or repr(medium))


def _failure_reason(exc: Exception) -> str:
    # the medium name already identifies the target
    if isinstance(exc, LogMediaError):
        return exc.reason
    return str(exc)


class Dispatcher:
    """Callable produced by :func:`create_dispatch`."""

    def __init__(
        self,
        *,
        registry: DefaultMediaRegistry,
        fallback: FallbackPort,
        clock: ClockPort,
        id_provider: IdProvider,
    ) -> None:
        self._registry = registry
        self._fallback = fallback
        self._clock = clock
        self._id_provider = id_provider

    def __call__(
        self,
        text: str,
        level: str | LogLevel,
        context: Mapping[str, Any] | None = None,
        *media: Any,
    ) -> None:
        """Build a message from ``text``/``level``/``context`` and send it.

        Unknown level names are logged at ``INFO``.
        """

        message = create_message(
            coerce_level(level, default=LogLevel.INFO),
            text,
            context,
            clock=self._clock,
            id_provider=self._id_provider,
        )
        self.send(message, *media)

    def send(self, message: Message, *media: Any) -> None:
        """Hand an already-built ``message`` to each medium in order."""

        targets = list(media) if media else self._registry.get()
        for target in targets:
            self._write_isolated(target, message)

    def _write_isolated(self, target: Any, message: Message) -> None:
        try:
            as_medium(target).write(message)
        except Exception as exc:
            self._report_failure(target, message, exc)

    def _report_failure(self, target: Any, message: Message, exc: Exception) -> None:
        name = _medium_name(target)
        logger.debug("medium %s failed for message %s", name, message.id, exc_info=exc)
        try:
            self._fallback.emit(f"{FALLBACK_PREFIX} Failed to write to {name}: {_failure_reason(exc)}")
            self._fallback.emit(f"{FALLBACK_PREFIX} Original message: {message.text}")
        except Exception:  # pragma: no cover - stderr itself unavailable
            logger.debug("fallback channel failed", exc_info=True)


def create_dispatch(
    *,
    registry: DefaultMediaRegistry,
    fallback: FallbackPort,
    clock: ClockPort,
    id_provider: IdProvider,
) -> Dispatcher:
    """Freeze the dispatch collaborators into a callable.

    Examples
    --------
    >>> from datetime import datetime, timezone
    >>> class Clock:
    ...     def now(self):
    ...         return datetime(2025, 12, 30, 10, 30, tzinfo=timezone.utc)
    >>> class Lines:
    ...     def __init__(self):
    ...         self.lines = []
    ...     def emit(self, line):
    ...         self.lines.append(line)
    >>> seen = []
    >>> def broken(message):
    ...     raise RuntimeError("disk full")
    >>> fallback = Lines()
    >>> dispatch = create_dispatch(
    ...     registry=DefaultMediaRegistry(seed=lambda: seen.append),
    ...     fallback=fallback,
    ...     clock=Clock(),
    ...     id_provider=lambda: "msg-1",
    ... )
    >>> dispatch("hello", "INFO", {}, broken, lambda m: seen.append(m.text))
    >>> seen
    ['hello']
    >>> fallback.lines[1]
    '[LOGGER] Original message: hello'
    """

    return Dispatcher(registry=registry, fallback=fallback, clock=clock, id_provider=id_provider)


__all__ = ["CallableMedium", "Dispatcher", "FALLBACK_PREFIX", "as_medium", "create_dispatch"]
