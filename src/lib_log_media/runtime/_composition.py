"""Composition root wiring ports, use cases, and adapters into a runtime."""

from __future__ import annotations

from functools import partial

from lib_log_media.adapters import StderrFallback, SyslogMedium
from lib_log_media.adapters.syslog import Sender
from lib_log_media.application.ports import ClockPort, FallbackPort, IdProvider
from lib_log_media.application.use_cases import DefaultMediaRegistry, create_dispatch, create_message
from lib_log_media.domain import SetupRegistry

from ._factories import SystemClock, UuidProvider
from ._state import LoggingRuntime


def build_runtime(
    *,
    fallback: FallbackPort | None = None,
    clock: ClockPort | None = None,
    id_provider: IdProvider | None = None,
    syslog_sender: Sender | None = None,
) -> LoggingRuntime:
    """Assemble an isolated runtime.

    Parameters
    ----------
    fallback:
        Channel receiving failure reports; defaults to stderr.
    clock, id_provider:
        Sources of message timestamps and identifiers (UTC clock, UUID4).
    syslog_sender:
        Replacement for :func:`syslog.syslog`, mainly for tests.
    """

    channel: FallbackPort = fallback if fallback is not None else StderrFallback()
    resolved_clock: ClockPort = clock if clock is not None else SystemClock()
    resolved_ids: IdProvider = id_provider if id_provider is not None else UuidProvider()

    defaults = DefaultMediaRegistry(seed=lambda: SyslogMedium(fallback=channel, sender=syslog_sender))
    dispatch = create_dispatch(
        registry=defaults,
        fallback=channel,
        clock=resolved_clock,
        id_provider=resolved_ids,
    )
    return LoggingRuntime(
        setup_registry=SetupRegistry(),
        defaults=defaults,
        fallback=channel,
        dispatch=dispatch,
        create=partial(create_message, clock=resolved_clock, id_provider=resolved_ids),
        syslog_sender=syslog_sender,
    )


__all__ = ["build_runtime"]
