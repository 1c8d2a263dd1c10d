"""Environment-driven configuration of the default media.

Purpose
-------
Let deployments choose default media without code changes: a ``LOG_MEDIA``
environment variable (optionally loaded from a ``.env`` file) lists the media
installed by :func:`configure_from_environment`.

``LOG_MEDIA`` holds comma-separated entries:

* ``syslog``
* ``file:<path>`` (alias ``file_put:<path>``) - unlocked append
* ``file_lock:<path>`` - append under an exclusive lock
* ``sqlite:<path>`` or ``sqlite:<path>#<table>``
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from dotenv import find_dotenv, load_dotenv

from .runtime import LoggingRuntime, build_runtime, current_runtime

logger = logging.getLogger(__name__)

MEDIA_ENV_VAR = "LOG_MEDIA"


def enable_dotenv(path: str | Path | None = None, *, override: bool = False) -> Path | None:
    """Load ``path`` (or the nearest ``.env`` above the working directory).

    Variables already present in the environment win unless ``override`` is
    set. Returns the loaded file, or ``None`` when nothing was found.
    """

    candidate = str(path) if path is not None else find_dotenv(usecwd=True)
    if not candidate or not Path(candidate).is_file():
        return None
    load_dotenv(candidate, override=override)
    logger.debug("loaded environment from %s", candidate)
    return Path(candidate).resolve()


def parse_media_spec(spec: str, runtime: LoggingRuntime) -> Any:
    """Build one medium from a ``LOG_MEDIA`` entry.

    Raises
    ------
    ValueError
        For unknown kinds or missing paths.
    """

    kind, _, argument = spec.strip().partition(":")
    kind = kind.strip().lower()
    argument = argument.strip()

    if kind == "syslog":
        return runtime.system_log()
    if not argument:
        raise ValueError(f"Media entry {spec!r} requires a path")
    if kind in ("file", "file_put"):
        return runtime.file_put(argument)
    if kind == "file_lock":
        return runtime.file_lock(argument)
    if kind == "sqlite":
        db_path, _, table = argument.partition("#")
        return runtime.sqlite(db_path, table or None)
    raise ValueError(f"Unknown media kind: {kind!r}")


def media_from_environment(
    env: Mapping[str, str] | None = None,
    *,
    runtime: LoggingRuntime | None = None,
) -> list[Any]:
    """Return the media described by ``LOG_MEDIA`` (empty when unset)."""

    source = os.environ if env is None else env
    raw = source.get(MEDIA_ENV_VAR, "")
    active = runtime if runtime is not None else current_runtime(build_runtime)
    return [parse_media_spec(entry, active) for entry in raw.split(",") if entry.strip()]


def configure_from_environment(
    env: Mapping[str, str] | None = None,
    *,
    runtime: LoggingRuntime | None = None,
) -> list[Any]:
    """Install the ``LOG_MEDIA`` media as defaults and return the resulting defaults."""

    active = runtime if runtime is not None else current_runtime(build_runtime)
    media = media_from_environment(env, runtime=active)
    if media:
        active.set_default_media(*media)
    return active.get_default_media()


__all__ = [
    "MEDIA_ENV_VAR",
    "configure_from_environment",
    "enable_dotenv",
    "media_from_environment",
    "parse_media_spec",
]
