"""Default-media registry used when a log call names no media.

The registry starts empty. The first read that finds it empty stores a single
medium produced by the ``seed`` factory (the system log in the runtime
wiring). :meth:`DefaultMediaRegistry.set` always replaces the whole list.
"""

from __future__ import annotations

from collections.abc import Callable
from threading import RLock
from typing import Any

MediumLike = Any


class DefaultMediaRegistry:
    """Hold the currently active default media behind a lock.

    Examples
    --------
    >>> registry = DefaultMediaRegistry(seed=lambda: "syslog")
    >>> registry.get()
    ['syslog']
    >>> registry.set("a", "b")
    ['a', 'b']
    >>> registry.get()
    ['a', 'b']
    """

    def __init__(self, seed: Callable[[], MediumLike]) -> None:
        self._seed = seed
        self._media: list[MediumLike] = []
        self._lock = RLock()

    def set(self, *media: MediumLike) -> list[MediumLike]:
        """Replace the defaults with ``media`` and return what was stored."""

        with self._lock:
            self._media = list(media)
            return list(self._media)

    def get(self) -> list[MediumLike]:
        """Return the defaults, seeding them when empty."""

        with self._lock:
            if not self._media:
                self._media = [self._seed()]
            return list(self._media)


__all__ = ["DefaultMediaRegistry"]
