"""Keyed registry guaranteeing idempotent setup actions run once.

Media factories validate paths and create schemas through
:meth:`SetupRegistry.once` so the work happens once per distinct
configuration key for the lifetime of the registry.
"""

from __future__ import annotations

from collections.abc import Callable
from threading import RLock
from typing import Any


class SetupRegistry:
    """Record which setup keys already completed.

    A key is only recorded after its action returns; an action that raised is
    attempted again on the next call with the same key.

    Examples
    --------
    >>> calls = []
    >>> registry = SetupRegistry()
    >>> registry.once("a", lambda: calls.append(1))
    True
    >>> registry.once("a", lambda: calls.append(2))
    False
    >>> calls
    [1]
    """

    def __init__(self) -> None:
        self._done: dict[str, Any] = {}
        self._key_locks: dict[str, RLock] = {}
        self._lock = RLock()

    def _key_lock(self, key: str) -> RLock:
        with self._lock:
            return self._key_locks.setdefault(key, RLock())

    def once(self, key: str, action: Callable[[], Any]) -> bool:
        """Run ``action`` unless ``key`` already completed.

        Returns ``True`` when the action ran during this call. Only callers
        sharing ``key`` wait for a running action.
        """

        with self._key_lock(key):
            if self.has(key):
                return False
            result = action()
            with self._lock:
                self._done[key] = result
            return True

    def has(self, key: str) -> bool:
        with self._lock:
            return key in self._done

    def clear(self) -> None:
        """Forget every recorded key."""

        with self._lock:
            self._done.clear()
            self._key_locks.clear()


__all__ = ["SetupRegistry"]
