from __future__ import annotations

from contextlib import contextmanager
from threading import Lock
from typing import Dict, Hashable, Iterator


class KeyedLock:
    """One mutex per key, created on first use.

    Serializes clock-in/clock-out for the same employee so the
    "already active" check and the write happen as one step.
    """

    def __init__(self):
        self._guard = Lock()
        self._locks: Dict[Hashable, Lock] = {}

    def _lock_for(self, key: Hashable) -> Lock:
        with self._guard:
            lock = self._locks.get(key)
            if lock is None:
                lock = Lock()
                self._locks[key] = lock
            return lock

    @contextmanager
    def hold(self, key: Hashable) -> Iterator[None]:
        lock = self._lock_for(key)
        with lock:
            yield

    def discard(self, key: Hashable) -> None:
        """Forget the lock for ``key`` (e.g. a deleted employee)."""
        with self._guard:
            self._locks.pop(key, None)

    def __contains__(self, key: Hashable) -> bool:
        with self._guard:
            return key in self._locks
