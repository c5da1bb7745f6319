"""
Keyed Locks

One mutex per key, created on demand and dropped when nobody holds or
waits on it.
"""

import threading
from contextlib import contextmanager
from typing import Dict, Hashable, Iterator, List


class KeyedLock:
    """Serializes work per key while letting different keys run in parallel."""

    def __init__(self):
        self._guard = threading.Lock()
        self._locks: Dict[Hashable, List] = {}  # key -> [lock, holders]

    @contextmanager
    def hold(self, key: Hashable) -> Iterator[None]:
        with self._guard:
            entry = self._locks.setdefault(key, [threading.Lock(), 0])
            entry[1] += 1

        entry[0].acquire()
        try:
            yield
        finally:
            entry[0].release()
            with self._guard:
                entry[1] -= 1
                if entry[1] == 0:
                    del self._locks[key]

    def __len__(self) -> int:
        with self._guard:
            return len(self._locks)
