"""Small in-memory LRU cache for per-document scan results."""

from __future__ import annotations

from collections import OrderedDict
from threading import Lock
from typing import Generic, TypeVar

K = TypeVar("K")
V = TypeVar("V")


class LruCache(Generic[K, V]):
    """Thread-safe LRU cache.

    The scanner itself is stateless; this lives on the caller side, keyed by
    document identity. Entries are dropped explicitly when a document changes
    or closes, or evicted once `max_items` is exceeded.
    """

    def __init__(self, max_items: int) -> None:
        if max_items < 1:
            raise ValueError("max_items must be >= 1")
        self._max_items = int(max_items)
        self._lock = Lock()
        self._data: OrderedDict[K, V] = OrderedDict()

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)

    def get(self, key: K) -> V | None:
        with self._lock:
            if key not in self._data:
                return None
            self._data.move_to_end(key)
            return self._data[key]

    def put(self, key: K, value: V) -> list[K]:
        """Store `value` and return the keys evicted to stay within `max_items`."""
        evicted: list[K] = []
        with self._lock:
            self._data.pop(key, None)
            self._data[key] = value
            while len(self._data) > self._max_items:
                old_key, _ = self._data.popitem(last=False)
                evicted.append(old_key)
        return evicted

    def pop(self, key: K) -> V | None:
        with self._lock:
            return self._data.pop(key, None)

    def clear(self) -> None:
        with self._lock:
            self._data.clear()
