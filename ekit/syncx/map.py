"""A thread-safe mapping."""

from __future__ import annotations

import threading
from typing import Any, Callable, Generic, Hashable, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class Map(Generic[K, V]):
    """A dictionary guarded by a lock.

    A missing key and a key stored with the value None are distinct: the
    boolean returned alongside each value tells them apart.
    """

    def __init__(self) -> None:
        self._data: dict[K, V] = {}
        self._lock = threading.Lock()

    def load(self, key: K) -> tuple[V | None, bool]:
        """Return ``(value, True)`` for a stored key, else ``(None, False)``."""
        with self._lock:
            try:
                return self._data[key], True
            except KeyError:
                return None, False

    def store(self, key: K, value: V) -> None:
        with self._lock:
            self._data[key] = value

    def load_or_store(self, key: K, value: V) -> tuple[V, bool]:
        """Return the existing value and True, or store ``value`` and return it with False."""
        with self._lock:
            if key in self._data:
                return self._data[key], True
            self._data[key] = value
            return value, False

    def load_and_delete(self, key: K) -> tuple[V | None, bool]:
        """Remove the key, returning its value and whether it was present."""
        with self._lock:
            if key in self._data:
                return self._data.pop(key), True
            return None, False

    def delete(self, key: K) -> None:
        with self._lock:
            self._data.pop(key, None)

    def range(self, f: Callable[[K, V], Any]) -> None:
        """Call ``f(key, value)`` for each entry until it returns a false value."""
        with self._lock:
            items = list(self._data.items())
        for key, value in items:
            if not f(key, value):
                break

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)