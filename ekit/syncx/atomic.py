"""A value that is read and replaced atomically."""

from __future__ import annotations

import threading
from typing import Generic, TypeVar

T = TypeVar("T")


class Value(Generic[T]):
    """Holds one value behind a lock."""

    def __init__(self, value: T | None = None) -> None:
        self._value = value
        self._lock = threading.Lock()

    def load(self) -> T | None:
        with self._lock:
            return self._value

    def store(self, value: T) -> None:
        with self._lock:
            self._value = value

    def swap(self, new: T) -> T | None:
        """Store ``new`` and return the previous value."""
        with self._lock:
            old, self._value = self._value, new
            return old

    def compare_and_swap(self, old: T | None, new: T) -> bool:
        """Store ``new`` if the current value equals ``old``; return whether it did."""
        with self._lock:
            current = self._value
            if current is old or current == old:
                self._value = new
                return True
            return False