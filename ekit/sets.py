"""Set containers: a hash-based set and a comparator-ordered set."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Hashable, Iterator
from functools import cmp_to_key
from typing import Any, Callable


class MapSet:
    """A set of hashable keys; ``keys`` returns them in no fixed order."""

    def __init__(self, size: int = 0) -> None:
        # ``size`` is only a capacity hint and needs no preallocation here.
        self._items: set[Hashable] = set()

    def add(self, key: Hashable) -> None:
        self._items.add(key)

    def delete(self, key: Hashable) -> None:
        self._items.discard(key)

    def exist(self, key: Hashable) -> bool:
        return key in self._items

    def keys(self) -> list:
        return list(self._items)

    def __contains__(self, key: object) -> bool:
        return key in self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator:
        return iter(self._items)


class TreeSet:
    """A set ordered by a comparator returning negative, zero or positive."""

    def __init__(self, compare: Callable[[Any, Any], int] | None) -> None:
        if compare is None:
            raise ValueError("ekit: comparator must not be None")
        self._compare = compare
        self._key = cmp_to_key(compare)
        self._items: list = []

    def _find(self, key: Any) -> tuple[int, bool]:
        pos = bisect_left(self._items, self._key(key), key=self._key)
        found = pos < len(self._items) and self._compare(self._items[pos], key) == 0
        return pos, found

    def add(self, key: Any) -> None:
        pos, found = self._find(key)
        if found:
            self._items[pos] = key
        else:
            self._items.insert(pos, key)

    def delete(self, key: Any) -> None:
        pos, found = self._find(key)
        if found:
            del self._items[pos]

    def exist(self, key: Any) -> bool:
        return self._find(key)[1]

    def keys(self) -> list:
        """Return the keys in ascending comparator order."""
        return list(self._items)

    def __contains__(self, key: object) -> bool:
        return self.exist(key)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator:
        return iter(list(self._items))