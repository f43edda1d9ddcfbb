"""Helpers for lists: aggregation, searching, set operations and mapping.

Functions without a ``_func`` suffix compare elements with ``==`` and those
that build sets need hashable elements. The ``_func`` variants take an
``equal(a, b)`` callable and accept any element type.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Sequence
from typing import Any, TypeVar

T = TypeVar("T")
D = TypeVar("D")

EqualFunc = Callable[[Any, Any], bool]


class IndexOutOfRangeError(IndexError):
    """An index lies outside the bounds of a sequence."""

    def __init__(self, length: int, index: int) -> None:
        super().__init__(f"ekit: index out of range, length {length}, index {index}")
        self.length = length
        self.index = index


def _deduplicate_func(data: Sequence[T], equal: EqualFunc) -> list[T]:
    # Keeps the last of each group of equal elements, in their original order.
    return [v for k, v in enumerate(data) if not contains_func(data[k + 1 :], v, equal)]


def max_of(ts: Sequence[T]) -> T:
    """Return the largest element; raise ValueError when ``ts`` is empty."""
    if not ts:
        raise ValueError("ekit: max_of requires at least one value")
    return max(ts)


def min_of(ts: Sequence[T]) -> T:
    """Return the smallest element; raise ValueError when ``ts`` is empty."""
    if not ts:
        raise ValueError("ekit: min_of requires at least one value")
    return min(ts)


def sum_of(ts: Sequence[T]) -> T:
    """Return the sum of the elements, 0 for an empty sequence."""
    return sum(ts)


def contains(src: Sequence[T], dst: T) -> bool:
    return contains_func(src, dst, lambda a, b: a == b)


def contains_func(src: Sequence[T], dst: T, equal: EqualFunc) -> bool:
    return any(equal(v, dst) for v in src)


def contains_any(src: Sequence[Hashable], dst: Sequence[Hashable]) -> bool:
    src_set = set(src)
    return any(v in src_set for v in dst)


def contains_any_func(src: Sequence[T], dst: Sequence[T], equal: EqualFunc) -> bool:
    return any(equal(s, d) for d in dst for s in src)


def contains_all(src: Sequence[Hashable], dst: Sequence[Hashable]) -> bool:
    src_set = set(src)
    return all(v in src_set for v in dst)


def contains_all_func(src: Sequence[T], dst: Sequence[T], equal: EqualFunc) -> bool:
    return all(contains_func(src, d, equal) for d in dst)


def delete(src: Sequence[T], index: int) -> list[T]:
    """Return a new list without the element at ``index``."""
    if index < 0 or index >= len(src):
        raise IndexOutOfRangeError(len(src), index)
    return [*src[:index], *src[index + 1 :]]


def filter_delete(src: list[T], m: Callable[[int, T], bool]) -> list[T]:
    """Remove, in place, every element for which ``m(index, element)`` is true."""
    src[:] = [v for i, v in enumerate(src) if not m(i, v)]
    return src


def diff_set(src: Sequence[Hashable], dst: Sequence[Hashable]) -> list:
    """Deduplicated elements of ``src`` absent from ``dst``, in no fixed order."""
    return list(set(src) - set(dst))


def diff_set_func(src: Sequence[T], dst: Sequence[T], equal: EqualFunc) -> list[T]:
    ret = [v for v in src if not contains_func(dst, v, equal)]
    return _deduplicate_func(ret, equal)


def index(src: Sequence[T], dst: T) -> int:
    """Return the first index of ``dst`` in ``src``, or -1."""
    return index_func(src, dst, lambda a, b: a == b)


def index_func(src: Sequence[T], dst: T, equal: EqualFunc) -> int:
    return next((i for i, v in enumerate(src) if equal(v, dst)), -1)


def last_index(src: Sequence[T], dst: T) -> int:
    """Return the last index of ``dst`` in ``src``, or -1."""
    return last_index_func(src, dst, lambda a, b: a == b)


def last_index_func(src: Sequence[T], dst: T, equal: EqualFunc) -> int:
    return next((i for i in reversed(range(len(src))) if equal(dst, src[i])), -1)


def index_all(src: Sequence[T], dst: T) -> list[int]:
    return index_all_func(src, dst, lambda a, b: a == b)


def index_all_func(src: Sequence[T], dst: T, equal: EqualFunc) -> list[int]:
    return [i for i, v in enumerate(src) if equal(v, dst)]


def intersect_set(src: Sequence[Hashable], dst: Sequence[Hashable]) -> list:
    """Deduplicated elements present in both, in no fixed order."""
    src_set = set(src)
    return list({v for v in dst if v in src_set})


def intersect_set_func(src: Sequence[T], dst: Sequence[T], equal: EqualFunc) -> list[T]:
    ret = [s for s in src if any(equal(d, s) for d in dst)]
    return _deduplicate_func(ret, equal)


def filter_map(src: Sequence[T], m: Callable[[int, T], tuple[D, bool]]) -> list[D]:
    """Map each element with ``m``, keeping results whose flag is true."""
    result = []
    for i, s in enumerate(src):
        value, ok = m(i, s)
        if ok:
            result.append(value)
    return result


def map_slice(src: Sequence[T], m: Callable[[int, T], D]) -> list[D]:
    return [m(i, s) for i, s in enumerate(src)]


def reverse(src: Sequence[T]) -> list[T]:
    """Return a new reversed list."""
    return list(reversed(src))


def reverse_self(src: list[T]) -> None:
    """Reverse ``src`` in place."""
    src.reverse()


def symmetric_diff_set(src: Sequence[Hashable], dst: Sequence[Hashable]) -> list:
    """Deduplicated elements in exactly one of the two, in no fixed order."""
    return list(set(src) ^ set(dst))


def symmetric_diff_set_func(
    src: Sequence[T], dst: Sequence[T], equal: EqualFunc
) -> list[T]:
    common = [s for s in src if any(equal(s, d) for d in dst)]
    ret = [v for v in (*src, *dst) if not contains_func(common, v, equal)]
    return _deduplicate_func(ret, equal)


def union_set(src: Sequence[Hashable], dst: Sequence[Hashable]) -> list:
    """Deduplicated elements of either, in no fixed order."""
    return list(set(src) | set(dst))


def union_set_func(src: Sequence[T], dst: Sequence[T], equal: EqualFunc) -> list[T]:
    return _deduplicate_func([*dst, *src], equal)