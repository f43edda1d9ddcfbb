"""Comparison helpers shared by the ordered containers."""

from __future__ import annotations

from typing import Any, Callable, TypeVar

T = TypeVar("T")

Comparator = Callable[[T, T], int]
"""Compares two values: negative, zero or positive as src is below, equal to or above dst."""


def comparator_real_number(src: Any, dst: Any) -> int:
    """Return -1, 0 or 1 as ``src`` is less than, equal to or greater than ``dst``."""
    if src < dst:
        return -1
    if src == dst:
        return 0
    return 1