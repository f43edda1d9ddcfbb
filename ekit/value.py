"""A wrapper that holds a value or an error and converts it on demand."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, TypeVar

T = TypeVar("T")


class InvalidTypeError(TypeError):
    """The held value is not of the requested type."""

    def __init__(self, expected: str, actual: str) -> None:
        super().__init__(f"ekit: invalid type, expected {expected}, got {actual}")
        self.expected = expected
        self.actual = actual


def _is_int(val: Any) -> bool:
    return isinstance(val, int) and not isinstance(val, bool)


@dataclass(frozen=True)
class AnyValue:
    """A value of unknown type, or the error that occurred while obtaining it."""

    val: Any = None
    err: BaseException | None = None

    def _convert(self, expected: str, accept: Callable[[Any], bool]) -> Any:
        if self.err is not None:
            raise self.err
        if not accept(self.val):
            raise InvalidTypeError(expected, type(self.val).__name__)
        return self.val

    def _or_default(self, getter: Callable[[], T], default: T) -> T:
        try:
            return getter()
        except Exception:
            return default

    def as_int(self) -> int:
        """Return the value as an int, raising the held error or InvalidTypeError."""
        return self._convert("int", _is_int)

    def int_or_default(self, default: int) -> int:
        return self._or_default(self.as_int, default)

    def as_uint(self) -> int:
        """Return the value as a non-negative int."""
        return self._convert("uint", lambda v: _is_int(v) and v >= 0)

    def uint_or_default(self, default: int) -> int:
        return self._or_default(self.as_uint, default)

    def as_float(self) -> float:
        """Return the value as a float."""
        return self._convert("float", lambda v: isinstance(v, float))

    def float_or_default(self, default: float) -> float:
        return self._or_default(self.as_float, default)

    def as_str(self) -> str:
        """Return the value as a str."""
        return self._convert("str", lambda v: isinstance(v, str))

    def str_or_default(self, default: str) -> str:
        return self._or_default(self.as_str, default)

    def as_bytes(self) -> bytes:
        """Return the value as bytes."""
        return self._convert("bytes", lambda v: isinstance(v, (bytes, bytearray)))

    def bytes_or_default(self, default: bytes) -> bytes:
        return self._or_default(self.as_bytes, default)

    def as_bool(self) -> bool:
        """Return the value as a bool."""
        return self._convert("bool", lambda v: isinstance(v, bool))

    def bool_or_default(self, default: bool) -> bool:
        return self._or_default(self.as_bool, default)