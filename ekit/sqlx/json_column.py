"""A column value that is stored as a JSON document."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, is_dataclass
from typing import Any, Callable


def _json_default(obj: Any) -> Any:
    if is_dataclass(obj) and not isinstance(obj, type):
        return asdict(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def _to_json(val: Any) -> bytes:
    return json.dumps(
        val,
        default=_json_default,
        ensure_ascii=False,
        allow_nan=False,
        separators=(",", ":"),
    ).encode()


@dataclass
class JsonColumn:
    """A value kept as JSON in databases without a native JSON type.

    Dataclass instances are written as objects; ``decode`` optionally turns
    the decoded JSON back into the caller's own type when scanning.
    """

    val: Any = None
    valid: bool = False
    decode: Callable[[Any], Any] | None = None

    def value(self) -> bytes | None:
        """Return the JSON encoding as bytes, or None when not valid."""
        if not self.valid:
            return None
        return _to_json(self.val)

    def scan(self, src: Any) -> None:
        """Decode ``src`` (bytes, str or None) into ``val``; None leaves it untouched."""
        if src is None:
            return
        if isinstance(src, (bytes, bytearray, memoryview)):
            data: bytes | str = bytes(src)
        elif isinstance(src, str):
            data = src
        else:
            raise TypeError(f"ekit: JsonColumn.scan does not support src type {src!r}")
        decoded = json.loads(data)
        self.val = self.decode(decoded) if self.decode is not None else decoded
        self.valid = True