"""A column value that is stored encrypted with AES-GCM."""

from __future__ import annotations

import json
import os
import struct
from dataclasses import dataclass
from typing import Any, Callable

from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from ekit.sqlx.json_column import _to_json

_NONCE_SIZE = 12
_KEY_LENGTHS = (16, 24, 32)

_NUMERIC_FORMATS = {
    "int": ">q",
    "uint": ">Q",
    "int8": ">b",
    "int16": ">h",
    "int32": ">i",
    "int64": ">q",
    "uint8": ">B",
    "uint16": ">H",
    "uint32": ">I",
    "uint64": ">Q",
    "float32": ">f",
    "float64": ">d",
}
_KINDS = frozenset({"str", "bytes", "json", *_NUMERIC_FORMATS})


class InvalidColumnError(ValueError):
    """The column is marked as not valid and holds no value to encrypt."""

    def __init__(self) -> None:
        super().__init__("ekit: EncryptColumn is not valid")


class KeyLengthError(ValueError):
    """The key is not 16, 24 or 32 bytes long."""

    def __init__(self, length: int) -> None:
        super().__init__(
            f"ekit: EncryptColumn only supports keys of 16/24/32 bytes, got {length}"
        )
        self.length = length


def _infer_kind(val: Any) -> str:
    if isinstance(val, str):
        return "str"
    if isinstance(val, (bytes, bytearray)):
        return "bytes"
    if isinstance(val, bool):
        return "json"
    if isinstance(val, int):
        return "int"
    if isinstance(val, float):
        return "float64"
    return "json"


@dataclass
class EncryptColumn:
    """A value encrypted with AES-GCM when written and decrypted when scanned.

    ``kind`` selects the encoding: ``"str"``, ``"bytes"``, a fixed-width
    number (``"int8"`` to ``"uint64"``, ``"int"``, ``"uint"``, ``"float32"``,
    ``"float64"``, all big-endian) or ``"json"``. When it is None, the kind is
    inferred from the current ``val``; a None value means JSON. ``decode``
    optionally turns decoded JSON into the caller's own type.
    """

    val: Any = None
    valid: bool = False
    key: str | bytes = ""
    kind: str | None = None
    decode: Callable[[Any], Any] | None = None

    def _key_bytes(self) -> bytes:
        return self.key.encode() if isinstance(self.key, str) else bytes(self.key)

    def _resolved_kind(self) -> str:
        kind = self.kind if self.kind is not None else _infer_kind(self.val)
        if kind not in _KINDS:
            raise ValueError(f"ekit: unknown EncryptColumn kind {kind!r}")
        return kind

    def _serialize(self) -> bytes:
        kind = self._resolved_kind()
        if kind == "str":
            return str(self.val).encode()
        if kind == "bytes":
            return bytes(self.val)
        if kind == "json":
            return _to_json(self.val)
        return struct.pack(_NUMERIC_FORMATS[kind], self.val)

    def _deserialize(self, data: bytes) -> Any:
        kind = self._resolved_kind()
        if kind == "str":
            return data.decode()
        if kind == "bytes":
            return data
        if kind == "json":
            decoded = json.loads(data)
            return self.decode(decoded) if self.decode is not None else decoded
        return struct.unpack_from(_NUMERIC_FORMATS[kind], data)[0]

    def value(self) -> bytes:
        """Return the nonce followed by the encrypted, encoded value."""
        if not self.valid:
            raise InvalidColumnError()
        key = self._key_bytes()
        if len(key) not in _KEY_LENGTHS:
            raise KeyLengthError(len(key))
        plain = self._serialize()
        nonce = os.urandom(_NONCE_SIZE)
        return nonce + AESGCM(key).encrypt(nonce, plain, None)

    def _decrypt(self, data: bytes) -> bytes:
        nonce, cipher_data = data[:_NONCE_SIZE], data[_NONCE_SIZE:]
        return AESGCM(self._key_bytes()).decrypt(nonce, cipher_data, None)

    def scan(self, src: Any) -> None:
        """Decrypt ``src`` and decode it into ``val``.

        A str that cannot be decrypted is ignored and leaves the column as it was.
        """
        if isinstance(src, (bytes, bytearray, memoryview)):
            plain = self._decrypt(bytes(src))
        elif isinstance(src, str):
            try:
                plain = self._decrypt(src.encode())
            except Exception:
                return
        else:
            raise TypeError(f"ekit: EncryptColumn.scan does not support src type {src!r}")
        try:
            self.val = self._deserialize(plain)
        except Exception:
            self.valid = False
            raise
        self.valid = True