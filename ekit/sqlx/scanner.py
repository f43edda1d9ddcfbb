"""Reads rows from a DB-API cursor as plain lists."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class NoMoreRowsError(LookupError):
    """The cursor has no further rows."""

    def __init__(self) -> None:
        super().__init__("ekit: no more rows")


class RowsScanner:
    """Reads the rows of a cursor; closing the cursor is the caller's job."""

    def __init__(self, cursor: Any) -> None:
        if cursor is None:
            raise ValueError("ekit: invalid argument, cursor must not be None")
        try:
            description = cursor.description
        except Exception as exc:
            raise ValueError(
                f"ekit: invalid argument, cannot get column information: {exc}"
            ) from exc
        if not description:
            raise ValueError(
                "ekit: invalid argument, cannot get column information of the cursor"
            )
        self._cursor = cursor
        self.columns = [column[0] for column in description]

    def scan(self) -> list:
        """Return the next row; raise NoMoreRowsError when there is none."""
        row = self._cursor.fetchone()
        if row is None:
            raise NoMoreRowsError()
        return list(row)

    def scan_all(self) -> list[list]:
        """Return all remaining rows."""
        return list(self)

    def __iter__(self) -> Iterator[list]:
        while True:
            try:
                yield self.scan()
            except NoMoreRowsError:
                return