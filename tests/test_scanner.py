import sqlite3

import pytest

from ekit.sqlx.scanner import NoMoreRowsError, RowsScanner


class _FailingCursor:
    description = (("id",) + (None,) * 6, ("name",) + (None,) * 6)

    def __init__(self):
        self._rows = iter([(1, "John")])

    def fetchone(self):
        try:
            return next(self._rows)
        except StopIteration:
            raise RuntimeError("iteration error") from None


@pytest.fixture
def conn():
    connection = sqlite3.connect(":memory:")
    connection.execute(
        "CREATE TABLE t1 (id INTEGER PRIMARY KEY, i INT, ti TINYINT, bi BIGINT, "
        "ubi UNSIGNED BIG INT, vc VARCHAR(20), ch CHARACTER(20), nc NCHAR(23), "
        "tx TEXT, cl CLOB, re REAL, db DOUBLE, dp DOUBLE PRECISION, fl FLOAT, "
        "dt DATETIME)"
    )
    yield connection
    connection.close()


def test_none_cursor():
    with pytest.raises(ValueError):
        RowsScanner(None)


def test_cursor_without_columns(conn):
    with pytest.raises(ValueError):
        RowsScanner(conn.cursor())


def test_scan_floats(conn):
    conn.execute("INSERT INTO t1 (id, re, db, dp, fl) VALUES (1, 1.0, 1.0, 1.0, 0)")
    scanner = RowsScanner(conn.execute("SELECT re, db, dp, fl FROM t1 WHERE id = 1"))
    assert scanner.columns == ["re", "db", "dp", "fl"]
    assert scanner.scan() == [1.0, 1.0, 1.0, 0.0]
    with pytest.raises(NoMoreRowsError):
        scanner.scan()


def test_scan_integers(conn):
    conn.execute("INSERT INTO t1 (id, i, ti, bi, ubi) VALUES (1, 1, 1, 1, 1)")
    scanner = RowsScanner(conn.execute("SELECT i, ti, bi, ubi FROM t1"))
    assert scanner.scan() == [1, 1, 1, 1]


def test_scan_strings_with_null(conn):
    conn.execute(
        "INSERT INTO t1 (id, vc, ch, nc, tx) VALUES (1, 'zwl', 'zwl', 'zwl', 'zwl')"
    )
    scanner = RowsScanner(conn.execute("SELECT vc, ch, nc, tx, cl FROM t1"))
    assert scanner.scan() == ["zwl", "zwl", "zwl", "zwl", None]


def test_scan_datetime_text(conn):
    conn.execute("INSERT INTO t1 (id, dt) VALUES (1, '2022-01-01 12:00:00')")
    scanner = RowsScanner(conn.execute("SELECT dt FROM t1"))
    assert scanner.scan() == ["2022-01-01 12:00:00"]


def test_scan_all(conn):
    rows = [
        (1, "zhangsan", "这是一段中文介绍", "2023-02-01 19:00:01"),
        (2, "lisi", "这是一段中文介绍", "2023-04-01 11:00:00"),
        (3, "wangwu", "this is English introduction", "2023-02-02 09:00:23"),
        (4, "zhaoliu", "this is English introduction", "2023-02-04 15:00:00"),
    ]
    conn.executemany("INSERT INTO t1 (id, vc, tx, dt) VALUES (?, ?, ?, ?)", rows)
    scanner = RowsScanner(conn.execute("SELECT id, vc, tx, dt FROM t1 ORDER BY id"))
    assert scanner.scan_all() == [list(r) for r in rows]
    assert scanner.scan_all() == []


def test_scan_error_during_iteration():
    scanner = RowsScanner(_FailingCursor())
    assert scanner.scan() == [1, "John"]
    with pytest.raises(RuntimeError, match="iteration error"):
        scanner.scan()


def test_scan_all_error_during_iteration():
    scanner = RowsScanner(_FailingCursor())
    with pytest.raises(RuntimeError, match="iteration error"):
        scanner.scan_all()