# ekit

A collection of small, generic helpers:

- **`ekit.slices`**: functions over lists: `contains`, `contains_any`, `contains_all`,
  `index`, `last_index`, `index_all`, `delete`, `filter_delete`, `diff_set`,
  `intersect_set`, `union_set`, `symmetric_diff_set`, `filter_map`, `map_slice`,
  `reverse`, `reverse_self` and `max_of` / `min_of` / `sum_of`. The comparing functions
  also have a `*_func` variant that takes an `equal(a, b)` callable. `delete` raises
  `IndexOutOfRangeError` for an index outside the list; `max_of` and `min_of` raise
  `ValueError` for an empty list.
- **`ekit.sets`**: `MapSet`, a hash-backed set, and `TreeSet`, a set kept in the order
  of a comparator such as `ekit.types.comparator_real_number`.
- **`ekit.retry`**: `FixedIntervalRetryStrategy` and `ExponentialBackoffRetryStrategy`.
  `next()` returns the `timedelta` to wait before the next retry, or `None` when no
  retries are left; a `max_retries` of 0 or less means no limit. Strategies are also
  iterable.
- **`ekit.value`**: `AnyValue`, which holds a value or an error and gives typed access
  such as `as_int()` or `str_or_default("")`. A held error is raised; a value of the
  wrong type raises `InvalidTypeError`.
- **`ekit.sqlx`**: the column types `JsonColumn` and `EncryptColumn` (AES-GCM), and
  `RowsScanner`, which reads the rows of a DB-API cursor as lists.
- **`ekit.syncx`**: a lock-guarded `Map`, a `Pool` of reusable objects and an atomic
  `Value`.

## Installation

```
pip install ekit
```

## Examples

```python
from datetime import timedelta

from ekit import slices
from ekit.retry import ExponentialBackoffRetryStrategy

slices.index_all([1, 2, 3, 4, 5, 3, 9], 3)        # [2, 5]
sorted(slices.union_set([1, 3, 4, 5], [1, 4, 7]))  # [1, 3, 4, 5, 7]

strategy = ExponentialBackoffRetryStrategy(timedelta(seconds=1), timedelta(seconds=5), 4)
for interval in strategy:
    print(interval)  # 0:00:01, 0:00:02, 0:00:04, 0:00:05
```

```python
import os

from ekit.sqlx.encrypt import EncryptColumn

key = os.urandom(16)
column = EncryptColumn(val="hello", valid=True, key=key)
cipher_text = column.value()

restored = EncryptColumn(key=key, kind="str")
restored.scan(cipher_text)
restored.val  # "hello"
```

`EncryptColumn.kind` chooses how the value is encoded before encryption: `"str"`,
`"bytes"`, a big-endian number (`"int8"` to `"uint64"`, `"int"`, `"uint"`, `"float32"`,
`"float64"`) or `"json"`. Left as `None`, it is inferred from `val`. The key must be
16, 24 or 32 bytes long, otherwise `value()` raises `KeyLengthError`.

```python
import sqlite3

from ekit.sqlx.scanner import RowsScanner

conn = sqlite3.connect(":memory:")
cursor = conn.execute("SELECT 1, 'a' UNION ALL SELECT 2, 'b'")
RowsScanner(cursor).scan_all()  # [[1, 'a'], [2, 'b']]
```

## What it does not do

`ekit.sqlx` does not open or manage database connections and does not close cursors;
`RowsScanner` returns values exactly as the cursor yields them, without converting
column types.

## Running the tests

```
pip install -e ".[test]"
pytest
```