from dataclasses import dataclass

import pytest

from ekit.syncx.map import Map


@dataclass
class User:
    name: str = ""


@pytest.fixture
def loaded_map():
    m = Map()
    m.store("found", User("found"))
    m.store("found but empty", User())
    m.store("found but nil", None)
    return m


@pytest.mark.parametrize(
    "key, want_val, want_ok",
    [
        ("found", User("found"), True),
        ("found but empty", User(), True),
        ("found but nil", None, True),
        ("not found", None, False),
    ],
)
def test_load(loaded_map, key, want_val, want_ok):
    assert loaded_map.load(key) == (want_val, want_ok)


def test_load_or_store():
    m = Map()
    assert m.load_or_store("Tom", User("Tom")) == (User("Tom"), False)
    assert m.load_or_store("Tom", User("Tom-copy")) == (User("Tom"), True)
    assert m.load_or_store("Jerry", None) == (None, False)
    assert m.load_or_store("Jerry", User("Jerry")) == (None, True)


def test_load_and_delete():
    m = Map()
    m.store("Tom", None)
    assert m.load_and_delete("Tom") == (None, True)
    assert m.load_and_delete("Tom") == (None, False)
    m.store("Jerry", User("Jerry"))
    assert m.load_and_delete("Jerry") == (User("Jerry"), True)
    assert m.load_and_delete("Jerry") == (None, False)


def test_delete():
    m = Map()
    m.store("Tom", User("Tom"))
    assert m.load("Tom") == (User("Tom"), True)
    m.delete("Tom")
    assert m.load("Tom") == (None, False)
    assert len(m) == 0


def test_range():
    m = Map()
    m.store("Tom", User("Tom"))
    m.store("Jerry", User("Jerry"))
    m.store("nil", None)
    shadow = {}

    def collect(key, val):
        shadow[key] = val
        return True

    m.range(collect)
    assert shadow == {"Tom": User("Tom"), "Jerry": User("Jerry"), "nil": None}


def test_range_with_none_key():
    m = Map()
    m.store("Tom", "Tom")
    m.store(None, "nil")
    shadow = {}
    m.range(lambda k, v: shadow.__setitem__(k, v) or True)
    assert shadow == {"Tom": "Tom", None: "nil"}


def test_range_stops_on_false():
    m = Map()
    for i in range(5):
        m.store(i, i * 10)
    seen = []

    def visit(key, val):
        seen.append((key, val))
        return False

    m.range(visit)
    assert len(seen) == 1
    key, val = seen[0]
    assert m.load(key) == (val, True)
    assert val == key * 10


def test_range_sum():
    m = Map()
    m.store("Tom", 18)
    m.store("Jerry", 35)
    total = []
    m.range(lambda k, v: total.append(v) or True)
    assert sum(total) == 53