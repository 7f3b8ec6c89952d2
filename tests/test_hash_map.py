import operator

import pytest
from hypothesis import given
from hypothesis import strategies as st

from minicc.hash_map import HashMap
from minicc.hashing import string_hash


def make_map(free_func=None):
    return HashMap(string_hash, operator.eq, free_func)


def test_empty_map():
    m = make_map()
    assert len(m) == 0
    assert m.get("x") is None
    assert "x" not in m
    assert m.capacity() == 16


def test_insert_and_get():
    m = make_map()
    assert m.insert("int", 1) == 1
    assert m.get("int") == 1
    assert "int" in m
    assert len(m) == 1


def test_insert_keeps_existing_data():
    m = make_map()
    m.insert("a", "first")
    assert m.insert("a", "second") == "first"
    assert m.get("a") == "first"
    assert len(m) == 1


def test_insert_force_replaces_and_returns_old():
    m = make_map()
    assert m.insert_force("a", "first") == "first"
    assert m.insert_force("a", "second") == "first"
    assert m.get("a") == "second"
    assert len(m) == 1


def test_insert_force_keeps_original_key_object():
    seen = []
    m = HashMap(lambda k: 0, operator.eq, lambda k, d: seen.append(k))
    original = ("k",)
    replacement = ("k",)
    m.insert(original, 1)
    m.insert_force(replacement, 2)
    m.remove(replacement)
    assert seen == [original]
    assert seen[0] is original


def test_none_data_rejected():
    m = make_map()
    with pytest.raises(ValueError):
        m.insert("a", None)
    with pytest.raises(ValueError):
        m.insert_force("a", None)
    assert len(m) == 0


def test_remove_calls_free_func_and_forgets_key():
    freed = []
    m = make_map(lambda k, d: freed.append((k, d)))
    m.insert("a", 1)
    m.insert("b", 2)
    m.remove("a")
    assert freed == [("a", 1)]
    assert m.get("a") is None
    assert m.get("b") == 2
    assert len(m) == 1


def test_remove_missing_key_is_noop():
    freed = []
    m = make_map(lambda k, d: freed.append(k))
    m.insert("a", 1)
    m.remove("zzz")
    assert freed == []
    assert len(m) == 1


def test_colliding_keys_probe_past_graves():
    m = HashMap(lambda k: 7, operator.eq)
    for name in ["x", "y", "z"]:
        m.insert(name, name.upper())
    m.remove("y")
    assert m.get("x") == "X"
    assert m.get("z") == "Z"
    assert m.get("y") is None
    m.insert("y", "again")
    assert m.get("y") == "again"


def test_custom_equality_is_used():
    m = HashMap(lambda k: len(k), lambda a, b: a.lower() == b.lower())
    m.insert("Foo", 1)
    assert m.get("FOO") == 1
    assert m.insert("foo", 2) == 1


def test_grows_when_more_than_half_full():
    m = make_map()
    for i in range(9):
        m.insert(f"k{i}", i)
    assert m.capacity() == 16
    m.insert("k9", 9)
    assert m.capacity() == 32
    assert all(m.get(f"k{i}") == i for i in range(10))
    assert len(m) == 10


def test_many_inserts_and_removes_stay_consistent():
    m = make_map()
    for i in range(200):
        m.insert(str(i), i)
    for i in range(0, 200, 2):
        m.remove(str(i))
    assert len(m) == 100
    assert all((str(i) in m) == (i % 2 == 1) for i in range(200))


def test_clear_frees_everything():
    freed = []
    m = make_map(lambda k, d: freed.append(k))
    for name in ["a", "b", "c"]:
        m.insert(name, name)
    m.clear()
    assert sorted(freed) == ["a", "b", "c"]
    assert len(m) == 0
    assert m.get("a") is None
    assert m.capacity() == 16


@given(
    st.lists(
        st.tuples(st.booleans(), st.text(max_size=4), st.integers()),
        max_size=150,
    )
)
def test_behaves_like_dict(operations):
    m = make_map()
    model = {}
    for is_insert, key, value in operations:
        if is_insert:
            m.insert_force(key, value)
            model[key] = value
        else:
            m.remove(key)
            model.pop(key, None)
    assert len(m) == len(model)
    for key, value in model.items():
        assert m.get(key) == value