import pytest

from minicc.ptr_set import PointerSet


def test_empty_set():
    s = PointerSet()
    assert len(s) == 0
    assert object() not in s


def test_add_and_contains():
    s = PointerSet()
    item = object()
    s.add(item)
    assert item in s
    assert len(s) == 1


def test_add_twice_keeps_one():
    s = PointerSet()
    item = [1, 2]
    s.add(item)
    s.add(item)
    assert len(s) == 1


def test_identity_not_equality():
    s = PointerSet()
    first = [1, 2, 3]
    second = [1, 2, 3]
    s.add(first)
    assert first in s
    assert second not in s
    s.add(second)
    assert len(s) == 2


def test_none_rejected():
    s = PointerSet()
    with pytest.raises(ValueError):
        s.add(None)
    assert len(s) == 0


def test_many_items():
    s = PointerSet()
    items = [object() for _ in range(100)]
    for item in items:
        s.add(item)
    assert len(s) == 100
    assert all(item in s for item in items)