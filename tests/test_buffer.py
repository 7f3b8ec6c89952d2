import io

import pytest
from hypothesis import given, strategies as st

from minicc.buffer import Buffer
from minicc.errors import InternalCompilerError


def test_default_capacity():
    assert Buffer().capacity() == 40
    assert len(Buffer()) == 0


def test_non_positive_capacity_rejected():
    with pytest.raises(ValueError):
        Buffer(0)


def test_from_str_contents_and_capacity():
    buf = Buffer.from_str("hello")
    assert str(buf) == "hello"
    assert len(buf) == len("hello")
    assert buf.capacity() == len("hello") + 1


def test_add_char_doubles_capacity():
    buf = Buffer(2)
    for c in "abc":
        buf.add_char(c)
    assert str(buf) == "abc"
    assert buf.capacity() == 2 * 2


def test_add_char_requires_single_character():
    buf = Buffer()
    with pytest.raises(ValueError):
        buf.add_char("ab")


def test_getitem_in_range():
    buf = Buffer.from_str("xyz")
    assert buf[0] == "x"
    assert buf[2] == "z"


@pytest.mark.parametrize("index", [3, 10, -1])
def test_getitem_out_of_range_panics(index):
    buf = Buffer.from_str("xyz")
    with pytest.raises(InternalCompilerError) as info:
        buf[index]
    assert "out of range" in str(info.value)
    assert str(buf) == "xyz"
    assert len(buf) == 3


def test_equality_with_buffer_and_str():
    assert Buffer.from_str("abc") == Buffer.from_str("abc")
    assert Buffer.from_str("abc") == "abc"
    assert not (Buffer.from_str("abc") == "abcd")
    assert not (Buffer.from_str("abc") == Buffer.from_str("abd"))


def test_truncate_and_reset():
    buf = Buffer.from_str("abcdef")
    cap = buf.capacity()
    buf.truncate(3)
    assert str(buf) == "abc"
    buf.reset()
    assert len(buf) == 0
    assert buf.capacity() == cap


def test_truncate_beyond_contents_rejected():
    buf = Buffer.from_str("ab")
    with pytest.raises(ValueError):
        buf.truncate(5)


def test_read_from_reads_at_most_capacity():
    buf = Buffer(4)
    stream = io.StringIO("abcdefgh")
    assert buf.read_from(stream) is True
    assert str(buf) == "abcd"
    assert buf.read_from(stream) is True
    assert str(buf) == "efgh"
    assert buf.read_from(stream) is False
    assert len(buf) == 0


def test_printf_appends():
    buf = Buffer.from_str("x=")
    buf.printf("%d, %s", 5, "five")
    assert str(buf) == "x=5, five"


def test_printf_grows_to_leave_room_for_terminator():
    buf = Buffer(4)
    buf.printf("%s", "abcd")
    assert str(buf) == "abcd"
    assert buf.capacity() > len(buf)


def test_from_format():
    buf = Buffer.from_format("'%s %s' is invalid", "short", "double")
    assert buf == "'short double' is invalid"


@given(st.text(max_size=200), st.integers(min_value=1, max_value=16))
def test_printf_round_trip(text, capacity):
    buf = Buffer(capacity)
    buf.printf("%s", text)
    assert str(buf) == text
    assert buf.capacity() > len(buf)


@given(st.text(min_size=0, max_size=100))
def test_add_char_round_trip(text):
    buf = Buffer(1)
    for c in text:
        buf.add_char(c)
    assert buf == text
    assert buf.capacity() >= len(buf)