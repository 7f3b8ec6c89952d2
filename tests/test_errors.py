import pytest

from minicc.errors import InternalCompilerError, panic


def test_panic_raises_internal_compiler_error():
    with pytest.raises(InternalCompilerError) as info:
        panic("failed to allocate memory")
    assert info.value.message == "failed to allocate memory"


def test_panic_message_is_prefixed():
    with pytest.raises(InternalCompilerError) as info:
        panic("unreachable")
    assert str(info.value) == "internal compiler error: unreachable"


def test_internal_compiler_error_can_be_caught_as_runtime_error():
    with pytest.raises(RuntimeError) as info:
        panic("unknown type")
    assert str(info.value).endswith("unknown type")