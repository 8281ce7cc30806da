import copy
import pickle

import pytest

from safebytes.core.config import MemoryConfig, SafeBytesConfig
from safebytes.core.encoding.byte_array import InvalidLength, InvalidValue
from safebytes.core.memory.safe_array import SafeArray


class Key32(SafeArray, length=32):
    __slots__ = ()


def test_zero_initialised():
    assert SafeArray(16).as_bytes() == bytes(16)
    assert len(Key32()) == 32


def test_from_bytes_checks_length():
    assert SafeArray.from_bytes(b"\x01\x02", length=2).as_bytes() == b"\x01\x02"
    with pytest.raises(InvalidLength):
        SafeArray.from_bytes(b"\x01\x02", length=3)
    with pytest.raises(InvalidLength):
        Key32.from_bytes(b"\x01" * 31)
    assert isinstance(Key32.from_bytes(b"\x01" * 32), Key32)


def test_class_length_conflicts_with_argument():
    with pytest.raises(InvalidLength):
        Key32(16)


def test_length_required():
    with pytest.raises(TypeError):
        SafeArray()


def test_hex_roundtrip():
    arr = SafeArray.from_hex("00ff10")
    assert arr.to_hex() == "00ff10"
    with pytest.raises(InvalidValue):
        SafeArray.from_hex("zz")


def test_view_is_by_reference():
    arr = SafeArray(4)
    view = arr.as_view()
    view[0] = 0x7F
    view.release()
    assert arr.as_bytes() == b"\x7f\x00\x00\x00"


def test_constant_time_equality():
    assert SafeArray.from_bytes(b"abc") == SafeArray.from_bytes(b"abc")
    assert SafeArray.from_bytes(b"abc") != SafeArray.from_bytes(b"abd")
    assert SafeArray.from_bytes(b"abc") != SafeArray.from_bytes(b"abcd")
    assert SafeArray.from_bytes(b"abc") != b"abc"


def test_zeroize_keeps_array_usable():
    arr = SafeArray.from_bytes(b"\xff" * 8)
    arr.zeroize()
    assert arr.as_bytes() == bytes(8)
    arr.as_view()[0] = 1
    assert arr.as_bytes()[0] == 1


def test_repr_hides_contents():
    arr = SafeArray.from_bytes(b"\xde\xad\xbe\xef")
    assert repr(arr) == "SafeArray(len=4)"
    assert "dead" not in repr(arr)


def test_unhashable_and_uncopyable():
    arr = SafeArray(4)
    with pytest.raises(TypeError):
        hash(arr)
    with pytest.raises(TypeError):
        pickle.dumps(arr)
    with pytest.raises(TypeError):
        copy.copy(arr)
    with pytest.raises(TypeError):
        copy.deepcopy(arr)


def test_clone_is_independent():
    arr = Key32.from_bytes(b"\x05" * 32)
    other = arr.clone()
    assert isinstance(other, Key32)
    arr.zeroize()
    assert other.as_bytes() == b"\x05" * 32


def test_memory_locking_is_best_effort():
    SafeBytesConfig.set_instance(SafeBytesConfig(memory=MemoryConfig(lock_memory=True)))
    arr = SafeArray.from_bytes(b"\x01" * 64)
    arr.zeroize()
    assert arr.as_bytes() == bytes(64)
