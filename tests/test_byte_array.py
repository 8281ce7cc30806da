import pytest

from safebytes.core.encoding.byte_array import (
    ByteArray,
    Bytes32,
    Bytes64,
    ByteVector,
    ConversionError,
    FixedBytes,
    InvalidLength,
    InvalidValue,
)
from safebytes.core.encoding.hex import HexError


class Nonce(FixedBytes, length=4):
    __slots__ = ()


class NonZeroKey(FixedBytes, length=2):
    __slots__ = ()

    @classmethod
    def _validate(cls, raw):
        if raw == b"\x00\x00":
            raise InvalidValue("all-zero key")


def test_fixed_roundtrip():
    raw = bytes(range(32))
    value = Bytes32.from_bytes(raw)
    assert value.as_bytes() == raw
    assert Bytes32.from_bytes(value.as_bytes()) == value
    assert bytes(value) == raw
    assert len(value) == 32


def test_fixed_rejects_wrong_length():
    with pytest.raises(InvalidLength) as exc_info:
        Bytes32.from_bytes(b"\x01" * 31)
    assert exc_info.value.expected == 32
    assert exc_info.value.actual == 31
    assert isinstance(exc_info.value, ConversionError)

    with pytest.raises(InvalidLength):
        Bytes64.from_bytes(b"\x01" * 65)


def test_no_silent_truncation_or_padding():
    with pytest.raises(InvalidLength):
        Nonce(b"\x01\x02\x03\x04\x05")
    with pytest.raises(InvalidLength):
        Nonce(b"\x01")


def test_validity_hook():
    assert NonZeroKey(b"\x00\x01").as_bytes() == b"\x00\x01"
    with pytest.raises(InvalidValue):
        NonZeroKey.from_bytes(b"\x00\x00")


def test_hex_roundtrip():
    value = Nonce(b"\xde\xad\xbe\xef")
    assert value.to_hex() == "deadbeef"
    assert Nonce.from_hex("deadbeef") == value
    assert Nonce.from_hex("DEADBEEF") == value


def test_from_hex_wraps_codec_errors():
    with pytest.raises(InvalidValue) as exc_info:
        Nonce.from_hex("zzzzzzzz")
    assert isinstance(exc_info.value.__cause__, HexError)

    with pytest.raises(InvalidValue):
        Nonce.from_hex("abc")


def test_from_hex_wrong_length():
    with pytest.raises(InvalidLength):
        Nonce.from_hex("00")


def test_vec_conversions():
    value = Nonce(b"\x01\x02\x03\x04")
    assert value.to_vec() == [1, 2, 3, 4]
    assert Nonce.from_vec([1, 2, 3, 4]) == value
    with pytest.raises(InvalidValue):
        Nonce.from_vec([1, 2, 3, 256])


def test_byte_vector_any_length():
    assert ByteVector().as_bytes() == b""
    assert ByteVector(b"abc").to_hex() == "616263"
    assert ByteVector.from_bytes(bytearray(b"\x00" * 1000)).as_bytes() == b"\x00" * 1000


def test_values_are_immutable_and_hashable():
    value = Nonce(b"\x01\x02\x03\x04")
    with pytest.raises(AttributeError):
        value._data = b"\x00\x00\x00\x00"
    assert {value: "x"}[Nonce(b"\x01\x02\x03\x04")] == "x"


def test_equality_and_ordering_stay_within_type():
    a = Nonce(b"\x00\x00\x00\x01")
    b = Nonce(b"\x00\x00\x00\x02")
    assert a < b
    assert sorted([b, a]) == [a, b]
    assert a != ByteVector(b"\x00\x00\x00\x01")


def test_zero_and_repr():
    assert Bytes32.zero().as_bytes() == bytes(32)
    assert repr(Nonce(b"\x00\x00\x00\xff")) == "Nonce('000000ff')"


def test_fixed_bytes_without_length():
    with pytest.raises(TypeError):
        FixedBytes(b"")


def test_contract_is_abstract():
    with pytest.raises(TypeError):
        ByteArray()  # type: ignore[abstract]
