from datetime import datetime, timezone

import pytest

from safebytes.core.encoding.byte_array import Bytes32, InvalidLength
from safebytes.core.memory.hidden import Hidden
from safebytes.types.epoch_time import EpochTime
from safebytes.utils.bits import byte_to_bits, bytes_to_bits, checked_bits_to_uint
from safebytes.utils.convert import try_convert_all
from safebytes.utils.extend_bytes import append_int, append_raw_bytes, raw_bytes
from safebytes.utils.validators import ValidationError, validate_bool, validate_int


# bits

def test_bytes_to_bits():
    assert bytes_to_bits(bytes([1, 127])) == [
        True, False, False, False, False, False, False, False,
        True, True, True, True, True, True, True, False,
    ]


def test_byte_to_bits_range():
    assert byte_to_bits(0x80) == [False] * 7 + [True]
    with pytest.raises(ValueError):
        byte_to_bits(256)


def test_checked_bits_to_uint():
    assert checked_bits_to_uint([True] + [False] * 7) == 1
    assert checked_bits_to_uint([True] + [False] * 7 + [True] + [False] * 7) == 257
    assert checked_bits_to_uint([False] * 65) is None
    assert checked_bits_to_uint([True] * 64) == 2**64 - 1
    assert checked_bits_to_uint([True] * 9, max_bits=8) is None


# extend_bytes

def test_append_ints():
    buf = bytearray()
    append_raw_bytes(1, buf)
    assert buf == (1).to_bytes(8, "little")

    buf = bytearray()
    append_int(-2, buf, width=2)
    assert buf == b"\xfe\xff"

    buf = bytearray()
    append_int(0xFFFF, buf, width=2, signed=False)
    assert buf == b"\xff\xff"

    with pytest.raises(OverflowError):
        append_int(256, bytearray(), width=1, signed=False)


def test_append_text_bool_and_bytes():
    assert raw_bytes("hello") == b"hello"
    assert raw_bytes(True, False) == b"\x01\x00"
    assert raw_bytes(b"\x01", bytearray(b"\x02"), memoryview(b"\x03")) == b"\x01\x02\x03"


def test_append_datetime():
    dt = datetime(2020, 2, 2, tzinfo=timezone.utc)
    assert raw_bytes(dt) == (1580601600).to_bytes(8, "little", signed=True)


def test_append_sequences_and_byte_arrays():
    key = Bytes32.zero()
    assert raw_bytes(["a", "b"], ("c",)) == b"abc"
    assert raw_bytes(key) == bytes(32)
    assert raw_bytes(EpochTime(1)) == b"\x01" + bytes(7)


def test_append_unsupported():
    with pytest.raises(TypeError):
        raw_bytes(1.5)
    with pytest.raises(TypeError):
        raw_bytes(Hidden("secret"))


# convert

def test_try_convert_all():
    assert try_convert_all(["00" * 32, "11" * 32], Bytes32.from_hex) == [
        Bytes32(bytes(32)),
        Bytes32(b"\x11" * 32),
    ]


def test_try_convert_all_first_error():
    calls = []

    def conv(text):
        calls.append(text)
        return Bytes32.from_hex(text)

    with pytest.raises(InvalidLength):
        try_convert_all(["00", "11" * 32], conv)
    assert calls == ["00"]


# validators

def test_validate_int():
    assert validate_int("3", 1, 7) == 3
    assert validate_int(5) == 5
    with pytest.raises(ValidationError):
        validate_int("8", 1, 7)
    with pytest.raises(ValidationError):
        validate_int("three")
    with pytest.raises(ValidationError):
        validate_int(True)


@pytest.mark.parametrize("text,expected", [
    ("true", True), ("1", True), ("YES", True), ("on", True),
    ("false", False), ("0", False), ("no", False), ("Off", False),
])
def test_validate_bool(text, expected):
    assert validate_bool(text) is expected


def test_validate_bool_rejects_unknown():
    with pytest.raises(ValidationError):
        validate_bool("maybe")
