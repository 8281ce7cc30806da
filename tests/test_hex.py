import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from safebytes.core.encoding.hex import (
    Hex,
    HexError,
    InvalidChar,
    OddLength,
    decode,
    encode,
    encode_many,
)
from safebytes.core.encoding.byte_array import Bytes32


def test_encode_known_value():
    assert encode(bytes([0x00, 0xFF, 0x10])) == "00ff10"


def test_encode_accepts_bytearray_and_memoryview():
    assert encode(bytearray(b"\x01\xab")) == "01ab"
    assert encode(memoryview(b"\x01\xab")) == "01ab"


def test_encode_rejects_text():
    with pytest.raises(TypeError):
        encode("00ff")  # type: ignore[arg-type]


def test_empty_roundtrip():
    assert encode(b"") == ""
    assert decode("") == b""


def test_decode_odd_length():
    with pytest.raises(OddLength) as exc_info:
        decode("a")
    assert exc_info.value.length == 1
    assert isinstance(exc_info.value, HexError)
    assert isinstance(exc_info.value, ValueError)


def test_decode_invalid_char_reports_position():
    with pytest.raises(InvalidChar) as exc_info:
        decode("zz")
    assert exc_info.value.position == 0

    with pytest.raises(InvalidChar) as exc_info:
        decode("00ag")
    assert exc_info.value.position == 3


def test_odd_length_checked_before_characters():
    with pytest.raises(OddLength):
        decode("zzz")


def test_decode_normalizes_mixed_case():
    assert decode("0a1B") == bytes([0x0A, 0x1B])
    assert decode("DEADbeef") == decode("deadbeef")


@pytest.mark.parametrize("text", ["0x00", "00 ff", "00\nff", "é0", "+1"])
def test_decode_rejects_prefix_whitespace_and_non_ascii(text):
    with pytest.raises(HexError):
        decode(text)


def test_decode_large_input():
    data = bytes(range(256)) * 4096  # 1 MiB
    assert decode(encode(data)) == data


def test_encode_many():
    assert encode_many([b"\x00", b"\xff", b""]) == ["00", "ff", ""]


def test_hex_protocol():
    assert isinstance(Bytes32.zero(), Hex)


@settings(max_examples=200)
@given(st.binary(max_size=512))
def test_roundtrip_and_format(data):
    text = encode(data)
    assert decode(text) == data
    assert len(text) == 2 * len(data)
    assert text == text.lower()
