import copy
import logging
import pickle

import pytest

from safebytes import HIDDEN_MARKER
from safebytes.core.config import MemoryConfig, SafeBytesConfig
from safebytes.core.memory.hidden import Hidden
from safebytes.core.memory.password import SafePassword


def test_reveal_returns_plaintext():
    pw = SafePassword("secret123")
    assert pw.reveal() == "secret123"
    assert pw.reveal_bytes() == bytearray(b"secret123")


def test_text_representations_never_contain_secret():
    pw = SafePassword.from_str("secret123")
    assert "secret123" not in str(pw)
    assert "secret123" not in repr(pw)
    assert "secret123" not in f"{pw} {pw!r} {pw:^30}"
    assert str(pw) == HIDDEN_MARKER


def test_logging_does_not_reveal(caplog):
    logger = logging.getLogger("tests.password")
    with caplog.at_level(logging.INFO, logger="tests.password"):
        logger.info("login with %s", SafePassword("secret123"))
    assert "secret123" not in caplog.text
    assert HIDDEN_MARKER in caplog.text


def test_is_a_hidden():
    assert isinstance(SafePassword("x"), Hidden)


def test_accepts_bytes_and_unicode():
    assert SafePassword(b"secret123").reveal() == "secret123"
    assert SafePassword("pässwörd").reveal() == "pässwörd"
    assert SafePassword("pässwörd").reveal_bytes() == bytearray("pässwörd".encode("utf-8"))


def test_rejects_other_types_and_invalid_utf8():
    with pytest.raises(TypeError):
        SafePassword(12345)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        SafePassword.from_str(b"bytes")  # type: ignore[arg-type]
    with pytest.raises(UnicodeDecodeError):
        SafePassword(b"\xff\xfe")


def test_bytearray_ownership_moves_to_wrapper():
    buf = bytearray(b"hunter2")
    pw = SafePassword(buf)
    assert pw.reveal_bytes() is buf
    pw.wipe()
    assert buf == bytearray(7)


def test_equality():
    assert SafePassword("secret123") == SafePassword("secret123")
    assert SafePassword("secret123") != SafePassword("secret124")
    assert SafePassword("secret123") != Hidden(b"secret123")


def test_unhashable_and_uncopyable():
    pw = SafePassword("x")
    with pytest.raises(TypeError):
        hash(pw)
    with pytest.raises(TypeError):
        pickle.dumps(pw)
    with pytest.raises(TypeError):
        copy.deepcopy(pw)


def test_clone():
    pw = SafePassword("secret123")
    other = pw.clone()
    assert isinstance(other, SafePassword)
    pw.wipe()
    assert other.reveal() == "secret123"


def test_context_manager_wipes():
    with SafePassword("secret123") as pw:
        buf = pw.reveal_bytes()
    assert buf == bytearray(len("secret123"))
    assert pw.is_wiped
    with pytest.raises(ValueError):
        pw.reveal()


def test_into_inner_wipes_buffer():
    pw = SafePassword("secret123")
    buf = pw.reveal_bytes()
    assert pw.into_inner() == "secret123"
    assert buf == bytearray(9)
    assert pw.is_wiped


def test_memory_locking_is_best_effort():
    SafeBytesConfig.set_instance(SafeBytesConfig(memory=MemoryConfig(lock_memory=True)))
    pw = SafePassword("secret123")
    assert pw.reveal() == "secret123"
    pw.wipe()
    assert pw.is_wiped
