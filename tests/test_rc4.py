import pytest
from hypothesis import given
from hypothesis import strategies as st

from labkit.rc4 import Rc4Encoder


@pytest.mark.parametrize(
    ("key", "plaintext", "ciphertext_hex"),
    [
        (b"Key", b"Plaintext", "BBF316E8D940AF0AD3"),
        (b"Wiki", b"pedia", "1021BF0420"),
        (b"Secret", b"Attack at dawn", "45A01F645FC35B383552544B9BF5"),
    ],
)
def test_known_vectors(key, plaintext, ciphertext_hex):
    assert Rc4Encoder(key).process(plaintext) == bytes.fromhex(ciphertext_hex)


@given(st.binary(min_size=1, max_size=40), st.binary(max_size=200))
def test_process_round_trip(key, data):
    encoder = Rc4Encoder(key)
    assert encoder.process(encoder.process(data)) == data


@given(st.binary(min_size=1, max_size=40), st.integers(min_value=0, max_value=300))
def test_process_of_zeros_is_keystream(key, length):
    encoder = Rc4Encoder(key)
    assert encoder.process(bytes(length)) == encoder.keystream(length)


def test_keystream_is_prefix_consistent():
    encoder = Rc4Encoder(b"Key")
    assert encoder.keystream(20)[:10] == encoder.keystream(10)
    assert len(encoder.keystream(20)) == 20


def test_keystream_negative_length():
    with pytest.raises(ValueError):
        Rc4Encoder(b"Key").keystream(-1)


def test_empty_key_rejected():
    with pytest.raises(ValueError):
        Rc4Encoder(b"")


def test_changing_key_changes_output():
    encoder = Rc4Encoder(b"Key")
    first = encoder.process(b"Plaintext")
    encoder.key = b"Wiki"
    assert encoder.key == b"Wiki"
    assert encoder.process(b"Plaintext") == Rc4Encoder(b"Wiki").process(b"Plaintext")
    assert encoder.process(b"Plaintext") != first


def test_set_empty_key_rejected():
    encoder = Rc4Encoder(b"Key")
    with pytest.raises(ValueError):
        encoder.key = b""
    assert encoder.key == b"Key"


def test_file_round_trip(tmp_path):
    plain = tmp_path / "plain.bin"
    cipher = tmp_path / "cipher.bin"
    back = tmp_path / "back.bin"
    payload = bytes(range(256)) * 3
    plain.write_bytes(payload)
    encoder = Rc4Encoder(b"Secret")
    encoder.encode(plain, cipher, True)
    assert cipher.read_bytes() == encoder.process(payload)
    encoder.encode(cipher, back, False)
    assert back.read_bytes() == payload


def test_empty_file(tmp_path):
    plain = tmp_path / "empty.bin"
    out = tmp_path / "out.bin"
    plain.write_bytes(b"")
    Rc4Encoder(b"Key").encode(plain, out, True)
    assert out.read_bytes() == b""


def test_missing_input_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        Rc4Encoder(b"Key").encode(tmp_path / "missing.bin", tmp_path / "out.bin", True)
    assert not (tmp_path / "out.bin").exists()