"""Test: MD5 / SHA-256 hex digests."""

import pytest

from cryptokit.crypto.digest import md5_hex, sha256_hex


@pytest.mark.parametrize("data, expected", [
    ("", "d41d8cd98f00b204e9800998ecf8427e"),
    ("abc", "900150983cd24fb0d6963f7d28e17f72"),
    ("The quick brown fox jumps over the lazy dog", "9e107d9d372bb6826bd81d3542a419d6"),
])
def test_md5_known_answers(data, expected):
    assert md5_hex(data) == expected


def test_md5_text_and_bytes_agree():
    assert md5_hex("abc") == md5_hex(b"abc")
    assert md5_hex(bytearray(b"abc")) == md5_hex(memoryview(b"abc"))


def test_md5_text_is_utf8_encoded():
    assert md5_hex("café") == md5_hex("café".encode("utf-8"))


def test_md5_output_shape():
    digest = md5_hex(b"\x00\xff" * 1000)

    assert len(digest) == 32
    assert digest == digest.lower()


def test_sha256_known_answer():
    assert sha256_hex("abc") == (
        "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
    )


@pytest.mark.parametrize("bad", [None, 123, ["abc"]])
def test_unsupported_input_type(bad):
    with pytest.raises(TypeError):
        md5_hex(bad)
