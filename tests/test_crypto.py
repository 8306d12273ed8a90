import string

import pytest

from shimkit.crypto import compute_md5_hash


@pytest.mark.parametrize(
    "text, expected",
    [
        ("", "d41d8cd98f00b204e9800998ecf8427e"),
        ("abc", "900150983cd24fb0d6963f7d28e17f72"),
        ("message digest", "f96b697d7cb7938d525a2f31aaf161d0"),
    ],
)
def test_known_digests(text, expected):
    assert compute_md5_hash(text) == expected


@pytest.mark.parametrize("text", ["hello_world", "secret_key", "日本語", "a" * 1000])
def test_digest_is_32_lowercase_hex_chars(text):
    digest = compute_md5_hash(text)
    assert len(digest) == 32
    assert set(digest) <= set(string.hexdigits.lower())


def test_digest_is_deterministic():
    text = "The quick brown fox jumps over the lazy dog"
    expected = "9e107d9d372bb6826bd81d3542a419d6"
    assert [compute_md5_hash(text) for _ in range(3)] == [expected] * 3


def test_different_inputs_give_different_digests():
    assert compute_md5_hash("hello_world") != compute_md5_hash("hello_world!")