import hashlib

import pytest

from hash_verifier.digest.md5 import MD5, md5_hex

# RFC 1321, appendix A.5
RFC_VECTORS = [
    (b"", "d41d8cd98f00b204e9800998ecf8427e"),
    (b"a", "0cc175b9c0f1b6a831c399e269772661"),
    (b"abc", "900150983cd24fb0d6963f7d28e17f72"),
    (b"message digest", "f96b697d7cb7938d525a2f31aaf161d0"),
    (b"abcdefghijklmnopqrstuvwxyz", "c3fcd3d76192e4007dfb496cca67e13b"),
    (
        b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789",
        "d174ab98d277d9f5a5611c2c9f419d9f",
    ),
    (b"1234567890" * 8, "57edf4a22be3c955ac49da2e2107b67a"),
]


@pytest.mark.parametrize("data,expected", RFC_VECTORS)
def test_rfc1321_test_suite(data, expected):
    assert md5_hex(data) == expected


@pytest.mark.parametrize("length", [55, 56, 57, 63, 64, 65, 119, 120, 128, 1000])
def test_padding_boundaries_match_hashlib(length):
    data = bytes(i % 251 for i in range(length))
    assert md5_hex(data) == hashlib.md5(data).hexdigest()


def test_incremental_updates_equal_one_shot():
    data = bytes(range(256)) * 5
    hasher = MD5()
    for start in range(0, len(data), 37):
        hasher.update(data[start:start + 37])
    assert hasher.hexdigest() == md5_hex(data)


def test_digest_does_not_finalize_state():
    hasher = MD5(b"abc")
    first = hasher.hexdigest()
    assert hasher.hexdigest() == first
    hasher.update(b"def")
    assert hasher.hexdigest() == hashlib.md5(b"abcdef").hexdigest()


def test_copy_is_independent():
    hasher = MD5(b"prefix-")
    clone = hasher.copy()
    clone.update(b"tail")
    assert hasher.hexdigest() == hashlib.md5(b"prefix-").hexdigest()
    assert clone.hexdigest() == hashlib.md5(b"prefix-tail").hexdigest()


def test_accepts_bytearray_and_memoryview():
    assert md5_hex(bytearray(b"abc")) == "900150983cd24fb0d6963f7d28e17f72"
    assert MD5(memoryview(b"abc")).hexdigest() == "900150983cd24fb0d6963f7d28e17f72"


def test_digest_is_lowercase_hex_of_16_bytes():
    hasher = MD5(b"The quick brown fox jumps over the lazy dog")
    assert len(hasher.digest()) == 16
    assert hasher.hexdigest() == "9e107d9d372bb6826bd81d3542a419d6"
