import hashlib
import io

import pytest

from hash_verifier.digest.engine import DigestEngine, digest
from hash_verifier.errors import DigestComputationError, UnsupportedAlgorithm
from hash_verifier.models.common import HashAlgorithm


class BrokenStream(io.RawIOBase):
    def readable(self):
        return True

    def read(self, size=-1):
        raise OSError("device not ready")


def test_known_digests():
    assert digest(b"", HashAlgorithm.MD5) == "d41d8cd98f00b204e9800998ecf8427e"
    assert digest(b"abc", HashAlgorithm.MD5) == "900150983cd24fb0d6963f7d28e17f72"
    assert digest(b"", HashAlgorithm.SHA256) == (
        "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
    )


@pytest.mark.parametrize("algorithm,name", [
    (HashAlgorithm.SHA1, "sha1"),
    (HashAlgorithm.SHA256, "sha256"),
    (HashAlgorithm.SHA384, "sha384"),
    (HashAlgorithm.SHA512, "sha512"),
    (HashAlgorithm.MD5, "md5"),
])
def test_all_algorithms_match_hashlib(algorithm, name):
    data = b"integrity check payload" * 100
    assert digest(data, algorithm) == hashlib.new(name, data).hexdigest()


def test_algorithm_names_are_parsed():
    assert digest(b"abc", "sha-256") == hashlib.sha256(b"abc").hexdigest()
    assert digest(b"abc", "SHA256") == hashlib.sha256(b"abc").hexdigest()
    assert digest(b"abc", "md5") == "900150983cd24fb0d6963f7d28e17f72"


def test_unsupported_algorithm():
    with pytest.raises(UnsupportedAlgorithm) as exc:
        digest(b"abc", "CRC32")
    assert "CRC32" in str(exc.value)


def test_binary_stream_is_read_in_chunks():
    data = bytes(range(256)) * 10000
    assert digest(io.BytesIO(data), HashAlgorithm.MD5) == hashlib.md5(data).hexdigest()


def test_stream_fault_raises_digest_error():
    with pytest.raises(DigestComputationError) as exc:
        digest(BrokenStream(), HashAlgorithm.SHA1)
    assert isinstance(exc.value.cause, OSError)


def test_output_is_lowercase_without_separators():
    for algorithm in DigestEngine.algorithms():
        value = DigestEngine().digest(b"Hello", algorithm)
        assert value == value.lower()
        assert all(c in "0123456789abcdef" for c in value)
