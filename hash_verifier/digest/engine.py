"""Hex digest computation for every supported algorithm."""

import hashlib
import logging
from typing import BinaryIO, Union

from ..errors import DigestComputationError
from ..models.common import HashAlgorithm
from .md5 import MD5

logger = logging.getLogger(__name__)

CHUNK_SIZE = 1024 * 1024

# SHA family is delegated to the platform implementation.
_HASHLIB_NAMES = {
    HashAlgorithm.SHA1: "sha1",
    HashAlgorithm.SHA256: "sha256",
    HashAlgorithm.SHA384: "sha384",
    HashAlgorithm.SHA512: "sha512",
}

Buffer = Union[bytes, bytearray, memoryview, BinaryIO]


def new_hasher(algorithm: Union[HashAlgorithm, str]):
    """Return a fresh hashlib-style object for the algorithm."""
    algorithm = HashAlgorithm.parse(algorithm)
    if algorithm is HashAlgorithm.MD5:
        return MD5()
    return hashlib.new(_HASHLIB_NAMES[algorithm])


def digest(buffer: Buffer, algorithm: Union[HashAlgorithm, str]) -> str:
    """Lowercase hex digest of a bytes-like value or a binary stream.

    Raises UnsupportedAlgorithm for unknown algorithm names and
    DigestComputationError when the stream cannot be read.
    """
    hasher = new_hasher(algorithm)

    if isinstance(buffer, (bytes, bytearray, memoryview)):
        hasher.update(buffer)
        return hasher.hexdigest()

    try:
        while True:
            chunk = buffer.read(CHUNK_SIZE)
            if not chunk:
                break
            hasher.update(chunk)
    except (OSError, ValueError) as e:
        logger.debug(f"Stream read failed during {algorithm} digest: {e}")
        raise DigestComputationError(f"Could not read input: {e}", e)
    return hasher.hexdigest()


class DigestEngine:
    """Thin object wrapper so the engine can be injected and faked."""

    def digest(self, buffer: Buffer, algorithm: Union[HashAlgorithm, str]) -> str:
        return digest(buffer, algorithm)

    @staticmethod
    def algorithms() -> list[HashAlgorithm]:
        return list(HashAlgorithm)
