"""Digest computation."""

from .engine import DigestEngine, digest, new_hasher
from .md5 import MD5, md5_hex
from .task import HashTask

__all__ = [
    "DigestEngine",
    "digest",
    "new_hasher",
    "MD5",
    "md5_hex",
    "HashTask",
]
