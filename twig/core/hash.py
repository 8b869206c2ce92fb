"""Content digests for Twig objects."""

import hashlib
import string

DIGEST_LENGTH = 40

_HEX = frozenset(string.hexdigits.lower())


def hash_object(data: bytes) -> str:
    """
    Digest of raw object bytes.

    No type or size header is mixed in: the digest of a blob is the plain
    SHA-1 of the file contents.

    Args:
        data: Bytes to hash

    Returns:
        40-character lowercase hex string
    """
    return hashlib.sha1(data).hexdigest()


def is_digest(value: str) -> bool:
    """Check whether value is a full lowercase hex digest."""
    return len(value) == DIGEST_LENGTH and set(value) <= _HEX
