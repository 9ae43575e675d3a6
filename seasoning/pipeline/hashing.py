"""Keyed 32-bit hash used by the hash naming strategy."""

import hashlib
import logging
from functools import partial
from typing import Any, Callable

logger = logging.getLogger(__name__)

HASH_DIGEST_SIZE = 4  # bytes, i.e. a 32-bit hash
SEED_BYTES = 8

LOWERCASE_A = ord("a")
LOWERCASE_Z = ord("z")

# Process-wide hash constructor, bound once by initialize_hash()
_hasher: Callable[..., Any] | None = None


class HashNotInitializedError(RuntimeError):
    """Raised when hashing is requested before initialize_hash() ran."""

    pass


def initialize_hash() -> None:
    """Bind the keyed hash constructor. Repeated calls are no-ops."""
    global _hasher
    if _hasher is None:
        _hasher = partial(hashlib.blake2s, digest_size=HASH_DIGEST_SIZE)
        logger.debug("Initialized blake2s hash (%d-bit digest)", HASH_DIGEST_SIZE * 8)


def is_hash_initialized() -> bool:
    return _hasher is not None


def _seed_to_key(seed: int | None) -> bytes:
    return ((seed or 0) & (2 ** (SEED_BYTES * 8) - 1)).to_bytes(SEED_BYTES, "little")


def hash_value(value: str, seed: int | None = None) -> str:
    """Hash a string into 8 lower-case hex characters.

    Args:
        value: Text to hash
        seed: Hash key; ``None`` behaves like ``0``

    Raises:
        HashNotInitializedError: If initialize_hash() has not been called
    """
    if _hasher is None:
        raise HashNotInitializedError("Hash is not initialized. Call initialize_hash() first.")
    return _hasher(value.encode("utf-8"), key=_seed_to_key(seed)).hexdigest()


def force_lower_first_char(value: str) -> str:
    """Remap the first character into a-z so the result can start a CSS identifier."""
    if not value:
        return value
    first = ord(value[0])
    if LOWERCASE_A <= first <= LOWERCASE_Z:
        return value
    return chr(LOWERCASE_A + first % 26) + value[1:]


def generate_hash(value: str, seed: int | None = None) -> str:
    """Hash a string into a value that is always a legal identifier start."""
    return force_lower_first_char(hash_value(value, seed))
