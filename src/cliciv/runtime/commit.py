"""Digests and the proof-of-work style commit.

The nonce search is an anti-casual-tampering heuristic: forging a long save
by hand gets more expensive as the iteration count grows, but it is not a
cryptographic guarantee against anyone who can run the engine.
"""

from __future__ import annotations

from hashlib import sha256
from typing import Callable

from .config import U64_MAX


def digest_u64(payload: bytes) -> int:
    digest = sha256(payload).digest()
    return int.from_bytes(digest[:8], "big", signed=False)


def next_power_of_two(n: int) -> int:
    if n <= 1:
        return 1
    return 1 << (n - 1).bit_length()


def max_hash(iterations: int) -> int:
    """Highest acceptable state hash at ``iterations``; halves at every power of two."""

    shift = (next_power_of_two(iterations).bit_length() - 1)
    return U64_MAX >> shift


def search_nonce(hash_for: Callable[[int], int], iterations: int, *, start: int = 0) -> int:
    """Return the first nonce >= ``start`` whose hash is within ``max_hash(iterations)``."""

    ceiling = max_hash(iterations)
    nonce = start
    while hash_for(nonce) > ceiling:
        nonce += 1
    return nonce


def meets_difficulty(state_hash: int, iterations: int) -> bool:
    return state_hash <= max_hash(iterations)


__all__ = ["digest_u64", "max_hash", "meets_difficulty", "next_power_of_two", "search_nonce"]
