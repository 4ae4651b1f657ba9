"""Per-iteration random source derivation.

The random source is never persisted. Each transition rebuilds it from the
game seed and the hash of the state being transitioned, so replaying a log
from genesis reproduces every draw bit for bit.
"""

from __future__ import annotations

import random

from .config import SEED_BITS

_PADDING = bytes(8)


def seed_material(seed: int, prev_hash: int) -> bytes:
    """256-bit seed: 16 bytes of seed, 8 bytes of prev_hash (both LE), 8 zero bytes."""

    return (
        seed.to_bytes(SEED_BITS // 8, "little", signed=True)
        + prev_hash.to_bytes(8, "little", signed=False)
        + _PADDING
    )


def iteration_rng(seed: int, prev_hash: int) -> random.Random:
    material = seed_material(seed, prev_hash)
    return random.Random(int.from_bytes(material, "little", signed=False))


def bernoulli_successes(rng: random.Random, trials: int, probability: float) -> int:
    """Count successes over ``trials`` independent Bernoulli(probability) draws."""

    if trials <= 0:
        return 0
    return sum(1 for _ in range(trials) if rng.random() < probability)


__all__ = ["bernoulli_successes", "iteration_rng", "seed_material"]
