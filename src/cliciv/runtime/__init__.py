"""Deterministic runtime helpers: RNG derivation, commit and configuration."""

from .commit import digest_u64, max_hash, meets_difficulty, next_power_of_two, search_nonce
from .rng_service import bernoulli_successes, iteration_rng, seed_material

__all__ = [
    "bernoulli_successes",
    "digest_u64",
    "iteration_rng",
    "max_hash",
    "meets_difficulty",
    "next_power_of_two",
    "search_nonce",
    "seed_material",
]
