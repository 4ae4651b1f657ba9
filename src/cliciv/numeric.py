"""Deterministic numeric helpers shared by the ledgers and the hash chain."""

from __future__ import annotations

import math
import struct

_F64_LE = struct.Struct("<d")


def round_to_2(value: float) -> float:
    """Round to two decimal places, halves away from zero.

    ``round()`` uses banker's rounding, which would make ledger amounts drift
    from the recorded saves, so the scaled value is rounded by hand.
    """

    scaled = float(value) * 100.0
    whole = math.trunc(scaled)
    fraction = scaled - whole
    if fraction >= 0.5:
        whole += 1
    elif fraction <= -0.5:
        whole -= 1
    return whole / 100.0


def as_bytes(value: float) -> bytes:
    """Canonical 8-byte little-endian IEEE-754 encoding used for hashing."""

    return _F64_LE.pack(float(value))


__all__ = ["as_bytes", "round_to_2"]
