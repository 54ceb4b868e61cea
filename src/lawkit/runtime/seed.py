"""Seed derivation for reproducible runs."""

from __future__ import annotations

import random

_MASK64 = (1 << 64) - 1


def splitmix64(seed: int) -> int:
    """Derive the next 64-bit seed from the current one."""
    z = (seed + 0x9E3779B97F4A7C15) & _MASK64
    z = ((z ^ (z >> 30)) * 0xBF58476D1CE4E5B9) & _MASK64
    z = ((z ^ (z >> 27)) * 0x94D049BB133111EB) & _MASK64
    return z ^ (z >> 31)


def fresh_seed() -> int:
    """Pick an unpredictable run seed."""
    return random.SystemRandom().getrandbits(63)
