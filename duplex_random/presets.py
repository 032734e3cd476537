"""
Named capacity settings for duplex generators.
"""

from .seed_generator import MASTER_CAPACITY_BITS


# Smallest and largest-exclusive word multiple n in capacity_bits = n*64 - 3
MIN_CAPACITY_WORDS = 4
MAX_CAPACITY_WORDS = 25


def capacity_bits_for(n):
    """Return the capacity n*64 - 3 for a word multiple n in [4, 25)."""
    if not MIN_CAPACITY_WORDS <= n < MAX_CAPACITY_WORDS:
        raise ValueError(
            f"n must be in [{MIN_CAPACITY_WORDS}, {MAX_CAPACITY_WORDS}), got {n}"
        )
    return n * 64 - 3


def validate_capacity(capacity_bits):
    """Check an untrusted capacity setting and return it unchanged."""
    if not isinstance(capacity_bits, int) or isinstance(capacity_bits, bool):
        raise ValueError(f"Capacity must be an integer, got {capacity_bits!r}")
    n, rem = divmod(capacity_bits + 3, 64)
    if rem or not MIN_CAPACITY_WORDS <= n < MAX_CAPACITY_WORDS:
        raise ValueError(
            f"Capacity must be n*64 - 3 with n in "
            f"[{MIN_CAPACITY_WORDS}, {MAX_CAPACITY_WORDS}), got {capacity_bits}"
        )
    return capacity_bits


# Security level is roughly half the capacity
CAPACITY_PRESETS = {
    "KECCAK_DUPLEX_128": capacity_bits_for(5),
    "KECCAK_DUPLEX_256": capacity_bits_for(9),
    "KECCAK_DUPLEX_MASTER": MASTER_CAPACITY_BITS,
}
