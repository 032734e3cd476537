"""
Duplex random generator subpackage.
"""

from .duplex_random import DuplexRandom, get_seed_bytes, MIN_SEED_LENGTH_BYTES
from .forgetting import ForgettingBuffer, secure_zero
from .seed_generator import SeedGenerator, EntropyError, MASTER_CAPACITY_BITS
from .presets import CAPACITY_PRESETS, capacity_bits_for, validate_capacity

__all__ = [
    'DuplexRandom',
    'get_seed_bytes',
    'MIN_SEED_LENGTH_BYTES',
    'ForgettingBuffer',
    'secure_zero',
    'SeedGenerator',
    'EntropyError',
    'MASTER_CAPACITY_BITS',
    'CAPACITY_PRESETS',
    'capacity_bits_for',
    'validate_capacity'
]
