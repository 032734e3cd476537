"""
Permutation state subpackage: the sponge permutations the duplex generator runs on.
"""

from .base import PermutationState
from .keccak import KeccakState, keccak_p

__all__ = [
    'PermutationState', 'KeccakState', 'keccak_p'
]
