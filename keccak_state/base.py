"""
Base class for byte-addressable sponge permutation states.
"""

from abc import ABC, abstractmethod


class PermutationState(ABC):
    """
    Abstract permutation state split into a rate and a capacity region.

    Byte positions passed to the data methods are offsets into the rate
    region. Bits are numbered LSB-first within each byte.
    """

    # Total state width in bits, to be defined by concrete implementations
    width_bits = None

    def __init__(self, capacity_bits):
        if not 0 < capacity_bits < self.width_bits:
            raise ValueError(
                f"capacity must be between 1 and {self.width_bits - 1} bits"
            )
        self.capacity_bits = capacity_bits
        self.rate_bits = self.width_bits - capacity_bits

    @abstractmethod
    def xor_bytes(self, pos, data, off, length):
        """XOR data[off:off+length] into the rate at byte position pos."""
        raise NotImplementedError

    @abstractmethod
    def read_bytes(self, pos, buf, off, length):
        """Copy length rate bytes from byte position pos into buf[off:]."""
        raise NotImplementedError

    @abstractmethod
    def zero_bytes(self, pos, length):
        """Overwrite length rate bytes from byte position pos with zero."""
        raise NotImplementedError

    @abstractmethod
    def pad(self, bit_position, bits=0, bit_count=0):
        """Append bit_count domain bits and pad10*1 starting at bit_position."""
        raise NotImplementedError

    @abstractmethod
    def permute(self):
        """Apply the permutation to the whole state."""
        raise NotImplementedError

    def _check_rate_range(self, pos, length):
        if pos < 0 or length < 0 or (pos + length) * 8 > self.rate_bits:
            raise ValueError("Byte range outside the rate region")
