"""
Process-wide master seed generator.

One duplex generator, seeded from system entropy, hands out seed material to
every engine that asks for it. Each draw is followed by forget(), and the
draw-and-forget pair runs under a lock, so a captured generator state never
reveals seeds that were already issued.
"""

import logging
import os
import threading

from .forgetting import check_bounds, secure_zero


logger = logging.getLogger(__name__)

# Seeds shorter than this are buffered instead of absorbed
MIN_SEED_LENGTH_BYTES = 16  # 128 bits

MASTER_CAPACITY_BITS = 1085
MASTER_ENTROPY_BYTES = 64


class EntropyError(RuntimeError):
    """System entropy could not be obtained; the generator must not be used."""


class SeedGenerator:
    """
    Lazily constructed master generator guarded by a mutual-exclusion lock.

    The engine is built and seeded on first use. Teardown is left to process
    exit.
    """

    def __init__(self, engine_factory, capacity_bits=MASTER_CAPACITY_BITS,
                 entropy_bytes=MASTER_ENTROPY_BYTES, entropy_source=os.urandom):
        if entropy_bytes < MIN_SEED_LENGTH_BYTES:
            raise ValueError(
                f"Master generator needs at least {MIN_SEED_LENGTH_BYTES} bytes of entropy, got {entropy_bytes}"
            )
        self._engine_factory = engine_factory
        self._capacity_bits = capacity_bits
        self._entropy_bytes = entropy_bytes
        self._entropy_source = entropy_source
        self._lock = threading.Lock()
        self._engine = None

    @property
    def capacity_bits(self):
        return self._capacity_bits

    @property
    def initialized(self):
        return self._engine is not None

    def get_seed_bytes(self, buf, off=0, length=None):
        """Fill buf[off:off+length] with seed bytes, then forget the generator state."""
        if length is None:
            length = len(buf) - off
        check_bounds(buf, off, length)
        with self._lock:
            engine = self._engine
            if engine is None:
                engine = self._engine = self._create_engine()
            engine.get_bytes(buf, off, length)
            engine.forget()
        return buf

    def _create_engine(self):
        try:
            entropy = bytearray(self._entropy_source(self._entropy_bytes))
        except (OSError, NotImplementedError) as e:
            logger.critical("System entropy source failed: %s", e)
            raise EntropyError("Unable to obtain system entropy for the master seed generator") from e

        try:
            if len(entropy) != self._entropy_bytes:
                logger.critical(
                    "System entropy source returned %d of %d bytes",
                    len(entropy), self._entropy_bytes
                )
                raise EntropyError("Short read from the system entropy source")

            logger.debug(
                "Seeding master generator (capacity %d bits) with %d bytes of system entropy",
                self._capacity_bits, self._entropy_bytes
            )
            engine = self._engine_factory(self._capacity_bits)
            engine.absorb(entropy)
        finally:
            secure_zero(entropy)
        return engine
