"""
Byte buffers that can be wiped before they are released.
"""

import ctypes


def secure_zero(buf):
    """Overwrite a writable buffer (bytearray or memoryview) with zeros in place."""
    size = len(buf)
    if not size:
        return
    view = (ctypes.c_char * size).from_buffer(buf)
    ctypes.memset(ctypes.addressof(view), 0, size)
    del view


class ForgettingBuffer:
    """
    Growable byte accumulator whose contents are zero-filled on forget().

    The backing storage is never handed out; flush() passes it to a consumer
    and wipes it afterwards.
    """

    def __init__(self):
        self._buf = bytearray()

    def write(self, data, off=0, length=None):
        if length is None:
            length = len(data) - off
        check_bounds(data, off, length)
        held = len(self._buf)
        grown = bytearray(held + length)
        grown[:held] = self._buf
        with memoryview(data) as view:
            grown[held:] = view[off:off + length]
        # Wipe the old storage rather than letting a resize free it unzeroed
        secure_zero(self._buf)
        self._buf = grown

    def flush(self, consumer):
        """Call consumer(buf, 0, len(buf)) on the held bytes, then forget them."""
        try:
            consumer(self._buf, 0, len(self._buf))
        finally:
            self.forget()

    def forget(self):
        # Zero in place, then drop the storage instead of resizing it
        secure_zero(self._buf)
        self._buf = bytearray()

    def __len__(self):
        return len(self._buf)


def check_bounds(buf, off, length):
    """Reject negative or out-of-range (off, length) pairs for buf."""
    if off < 0 or length < 0:
        raise ValueError("Offset and length must be non-negative")
    if off + length > len(buf):
        raise ValueError(
            f"Range [{off}, {off + length}) exceeds buffer of length {len(buf)}"
        )
