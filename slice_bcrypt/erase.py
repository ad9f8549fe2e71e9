"""
Secure Erasure
==============
In-place zeroing of buffers that held key material or cipher state.

Only mutable buffers can be erased. `bytes` and `str` objects are
immutable, so the engine copies secrets into `bytearray`/`array`
buffers it owns and erases those.
"""

from typing import Any


def secure_erase(buffer: Any) -> None:
    """
    Overwrite every byte of a writable buffer with zero.

    Args:
        buffer: bytearray, array.array, or any writable buffer-protocol
            object. None and empty buffers are ignored.

    Raises:
        TypeError: If the buffer is read-only
    """
    if buffer is None:
        return

    with memoryview(buffer) as view:
        if view.readonly:
            raise TypeError("Cannot erase a read-only buffer")
        if view.nbytes == 0:
            return
        with view.cast("B") as raw:
            raw[:] = bytes(raw.nbytes)


def erase_all(*buffers: Any) -> None:
    """Erase each buffer in order."""
    for buffer in buffers:
        secure_erase(buffer)
