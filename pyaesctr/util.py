"""Utility helpers for pyaesctr.

Currently provides the bytes-like ``Buffer`` alias and the output buffer
handling shared by the one-shot helpers and the incremental classes.
"""

from __future__ import annotations

__all__ = ["Buffer", "output_buffer"]

Buffer = bytes | bytearray | memoryview


def output_buffer(into: Buffer | None, size: int, what: str) -> Buffer:
    """Return ``into`` if it can hold ``size`` bytes, else a fresh bytearray.

    Raises:
        TypeError: If ``into`` is read-only or shorter than ``size``.
    """
    if into is None:
        return bytearray(size)
    if memoryview(into).readonly:
        raise TypeError("into must be a writable buffer")
    if len(into) < size:
        raise TypeError(f"into length must be at least {what}")
    return into
