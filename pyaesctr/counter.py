"""128-bit CTR counter arithmetic.

The IV is read as a big-endian unsigned integer. Moving the stream forward by
whole blocks adds to that integer modulo 2**128; wrapping past the top of the
counter space is not an error.
"""

from __future__ import annotations

import operator

from .errors import InvalidIvLength
from .util import Buffer

__all__ = [
    "IVBYTES",
    "BLOCKBYTES",
    "COUNTER_MODULUS",
    "iv_to_int",
    "int_to_iv",
    "increment_iv",
    "split_offset",
]

IVBYTES = 16
BLOCKBYTES = 16
COUNTER_MODULUS = 1 << (8 * IVBYTES)


def iv_to_int(iv: Buffer) -> int:
    """Return the counter value held in a 16-byte IV."""
    if len(iv) != IVBYTES:
        raise InvalidIvLength(f"iv length must be {IVBYTES}")
    return int.from_bytes(iv, "big")


def int_to_iv(value: int) -> bytes:
    """Serialize a counter value (reduced mod 2**128) as 16 big-endian bytes."""
    return (value % COUNTER_MODULUS).to_bytes(IVBYTES, "big")


def increment_iv(iv: Buffer, blocks: int) -> bytes:
    """Advance an IV by a whole number of blocks.

    Args:
        iv: Base IV (16 bytes), left untouched.
        blocks: Non-negative block count, any size.

    Returns:
        A new 16-byte IV equal to ``(iv + blocks) mod 2**128``.

    Raises:
        InvalidIvLength: If the IV is not 16 bytes.
        ValueError: If blocks is negative.
        TypeError: If blocks is not an integer.
    """
    blocks = operator.index(blocks)
    if blocks < 0:
        raise ValueError("blocks must be non-negative")
    return int_to_iv(iv_to_int(iv) + blocks)


def split_offset(offset: int) -> tuple[int, int]:
    """Split a byte offset into (whole blocks, byte offset inside the block)."""
    return divmod(offset, BLOCKBYTES)
