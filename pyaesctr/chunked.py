"""Parallel processing of one stream in independent chunks.

Each chunk gets its own cipher positioned at the chunk's stream offset, so the
chunks can run in any order on a thread pool and still produce exactly the
bytes of a single sequential pass.
"""

from __future__ import annotations

import logging
import operator
from collections.abc import Iterator
from concurrent.futures import ThreadPoolExecutor

from ._engine import Direction
from .aes256ctr import position, validate
from .util import Buffer, output_buffer

logger = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 64 * 1024

__all__ = [
    "DEFAULT_CHUNK_SIZE",
    "split_ranges",
    "encrypt_chunked",
    "decrypt_chunked",
]


def split_ranges(
    total: int, chunk_size: int, start: int = 0
) -> Iterator[tuple[int, int]]:
    """Yield disjoint (offset, length) pairs covering [start, start + total).

    The last range is shorter when total is not a multiple of chunk_size.
    """
    if chunk_size < 1:
        raise ValueError("chunk_size must be at least 1")
    if total < 0:
        raise ValueError("total must be non-negative")
    for rel in range(0, total, chunk_size):
        yield start + rel, min(chunk_size, total - rel)


def _process_chunked(
    direction: Direction,
    key: Buffer,
    iv: Buffer,
    data: Buffer,
    chunk_size: int,
    offset: int,
    max_workers: int | None,
    into: Buffer | None,
) -> bytearray | memoryview:
    validate(key, iv, offset)
    offset = operator.index(offset)
    total = len(data)
    out = output_buffer(into, total, "len(data)")
    src = memoryview(data)
    dst = memoryview(out)
    ranges = list(split_ranges(total, chunk_size, offset))
    logger.debug(
        "%s %d byte(s) in %d chunk(s), max_workers=%s",
        direction.value,
        total,
        len(ranges),
        max_workers,
    )

    def work(rng: tuple[int, int]) -> None:
        start, length = rng
        lo = start - offset
        ctx = position(direction, key, iv, start)
        dst[lo : lo + length] = ctx.update(src[lo : lo + length])
        ctx.finalize()

    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        # Consume the iterator so worker exceptions are raised here
        for _ in pool.map(work, ranges):
            pass
    return out if into is None else dst[:total]


def encrypt_chunked(
    key: Buffer,
    iv: Buffer,
    data: Buffer,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    offset: int = 0,
    *,
    max_workers: int | None = None,
    into: Buffer | None = None,
) -> bytearray | memoryview:
    """Encrypt ``data`` (stream bytes from ``offset`` on) chunk by chunk in parallel.

    Args:
        key: Key (32 bytes).
        iv: Base IV (16 bytes).
        data: Plaintext.
        chunk_size: Bytes per chunk; need not be a multiple of the block size.
        offset: Stream position of the first byte of data.
        max_workers: Thread pool size (default: ThreadPoolExecutor's default).
        into: Buffer to write ciphertext into (default: bytearray created).

    Returns:
        Ciphertext as bytearray if into not provided, memoryview of into otherwise.
    """
    return _process_chunked(
        Direction.ENCRYPT, key, iv, data, chunk_size, offset, max_workers, into
    )


def decrypt_chunked(
    key: Buffer,
    iv: Buffer,
    data: Buffer,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    offset: int = 0,
    *,
    max_workers: int | None = None,
    into: Buffer | None = None,
) -> bytearray | memoryview:
    """Decrypt counterpart of encrypt_chunked()."""
    return _process_chunked(
        Direction.DECRYPT, key, iv, data, chunk_size, offset, max_workers, into
    )
