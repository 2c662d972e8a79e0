"""AES-256-CTR with random access into the stream.

A stream is identified by a key and a base IV (the counter for byte 0). Any
byte offset can be entered directly: the IV is advanced by the number of whole
blocks before the offset and the few keystream bytes of the partial block are
consumed, leaving the cipher exactly where a sequential pass would be.
"""

import logging
import operator
import secrets

from cryptography.hazmat.primitives.ciphers import CipherContext

from ._engine import Direction, new_context
from .counter import BLOCKBYTES, IVBYTES, increment_iv, split_offset
from .errors import InvalidIvLength, InvalidKeyLength, NegativeOffset
from .util import Buffer, output_buffer

logger = logging.getLogger(__name__)

KEYBYTES = 32


def random_key() -> bytes:
    """Generate a random key using cryptographically secure random bytes."""
    return secrets.token_bytes(KEYBYTES)


def random_iv() -> bytes:
    """Generate a random IV using cryptographically secure random bytes."""
    return secrets.token_bytes(IVBYTES)


def validate(key: Buffer, iv: Buffer, offset: int) -> None:
    """Check key length, IV length and offset sign.

    Raises:
        InvalidKeyLength: If the key is not 32 bytes.
        InvalidIvLength: If the IV is not 16 bytes.
        NegativeOffset: If offset < 0.
        TypeError: If offset is not an integer (bool included).
    """
    if len(key) != KEYBYTES:
        raise InvalidKeyLength(f"key length must be {KEYBYTES}")
    if len(iv) != IVBYTES:
        raise InvalidIvLength(f"iv length must be {IVBYTES}")
    if isinstance(offset, bool):
        raise TypeError("offset must be an integer, not bool")
    if operator.index(offset) < 0:
        raise NegativeOffset("offset must be greater or equal to 0")


def position(
    kind: Direction | str, key: Buffer, iv: Buffer, offset: int = 0
) -> CipherContext:
    """Create a cipher context aligned to a byte offset of the stream.

    Args:
        kind: Direction.ENCRYPT or Direction.DECRYPT (or their string values).
        key: Key (32 bytes).
        iv: Base IV of the stream (16 bytes), counter value for offset 0.
        offset: Stream position of the next byte fed to the context.

    Returns:
        A ``cryptography`` CipherContext whose next output byte corresponds to
        ``offset``.

    Raises:
        InvalidKeyLength, InvalidIvLength, NegativeOffset: On invalid input,
            before anything is constructed.
    """
    validate(key, iv, offset)
    direction = Direction(kind)
    blocks, residual = split_offset(operator.index(offset))
    ctx = new_context(direction, key, increment_iv(iv, blocks))
    logger.debug(
        "positioned %s context: +%d blocks, %d byte(s) into block",
        direction.value,
        blocks,
        residual,
    )
    if residual:
        # Output is keystream XOR zeros; dropped on the floor
        ctx.update(bytes(residual))
    return ctx


def position_for_encrypt(key: Buffer, iv: Buffer, offset: int = 0) -> CipherContext:
    """Encrypting context positioned at ``offset``. See position()."""
    return position(Direction.ENCRYPT, key, iv, offset)


def position_for_decrypt(key: Buffer, iv: Buffer, offset: int = 0) -> CipherContext:
    """Decrypting context positioned at ``offset``. See position()."""
    return position(Direction.DECRYPT, key, iv, offset)


def encrypt(
    key: Buffer,
    iv: Buffer,
    message: Buffer,
    offset: int = 0,
    *,
    into: Buffer | None = None,
) -> bytes | memoryview:
    """Encrypt a message that starts at ``offset`` of the stream.

    Args:
        key: Key (32 bytes).
        iv: Base IV (16 bytes).
        message: The plaintext to encrypt.
        offset: Stream position of the first message byte.
        into: Buffer to write ciphertext into (default: new bytes returned).

    Returns:
        Ciphertext as bytes if into not provided, memoryview of into otherwise.

    Raises:
        TypeError: If lengths are invalid.
        NegativeOffset: If offset < 0.
    """
    encryptor = Encryptor(key, iv, offset)
    out = encryptor.update(message, into)
    encryptor.final()
    return out


def decrypt(
    key: Buffer,
    iv: Buffer,
    ct: Buffer,
    offset: int = 0,
    *,
    into: Buffer | None = None,
) -> bytes | memoryview:
    """Decrypt a ciphertext that starts at ``offset`` of the stream.

    Args:
        key: Key (32 bytes).
        iv: Base IV (16 bytes).
        ct: The ciphertext to decrypt.
        offset: Stream position of the first ciphertext byte.
        into: Buffer to write plaintext into (default: new bytes returned).

    Returns:
        Plaintext as bytes if into not provided, memoryview of into otherwise.

    Raises:
        TypeError: If lengths are invalid.
        NegativeOffset: If offset < 0.
    """
    decryptor = Decryptor(key, iv, offset)
    out = decryptor.update(ct, into)
    decryptor.final()
    return out


def stream(
    key: Buffer,
    iv: Buffer,
    length: int | None = None,
    offset: int = 0,
    *,
    into: Buffer | None = None,
) -> bytes | memoryview:
    """Return raw keystream bytes starting at ``offset``.

    Args:
        key: Key (32 bytes).
        iv: Base IV (16 bytes).
        length: Number of bytes to generate (required if into is None).
        offset: Stream position of the first keystream byte.
        into: Buffer to write the keystream into.

    Raises:
        TypeError: If lengths are invalid or neither length nor into provided.
    """
    if length is None:
        if into is None:
            raise TypeError("provide either into or length")
        length = len(into)
    return encrypt(key, iv, bytes(length), offset, into=into)


class _PositionedCipher:
    __slots__ = ("_ctx", "_offset", "_bytes_in", "_bytes_out", "_finalized")

    _direction: Direction

    def __init__(self, key: Buffer, iv: Buffer, offset: int = 0):
        self._ctx = position(self._direction, key, iv, offset)
        self._offset = operator.index(offset)
        self._bytes_in = 0
        self._bytes_out = 0
        self._finalized = False

    @property
    def offset(self) -> int:
        """Stream position of the next byte to be processed."""
        return self._offset + self._bytes_in

    @property
    def bytes_in(self) -> int:
        """Total bytes fed to update() so far."""
        return self._bytes_in

    @property
    def bytes_out(self) -> int:
        """Total bytes produced by update() and final() so far."""
        return self._bytes_out

    def update(self, data: Buffer, into: Buffer | None = None) -> bytes | memoryview:
        """Process the next chunk of the stream.

        Args:
            data: Input bytes, taken to start at the current offset.
            into: Optional destination buffer; must be >= len(data).

        Returns:
            Output for this chunk as bytes if into not provided, memoryview of into otherwise.

        Raises:
            RuntimeError: If called after final().
            TypeError: If destination buffer is too small or read-only.
        """
        if self._finalized:
            raise RuntimeError("Cannot call update() after final()")
        n = len(data)
        out = None
        if into is not None:
            out = memoryview(output_buffer(into, n, "len(data)"))[:n]
        produced = self._ctx.update(data)
        assert len(produced) == n
        self._bytes_in += n
        self._bytes_out += n
        if out is None:
            return produced
        out[:] = produced
        return out

    def final(self) -> bytes:
        """Finalize the context. CTR has no tail, so this returns b"".

        Raises:
            RuntimeError: If called after final().
        """
        if self._finalized:
            raise RuntimeError("Cannot call final() after final()")
        self._finalized = True
        tail = self._ctx.finalize()
        self._bytes_out += len(tail)
        return tail


class Encryptor(_PositionedCipher):
    """Incremental encryptor starting at any stream offset.

    - update(message[, into]) -> returns ciphertext bytes of the same length
    - final() -> finishes the stream; the object is unusable afterwards
    """

    __slots__ = ()
    _direction = Direction.ENCRYPT


class Decryptor(_PositionedCipher):
    """Incremental decryptor starting at any stream offset.

    - update(ciphertext[, into]) -> returns plaintext bytes
    - final() -> finishes the stream; the object is unusable afterwards
    """

    __slots__ = ()
    _direction = Direction.DECRYPT


__all__ = [
    # constants
    "KEYBYTES",
    "IVBYTES",
    "BLOCKBYTES",
    # positioning
    "Direction",
    "validate",
    "position",
    "position_for_encrypt",
    "position_for_decrypt",
    # one-shot functions
    "encrypt",
    "decrypt",
    "stream",
    "random_key",
    "random_iv",
    # incremental classes
    "Encryptor",
    "Decryptor",
]
