"""Construction of the AES-256-CTR engine (``cryptography`` / OpenSSL)."""

import enum

from cryptography.hazmat.primitives.ciphers import Cipher, CipherContext
from cryptography.hazmat.primitives.ciphers.algorithms import AES
from cryptography.hazmat.primitives.ciphers.modes import CTR

from .util import Buffer

__all__ = ["Direction", "new_context"]


class Direction(enum.Enum):
    ENCRYPT = "encrypt"
    DECRYPT = "decrypt"


def new_context(direction: Direction, key: Buffer, iv: Buffer) -> CipherContext:
    """Create a CTR context whose first keystream byte is block ``iv``, byte 0."""
    cipher = Cipher(AES(bytes(key)), CTR(bytes(iv)))
    if direction is Direction.ENCRYPT:
        return cipher.encryptor()
    return cipher.decryptor()
