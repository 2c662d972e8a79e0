"""pyaesctr: AES-256-CTR streams that can be entered at any byte offset.

    from pyaesctr import Encryptor, random_key, random_iv

    key, iv = random_key(), random_iv()
    enc = Encryptor(key, iv, offset=1_000_003)
    ct = enc.update(chunk)
"""

from .aes256ctr import (
    BLOCKBYTES,
    IVBYTES,
    KEYBYTES,
    Decryptor,
    Direction,
    Encryptor,
    decrypt,
    encrypt,
    position,
    position_for_decrypt,
    position_for_encrypt,
    random_iv,
    random_key,
    stream,
    validate,
)
from .counter import increment_iv
from .errors import AesCtrError, InvalidIvLength, InvalidKeyLength, NegativeOffset

__version__ = "0.1.0"

__all__ = [
    "KEYBYTES",
    "IVBYTES",
    "BLOCKBYTES",
    "Direction",
    "validate",
    "position",
    "position_for_encrypt",
    "position_for_decrypt",
    "increment_iv",
    "encrypt",
    "decrypt",
    "stream",
    "random_key",
    "random_iv",
    "Encryptor",
    "Decryptor",
    "AesCtrError",
    "InvalidKeyLength",
    "InvalidIvLength",
    "NegativeOffset",
]
