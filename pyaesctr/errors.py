"""Exceptions raised by pyaesctr when positioning a stream."""

__all__ = ["AesCtrError", "InvalidKeyLength", "InvalidIvLength", "NegativeOffset"]


class AesCtrError(Exception):
    """Base class for all pyaesctr input errors."""


class InvalidKeyLength(AesCtrError, TypeError):
    """The key is not exactly KEYBYTES long."""


class InvalidIvLength(AesCtrError, TypeError):
    """The IV is not exactly IVBYTES long."""


class NegativeOffset(AesCtrError, ValueError):
    """A stream offset below zero was requested."""
