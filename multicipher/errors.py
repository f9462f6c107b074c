"""
Errors raised by multicipher.

Every error is a ValueError subclass, so callers that only care about
"bad input" can keep catching ValueError.
"""


class CipherError(ValueError):
    """Base class for all multicipher errors."""


class InvalidKey(CipherError):
    """Key is missing, empty, not an integer (Caesar) or holds non-letters."""


class KeyLengthMismatch(CipherError):
    """One-Time Pad key length differs from the ciphertext length."""

    def __init__(self, key_length: int, text_length: int):
        # args mirror the signature so the error survives pickling
        super().__init__(key_length, text_length)
        self.key_length  = key_length
        self.text_length = text_length

    def __str__(self):
        return (f"One-Time Pad key has {self.key_length} letters, "
                f"ciphertext has {self.text_length}.")


class UnknownCipherMode(CipherError):
    """No cipher matches the requested mode."""
