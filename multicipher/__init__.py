"""
multicipher — classical substitution ciphers for teaching
=========================================================
Three textbook ciphers behind one facade.

Ciphers:
    CAESAR        — fixed shift (key 0-25)
    VIGENERE      — repeating letter key
    ONE_TIME_PAD  — random letter key as long as the message, used once

Input is lowercased and stripped of spaces and newlines before use.
Decrypted output is broken into lines for readability.

Not real cryptography: a-z only, and every one of these is breakable
except a One-Time Pad used exactly as intended.
"""

__version__ = "1.0.0"

from .errors             import CipherError, InvalidKey, KeyLengthMismatch, UnknownCipherMode
from .text               import normalize
from .randomness         import RandomSource, SystemRandomSource, SeededRandomSource
from .ciphers.caesar     import CaesarCipher
from .ciphers.vigenere   import VigenereCipher
from .ciphers.onetimepad import OneTimePadCipher
from .facade             import (CipherFacade, CipherMode, CipherRequest,
                                 EncryptResult, DecryptResult, encrypt, decrypt)

__all__ = [
    "CipherError",
    "InvalidKey",
    "KeyLengthMismatch",
    "UnknownCipherMode",
    "normalize",
    "RandomSource",
    "SystemRandomSource",
    "SeededRandomSource",
    "CaesarCipher",
    "VigenereCipher",
    "OneTimePadCipher",
    "CipherFacade",
    "CipherMode",
    "CipherRequest",
    "EncryptResult",
    "DecryptResult",
    "encrypt",
    "decrypt",
]
