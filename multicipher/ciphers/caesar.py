"""
Caesar Cipher
=============
Every letter moves the same fixed number of places down the alphabet.
With key 3: a -> d, x -> a.

Twenty-five useful keys make this trivially breakable by hand. It is
here as the simplest possible substitution and the baseline the other
two ciphers generalize.
"""

import logging

from ..errors import InvalidKey
from ..text import break_lines, normalize, shift_letter

logger = logging.getLogger(__name__)


class CaesarCipher:
    """Fixed-shift substitution over a-z."""

    ALPHABET_SIZE = 26

    def __init__(self, key: int = 0):
        self.set_key(key)

    @property
    def key(self) -> int:
        return self._key

    def set_key(self, key: int):
        """
        Store `key` reduced into 0-25. Negative keys count backwards,
        so -1 behaves like 25 and 26 like 0.
        """
        if isinstance(key, bool) or not isinstance(key, int):
            raise InvalidKey("Caesar key must be an integer.")
        self._key = key % self.ALPHABET_SIZE

    def encrypt(self, plaintext: str) -> str:
        """Normalize and shift forward. No line breaks are inserted."""
        text = normalize(plaintext)
        logger.debug(f"Caesar encrypt: {len(text)} chars")
        return "".join(shift_letter(ch, self._key) for ch in text)

    def decrypt(self, ciphertext: str) -> str:
        """Normalize, shift back, and break the result into lines."""
        text = normalize(ciphertext)
        logger.debug(f"Caesar decrypt: {len(text)} chars")
        return break_lines(shift_letter(ch, -self._key) for ch in text)

    def __repr__(self):
        return f"CaesarCipher(key={self._key})"
