"""
Vigenère Polyalphabetic Cipher
==============================
A Caesar shift that changes with every letter. The key is a word; its
letters give the shifts (a=0 ... z=25) and it repeats for as long as the
message runs.

    key      a b c a b
    text     h e l l o
    cipher   h f n l p

Historical note: Blaise de Vigenère, 1553. Called "le chiffre
indéchiffrable" for 300 years, until Kasiski showed that the repeating
key leaks its own period.
"""

import logging

from ..text import break_lines, letter_key, letter_shift, normalize, shift_letter

logger = logging.getLogger(__name__)


class VigenereCipher:
    """Repeating-key shift substitution."""

    def __init__(self, key: str):
        self.set_key(key)

    @property
    def key(self) -> str:
        return self._key

    @property
    def key_length(self) -> int:
        return self._key_length

    def set_key(self, key: str):
        """
        Store a letter key (case-insensitive). Raises InvalidKey for an
        empty key or one holding anything but letters.
        """
        self._key        = letter_key(key, "Vigenère")
        self._key_length = len(self._key)
        self._shifts     = [letter_shift(c) for c in self._key]

    def _keystream(self, length: int) -> list:
        return [self._shifts[i % self._key_length] for i in range(length)]

    def encrypt(self, plaintext: str) -> str:
        text = normalize(plaintext)
        logger.debug(f"Vigenère encrypt: {len(text)} chars, key period {self._key_length}")
        stream = self._keystream(len(text))
        return "".join(shift_letter(ch, k) for ch, k in zip(text, stream))

    def decrypt(self, ciphertext: str) -> str:
        """Shift back by the repeating key; output broken into lines."""
        text = normalize(ciphertext)
        logger.debug(f"Vigenère decrypt: {len(text)} chars, key period {self._key_length}")
        stream = self._keystream(len(text))
        return break_lines(shift_letter(ch, -k) for ch, k in zip(text, stream))

    def __repr__(self):
        return f"VigenereCipher(key_length={self._key_length})"
