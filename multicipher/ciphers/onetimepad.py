"""
One-Time Pad
============
A Vigenère cipher whose key is as long as the message, drawn at random,
and used once. Every encryption generates a fresh key; the ciphertext is
worthless without it, so the key must reach the recipient by some other
channel.

With truly random keys used exactly once this is the one classical
cipher that cannot be broken. Reusing a pad, or drawing it from a
predictable generator, throws that away; see multicipher.randomness for
the generator policy.

Decryption requires a key of exactly the ciphertext's length (after
normalization). Anything else raises KeyLengthMismatch.
"""

import logging
from typing import Optional, Tuple

from ..errors import CipherError, KeyLengthMismatch
from ..randomness import RandomSource, SystemRandomSource
from ..text import ALPHA, break_lines, letter_key, letter_shift, normalize, shift_letter

logger = logging.getLogger(__name__)


class OneTimePadCipher:
    """Per-character random-key shift substitution."""

    ALPHABET_SIZE = 26

    def __init__(self, random_source: RandomSource = None):
        if random_source is None:
            random_source = SystemRandomSource()
        self._random   = random_source
        self._last_key = None

    @property
    def last_key(self) -> Optional[str]:
        """Key generated by the most recent encrypt() call."""
        return self._last_key

    def generate_key(self, length: int) -> str:
        """Return `length` independent, uniformly chosen letters."""
        if length < 0:
            raise CipherError("Key length must not be negative.")
        return "".join(
            ALPHA[self._random.randbelow(self.ALPHABET_SIZE)] for _ in range(length)
        )

    def encrypt(self, plaintext: str) -> Tuple[str, str]:
        """
        Encrypt under a freshly generated key.

        Returns:
            (ciphertext, key) -- keep the key, it is the only way back.
        """
        text = normalize(plaintext)
        key  = self.generate_key(len(text))
        self._last_key = key
        logger.debug(f"One-Time Pad encrypt: {len(text)} chars, fresh key generated")
        ciphertext = "".join(
            shift_letter(ch, letter_shift(k)) for ch, k in zip(text, key)
        )
        return ciphertext, key

    def decrypt(self, ciphertext: str, key: str) -> str:
        """
        Decrypt with the key returned by encrypt().
        Raises InvalidKey for non-letters, KeyLengthMismatch for a key
        that does not match the ciphertext length.
        """
        text = normalize(ciphertext)
        key  = letter_key(key, "One-Time Pad", allow_empty=True)
        if len(key) != len(text):
            raise KeyLengthMismatch(len(key), len(text))
        logger.debug(f"One-Time Pad decrypt: {len(text)} chars")
        return break_lines(
            shift_letter(ch, -letter_shift(k)) for ch, k in zip(text, key)
        )

    def __repr__(self):
        return f"OneTimePadCipher(random_source={self._random!r})"
