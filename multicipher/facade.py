"""
CIPHER FACADE  |  multicipher
Uniform encrypt/decrypt boundary for presentation layers.

A front end collects three things from its user (which cipher, the text,
the key) and hands them over here. The facade picks the cipher, coerces
the key into the form that cipher wants, and returns a result record.

    facade = CipherFacade()
    facade.encrypt("caesar", "hello", 3)            -> EncryptResult("khoor", None)
    facade.encrypt("otp", "hello")                  -> EncryptResult("...", "<5-letter key>")
    facade.decrypt(CipherMode.VIGENERE, "hfnlp", "abc") -> DecryptResult("hello")

Invalid input raises a CipherError subclass; the facade never repairs
a bad key or falls back to a default.
"""

import enum
import logging
import re
from dataclasses import dataclass
from typing import Optional, Union

from .ciphers.caesar import CaesarCipher
from .ciphers.onetimepad import OneTimePadCipher
from .ciphers.vigenere import VigenereCipher
from .errors import CipherError, InvalidKey, UnknownCipherMode
from .randomness import RandomSource, SystemRandomSource

logger = logging.getLogger(__name__)

KeyInput = Union[int, str, None]

# plain ASCII decimal only: int() would also take "1_0" and non-ASCII digits
_DECIMAL_KEY = re.compile(r"^[+-]?[0-9]+$")


class CipherMode(enum.Enum):
    CAESAR       = "caesar"
    VIGENERE     = "vigenere"
    ONE_TIME_PAD = "one-time-pad"

    @classmethod
    def parse(cls, value) -> "CipherMode":
        """Accept a CipherMode or a case-insensitive name or alias."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            name = value.strip().lower().replace("_", "-").replace(" ", "-")
            mode = _MODE_ALIASES.get(name)
            if mode is not None:
                return mode
        raise UnknownCipherMode(f"Unknown cipher mode: {value!r}")


_MODE_ALIASES = {
    "caesar":       CipherMode.CAESAR,
    "vigenere":     CipherMode.VIGENERE,
    "vigenère":     CipherMode.VIGENERE,
    "one-time-pad": CipherMode.ONE_TIME_PAD,
    "onetimepad":   CipherMode.ONE_TIME_PAD,
    "otp":          CipherMode.ONE_TIME_PAD,
}


@dataclass(frozen=True)
class EncryptResult:
    ciphertext: str
    generated_key: Optional[str] = None


@dataclass(frozen=True)
class DecryptResult:
    plaintext: str


@dataclass(frozen=True)
class CipherRequest:
    """One user action: which cipher, what text, which key."""
    mode: Union[CipherMode, str]
    text: str
    key: KeyInput = None


class CipherFacade:
    """Selects a cipher per call; holds nothing between calls but the random source."""

    ENCRYPT = "encrypt"
    DECRYPT = "decrypt"

    def __init__(self, random_source: RandomSource = None):
        if random_source is None:
            random_source = SystemRandomSource()
        self._random = random_source

    def encrypt(self, mode, plaintext: str, key: KeyInput = None) -> EncryptResult:
        """
        Encrypt `plaintext`. One-Time Pad ignores `key` and returns the
        pad it generated in `generated_key`.
        """
        mode = CipherMode.parse(mode)
        logger.info(f"encrypt | mode={mode.value}")
        if mode is CipherMode.CAESAR:
            return EncryptResult(CaesarCipher(self._caesar_key(key)).encrypt(plaintext))
        if mode is CipherMode.VIGENERE:
            return EncryptResult(VigenereCipher(self._require(key, mode)).encrypt(plaintext))
        ciphertext, pad = OneTimePadCipher(self._random).encrypt(plaintext)
        return EncryptResult(ciphertext, pad)

    def decrypt(self, mode, ciphertext: str, key: KeyInput) -> DecryptResult:
        mode = CipherMode.parse(mode)
        logger.info(f"decrypt | mode={mode.value}")
        if mode is CipherMode.CAESAR:
            return DecryptResult(CaesarCipher(self._caesar_key(key)).decrypt(ciphertext))
        if mode is CipherMode.VIGENERE:
            return DecryptResult(VigenereCipher(self._require(key, mode)).decrypt(ciphertext))
        pad = self._require(key, mode)
        return DecryptResult(OneTimePadCipher(self._random).decrypt(ciphertext, pad))

    def handle(self, request: CipherRequest, action: str):
        """Dispatch a request record to encrypt() or decrypt()."""
        if action == self.ENCRYPT:
            return self.encrypt(request.mode, request.text, request.key)
        if action == self.DECRYPT:
            return self.decrypt(request.mode, request.text, request.key)
        raise CipherError(f"action must be {self.ENCRYPT!r} or {self.DECRYPT!r}")

    # ── helpers ──────────────────────────────────────────────────────────────

    @staticmethod
    def _require(key: KeyInput, mode: CipherMode):
        if key is None:
            raise InvalidKey(f"A key is required for {mode.value}.")
        return key

    @classmethod
    def _caesar_key(cls, key: KeyInput) -> int:
        key = cls._require(key, CipherMode.CAESAR)
        if isinstance(key, str):
            if not _DECIMAL_KEY.match(key.strip()):
                raise InvalidKey(f"Caesar key must be a whole number, got {key!r}.")
            return int(key.strip())
        return key

    def __repr__(self):
        return f"CipherFacade(random_source={self._random!r})"


_default = CipherFacade()


def encrypt(mode, plaintext: str, key: KeyInput = None) -> EncryptResult:
    return _default.encrypt(mode, plaintext, key)


def decrypt(mode, ciphertext: str, key: KeyInput) -> DecryptResult:
    return _default.decrypt(mode, ciphertext, key)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format=' %(message)s')

    facade = CipherFacade()
    message = "Attack at dawn"
    for mode, key in [(CipherMode.CAESAR, 3),
                      (CipherMode.VIGENERE, "lemon"),
                      (CipherMode.ONE_TIME_PAD, None)]:
        print(f"{'═'*60}")
        print(f"{mode.value}")
        print(f"{'═'*60}")
        enc = facade.encrypt(mode, message, key)
        print(f"Ciphertext: {enc.ciphertext}")
        if enc.generated_key:
            print(f"Pad:        {enc.generated_key}")
            key = enc.generated_key
        dec = facade.decrypt(mode, enc.ciphertext, key)
        assert dec.plaintext == "attackatdawn"
        print(f"Plaintext:  {dec.plaintext} ✓\n")

    print(f"{'═'*60}")
    print("All ciphers: PASSED")
    print(f"{'═'*60}\n")
