"""
Text handling shared by every cipher
=====================================
Raw user input is reduced to a lowercase letter stream before any shift
is applied: everything is lowercased and every space and newline is
dropped. Nothing else is stripped. Tabs, digits and punctuation survive
normalization and are pushed through the same shift arithmetic as
letters, which wraps them onto arbitrary letters.

Decrypted output is broken into lines for readability: a newline follows
the character at index i whenever i % 35 == 0 and i > 0, so the first
line holds 36 characters and every later line 35.
"""

from typing import Iterable

from .errors import InvalidKey

ALPHA      = "abcdefghijklmnopqrstuvwxyz"
LINE_WIDTH = 35


def normalize(raw: str) -> str:
    """Lowercase `raw` and remove every ' ' and '\\n'."""
    return raw.lower().replace(" ", "").replace("\n", "")


def shift_letter(ch: str, shift: int) -> str:
    """Shift one character `shift` places around a-z."""
    return chr(ord("a") + (ord(ch) - ord("a") + shift) % 26)


def letter_shift(ch: str) -> int:
    """Shift amount a key letter stands for ('a' = 0 ... 'z' = 25)."""
    return ord(ch) - ord("a")


def break_lines(chars: Iterable[str], width: int = LINE_WIDTH) -> str:
    out = []
    for i, ch in enumerate(chars):
        out.append(ch)
        if i % width == 0 and i > 0:
            out.append("\n")
    return "".join(out)


def letter_key(key, label: str, allow_empty: bool = False) -> str:
    """
    Lowercase a letter key and check it.

    Raises InvalidKey if the key is not a string, is empty (unless
    `allow_empty`), or holds anything outside a-z once lowercased.
    """
    if not isinstance(key, str):
        raise InvalidKey(f"{label} key must be a string of letters.")
    key = key.lower()
    if not key and not allow_empty:
        raise InvalidKey(f"{label} key must not be empty.")
    if any(c not in ALPHA for c in key):
        raise InvalidKey(f"{label} key must be alphabetic.")
    return key
