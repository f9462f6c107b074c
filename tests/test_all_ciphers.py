"""
multicipher — Cipher Test Suite
===============================
Run with:  python -m pytest tests/ -v
       or:  python tests/test_all_ciphers.py
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pickle
from collections import Counter

import pytest
from multicipher.ciphers.caesar     import CaesarCipher
from multicipher.ciphers.vigenere   import VigenereCipher
from multicipher.ciphers.onetimepad import OneTimePadCipher
from multicipher.errors             import CipherError, InvalidKey, KeyLengthMismatch
from multicipher.randomness         import RandomSource, SeededRandomSource
from multicipher.text               import break_lines, normalize

MSG   = "The quick brown fox\njumps over the lazy dog"
MSG_N = "thequickbrownfoxjumpsoverthelazydog"
LONG  = MSG_N * 3


class FixedSource(RandomSource):
    """Cycles through a fixed list of values."""

    def __init__(self, values):
        self._values = values
        self._i = 0

    def randbelow(self, n):
        v = self._values[self._i % len(self._values)]
        self._i += 1
        return v


# ── Text normalization ────────────────────────────────────────────────────────
def test_normalize_lowercases_and_strips_spaces_and_newlines():
    assert normalize(MSG) == MSG_N
    assert normalize("Hello World") == "helloworld"

def test_normalize_keeps_other_whitespace_and_symbols():
    # only ' ' and '\n' are special-cased
    assert normalize("a\tb\r1!") == "a\tb\r1!"

def test_normalize_empty():
    assert normalize("") == ""

def test_break_lines_placement():
    assert break_lines("a" * 36) == "a" * 36 + "\n"
    assert break_lines("a" * 35) == "a" * 35
    assert break_lines("a" * 71) == "a" * 36 + "\n" + "a" * 35 + "\n"

# ── Caesar ────────────────────────────────────────────────────────────────────
def test_caesar_known_answer():
    c = CaesarCipher(3)
    assert c.encrypt("hello") == "khoor"
    assert c.decrypt("khoor") == "hello"

def test_caesar_normalizes_input():
    assert CaesarCipher(3).encrypt("He llo\n") == "khoor"

def test_caesar_wraps_around():
    assert CaesarCipher(3).encrypt("xyz") == "abc"
    assert CaesarCipher(3).decrypt("abc") == "xyz"

def test_caesar_zero_shift_is_identity():
    assert CaesarCipher(0).encrypt(MSG) == MSG_N

@pytest.mark.parametrize("raw, reduced", [(26, 0), (-1, 25), (29, 3), (-27, 25), (52, 0)])
def test_caesar_key_reduction(raw, reduced):
    c = CaesarCipher(raw)
    assert c.key == reduced
    assert c.encrypt(MSG) == CaesarCipher(reduced).encrypt(MSG)

def test_caesar_set_key_replaces_key():
    c = CaesarCipher(1)
    c.set_key(-1)
    assert c.key == 25
    assert c.encrypt("a") == "z"

@pytest.mark.parametrize("bad", ["3", 3.0, None, True])
def test_caesar_rejects_non_integer_key(bad):
    with pytest.raises(InvalidKey):
        CaesarCipher(bad)

@pytest.mark.parametrize("key", [1, 7, 13, 25])
def test_caesar_roundtrip(key):
    c = CaesarCipher(key)
    ct = c.encrypt(LONG)
    assert ct != LONG
    assert normalize(c.decrypt(ct)) == LONG

def test_caesar_encrypt_never_breaks_lines():
    assert "\n" not in CaesarCipher(3).encrypt("a" * 200)

def test_caesar_decrypt_line_breaks():
    c = CaesarCipher(3)
    assert c.decrypt("d" * 70) == "a" * 36 + "\n" + "a" * 34
    assert c.decrypt("d" * 71) == "a" * 36 + "\n" + "a" * 35 + "\n"

def test_caesar_non_letters_wrap_into_alphabet():
    # digits are not stripped; the shift arithmetic wraps them onto letters
    assert CaesarCipher(3).encrypt("1") == "h"

def test_caesar_empty_text():
    assert CaesarCipher(5).encrypt("") == ""
    assert CaesarCipher(5).decrypt("") == ""

# ── Vigenère ──────────────────────────────────────────────────────────────────
def test_vigenere_known_answer():
    v = VigenereCipher("abc")
    assert v.encrypt("hello") == "hfnlp"
    assert v.decrypt("hfnlp") == "hello"

def test_vigenere_classic_lemon():
    assert VigenereCipher("lemon").encrypt("Attack at dawn") == "lxfopvefrnhr"

def test_vigenere_key_is_case_insensitive():
    assert VigenereCipher("ABC").encrypt("hello") == "hfnlp"
    assert VigenereCipher("LeMoN").key == "lemon"

def test_vigenere_key_length():
    assert VigenereCipher("lemon").key_length == 5

def test_vigenere_single_letter_key_is_caesar():
    assert VigenereCipher("d").encrypt(MSG) == CaesarCipher(3).encrypt(MSG)

def test_vigenere_empty_key_rejected():
    with pytest.raises(InvalidKey):
        VigenereCipher("")

@pytest.mark.parametrize("bad", ["ab c", "k3y", "key!", None, 5])
def test_vigenere_non_letter_key_rejected(bad):
    with pytest.raises(InvalidKey):
        VigenereCipher(bad)

@pytest.mark.parametrize("key", ["a", "key", "thisisalongerkeythanusual"])
def test_vigenere_roundtrip(key):
    v = VigenereCipher(key)
    assert normalize(v.decrypt(v.encrypt(LONG))) == LONG

def test_vigenere_decrypt_line_breaks():
    v = VigenereCipher("b")
    assert v.decrypt("b" * 71) == "a" * 36 + "\n" + "a" * 35 + "\n"

# ── One-Time Pad ──────────────────────────────────────────────────────────────
def test_otp_known_answer_with_fixed_source():
    otp = OneTimePadCipher(FixedSource([1, 2, 3]))
    ct, key = otp.encrypt("abc")
    assert key == "bcd"
    assert ct == "bdf"
    assert otp.decrypt("bdf", "bcd") == "abc"

def test_otp_roundtrip():
    otp = OneTimePadCipher()
    ct, key = otp.encrypt(MSG)
    assert len(key) == len(ct) == len(MSG_N)
    assert normalize(otp.decrypt(ct, key)) == MSG_N

def test_otp_key_matches_normalized_length():
    otp = OneTimePadCipher()
    _, key = otp.encrypt("A b\nC")
    assert len(key) == 3
    assert key.isalpha() and key.islower()

def test_otp_fresh_key_every_call():
    otp = OneTimePadCipher()
    ct1, k1 = otp.encrypt(LONG)
    ct2, k2 = otp.encrypt(LONG)
    assert k1 != k2
    assert ct1 != ct2

def test_otp_last_key():
    otp = OneTimePadCipher()
    assert otp.last_key is None
    _, key = otp.encrypt("hello")
    assert otp.last_key == key

def test_otp_key_length_mismatch():
    otp = OneTimePadCipher()
    ct, key = otp.encrypt("hello")
    with pytest.raises(KeyLengthMismatch) as exc:
        otp.decrypt(ct, key[:-1])
    assert exc.value.key_length == 4
    assert exc.value.text_length == 5
    with pytest.raises(KeyLengthMismatch):
        otp.decrypt(ct, key + "a")

def test_key_length_mismatch_pickles():
    err = pickle.loads(pickle.dumps(KeyLengthMismatch(4, 5)))
    assert isinstance(err, KeyLengthMismatch)
    assert (err.key_length, err.text_length) == (4, 5)
    assert str(err) == "One-Time Pad key has 4 letters, ciphertext has 5."

def test_otp_invalid_key():
    with pytest.raises(InvalidKey):
        OneTimePadCipher().decrypt("abc", "a1c")

def test_otp_uppercase_key_accepted():
    assert OneTimePadCipher().decrypt("bdf", "BCD") == "abc"

def test_otp_empty_text():
    otp = OneTimePadCipher()
    assert otp.encrypt("") == ("", "")
    assert otp.decrypt("", "") == ""

def test_otp_decrypt_line_breaks():
    otp = OneTimePadCipher()
    assert otp.decrypt("b" * 71, "b" * 71) == "a" * 36 + "\n" + "a" * 35 + "\n"

def test_otp_generate_key_rejects_negative_length():
    with pytest.raises(CipherError):
        OneTimePadCipher().generate_key(-1)

# ── Randomness ────────────────────────────────────────────────────────────────
def test_seeded_source_is_reproducible():
    k1 = OneTimePadCipher(SeededRandomSource(1553)).generate_key(64)
    k2 = OneTimePadCipher(SeededRandomSource(1553)).generate_key(64)
    assert k1 == k2

def test_generated_letters_are_uniform():
    key = OneTimePadCipher(SeededRandomSource(7)).generate_key(26_000)
    counts = Counter(key)
    assert set(counts) == set("abcdefghijklmnopqrstuvwxyz")
    assert all(700 < n < 1300 for n in counts.values())

def test_base_random_source_is_abstract():
    with pytest.raises(NotImplementedError):
        RandomSource().randbelow(26)

# ── run directly ─────────────────────────────────────────────────────────────
if __name__ == "__main__":
    sys.exit(pytest.main([__file__, "-v"]))
