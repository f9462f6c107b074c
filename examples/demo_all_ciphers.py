"""
multicipher — Live Demo: Caesar, Vigenère, One-Time Pad
========================================================
Run:  python examples/demo_all_ciphers.py

Encrypts and decrypts one message with each cipher through the facade,
then shows the two failures the core reports instead of guessing.
"""

import sys, os, time
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from multicipher import (CipherFacade, CipherMode, InvalidKey, KeyLengthMismatch,
                         normalize)

LINE = "═" * 70
MSG  = ("Meet me by the old oak tree at midnight\n"
        "and bring the map we found in the library")

def header(tag, name):
    print(f"\n{LINE}")
    print(f"  {tag} — {name}")
    print(LINE)

def ok(label, value=""):
    print(f"  ✓  {label}{f': {value}' if value else ''}")

def block(text):
    for line in text.splitlines():
        print(f"       {line}")

facade = CipherFacade()

# ─────────────────────────────────────────────────────────────────────────────
print(f"\n{LINE}")
print("  multicipher — Classical Cipher Demo")
print(LINE)
print(f"  Message:    {MSG!r}")
print(f"  Normalized: {normalize(MSG)}  ({len(normalize(MSG))} letters)\n")

# ── CAESAR ───────────────────────────────────────────────────────────────────
header("1", "CAESAR — fixed shift, key 3")
t0  = time.perf_counter()
enc = facade.encrypt(CipherMode.CAESAR, MSG, 3)
dec = facade.decrypt(CipherMode.CAESAR, enc.ciphertext, 3)
elapsed = time.perf_counter() - t0
ok("Encrypted", enc.ciphertext[:40] + "...")
ok("Key -1 equals key 25",
   str(facade.encrypt("caesar", MSG, -1) == facade.encrypt("caesar", MSG, 25)))
ok("Round-trip", f"{elapsed*1000:.2f} ms")
ok("Decrypted (36 then 35 per line)")
block(dec.plaintext)

# ── VIGENERE ─────────────────────────────────────────────────────────────────
header("2", "VIGENÈRE — repeating key 'lemon'")
enc = facade.encrypt(CipherMode.VIGENERE, MSG, "lemon")
dec = facade.decrypt(CipherMode.VIGENERE, enc.ciphertext, "LEMON")
ok("Encrypted", enc.ciphertext[:40] + "...")
ok("Key period", "5")
ok("Decrypted (key is case-insensitive)")
block(dec.plaintext)

# ── ONE-TIME PAD ─────────────────────────────────────────────────────────────
header("3", "ONE-TIME PAD — fresh random key per message")
enc  = facade.encrypt(CipherMode.ONE_TIME_PAD, MSG)
enc2 = facade.encrypt(CipherMode.ONE_TIME_PAD, MSG)
dec  = facade.decrypt(CipherMode.ONE_TIME_PAD, enc.ciphertext, enc.generated_key)
ok("Encrypted", enc.ciphertext[:40] + "...")
ok("Pad",       enc.generated_key[:40] + "...")
ok("Pad length equals message length",
   str(len(enc.generated_key) == len(normalize(MSG))))
ok("Second encryption used a new pad", str(enc.generated_key != enc2.generated_key))
ok("Decrypted")
block(dec.plaintext)

# ── Errors ───────────────────────────────────────────────────────────────────
header("!", "REJECTED INPUT")
try:
    facade.encrypt(CipherMode.VIGENERE, MSG, "")
except InvalidKey as e:
    ok("Empty Vigenère key", str(e))
try:
    facade.decrypt(CipherMode.ONE_TIME_PAD, enc.ciphertext, enc.generated_key[:-1])
except KeyLengthMismatch as e:
    ok("Short pad", str(e))

print(f"\n{LINE}")
print("  ALL CIPHERS COMPLETE")
print("  None of these is real cryptography. The pad comes closest,")
print("  and only if every key is random and never reused.")
print(LINE + "\n")
