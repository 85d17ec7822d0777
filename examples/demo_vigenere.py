"""
vgnr — Live Demo: Vigenère, and why it breaks
=============================================
Run:  python examples/demo_vigenere.py

Encrypts the classic messages, prints a slice of the tabula recta, and
shows the repeated ciphertext groups a Kasiski examination looks for.
"""

import sys, os, time
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from vgnr import Vigenere, InvalidKey, InvalidCharacter, tabula_recta

LINE = "═" * 70

def header(name):
    print(f"\n{LINE}")
    print(f"  {name}")
    print(LINE)

def ok(label, value=""):
    print(f"  ✓  {label}{f': {value}' if value else ''}")

# ─────────────────────────────────────────────────────────────────────────────
print(f"\n{LINE}")
print("  vgnr — Le Chiffre Indéchiffrable")
print("  Apache 2.0  |  Not secure. Educational.")
print(LINE)

# ── LEMON ────────────────────────────────────────────────────────────────────
header("Key 'lemon'")
t0 = time.perf_counter()
v  = Vigenere("lemon")
ct = v.encrypt("attackatdawn")
pt = v.decrypt(ct)
elapsed = time.perf_counter() - t0
ok("Shifts",     str(list(v.shifts)))
ok("Keystream",  v.keystream(len(pt)))
ok("Encrypted",  ct)
ok("Decrypted",  pt)
ok("Round-trip", f"{elapsed*1000:.3f} ms")

# ── CAESAR ───────────────────────────────────────────────────────────────────
header("Key 'd' — a one-letter key is a Caesar shift of 3")
v = Vigenere("d")
ok("Encrypted", v.encrypt("attackatdawn"))
ok("Mixed case", v.encrypt("AttackAtDawn"))

# ── TABULA RECTA ─────────────────────────────────────────────────────────────
header("Tabula recta (first 5 rows)")
for row in tabula_recta()[:5]:
    print(f"     {' '.join(row)}")

# ── KASISKI ──────────────────────────────────────────────────────────────────
header("Kasiski examination — key 'ABCD'")
v  = Vigenere("ABCD")
pt = "CRYPTOISSHORTFORCRYPTOGRAPHY"
ct = v.encrypt(pt)
print(f"  Key:        {v.keystream(len(pt)).upper()}")
print(f"  Plaintext:  {pt}")
print(f"  Ciphertext: {ct}")
first = ct.find("CSASTP")
second = ct.find("CSASTP", first + 1)
ok("Repeated group", f"'CSASTP' at {first} and {second}")
ok("Distance",       f"{second - first} — a multiple of the key length {v.period}")

# ── REJECTION ────────────────────────────────────────────────────────────────
header("Rejected input")
for bad_key in ("", "ab3"):
    try:
        Vigenere(bad_key)
    except InvalidKey as e:
        ok(f"Key {bad_key!r}", str(e))
try:
    Vigenere("lemon").encrypt("hello world")
except InvalidCharacter as e:
    ok("Text 'hello world'", str(e))

print(f"\n{LINE}\n")
