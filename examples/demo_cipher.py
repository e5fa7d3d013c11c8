"""
tabula_recta — Live Demo
========================
Run:  python examples/demo_cipher.py

Shows the alphabet, a corner of the tabula recta, an encode/decode
round trip with the built-in key, and the HTML display rendering.
"""

import sys, os, time
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from tabula_recta import (
    DEFAULT_KEY, InvalidSymbol, VigenereCipher, build_alphabet, build_table,
    encode, for_display,
)

LINE = "═" * 70
MSG  = "Meet me at the old oak,\r\nat  dawn. ¿Sí?"

def header(name):
    print(f"\n{LINE}")
    print(f"  {name}")
    print(LINE)

def ok(label, value=""):
    print(f"  ✓  {label}{f': {value}' if value else ''}")

# ─────────────────────────────────────────────────────────────────────────────
print(f"\n{LINE}")
print("  tabula_recta — Vigenère over 192 symbols")
print(LINE)

# ── Alphabet ─────────────────────────────────────────────────────────────────
header("Alphabet")
alphabet = build_alphabet()
ok("Size", str(len(alphabet)))
ok("First 20", repr(str(alphabet)[:20]))
ok("Latin-1 block", repr(str(alphabet)[95:110]))
ok("Tail", repr(str(alphabet)[-4:]))

# ── Table ────────────────────────────────────────────────────────────────────
header("Tabula recta (top-left 8 × 16)")
t0 = time.perf_counter()
table = build_table(alphabet)
elapsed = time.perf_counter() - t0
for r in range(8):
    print(f"  {r:>3}  {table.row(r)[:16]}")
ok("Built in", f"{elapsed*1000:.2f} ms")

# ── Round trip ───────────────────────────────────────────────────────────────
header("Encode / decode")
v  = VigenereCipher(DEFAULT_KEY, table)
ct = v.encrypt(MSG)
pt = v.decrypt(ct)
ok("Key", repr(DEFAULT_KEY))
ok("Plaintext", repr(MSG))
ok("Ciphertext", repr(ct))
ok("Decrypted", repr(pt))
ok("Round-trip exact", str(pt == MSG))

# ── Display ──────────────────────────────────────────────────────────────────
header("HTML display")
ok("Rendered", repr(for_display(pt)))

# ── Rejection ────────────────────────────────────────────────────────────────
header("Out-of-alphabet input")
try:
    encode("bell\x07", DEFAULT_KEY, table)
except InvalidSymbol as e:
    ok("Rejected", str(e))

print(f"\n{LINE}\n")
