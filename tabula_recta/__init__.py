"""
tabula_recta
============
Vigenère polyalphabetic cipher over an extended 192-symbol alphabet:
printable ASCII, the Latin-1 symbols ¡..ÿ, line feed and carriage return.

Modules:
    alphabet  — the fixed 192-symbol domain and symbol lookup
    table     — the tabula recta (192 × 192 substitution table)
    keys      — cyclic key expansion to the text length
    cipher    — encode / decode and the VigenereCipher convenience class
    display   — HTML-safe rendering of decoded text
    errors    — InvalidSymbol and the CipherError base class

A classical cipher. It makes no confidentiality claims.
"""

__version__ = "1.0.0"

from .alphabet import SIZE, Alphabet, build_alphabet
from .table    import SubstitutionTable, build_table, default_table
from .keys     import expand_key
from .cipher   import DEFAULT_KEY, VigenereCipher, encode, decode
from .display  import for_display
from .errors   import CipherError, InvalidSymbol

__all__ = [
    "SIZE",
    "Alphabet",
    "build_alphabet",
    "SubstitutionTable",
    "build_table",
    "default_table",
    "expand_key",
    "DEFAULT_KEY",
    "VigenereCipher",
    "encode",
    "decode",
    "for_display",
    "CipherError",
    "InvalidSymbol",
]
