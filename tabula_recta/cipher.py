"""
Vigenère cipher over the 192-symbol alphabet
============================================
Each plaintext symbol is replaced by the tabula recta cell whose row is
the matching key symbol and whose column is the plaintext symbol:

    encode:  c[i] = table[k[i]][m[i]]     = alphabet[(k[i] + m[i]) mod 192]
    decode:  m[i] = alphabet[(c[i] - k[i]) mod 192]

where k is the key expanded to the text length. Every position is
independent of every other, so encode and decode are deterministic,
length-preserving and exact inverses of one another.

Every character of the text and of the key must belong to the alphabet.
The first one that does not aborts the call with InvalidSymbol; no
partial result is ever returned.

Historical note: Giovan Battista Bellaso, 1553, later misattributed to
Blaise de Vigenère. Not modern-secure. Do not use it to protect data.
"""

import logging
from typing import List, Optional

import numpy as np

from .alphabet import Alphabet
from .errors import InvalidSymbol
from .keys import expand_key
from .table import SubstitutionTable, default_table

logger = logging.getLogger(__name__)

# Passphrase used when the caller supplies none.
DEFAULT_KEY = "°¡! RüST íS CóÓL ¡!°"


def _indices(text: str, alphabet: Alphabet, source: str) -> np.ndarray:
    """Map `text` to alphabet indices, failing on the first foreign symbol."""
    out: List[int] = []
    for pos, ch in enumerate(text):
        idx = alphabet.index_of(ch)
        if idx is None:
            raise InvalidSymbol(ch, position=pos, source=source)
        out.append(idx)
    return np.array(out, dtype=np.intp)


def _validate_key(key: str, alphabet: Alphabet) -> None:
    if not key:
        raise ValueError("Key must not be empty.")
    _indices(key, alphabet, "key")


def encode(text: str, key: str,
           table: Optional[SubstitutionTable] = None) -> str:
    """
    Encipher `text` with `key`.

    Args:
        text  : plaintext, every symbol in the alphabet
        key   : non-empty passphrase, every symbol in the alphabet
        table : tabula recta to use (defaults to the shared standard table)

    Returns:
        Ciphertext of the same length as `text`.

    Raises:
        InvalidSymbol if any text or key symbol is outside the alphabet.
    """
    table = table or default_table()
    alphabet = table.alphabet
    _validate_key(key, alphabet)

    msg_idx = _indices(text, alphabet, "text")
    key_idx = _indices(expand_key(key, len(text)), alphabet, "key")

    out = table.render(table.shift(key_idx, msg_idx))
    logger.debug(f"Encode: {len(text)} symbols, key={len(key)} symbols")
    return out


def decode(text: str, key: str,
           table: Optional[SubstitutionTable] = None) -> str:
    """
    Decipher `text` with `key`. Inverse of encode().

    Raises:
        InvalidSymbol if any ciphertext or key symbol is outside the
        alphabet. A foreign ciphertext symbol is never mapped to a default.
    """
    table = table or default_table()
    alphabet = table.alphabet
    _validate_key(key, alphabet)

    enc_idx = _indices(text, alphabet, "text")
    key_idx = _indices(expand_key(key, len(text)), alphabet, "key")

    out = table.render(table.unshift(key_idx, enc_idx))
    logger.debug(f"Decode: {len(text)} symbols, key={len(key)} symbols")
    return out


class VigenereCipher:
    """
    A key bound to a tabula recta.

    The key is validated once, at construction, so a bad passphrase is
    reported before any text is processed.
    """

    def __init__(self, key: str = DEFAULT_KEY,
                 table: Optional[SubstitutionTable] = None):
        self._table = table or default_table()
        _validate_key(key, self._table.alphabet)
        self._key = key

    @property
    def key(self) -> str:
        return self._key

    @property
    def table(self) -> SubstitutionTable:
        return self._table

    def encrypt(self, plaintext: str) -> str:
        return encode(plaintext, self._key, self._table)

    def decrypt(self, ciphertext: str) -> str:
        return decode(ciphertext, self._key, self._table)

    def __repr__(self):
        return f"VigenereCipher(key={len(self._key)} symbols)"
