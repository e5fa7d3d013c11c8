"""
Alphabet — the 192-symbol domain
================================
Every character the cipher can represent, in a fixed order:

    index   0 .. 94   U+0020 .. U+007E   printable ASCII (space to tilde)
    index  95 .. 189  U+00A1 .. U+00FF   Latin-1 symbols (¡ to ÿ)
    index 190         U+000A             line feed
    index 191         U+000D             carriage return

U+00A0 (no-break space) is not a member. Line feed and carriage return
are appended last so multi-line textarea input (CRLF) can be enciphered.

The alphabet is immutable. It is the single source of truth for
validity: a character is in the domain iff index_of() finds it.
"""

from typing import Dict, Iterator, Optional, Tuple

SIZE = 192

_ASCII_PRINTABLE = "".join(chr(cp) for cp in range(0x20, 0x7F))
_LATIN1_SYMBOLS  = "".join(chr(cp) for cp in range(0xA1, 0x100))
_LINE_BREAKS     = "\n\r"

DEFAULT_SYMBOLS = _ASCII_PRINTABLE + _LATIN1_SYMBOLS + _LINE_BREAKS


class Alphabet:
    """Ordered, immutable sequence of distinct symbols with O(1) lookup."""

    __slots__ = ("_symbols", "_index")

    def __init__(self, symbols: str = DEFAULT_SYMBOLS):
        if len(symbols) != SIZE:
            raise ValueError(
                f"Alphabet must hold exactly {SIZE} symbols, got {len(symbols)}."
            )
        index: Dict[str, int] = {}
        for i, ch in enumerate(symbols):
            if ch in index:
                raise ValueError(
                    f"Duplicate symbol {ch!r} at positions {index[ch]} and {i}."
                )
            index[ch] = i
        self._symbols: Tuple[str, ...] = tuple(symbols)
        self._index   = index

    def symbol_at(self, index: int) -> str:
        """Return the symbol at `index`. Raises IndexError outside [0, SIZE)."""
        if not 0 <= index < SIZE:
            raise IndexError(f"Alphabet index {index} out of range [0, {SIZE}).")
        return self._symbols[index]

    def index_of(self, symbol: str) -> Optional[int]:
        """Position of `symbol`, or None if it is not in the domain."""
        return self._index.get(symbol)

    # ── sequence protocol ────────────────────────────────────────────────────

    def __len__(self) -> int:
        return SIZE

    def __iter__(self) -> Iterator[str]:
        return iter(self._symbols)

    def __getitem__(self, index: int) -> str:
        return self._symbols[index]

    def __contains__(self, symbol) -> bool:
        return symbol in self._index

    def __str__(self) -> str:
        return "".join(self._symbols)

    def __eq__(self, other) -> bool:
        if isinstance(other, Alphabet):
            return self._symbols == other._symbols
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._symbols)

    def __repr__(self):
        return f"Alphabet({SIZE} symbols)"


def build_alphabet() -> Alphabet:
    """Construct the standard 192-symbol alphabet. Pure and idempotent."""
    return Alphabet(DEFAULT_SYMBOLS)
