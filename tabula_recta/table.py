"""
Substitution Table — the tabula recta
=====================================
A square SIZE × SIZE grid in which row r is the alphabet rotated left by
r positions:

    table[r][c] = alphabet[(r + c) mod SIZE]

Row 0 is the alphabet itself. Every row and every column is a
permutation of the alphabet, which is what makes decoding exact.

The grid is computed in closed form with numpy broadcasting and stored
as a read-only array of alphabet indices. Symbols are only materialised
when a caller asks for a row, a column or a single cell.

Dependencies: numpy >= 1.22
"""

import logging
from functools import lru_cache

import numpy as np

from .alphabet import SIZE, Alphabet, build_alphabet

logger = logging.getLogger(__name__)


class SubstitutionTable:
    """Immutable tabula recta derived from an Alphabet."""

    def __init__(self, alphabet: Alphabet):
        if len(alphabet) != SIZE:
            raise ValueError(f"Alphabet must hold exactly {SIZE} symbols.")
        self._alphabet = alphabet

        offsets = np.arange(SIZE, dtype=np.intp)
        grid = (offsets[:, np.newaxis] + offsets[np.newaxis, :]) % SIZE
        grid.setflags(write=False)
        self._grid = grid

        symbols = np.array(list(alphabet), dtype="<U1")
        symbols.setflags(write=False)
        self._symbols = symbols

        logger.info(f"Substitution table built: {SIZE}x{SIZE}")

    @property
    def alphabet(self) -> Alphabet:
        return self._alphabet

    @property
    def size(self) -> int:
        return SIZE

    @property
    def grid(self) -> np.ndarray:
        """Read-only SIZE × SIZE array of alphabet indices."""
        return self._grid

    # ── cell access ──────────────────────────────────────────────────────────

    def symbol(self, row: int, col: int) -> str:
        return str(self._symbols[self._grid[row, col]])

    def row(self, r: int) -> str:
        return "".join(self._symbols[self._grid[r]])

    def column(self, c: int) -> str:
        return "".join(self._symbols[self._grid[:, c]])

    def as_symbols(self) -> np.ndarray:
        """Full grid of symbols (a fresh array, SIZE × SIZE, dtype '<U1')."""
        return self._symbols[self._grid]

    # ── index arithmetic used by the cipher ──────────────────────────────────

    def shift(self, rows, cols):
        """Look up table[rows][cols]; accepts scalars or equal-length arrays."""
        return self._grid[rows, cols]

    @staticmethod
    def unshift(rows, values):
        """Inverse of shift(): the column whose cell in `rows` holds `values`."""
        return np.mod(np.subtract(values, rows), SIZE)

    def render(self, indices) -> str:
        """Join the symbols at `indices` into a string."""
        return "".join(self._symbols[np.asarray(indices, dtype=np.intp)])

    def __eq__(self, other) -> bool:
        if isinstance(other, SubstitutionTable):
            return self._alphabet == other._alphabet
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._alphabet)

    def __repr__(self):
        return f"SubstitutionTable({SIZE}x{SIZE})"


def build_table(alphabet: Alphabet) -> SubstitutionTable:
    """Derive the tabula recta from `alphabet`. Pure and idempotent."""
    return SubstitutionTable(alphabet)


@lru_cache(maxsize=1)
def default_table() -> SubstitutionTable:
    """The table for the standard alphabet, built once per process."""
    return build_table(build_alphabet())
