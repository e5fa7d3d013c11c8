"""
Errors
======
Every engine failure is a ValueError subclass, so callers that only
care about "bad input" can catch ValueError.

A single failure kind is raised by encode/decode: InvalidSymbol, for any
character (text or key) that is not a member of the 192-symbol alphabet.
There is no partial output and no silent substitution.
"""

from typing import Optional


class CipherError(ValueError):
    """Base class for cipher engine errors."""


class InvalidSymbol(CipherError):
    """
    Raised when a character is outside the alphabet.

    Attributes:
        symbol   : the offending character
        position : its index in the text or key, if known
        source   : "text" or "key", if known
    """

    def __init__(self, symbol: str, position: Optional[int] = None,
                 source: Optional[str] = None):
        self.symbol   = symbol
        self.position = position
        self.source   = source
        super().__init__(self._describe())

    def _describe(self) -> str:
        msg = f"invalid symbol {self.symbol!r} (U+{ord(self.symbol):04X})"
        if self.source:
            msg += f" in {self.source}"
        if self.position is not None:
            msg += f" at position {self.position}"
        return msg

    def __reduce__(self):
        return (self.__class__, (self.symbol, self.position, self.source))
