"""
Key expansion
=============
Stretch (or trim) a passphrase to the length of the text it keys by
repeating its symbols cyclically from the first one:

    expanded[i] = key[i mod len(key)]

A key longer than the text is therefore cut down to its prefix, so
"KEY" and "KEYKEY" produce the same expanded key for any text length.
"""

from itertools import cycle, islice


def expand_key(key: str, target_length: int) -> str:
    """Return a fresh string of exactly `target_length` key symbols."""
    if not key:
        raise ValueError("Key must not be empty.")
    if target_length < 0:
        raise ValueError(f"Target length must be >= 0, got {target_length}.")
    return "".join(islice(cycle(key), target_length))
