"""
Display formatting for decoded text
===================================
HTML collapses runs of spaces and ignores raw line breaks. To show a
decoded message exactly as it was typed, spaces become non-breaking
space entities and every line feed or carriage return becomes a break
tag. All other symbols pass through unchanged.

Presentation only: apply it to decode() output, once, and never feed
the result back into the cipher.
"""

NBSP_MARKER  = "&nbsp;"
BREAK_MARKER = "<br>"

_DISPLAY_MAP = str.maketrans({
    " ":  NBSP_MARKER,
    "\n": BREAK_MARKER,
    "\r": BREAK_MARKER,
})


def for_display(text: str) -> str:
    """Rewrite spaces and line breaks so HTML rendering preserves them."""
    return text.translate(_DISPLAY_MAP)
