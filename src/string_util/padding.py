"""NUL padding for fixed-block string fields.

``pad_null`` and ``trim_null`` are inverses for text that contains no NUL:

    >>> trim_null(pad_null("abc"))
    'abc'
"""

from __future__ import annotations

from .errors import check_int

NUL = "\0"


def pad_null(text: str, length: int = 16) -> str:
    """Pad text with NUL characters up to the next multiple of ``length``.

    Text already on a multiple (including the empty string) is returned
    as-is; no extra block is added.
    """
    check_int("length", length, 1)
    remainder = len(text) % length
    if remainder == 0:
        return text
    return text + NUL * (length - remainder)


def trim_null(text: str) -> str:
    """Drop everything from the first NUL onward."""
    idx = text.find(NUL)
    if idx == -1:
        return text
    return text[:idx]
