from __future__ import annotations
from .config import ASCII_OFFSET


def score(word: str) -> int:
    """
    Sum of alphabet positions of the letters in word (a=1 ... z=26).

    Case-insensitive. The caller guarantees word holds ASCII letters only;
    anything else yields a meaningless number rather than an error.
    """
    return sum(ord(ch) - ASCII_OFFSET for ch in word.lower())
