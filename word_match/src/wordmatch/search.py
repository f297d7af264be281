from __future__ import annotations
from typing import Iterable, Optional

from rapidfuzz.distance import Levenshtein

from .config import MIN_DISTANCE


def edit_distance(a: str, b: str, cutoff: Optional[int] = None) -> int:
    """
    Levenshtein distance between a and b.

    With a cutoff, any distance above it is reported as cutoff + 1, which
    lets rapidfuzz bail out early on hopeless pairs.
    """
    return Levenshtein.distance(a, b, score_cutoff=cutoff)


def nearest_lexical(word: str, candidates: Iterable[str]) -> Optional[str]:
    """
    Closest candidate to word by edit distance.

    Scans in iteration order and keeps the first candidate at each new
    minimum, so ties go to whichever came first. Returns as soon as a
    candidate within MIN_DISTANCE is seen. None if candidates is empty.
    """
    closest: Optional[str] = None
    best: Optional[int] = None
    for cand in candidates:
        # only a strictly better candidate can replace the current one
        cutoff = None if best is None else best - 1
        d = edit_distance(cand, word, cutoff)
        if best is not None and d >= best:
            continue
        best, closest = d, cand
        if d <= MIN_DISTANCE:
            return closest
    return closest
