"""
Value index for the word matching engine.

Maps a word's score to the bucket of words sharing that score, and answers
"which populated score is nearest to this one?". Buckets are created on
first insert and never removed, so a key exists iff its bucket is non-empty.
"""

from __future__ import annotations
import random
from typing import Dict, Optional
from .models import Bucket


class ValueIndex:
    """
    score -> Bucket, plus the largest key seen so far.

    Not thread-safe on its own; WordStore serializes access.
    """
    def __init__(self) -> None:
        self._buckets: Dict[int, Bucket] = {}
        self._max_key: Optional[int] = None

    # ---- Build (append-only) ----
    def add(self, key: int, word: str) -> bool:
        bucket = self._buckets.get(key)
        if bucket is None:
            bucket = self._buckets[key] = Bucket()
            if self._max_key is None or key > self._max_key:
                self._max_key = key
        return bucket.add(word)

    # ---- Query ----
    def bucket(self, key: Optional[int]) -> Optional[Bucket]:
        if key is None:
            return None
        return self._buckets.get(key)

    @property
    def max_key(self) -> Optional[int]:
        return self._max_key

    def nearest_key(self, target: int) -> Optional[int]:
        """
        Find the populated key closest to target, searching outward with
        margins 1, 2, 3, ... and testing the lower side first.

        target itself is never returned, even when its bucket exists.

        Args:
            target (int): The score to search around.

        Returns:
            Optional[int]: The nearest populated key, or None when the index
                           is empty or no key lies within reach.

        Example:
            >>> idx = ValueIndex()
            >>> _ = idx.add(5, "e"); _ = idx.add(10, "j")
            >>> idx.nearest_key(7)
            5
        """
        if self._max_key is None:
            return None
        max_key = self._max_key
        margin = 1
        while target - margin > 0 or target + margin <= max_key:
            lower = target - margin
            upper = target + margin
            if lower > 0 and lower in self._buckets:
                return lower
            if upper <= max_key and upper in self._buckets:
                return upper
            margin += 1
        return None

    def __len__(self) -> int:
        return len(self._buckets)

    def __contains__(self, key: object) -> bool:
        return key in self._buckets


def pick_random(bucket: Optional[Bucket], rng: Optional[random.Random] = None) -> Optional[str]:
    """Uniformly random member of bucket, or None if it is missing or empty."""
    if not bucket:
        return None
    rng = rng or random
    return bucket.items[rng.randrange(len(bucket.items))]
