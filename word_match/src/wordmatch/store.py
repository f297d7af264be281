# wordmatch/store.py
from __future__ import annotations
import logging
import random
import threading
from typing import Dict, List, Optional

from .index import ValueIndex, pick_random
from .models import AnalysisResult
from .scoring import score
from .search import nearest_lexical

log = logging.getLogger(__name__)


class WordStore:
    """
    Every word ingested so far, plus the value index built over them.

    One instance per process. All reads and the single write (ingest) go
    through one re-entrant lock, so a lookup never sees a half-applied
    ingest and analyze() can run lookups and ingest as one step.
    """
    def __init__(self) -> None:
        # dict as an insertion-ordered set: lexical ties go to the oldest word
        self._words: Dict[str, None] = {}
        self._index = ValueIndex()
        self._lock = threading.RLock()

    # C
    def ingest(self, word: str) -> bool:
        """Add word to the corpus and its score bucket. No-op if already seen."""
        with self._lock:
            if word in self._words:
                return False
            self._words[word] = None
            self._index.add(score(word), word)
            log.debug("ingested %r (corpus=%d)", word, len(self._words))
            return True

    # R
    def nearest_bucket_key(self, target: int) -> Optional[int]:
        with self._lock:
            return self._index.nearest_key(target)

    def random_word_from_bucket(self, key: Optional[int], rng: Optional[random.Random] = None) -> Optional[str]:
        with self._lock:
            return pick_random(self._index.bucket(key), rng)

    def nearest_lexical_word(self, word: str) -> Optional[str]:
        with self._lock:
            return nearest_lexical(word, self._words)

    def bucket_words(self, key: int) -> List[str]:
        with self._lock:
            bucket = self._index.bucket(key)
            return list(bucket) if bucket else []

    def words(self) -> List[str]:
        with self._lock:
            return list(self._words)

    def count(self) -> int:
        with self._lock:
            return len(self._words)

    def bucket_count(self) -> int:
        with self._lock:
            return len(self._index)

    def __contains__(self, word: object) -> bool:
        with self._lock:
            return word in self._words

    # Both lookups see the corpus as it was before word arrives
    def analyze(self, word: str, rng: Optional[random.Random] = None) -> AnalysisResult:
        value_score = score(word)
        with self._lock:
            key = self.nearest_bucket_key(value_score)
            result = AnalysisResult(
                value=self.random_word_from_bucket(key, rng),
                lexical=self.nearest_lexical_word(word),
            )
            self.ingest(word)
        return result
