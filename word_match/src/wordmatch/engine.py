# wordmatch/engine.py
from __future__ import annotations

import logging
import random
from typing import Dict, Optional

from . import config as CFG
from .models import AnalysisResult
from .store import WordStore

log = logging.getLogger(__name__)


class Engine:
    """
    Thin orchestration layer that owns the process-wide word store and the
    random generator used for value picks.

    Public API (used by the REPL and Flask):
      * analyze(word): lookups against past words, then ingest word
      * stats():       corpus and index sizes
      * shutdown():    release the store

    Callers must validate words (letters only, non-empty) before analyze().
    """

    # ------------- lifecycle -------------

    def __init__(self, *, seed: Optional[int] = CFG.RANDOM_SEED, store: Optional[WordStore] = None) -> None:
        self._store: Optional[WordStore] = store if store is not None else WordStore()
        self._rng = random.Random(seed)
        log.info("Engine ready (seed=%s)", seed)

    @property
    def store(self) -> WordStore:
        if self._store is None:
            raise RuntimeError("Engine not initialized. Create a new Engine after shutdown().")
        return self._store

    # ------------- query -------------

    # /* ~~~ Find the value and lexical matches for a word, then remember it ~~~ */
    def analyze(self, word: str) -> AnalysisResult:
        result = self.store.analyze(word, self._rng)
        log.debug("analyze(%r) -> value=%r lexical=%r", word, result.value, result.lexical)
        return result

    def stats(self) -> Dict[str, int]:
        store = self.store
        return {"words": store.count(), "buckets": store.bucket_count()}

    # ------------- teardown -------------

    def shutdown(self) -> None:
        if self._store is not None:
            log.info("Engine shutdown complete: words=%d", self._store.count())
        self._store = None
