"""
Word Matching Engine

For every word it is given, this package returns two related words taken
from the words it has seen before, then remembers the new word:

- value:   a random word whose letter-sum score is nearest to the query's
           (a=1 ... z=26, never the exact same score)
- lexical: the closest word by Levenshtein distance

Main entry points:
    Engine().analyze(word) -> AnalysisResult(value, lexical)
    score(word)            -> int

Example Usage:
    from wordmatch import Engine

    eng = Engine(seed=7)
    eng.analyze("cat")   # AnalysisResult(value=None, lexical=None)
    eng.analyze("bat")   # AnalysisResult(value='cat', lexical='cat')
"""

# src/wordmatch/__init__.py
from .engine import Engine  # re-export
from .models import AnalysisResult
from .scoring import score
from .store import WordStore
from .validation import is_valid_word

__version__ = "1.0.0"
__all__ = ["Engine", "AnalysisResult", "WordStore", "score", "is_valid_word"]
