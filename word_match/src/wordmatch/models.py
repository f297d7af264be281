# wordmatch/models.py
"""
Data models for the word matching engine.

- Bucket: the words that share one score, kept both as a list (for O(1)
  random access) and as a set (for O(1) membership checks).
- AnalysisResult: the pair of related words returned for one query.

Neither class knows about scoring or locking; the store owns both.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Set


@dataclass(slots=True)
class Bucket:
    """
    All ingested words sharing one score.

    Attributes
    ----------
    items : List[str]
        Members in insertion order. Indexable, so a uniform random pick is
        a single index draw.
    members : Set[str]
        The same words as a set; guards against duplicates.
    """
    items: List[str] = field(default_factory=list)
    members: Set[str] = field(default_factory=set)

    def add(self, word: str) -> bool:
        """Append word unless already present. Returns True if it was new."""
        if word in self.members:
            return False
        self.members.add(word)
        self.items.append(word)
        return True

    def __len__(self) -> int:
        return len(self.items)

    def __contains__(self, word: object) -> bool:
        return word in self.members

    def __iter__(self) -> Iterator[str]:
        return iter(self.items)


@dataclass(frozen=True, slots=True)
class AnalysisResult:
    """
    The two related words found for an analyzed word.

    Attributes
    ----------
    value : Optional[str]
        A random word from the bucket whose score is nearest to (but never
        equal to) the query's score. None if no such bucket exists.
    lexical : Optional[str]
        The closest ingested word by Levenshtein distance. None if nothing
        has been ingested yet.
    """
    value: Optional[str]
    lexical: Optional[str]

    def to_dict(self) -> Dict[str, Optional[str]]:
        return {"value": self.value, "lexical": self.lexical}
