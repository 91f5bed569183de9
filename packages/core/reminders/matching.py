from __future__ import annotations

from difflib import SequenceMatcher
from typing import Collection, List, Protocol, Sequence, runtime_checkable


DEFAULT_SIMILARITY_THRESHOLD = 0.72


@runtime_checkable
class FuzzyMatcher(Protocol):
    def match(self, query: str, candidates: Sequence[str]) -> Collection[str]:
        """Return the candidates that match query, unchanged. Empty if none match."""


class SubsequenceMatcher:
    """Matches when every query character appears in the candidate, in order.

    "bmk" matches "buy milk"; a plain substring is the tightest case.
    """

    def __init__(self, case_sensitive: bool = False) -> None:
        self._case_sensitive = case_sensitive

    def _fold(self, text: str) -> str:
        return text if self._case_sensitive else text.lower()

    def is_match(self, query: str, candidate: str) -> bool:
        needle = self._fold(query)
        haystack = self._fold(candidate)
        index = 0
        for letter in needle:
            index = haystack.find(letter, index)
            if index == -1:
                return False
            index += 1
        return True

    def match(self, query: str, candidates: Sequence[str]) -> List[str]:
        return [candidate for candidate in candidates if self.is_match(query, candidate)]


class SimilarityMatcher:
    """Tolerates typos by comparing the query against each word with difflib."""

    def __init__(self, threshold: float = DEFAULT_SIMILARITY_THRESHOLD) -> None:
        if not 0 < threshold <= 1:
            raise ValueError("threshold must be in (0, 1]")
        self._threshold = threshold

    @property
    def threshold(self) -> float:
        return self._threshold

    def is_match(self, query: str, candidate: str) -> bool:
        needle = " ".join(query.lower().split())
        haystack = " ".join(candidate.lower().split())
        if needle in haystack:
            return True
        if SequenceMatcher(None, needle, haystack).ratio() >= self._threshold:
            return True
        for word in haystack.split():
            if SequenceMatcher(None, needle, word).ratio() >= self._threshold:
                return True
        return False

    def match(self, query: str, candidates: Sequence[str]) -> List[str]:
        return [candidate for candidate in candidates if self.is_match(query, candidate)]
