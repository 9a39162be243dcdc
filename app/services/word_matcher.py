"""Word matching content filter for event names and descriptions."""
from enum import Enum
from typing import Iterable, Optional


class Classification(str, Enum):
    CLEAN = "clean"
    BLOCKED = "blocked"
    NEEDS_REVIEW = "needs_review"


class WordMatcher:
    """
    Detects forbidden and unnecessary words in free text.

    Matching is substring containment over lower-cased text, so a listed
    word also matches inside a longer word ("test" matches "testing").
    Instances are immutable and safe to share between requests.
    """

    def __init__(self, forbidden_words: Iterable[str], unnecessary_words: Iterable[str]):
        self._forbidden = self._normalize(forbidden_words)
        self._unnecessary = self._normalize(unnecessary_words)

    @staticmethod
    def _normalize(words: Iterable[str]) -> frozenset[str]:
        return frozenset(w.strip().lower() for w in words if w and w.strip())

    @staticmethod
    def _matches(words: frozenset[str], text: Optional[str]) -> bool:
        if not text:
            return False
        text_lower = text.lower()
        return any(word in text_lower for word in words)

    @property
    def forbidden_words(self) -> frozenset[str]:
        return self._forbidden

    @property
    def unnecessary_words(self) -> frozenset[str]:
        return self._unnecessary

    def contains_forbidden(self, text: Optional[str]) -> bool:
        return self._matches(self._forbidden, text)

    def contains_flagged(self, text: Optional[str]) -> bool:
        return self._matches(self._unnecessary, text)

    def classify(self, name: Optional[str], description: Optional[str]) -> Classification:
        """Forbidden words win over unnecessary ones."""
        if self.contains_forbidden(name) or self.contains_forbidden(description):
            return Classification.BLOCKED
        if self.contains_flagged(name) or self.contains_flagged(description):
            return Classification.NEEDS_REVIEW
        return Classification.CLEAN
