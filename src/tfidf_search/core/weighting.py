"""Term weighting: term frequency, inverse document frequency and TF-IDF."""

import math
from collections import Counter
from typing import TYPE_CHECKING, Dict, Mapping, Sequence

if TYPE_CHECKING:
    from .corpus import CorpusStore

SparseVector = Dict[str, float]


def term_frequency(tokens: Sequence[str]) -> SparseVector:
    """
    Relative frequency of each distinct token.

    Args:
        tokens: Normalized tokens, duplicates retained

    Returns:
        Mapping of term to ``count / len(tokens)``; empty for no tokens
    """
    total = len(tokens)
    if total == 0:
        return {}
    counts = Counter(tokens)
    return {term: count / total for term, count in counts.items()}


class WeightingEngine:
    """
    Computes IDF and TF-IDF vectors against a corpus store.

    IDF values are memoized per corpus state. Callers that mutate the corpus
    must call ``invalidate`` before the next lookup.
    """

    def __init__(self, corpus: "CorpusStore"):
        self.corpus = corpus
        self._idf_cache: Dict[str, float] = {}

    @property
    def cache_size(self) -> int:
        return len(self._idf_cache)

    def invalidate(self) -> None:
        """Drop every cached IDF value."""
        self._idf_cache.clear()

    def document_frequency(self, term: str) -> int:
        """Number of stored documents whose term frequency for ``term`` is positive."""
        return sum(
            1 for doc in self.corpus.documents()
            if doc.term_frequency.get(term, 0.0) > 0
        )

    def idf(self, term: str) -> float:
        """
        Inverse document frequency, ``ln(N / df)``.

        Terms that occur in no document weigh 0 rather than infinity.
        """
        cached = self._idf_cache.get(term)
        if cached is not None:
            return cached

        df = self.document_frequency(term)
        value = math.log(len(self.corpus) / df) if df > 0 else 0.0

        self._idf_cache[term] = value
        return value

    def tfidf(self, term_freq: Mapping[str, float]) -> SparseVector:
        """Weight each term frequency by its IDF. Absent terms stay absent."""
        return {term: tf * self.idf(term) for term, tf in term_freq.items()}
