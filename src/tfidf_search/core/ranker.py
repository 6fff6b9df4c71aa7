"""Cosine similarity ranking over sparse TF-IDF vectors."""

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence

import numpy as np

from ..models.result import SearchResult
from .corpus import CorpusStore
from .weighting import WeightingEngine

logger = logging.getLogger(__name__)


def cosine_similarity(vec_a: Mapping[str, float], vec_b: Mapping[str, float]) -> float:
    """
    Cosine of the angle between two sparse vectors.

    Norms run over all terms of each vector, not only the shared ones.
    Returns 0.0 when the vectors share no term or either norm is zero.
    """
    common = [term for term in vec_a if term in vec_b]
    if not common:
        return 0.0

    dot = float(np.dot(
        np.fromiter((vec_a[t] for t in common), dtype=float, count=len(common)),
        np.fromiter((vec_b[t] for t in common), dtype=float, count=len(common)),
    ))
    norm_a = float(np.linalg.norm(np.fromiter(vec_a.values(), dtype=float, count=len(vec_a))))
    norm_b = float(np.linalg.norm(np.fromiter(vec_b.values(), dtype=float, count=len(vec_b))))

    if norm_a == 0.0 or norm_b == 0.0:
        return 0.0

    # Rounding can push a self-similarity a hair above 1.
    return min(dot / (norm_a * norm_b), 1.0)


class SimilarityRanker:
    """Scores candidate documents against a query vector and keeps the best."""

    def __init__(self, corpus: CorpusStore, weighting: WeightingEngine, max_results: int = 5):
        self.corpus = corpus
        self.weighting = weighting
        self.max_results = max_results

    def rank(
        self,
        query_vector: Mapping[str, float],
        candidate_ids: Sequence[str],
        exclude: Optional[str] = None
    ) -> List[SearchResult]:
        """
        Rank candidates by cosine similarity to ``query_vector``.

        Document vectors are recomputed per call since IDF values move with
        the corpus. Only strictly positive scores are kept. Ties keep
        candidate order.

        Args:
            query_vector: TF-IDF vector of the query
            candidate_ids: Document ids to score, in tie-break order
            exclude: Document id to leave out of the results

        Returns:
            At most ``max_results`` results, highest score first
        """
        scored = []
        for document_id in candidate_ids:
            if document_id == exclude:
                continue
            doc = self.corpus.get(document_id)
            if doc is None:
                continue
            score = cosine_similarity(query_vector, self.weighting.tfidf(doc.term_frequency))
            if score > 0:
                scored.append((doc, score))

        if not scored:
            return []

        scores = np.array([score for _, score in scored])
        order = np.argsort(-scores, kind="stable")[:self.max_results]

        return [
            SearchResult.from_document(scored[i][0].document, float(scores[i]))
            for i in order
        ]


def summarize_results(results: Iterable[SearchResult]) -> Dict[str, Any]:
    """Result count, mean score and top score for a ranked result list."""
    scores = [result.score for result in results]
    if not scores:
        return {"result_count": 0, "avg_score": 0.0, "top_score": 0.0}
    return {
        "result_count": len(scores),
        "avg_score": float(np.mean(scores)),
        "top_score": float(np.max(scores)),
    }
