"""Inverted index mapping terms to the documents that contain them."""

import logging
from typing import Dict, Iterable, List, Tuple

from .corpus import CorpusStore

logger = logging.getLogger(__name__)


class InvertedIndex:
    """
    Term -> posting list of distinct document ids, in corpus order.

    The index is rebuilt from scratch on every corpus mutation. That costs
    O(total terms across all documents) per rebuild, which is the main
    scaling limit of the engine: fine for interactively built corpora, not
    for streaming ingestion.
    """

    def __init__(self) -> None:
        self._postings: Dict[str, List[str]] = {}

    def __len__(self) -> int:
        return len(self._postings)

    def __contains__(self, term: object) -> bool:
        return term in self._postings

    def rebuild(self, corpus: CorpusStore) -> None:
        """Recompute every posting list from the corpus."""
        postings: Dict[str, List[str]] = {}
        for doc in corpus.documents():
            for term in doc.term_frequency:
                posting = postings.setdefault(term, [])
                if doc.id not in posting:
                    posting.append(doc.id)
        self._postings = postings
        logger.debug(f"Inverted index built with {len(postings)} terms")

    def postings(self, term: str) -> Tuple[str, ...]:
        return tuple(self._postings.get(term, ()))

    def candidates(self, terms: Iterable[str]) -> List[str]:
        """
        Union of the posting lists for ``terms``.

        Ids are ordered by first appearance, walking terms in the given
        order and each posting list in corpus order.
        """
        seen: Dict[str, None] = {}
        for term in terms:
            for document_id in self._postings.get(term, ()):
                seen.setdefault(document_id, None)
        return list(seen)

    def clear(self) -> None:
        self._postings = {}
