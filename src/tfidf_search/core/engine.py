"""TF-IDF search engine facade."""

import logging
from typing import Any, Dict, Iterable, List, Optional

from ..models.result import SearchResult
from ..utils.text_processing import TextNormalizer
from ..utils.validators import (
    DocumentLike,
    validate_document,
    validate_documents_batch,
    validate_query,
)
from .config import EngineConfig
from .corpus import CorpusStore
from .exceptions import InvalidDocument
from .inverted_index import InvertedIndex
from .ranker import SimilarityRanker
from .weighting import WeightingEngine, term_frequency


class SearchEngine:
    """
    In-memory TF-IDF search engine.

    Each instance owns its corpus, vocabulary, IDF cache and inverted
    index. Nothing is shared between instances.

    The engine is synchronous and has no internal locking. Hosts that call
    it from several threads or tasks must serialize mutating calls
    (``add_document``, ``add_documents``, ``clear``) against everything
    else; ``SearchService`` does this.
    """

    def __init__(
        self,
        config: Optional[EngineConfig] = None,
        logger: Optional[logging.Logger] = None,
        normalizer: Optional[TextNormalizer] = None
    ):
        """
        Initialize an empty search engine.

        Args:
            config: Engine settings, defaults to ``EngineConfig()``
            logger: Logger for corpus and query events, defaults to this module's
            normalizer: Text normalizer shared by documents and queries
        """
        self.config = config or EngineConfig()
        self.logger = logger or logging.getLogger(__name__)
        self.normalizer = normalizer or TextNormalizer()

        self.corpus = CorpusStore(self.normalizer)
        self.index = InvertedIndex()
        self.weighting = WeightingEngine(self.corpus)
        self.ranker = SimilarityRanker(
            self.corpus, self.weighting, max_results=self.config.max_results
        )

    def __len__(self) -> int:
        return len(self.corpus)

    def __contains__(self, document_id: object) -> bool:
        return document_id in self.corpus

    @property
    def replace_duplicates(self) -> bool:
        return self.config.duplicate_policy == "replace"

    def add_document(self, document: DocumentLike) -> None:
        """
        Add a single document to the corpus.

        Args:
            document: Document or ``{id, title, content}`` mapping

        Raises:
            InvalidDocument: If the document is malformed
            DuplicateDocumentError: If the id exists and duplicates are rejected
        """
        document = validate_document(document)
        processed = self.corpus.add(document, replace=self.replace_duplicates)
        self._corpus_changed()

        self.logger.info(f"Added document {document.id} ({processed.length} tokens)")
        self.logger.debug(
            f"Corpus now contains {len(self.corpus)} documents, "
            f"vocabulary size {len(self.corpus.vocabulary)}"
        )

    def add_documents(self, documents: Iterable[DocumentLike]) -> None:
        """
        Add several documents, rebuilding the index once at the end.

        The whole batch is validated before anything is stored. With the
        ``reject`` policy a duplicate id aborts the batch at that document;
        documents stored before it stay indexed.
        """
        validated = validate_documents_batch(documents)
        if not validated:
            return

        try:
            for document in validated:
                self.corpus.add(document, replace=self.replace_duplicates)
        finally:
            self._corpus_changed()

        self.logger.info(
            f"Added {len(validated)} documents, corpus now contains {len(self.corpus)}"
        )

    def search(self, query: str) -> List[SearchResult]:
        """
        Rank stored documents against free-text ``query``.

        Args:
            query: Search text; an empty string yields no results

        Returns:
            Up to ``config.max_results`` results, highest score first

        Raises:
            InvalidQuery: If query is not a string
        """
        query = validate_query(query)

        if len(self.corpus) == 0:
            return []

        query_tokens = self.normalizer.normalize(query)
        query_vector = self.weighting.tfidf(term_frequency(query_tokens))
        candidates = self.index.candidates(query_tokens)

        self.logger.debug(f"Query tokens: {query_tokens}")
        self.logger.debug(f"Candidate documents: {len(candidates)}")

        results = self.ranker.rank(query_vector, candidates)

        self.logger.debug(f"Search completed, found {len(results)} relevant documents")
        return results

    def find_similar(self, document_id: str) -> List[SearchResult]:
        """
        Rank the other stored documents by similarity to a stored one.

        Raises:
            InvalidDocument: If the id is not a string or no document has it
        """
        if not isinstance(document_id, str):
            raise InvalidDocument(f"Document ID must be a string, got {type(document_id).__name__}")

        doc = self.corpus.get(document_id)
        if doc is None:
            raise InvalidDocument(f"Unknown document ID: {document_id}")

        vector = self.weighting.tfidf(doc.term_frequency)
        candidates = self.index.candidates(doc.term_frequency)
        return self.ranker.rank(vector, candidates, exclude=document_id)

    def get_stats(self) -> Dict[str, Any]:
        """Get corpus statistics."""
        return {
            "total_documents": len(self.corpus),
            "total_terms": len(self.corpus.vocabulary),
            "avg_document_length": self.corpus.average_length(),
        }

    def clear(self) -> None:
        """Reset the engine to its empty initial state."""
        self.corpus.clear()
        self.weighting.invalidate()
        self.index.clear()
        self.logger.info("Corpus cleared")

    def _corpus_changed(self) -> None:
        # IDF depends on global document frequencies; drop it before the
        # index is rebuilt so no reader sees fresh postings with stale weights.
        self.weighting.invalidate()
        self.index.rebuild(self.corpus)
