"""Corpus store holding processed documents and the global vocabulary."""

import logging
from typing import Dict, Iterator, List, Optional, Set

from ..models.document import Document, ProcessedDocument
from ..utils.text_processing import TextNormalizer
from .exceptions import DuplicateDocumentError
from .weighting import term_frequency

logger = logging.getLogger(__name__)


class CorpusStore:
    """
    Owns processed documents keyed by id, in insertion order.

    The vocabulary only grows until ``clear``. Replacing a document keeps
    its original position and leaves the terms it used to contribute in the
    vocabulary.
    """

    def __init__(self, normalizer: Optional[TextNormalizer] = None):
        self.normalizer = normalizer or TextNormalizer()
        self._documents: Dict[str, ProcessedDocument] = {}
        self.vocabulary: Set[str] = set()

    def __len__(self) -> int:
        return len(self._documents)

    def __contains__(self, document_id: object) -> bool:
        return document_id in self._documents

    def documents(self) -> Iterator[ProcessedDocument]:
        return iter(self._documents.values())

    def get(self, document_id: str) -> Optional[ProcessedDocument]:
        return self._documents.get(document_id)

    def process(self, document: Document) -> ProcessedDocument:
        """Normalize ``content + " " + title`` and compute its term frequencies."""
        tokens = self.normalizer.normalize(document.text)
        return ProcessedDocument(
            document=document,
            tokens=tuple(tokens),
            term_frequency=term_frequency(tokens),
        )

    def add(self, document: Document, replace: bool = True) -> ProcessedDocument:
        """
        Process and store a document, merging its terms into the vocabulary.

        Args:
            document: Document to store
            replace: Overwrite an existing document with the same id

        Raises:
            DuplicateDocumentError: If the id exists and ``replace`` is False
        """
        if document.id in self._documents and not replace:
            raise DuplicateDocumentError(f"Document ID already indexed: {document.id}")

        processed = self.process(document)
        if document.id in self._documents:
            logger.debug(f"Replacing document {document.id}")
        self._documents[document.id] = processed
        self.vocabulary.update(processed.tokens)
        return processed

    def clear(self) -> None:
        self._documents.clear()
        self.vocabulary.clear()

    def average_length(self) -> float:
        """Mean token count per document, 0.0 for an empty corpus."""
        if not self._documents:
            return 0.0
        return sum(doc.length for doc in self._documents.values()) / len(self._documents)

    def ids(self) -> List[str]:
        return list(self._documents)
