"""Data models for the TF-IDF search engine."""

from .document import Document, DocumentModel, ProcessedDocument
from .result import SearchResult

__all__ = ["Document", "DocumentModel", "ProcessedDocument", "SearchResult"]
