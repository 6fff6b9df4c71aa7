"""Utility modules for the TF-IDF search engine."""

from .text_processing import TextNormalizer, stem, STOPWORDS, SUFFIXES
from .validators import validate_document, validate_query, validate_documents_batch
from .logging_config import setup_logging
from .file_loader import load_text_document

__all__ = [
    "TextNormalizer",
    "stem",
    "STOPWORDS",
    "SUFFIXES",
    "validate_document",
    "validate_query",
    "validate_documents_batch",
    "setup_logging",
    "load_text_document",
]
