"""
TF-IDF Search Engine

In-memory document indexing and ranked retrieval: text normalization,
TF-IDF weighting, an inverted index for candidate lookup and cosine
similarity ranking.
"""

from .core.engine import SearchEngine
from .core.config import EngineConfig
from .core.exceptions import (
    SearchEngineError,
    InvalidDocument,
    DuplicateDocumentError,
    InvalidQuery,
    DocumentProcessingError,
    ConfigurationError,
)
from .api.service import SearchService
from .models.document import Document
from .models.result import SearchResult

__version__ = "1.0.0"

__all__ = [
    "SearchEngine",
    "SearchService",
    "EngineConfig",
    "Document",
    "SearchResult",
    "SearchEngineError",
    "InvalidDocument",
    "DuplicateDocumentError",
    "InvalidQuery",
    "DocumentProcessingError",
    "ConfigurationError",
]
