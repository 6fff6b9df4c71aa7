"""Core engine components for TF-IDF search."""

from .config import EngineConfig
from .corpus import CorpusStore
from .engine import SearchEngine
from .inverted_index import InvertedIndex
from .ranker import SimilarityRanker, cosine_similarity, summarize_results
from .weighting import WeightingEngine, term_frequency
from .exceptions import (
    SearchEngineError,
    ValidationError,
    InvalidDocument,
    DuplicateDocumentError,
    InvalidQuery,
    DocumentProcessingError,
    ConfigurationError,
)

__all__ = [
    "EngineConfig",
    "CorpusStore",
    "SearchEngine",
    "InvertedIndex",
    "SimilarityRanker",
    "cosine_similarity",
    "summarize_results",
    "WeightingEngine",
    "term_frequency",
    "SearchEngineError",
    "ValidationError",
    "InvalidDocument",
    "DuplicateDocumentError",
    "InvalidQuery",
    "DocumentProcessingError",
    "ConfigurationError",
]
