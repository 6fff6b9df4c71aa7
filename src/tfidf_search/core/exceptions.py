"""Custom exceptions for the TF-IDF search engine."""


class SearchEngineError(Exception):
    """Base exception for search engine operations."""
    pass


class ValidationError(SearchEngineError, ValueError):
    """Exception raised during input validation."""
    pass


class InvalidDocument(ValidationError):
    """Exception raised when a document is missing a field or has a non-string one."""
    pass


class DuplicateDocumentError(InvalidDocument):
    """Exception raised when a document id is already indexed and duplicates are rejected."""
    pass


class InvalidQuery(ValidationError):
    """Exception raised when a query is not a string."""
    pass


class DocumentProcessingError(SearchEngineError):
    """Exception raised during document ingestion."""
    pass


class ConfigurationError(SearchEngineError):
    """Exception raised for configuration issues."""
    pass
