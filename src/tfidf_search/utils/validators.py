"""Input validation utilities for the ingestion boundary."""

from typing import Any, Iterable, List, Mapping, Union

from pydantic import ValidationError as PydanticValidationError

from ..models.document import Document, DocumentModel
from ..core.exceptions import InvalidDocument, InvalidQuery

DocumentLike = Union[Document, Mapping[str, Any]]


def validate_document(document: DocumentLike) -> Document:
    """
    Validate a document or a raw ``{id, title, content}`` mapping.

    Args:
        document: Document instance or mapping to validate

    Returns:
        The validated Document

    Raises:
        InvalidDocument: If a field is missing, not a string, or the id is empty
    """
    if isinstance(document, Document):
        return document

    if not isinstance(document, Mapping):
        raise InvalidDocument(f"Invalid document type: {type(document).__name__}")

    try:
        return DocumentModel.model_validate(dict(document)).to_document()
    except PydanticValidationError as e:
        fields = ", ".join(
            ".".join(str(part) for part in error["loc"]) or "document"
            for error in e.errors()
        )
        raise InvalidDocument(f"Document validation failed for: {fields}") from e


def validate_query(query: Any) -> str:
    """
    Validate query text.

    An empty string is a valid query and simply matches nothing.

    Raises:
        InvalidQuery: If query is not a string
    """
    if not isinstance(query, str):
        raise InvalidQuery(f"Query must be a string, got {type(query).__name__}")
    return query


def validate_documents_batch(documents: Iterable[DocumentLike]) -> List[Document]:
    """
    Validate a batch of documents.

    Raises:
        InvalidDocument: If the batch is not iterable or any document is invalid
    """
    if isinstance(documents, (str, bytes, Mapping)) or not isinstance(documents, Iterable):
        raise InvalidDocument("Documents must be given as an iterable of documents")

    validated = []
    for i, doc in enumerate(documents):
        try:
            validated.append(validate_document(doc))
        except InvalidDocument as e:
            raise InvalidDocument(f"Document at position {i}: {e}") from e
    return validated
