"""Document data models with validation."""

from dataclasses import dataclass, field
from typing import Dict, Tuple

from pydantic import BaseModel, Field, StrictStr, field_validator

from ..core.exceptions import InvalidDocument


@dataclass(frozen=True)
class Document:
    """
    Raw text document supplied by a collaborator.

    Attributes:
        id: Caller-supplied unique identifier
        title: Document title
        content: Full text content of the document
    """
    id: str
    title: str
    content: str

    def __post_init__(self) -> None:
        """Validate document after initialization."""
        for name in ("id", "title", "content"):
            if not isinstance(getattr(self, name), str):
                raise InvalidDocument(f"Document {name} must be a string")
        if not self.id.strip():
            raise InvalidDocument("Document ID cannot be empty")

    @property
    def text(self) -> str:
        """Text that gets indexed: content followed by title."""
        return f"{self.content} {self.title}"


@dataclass(frozen=True)
class ProcessedDocument:
    """
    Document after normalization, as held by the corpus store.

    ``tokens`` keeps duplicates in order of appearance; ``term_frequency``
    maps each distinct token to ``count / len(tokens)``.
    """
    document: Document
    tokens: Tuple[str, ...]
    term_frequency: Dict[str, float] = field(default_factory=dict)

    @property
    def id(self) -> str:
        return self.document.id

    @property
    def length(self) -> int:
        return len(self.tokens)


class DocumentModel(BaseModel):
    """Pydantic model for document validation in API contexts."""

    id: StrictStr = Field(..., description="Unique document identifier")
    title: StrictStr = Field(..., description="Document title")
    content: StrictStr = Field(..., description="Document text content")

    @field_validator("id")
    @classmethod
    def validate_id(cls, v: str) -> str:
        """Ensure id is not just whitespace."""
        if not v.strip():
            raise ValueError("Document ID cannot be empty or whitespace only")
        return v

    def to_document(self) -> Document:
        """Convert to Document dataclass."""
        return Document(id=self.id, title=self.title, content=self.content)
