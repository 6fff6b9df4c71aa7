"""Search result data model."""

from dataclasses import dataclass
from typing import Any, Dict

from .document import Document


@dataclass(frozen=True)
class SearchResult:
    """
    Ranked match for a query.

    Attributes:
        id: Matched document identifier
        title: Matched document title
        content: Matched document content
        score: Cosine similarity to the query (0.0-1.0, higher is better)
    """
    id: str
    title: str
    content: str
    score: float

    def __post_init__(self) -> None:
        """Validate search result."""
        if not 0.0 <= self.score <= 1.0:
            raise ValueError("Score must be between 0.0 and 1.0")

    @classmethod
    def from_document(cls, document: Document, score: float) -> "SearchResult":
        return cls(id=document.id, title=document.title, content=document.content, score=score)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "id": self.id,
            "title": self.title,
            "content": self.content,
            "score": round(self.score, 4),
        }
