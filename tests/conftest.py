"""Pytest configuration and shared fixtures."""

import pytest
from typing import List

from tfidf_search.core.config import EngineConfig
from tfidf_search.core.engine import SearchEngine
from tfidf_search.models.document import Document
from tfidf_search.api.service import SearchService


@pytest.fixture
def pet_documents() -> List[Document]:
    """Two short documents about pets."""
    return [
        Document(id="1", title="Cats", content="Cats are great pets and cats are fun"),
        Document(id="2", title="Dogs", content="Dogs are loyal pets and dogs are friends"),
    ]


@pytest.fixture
def sample_documents(pet_documents) -> List[Document]:
    """A small mixed corpus."""
    return pet_documents + [
        Document(id="3", title="Cat care", content="Feeding cats and grooming kittens"),
        Document(
            id="4",
            title="Python tips",
            content="Python generators keep memory usage low when streaming large files",
        ),
        Document(
            id="5",
            title="Gardening",
            content="Tomatoes need sunlight, water and patience through the summer",
        ),
    ]


@pytest.fixture
def engine() -> SearchEngine:
    """Create an empty search engine for testing."""
    return SearchEngine()


@pytest.fixture
def pet_engine(engine, pet_documents) -> SearchEngine:
    """Search engine holding the two pet documents."""
    engine.add_documents(pet_documents)
    return engine


@pytest.fixture
def populated_engine(engine, sample_documents) -> SearchEngine:
    """Search engine holding the sample corpus."""
    engine.add_documents(sample_documents)
    return engine


@pytest.fixture
def rejecting_engine() -> SearchEngine:
    """Search engine that refuses duplicate document ids."""
    return SearchEngine(config=EngineConfig(duplicate_policy="reject"))


@pytest.fixture
async def search_service():
    """Create and initialize a search service for testing."""
    async with SearchService.create(log_level="WARNING") as service:
        yield service


@pytest.fixture
async def populated_service(search_service, sample_documents):
    """Create a search service with sample documents."""
    await search_service.add_documents(sample_documents)
    return search_service
