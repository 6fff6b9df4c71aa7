"""Integration tests for the async search service."""

import asyncio

import pytest

from tfidf_search.api.service import SearchService
from tfidf_search.core.config import EngineConfig
from tfidf_search.core.exceptions import (
    DocumentProcessingError,
    DuplicateDocumentError,
    InvalidDocument,
    InvalidQuery,
    SearchEngineError,
)


class TestSearchServiceIntegration:
    """Integration tests for the complete service."""

    async def test_full_workflow(self, sample_documents):
        """Test complete workflow from service creation to search."""
        async with SearchService.create(log_level="WARNING") as service:
            await service.add_documents(sample_documents)

            results = await service.search("cats")
            assert results[0].id in {"1", "3"}
            assert len(results) <= 5

            stats = await service.get_stats()
            assert stats["corpus"]["total_documents"] == len(sample_documents)
            assert stats["service"]["max_results"] == 5

            await service.clear()
            stats = await service.get_stats()
            assert stats["corpus"] == {
                "total_documents": 0,
                "total_terms": 0,
                "avg_document_length": 0,
            }

    async def test_not_initialized(self):
        """Test calls before initialize() are refused."""
        service = SearchService(log_level="WARNING")
        try:
            with pytest.raises(SearchEngineError, match="not initialized"):
                await service.search("cats")

            health = await service.health_check()
            assert health["status"] == "not_initialized"
        finally:
            await service.close()

    async def test_health_check(self, populated_service):
        """Test a ready service reports healthy."""
        health = await populated_service.health_check()

        assert health["status"] == "healthy"
        assert health["stats"]["total_documents"] == 5

    async def test_engine_errors_propagate(self, search_service):
        """Test validation errors reach the caller unchanged."""
        with pytest.raises(InvalidQuery):
            await search_service.search(None)

    async def test_duplicate_policy_from_config(self):
        """Test the configured duplicate policy applies through the service."""
        config = EngineConfig(duplicate_policy="reject")
        async with SearchService.create(config=config, log_level="WARNING") as service:
            await service.add_document({"id": "a", "title": "One", "content": "First text"})

            with pytest.raises(DuplicateDocumentError):
                await service.add_document({"id": "a", "title": "Two", "content": "Other text"})

    async def test_add_file(self, search_service, tmp_path):
        """Test ingesting a text file."""
        path = tmp_path / "tomatoes.txt"
        path.write_text("Tomatoes ripen slowly in cool weather", encoding="utf-8")
        await search_service.add_document({"id": "x", "title": "Other", "content": "Cucumbers"})

        document_id = await search_service.add_file(path)
        results = await search_service.search("tomatoes")

        assert document_id == "tomatoes.txt"
        assert [result.id for result in results] == ["tomatoes.txt"]

    async def test_add_file_rejects_binary(self, search_service, tmp_path):
        """Test non-text uploads are refused."""
        path = tmp_path / "photo.jpg"
        path.write_bytes(b"\xff\xd8\xff")

        with pytest.raises(DocumentProcessingError):
            await search_service.add_file(path)

    async def test_find_similar(self, populated_service):
        """Test similarity lookup through the service."""
        results = await populated_service.find_similar("1")
        assert [result.id for result in results] == ["3", "2"]

    async def test_search_with_summary(self, populated_service):
        """Test results come back serialized with a summary."""
        response = await populated_service.search_with_summary("loyal dogs")

        assert response["results"][0]["id"] == "2"
        assert response["summary"]["result_count"] == len(response["results"])
        assert response["summary"]["top_score"] == pytest.approx(response["results"][0]["score"], abs=1e-4)

    async def test_concurrent_operations(self, populated_service):
        """Test searches interleaved with writes see a consistent corpus."""
        queries = ["cats", "loyal dogs", "python memory", "tomatoes sunlight", "kittens"]

        tasks = [populated_service.search(query) for query in queries]
        tasks.append(populated_service.add_document(
            {"id": "6", "title": "Parrots", "content": "Parrots mimic speech"}
        ))
        outcomes = await asyncio.gather(*tasks)

        for results in outcomes[:-1]:
            assert len(results) <= 5
            scores = [result.score for result in results]
            assert scores == sorted(scores, reverse=True)

        stats = await populated_service.get_stats()
        assert stats["corpus"]["total_documents"] == 6

    async def test_add_file_blank_id(self, search_service, tmp_path):
        """Test a blank document id for a file is reported as a document error."""
        path = tmp_path / "notes.txt"
        path.write_text("Quarterly planning notes", encoding="utf-8")

        with pytest.raises(InvalidDocument):
            await search_service.add_file(path, document_id="   ")

        stats = await search_service.get_stats()
        assert stats["corpus"]["total_documents"] == 0

    async def test_find_similar_invalid_id(self, populated_service):
        """Test bad ids surface as InvalidDocument through the service."""
        with pytest.raises(InvalidDocument):
            await populated_service.find_similar(["1"])

        with pytest.raises(InvalidDocument):
            await populated_service.find_similar("missing")

    @pytest.mark.parametrize("method, args", [
        ("find_similar", ("1",)),
        ("clear", ()),
        ("get_stats", ()),
        ("search", ("cats",)),
        ("add_document", ({"id": "x", "title": "T", "content": "C"},)),
    ])
    async def test_unexpected_failures_are_wrapped(self, populated_service, monkeypatch, method, args):
        """Test unexpected engine failures reach callers as SearchEngineError."""
        def broken(*_args, **_kwargs):
            raise RuntimeError("engine exploded")

        monkeypatch.setattr(populated_service.engine, method, broken)

        with pytest.raises(SearchEngineError, match="engine exploded") as exc_info:
            await getattr(populated_service, method)(*args)
        assert isinstance(exc_info.value.__cause__, RuntimeError)

    async def test_close_waits_for_in_flight_calls(self, sample_documents):
        """Test closing lets a running call finish, then refuses new ones."""
        service = SearchService(log_level="WARNING")
        await service.initialize()
        await service.add_documents(sample_documents)

        results, _ = await asyncio.gather(service.search("cats"), service.close())

        assert results[0].id in {"1", "3"}
        with pytest.raises(SearchEngineError, match="not initialized"):
            await service.search("cats")
