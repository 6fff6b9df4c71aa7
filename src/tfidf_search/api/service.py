"""High-level async API service for the TF-IDF search engine."""

import asyncio
import functools
import logging
from concurrent.futures import ThreadPoolExecutor
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any, AsyncIterator, Callable, Dict, Iterable, List, Optional, TypeVar, Union

from ..core.config import EngineConfig
from ..core.engine import SearchEngine
from ..core.exceptions import SearchEngineError
from ..core.ranker import summarize_results
from ..models.result import SearchResult
from ..utils.file_loader import load_text_document
from ..utils.logging_config import setup_logging
from ..utils.validators import DocumentLike

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SearchService:
    """
    Async service interface for indexing and search.

    Engine calls run on a worker thread, one at a time: every call holds
    the service lock, so an index rebuild is never observed half-done by a
    concurrent search.
    """

    def __init__(
        self,
        config: Optional[EngineConfig] = None,
        max_workers: int = 1,
        log_level: str = "INFO"
    ):
        """
        Initialize search service.

        Args:
            config: Engine configuration
            max_workers: Number of worker threads
            log_level: Logging level
        """
        setup_logging(level=log_level)

        self.engine = SearchEngine(config=config)
        self.executor = ThreadPoolExecutor(max_workers=max_workers)
        self._lock = asyncio.Lock()
        self._initialized = False
        logger.info("Search service initialized")

    async def initialize(self) -> None:
        """Mark the service ready for use."""
        self._initialized = True
        logger.info("Service initialization complete")

    async def _run(self, func: Callable[..., T], *args: Any) -> T:
        self._check_initialized()
        async with self._lock:
            loop = asyncio.get_running_loop()
            return await loop.run_in_executor(self.executor, functools.partial(func, *args))

    async def add_document(self, document: DocumentLike) -> None:
        """
        Add a single document to the search index.

        Raises:
            SearchEngineError: If operation fails
        """
        try:
            await self._run(self.engine.add_document, document)
        except SearchEngineError:
            raise
        except Exception as e:
            logger.error(f"Failed to add document: {str(e)}")
            raise SearchEngineError(f"Failed to add document: {str(e)}") from e

    async def add_documents(self, documents: Iterable[DocumentLike]) -> None:
        """
        Add multiple documents to the search index.

        Raises:
            SearchEngineError: If operation fails
        """
        documents = list(documents)
        try:
            await self._run(self.engine.add_documents, documents)
            logger.info(f"Added {len(documents)} documents")
        except SearchEngineError:
            raise
        except Exception as e:
            logger.error(f"Failed to add {len(documents)} documents: {str(e)}")
            raise SearchEngineError(f"Failed to add documents: {str(e)}") from e

    async def add_file(self, path: Union[str, Path], document_id: Optional[str] = None) -> str:
        """
        Load a text file and add it to the index.

        Returns:
            Id of the added document

        Raises:
            DocumentProcessingError: If the file cannot be ingested
            InvalidDocument: If the document id is blank
        """
        try:
            document = await self._run(
                load_text_document, path, document_id, self.engine.config.max_file_size
            )
            await self.add_document(document)
            return document.id
        except SearchEngineError:
            raise
        except Exception as e:
            logger.error(f"Failed to add file {path}: {str(e)}")
            raise SearchEngineError(f"Failed to add file: {str(e)}") from e

    async def search(self, query: str) -> List[SearchResult]:
        """
        Search the index.

        Raises:
            InvalidQuery: If query is not a string
            SearchEngineError: If search fails
        """
        try:
            results = await self._run(self.engine.search, query)
            logger.debug(f"Search returned {len(results)} results")
            return results
        except SearchEngineError:
            raise
        except Exception as e:
            logger.error(f"Search failed: {str(e)}")
            raise SearchEngineError(f"Search failed: {str(e)}") from e

    async def find_similar(self, document_id: str) -> List[SearchResult]:
        """
        Rank indexed documents by similarity to ``document_id``.

        Raises:
            InvalidDocument: If the id is not a string or not indexed
            SearchEngineError: If the lookup fails
        """
        try:
            return await self._run(self.engine.find_similar, document_id)
        except SearchEngineError:
            raise
        except Exception as e:
            logger.error(f"Similarity lookup failed: {str(e)}")
            raise SearchEngineError(f"Similarity lookup failed: {str(e)}") from e

    async def clear(self) -> None:
        """Remove every indexed document."""
        try:
            await self._run(self.engine.clear)
        except SearchEngineError:
            raise
        except Exception as e:
            logger.error(f"Failed to clear index: {str(e)}")
            raise SearchEngineError(f"Failed to clear index: {str(e)}") from e

    async def get_stats(self) -> Dict[str, Any]:
        """Get service and corpus statistics."""
        try:
            corpus_stats = await self._run(self.engine.get_stats)
        except SearchEngineError:
            raise
        except Exception as e:
            logger.error(f"Failed to read stats: {str(e)}")
            raise SearchEngineError(f"Failed to read stats: {str(e)}") from e

        return {
            "service": {
                "initialized": self._initialized,
                "max_results": self.engine.config.max_results,
                "duplicate_policy": self.engine.config.duplicate_policy,
            },
            "corpus": corpus_stats,
        }

    async def search_with_summary(self, query: str) -> Dict[str, Any]:
        """Search and attach result count, mean score and top score."""
        results = await self.search(query)
        return {
            "results": [result.to_dict() for result in results],
            "summary": summarize_results(results),
        }

    async def health_check(self) -> Dict[str, Any]:
        """Report whether the service is ready and how large the corpus is."""
        if not self._initialized:
            return {
                "status": "not_initialized",
                "message": "Service not initialized"
            }

        try:
            stats = await self._run(self.engine.get_stats)
            return {
                "status": "healthy",
                "is_ready": True,
                "stats": stats,
            }
        except Exception as e:
            logger.error(f"Health check failed: {str(e)}")
            return {
                "status": "unhealthy",
                "error": str(e),
            }

    def _check_initialized(self) -> None:
        """Check if service is properly initialized."""
        if not self._initialized:
            raise SearchEngineError("Service not initialized. Call initialize() first.")

    async def close(self) -> None:
        """Clean up resources and close the service."""
        # Engine calls only run while holding the lock, so none is in flight here.
        async with self._lock:
            self.executor.shutdown(wait=False)
        self._initialized = False
        logger.info("Service closed successfully")

    @classmethod
    @asynccontextmanager
    async def create(cls, **kwargs: Any) -> AsyncIterator["SearchService"]:
        """
        Create and manage service lifecycle with context manager.

        Args:
            **kwargs: Service configuration

        Yields:
            Initialized search service
        """
        service = cls(**kwargs)

        try:
            await service.initialize()
            yield service
        finally:
            await service.close()
