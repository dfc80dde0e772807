"""Document database with pluggable query providers.

The database delegates storage and querying to a ``DatabaseProvider``.
Without vector search configured it uses the in-memory provider, a plain
map queried by linear scan; with vector search it uses a ``VectorIndex``.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from aidb.core.base import StoreErrorDetails, ValidationErrorDetails
from aidb.core.config import DatabaseConfig, Settings, VectorSearchConfig
from aidb.core.decorators import with_error_handling
from aidb.core.errors import DocumentValidationError, InsertError, QueryError
from aidb.core.logging import get_logger
from aidb.domain.models import Document, SearchOptions
from aidb.domain.services import EmbeddingProvider
from aidb.domain.specifications import DataMatchSpecification, ExactMatchSpecification
from aidb.infrastructure.embeddings import EmbeddingClient, embedding_client_from_settings
from aidb.vector import VectorIndex

logger = get_logger(__name__)


@runtime_checkable
class DatabaseProvider(Protocol):
    """Capability interface for database backends."""

    async def query(self, options: SearchOptions) -> list[Document]:
        """Return documents matching the options."""
        ...

    async def insert(self, document: Document) -> None:
        """Store a document, replacing any document with the same ID."""
        ...


class InMemoryDatabaseProvider:
    """Provider without embeddings: filters ``data`` attributes, no ranking."""

    def __init__(self) -> None:
        self._documents: dict[str, Document] = {}

    def __len__(self) -> int:
        return len(self._documents)

    async def query(self, options: SearchOptions) -> list[Document]:
        spec = DataMatchSpecification(options.filter)
        matches = [doc for doc in self._documents.values() if spec.is_satisfied_by(doc)]
        return matches[: options.limit]

    async def insert(self, document: Document) -> None:
        if not document.id:
            raise DocumentValidationError(
                message="Document must have an id",
                details=ValidationErrorDetails(
                    source="InMemoryDatabaseProvider",
                    operation="insert",
                    field="id",
                    actual_value=document.id,
                    constraint="non-empty",
                ),
            )
        self._documents[document.id] = document


class VectorDatabaseProvider:
    """Provider backed by a ``VectorIndex``.

    Queries with text are similarity searches. Queries without text return
    the filtered documents in insertion order.
    """

    def __init__(self, index: VectorIndex) -> None:
        self.index = index

    def __len__(self) -> int:
        return len(self.index)

    async def query(self, options: SearchOptions) -> list[Document]:
        if options.query is not None:
            return await self.index.search(options.query, options)

        spec = ExactMatchSpecification(options.filter)
        documents = await self.index.documents()
        return [doc for doc in documents if spec.is_satisfied_by(doc)][: options.limit]

    async def insert(self, document: Document) -> None:
        await self.index.add_document(document)


def _configured_client(embeddings: EmbeddingClient, vector_search: VectorSearchConfig) -> EmbeddingClient:
    """Rebind a client to the model and dimensions the database is configured with."""
    dimensions = vector_search.dimensions if vector_search.dimensions is not None else embeddings.dimensions
    if embeddings.default_model == vector_search.model and embeddings.dimensions == dimensions:
        return embeddings
    return EmbeddingClient(embeddings.provider, default_model=vector_search.model, dimensions=dimensions)


class Database:
    """Document database with optional vector search."""

    def __init__(
        self,
        config: DatabaseConfig,
        provider: DatabaseProvider | None = None,
        embeddings: EmbeddingClient | None = None,
    ) -> None:
        """Initialize the database.

        Args:
            config: Database configuration
            provider: Explicit provider; overrides the choice made from config
            embeddings: Embedding client, required for the vector-backed provider.
                Its provider is used with the model and dimensions from
                ``config.vector_search``
        """
        self.config = config
        if provider is None:
            if config.vector_search is not None and embeddings is not None:
                embeddings = _configured_client(embeddings, config.vector_search)
                provider = VectorDatabaseProvider(VectorIndex(embeddings))
            else:
                if config.vector_search is not None:
                    logger.warning(
                        f"Vector search configured for '{config.name}' but no embedding client given, "
                        "using in-memory provider"
                    )
                provider = InMemoryDatabaseProvider()
        self.provider = provider
        logger.debug(f"Database '{config.name}' using {type(provider).__name__}")

    @property
    def supports_vector_search(self) -> bool:
        return isinstance(self.provider, VectorDatabaseProvider)

    @with_error_handling(reraise=True)
    async def query(self, options: SearchOptions | None = None) -> list[Document]:
        """Query documents, by similarity when the provider supports it.

        Raises:
            QueryError: If the provider fails
        """
        try:
            return await self.provider.query(options or SearchOptions())
        except Exception as e:
            raise QueryError(
                message=f"Query failed: {e!s}",
                details=StoreErrorDetails(
                    source="Database",
                    operation="query",
                    cause_type=type(e).__name__,
                ),
            ) from e

    @with_error_handling(reraise=True)
    async def insert(self, document: Document) -> None:
        """Insert a document into the database.

        Raises:
            InsertError: If the document has no ID or the provider fails
        """
        try:
            await self.provider.insert(document)
        except Exception as e:
            raise InsertError(
                message=f"Insert failed: {e!s}",
                details=StoreErrorDetails(
                    source="Database",
                    operation="insert",
                    document_id=document.id,
                    cause_type=type(e).__name__,
                ),
            ) from e


def create_database(
    settings: Settings,
    name: str | None = None,
    provider: EmbeddingProvider | None = None,
) -> Database:
    """Build a vector-backed database from an explicit settings object.

    Args:
        settings: Settings holding the API key, model and dimensions
        name: Database name, defaults to ``settings.database_name``
        provider: Optional embedding provider replacing the Voyage one
    """
    config = settings.database
    if name:
        config = config.model_copy(update={"name": name})

    embeddings = embedding_client_from_settings(settings, provider=provider)
    return Database(config, embeddings=embeddings)
