"""In-process document store with exact-match filtering and vector similarity search."""

from aidb.core.config import DatabaseConfig, Settings, VectorSearchConfig
from aidb.core.errors import (
    AuthenticationError,
    DocumentValidationError,
    EmbeddingError,
    InsertError,
    QueryError,
    SearchError,
)
from aidb.domain.models import Document, DocumentMetadata, ScoredDocument, SearchOptions, ToolCall
from aidb.infrastructure.embeddings import EmbeddingClient, VoyageEmbeddingProvider, create_embedding_client
from aidb.services import Database, create_database
from aidb.vector import VectorIndex

__version__ = "0.1.0"

__all__ = [
    "AuthenticationError",
    "Database",
    "DatabaseConfig",
    "Document",
    "DocumentMetadata",
    "DocumentValidationError",
    "EmbeddingClient",
    "EmbeddingError",
    "InsertError",
    "QueryError",
    "ScoredDocument",
    "SearchError",
    "SearchOptions",
    "Settings",
    "ToolCall",
    "VectorIndex",
    "VectorSearchConfig",
    "VoyageEmbeddingProvider",
    "create_database",
    "create_embedding_client",
]
