"""Service layer: the document database and its providers."""

from .database import (
    Database,
    DatabaseProvider,
    InMemoryDatabaseProvider,
    VectorDatabaseProvider,
    create_database,
)

__all__ = [
    "Database",
    "DatabaseProvider",
    "InMemoryDatabaseProvider",
    "VectorDatabaseProvider",
    "create_database",
]
