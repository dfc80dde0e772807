"""Brute-force vector similarity search over in-memory documents."""

from .index import IndexedEntry, VectorIndex
from .similarity import cosine_similarity

__all__ = [
    "IndexedEntry",
    "VectorIndex",
    "cosine_similarity",
]
