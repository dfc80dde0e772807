"""Domain models for aidb."""

from .document import Document, DocumentMetadata, ToolCall
from .search import DEFAULT_SEARCH_LIMIT, ScoredDocument, SearchOptions

__all__ = [
    "DEFAULT_SEARCH_LIMIT",
    # Document
    "Document",
    "DocumentMetadata",
    "ScoredDocument",
    # Search
    "SearchOptions",
    "ToolCall",
]
