"""Search option and result models."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .document import Document

DEFAULT_SEARCH_LIMIT = 10


class SearchOptions(BaseModel):
    """Options for a similarity search or a database query."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    query: str | None = Field(default=None, description="Query text, used by Database.query")
    filter: dict[str, Any] | None = Field(default=None, description="Required top-level field values")
    limit: int = Field(default=DEFAULT_SEARCH_LIMIT, ge=0, description="Maximum number of results")
    model: str | None = Field(default=None, description="Embedding model override")
    min_score: float = Field(default=0.0, description="Minimum similarity score to qualify")


class ScoredDocument(BaseModel):
    """A search hit with its cosine similarity score."""

    document: Document
    score: float
