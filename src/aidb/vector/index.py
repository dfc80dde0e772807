"""In-memory similarity index over embedded documents.

Every search is a linear scan: the query is embedded once, each stored
vector is scored by cosine similarity, and the survivors of the score
threshold and attribute filter are ranked best first.
"""

import asyncio
from dataclasses import dataclass
from typing import Any

import numpy as np

from aidb.core.base import StoreErrorDetails, ValidationErrorDetails
from aidb.core.decorators import with_error_handling
from aidb.core.errors import DocumentValidationError, InsertError, SearchError
from aidb.core.logging import get_logger
from aidb.domain.models import Document, ScoredDocument, SearchOptions
from aidb.domain.specifications import ExactMatchSpecification
from aidb.infrastructure.embeddings import EmbeddingClient
from aidb.vector.similarity import cosine_similarity, vector_norm

logger = get_logger(__name__)


@dataclass(frozen=True)
class IndexedEntry:
    """A document paired with its embedding."""

    document: Document
    vector: np.ndarray
    norm: float

    @classmethod
    def create(cls, document: Document, embedding: list[float]) -> "IndexedEntry":
        vector = np.asarray(embedding, dtype=np.float64)
        vector.setflags(write=False)
        return cls(document=document, vector=vector, norm=vector_norm(vector))


def resolve_options(options: SearchOptions | None, overrides: dict[str, Any]) -> SearchOptions:
    """Merge keyword overrides into search options, validating the result."""
    if options is None:
        return SearchOptions(**overrides)
    if not overrides:
        return options
    return SearchOptions(**{**dict(options), **overrides})


class VectorIndex:
    """Similarity index mapping document IDs to embedded documents.

    Adding a document embeds its content and upserts it under its ID; an
    overwritten ID keeps its original position in the scan order, so ties
    in score are broken by first insertion.

    The lock guards the entry map only. Embedding calls run outside it, so
    concurrent adds racing on one ID resolve in completion order.
    """

    def __init__(self, embeddings: EmbeddingClient) -> None:
        self.embeddings = embeddings
        self._entries: dict[str, IndexedEntry] = {}
        self._lock = asyncio.Lock()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, document_id: object) -> bool:
        return document_id in self._entries

    def get(self, document_id: str) -> Document | None:
        entry = self._entries.get(document_id)
        return entry.document if entry else None

    async def documents(self) -> list[Document]:
        """Snapshot of the stored documents in insertion order."""
        async with self._lock:
            return [entry.document for entry in self._entries.values()]

    async def generate_embeddings(self, text: str, model: str | None = None) -> list[float]:
        """Embed text with the index's embedding client."""
        return await self.embeddings.embed(text, model)

    @with_error_handling(reraise=True)
    async def add_document(self, document: Document) -> None:
        """Embed a document's content and store it, replacing any entry with the same ID.

        Raises:
            InsertError: If the document has no ID or embedding fails
        """
        try:
            if not document.id:
                raise DocumentValidationError(
                    message="Document must have an ID",
                    details=ValidationErrorDetails(
                        source="VectorIndex",
                        operation="add_document",
                        field="id",
                        actual_value=document.id,
                        constraint="non-empty",
                    ),
                )

            embedding = await self.embeddings.embed(document.content)
            entry = IndexedEntry.create(document, embedding)
            async with self._lock:
                replaced = document.id in self._entries
                self._entries[document.id] = entry
        except Exception as e:
            raise InsertError(
                message=f"Failed to add document: {e!s}",
                details=StoreErrorDetails(
                    source="VectorIndex",
                    operation="add_document",
                    document_id=document.id,
                    cause_type=type(e).__name__,
                ),
            ) from e

        logger.debug(
            f"{'Replaced' if replaced else 'Added'} document {document.id} "
            f"({entry.vector.shape[0]} dimensions, {len(self._entries)} stored)"
        )

    @with_error_handling(reraise=True)
    async def search(
        self,
        query: str,
        options: SearchOptions | None = None,
        **overrides: Any,
    ) -> list[Document]:
        """Find the stored documents most similar to the query text.

        Args:
            query: Query text, embedded once per call
            options: Filter, limit, model and min_score; keyword overrides win

        Returns:
            Documents ranked by descending similarity

        Raises:
            SearchError: If the options are invalid or embedding the query fails
        """
        hits = await self._rank(query, options, overrides)
        return [hit.document for hit in hits]

    @with_error_handling(reraise=True)
    async def search_with_scores(
        self,
        query: str,
        options: SearchOptions | None = None,
        **overrides: Any,
    ) -> list[ScoredDocument]:
        """Same as :meth:`search` but keeps each document's similarity score."""
        return await self._rank(query, options, overrides)

    async def _rank(
        self,
        query: str,
        options: SearchOptions | None,
        overrides: dict[str, Any],
    ) -> list[ScoredDocument]:
        try:
            opts = resolve_options(options, overrides)
            embedding = await self.embeddings.embed(query, opts.model)
            query_vector = np.asarray(embedding, dtype=np.float64)
            query_norm = vector_norm(query_vector)

            async with self._lock:
                entries = list(self._entries.values())

            spec = ExactMatchSpecification(opts.filter)
            hits: list[ScoredDocument] = []
            for entry in entries:
                score = cosine_similarity(query_vector, entry.vector, query_norm, entry.norm)
                if score < opts.min_score:
                    continue
                if not spec.is_satisfied_by(entry.document):
                    continue
                hits.append(ScoredDocument(document=entry.document, score=score))

            # list.sort is stable, also with reverse=True
            hits.sort(key=lambda hit: hit.score, reverse=True)
        except Exception as e:
            raise SearchError(
                message=f"Vector search failed: {e!s}",
                details=StoreErrorDetails(
                    source="VectorIndex",
                    operation="search",
                    cause_type=type(e).__name__,
                ),
            ) from e

        logger.debug(f"Vector search matched {len(hits)} of {len(entries)} documents (limit {opts.limit})")
        return hits[: opts.limit]
