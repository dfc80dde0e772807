"""Shared fixtures: fake embedding providers and wired-up indexes."""

import asyncio
import math

import pytest

from aidb.domain.models import Document
from aidb.infrastructure.embeddings import EmbeddingClient
from aidb.vector import VectorIndex

DEFAULT_VECTOR = [0.1, 0.2, 0.3]


def unit_vector_with_score(score: float) -> list[float]:
    """A 2-d unit vector whose cosine similarity to [1, 0] is ``score``."""
    return [score, math.sqrt(1 - score * score)]


class TableEmbeddingProvider:
    """Returns a fixed vector per text and records every call."""

    def __init__(self, table: dict[str, list[float]] | None = None, default: list[float] | None = None):
        self.table = dict(table or {})
        self.default = default or DEFAULT_VECTOR
        self.calls: list[tuple[list[str], str]] = []

    async def embed(self, texts: list[str], model: str) -> list[list[float]]:
        self.calls.append((list(texts), model))
        return [list(self.table.get(text, self.default)) for text in texts]


class FailingEmbeddingProvider:
    """Raises on every call."""

    def __init__(self, message: str = "API Error"):
        self.message = message
        self.calls = 0

    async def embed(self, texts: list[str], model: str) -> list[list[float]]:
        self.calls += 1
        raise RuntimeError(self.message)


class DelayedEmbeddingProvider(TableEmbeddingProvider):
    """Table provider that sleeps for a per-text delay before answering."""

    def __init__(self, delays: dict[str, float], **kwargs):
        super().__init__(**kwargs)
        self.delays = delays

    async def embed(self, texts: list[str], model: str) -> list[list[float]]:
        await asyncio.sleep(self.delays.get(texts[0], 0))
        return await super().embed(texts, model)


@pytest.fixture
def provider():
    """Provider returning the same vector for every text."""
    return TableEmbeddingProvider()


@pytest.fixture
def client(provider):
    return EmbeddingClient(provider, default_model="test-model")


@pytest.fixture
def index(client):
    return VectorIndex(client)


@pytest.fixture
def make_index():
    """Build an index over a table provider: ``make_index(table, default=...)``."""

    def _make(table: dict[str, list[float]] | None = None, default: list[float] | None = None):
        table_provider = TableEmbeddingProvider(table, default)
        return VectorIndex(EmbeddingClient(table_provider, default_model="test-model")), table_provider

    return _make


@pytest.fixture
def sample_document():
    return Document(id="test-1", content="Test content", type="test", data={"key": "value"})
