"""Tests for the database facade and its providers."""

import pytest

from aidb.core.config import DatabaseConfig, Settings, VectorSearchConfig
from aidb.core.errors import InsertError, QueryError
from aidb.domain.models import Document, SearchOptions
from aidb.infrastructure.embeddings import EmbeddingClient
from aidb.services import (
    Database,
    DatabaseProvider,
    InMemoryDatabaseProvider,
    VectorDatabaseProvider,
    create_database,
)
from conftest import TableEmbeddingProvider


@pytest.fixture
def plain_config():
    return DatabaseConfig(name="plain")


@pytest.fixture
def vector_config():
    return DatabaseConfig(name="vectors", vector_search=VectorSearchConfig(model="test-model"))


def test_provider_variants_satisfy_protocol(index):
    assert isinstance(InMemoryDatabaseProvider(), DatabaseProvider)
    assert isinstance(VectorDatabaseProvider(index), DatabaseProvider)


def test_in_memory_provider_without_vector_config(plain_config, client):
    db = Database(plain_config, embeddings=client)
    assert isinstance(db.provider, InMemoryDatabaseProvider)
    assert not db.supports_vector_search


def test_vector_config_without_client_falls_back(vector_config):
    db = Database(vector_config)
    assert isinstance(db.provider, InMemoryDatabaseProvider)


def test_vector_provider_with_config_and_client(vector_config, client):
    db = Database(vector_config, embeddings=client)
    assert isinstance(db.provider, VectorDatabaseProvider)
    assert db.supports_vector_search


def test_explicit_provider_wins(vector_config, client):
    provider = InMemoryDatabaseProvider()
    db = Database(vector_config, provider=provider, embeddings=client)
    assert db.provider is provider


@pytest.mark.asyncio
async def test_in_memory_query_filters_data_attributes(plain_config):
    db = Database(plain_config)
    first = Document(id="1", content="a", type="t", data={"key": "value1"})
    second = Document(id="2", content="b", type="t", data={"key": "value2"})
    await db.insert(first)
    await db.insert(second)

    assert await db.query() == [first, second]
    assert await db.query(SearchOptions(filter={"key": "value2"})) == [second]
    assert await db.query(SearchOptions(filter={"type": "t"})) == []
    assert await db.query(SearchOptions(limit=1)) == [first]


@pytest.mark.asyncio
async def test_in_memory_insert_upserts(plain_config):
    db = Database(plain_config)
    await db.insert(Document(id="1", content="old"))
    await db.insert(Document(id="1", content="new"))

    results = await db.query()
    assert [doc.content for doc in results] == ["new"]


@pytest.mark.asyncio
async def test_insert_without_id_fails(plain_config):
    db = Database(plain_config)

    with pytest.raises(InsertError, match="^Insert failed: Document must have an id$"):
        await db.insert(Document(content="no id"))

    assert len(db.provider) == 0


@pytest.mark.asyncio
async def test_vector_query_ranks_by_similarity(vector_config):
    provider = TableEmbeddingProvider({"near": [1.0, 0.1], "far": [0.1, 1.0], "query": [1.0, 0.0]})
    db = Database(vector_config, embeddings=EmbeddingClient(provider, default_model="test-model"))
    await db.insert(Document(id="far", content="far", type="t"))
    await db.insert(Document(id="near", content="near", type="t"))

    results = await db.query(SearchOptions(query="query"))
    assert [doc.id for doc in results] == ["near", "far"]

    filtered = await db.query(SearchOptions(query="query", filter={"id": "far"}))
    assert [doc.id for doc in filtered] == ["far"]


@pytest.mark.asyncio
async def test_vector_query_without_text_scans_in_insertion_order(vector_config, client, provider):
    db = Database(vector_config, embeddings=client)
    await db.insert(Document(id="b", content="x", type="keep"))
    await db.insert(Document(id="a", content="y", type="drop"))
    await db.insert(Document(id="c", content="z", type="keep"))
    calls_after_insert = len(provider.calls)

    results = await db.query(SearchOptions(filter={"type": "keep"}))

    assert [doc.id for doc in results] == ["b", "c"]
    # No query embedding without query text
    assert len(provider.calls) == calls_after_insert


@pytest.mark.asyncio
async def test_vector_insert_failure_is_wrapped(vector_config, client):
    db = Database(vector_config, embeddings=client)

    with pytest.raises(InsertError) as exc_info:
        await db.insert(Document(id="", content="x"))

    assert str(exc_info.value) == "Insert failed: Failed to add document: Document must have an ID"


@pytest.mark.asyncio
async def test_vector_query_failure_is_wrapped(vector_config, client, provider):
    db = Database(vector_config, embeddings=client)

    async def fail(texts, model):
        raise RuntimeError("API Error")

    provider.embed = fail

    with pytest.raises(QueryError) as exc_info:
        await db.query(SearchOptions(query="anything"))

    message = str(exc_info.value)
    assert message.startswith("Query failed: Vector search failed: ")
    assert message.endswith("API Error")


@pytest.mark.asyncio
async def test_create_database_from_settings():
    settings = Settings(voyage_api_key="", embedding_model="settings-model", database_name="from-settings")
    provider = TableEmbeddingProvider()

    db = create_database(settings, provider=provider)
    assert db.config.name == "from-settings"
    assert db.supports_vector_search

    await db.insert(Document(id="1", content="hello"))
    assert provider.calls == [(["hello"], "settings-model")]

    renamed = create_database(settings, name="other", provider=provider)
    assert renamed.config.name == "other"


@pytest.mark.asyncio
async def test_vector_search_config_overrides_client_model_and_dimensions():
    config = DatabaseConfig(name="configured", vector_search=VectorSearchConfig(model="configured-model", dimensions=2))
    provider = TableEmbeddingProvider({"flat": [1.0, 0.0]}, default=[0.1, 0.2, 0.3])
    db = Database(config, embeddings=EmbeddingClient(provider, default_model="client-model"))

    await db.insert(Document(id="ok", content="flat"))
    assert provider.calls == [(["flat"], "configured-model")]

    with pytest.raises(InsertError, match="expected 2 dimensions, got 3"):
        await db.insert(Document(id="wide", content="three dims"))

    assert len(db.provider) == 1


def test_matching_client_is_used_as_is(vector_config, client):
    db = Database(vector_config, embeddings=client)
    assert db.provider.index.embeddings is client
