"""Construction helpers for embedding clients.

Everything the client needs is handed in explicitly, so tests can swap in a
fake provider without touching environment variables.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import SecretStr

from aidb.core.base import ServiceErrorDetails
from aidb.core.config import DEFAULT_EMBEDDING_MODEL
from aidb.core.decorators import with_error_handling
from aidb.core.errors import AuthenticationError
from aidb.core.logging import get_logger
from aidb.infrastructure.embeddings.client import EmbeddingClient
from aidb.infrastructure.embeddings.voyage import VoyageEmbeddingProvider

if TYPE_CHECKING:
    from aidb.core.config import Settings
    from aidb.domain.services import EmbeddingProvider

logger = get_logger(__name__)


class EmbeddingClientBuilder:
    """Builder for properly configured embedding clients."""

    def __init__(self) -> None:
        self._provider: EmbeddingProvider | None = None
        self._api_key: str | None = None
        self._model: str = DEFAULT_EMBEDDING_MODEL
        self._dimensions: int | None = None

    def with_provider(self, provider: EmbeddingProvider) -> EmbeddingClientBuilder:
        """Use a ready-made provider instead of building a Voyage one.

        Returns:
            Self for method chaining
        """
        self._provider = provider
        return self

    def with_api_key(self, api_key: str | SecretStr) -> EmbeddingClientBuilder:
        """Set the API key for the Voyage provider.

        Returns:
            Self for method chaining
        """
        if isinstance(api_key, SecretStr):
            api_key = api_key.get_secret_value()
        self._api_key = api_key
        return self

    def with_model(self, model: str) -> EmbeddingClientBuilder:
        """Set the default embedding model.

        Returns:
            Self for method chaining
        """
        self._model = model
        return self

    def with_dimensions(self, dimensions: int | None) -> EmbeddingClientBuilder:
        """Require vectors of exactly this length.

        Returns:
            Self for method chaining
        """
        self._dimensions = dimensions
        return self

    @with_error_handling(reraise=True)
    def build(self) -> EmbeddingClient:
        """Build the configured embedding client.

        Raises:
            AuthenticationError: If no provider was given and no API key is configured
        """
        provider = self._provider
        if provider is None:
            if not self._api_key:
                raise AuthenticationError(
                    message="VOYAGE_API_KEY not configured",
                    details=ServiceErrorDetails(
                        source="embedding_builder",
                        operation="build",
                        service_name="voyage",
                    ),
                )
            provider = VoyageEmbeddingProvider(api_key=self._api_key)

        logger.info(f"Creating EmbeddingClient with {type(provider).__name__} (model: {self._model})")
        return EmbeddingClient(provider, default_model=self._model, dimensions=self._dimensions)


def create_embedding_client(
    api_key: str | SecretStr | None = None,
    model: str | None = None,
    dimensions: int | None = None,
    provider: EmbeddingProvider | None = None,
) -> EmbeddingClient:
    """Convenience function to create an embedding client.

    Example:
        ```python
        client = create_embedding_client(api_key=key, model="voyage-3")
        index = VectorIndex(client)
        ```
    """
    builder = EmbeddingClientBuilder()

    if provider is not None:
        builder.with_provider(provider)

    if api_key is not None:
        builder.with_api_key(api_key)

    if model:
        builder.with_model(model)

    builder.with_dimensions(dimensions)
    return builder.build()


def embedding_client_from_settings(
    settings: Settings,
    provider: EmbeddingProvider | None = None,
) -> EmbeddingClient:
    """Create an embedding client from an explicit settings object."""
    return create_embedding_client(
        api_key=settings.voyage_api_key.get_secret_value(),
        model=settings.embedding_model,
        dimensions=settings.embedding_dimensions,
        provider=provider,
    )
