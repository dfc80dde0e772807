"""Voyage AI embedding provider."""

from typing import Any

import voyageai
from pydantic import SecretStr

from aidb.core.base import ServiceErrorDetails
from aidb.core.errors import AuthenticationError
from aidb.core.logging import get_logger

logger = get_logger(__name__)


class VoyageEmbeddingProvider:
    """Embedding provider backed by the Voyage AI async client.

    The SDK's own retries are disabled; a failed request surfaces to the
    caller on the first attempt.
    """

    def __init__(self, api_key: str | SecretStr, client: Any | None = None) -> None:
        """Initialize the Voyage client.

        Args:
            api_key: Voyage API key
            client: Optional pre-built ``voyageai.AsyncClient`` (used in tests)

        Raises:
            AuthenticationError: If the API key is empty
        """
        if isinstance(api_key, SecretStr):
            api_key = api_key.get_secret_value()

        if not api_key:
            raise AuthenticationError(
                message="Voyage API key not provided",
                details=ServiceErrorDetails(
                    source="VoyageEmbeddingProvider",
                    operation="initialization",
                    service_name="Voyage AI",
                ),
            )

        # voyageai client doesn't expose a public type
        self.client = client or voyageai.AsyncClient(api_key=api_key, max_retries=0)

    async def embed(self, texts: list[str], model: str) -> list[list[float]]:
        """Generate embeddings for the given texts."""
        logger.debug(f"Requesting {len(texts)} embedding(s) from Voyage (model: {model})")
        response = await self.client.embed(texts=texts, model=model)
        return getattr(response, "embeddings", [])
