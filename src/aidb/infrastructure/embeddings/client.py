"""Embedding client: one text in, one vector out."""

import math
from numbers import Real

from aidb.core.base import AIServiceErrorDetails
from aidb.core.config import DEFAULT_EMBEDDING_MODEL
from aidb.core.errors import EmbeddingError
from aidb.core.logging import get_logger
from aidb.domain.services import EmbeddingProvider

logger = get_logger(__name__)


class EmbeddingClient:
    """Converts text to a numeric vector through an embedding provider.

    Every call makes exactly one provider request with a batch of one text.
    Nothing is cached and nothing is retried; retry policy belongs to the
    caller.
    """

    def __init__(
        self,
        provider: EmbeddingProvider,
        default_model: str = DEFAULT_EMBEDDING_MODEL,
        dimensions: int | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            provider: Remote embedding provider
            default_model: Model used when a call doesn't override it
            dimensions: When set, vectors of any other length are rejected
        """
        self.provider = provider
        self.default_model = default_model
        self.dimensions = dimensions

    async def embed(self, text: str, model: str | None = None) -> list[float]:
        """Generate an embedding vector for the provided text.

        Args:
            text: Text to embed
            model: Optional model override

        Returns:
            The embedding as a list of floats

        Raises:
            EmbeddingError: If the provider call fails or returns a malformed vector
        """
        model_name = model or self.default_model
        try:
            embeddings = await self.provider.embed([text], model_name)
            return self._check_vector(embeddings)
        except EmbeddingError:
            raise
        except Exception as e:
            raise self._error(f"Embedding generation failed: {e!s}", model_name, text) from e

    def _check_vector(self, embeddings: list[list[float]]) -> list[float]:
        if not embeddings:
            raise ValueError("provider returned no embeddings")

        vector = embeddings[0]
        if not vector:
            raise ValueError("provider returned an empty vector")

        if not all(isinstance(x, Real) and not isinstance(x, bool) for x in vector):
            raise ValueError("provider returned non-numeric vector components")

        values = [float(x) for x in vector]
        if not all(math.isfinite(x) for x in values):
            raise ValueError("provider returned non-finite vector components")

        if self.dimensions is not None and len(values) != self.dimensions:
            raise ValueError(f"expected {self.dimensions} dimensions, got {len(values)}")

        return values

    def _error(self, message: str, model: str, text: str) -> EmbeddingError:
        return EmbeddingError(
            message=message,
            details=AIServiceErrorDetails(
                source="EmbeddingClient",
                operation="embed",
                service_name=type(self.provider).__name__,
                model_name=model,
                text_length=len(text),
            ),
        )
