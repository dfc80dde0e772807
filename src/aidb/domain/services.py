"""Domain service protocols."""
from typing import Protocol, runtime_checkable


@runtime_checkable
class EmbeddingProvider(Protocol):
    """Protocol for remote embedding providers."""

    async def embed(self, texts: list[str], model: str) -> list[list[float]]:
        """Generate one embedding per text with the given model."""
        ...
