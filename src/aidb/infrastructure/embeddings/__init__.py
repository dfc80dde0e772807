from .client import EmbeddingClient
from .factory import EmbeddingClientBuilder, create_embedding_client, embedding_client_from_settings
from .voyage import VoyageEmbeddingProvider

__all__ = [
    "EmbeddingClient",
    "EmbeddingClientBuilder",
    "VoyageEmbeddingProvider",
    "create_embedding_client",
    "embedding_client_from_settings",
]
