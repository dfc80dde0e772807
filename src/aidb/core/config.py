"""Configuration management."""

from pydantic import BaseModel, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_EMBEDDING_MODEL = "voyage-3"


class VectorSearchConfig(BaseModel):
    """Vector search options for a database instance."""

    model: str = Field(default=DEFAULT_EMBEDDING_MODEL, description="Model to use for embeddings")
    dimensions: int | None = Field(default=None, gt=0, description="Expected embedding dimensions")


class DatabaseConfig(BaseModel):
    """Configuration options for the document database."""

    name: str = Field(description="Database name or identifier")
    vector_search: VectorSearchConfig | None = Field(
        default=None, description="Enables the vector-backed provider when set"
    )


class Settings(BaseSettings):
    # API Keys
    voyage_api_key: SecretStr = SecretStr("")

    # Embeddings
    embedding_model: str = DEFAULT_EMBEDDING_MODEL
    embedding_dimensions: int | None = None

    # App config
    database_name: str = "aidb"
    debug: bool = False

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",  # Ignore extra fields in .env file
        env_nested_delimiter="__",
    )

    @property
    def database(self) -> DatabaseConfig:
        """Get the database configuration described by these settings."""
        return DatabaseConfig(
            name=self.database_name,
            vector_search=VectorSearchConfig(
                model=self.embedding_model,
                dimensions=self.embedding_dimensions,
            ),
        )

