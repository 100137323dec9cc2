"""Centralized configuration for minisearch using Pydantic Settings."""

from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Strictly typed configuration loaded from environment variables.

    Backends default to the in-memory implementations so a bare environment
    yields a working, process-local search index.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        validate_default=True,
        extra="ignore",  # Ignore extra env vars not defined in model
    )

    # Logging
    log_level: str = Field(default="info", description="Logging level")
    log_json: bool = Field(default=True, description="Emit structured JSON log lines")

    # Backend selection
    document_store_backend: Literal["memory", "mongo"] = Field(
        default="memory", description="Document store backend: memory or mongo"
    )
    inverted_index_backend: Literal["memory", "redis"] = Field(
        default="memory", description="Inverted index backend: memory or redis"
    )

    # MongoDB document store
    mongo_uri: str = Field(default="mongodb://localhost:27017", description="MongoDB connection URI")
    mongo_database: str = Field(default="minisearch", description="MongoDB database name")
    mongo_collection: str = Field(default="documents", description="MongoDB collection holding documents")
    mongo_timeout_ms: int = Field(default=5000, ge=1, description="MongoDB server selection timeout in ms")

    # Redis inverted index
    redis_url: str = Field(default="redis://localhost:6379/0", description="Redis connection URL")
    redis_namespace: str = Field(default="minisearchindex", description="Key prefix for postings sets")
    redis_timeout_seconds: float = Field(default=5.0, gt=0, description="Redis socket timeout in seconds")

    # Ingestion
    ingest_concurrency: int = Field(
        default=1, ge=1, description="Documents ingested concurrently by batch calls (1 = strictly sequential)"
    )

    @model_validator(mode="after")
    def _check_redis_namespace(self) -> "Settings":
        if self.inverted_index_backend == "redis" and not self.redis_namespace.strip():
            raise ValueError("REDIS_NAMESPACE must not be empty when INVERTED_INDEX_BACKEND=redis")
        return self

    def uses_network_backends(self) -> bool:
        """Check whether any configured backend needs a network connection."""
        return self.document_store_backend != "memory" or self.inverted_index_backend != "memory"
