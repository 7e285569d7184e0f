"""Shared configuration loaded from environment / ``.env``."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings

from pdf_ingest.models import DEFAULT_NAMESPACE, IndexerConfig


class Settings(BaseSettings):
    """Run-wide settings, populated from env vars or .env file."""

    # Input
    docs_dir: str = Field(default="docs", description="Directory containing the source PDFs")
    recursive: bool = False

    # Chunking
    chunk_size: int = Field(default=1000, gt=0)
    chunk_overlap: int = Field(default=200, ge=0)

    # Embedding
    embedding_provider: Literal["openai", "huggingface"] = "openai"
    embedding_model: str = "text-embedding-ada-002"
    openai_api_key: str = Field(default="", description="OpenAI API key")
    embed_batch_size: int = Field(default=64, gt=0)

    # Vector store
    vector_store: Literal["pinecone", "chroma"] = "pinecone"
    pinecone_api_key: str = ""
    pinecone_index_name: str = ""
    pinecone_namespace: str = Field(
        default="",
        description=f"Target namespace. Empty means {DEFAULT_NAMESPACE!r}.",
    )
    chroma_host: str = "localhost"
    chroma_port: int = 8000
    chroma_collection: str = "pdf_ingest"
    upsert_batch_size: int = Field(default=100, gt=0)

    # Run behaviour
    clear_namespace: bool = False
    dry_run: bool = False
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value

    @model_validator(mode="after")
    def _check_overlap(self) -> Settings:
        if self.chunk_overlap >= self.chunk_size:
            raise ValueError(
                f"chunk_overlap ({self.chunk_overlap}) must be < chunk_size ({self.chunk_size})"
            )
        return self

    @property
    def index_name(self) -> str:
        """Destination index identifier for the selected backend."""
        if self.vector_store == "chroma":
            return self.chroma_collection
        return self.pinecone_index_name

    @property
    def namespace(self) -> str:
        return self.pinecone_namespace or DEFAULT_NAMESPACE

    def indexer_config(self) -> IndexerConfig:
        """Build the explicit destination config handed to the indexer."""
        return IndexerConfig(
            index_name=self.index_name,
            namespace=self.namespace,
            embed_batch_size=self.embed_batch_size,
            upsert_batch_size=self.upsert_batch_size,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Settings built from the environment on first use, then cached."""
    return Settings()
