"""Unit tests for settings, domain models and embedding provider selection."""

from __future__ import annotations

from unittest.mock import patch

import pytest
from pydantic import ValidationError

from pdf_ingest.config import Settings, get_settings
from pdf_ingest.errors import EmptyInputError, IngestError, LoadError
from pdf_ingest.ingestion.embedder import get_embedding_function
from pdf_ingest.models import DEFAULT_NAMESPACE, IndexEntry, IndexerConfig, IngestionResult


class TestSettings:
    def test_defaults(self) -> None:
        s = Settings(pinecone_namespace="")
        assert s.docs_dir == "docs"
        assert s.chunk_size == 1000
        assert s.chunk_overlap == 200
        assert s.namespace == DEFAULT_NAMESPACE

    def test_overlap_must_be_smaller_than_size(self) -> None:
        with pytest.raises(ValidationError, match="chunk_overlap"):
            Settings(chunk_size=100, chunk_overlap=100)

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PINECONE_NAMESPACE", "from-env")
        monkeypatch.setenv("CHUNK_SIZE", "500")
        s = Settings()
        assert s.namespace == "from-env"
        assert s.chunk_size == 500

    def test_log_level_is_validated(self) -> None:
        assert Settings(log_level="debug").log_level == "DEBUG"
        with pytest.raises(ValidationError):
            Settings(log_level="foo")

    def test_get_settings_reads_environment_lazily_and_caches(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        get_settings.cache_clear()
        monkeypatch.setenv("DOCS_DIR", "first")
        try:
            first = get_settings()
            monkeypatch.setenv("DOCS_DIR", "second")
            assert get_settings() is first
            assert first.docs_dir == "first"
        finally:
            get_settings.cache_clear()

    def test_index_name_follows_backend(self) -> None:
        assert Settings(pinecone_index_name="pc").index_name == "pc"
        assert Settings(vector_store="chroma", chroma_collection="ch").index_name == "ch"

    def test_indexer_config(self) -> None:
        cfg = Settings(
            pinecone_index_name="pc", pinecone_namespace="ns", upsert_batch_size=10
        ).indexer_config()
        assert cfg == IndexerConfig(index_name="pc", namespace="ns", upsert_batch_size=10)


class TestModels:
    def test_indexer_config_namespace_fallback(self) -> None:
        assert IndexerConfig(namespace="").namespace == DEFAULT_NAMESPACE
        assert IndexerConfig(namespace=None).namespace == DEFAULT_NAMESPACE
        assert IndexerConfig(namespace="x").namespace == "x"

    def test_index_entry_requires_vector(self) -> None:
        with pytest.raises(ValidationError):
            IndexEntry(vector=[], text="t")

    def test_index_entry_is_frozen(self) -> None:
        entry = IndexEntry(vector=[1.0], text="t", metadata={"source": "a.pdf"})
        with pytest.raises(ValidationError):
            entry.text = "changed"
        assert len(entry.id) == 32

    def test_ingestion_result_str(self) -> None:
        result = IngestionResult(
            documents_loaded=2,
            chunks_created=5,
            entries_upserted=5,
            index_name="idx",
            namespace="ns",
        )
        assert "Ingested 5 chunks from 2 documents" in str(result)


class TestErrors:
    def test_hierarchy(self) -> None:
        assert issubclass(LoadError, IngestError)
        assert str(EmptyInputError()) == "No documents to ingest"
        assert LoadError("x").user_message == "Failed to ingest your data"


class TestEmbeddingFunction:
    def test_openai_provider(self) -> None:
        settings = Settings(embedding_provider="openai", openai_api_key="sk-test")
        with patch("langchain_openai.OpenAIEmbeddings") as cls:
            get_embedding_function(settings)
        cls.assert_called_once_with(model="text-embedding-ada-002", api_key="sk-test")

    def test_huggingface_provider(self) -> None:
        settings = Settings(
            embedding_provider="huggingface",
            embedding_model="sentence-transformers/all-MiniLM-L6-v2",
        )
        with patch("langchain_huggingface.HuggingFaceEmbeddings") as cls:
            get_embedding_function(settings)
        cls.assert_called_once_with(model_name="sentence-transformers/all-MiniLM-L6-v2")
