"""Shared pytest configuration and fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest
from langchain_core.embeddings import Embeddings

from pdf_ingest.config import Settings
from pdf_ingest.ingestion.loader import ParserRegistry, TextParser
from pdf_ingest.models import IndexEntry
from pdf_ingest.stores.base import VectorStoreWriter


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: marks tests requiring external services")


# ── Fakes for the external collaborators ────────────────────────────────


class FakeEmbeddings(Embeddings):
    """Deterministic 4-dim embeddings that record every call."""

    def __init__(self, fail_on_call: int | None = None) -> None:
        self.calls: list[list[str]] = []
        self._fail_on_call = fail_on_call

    def embed_documents(self, texts: list[str]) -> list[list[float]]:
        self.calls.append(list(texts))
        if self._fail_on_call is not None and len(self.calls) == self._fail_on_call:
            raise RuntimeError("embedding provider unavailable")
        return [[float(len(t)), float(len(t.split())), 1.0, 0.5] for t in texts]

    def embed_query(self, text: str) -> list[float]:
        return self.embed_documents([text])[0]


class InMemoryVectorStore(VectorStoreWriter):
    """Keeps upserted entries per namespace."""

    def __init__(self, fail_on_call: int | None = None, healthy: bool = True) -> None:
        super().__init__("test-index")
        self.healthy = healthy
        self.namespaces: dict[str, dict[str, IndexEntry]] = {}
        self.upsert_calls = 0
        self.deleted: list[str] = []
        self._fail_on_call = fail_on_call

    def upsert(self, entries: list[IndexEntry], *, namespace: str) -> int:
        self.upsert_calls += 1
        if self._fail_on_call is not None and self.upsert_calls == self._fail_on_call:
            raise ConnectionError("vector store unreachable")
        bucket = self.namespaces.setdefault(namespace, {})
        for entry in entries:
            bucket[entry.id] = entry
        return len(entries)

    def health_check(self) -> bool:
        return self.healthy

    def delete_namespace(self, namespace: str) -> None:
        self.deleted.append(namespace)
        self.namespaces.pop(namespace, None)

    def entries(self, namespace: str) -> list[IndexEntry]:
        return list(self.namespaces.get(namespace, {}).values())


# ── Fixtures ────────────────────────────────────────────────────────────


@pytest.fixture()
def fake_embeddings() -> FakeEmbeddings:
    return FakeEmbeddings()


@pytest.fixture()
def memory_store() -> InMemoryVectorStore:
    return InMemoryVectorStore()


@pytest.fixture()
def text_registry() -> ParserRegistry:
    """Registry loading plain-text files, so tests need no real PDFs."""
    return ParserRegistry({".txt": TextParser()})


@pytest.fixture()
def docs_dir(tmp_path: Path) -> Path:
    path = tmp_path / "docs"
    path.mkdir()
    return path


@pytest.fixture()
def make_settings(docs_dir: Path):
    def _make(**overrides) -> Settings:
        values = {
            "docs_dir": str(docs_dir),
            "pinecone_index_name": "test-index",
            "pinecone_namespace": "",
            "chunk_size": 1000,
            "chunk_overlap": 200,
        }
        values.update(overrides)
        return Settings(**values)

    return _make


def _sample_text(min_chars: int) -> str:
    """Paragraphs of numbered sentences; every long substring is unique."""
    paragraphs: list[str] = []
    i = 0
    while sum(len(p) + 2 for p in paragraphs) < min_chars:
        sentences = [f"Sentence {i + j} describes item number {i + j} in detail." for j in range(5)]
        paragraphs.append(" ".join(sentences))
        i += 5
    return "\n\n".join(paragraphs)


@pytest.fixture()
def sample_text():
    return _sample_text
