"""
Stores — write side of the vector databases the pipeline upserts into.

Public surface
--------------
- :class:`VectorStoreWriter` — abstract backend (subclass for new stores).
- :class:`PineconeVectorStore` — default Pinecone backend.
- :class:`ChromaVectorStore` — Chroma backend.
- :func:`build_vector_store` — pick a backend from settings.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pdf_ingest.stores.base import VectorStoreWriter

if TYPE_CHECKING:
    from pdf_ingest.config import Settings

__all__ = [
    "ChromaVectorStore",
    "PineconeVectorStore",
    "VectorStoreWriter",
    "build_vector_store",
]


def build_vector_store(settings: Settings) -> VectorStoreWriter:
    """Return the writer for ``settings.vector_store``."""
    if settings.vector_store == "pinecone":
        from pdf_ingest.stores.pinecone_store import PineconeVectorStore

        return PineconeVectorStore(
            settings.pinecone_index_name,
            api_key=settings.pinecone_api_key,
        )
    if settings.vector_store == "chroma":
        from pdf_ingest.stores.chroma_store import ChromaVectorStore

        return ChromaVectorStore(
            settings.chroma_collection,
            host=settings.chroma_host,
            port=settings.chroma_port,
        )
    raise ValueError(f"Unsupported vector_store: {settings.vector_store!r}")


def __getattr__(name: str):  # noqa: ANN001
    """Lazy-import backends to avoid pulling in their clients at import time."""
    if name == "PineconeVectorStore":
        from pdf_ingest.stores.pinecone_store import PineconeVectorStore

        return PineconeVectorStore
    if name == "ChromaVectorStore":
        from pdf_ingest.stores.chroma_store import ChromaVectorStore

        return ChromaVectorStore
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
