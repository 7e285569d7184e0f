"""Pinecone implementation of the vector-store abstraction."""

from __future__ import annotations

import logging
from typing import Any

from pinecone import Pinecone

from pdf_ingest.models import IndexEntry
from pdf_ingest.stores.base import VectorStoreWriter

logger = logging.getLogger(__name__)

# Metadata key holding the chunk text, as LangChain's Pinecone store expects.
TEXT_KEY = "text"


def to_pinecone_vector(entry: IndexEntry) -> dict[str, Any]:
    """Convert an entry into the ``{"id", "values", "metadata"}`` upsert shape."""
    metadata = entry.flat_metadata()
    metadata[TEXT_KEY] = entry.text
    return {"id": entry.id, "values": list(entry.vector), "metadata": metadata}


class PineconeVectorStore(VectorStoreWriter):
    """Pinecone-backed vector store.

    Parameters
    ----------
    index_name:
        Name of an existing Pinecone index.
    api_key:
        Pinecone API key.
    client:
        Pre-built ``Pinecone`` client; *api_key* is ignored when given.
    """

    def __init__(
        self,
        index_name: str,
        *,
        api_key: str = "",
        client: Pinecone | None = None,
    ) -> None:
        if not index_name:
            raise ValueError("Pinecone index name is not configured (PINECONE_INDEX_NAME)")
        super().__init__(index_name)
        if client is None:
            if not api_key:
                raise ValueError("Pinecone API key is not configured (PINECONE_API_KEY)")
            logger.debug("Initializing Pinecone client")
            client = Pinecone(api_key=api_key)
        self._client = client
        self._index = client.Index(index_name)

    # -- VectorStoreWriter overrides ------------------------------------------

    def upsert(self, entries: list[IndexEntry], *, namespace: str) -> int:
        if not entries:
            return 0
        self._index.upsert(
            vectors=[to_pinecone_vector(e) for e in entries],
            namespace=namespace,
        )
        return len(entries)

    def health_check(self) -> bool:
        try:
            self._index.describe_index_stats()
            return True
        except Exception:
            logger.warning("Pinecone health-check failed", exc_info=True)
            return False

    def delete_namespace(self, namespace: str) -> None:
        logger.info("Deleting all vectors in %s/%s", self.index_name, namespace)
        self._index.delete(delete_all=True, namespace=namespace)
